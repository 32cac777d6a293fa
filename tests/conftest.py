"""Pytest fixtures for casino engine tests."""

from random import Random
from typing import Sequence, TypeVar

import pytest
from hypothesis import strategies as st

from config import TableLimits
from casino.cards import Card, Deck, Rank, Suit
from casino.game import BlackjackGame, RedDogGame, RouletteGame, SlotMachine
from casino.ledger import Ledger
from casino.random_source import PseudoRandomSource, RandomSource, SeededRandomSource
from casino.table import CasinoTable

T = TypeVar("T")


def cards(*names: str) -> list[Card]:
    """Build cards from short strings like 'AS', '10H', 'K♣'."""
    return [Card.from_string(name) for name in names]


class StackedSource(RandomSource):
    """
    Scripted random source.

    ``deck`` cards are moved to the front by the next shuffle, ``picks``
    are returned by ``choice`` in order, and ``numbers`` by ``draw_uniform``.
    """

    def __init__(
        self,
        deck: Sequence[Card] = (),
        picks: Sequence[object] = (),
        numbers: Sequence[int] = (),
    ) -> None:
        self.deck = list(deck)
        self.picks = list(picks)
        self.numbers = list(numbers)

    def shuffle(self, items: Sequence[T]) -> list[T]:
        items = list(items)
        top = [c for c in self.deck if c in items]
        self.deck = []
        return top + [c for c in items if c not in top]

    def draw_uniform(self, n: int) -> int:
        value = self.numbers.pop(0) if self.numbers else 0
        assert 0 <= value < n
        return value

    def choice(self, items: Sequence[T]) -> T:
        if self.picks:
            pick = self.picks.pop(0)
            assert pick in items, f"{pick} cannot be drawn here"
            return pick  # type: ignore[return-value]
        return items[0]


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def source(rng):
    """Pseudo-random source over the seeded generator."""
    return PseudoRandomSource(rng)


@pytest.fixture
def seeded():
    return SeededRandomSource(7)


@pytest.fixture
def limits():
    """Default table limits, independent of the environment."""
    return TableLimits(
        starting_balance=1000,
        max_history=20,
        max_recent_results=10,
        bet_min=10,
        bet_max=100,
        bet_step=10,
    )


@pytest.fixture
def small_limits():
    """Table limits with a 100 coin starting balance."""
    return TableLimits(
        starting_balance=100,
        max_history=20,
        max_recent_results=10,
        bet_min=10,
        bet_max=100,
        bet_step=10,
    )


@pytest.fixture
def ledger(limits):
    """A fresh wallet with 1000 coins."""
    return Ledger(limits)


@pytest.fixture
def deck(source):
    """A shuffled deck."""
    return Deck(source)


@pytest.fixture
def blackjack(ledger, source):
    """A blackjack table over a seeded source."""
    return BlackjackGame(ledger, source)


@pytest.fixture
def red_dog(ledger, source):
    """A Red Dog table over a seeded source."""
    return RedDogGame(ledger, source)


@pytest.fixture
def roulette(ledger, source):
    """A roulette wheel over a seeded source."""
    return RouletteGame(ledger, source)


@pytest.fixture
def slots(ledger, source):
    """A slot machine over a seeded source."""
    return SlotMachine(ledger, source)


@pytest.fixture
def table(source, limits):
    """A full lobby sharing one wallet."""
    return CasinoTable(source, limits)


def stacked_blackjack(ledger: Ledger, *names: str) -> BlackjackGame:
    """
    A blackjack table whose deck starts with the given cards.

    Cards are dealt player, dealer, player, dealer (hole card), then in
    order to whoever draws next.
    """
    return BlackjackGame(ledger, StackedSource(deck=cards(*names)))


def stacked_red_dog(ledger: Ledger, *names: str) -> RedDogGame:
    """A Red Dog table that deals the given cards in order."""
    return RedDogGame(ledger, StackedSource(picks=cards(*names)))


# Hypothesis strategies for property-based testing
@st.composite
def card_strategy(draw):
    """Generate a random card."""
    rank = draw(st.sampled_from(list(Rank)))
    suit = draw(st.sampled_from(list(Suit)))
    return Card(rank, suit)
