"""Card, DealtCard and Deck classes - immutable card representations."""

from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Iterator

from casino.random_source import PseudoRandomSource, RandomSource


class Suit(Enum):
    """Card suits."""

    SPADES = auto()
    HEARTS = auto()
    DIAMONDS = auto()
    CLUBS = auto()

    def __str__(self) -> str:
        symbols = {
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
        }
        return symbols[self]

    @property
    def is_red(self) -> bool:
        """Check if this suit is printed in red."""
        return self in (Suit.HEARTS, Suit.DIAMONDS)


class Rank(Enum):
    """Card ranks, ordered deuce low to ace high."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return {
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
            Rank.ACE: "A",
        }[self]

    @property
    def blackjack_value(self) -> int:
        """Return the blackjack point value (Ace = 11, face cards = 10)."""
        if self.value <= 10:
            return self.value
        if self == Rank.ACE:
            return 11
        return 10  # Face cards

    @property
    def index(self) -> int:
        """Return the Red Dog rank index (2 -> 0 ... A -> 12)."""
        return self.value - Rank.TWO.value

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        """Return the blackjack point value."""
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {str(rank): rank for rank in Rank}
        rank_map["T"] = Rank.TEN

        suit_map = {
            "C": Suit.CLUBS,
            "♣": Suit.CLUBS,
            "D": Suit.DIAMONDS,
            "♦": Suit.DIAMONDS,
            "H": Suit.HEARTS,
            "♥": Suit.HEARTS,
            "S": Suit.SPADES,
            "♠": Suit.SPADES,
        }

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])


def full_deck() -> list[Card]:
    """Return the 52 cards of a standard deck in canonical order."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


@dataclass(frozen=True, slots=True)
class DealtCard:
    """A card on the table together with its visibility."""

    card: Card
    revealed: bool = True

    def reveal(self) -> "DealtCard":
        return replace(self, revealed=True)

    def __str__(self) -> str:
        return str(self.card) if self.revealed else "??"


class Deck:
    """A standard 52-card deck that reshuffles itself when exhausted."""

    def __init__(self, source: RandomSource | None = None) -> None:
        """Initialize a new shuffled deck."""
        self._source = source or PseudoRandomSource()
        self._cards: list[Card] = []
        self.reshuffles = 0
        self.reset()

    def reset(self) -> None:
        """Rebuild the full 52 cards and shuffle them."""
        self._cards = self._source.shuffle(full_deck())

    def draw(self) -> Card:
        """
        Remove and return the front card.

        An empty deck is rebuilt and reshuffled before drawing, even in the
        middle of a round.
        """
        if not self._cards:
            self.reset()
            self.reshuffles += 1
        return self._cards.pop(0)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)
