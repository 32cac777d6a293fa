"""Red Dog (acey-deucey spread betting) round engine."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Collection

from casino.cards import Card, full_deck
from casino.errors import IllegalTransition
from casino.game.base import RoundEngine, guarded
from casino.game.events import EventType
from casino.outcome import GameType, Outcome

# Payout (principal included) per wagered coin, keyed by spread
SPREAD_PAYOUTS = {1: 5, 2: 4, 3: 2}
WIDE_SPREAD_PAYOUT = 1
THREE_OF_A_KIND_PAYOUT = 11


class RedDogState(Enum):
    """
    Red Dog round states.

    Flow: AWAITING_BET → TWO_CARDS_DEALT → (PAIR_SUBROUND | SPREAD_ROUND) → RESOLVED
    """

    AWAITING_BET = auto()
    TWO_CARDS_DEALT = auto()
    PAIR_SUBROUND = auto()
    SPREAD_ROUND = auto()
    RESOLVED = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").lower()


def calculate_spread(low: Card, high: Card) -> int | None:
    """
    Count the ranks strictly between two cards.

    Returns None for a pair, where the spread is undefined.
    """
    if low.rank == high.rank:
        return None
    return abs(high.rank.index - low.rank.index) - 1


def payout_multiplier(spread: int) -> int:
    """Return the total payout per wagered coin for a winning spread."""
    if spread < 1:
        raise ValueError("Only spreads of one or more can be played")
    return SPREAD_PAYOUTS.get(spread, WIDE_SPREAD_PAYOUT)


def is_between(card: Card, low: Card, high: Card) -> bool:
    """Check if ``card`` ranks strictly between ``low`` and ``high``."""
    return low.rank.index < card.rank.index < high.rank.index


@dataclass(frozen=True)
class RedDogSnapshot:
    """Published Red Dog table state."""

    state: RedDogState
    low_card: Card | None
    high_card: Card | None
    third_card: Card | None
    spread: int | None
    wager: int | None
    outcome: Outcome | None
    balance: int
    message: str
    recent_results: tuple[str, ...]

    @property
    def is_pair(self) -> bool:
        return self.state == RedDogState.PAIR_SUBROUND or (
            self.low_card is not None
            and self.high_card is not None
            and self.low_card.rank == self.high_card.rank
        )

    @property
    def can_draw(self) -> bool:
        return self.state in (RedDogState.SPREAD_ROUND, RedDogState.PAIR_SUBROUND)

    @property
    def can_fold(self) -> bool:
        return self.state == RedDogState.SPREAD_ROUND


class RedDogGame(RoundEngine):
    """
    Red Dog against the house.

    Two cards are dealt and sorted by rank. Consecutive ranks refund the
    wager; a pair plays for three of a kind at 11x; any other spread lets
    the player draw a third card or fold.
    """

    GAME = GameType.RED_DOG
    STATE = RedDogState
    INITIAL = RedDogState.AWAITING_BET

    TRANSITIONS = [
        {"trigger": "deal_two", "source": "awaiting_bet", "dest": "two_cards_dealt"},
        {"trigger": "open_pair", "source": "two_cards_dealt", "dest": "pair_subround"},
        {"trigger": "open_spread", "source": "two_cards_dealt", "dest": "spread_round"},
        {"trigger": "no_spread", "source": "two_cards_dealt", "dest": "awaiting_bet"},
        {
            "trigger": "reveal_third",
            "source": ["spread_round", "pair_subround"],
            "dest": "resolved",
        },
        {"trigger": "fold_hand", "source": "spread_round", "dest": "awaiting_bet"},
        {"trigger": "clear_table", "source": "resolved", "dest": "awaiting_bet"},
    ]

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.low_card: Card | None = None
        self.high_card: Card | None = None
        self.third_card: Card | None = None
        self.spread: int | None = None

    def current_state(self) -> RedDogSnapshot:
        return RedDogSnapshot(
            state=self.state,
            low_card=self.low_card,
            high_card=self.high_card,
            third_card=self.third_card,
            spread=self.spread,
            wager=self.wager,
            outcome=self.outcome,
            balance=self.ledger.balance,
            message=self.message,
            recent_results=self.recent_results,
        )

    def _draw_excluding(self, held: Collection[Card]) -> Card:
        """Draw uniformly among the 52 cards not already on the table."""
        card = self.source.choice([c for c in full_deck() if c not in held])
        self.events.emit_new(EventType.CARD_DEALT, card=str(card))
        return card

    @guarded
    def place_bet(self, amount: int) -> RedDogSnapshot:
        """
        Debit the wager and deal the first two cards.

        A pair opens the three-of-a-kind subround; consecutive ranks refund
        the wager and return straight to betting.
        """
        self._require("place a bet", RedDogState.AWAITING_BET)
        amount = self._check_wager(amount)
        self._debit(amount)

        self.wager = amount
        self.outcome = None
        self.third_card = None
        first = self._draw_excluding(())
        second = self._draw_excluding((first,))
        # Sort by rank; a pair keeps deal order
        if second.rank.index < first.rank.index:
            first, second = second, first
        self.low_card, self.high_card = first, second
        self.spread = calculate_spread(first, second)
        self.deal_two()

        if self.spread is None:
            self.events.emit_new(EventType.PAIR_DEALT, rank=str(first.rank))
            self.message = "Pair! Draw third card to see if you get three of a kind."
            self.open_pair()
        elif self.spread == 0:
            self.ledger.credit(amount)
            self.events.emit_new(
                EventType.BET_REFUNDED, amount=amount, balance=self.ledger.balance
            )
            self.message = "No spread! Consecutive ranks - try again."
            self.wager = None
            self.no_spread()
        else:
            self.events.emit_new(EventType.SPREAD_DEALT, spread=self.spread)
            self.message = f"Spread: {self.spread}. Draw third card or fold."
            self.open_spread()

        return self.current_state()

    @guarded
    def draw_third(self) -> RedDogSnapshot:
        """Draw the deciding card and settle the round."""
        self._require("draw a card", RedDogState.SPREAD_ROUND, RedDogState.PAIR_SUBROUND)
        low, high, wager = self.low_card, self.high_card, self.wager
        if low is None or high is None or wager is None:
            raise IllegalTransition("draw a card without a bet", str(self.state))

        card = self._draw_excluding((low, high))
        self.third_card = card
        self.events.emit_new(EventType.THIRD_CARD_DRAWN, card=str(card))

        if self.state == RedDogState.PAIR_SUBROUND:
            if card.rank == low.rank:
                outcome = Outcome.win(wager, wager * THREE_OF_A_KIND_PAYOUT)
                self.message = "Three of a kind! You win 11:1!"
            else:
                outcome = Outcome.loss(wager)
                self.message = "Not three of a kind. You lose."
        elif self.spread is not None and is_between(card, low, high):
            payout = wager * payout_multiplier(self.spread)
            outcome = Outcome.win(wager, payout)
            self.message = f"You win! Payout {payout} coins!"
        else:
            outcome = Outcome.loss(wager)
            self.message = "You lose! Card not in range."

        self.reveal_third()
        self.outcome = outcome
        self._settle(outcome)
        return self.current_state()

    @guarded
    def fold(self) -> RedDogSnapshot:
        """Give up the wager without drawing; nothing is recorded."""
        self._require("fold", RedDogState.SPREAD_ROUND)
        self.events.emit_new(EventType.PLAYER_FOLDS, forfeited=self.wager)
        self._clear()
        self.message = "You folded. Deal new cards."
        self.fold_hand()
        return self.current_state()

    @guarded
    def new_round(self) -> RedDogSnapshot:
        """Clear the table after a settled round."""
        self._require("start a new round", RedDogState.RESOLVED)
        self._clear()
        self.clear_table()
        return self.current_state()

    @guarded
    def reset(self) -> RedDogSnapshot:
        """Clear the table and the recent-results strip."""
        self._require("reset", RedDogState.AWAITING_BET, RedDogState.RESOLVED)
        self._clear()
        if self.state == RedDogState.RESOLVED:
            self.clear_table()
        self.clear_recent_results()
        return self.current_state()

    def _clear(self) -> None:
        self.low_card = self.high_card = self.third_card = None
        self.spread = None
        self.wager = None
        self.outcome = None
        self.message = "Place your bet!"
        self.events.emit_new(EventType.ROUND_CLEARED)
