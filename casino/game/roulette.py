"""Single-zero roulette with a two-phase spin."""

import itertools
from collections import deque
from dataclasses import dataclass
from enum import Enum, auto

from casino.errors import IllegalTransition
from casino.game.base import RoundEngine, guarded
from casino.game.events import EventType
from casino.outcome import GameType, Outcome

POCKET_COUNT = 37

RED_NUMBERS = frozenset(
    {1, 3, 5, 7, 9, 12, 14, 16, 18, 19, 21, 23, 25, 27, 30, 32, 34, 36}
)

# Physical pocket order on a European wheel, clockwise from zero
WHEEL_ORDER = (
    0, 32, 15, 19, 4, 21, 2, 25, 17, 34, 6, 27, 13, 36, 11, 30, 8, 23, 10,
    5, 24, 16, 33, 1, 20, 14, 31, 9, 22, 18, 29, 7, 28, 12, 35, 3, 26,
)


class PocketColor(Enum):
    GREEN = auto()
    RED = auto()
    BLACK = auto()

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True, slots=True)
class Pocket:
    """One of the 37 numbered pockets."""

    number: int

    def __post_init__(self) -> None:
        if not 0 <= self.number < POCKET_COUNT:
            raise ValueError(f"No pocket numbered {self.number}")

    @property
    def color(self) -> PocketColor:
        if self.number == 0:
            return PocketColor.GREEN
        if self.number in RED_NUMBERS:
            return PocketColor.RED
        return PocketColor.BLACK

    @property
    def is_even(self) -> bool:
        """Zero is neither even nor odd."""
        return self.number != 0 and self.number % 2 == 0

    @property
    def is_odd(self) -> bool:
        return self.number % 2 == 1

    @property
    def wheel_position(self) -> int:
        return WHEEL_ORDER.index(self.number)

    def __str__(self) -> str:
        return f"{self.number} {self.color}"


POCKETS = tuple(Pocket(n) for n in range(POCKET_COUNT))


def pocket(number: int) -> Pocket:
    """Look up a pocket by number."""
    if not 0 <= number < POCKET_COUNT:
        raise ValueError(f"No pocket numbered {number}")
    return POCKETS[number]


class BetType(Enum):
    """Bets offered on the layout, valued by their display label."""

    STRAIGHT = "Straight (Single Number)"
    RED = "Red"
    BLACK = "Black"
    EVEN = "Even"
    ODD = "Odd"
    LOW = "Low (1-18)"
    HIGH = "High (19-36)"
    DOZEN1 = "1st Dozen (1-12)"
    DOZEN2 = "2nd Dozen (13-24)"
    DOZEN3 = "3rd Dozen (25-36)"

    def __str__(self) -> str:
        return self.value

    @property
    def payout(self) -> int:
        """Winnings per coin, on top of the returned wager."""
        if self == BetType.STRAIGHT:
            return 35
        if self in (BetType.DOZEN1, BetType.DOZEN2, BetType.DOZEN3):
            return 2
        return 1

    @property
    def odds(self) -> str:
        return f"{self.payout}:1"

    def wins(self, pocket: Pocket, selected_number: int | None = None) -> bool:
        """Check if this bet wins on ``pocket``."""
        n = pocket.number
        if self == BetType.STRAIGHT:
            return selected_number is not None and n == selected_number
        if self == BetType.RED:
            return pocket.color == PocketColor.RED
        if self == BetType.BLACK:
            return pocket.color == PocketColor.BLACK
        if self == BetType.EVEN:
            return pocket.is_even
        if self == BetType.ODD:
            return pocket.is_odd
        if self == BetType.LOW:
            return 1 <= n <= 18
        if self == BetType.HIGH:
            return 19 <= n <= 36
        if self == BetType.DOZEN1:
            return 1 <= n <= 12
        if self == BetType.DOZEN2:
            return 13 <= n <= 24
        return 25 <= n <= 36


@dataclass(frozen=True)
class RouletteBet:
    """A wager on one bet type; straight bets name their number."""

    bet_type: BetType
    amount: int
    selected_number: int | None = None

    def __post_init__(self) -> None:
        if self.bet_type == BetType.STRAIGHT:
            if self.selected_number is None:
                raise ValueError("A straight bet needs a number")
            if not 0 <= self.selected_number < POCKET_COUNT:
                raise ValueError(f"No pocket numbered {self.selected_number}")
        elif self.selected_number is not None:
            raise ValueError(f"{self.bet_type} bets do not take a number")

    def __str__(self) -> str:
        if self.bet_type == BetType.STRAIGHT:
            return f"{self.amount} on {self.selected_number}"
        return f"{self.amount} on {self.bet_type}"


def resolve(bet: RouletteBet, landed: Pocket) -> Outcome:
    """Settle ``bet`` against the pocket the ball landed in."""
    if bet.bet_type.wins(landed, bet.selected_number):
        return Outcome.win(bet.amount, bet.amount * (bet.bet_type.payout + 1))
    return Outcome.loss(bet.amount)


@dataclass(frozen=True)
class SpinTicket:
    """Handle for a spin whose wager is taken but not yet settled."""

    spin_id: int
    bet: RouletteBet


class RouletteState(Enum):
    """
    Roulette spin states.

    Flow: AWAITING_BET → SPINNING → RESOLVED
    """

    AWAITING_BET = auto()
    SPINNING = auto()
    RESOLVED = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").lower()


@dataclass(frozen=True)
class RouletteSnapshot:
    """Published roulette table state."""

    state: RouletteState
    bet: RouletteBet | None
    pocket: Pocket | None
    outcome: Outcome | None
    recent_pockets: tuple[Pocket, ...]
    balance: int
    message: str
    recent_results: tuple[str, ...]

    @property
    def is_spinning(self) -> bool:
        return self.state == RouletteState.SPINNING


class RouletteGame(RoundEngine):
    """
    Roulette with deferred settlement.

    ``spin`` takes the wager and hands back a ticket; ``settle`` draws the
    pocket and pays out exactly once for that ticket. The wheel animation
    between the two calls belongs to the presentation layer.
    """

    GAME = GameType.ROULETTE
    STATE = RouletteState
    INITIAL = RouletteState.AWAITING_BET

    TRANSITIONS = [
        {"trigger": "start_spin", "source": "awaiting_bet", "dest": "spinning"},
        {"trigger": "ball_lands", "source": "spinning", "dest": "resolved"},
        {"trigger": "clear_table", "source": "resolved", "dest": "awaiting_bet"},
    ]

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.bet: RouletteBet | None = None
        self.pocket: Pocket | None = None
        self._pending: SpinTicket | None = None
        self._spin_ids = itertools.count(1)
        self._recent_pockets: deque[Pocket] = deque(maxlen=self.limits.max_recent_results)

    @property
    def pending(self) -> SpinTicket | None:
        """Return the spin awaiting settlement, if any."""
        return self._pending

    @property
    def recent_pockets(self) -> tuple[Pocket, ...]:
        """Return the last pockets, most recent first."""
        return tuple(self._recent_pockets)

    def current_state(self) -> RouletteSnapshot:
        return RouletteSnapshot(
            state=self.state,
            bet=self.bet,
            pocket=self.pocket,
            outcome=self.outcome,
            recent_pockets=self.recent_pockets,
            balance=self.ledger.balance,
            message=self.message,
            recent_results=self.recent_results,
        )

    @guarded
    def spin(self, bet: RouletteBet) -> SpinTicket:
        """
        Take the wager and start the wheel.

        Returns:
            A ticket to pass to :meth:`settle`, or ``Rejected``
        """
        self._require("spin", RouletteState.AWAITING_BET)
        self._check_wager(bet.amount)
        self._debit(bet.amount)

        self.bet = bet
        self.wager = bet.amount
        self.pocket = None
        self.outcome = None
        self._pending = SpinTicket(spin_id=next(self._spin_ids), bet=bet)
        self.message = "Wheel is spinning..."
        self.events.emit_new(
            EventType.WHEEL_SPINNING, bet=str(bet), spin_id=self._pending.spin_id
        )
        self.start_spin()
        return self._pending

    @guarded
    def settle(self, ticket: SpinTicket) -> RouletteSnapshot:
        """Draw the pocket for a pending spin and pay out."""
        self._require("settle", RouletteState.SPINNING)
        if ticket != self._pending:
            raise IllegalTransition("settle a stale spin", str(self.state))
        self._pending = None

        landed = pocket(self.source.draw_uniform(POCKET_COUNT))
        self.pocket = landed
        self._recent_pockets.appendleft(landed)
        self.events.emit_new(EventType.POCKET_DRAWN, pocket=landed.number, color=str(landed.color))

        outcome = resolve(ticket.bet, landed)
        self.outcome = outcome
        if outcome.won:
            self.message = f"{landed}! You win {outcome.payout} coins!"
        else:
            self.message = f"{landed}. You lose."
        self.ball_lands()
        self._settle(outcome)
        return self.current_state()

    def play(self, bet: RouletteBet) -> RouletteSnapshot:
        """Spin and settle in one call."""
        ticket = self.spin(bet)
        if not isinstance(ticket, SpinTicket):
            return ticket
        return self.settle(ticket)

    @guarded
    def new_round(self) -> RouletteSnapshot:
        """Clear the last result so a new bet can be taken."""
        self._require("start a new round", RouletteState.RESOLVED)
        self._clear()
        self.clear_table()
        return self.current_state()

    @guarded
    def reset(self) -> RouletteSnapshot:
        """Clear the table, the pocket history and the recent-results strip."""
        self._require("reset", RouletteState.AWAITING_BET, RouletteState.RESOLVED)
        self._clear()
        if self.state == RouletteState.RESOLVED:
            self.clear_table()
        self._recent_pockets.clear()
        self.clear_recent_results()
        return self.current_state()

    def _clear(self) -> None:
        self.bet = None
        self.pocket = None
        self.wager = None
        self.outcome = None
        self.message = "Place your bets"
        self.events.emit_new(EventType.ROUND_CLEARED)
