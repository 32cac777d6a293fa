"""Plumbing shared by every game engine."""

import functools
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, TypeVar

from transitions import Machine

from config import TableLimits
from casino.errors import CasinoError, IllegalTransition, InsufficientBalance, InvalidWager
from casino.game.events import EventEmitter, EventHandler, EventType
from casino.ledger import Ledger
from casino.outcome import GameType, Outcome, RoundResult
from casino.random_source import PseudoRandomSource, RandomSource

S = TypeVar("S")


@dataclass(frozen=True)
class Rejected(Generic[S]):
    """
    A rejected operation.

    Carries the error and the unchanged snapshot so the caller can keep
    rendering and retry with corrected input.
    """

    error: CasinoError
    snapshot: S

    ok = False

    @property
    def message(self) -> str:
        return str(self.error)


def check_wager(amount: Any, limits: TableLimits) -> int:
    """
    Validate a wager against the table bounds and bet step.

    Raises:
        InvalidWager: if the amount is not an integer on the betting slider
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidWager(amount, "wager must be a whole number of coins")
    if amount < limits.bet_min or amount > limits.bet_max:
        raise InvalidWager(
            amount, f"bet must be between {limits.bet_min} and {limits.bet_max}"
        )
    if (amount - limits.bet_min) % limits.bet_step:
        raise InvalidWager(amount, f"bet must be in steps of {limits.bet_step}")
    return amount


def guarded(method: Callable[..., Any]) -> Callable[..., Any]:
    """Turn a raised :class:`CasinoError` into a :class:`Rejected` result."""

    @functools.wraps(method)
    def wrapper(self: "GameEngine", *args: Any, **kwargs: Any) -> Any:
        try:
            return method(self, *args, **kwargs)
        except CasinoError as exc:
            return self._reject(exc)

    return wrapper


class GameEngine:
    """
    Base class for the four games.

    Holds the shared ledger, the injected random source, the event emitter
    and the per-game strip of recent results.
    """

    GAME: GameType

    def __init__(
        self,
        ledger: Ledger,
        source: RandomSource | None = None,
        limits: TableLimits | None = None,
    ) -> None:
        self.ledger = ledger
        self.limits = limits or ledger.limits
        self.source = source or PseudoRandomSource()
        self.events = EventEmitter(source=self.GAME.name.lower())
        self.message = "Place your bet!"
        self._recent: deque[str] = deque(maxlen=self.limits.max_recent_results)

    def subscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    @property
    def recent_results(self) -> tuple[str, ...]:
        """Return the last results as "W"/"L" markers, oldest first."""
        return tuple(self._recent)

    def current_state(self) -> Any:
        """Return a read-only snapshot for rendering."""
        raise NotImplementedError

    def _check_wager(self, amount: Any) -> int:
        return check_wager(amount, self.limits)

    def _debit(self, amount: int) -> None:
        self.ledger.debit(amount)
        self.events.emit_new(
            EventType.BET_PLACED, amount=amount, balance=self.ledger.balance
        )

    def _settle(self, outcome: Outcome) -> None:
        """Credit the payout, record the round and publish the result."""
        self.ledger.settle(self.GAME, outcome)

        if outcome.result == RoundResult.WIN:
            self._recent.append("W")
            self.events.emit_new(
                EventType.PLAYER_WINS, payout=outcome.payout, net=outcome.net_delta
            )
        elif outcome.result == RoundResult.LOSS:
            self._recent.append("L")
            self.events.emit_new(EventType.PLAYER_LOSES, amount=outcome.wager)
        else:
            self.events.emit_new(EventType.PUSH, amount=outcome.wager)

        self.events.emit_new(
            EventType.ROUND_ENDED,
            result=outcome.result.name,
            net=outcome.net_delta,
            balance=self.ledger.balance,
        )

    def _reject(self, error: CasinoError) -> Rejected:
        if isinstance(error, InsufficientBalance):
            event_type = EventType.INSUFFICIENT_FUNDS
        elif isinstance(error, InvalidWager):
            event_type = EventType.INVALID_WAGER
        else:
            event_type = EventType.INVALID_ACTION
        self.events.emit_new(event_type, message=str(error))
        self.message = str(error)
        return Rejected(error=error, snapshot=self.current_state())

    @property
    def has_open_round(self) -> bool:
        """Check if a wager has been taken but not yet settled."""
        return False

    def clear_recent_results(self) -> None:
        self._recent.clear()


class RoundEngine(GameEngine):
    """
    A game whose rounds run through a finite state machine.

    Subclasses declare ``STATE`` (an Enum), ``TRANSITIONS`` in the
    ``transitions`` library format, and the initial state.
    """

    STATE: type[Enum]
    TRANSITIONS: list[dict[str, str]]
    INITIAL: Enum

    def __init__(
        self,
        ledger: Ledger,
        source: RandomSource | None = None,
        limits: TableLimits | None = None,
    ) -> None:
        super().__init__(ledger, source, limits)
        self.wager: int | None = None
        self.outcome: Outcome | None = None

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=[s.name.lower() for s in self.STATE],
            transitions=self.TRANSITIONS,
            initial=self.INITIAL.name.lower(),
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> Enum:
        """Get current round state as enum."""
        return self.STATE[self._machine_state.upper()]  # type: ignore[attr-defined]

    @property
    def has_open_round(self) -> bool:
        return self._machine_state not in ("awaiting_bet", "resolved")

    def _require(self, operation: str, *states: Enum) -> None:
        if self.state not in states:
            raise IllegalTransition(operation, str(self.state))
