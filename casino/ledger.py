"""Coin balance and bounded result history shared by every game."""

import threading
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime

from config import TableLimits, config
from casino.errors import InsufficientBalance
from casino.outcome import GameType, Outcome


@dataclass(frozen=True)
class HistoryEntry:
    """One settled round, as shown in the lobby history strip."""

    game: GameType
    outcome: Outcome
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def net_delta(self) -> int:
        return self.outcome.net_delta

    @property
    def won(self) -> bool:
        return self.outcome.won

    @property
    def marker(self) -> str:
        """Return "W" for a win, "L" otherwise."""
        return "W" if self.won else "L"


class Ledger:
    """
    The player's wallet.

    The balance never goes below zero: a debit larger than the balance is
    rejected whole. History keeps the most recent ``max_history`` entries in
    insertion order, evicting the oldest first. Mutations are serialised
    with a lock so handlers running on a worker pool cannot interleave.
    """

    def __init__(self, limits: TableLimits | None = None) -> None:
        self.limits = limits or config.limits
        self._lock = threading.RLock()
        self._balance = self.limits.starting_balance
        self._history: deque[HistoryEntry] = deque(maxlen=self.limits.max_history)

    @property
    def balance(self) -> int:
        """Return the current coin balance."""
        return self._balance

    @property
    def history(self) -> list[HistoryEntry]:
        """Return the retained results, oldest first."""
        with self._lock:
            return list(self._history)

    def debit(self, amount: int) -> int:
        """
        Take ``amount`` from the balance.

        Raises:
            InsufficientBalance: if ``amount`` exceeds the balance; the
                balance is left unchanged.
        """
        if amount < 0:
            raise ValueError("Cannot debit a negative amount")
        with self._lock:
            if amount > self._balance:
                raise InsufficientBalance(required=amount, available=self._balance)
            self._balance -= amount
            return self._balance

    def credit(self, amount: int) -> int:
        """Add ``amount`` to the balance."""
        if amount < 0:
            raise ValueError("Cannot credit a negative amount")
        with self._lock:
            self._balance += amount
            return self._balance

    def append_history(self, game: GameType, outcome: Outcome) -> HistoryEntry:
        """Record a settled round."""
        entry = HistoryEntry(game=game, outcome=outcome)
        with self._lock:
            self._history.append(entry)
        return entry

    def settle(self, game: GameType, outcome: Outcome) -> HistoryEntry:
        """Credit the payout and record the round in one step."""
        with self._lock:
            if outcome.payout:
                self.credit(outcome.payout)
            return self.append_history(game, outcome)

    def reset(self) -> None:
        """Restore the starting balance and clear the history."""
        with self._lock:
            self._balance = self.limits.starting_balance
            self._history.clear()

    def __repr__(self) -> str:
        return f"Ledger(balance={self._balance}, history={len(self._history)})"
