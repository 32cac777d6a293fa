"""Game types and round outcomes."""

from dataclasses import dataclass
from enum import Enum, auto


class GameType(Enum):
    """Games offered in the lobby."""

    SLOTS = "Slot Machine"
    BLACKJACK = "Blackjack"
    RED_DOG = "Red Dog"
    ROULETTE = "Roulette"

    def __str__(self) -> str:
        return self.value

    @property
    def icon(self) -> str:
        return {
            GameType.SLOTS: "🎰",
            GameType.BLACKJACK: "🃏",
            GameType.RED_DOG: "🐕",
            GameType.ROULETTE: "🎲",
        }[self]

    @property
    def description(self) -> str:
        return {
            GameType.SLOTS: "Spin to match symbols and win big!",
            GameType.BLACKJACK: "Reach 21 without going over",
            GameType.RED_DOG: "Bet the third card lands between the first two",
            GameType.ROULETTE: "Place your bets and spin the wheel",
        }[self]


class RoundResult(Enum):
    """How a settled round ended for the player."""

    WIN = auto()
    LOSS = auto()
    PUSH = auto()

    def __str__(self) -> str:
        return self.name.title()


@dataclass(frozen=True)
class Outcome:
    """
    Settlement of a single wager.

    ``payout`` is the total returned to the player, principal included,
    so a push pays back exactly the wager and a loss pays nothing.
    """

    result: RoundResult
    wager: int
    payout: int

    def __post_init__(self) -> None:
        if self.wager <= 0:
            raise ValueError("Wager must be positive")
        if self.payout < 0:
            raise ValueError("Payout cannot be negative")

    @property
    def net_delta(self) -> int:
        """Signed change to the balance over the whole round."""
        return self.payout - self.wager

    @property
    def won(self) -> bool:
        return self.result == RoundResult.WIN

    @classmethod
    def win(cls, wager: int, payout: int) -> "Outcome":
        return cls(RoundResult.WIN, wager, payout)

    @classmethod
    def loss(cls, wager: int) -> "Outcome":
        return cls(RoundResult.LOSS, wager, 0)

    @classmethod
    def push(cls, wager: int) -> "Outcome":
        return cls(RoundResult.PUSH, wager, wager)
