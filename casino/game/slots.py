"""Three-reel slot machine."""

from dataclasses import dataclass

from casino.game.base import GameEngine, guarded
from casino.game.events import EventType
from casino.outcome import GameType, Outcome

SYMBOLS = ("🍒", "🍋", "🍊", "🍉", "⭐", "7️⃣")
REEL_COUNT = 3


def is_jackpot(reels: tuple[str, ...]) -> bool:
    """All reels show the same symbol."""
    return len(set(reels)) == 1


@dataclass(frozen=True)
class SlotSnapshot:
    """Published slot machine state."""

    reels: tuple[str, ...]
    outcome: Outcome | None
    max_bet: bool
    balance: int
    message: str
    recent_results: tuple[str, ...]


class SlotMachine(GameEngine):
    """
    Independent uniform reels; three of a kind wins.

    A regular spin pays 5x the wager. The max-bet spin always costs a
    fixed 100 and pays a fixed 500, whatever the bet slider says.
    """

    GAME = GameType.SLOTS

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.reels: tuple[str, ...] = ("🍒",) * REEL_COUNT
        self.outcome: Outcome | None = None
        self.max_bet = False
        self.message = "Spin to win!"

    def current_state(self) -> SlotSnapshot:
        return SlotSnapshot(
            reels=self.reels,
            outcome=self.outcome,
            max_bet=self.max_bet,
            balance=self.ledger.balance,
            message=self.message,
            recent_results=self.recent_results,
        )

    @guarded
    def spin(self, amount: int) -> SlotSnapshot:
        """Spin for a slider wager."""
        amount = self._check_wager(amount)
        return self._spin(amount, amount * self.limits.slot_payout_multiplier, max_bet=False)

    @guarded
    def max_bet_spin(self) -> SlotSnapshot:
        """Spin at the fixed max-bet cost."""
        return self._spin(
            self.limits.slot_max_bet_cost, self.limits.slot_max_bet_payout, max_bet=True
        )

    def _spin(self, cost: int, reward: int, max_bet: bool) -> SlotSnapshot:
        self._debit(cost)
        self.max_bet = max_bet

        self.reels = tuple(self.source.choice(SYMBOLS) for _ in range(REEL_COUNT))
        self.events.emit_new(EventType.REELS_SPUN, reels=" ".join(self.reels))

        if is_jackpot(self.reels):
            self.outcome = Outcome.win(cost, reward)
            self.message = f"You won {reward} coins! 🎉"
        else:
            self.outcome = Outcome.loss(cost)
            self.message = "Try again!"
        self._settle(self.outcome)
        return self.current_state()

    def reset(self) -> SlotSnapshot:
        """Clear the last spin and the recent-results strip."""
        self.outcome = None
        self.max_bet = False
        self.message = "Spin to win!"
        self.clear_recent_results()
        self.events.emit_new(EventType.ROUND_CLEARED)
        return self.current_state()
