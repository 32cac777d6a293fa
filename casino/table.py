"""One player's wallet together with an engine per game."""

from config import TableLimits, config
from casino.game import BlackjackGame, RedDogGame, RouletteGame, SlotMachine
from casino.ledger import Ledger
from casino.outcome import GameType
from casino.random_source import PseudoRandomSource, RandomSource


class CasinoTable:
    """
    The lobby: a shared ledger and one engine instance per game.

    All engines draw from the same random source, so seeding it replays a
    whole session.
    """

    def __init__(
        self,
        source: RandomSource | None = None,
        limits: TableLimits | None = None,
    ) -> None:
        self.limits = limits or config.limits
        self.source = source or PseudoRandomSource()
        self.ledger = Ledger(self.limits)
        self.slots = SlotMachine(self.ledger, self.source, self.limits)
        self.blackjack = BlackjackGame(self.ledger, self.source, self.limits)
        self.red_dog = RedDogGame(self.ledger, self.source, self.limits)
        self.roulette = RouletteGame(self.ledger, self.source, self.limits)

    def engine(self, game: GameType):
        """Return the engine for ``game``."""
        return {
            GameType.SLOTS: self.slots,
            GameType.BLACKJACK: self.blackjack,
            GameType.RED_DOG: self.red_dog,
            GameType.ROULETTE: self.roulette,
        }[game]

    def open_rounds(self) -> list[GameType]:
        """Return the games that still hold a wager."""
        return [game for game in GameType if self.engine(game).has_open_round]

    def reset(self) -> list[GameType]:
        """
        Restore the starting balance and clear every game.

        Nothing is reset while a game still holds a wager; the games that
        block the reset are returned instead.
        """
        busy = self.open_rounds()
        if busy:
            return busy
        for game in GameType:
            self.engine(game).reset()
        self.ledger.reset()
        return []
