"""Game engines and state management."""

from casino.game.base import Rejected, check_wager
from casino.game.blackjack import BlackjackGame, BlackjackSnapshot, BlackjackState
from casino.game.events import EventEmitter, EventType, GameEvent
from casino.game.red_dog import RedDogGame, RedDogSnapshot, RedDogState
from casino.game.roulette import (
    BetType,
    Pocket,
    PocketColor,
    RouletteBet,
    RouletteGame,
    RouletteSnapshot,
    RouletteState,
    SpinTicket,
)
from casino.game.slots import SlotMachine, SlotSnapshot

__all__ = [
    "BetType",
    "BlackjackGame",
    "BlackjackSnapshot",
    "BlackjackState",
    "EventEmitter",
    "EventType",
    "GameEvent",
    "Pocket",
    "PocketColor",
    "RedDogGame",
    "RedDogSnapshot",
    "RedDogState",
    "Rejected",
    "RouletteBet",
    "RouletteGame",
    "RouletteSnapshot",
    "RouletteState",
    "SlotMachine",
    "SlotSnapshot",
    "SpinTicket",
    "check_wager",
]
