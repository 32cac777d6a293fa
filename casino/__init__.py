"""Casino game engine - 100% UI-agnostic."""

from casino.cards import Card, DealtCard, Deck, Rank, Suit
from casino.errors import CasinoError, IllegalTransition, InsufficientBalance, InvalidWager
from casino.hand import Hand, score_cards
from casino.ledger import HistoryEntry, Ledger
from casino.outcome import GameType, Outcome, RoundResult
from casino.random_source import PseudoRandomSource, RandomSource, SeededRandomSource

__all__ = [
    "Card",
    "CasinoError",
    "DealtCard",
    "Deck",
    "GameType",
    "Hand",
    "HistoryEntry",
    "IllegalTransition",
    "InsufficientBalance",
    "InvalidWager",
    "Ledger",
    "Outcome",
    "PseudoRandomSource",
    "RandomSource",
    "Rank",
    "RoundResult",
    "SeededRandomSource",
    "Suit",
    "score_cards",
]
