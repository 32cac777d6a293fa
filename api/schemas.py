"""Pydantic schemas for API requests and responses."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from casino.cards import Card, DealtCard
from casino.game import (
    BlackjackSnapshot,
    Pocket,
    RedDogSnapshot,
    RouletteSnapshot,
    SlotSnapshot,
)
from casino.ledger import HistoryEntry, Ledger
from casino.outcome import Outcome


class SessionResponse(BaseModel):
    """A newly created session."""

    session_id: str


# Shared schemas
class BetRequest(BaseModel):
    """Request to place a bet."""

    amount: int = Field(..., ge=1, description="Bet amount")


class CardResponse(BaseModel):
    """Card representation; hidden cards carry no rank or suit."""

    rank: str | None
    suit: str | None
    revealed: bool = True

    @classmethod
    def from_card(cls, card: Card | DealtCard | None) -> "CardResponse | None":
        if card is None:
            return None
        if isinstance(card, DealtCard):
            if not card.revealed:
                return cls(rank=None, suit=None, revealed=False)
            card = card.card
        return cls(rank=str(card.rank), suit=str(card.suit))


class OutcomeResponse(BaseModel):
    """Settlement of a round."""

    result: Literal["win", "loss", "push"]
    wager: int
    payout: int
    net_delta: int

    @classmethod
    def from_outcome(cls, outcome: Outcome | None) -> "OutcomeResponse | None":
        if outcome is None:
            return None
        return cls(
            result=outcome.result.name.lower(),
            wager=outcome.wager,
            payout=outcome.payout,
            net_delta=outcome.net_delta,
        )


# Wallet schemas
class HistoryEntryResponse(BaseModel):
    """One settled round."""

    game: str
    icon: str
    won: bool
    net_delta: int
    outcome: OutcomeResponse
    timestamp: datetime

    @classmethod
    def from_entry(cls, entry: HistoryEntry) -> "HistoryEntryResponse":
        return cls(
            game=entry.game.value,
            icon=entry.game.icon,
            won=entry.won,
            net_delta=entry.net_delta,
            outcome=OutcomeResponse.from_outcome(entry.outcome),
            timestamp=entry.timestamp,
        )


class WalletResponse(BaseModel):
    """Balance and recent history."""

    balance: int
    history: list[HistoryEntryResponse]

    @classmethod
    def from_ledger(cls, ledger: Ledger) -> "WalletResponse":
        return cls(
            balance=ledger.balance,
            history=[HistoryEntryResponse.from_entry(e) for e in ledger.history],
        )


class GameInfoResponse(BaseModel):
    """Lobby entry for a game."""

    key: str
    name: str
    icon: str
    description: str


# Blackjack schemas
class BlackjackResponse(BaseModel):
    """Blackjack table state."""

    state: str
    player_cards: list[CardResponse]
    dealer_cards: list[CardResponse]
    player_score: int
    dealer_score: int
    wager: int | None
    outcome: OutcomeResponse | None
    balance: int
    message: str
    recent_results: list[str]
    can_hit: bool
    can_stand: bool

    @classmethod
    def from_snapshot(cls, snap: BlackjackSnapshot) -> "BlackjackResponse":
        return cls(
            state=snap.state.name,
            player_cards=[CardResponse.from_card(c) for c in snap.player_cards],
            dealer_cards=[CardResponse.from_card(c) for c in snap.dealer_cards],
            player_score=snap.player_score,
            dealer_score=snap.dealer_score,
            wager=snap.wager,
            outcome=OutcomeResponse.from_outcome(snap.outcome),
            balance=snap.balance,
            message=snap.message,
            recent_results=list(snap.recent_results),
            can_hit=snap.can_hit,
            can_stand=snap.can_stand,
        )


# Red Dog schemas
class RedDogResponse(BaseModel):
    """Red Dog table state."""

    state: str
    low_card: CardResponse | None
    high_card: CardResponse | None
    third_card: CardResponse | None
    spread: int | None
    is_pair: bool
    wager: int | None
    outcome: OutcomeResponse | None
    balance: int
    message: str
    recent_results: list[str]
    can_draw: bool
    can_fold: bool

    @classmethod
    def from_snapshot(cls, snap: RedDogSnapshot) -> "RedDogResponse":
        return cls(
            state=snap.state.name,
            low_card=CardResponse.from_card(snap.low_card),
            high_card=CardResponse.from_card(snap.high_card),
            third_card=CardResponse.from_card(snap.third_card),
            spread=snap.spread,
            is_pair=snap.is_pair,
            wager=snap.wager,
            outcome=OutcomeResponse.from_outcome(snap.outcome),
            balance=snap.balance,
            message=snap.message,
            recent_results=list(snap.recent_results),
            can_draw=snap.can_draw,
            can_fold=snap.can_fold,
        )


# Roulette schemas
class RouletteBetRequest(BaseModel):
    """Request to spin the wheel."""

    bet_type: Literal[
        "straight", "red", "black", "even", "odd", "low", "high", "dozen1", "dozen2", "dozen3"
    ]
    amount: int = Field(..., ge=1)
    selected_number: int | None = Field(default=None, ge=0, le=36)


class SettleRequest(BaseModel):
    """Request to settle a pending spin."""

    spin_id: int


class PocketResponse(BaseModel):
    """A roulette pocket."""

    number: int
    color: str
    wheel_position: int

    @classmethod
    def from_pocket(cls, pocket: Pocket | None) -> "PocketResponse | None":
        if pocket is None:
            return None
        return cls(
            number=pocket.number,
            color=str(pocket.color),
            wheel_position=pocket.wheel_position,
        )


class SpinTicketResponse(BaseModel):
    """A spin waiting to be settled."""

    spin_id: int
    balance: int


class RouletteResponse(BaseModel):
    """Roulette table state."""

    state: str
    bet: str | None
    pocket: PocketResponse | None
    outcome: OutcomeResponse | None
    recent_pockets: list[PocketResponse]
    balance: int
    message: str
    recent_results: list[str]

    @classmethod
    def from_snapshot(cls, snap: RouletteSnapshot) -> "RouletteResponse":
        return cls(
            state=snap.state.name,
            bet=str(snap.bet) if snap.bet else None,
            pocket=PocketResponse.from_pocket(snap.pocket),
            outcome=OutcomeResponse.from_outcome(snap.outcome),
            recent_pockets=[PocketResponse.from_pocket(p) for p in snap.recent_pockets],
            balance=snap.balance,
            message=snap.message,
            recent_results=list(snap.recent_results),
        )


# Slot schemas
class SlotResponse(BaseModel):
    """Slot machine state."""

    reels: list[str]
    outcome: OutcomeResponse | None
    max_bet: bool
    balance: int
    message: str
    recent_results: list[str]

    @classmethod
    def from_snapshot(cls, snap: SlotSnapshot) -> "SlotResponse":
        return cls(
            reels=list(snap.reels),
            outcome=OutcomeResponse.from_outcome(snap.outcome),
            max_bet=snap.max_bet,
            balance=snap.balance,
            message=snap.message,
            recent_results=list(snap.recent_results),
        )
