"""Blackjack round engine with state machine."""

from dataclasses import dataclass
from enum import Enum, auto

from config import TableLimits
from casino.cards import Card, DealtCard, Deck
from casino.errors import IllegalTransition
from casino.game.base import RoundEngine, guarded
from casino.game.events import EventType
from casino.hand import BLACKJACK, Hand
from casino.ledger import Ledger
from casino.outcome import GameType, Outcome
from casino.random_source import RandomSource


class BlackjackState(Enum):
    """
    Blackjack round states.

    Flow: AWAITING_BET → DEALING → PLAYER_TURN → DEALER_TURN → RESOLVED
    """

    AWAITING_BET = auto()
    DEALING = auto()
    PLAYER_TURN = auto()
    DEALER_TURN = auto()
    RESOLVED = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").lower()


@dataclass(frozen=True)
class BlackjackSnapshot:
    """Published blackjack table state."""

    state: BlackjackState
    player_cards: tuple[DealtCard, ...]
    dealer_cards: tuple[DealtCard, ...]
    player_score: int
    dealer_score: int
    wager: int | None
    outcome: Outcome | None
    balance: int
    message: str
    recent_results: tuple[str, ...]

    @property
    def can_hit(self) -> bool:
        return self.state == BlackjackState.PLAYER_TURN

    @property
    def can_stand(self) -> bool:
        return self.state == BlackjackState.PLAYER_TURN


class BlackjackGame(RoundEngine):
    """
    Single-hand blackjack against a dealer who stands on 17.

    The wager is debited when the bet is placed; wins pay 2x and pushes
    return the wager. A natural 21 skips the player's turn and pays like
    any other win.
    """

    GAME = GameType.BLACKJACK
    STATE = BlackjackState
    INITIAL = BlackjackState.AWAITING_BET

    TRANSITIONS = [
        {"trigger": "start_deal", "source": "awaiting_bet", "dest": "dealing"},
        {"trigger": "deal_complete", "source": "dealing", "dest": "player_turn"},
        {"trigger": "player_done", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "player_busts", "source": "player_turn", "dest": "resolved"},
        {"trigger": "dealer_done", "source": "dealer_turn", "dest": "resolved"},
        {"trigger": "clear_table", "source": "resolved", "dest": "awaiting_bet"},
    ]

    def __init__(
        self,
        ledger: Ledger,
        source: RandomSource | None = None,
        limits: TableLimits | None = None,
    ) -> None:
        super().__init__(ledger, source, limits)
        self.deck = Deck(self.source)
        self.player_hand = Hand()
        self.dealer_hand = Hand()

    def current_state(self) -> BlackjackSnapshot:
        return BlackjackSnapshot(
            state=self.state,
            player_cards=tuple(self.player_hand.cards),
            dealer_cards=tuple(self.dealer_hand.cards),
            player_score=self.player_hand.score,
            dealer_score=self.dealer_hand.visible_score,
            wager=self.wager,
            outcome=self.outcome,
            balance=self.ledger.balance,
            message=self.message,
            recent_results=self.recent_results,
        )

    @guarded
    def place_bet(self, amount: int) -> BlackjackSnapshot:
        """
        Debit the wager and deal two cards each, the dealer's second face down.

        Returns:
            The new snapshot, or ``Rejected`` with InvalidWager,
            InsufficientBalance or IllegalTransition
        """
        self._require("place a bet", BlackjackState.AWAITING_BET)
        amount = self._check_wager(amount)
        self._debit(amount)

        self.wager = amount
        self.outcome = None
        self.player_hand.clear()
        self.dealer_hand.clear()
        self.start_deal()

        # Deal: player, dealer, player, dealer (face down)
        self._deal_to(self.player_hand)
        self._deal_to(self.dealer_hand)
        self._deal_to(self.player_hand)
        self._deal_to(self.dealer_hand, revealed=False)

        self.events.emit_new(EventType.ROUND_STARTED, wager=amount)
        self.deal_complete()

        if self.player_hand.is_natural:
            self.events.emit_new(EventType.PLAYER_BLACKJACK)
            self.message = "Blackjack!"
            self.player_done()
            return self._play_dealer()

        self.message = "Your move"
        return self.current_state()

    @guarded
    def hit(self) -> BlackjackSnapshot:
        """Player takes another card; a bust ends the round, 21 stands."""
        self._require("hit", BlackjackState.PLAYER_TURN)
        stake = self._require_wager("hit")

        self._deal_to(self.player_hand)
        score = self.player_hand.score
        self.events.emit_new(EventType.PLAYER_HIT, hand_value=score)

        if score > BLACKJACK:
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_value=score)
            self._reveal_hole_card()
            self.message = "Bust! You lose."
            self.player_busts()
            return self._finish(Outcome.loss(stake))

        if score == BLACKJACK:
            return self._stand()

        return self.current_state()

    @guarded
    def stand(self) -> BlackjackSnapshot:
        """Player stands; the dealer plays out and the round settles."""
        self._require("stand", BlackjackState.PLAYER_TURN)
        self._require_wager("stand")
        return self._stand()

    @guarded
    def new_round(self) -> BlackjackSnapshot:
        """Clear the table for the next bet. The deck is kept."""
        self._require("start a new round", BlackjackState.RESOLVED)
        self._clear()
        self.clear_table()
        return self.current_state()

    @guarded
    def reset(self) -> BlackjackSnapshot:
        """Clear the table and the recent-results strip."""
        self._require("reset", BlackjackState.AWAITING_BET, BlackjackState.RESOLVED)
        self._clear()
        if self.state == BlackjackState.RESOLVED:
            self.clear_table()
        self.clear_recent_results()
        return self.current_state()

    def _require_wager(self, operation: str) -> int:
        if self.wager is None:
            raise IllegalTransition(f"{operation} without a wager", str(self.state))
        return self.wager

    def _clear(self) -> None:
        self.player_hand.clear()
        self.dealer_hand.clear()
        self.wager = None
        self.outcome = None
        self.message = "Place your bet!"
        self.events.emit_new(EventType.ROUND_CLEARED)

    def _draw(self) -> Card:
        reshuffles = self.deck.reshuffles
        card = self.deck.draw()
        if self.deck.reshuffles != reshuffles:
            self.events.emit_new(EventType.DECK_SHUFFLED)
        return card

    def _deal_to(self, hand: Hand, revealed: bool = True) -> None:
        dealt = hand.add_card(self._draw(), revealed)
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(dealt),
            hand="dealer" if hand is self.dealer_hand else "player",
        )

    def _reveal_hole_card(self) -> None:
        if self.dealer_hand.has_hidden_card:
            self.dealer_hand.reveal_all()
            self.events.emit_new(
                EventType.DEALER_REVEALS,
                card=str(self.dealer_hand.cards[-1]),
                hand_value=self.dealer_hand.score,
            )

    def _stand(self) -> BlackjackSnapshot:
        self.events.emit_new(EventType.PLAYER_STAND, hand_value=self.player_hand.score)
        self.player_done()
        return self._play_dealer()

    def _play_dealer(self) -> BlackjackSnapshot:
        """Reveal, draw to 17 and settle."""
        self._reveal_hole_card()

        while self.dealer_hand.score < self.limits.dealer_stands_on:
            self._deal_to(self.dealer_hand)
            self.events.emit_new(EventType.DEALER_HITS, hand_value=self.dealer_hand.score)

        dealer_score = self.dealer_hand.score
        player_score = self.player_hand.score
        stake = self._require_wager("settle")

        if dealer_score > BLACKJACK:
            self.events.emit_new(EventType.DEALER_BUSTS, hand_value=dealer_score)
        else:
            self.events.emit_new(EventType.DEALER_STANDS, hand_value=dealer_score)

        if dealer_score > BLACKJACK or player_score > dealer_score:
            outcome = Outcome.win(stake, stake * 2)
            self.message = "You win!"
        elif dealer_score > player_score:
            outcome = Outcome.loss(stake)
            self.message = "Dealer wins!"
        else:
            outcome = Outcome.push(stake)
            self.message = "Push (Tie)"

        self.dealer_done()
        return self._finish(outcome)

    def _finish(self, outcome: Outcome) -> BlackjackSnapshot:
        self.outcome = outcome
        self._settle(outcome)
        return self.current_state()
