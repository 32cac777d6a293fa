"""Hand evaluation for blackjack."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from casino.cards import Card, DealtCard

BLACKJACK = 21


def score_cards(cards: Iterable[Card]) -> int:
    """
    Calculate the best blackjack total for ``cards``.

    Aces count 11; while the total is over 21, one ace at a time is
    reduced to 1.
    """
    total = 0
    aces = 0

    for card in cards:
        if card.is_ace:
            aces += 1
        total += card.value

    # Reduce aces from 11 to 1 as needed
    while total > BLACKJACK and aces > 0:
        total -= 10
        aces -= 1

    return total


@dataclass
class Hand:
    """An ordered blackjack hand."""

    cards: list[DealtCard] = field(default_factory=list)

    def add_card(self, card: Card, revealed: bool = True) -> DealtCard:
        """Add a card to the hand."""
        dealt = DealtCard(card, revealed)
        self.cards.append(dealt)
        return dealt

    def reveal_all(self) -> None:
        """Turn every face-down card up."""
        self.cards = [c.reveal() for c in self.cards]

    def clear(self) -> None:
        """Remove all cards from the hand."""
        self.cards.clear()

    @property
    def score(self) -> int:
        """Total over every card, face down or not."""
        return score_cards(c.card for c in self.cards)

    @property
    def visible_score(self) -> int:
        """Total over the face-up cards only."""
        return score_cards(c.card for c in self.cards if c.revealed)

    @property
    def has_hidden_card(self) -> bool:
        return any(not c.revealed for c in self.cards)

    @property
    def is_natural(self) -> bool:
        """Check if the hand is a natural blackjack (21 with 2 cards)."""
        return len(self.cards) == 2 and self.score == BLACKJACK

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (value > 21)."""
        return self.score > BLACKJACK

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[DealtCard]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        if self.is_busted:
            return f"{cards_str} (BUST)"
        return f"{cards_str} ({self.visible_score})"
