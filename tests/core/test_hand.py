"""Tests for blackjack hand scoring."""

from hypothesis import given
from hypothesis import strategies as st

from casino.hand import Hand, score_cards
from tests.conftest import card_strategy, cards


def make_hand(*names: str, hidden: int | None = None) -> Hand:
    hand = Hand()
    for i, card in enumerate(cards(*names)):
        hand.add_card(card, revealed=i != hidden)
    return hand


class TestScore:
    """Tests for the ace-reduction scoring rule."""

    def test_ace_king_is_21(self):
        assert score_cards(cards("AS", "KH")) == 21

    def test_two_aces_and_nine(self):
        """11 + 11 + 9 = 31 reduces one ace to reach 21."""
        assert score_cards(cards("AS", "AH", "9C")) == 21

    def test_bust_without_aces(self):
        assert score_cards(cards("KS", "QH", "2C")) == 22

    def test_soft_hand_keeps_ace_high(self):
        assert score_cards(cards("AS", "6H")) == 17

    def test_ace_reduced_when_busting(self):
        assert score_cards(cards("AS", "6H", "KC")) == 17

    def test_all_aces_reduced(self):
        assert score_cards(cards("AS", "AH", "AD", "AC")) == 14

    def test_empty(self):
        assert score_cards([]) == 0

    @given(st.lists(card_strategy(), min_size=1, max_size=8))
    def test_score_never_exceeds_21_while_an_ace_is_still_high(self, hand_cards):
        score = score_cards(hand_cards)
        hard = sum(1 if c.is_ace else c.value for c in hand_cards)
        assert hard <= score
        assert score == hard or score <= 21


class TestHand:
    """Tests for the Hand class."""

    def test_natural(self):
        assert make_hand("AS", "KH").is_natural
        assert not make_hand("7S", "7H", "7C").is_natural

    def test_busted(self):
        assert make_hand("KS", "QH", "2C").is_busted
        assert not make_hand("KS", "AH").is_busted

    def test_visible_score_skips_hole_card(self):
        hand = make_hand("9C", "8D", hidden=1)
        assert hand.score == 17
        assert hand.visible_score == 9
        assert hand.has_hidden_card

    def test_reveal_all(self):
        hand = make_hand("9C", "8D", hidden=1)
        hand.reveal_all()
        assert hand.visible_score == 17
        assert not hand.has_hidden_card

    def test_str(self):
        assert str(make_hand("9C", "8D", hidden=1)) == "9♣ ?? (9)"
        assert "BUST" in str(make_hand("KS", "QH", "2C"))

    def test_clear(self):
        hand = make_hand("9C", "8D")
        hand.clear()
        assert len(hand) == 0
