"""Tests for Card, DealtCard and Deck classes."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from casino.cards import Card, DealtCard, Deck, Rank, Suit, full_deck
from casino.random_source import SeededRandomSource
from tests.conftest import StackedSource, cards


class TestCard:
    """Tests for the Card class."""

    def test_card_creation(self):
        """Test creating a card."""
        card = Card(Rank.ACE, Suit.SPADES)
        assert card.rank == Rank.ACE
        assert card.suit == Suit.SPADES

    def test_card_immutability(self):
        """Test that cards are immutable."""
        card = Card(Rank.ACE, Suit.SPADES)
        with pytest.raises(AttributeError):
            card.rank = Rank.KING

    def test_card_value(self):
        """Test card blackjack values."""
        assert Card(Rank.TWO, Suit.HEARTS).value == 2
        assert Card(Rank.TEN, Suit.HEARTS).value == 10
        assert Card(Rank.JACK, Suit.HEARTS).value == 10
        assert Card(Rank.QUEEN, Suit.HEARTS).value == 10
        assert Card(Rank.KING, Suit.HEARTS).value == 10
        assert Card(Rank.ACE, Suit.HEARTS).value == 11

    def test_rank_index_is_ace_high(self):
        """Red Dog indexes ranks from the deuce up to the ace."""
        assert Rank.TWO.index == 0
        assert Rank.FIVE.index == 3
        assert Rank.NINE.index == 7
        assert Rank.ACE.index == 12

    def test_card_from_string(self):
        """Test creating cards from strings."""
        assert Card.from_string("AS") == Card(Rank.ACE, Suit.SPADES)
        assert Card.from_string("2H") == Card(Rank.TWO, Suit.HEARTS)
        assert Card.from_string("10D") == Card(Rank.TEN, Suit.DIAMONDS)
        assert Card.from_string("KC") == Card(Rank.KING, Suit.CLUBS)
        assert Card.from_string("K♥") == Card(Rank.KING, Suit.HEARTS)

    def test_card_from_string_invalid(self):
        with pytest.raises(ValueError):
            Card.from_string("1S")
        with pytest.raises(ValueError):
            Card.from_string("AX")
        with pytest.raises(ValueError):
            Card.from_string("A")

    def test_card_str(self):
        """Test string representation."""
        assert str(Card(Rank.ACE, Suit.SPADES)) == "A♠"
        assert str(Card(Rank.TEN, Suit.HEARTS)) == "10♥"

    def test_red_suits(self):
        assert Suit.HEARTS.is_red
        assert Suit.DIAMONDS.is_red
        assert not Suit.SPADES.is_red
        assert not Suit.CLUBS.is_red


class TestDealtCard:
    """Tests for card visibility."""

    def test_face_down_hides_card(self):
        dealt = DealtCard(Card(Rank.KING, Suit.CLUBS), revealed=False)
        assert str(dealt) == "??"

    def test_reveal_returns_new_card(self):
        dealt = DealtCard(Card(Rank.KING, Suit.CLUBS), revealed=False)
        shown = dealt.reveal()
        assert shown.revealed
        assert not dealt.revealed
        assert str(shown) == "K♣"


class TestDeck:
    """Tests for the Deck class."""

    def test_full_deck_is_unique(self):
        assert len(set(full_deck())) == 52

    def test_deck_creation(self, deck):
        """Test creating a new deck."""
        assert len(deck) == 52
        assert len(set(deck)) == 52

    def test_deck_is_shuffled(self, deck):
        """A fresh deck is not in canonical order."""
        assert list(deck) != full_deck()

    def test_draw_removes_front_card(self):
        deck = Deck(StackedSource(deck=cards("AS", "KH")))
        assert deck.draw() == Card(Rank.ACE, Suit.SPADES)
        assert deck.draw() == Card(Rank.KING, Suit.HEARTS)
        assert len(deck) == 50

    def test_draw_all_yields_52_distinct(self, deck):
        """Drawing until empty yields every card exactly once."""
        drawn = [deck.draw() for _ in range(52)]
        assert len(deck) == 0
        assert len(set(drawn)) == 52

    def test_draw_from_empty_reshuffles(self, deck):
        """An exhausted deck rebuilds itself instead of failing."""
        for _ in range(52):
            deck.draw()
        card = deck.draw()
        assert isinstance(card, Card)
        assert len(deck) == 51
        assert deck.reshuffles == 1

    def test_reset_restores_full_deck(self, deck):
        """Test resetting deck."""
        deck.draw()
        deck.draw()
        assert len(deck) == 50

        deck.reset()
        assert len(deck) == 52
        assert len(set(deck)) == 52

    @given(seed=st.integers(min_value=0, max_value=10_000))
    @settings(max_examples=50)
    def test_reset_always_yields_52_distinct(self, seed):
        deck = Deck(SeededRandomSource(seed))
        for _ in range(seed % 60):
            deck.draw()
        deck.reset()
        assert len(deck) == 52
        assert {(c.rank, c.suit) for c in deck} == {(c.rank, c.suit) for c in full_deck()}
