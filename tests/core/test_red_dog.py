"""Tests for the Red Dog round engine."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from casino.errors import IllegalTransition, InvalidWager
from casino.game import EventType, RedDogGame, RedDogState, Rejected
from casino.game.red_dog import calculate_spread, is_between, payout_multiplier
from casino.ledger import Ledger
from casino.outcome import GameType, RoundResult
from casino.random_source import SeededRandomSource
from tests.conftest import cards, stacked_red_dog


class TestSpread:
    """Tests for the pure spread helpers."""

    @pytest.mark.parametrize(
        "low, high, spread",
        [
            ("5H", "9S", 3),
            ("5H", "6S", 0),
            ("5H", "7S", 1),
            ("2H", "AS", 11),
            ("KH", "AS", 0),
        ],
    )
    def test_calculate_spread(self, low, high, spread):
        assert calculate_spread(*cards(low, high)) == spread

    def test_pair_has_no_spread(self):
        assert calculate_spread(*cards("8H", "8S")) is None

    @pytest.mark.parametrize(
        "spread, multiplier", [(1, 5), (2, 4), (3, 2), (4, 1), (11, 1)]
    )
    def test_payout_multiplier(self, spread, multiplier):
        assert payout_multiplier(spread) == multiplier

    def test_zero_spread_has_no_payout(self):
        with pytest.raises(ValueError):
            payout_multiplier(0)

    def test_is_between_is_strict(self):
        low, high = cards("5H", "9S")
        assert is_between(cards("7C")[0], low, high)
        assert not is_between(cards("5C")[0], low, high)
        assert not is_between(cards("9C")[0], low, high)


class TestDeal:
    """Tests for the first two cards."""

    def test_spread_round(self, ledger):
        game = stacked_red_dog(ledger, "5H", "9S")
        snapshot = game.place_bet(10)

        assert snapshot.state == RedDogState.SPREAD_ROUND
        assert snapshot.spread == 3
        assert snapshot.balance == 990
        assert snapshot.message == "Spread: 3. Draw third card or fold."
        assert snapshot.can_draw and snapshot.can_fold

    def test_cards_sorted_by_rank(self, ledger):
        game = stacked_red_dog(ledger, "9S", "5H")
        snapshot = game.place_bet(10)

        assert str(snapshot.low_card) == "5♥"
        assert str(snapshot.high_card) == "9♠"

    def test_consecutive_ranks_refund(self, ledger):
        game = stacked_red_dog(ledger, "5H", "6S")
        events = []
        game.subscribe(events.append, EventType.BET_REFUNDED)
        snapshot = game.place_bet(10)

        assert snapshot.state == RedDogState.AWAITING_BET
        assert snapshot.spread == 0
        assert snapshot.wager is None
        assert snapshot.balance == 1000
        assert ledger.history == []
        assert snapshot.recent_results == ()
        assert len(events) == 1

    def test_pair_opens_subround(self, ledger):
        game = stacked_red_dog(ledger, "8H", "8S")
        snapshot = game.place_bet(10)

        assert snapshot.state == RedDogState.PAIR_SUBROUND
        assert snapshot.spread is None
        assert snapshot.is_pair
        assert snapshot.can_draw
        assert not snapshot.can_fold

    @given(seed=st.integers(min_value=0, max_value=100_000))
    @settings(max_examples=50)
    def test_dealt_cards_are_distinct(self, seed):
        game = RedDogGame(Ledger(), SeededRandomSource(seed))
        snapshot = game.place_bet(10)
        assert snapshot.low_card != snapshot.high_card
        assert snapshot.low_card.rank.index <= snapshot.high_card.rank.index
        if game.state in (RedDogState.SPREAD_ROUND, RedDogState.PAIR_SUBROUND):
            snapshot = game.draw_third()
            assert snapshot.third_card not in (snapshot.low_card, snapshot.high_card)


class TestThirdCard:
    """Tests for drawing the deciding card."""

    def test_card_between_pays_spread_odds(self, ledger):
        game = stacked_red_dog(ledger, "5H", "9S", "7C")
        game.place_bet(10)
        snapshot = game.draw_third()

        assert snapshot.state == RedDogState.RESOLVED
        assert str(snapshot.third_card) == "7♣"
        assert snapshot.outcome.payout == 20
        assert snapshot.balance == 1010
        assert snapshot.recent_results == ("W",)

    def test_spread_of_one_pays_five(self, ledger):
        game = stacked_red_dog(ledger, "5H", "7S", "6C")
        game.place_bet(10)
        snapshot = game.draw_third()

        assert snapshot.outcome.payout == 50
        assert snapshot.balance == 1040

    def test_wide_spread_win_breaks_even(self, ledger):
        game = stacked_red_dog(ledger, "2H", "AS", "7C")
        game.place_bet(10)
        snapshot = game.draw_third()

        assert snapshot.outcome.result == RoundResult.WIN
        assert snapshot.outcome.net_delta == 0
        assert snapshot.balance == 1000
        assert snapshot.recent_results == ("W",)

    @pytest.mark.parametrize("third", ["KC", "5C", "9C", "2C"])
    def test_card_outside_loses(self, ledger, third):
        game = stacked_red_dog(ledger, "5H", "9S", third)
        game.place_bet(10)
        snapshot = game.draw_third()

        assert snapshot.outcome.result == RoundResult.LOSS
        assert snapshot.balance == 990
        assert snapshot.message == "You lose! Card not in range."

    def test_three_of_a_kind_pays_eleven(self, ledger):
        game = stacked_red_dog(ledger, "8H", "8S", "8C")
        game.place_bet(10)
        snapshot = game.draw_third()

        assert snapshot.outcome.payout == 110
        assert snapshot.balance == 1100
        assert ledger.history[-1].game == GameType.RED_DOG

    def test_pair_without_match_loses(self, ledger):
        game = stacked_red_dog(ledger, "8H", "8S", "2C")
        game.place_bet(10)
        snapshot = game.draw_third()

        assert snapshot.outcome.result == RoundResult.LOSS
        assert snapshot.balance == 990

    def test_third_card_cannot_repeat_a_held_card(self, ledger):
        game = stacked_red_dog(ledger, "5H", "9S", "5H")
        game.place_bet(10)
        with pytest.raises(AssertionError):
            game.draw_third()


class TestFold:
    """Tests for folding a spread."""

    def test_fold_forfeits_without_history(self, ledger):
        game = stacked_red_dog(ledger, "5H", "9S")
        game.place_bet(10)
        snapshot = game.fold()

        assert snapshot.state == RedDogState.AWAITING_BET
        assert snapshot.balance == 990
        assert snapshot.low_card is None
        assert ledger.history == []
        assert snapshot.recent_results == ()

    def test_fold_not_allowed_on_pair(self, ledger):
        game = stacked_red_dog(ledger, "8H", "8S")
        game.place_bet(10)
        result = game.fold()

        assert isinstance(result, Rejected)
        assert isinstance(result.error, IllegalTransition)
        assert game.state == RedDogState.PAIR_SUBROUND


class TestRejections:
    """Tests for refused operations."""

    def test_draw_before_bet(self, red_dog):
        result = red_dog.draw_third()
        assert isinstance(result.error, IllegalTransition)
        assert result.snapshot.balance == 1000

    def test_invalid_wager(self, red_dog):
        result = red_dog.place_bet(25)
        assert isinstance(result.error, InvalidWager)
        assert red_dog.state == RedDogState.AWAITING_BET

    def test_new_round_requires_resolution(self, ledger):
        game = stacked_red_dog(ledger, "5H", "9S")
        game.place_bet(10)
        assert isinstance(game.new_round(), Rejected)

    def test_new_round_after_resolution(self, ledger):
        game = stacked_red_dog(ledger, "5H", "9S", "7C")
        game.place_bet(10)
        game.draw_third()
        snapshot = game.new_round()

        assert snapshot.state == RedDogState.AWAITING_BET
        assert snapshot.third_card is None
        assert snapshot.recent_results == ("W",)

    def test_draw_without_cards_is_refused(self, ledger):
        game = stacked_red_dog(ledger, "5H", "9S")
        game.place_bet(10)
        game.low_card = None
        result = game.draw_third()

        assert isinstance(result, Rejected)
        assert isinstance(result.error, IllegalTransition)
        assert ledger.balance == 990
        assert game.state == RedDogState.SPREAD_ROUND
