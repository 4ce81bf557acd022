"""Tests for tie-breaking between hands of equal category."""

import pytest

from blind_poker.rules import (
    HandCategory,
    HandInvariantError,
    Outcome,
    TIE_BREAKERS,
    break_tie,
    evaluate_hand,
    kicker_walk,
    pack_value,
)


def _tie(raw_a, raw_b) -> Outcome:
    hand_a = evaluate_hand(raw_a)
    hand_b = evaluate_hand(raw_b)
    assert hand_a.category == hand_b.category
    return break_tie(hand_a.category, hand_a, hand_b)


class TestDispatch:
    """Every category has a tie-breaker."""

    def test_all_categories_covered(self):
        assert set(TIE_BREAKERS) == set(HandCategory)

    def test_mismatched_categories_rejected(self):
        pair = evaluate_hand([1, 3, 5, 7, 7])
        high = evaluate_hand([1, 3, 5, 7, 9])
        with pytest.raises(HandInvariantError):
            break_tie(HandCategory.PAIR, pair, high)

    @pytest.mark.parametrize(
        "raw",
        [
            [1, 3, 5, 7, 9],
            [1, 3, 5, 7, 7],
            [1, 3, 3, 7, 7],
            [1, 3, 7, 7, 7],
            [1, 2, 3, 4, 5],
            [1, 1, 9, 9, 9],
            [1, 1, 1, 1, 9],
        ],
    )
    def test_every_category_dispatches(self, raw):
        hand = evaluate_hand(raw)
        assert break_tie(hand.category, hand, hand) == Outcome.TIE

    def test_outcome_codes(self):
        assert int(Outcome.TIE) == 0
        assert int(Outcome.A_WINS) == 1
        assert int(Outcome.B_WINS) == 2


class TestKickerWalk:
    def test_top_card_decides(self):
        assert kicker_walk([1, 2, 3, 4, 9], [1, 2, 3, 4, 8]) == Outcome.A_WINS

    def test_lowest_card_decides(self):
        assert kicker_walk([2, 3, 5, 7, 9], [3, 4, 5, 7, 9]) == Outcome.B_WINS

    def test_all_equal(self):
        assert kicker_walk([2, 3, 5, 7, 9], [2, 3, 5, 7, 9]) == Outcome.TIE


class TestHighCard:
    """Ace counts high, then walk down through all five cards."""

    def test_ace_beats_nine(self):
        assert _tie([1, 3, 5, 7, 9], [2, 3, 5, 7, 9]) == Outcome.A_WINS

    def test_ace_beats_king(self):
        assert _tie([1, 2, 4, 6, 8], [13, 12, 10, 9, 7]) == Outcome.A_WINS

    def test_second_card_decides(self):
        assert _tie([1, 3, 5, 7, 9], [1, 3, 5, 8, 9]) == Outcome.B_WINS

    def test_smallest_card_decides(self):
        assert _tie([2, 3, 5, 7, 9], [3, 4, 5, 7, 9]) == Outcome.B_WINS
        assert _tie([3, 4, 6, 8, 10], [2, 4, 6, 8, 10]) == Outcome.A_WINS

    def test_identical(self):
        assert _tie([1, 3, 5, 7, 9], [9, 7, 5, 3, 1]) == Outcome.TIE


class TestStraight:
    def test_higher_top_card(self):
        assert _tie([3, 4, 5, 6, 7], [9, 10, 11, 12, 13]) == Outcome.B_WINS

    def test_wheel_is_lowest(self):
        assert _tie([1, 2, 3, 4, 5], [3, 4, 5, 6, 7]) == Outcome.B_WINS
        assert _tie([2, 3, 4, 5, 6], [1, 2, 3, 4, 5]) == Outcome.A_WINS

    def test_same_straight(self):
        assert _tie([1, 2, 3, 4, 5], [5, 4, 3, 2, 1]) == Outcome.TIE


class TestMatchedGroups:
    """Pair, two pair, three and four of a kind compare group values."""

    def test_pair(self):
        assert _tie([1, 3, 5, 7, 7], [1, 1, 5, 7, 9]) == Outcome.A_WINS

    def test_pair_ignores_kickers(self):
        assert _tie([2, 3, 4, 7, 7], [7, 7, 1, 12, 13]) == Outcome.TIE

    def test_two_pair_top(self):
        assert _tie([1, 3, 3, 7, 7], [1, 2, 2, 10, 10]) == Outcome.B_WINS

    def test_two_pair_second(self):
        assert _tie([4, 4, 9, 9, 2], [3, 3, 9, 9, 13]) == Outcome.A_WINS

    def test_two_pair_same(self):
        assert _tie([4, 4, 9, 9, 2], [4, 4, 9, 9, 13]) == Outcome.TIE

    def test_three_of_a_kind(self):
        assert _tie([1, 3, 7, 7, 7], [3, 3, 3, 7, 8]) == Outcome.A_WINS

    def test_aces_count_low_in_groups(self):
        assert _tie([1, 1, 1, 4, 5], [2, 2, 2, 4, 5]) == Outcome.B_WINS

    def test_four_of_a_kind(self):
        assert _tie([1, 1, 1, 1, 9], [5, 2, 2, 2, 2]) == Outcome.B_WINS
        assert _tie([8, 8, 8, 8, 2], [8, 8, 8, 8, 13]) == Outcome.TIE


class TestFullHouse:
    """Only the three-card pack is compared."""

    def test_pack_value(self):
        assert pack_value(evaluate_hand([1, 1, 9, 9, 9])) == 9
        assert pack_value(evaluate_hand([10, 10, 1, 1, 1])) == 1

    def test_higher_pack(self):
        assert _tie([1, 1, 9, 9, 9], [10, 10, 10, 9, 9]) == Outcome.B_WINS

    def test_pack_beats_higher_pair(self):
        assert _tie([1, 1, 9, 9, 9], [10, 10, 1, 1, 1]) == Outcome.A_WINS

    def test_pair_not_consulted(self):
        assert _tie([9, 9, 9, 2, 2], [9, 9, 9, 13, 13]) == Outcome.TIE
