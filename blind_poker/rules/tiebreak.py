"""Tie-breaking between two hands of the same category.

Kicker rules:
- High card: walk both hands from the top down, Ace counted high
- Straight: the same walk on canonical values (the Ace only ever closes
  the low end of A-2-3-4-5)
- Pair, two pair, three and four of a kind: compare group values from
  the highest group down
- Full house: compare the three-card pack only; the pair is not consulted
"""

from enum import IntEnum
from typing import Callable, Dict, List, Sequence

from .cards import ace_high_view
from .hands import EvaluatedHand, HandCategory, HandInvariantError


class Outcome(IntEnum):
    """Result of comparing two hands, numbered as the comparator reports it."""

    TIE = 0
    A_WINS = 1
    B_WINS = 2


def compare_values(a: int, b: int) -> Outcome:
    if a == b:
        return Outcome.TIE
    return Outcome.A_WINS if a > b else Outcome.B_WINS


def kicker_walk(values_a: Sequence[int], values_b: Sequence[int]) -> Outcome:
    """Compare two ascending value lists from the highest card down.

    The first unequal position decides; all positions equal is a tie.
    """
    for a, b in zip(reversed(values_a), reversed(values_b)):
        outcome = compare_values(a, b)
        if outcome != Outcome.TIE:
            return outcome
    return Outcome.TIE


def _high_card(hand_a: EvaluatedHand, hand_b: EvaluatedHand) -> Outcome:
    return kicker_walk(ace_high_view(hand_a.cards), ace_high_view(hand_b.cards))


def _straight(hand_a: EvaluatedHand, hand_b: EvaluatedHand) -> Outcome:
    return kicker_walk(hand_a.values, hand_b.values)


def _group_values(hand: EvaluatedHand) -> List[int]:
    return sorted((g.value for g in hand.groups), reverse=True)


def _matched_groups(hand_a: EvaluatedHand, hand_b: EvaluatedHand) -> Outcome:
    for a, b in zip(_group_values(hand_a), _group_values(hand_b)):
        outcome = compare_values(a, b)
        if outcome != Outcome.TIE:
            return outcome
    return Outcome.TIE


def pack_value(hand: EvaluatedHand) -> int:
    """Value of the largest group (the three-card pack of a full house)."""
    return max(hand.groups, key=lambda g: g.count).value


def _full_house(hand_a: EvaluatedHand, hand_b: EvaluatedHand) -> Outcome:
    return compare_values(pack_value(hand_a), pack_value(hand_b))


TIE_BREAKERS: Dict[HandCategory, Callable[[EvaluatedHand, EvaluatedHand], Outcome]] = {
    HandCategory.HIGH_CARD: _high_card,
    HandCategory.PAIR: _matched_groups,
    HandCategory.TWO_PAIR: _matched_groups,
    HandCategory.THREE_OF_A_KIND: _matched_groups,
    HandCategory.STRAIGHT: _straight,
    HandCategory.FULL_HOUSE: _full_house,
    HandCategory.FOUR_OF_A_KIND: _matched_groups,
}

_missing = set(HandCategory) - set(TIE_BREAKERS)
if _missing:
    raise HandInvariantError(f"No tie-breaker for {sorted(c.name for c in _missing)}")


def break_tie(category: HandCategory, hand_a: EvaluatedHand, hand_b: EvaluatedHand) -> Outcome:
    """Decide between two hands that share a category.

    Args:
        category: The category both hands belong to
        hand_a: First player's evaluated hand
        hand_b: Second player's evaluated hand

    Returns:
        Outcome.A_WINS, Outcome.B_WINS or Outcome.TIE

    Raises:
        HandInvariantError: If either hand is not of the given category
    """
    if hand_a.category != category or hand_b.category != category:
        raise HandInvariantError(
            f"break_tie({category.name}) called with {hand_a.category.name} "
            f"and {hand_b.category.name}"
        )
    return TIE_BREAKERS[category](hand_a, hand_b)
