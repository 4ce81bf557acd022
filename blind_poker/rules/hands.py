"""Hand validation and classification.

Hand categories (low to high):
- High card: no matching values, no straight
- Pair: one value twice
- Two pair: two different values twice each
- Three of a kind: one value three times
- Straight: five consecutive distinct values (Ace plays low: A-2-3-4-5)
- Full house: three of one value plus two of another
- Four of a kind: one value four times

Classification works on the sorted hand in a single pass, collecting
match groups and the longest consecutive run, and then maps that shape
to a category. A higher category always wins regardless of card values.
"""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Optional, Sequence, Tuple

from .cards import (
    Card,
    HAND_SIZE,
    MAX_COPIES,
    MIN_CARD_VALUE,
    MAX_CARD_VALUE,
    format_cards,
    get_value_counts,
    is_valid_card_value,
    sort_cards,
)

logger = logging.getLogger(__name__)


class HandCategory(IntEnum):
    """Poker hand categories ordered by strength."""

    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FULL_HOUSE = 5
    FOUR_OF_A_KIND = 6

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]


# Category labels for display
CATEGORY_LABELS = {
    HandCategory.HIGH_CARD: "High card",
    HandCategory.PAIR: "Pair",
    HandCategory.TWO_PAIR: "Two pair",
    HandCategory.THREE_OF_A_KIND: "Three of a kind",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.FULL_HOUSE: "Full house",
    HandCategory.FOUR_OF_A_KIND: "Four of a kind",
}


class InvalidHandError(ValueError):
    """Raised when raw input cannot form a legal five-card hand."""

    pass


class HandInvariantError(AssertionError):
    """Raised when a validated hand reaches a shape no category describes.

    This signals a defect in the engine, not bad input.
    """

    pass


@dataclass(frozen=True)
class MatchGroup:
    """All cards of one value that appear at least twice in a hand."""

    value: int
    count: int

    def __str__(self) -> str:
        return f"{self.count}x{Card(self.value)}"


@dataclass(frozen=True)
class Hand:
    """A validated hand: exactly five cards sorted ascending by value."""

    cards: Tuple[Card, ...]

    def __len__(self) -> int:
        return len(self.cards)

    def __str__(self) -> str:
        return format_cards(self.cards)

    @property
    def values(self) -> Tuple[int, ...]:
        return tuple(c.value for c in self.cards)


@dataclass(frozen=True)
class EvaluatedHand:
    """A classified hand.

    Attributes:
        cards: The hand's cards, sorted ascending by canonical value
        category: The hand category
        groups: Match groups in ascending value order
        straight_length: Longest run of consecutive values (1-5)
    """

    cards: Tuple[Card, ...]
    category: HandCategory
    groups: Tuple[MatchGroup, ...]
    straight_length: int

    def __str__(self) -> str:
        return f"{self.category.name}({format_cards(self.cards)})"

    @property
    def values(self) -> Tuple[int, ...]:
        return tuple(c.value for c in self.cards)


def check_hand(raw: Sequence[int]) -> Hand:
    """Validate raw card values and build a sorted hand.

    Args:
        raw: Sequence of card values

    Returns:
        Hand with cards sorted ascending

    Raises:
        InvalidHandError: If the hand does not have exactly 5 cards, holds a
            value outside [1, 13], or holds more than 4 copies of a value
    """
    try:
        values = list(raw)
    except TypeError:
        raise InvalidHandError(f"Hand must be a sequence of card values, got {raw!r}") from None

    if len(values) != HAND_SIZE:
        raise InvalidHandError(f"Hand must have {HAND_SIZE} cards, got {len(values)}")

    for value in values:
        if not is_valid_card_value(value):
            raise InvalidHandError(
                f"Card value {value!r} is outside [{MIN_CARD_VALUE}, {MAX_CARD_VALUE}]"
            )

    cards = sort_cards(Card(value=int(v)) for v in values)
    for value, count in get_value_counts(cards).items():
        if count > MAX_COPIES:
            raise InvalidHandError(
                f"Value {Card(value)} appears {count} times (max {MAX_COPIES})"
            )

    return Hand(cards=tuple(cards))


def validate_hand(raw: Sequence[int]) -> Optional[Hand]:
    """Validate raw card values.

    Returns:
        Hand sorted ascending if valid, None otherwise

    Note:
        This function returns None rather than raising, to make it easy
        to check if a hand is valid. Use check_hand() for the reason.
    """
    try:
        return check_hand(raw)
    except InvalidHandError as exc:
        logger.debug("Rejected hand %r: %s", raw, exc)
        return None


def is_valid_hand(raw: Sequence[int]) -> bool:
    return validate_hand(raw) is not None


def scan_hand(cards: Sequence[Card]) -> Tuple[Tuple[MatchGroup, ...], int]:
    """Collect match groups and the longest consecutive run.

    Assumes the cards are sorted ascending.

    Args:
        cards: Sorted cards

    Returns:
        (groups, straight_length)
    """
    counts: List[List[int]] = []  # [value, count] per group, in scan order
    run_length = 1
    straight_length = 1 if cards else 0
    previous: Optional[int] = None

    for card in cards:
        if previous is not None:
            if card.value == previous:
                if counts and counts[-1][0] == card.value:
                    counts[-1][1] += 1
                else:
                    counts.append([card.value, 2])
                run_length = 1
            elif card.value == previous + 1:
                run_length += 1
                straight_length = max(straight_length, run_length)
            else:
                run_length = 1
        previous = card.value

    groups = tuple(MatchGroup(value=v, count=c) for v, c in counts)
    return groups, straight_length


def categorize(groups: Sequence[MatchGroup], straight_length: int) -> HandCategory:
    """Map match groups and run length to a hand category.

    Raises:
        HandInvariantError: If the shape cannot come from a valid hand
    """
    if straight_length == HAND_SIZE:
        if groups:
            raise HandInvariantError(f"Straight with match groups: {list(groups)}")
        return HandCategory.STRAIGHT

    if not groups:
        return HandCategory.HIGH_CARD

    if len(groups) == 1:
        count = groups[0].count
        if count == 2:
            return HandCategory.PAIR
        if count == 3:
            return HandCategory.THREE_OF_A_KIND
        if count == 4:
            return HandCategory.FOUR_OF_A_KIND

    if len(groups) == 2:
        total = groups[0].count + groups[1].count
        if total == 4:
            return HandCategory.TWO_PAIR
        if total == 5:
            return HandCategory.FULL_HOUSE

    raise HandInvariantError(f"No category for match groups {list(groups)}")


def classify(hand: Hand) -> EvaluatedHand:
    """Classify a validated hand."""
    groups, straight_length = scan_hand(hand.cards)
    category = categorize(groups, straight_length)
    return EvaluatedHand(
        cards=hand.cards,
        category=category,
        groups=groups,
        straight_length=straight_length,
    )


def evaluate_hand(raw: Sequence[int]) -> EvaluatedHand:
    """Validate and classify raw card values.

    Raises:
        InvalidHandError: If the hand is not valid
    """
    return classify(check_hand(raw))


def get_hand_categories() -> List[HandCategory]:
    """Get all hand categories, weakest first."""
    return list(HandCategory)


def describe_hand_categories() -> dict:
    """Get a description of each hand category.

    Returns:
        Dict mapping HandCategory to description string
    """
    return {
        HandCategory.HIGH_CARD: "No matches and no straight; Ace counts high",
        HandCategory.PAIR: "Two cards of the same value",
        HandCategory.TWO_PAIR: "Two different pairs",
        HandCategory.THREE_OF_A_KIND: "Three cards of the same value",
        HandCategory.STRAIGHT: "Five consecutive values (A-2-3-4-5 lowest)",
        HandCategory.FULL_HOUSE: "Three of a kind plus a pair",
        HandCategory.FOUR_OF_A_KIND: "Four cards of the same value",
    }


def format_groups(groups: Iterable[MatchGroup]) -> str:
    return " ".join(str(g) for g in groups) or "-"
