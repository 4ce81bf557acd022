"""Two-player hand comparison.

Result codes:
- -1: one or both hands failed validation
-  0: tie
-  1: player A wins
-  2: player B wins

Every call validates and classifies both hands from scratch; nothing is
kept between calls.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from blind_poker.rules.hands import (
    EvaluatedHand,
    InvalidHandError,
    check_hand,
    classify,
)
from blind_poker.rules.tiebreak import Outcome, break_tie

logger = logging.getLogger(__name__)

RESULT_INVALID = -1
RESULT_TIE = int(Outcome.TIE)
RESULT_PLAYER_A = int(Outcome.A_WINS)
RESULT_PLAYER_B = int(Outcome.B_WINS)

RESULT_NAMES = {
    RESULT_INVALID: "invalid",
    RESULT_TIE: "tie",
    RESULT_PLAYER_A: "player_a",
    RESULT_PLAYER_B: "player_b",
}


@dataclass(frozen=True)
class Showdown:
    """Full outcome of comparing two hands.

    Attributes:
        result: Result code (-1, 0, 1 or 2)
        hand_a: Player A's evaluated hand, None if the comparison was invalid
        hand_b: Player B's evaluated hand, None if the comparison was invalid
        error: Validation message when result is -1
        decided_by_category: True if the categories differed
    """

    result: int
    hand_a: Optional[EvaluatedHand] = None
    hand_b: Optional[EvaluatedHand] = None
    error: Optional[str] = None
    decided_by_category: bool = False

    @property
    def is_valid(self) -> bool:
        return self.result != RESULT_INVALID

    @property
    def winner(self) -> str:
        return RESULT_NAMES[self.result]


def showdown(hand_a: Sequence[int], hand_b: Sequence[int]) -> Showdown:
    """Compare two raw hands and keep the evaluation details.

    Args:
        hand_a: Player A's five card values
        hand_b: Player B's five card values

    Returns:
        Showdown with the result code and both evaluated hands
    """
    try:
        valid_a = check_hand(hand_a)
        valid_b = check_hand(hand_b)
    except InvalidHandError as exc:
        logger.debug("Invalid showdown %r vs %r: %s", hand_a, hand_b, exc)
        return Showdown(result=RESULT_INVALID, error=str(exc))

    eval_a = classify(valid_a)
    eval_b = classify(valid_b)

    if eval_a.category != eval_b.category:
        result = RESULT_PLAYER_A if eval_a.category > eval_b.category else RESULT_PLAYER_B
        logger.debug("%s vs %s -> %d (category)", eval_a, eval_b, result)
        return Showdown(result=result, hand_a=eval_a, hand_b=eval_b, decided_by_category=True)

    result = int(break_tie(eval_a.category, eval_a, eval_b))
    logger.debug("%s vs %s -> %d (tie-break)", eval_a, eval_b, result)
    return Showdown(result=result, hand_a=eval_a, hand_b=eval_b)


def compare(hand_a: Sequence[int], hand_b: Sequence[int]) -> int:
    """Compare two five-card hands.

    Args:
        hand_a: Player A's five card values (1-13, Ace is 1)
        hand_b: Player B's five card values

    Returns:
        -1 if either hand is invalid, 0 for a tie, 1 if A wins, 2 if B wins
    """
    return showdown(hand_a, hand_b).result
