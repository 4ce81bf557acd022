"""Poker rules implementations.

This module provides:
- Card values and dealing helpers (cards.py)
- Hand validation and classification (hands.py)
- Tie-breaking for hands of equal category (tiebreak.py)
"""

from .cards import (
    Card,
    ACE,
    ACE_HIGH,
    HAND_SIZE,
    MAX_COPIES,
    MIN_CARD_VALUE,
    MAX_CARD_VALUE,
    VALUE_SYMBOLS,
    is_valid_card_value,
    get_value_counts,
    sort_cards,
    ace_high_view,
    make_cards_from_values,
    make_cards_from_string,
    format_cards,
    create_value_deck,
    deal_hand,
)

from .hands import (
    HandCategory,
    MatchGroup,
    Hand,
    EvaluatedHand,
    InvalidHandError,
    HandInvariantError,
    check_hand,
    validate_hand,
    is_valid_hand,
    scan_hand,
    categorize,
    classify,
    evaluate_hand,
    get_hand_categories,
    describe_hand_categories,
    CATEGORY_LABELS,
    format_groups,
)

from .tiebreak import (
    Outcome,
    TIE_BREAKERS,
    compare_values,
    kicker_walk,
    pack_value,
    break_tie,
)

__all__ = [
    # Cards
    "Card",
    "ACE",
    "ACE_HIGH",
    "HAND_SIZE",
    "MAX_COPIES",
    "MIN_CARD_VALUE",
    "MAX_CARD_VALUE",
    "VALUE_SYMBOLS",
    "is_valid_card_value",
    "get_value_counts",
    "sort_cards",
    "ace_high_view",
    "make_cards_from_values",
    "make_cards_from_string",
    "format_cards",
    "create_value_deck",
    "deal_hand",
    # Hands
    "HandCategory",
    "MatchGroup",
    "Hand",
    "EvaluatedHand",
    "InvalidHandError",
    "HandInvariantError",
    "check_hand",
    "validate_hand",
    "is_valid_hand",
    "scan_hand",
    "categorize",
    "classify",
    "evaluate_hand",
    "get_hand_categories",
    "describe_hand_categories",
    "CATEGORY_LABELS",
    "format_groups",
    # Tie-breaking
    "Outcome",
    "TIE_BREAKERS",
    "compare_values",
    "kicker_walk",
    "pack_value",
    "break_tie",
]
