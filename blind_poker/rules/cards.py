"""Card values and utilities.

Cards carry a value only (no suits): 1 (Ace) through 13 (King).

Value order for grouping and straights: A(1) < 2 < ... < Q < K
Value order for high-card comparison:   2 < ... < Q < K < A

This module provides:
- Value constants and symbols
- Card representation with an Ace-high comparison view
- Value counting and sorting helpers
- A 52-card value deck and dealing helpers
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

import numpy as np


ACE = 1
JACK = 11
QUEEN = 12
KING = 13
ACE_HIGH = 14  # Ace reinterpreted above the King

MIN_CARD_VALUE = ACE
MAX_CARD_VALUE = KING
HAND_SIZE = 5
MAX_COPIES = 4  # One deck holds four cards of each value

# Value symbols for display
VALUE_SYMBOLS = {
    1: "A",
    2: "2",
    3: "3",
    4: "4",
    5: "5",
    6: "6",
    7: "7",
    8: "8",
    9: "9",
    10: "10",
    11: "J",
    12: "Q",
    13: "K",
}

# Symbol to value mapping (for parsing)
SYMBOL_TO_VALUE = {v: k for k, v in VALUE_SYMBOLS.items()}
SYMBOL_TO_VALUE.update({"1": ACE, "11": JACK, "12": QUEEN, "13": KING, "T": 10})


@dataclass(frozen=True, order=True)
class Card:
    """A card identified by its value alone.

    Cards order by canonical value, so an Ace sorts lowest.
    Immutable and hashable.
    """

    value: int

    def __str__(self) -> str:
        return VALUE_SYMBOLS.get(self.value, str(self.value))

    def __repr__(self) -> str:
        return f"Card({self})"

    @property
    def is_ace(self) -> bool:
        return self.value == ACE

    @property
    def high_value(self) -> int:
        """Value with the Ace promoted above the King."""
        return ACE_HIGH if self.value == ACE else self.value

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from a symbol like 'A', '10', 'q' or '13'.

        Args:
            s: Card symbol

        Returns:
            Card object

        Raises:
            ValueError: If the symbol is not a card value
        """
        symbol = s.strip().upper()
        if symbol not in SYMBOL_TO_VALUE:
            raise ValueError(f"Invalid card: {s!r}")
        return cls(value=SYMBOL_TO_VALUE[symbol])


def is_valid_card_value(value: object) -> bool:
    """Check if a raw value is an integer card value in [1, 13]."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        return False
    return MIN_CARD_VALUE <= int(value) <= MAX_CARD_VALUE


def get_value_counts(cards: Iterable[Card]) -> Dict[int, int]:
    """Count occurrences of each value in a collection of cards.

    Args:
        cards: Card objects

    Returns:
        Dict mapping value to count
    """
    counts: Dict[int, int] = {}
    for card in cards:
        counts[card.value] = counts.get(card.value, 0) + 1
    return counts


def sort_cards(cards: Iterable[Card]) -> List[Card]:
    """Sort cards by canonical value, ascending."""
    return sorted(cards)


def ace_high_view(cards: Iterable[Card]) -> List[int]:
    """Return the cards' Ace-high values, sorted ascending.

    The cards themselves are left untouched.
    """
    return sorted(card.high_value for card in cards)


def make_cards_from_values(values: Iterable[int]) -> List[Card]:
    """Create cards from raw integer values."""
    return [Card(value=int(v)) for v in values]


def make_cards_from_string(s: str) -> List[Card]:
    """Parse cards from a string like "A 3 5 7 K" (commas allowed)."""
    return [Card.from_string(cs) for cs in s.replace(",", " ").split()]


def format_cards(cards: Iterable[Card]) -> str:
    return " ".join(str(c) for c in cards)


def create_value_deck() -> List[int]:
    """Create the 52 card values of a standard deck.

    Returns:
        List of 52 ints (13 values x 4 copies)
    """
    deck = []
    for value in range(MIN_CARD_VALUE, MAX_CARD_VALUE + 1):
        deck.extend([value] * MAX_COPIES)
    return deck


def deal_hand(rng: Optional[np.random.Generator] = None) -> List[int]:
    """Deal five values from a fresh deck.

    Dealing draws distinct deck positions, so the hand never holds
    more than four copies of a value.

    Args:
        rng: NumPy random generator (a fresh unseeded one if None)

    Returns:
        List of 5 card values, in deal order
    """
    if rng is None:
        rng = np.random.default_rng()
    deck = np.asarray(create_value_deck())
    picks = rng.choice(len(deck), size=HAND_SIZE, replace=False)
    return [int(v) for v in deck[picks]]
