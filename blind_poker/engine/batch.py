"""Batched hand comparison with PyTorch.

This module provides:
- Vectorised validation and classification of (N, 5) hand tensors
- Lexicographic tie-break keys that order equal-category hands
- Batched result codes matching blind_poker.engine.solver.compare

Key insight: instead of scanning each hand, one-hot value counts give
every match group at once, and the tie-break rules become a fixed-width
key per hand, so two hands compare by the first differing key column.
"""

from typing import Optional

import torch
import torch.nn.functional as F

from blind_poker.rules.cards import ACE, ACE_HIGH, HAND_SIZE, MAX_CARD_VALUE, MAX_COPIES
from blind_poker.rules.hands import HandCategory
from blind_poker.engine.solver import (
    RESULT_INVALID,
    RESULT_PLAYER_A,
    RESULT_PLAYER_B,
    RESULT_TIE,
)

# Counts are indexed by card value; column 0 is unused
NUM_VALUE_SLOTS = MAX_CARD_VALUE + 1


class TensorHandEvaluator:
    """Validate, classify and compare batches of hands on a torch device."""

    def __init__(self, device: Optional[torch.device] = None):
        self.device = device if device is not None else torch.device("cpu")
        self.value_slots = torch.arange(NUM_VALUE_SLOTS, dtype=torch.long, device=self.device)

    def as_hands(self, hands) -> torch.Tensor:
        """Convert nested lists, numpy arrays or tensors to an (N, 5) long tensor.

        Raises:
            ValueError: If the input is not an integer array of shape (N, 5)
        """
        tensor = torch.as_tensor(hands, device=self.device)
        if tensor.dtype == torch.bool or tensor.is_floating_point() or tensor.is_complex():
            raise ValueError(f"Hands must hold integer card values, got {tensor.dtype}")
        if tensor.dim() != 2 or tensor.shape[1] != HAND_SIZE:
            raise ValueError(f"Hands must have shape (N, {HAND_SIZE}), got {tuple(tensor.shape)}")
        return tensor.long()

    def value_counts(self, hands: torch.Tensor) -> torch.Tensor:
        """Count each value per hand: (N, 5) -> (N, 14).

        Out-of-range values are clamped into the table; callers mask them
        with validate().
        """
        clamped = hands.clamp(0, MAX_CARD_VALUE)
        return F.one_hot(clamped, num_classes=NUM_VALUE_SLOTS).sum(dim=1)

    def validate(self, hands) -> torch.Tensor:
        """Return a bool mask of valid hands."""
        hands = self.as_hands(hands)
        in_range = ((hands >= ACE) & (hands <= MAX_CARD_VALUE)).all(dim=1)
        counts = self.value_counts(hands)
        within_copies = counts[:, 1:].max(dim=1).values <= MAX_COPIES
        return in_range & within_copies

    def categorize(self, hands) -> torch.Tensor:
        """Return HandCategory ordinals per hand, -1 for invalid hands."""
        hands = self.as_hands(hands)
        counts = self.value_counts(hands)
        pairs = (counts == 2).sum(dim=1)
        has_three = (counts == 3).any(dim=1)
        has_four = (counts == 4).any(dim=1)

        ordered = hands.sort(dim=1).values
        distinct = (counts[:, 1:] > 0).sum(dim=1)
        straight = (distinct == HAND_SIZE) & (ordered[:, -1] - ordered[:, 0] == HAND_SIZE - 1)

        # Later fills take precedence
        category = torch.full_like(pairs, int(HandCategory.HIGH_CARD))
        category = category.masked_fill(pairs == 1, int(HandCategory.PAIR))
        category = category.masked_fill(pairs == 2, int(HandCategory.TWO_PAIR))
        category = category.masked_fill(has_three, int(HandCategory.THREE_OF_A_KIND))
        category = category.masked_fill(straight, int(HandCategory.STRAIGHT))
        category = category.masked_fill(has_three & (pairs == 1), int(HandCategory.FULL_HOUSE))
        category = category.masked_fill(has_four, int(HandCategory.FOUR_OF_A_KIND))
        return category.masked_fill(~self.validate(hands), RESULT_INVALID)

    def tiebreak_keys(self, hands) -> torch.Tensor:
        """Build (N, 5) keys; equal-category hands order lexicographically by key.

        - High card: Ace-high values, highest first
        - Straight: canonical values, highest first
        - Pair, two pair, three/four of a kind: group values, highest first
        - Full house: pack value only
        """
        hands = self.as_hands(hands)
        num_hands = hands.shape[0]
        category = self.categorize(hands)
        counts = self.value_counts(hands)

        canonical_desc = hands.sort(dim=1, descending=True).values
        promoted = hands.masked_fill(hands == ACE, ACE_HIGH)
        high_desc = promoted.sort(dim=1, descending=True).values

        slots = self.value_slots.unsqueeze(0).expand(num_hands, -1)
        no_slot = torch.zeros_like(slots)
        grouped = torch.where(counts >= 2, slots, no_slot)
        group_desc = grouped.sort(dim=1, descending=True).values[:, :HAND_SIZE]

        pack = torch.where(counts == 3, slots, no_slot).max(dim=1).values
        pack_key = torch.zeros_like(hands)
        pack_key[:, 0] = pack

        keys = torch.zeros_like(hands)
        keys = torch.where(_rows(category, HandCategory.HIGH_CARD), high_desc, keys)
        keys = torch.where(_rows(category, HandCategory.STRAIGHT), canonical_desc, keys)
        for matched in (
            HandCategory.PAIR,
            HandCategory.TWO_PAIR,
            HandCategory.THREE_OF_A_KIND,
            HandCategory.FOUR_OF_A_KIND,
        ):
            keys = torch.where(_rows(category, matched), group_desc, keys)
        keys = torch.where(_rows(category, HandCategory.FULL_HOUSE), pack_key, keys)
        return keys

    def compare(self, hands_a, hands_b) -> torch.Tensor:
        """Compare hands row by row.

        Args:
            hands_a: (N, 5) player A hands
            hands_b: (N, 5) player B hands

        Returns:
            (N,) long tensor of result codes: -1 invalid, 0 tie, 1 A wins, 2 B wins
        """
        hands_a = self.as_hands(hands_a)
        hands_b = self.as_hands(hands_b)
        if hands_a.shape[0] != hands_b.shape[0]:
            raise ValueError(
                f"Batch sizes differ: {hands_a.shape[0]} vs {hands_b.shape[0]}"
            )

        category_a = self.categorize(hands_a)
        category_b = self.categorize(hands_b)
        valid = (category_a >= 0) & (category_b >= 0)

        diff = self.tiebreak_keys(hands_a) - self.tiebreak_keys(hands_b)
        first = (diff != 0).long().argmax(dim=1, keepdim=True)
        decisive = diff.gather(1, first).squeeze(1)

        result = torch.full_like(decisive, RESULT_TIE)
        result = result.masked_fill(decisive > 0, RESULT_PLAYER_A)
        result = result.masked_fill(decisive < 0, RESULT_PLAYER_B)
        result = result.masked_fill(category_a > category_b, RESULT_PLAYER_A)
        result = result.masked_fill(category_a < category_b, RESULT_PLAYER_B)
        return result.masked_fill(~valid, RESULT_INVALID)


def _rows(category: torch.Tensor, target: HandCategory) -> torch.Tensor:
    return (category == int(target)).unsqueeze(1)
