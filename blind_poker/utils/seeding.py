"""Seeding utilities for reproducible deals.

All dealing draws from a NumPy Generator; nothing else in the project
consumes randomness.
"""

from typing import Optional

import numpy as np


def resolve_seed(seed: Optional[int] = None) -> int:
    """Return the given seed, or fresh OS entropy if None.

    The result can be logged and passed back to reproduce a run.
    """
    if seed is None:
        seed = int(np.random.SeedSequence().entropy)
    return seed


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create a NumPy generator for dealing hands.

    Example:
        >>> from blind_poker.utils.seeding import make_rng
        >>> rng = make_rng(42)
    """
    return np.random.default_rng(seed)
