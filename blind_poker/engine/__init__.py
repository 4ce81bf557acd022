"""Hand comparison engines.

This module provides:
- compare / showdown: compare two hands and report the result code
- Showdown: detailed comparison outcome
- TensorHandEvaluator: batched comparison on torch tensors
"""

from .solver import (
    Showdown,
    compare,
    showdown,
    RESULT_INVALID,
    RESULT_TIE,
    RESULT_PLAYER_A,
    RESULT_PLAYER_B,
    RESULT_NAMES,
)
from .batch import TensorHandEvaluator

__all__ = [
    "Showdown",
    "compare",
    "showdown",
    "RESULT_INVALID",
    "RESULT_TIE",
    "RESULT_PLAYER_A",
    "RESULT_PLAYER_B",
    "RESULT_NAMES",
    "TensorHandEvaluator",
]
