"""Blind Poker - five-card hand ranking without suits.

Compares two five-card hands (values 1-13) and reports the winner,
with a batched tensor evaluator, a CLI and a small HTTP API on top.
"""

__version__ = "0.1.0"
__author__ = "Blind Poker Team"

from blind_poker.engine.solver import compare, showdown

__all__ = ["__version__", "compare", "showdown"]
