"""
Error taxonomy for finite probability spaces.

Query operations are total and never raise (they return 0.0, False or None
for out-of-range input). The errors below are reserved for mutations and for
combining objects that were built over different universes.
"""

from __future__ import annotations


class FinProbError(ValueError):
    """Base error for misuse of probability-space objects."""


class SizeMismatchError(FinProbError):
    """Objects built over universes of different sizes were combined."""


class OutOfRangeError(FinProbError, IndexError):
    """An outcome id outside ``[0, size)`` was used in a mutation."""


class ClosureLimitError(FinProbError):
    """The generators induce too many atoms for explicit sigma-algebra generation."""
