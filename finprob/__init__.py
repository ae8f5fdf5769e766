"""
Finite discrete probability spaces.

Outcome spaces, events, probability measures, random variables and the
sigma-algebras generated by event collections, together with named
distributions and simulation helpers that build on them.
"""

from finprob.errors import ClosureLimitError, FinProbError, OutOfRangeError, SizeMismatchError
from finprob.measure import DEFAULT_EPS, ProbabilityMeasure
from finprob.sigma_algebra import DEFAULT_MAX_ATOMS, SigmaAlgebra
from finprob.space import Event, OutcomeId, OutcomeSpace
from finprob.variable import DiscreteRandomVariable

__version__ = "1.0.0"

__all__ = [
    "ClosureLimitError",
    "DEFAULT_EPS",
    "DEFAULT_MAX_ATOMS",
    "DiscreteRandomVariable",
    "Event",
    "FinProbError",
    "OutOfRangeError",
    "OutcomeId",
    "OutcomeSpace",
    "ProbabilityMeasure",
    "SigmaAlgebra",
    "SizeMismatchError",
]
