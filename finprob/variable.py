"""
Discrete random variables on finite probability spaces.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Sequence

import numpy as np

from finprob.errors import SizeMismatchError
from finprob.measure import ProbabilityMeasure
from finprob.space import Event, OutcomeId, OutcomeSpace

if TYPE_CHECKING:
    from finprob.sigma_algebra import SigmaAlgebra


class DiscreteRandomVariable:
    """
    A real value per outcome, paired with a measure for expectations.

    Args:
        omega: Outcome space the variable is defined on.
        measure: Probability measure over `omega`.
        values: One value per outcome id. Extra trailing values are kept and
            reachable through `value`, but do not enter expectations.

    Raises:
        SizeMismatchError: If fewer values than outcomes are supplied, or the
            measure was built over a different number of outcomes.
    """

    def __init__(
        self,
        omega: OutcomeSpace,
        measure: ProbabilityMeasure,
        values: Sequence[float],
    ) -> None:
        self.omega = omega
        self.measure = measure
        self.size: int = int(omega.size)
        self._values = np.asarray(values, dtype=float).reshape(-1)
        if int(self._values.shape[0]) < self.size:
            raise SizeMismatchError(
                f"Expected at least {self.size} values, got {self._values.shape[0]}"
            )
        if measure.size != self.size:
            raise SizeMismatchError(
                f"Measure of size {measure.size} used with space of size {self.size}"
            )

    @property
    def values(self) -> np.ndarray:
        return self._values.copy()

    def value(self, outcome_id: OutcomeId) -> Optional[float]:
        """Return X(outcome_id), or None when the id has no value."""
        i = int(outcome_id)
        if not 0 <= i < int(self._values.shape[0]):
            return None
        return float(self._values[i])

    def _weights(self) -> np.ndarray:
        self.measure.check_current()
        if int(self.omega.size) != self.size:
            raise SizeMismatchError(
                f"Outcome space has grown from {self.size} to {self.omega.size} "
                "outcomes since this variable was built"
            )
        return np.array(
            [self.measure.get_atomic_probability(i) for i in range(self.size)],
            dtype=float,
        )

    def expected_value(self) -> float:
        """E[X] = sum of X(i) * P({i}) over all outcomes."""
        return float(np.dot(self._values[: self.size], self._weights()))

    def variance(self) -> float:
        """Var[X] = E[(X - E[X])^2] under the same measure."""
        weights = self._weights()
        x = self._values[: self.size]
        mean = float(np.dot(x, weights))
        return float(np.dot((x - mean) ** 2, weights))

    def preimage(self, value: float) -> Event:
        """Event {i : X(i) == value}."""
        return Event([float(v) == float(value) for v in self._values[: self.size]])

    def attained_values(self) -> List[float]:
        return sorted({float(v) for v in self._values[: self.size]})

    def is_measurable(self, algebra: "SigmaAlgebra") -> bool:
        """
        Return True iff every level set {X = v} belongs to `algebra`.

        On a finite space this is equivalent to measurability with respect to
        the algebra.
        """
        if algebra.size != self.size:
            return False
        return all(self.preimage(v) in algebra for v in self.attained_values())

    def __repr__(self) -> str:
        return f"DiscreteRandomVariable(values={self._values.tolist()!r})"
