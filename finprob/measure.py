"""
Probability measures over finite outcome spaces.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from finprob.errors import OutOfRangeError, SizeMismatchError
from finprob.space import Event, OutcomeId, OutcomeSpace

DEFAULT_EPS = 1e-9


class ProbabilityMeasure:
    """
    Atomic probabilities over an outcome space.

    Atoms default to zero and may be assigned one at a time, so the measure is
    allowed to be transiently invalid. Callers check `is_valid` before relying
    on `probability` or on expectations computed from it.

    The measure records the size of the space it was built against. If the
    space grows afterwards, operations combining the measure with events or
    with the live space raise `SizeMismatchError`.
    """

    def __init__(self, omega: OutcomeSpace) -> None:
        self.omega = omega
        self.size: int = int(omega.size)
        self._atoms = np.zeros(self.size, dtype=float)

    @classmethod
    def from_atoms(cls, omega: OutcomeSpace, atoms: Sequence[float]) -> "ProbabilityMeasure":
        """
        Build a measure with all atoms assigned at once.

        Raises:
            SizeMismatchError: If `atoms` does not have one entry per outcome.
        """
        values = np.asarray(atoms, dtype=float)
        if values.ndim != 1 or int(values.shape[0]) != int(omega.size):
            raise SizeMismatchError(
                f"Expected {omega.size} atomic probabilities, got {values.size}"
            )
        measure = cls(omega)
        measure._atoms = values.copy()
        return measure

    @classmethod
    def uniform(cls, omega: OutcomeSpace) -> "ProbabilityMeasure":
        n = int(omega.size)
        if n == 0:
            return cls(omega)
        return cls.from_atoms(omega, np.full(n, 1.0 / n))

    @property
    def atoms(self) -> np.ndarray:
        return self._atoms.copy()

    def set_atomic_probability(self, outcome_id: OutcomeId, p: float) -> None:
        """
        Assign P({outcome_id}) = p.

        Raises:
            OutOfRangeError: If `outcome_id` is outside the measure's universe.
        """
        i = int(outcome_id)
        if not 0 <= i < self.size:
            raise OutOfRangeError(
                f"Outcome id {i} out of range for measure of size {self.size}"
            )
        self._atoms[i] = float(p)

    def get_atomic_probability(self, outcome_id: OutcomeId) -> float:
        i = int(outcome_id)
        if not 0 <= i < self.size:
            return 0.0
        return float(self._atoms[i])

    def is_valid(self, eps: float = DEFAULT_EPS) -> bool:
        """
        Return True iff all atoms are non-negative and they sum to 1 within `eps`.
        """
        if np.any(self._atoms < 0.0):
            return False
        return bool(abs(float(np.sum(self._atoms)) - 1.0) < float(eps))

    def probability(self, event: Event) -> float:
        """
        Sum of atoms over the outcomes of `event`.

        Raises:
            SizeMismatchError: If the event or the live outcome space no longer
                matches the size this measure was built against.
        """
        self.check_current()
        if event.size != self.size:
            raise SizeMismatchError(
                f"Event of size {event.size} used with measure of size {self.size}"
            )
        return float(np.sum(self._atoms[event.as_array()]))

    def check_current(self) -> None:
        """Raise `SizeMismatchError` if the outcome space has grown since construction."""
        if int(self.omega.size) != self.size:
            raise SizeMismatchError(
                f"Outcome space has grown from {self.size} to {self.omega.size} "
                "outcomes since this measure was built"
            )

    def __repr__(self) -> str:
        return f"ProbabilityMeasure(atoms={self._atoms.tolist()!r})"
