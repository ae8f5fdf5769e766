"""
Outcome universes and events.

An `OutcomeSpace` assigns dense integer ids to named outcomes. An `Event` is an
immutable membership mask over such a universe; its algebra (complement, union,
intersection) is what the sigma-algebra engine is built on.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple

import numpy as np

from finprob.errors import OutOfRangeError, SizeMismatchError

OutcomeId = int


class OutcomeSpace:
    """
    Finite, append-only universe of named outcomes.

    Ids are assigned at insertion time and are dense in ``[0, size)``. Names
    need not be unique; the id is the canonical identity of an outcome.
    """

    def __init__(self, outcomes: Iterable[str] = ()) -> None:
        self._names: List[str] = []
        for name in outcomes:
            self.add_outcome(name)

    def add_outcome(self, name: str) -> OutcomeId:
        """
        Append an outcome and return its id.

        Args:
            name: Display label of the outcome.

        Returns:
            The new outcome's id, equal to the previous size.
        """
        self._names.append(str(name))
        return len(self._names) - 1

    @property
    def size(self) -> int:
        return len(self._names)

    @property
    def outcomes(self) -> Tuple[str, ...]:
        return tuple(self._names)

    def name(self, outcome_id: OutcomeId) -> str:
        if not 0 <= int(outcome_id) < len(self._names):
            raise OutOfRangeError(
                f"Outcome id {outcome_id} out of range for space of size {self.size}"
            )
        return self._names[int(outcome_id)]

    def ids_named(self, name: str) -> List[OutcomeId]:
        """Return every id whose outcome carries `name` (possibly several)."""
        return [i for i, n in enumerate(self._names) if n == str(name)]

    def event(self, ids: Iterable[OutcomeId]) -> "Event":
        """Build an event over the current size containing exactly `ids`."""
        return Event.from_ids(self.size, ids)

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._names))

    def __repr__(self) -> str:
        return f"OutcomeSpace({list(self._names)!r})"


def _check_same_size(a: "Event", b: "Event") -> None:
    if a.size != b.size:
        raise SizeMismatchError(
            f"Cannot combine events over universes of size {a.size} and {b.size}"
        )


@dataclass(frozen=True)
class Event:
    """
    Immutable subset of an outcome universe.

    `mask[i]` is True iff outcome `i` belongs to the event. Equality and
    hashing are structural, so events can be deduplicated in sets.
    """

    mask: Tuple[bool, ...]

    def __init__(self, mask: Sequence[bool]) -> None:
        object.__setattr__(self, "mask", tuple(bool(m) for m in mask))

    # Constructors.

    @staticmethod
    def empty(n: int) -> "Event":
        return Event((False,) * int(n))

    @staticmethod
    def full(n: int) -> "Event":
        return Event((True,) * int(n))

    @staticmethod
    def from_ids(n: int, ids: Iterable[OutcomeId]) -> "Event":
        """
        Build an event of size `n` containing exactly `ids`.

        Raises:
            OutOfRangeError: If any id lies outside ``[0, n)``.
        """
        n = int(n)
        mask = [False] * n
        for i in ids:
            i = int(i)
            if not 0 <= i < n:
                raise OutOfRangeError(f"Outcome id {i} out of range for size {n}")
            mask[i] = True
        return Event(mask)

    @staticmethod
    def from_bits(bits: int, n: int) -> "Event":
        """Inverse of `to_bits` for a universe of size `n`."""
        bits = int(bits)
        return Event([bool((bits >> i) & 1) for i in range(int(n))])

    # Algebra.

    @staticmethod
    def complement(e: "Event") -> "Event":
        return Event([not m for m in e.mask])

    @staticmethod
    def unite(a: "Event", b: "Event") -> "Event":
        _check_same_size(a, b)
        return Event([x or y for x, y in zip(a.mask, b.mask)])

    @staticmethod
    def intersect(a: "Event", b: "Event") -> "Event":
        _check_same_size(a, b)
        return Event([x and y for x, y in zip(a.mask, b.mask)])

    @staticmethod
    def difference(a: "Event", b: "Event") -> "Event":
        return Event.intersect(a, Event.complement(b))

    def __invert__(self) -> "Event":
        return Event.complement(self)

    def __or__(self, other: "Event") -> "Event":
        return Event.unite(self, other)

    def __and__(self, other: "Event") -> "Event":
        return Event.intersect(self, other)

    def __sub__(self, other: "Event") -> "Event":
        return Event.difference(self, other)

    # Queries.

    @property
    def size(self) -> int:
        return len(self.mask)

    def __len__(self) -> int:
        return len(self.mask)

    def contains(self, outcome_id: OutcomeId) -> bool:
        """
        Membership test, total over all integers.

        Ids outside ``[0, size)``, negative ones included, are never members.
        """
        i = int(outcome_id)
        return 0 <= i < len(self.mask) and self.mask[i]

    def __contains__(self, outcome_id: object) -> bool:
        if isinstance(outcome_id, (bool, np.bool_)):
            return False
        if not isinstance(outcome_id, (int, np.integer)):
            return False
        return self.contains(int(outcome_id))

    def outcome_ids(self) -> List[OutcomeId]:
        return [i for i, m in enumerate(self.mask) if m]

    def is_empty(self) -> bool:
        return not any(self.mask)

    def is_full(self) -> bool:
        return all(self.mask)

    def to_bits(self) -> int:
        """Canonical integer encoding: bit `i` is set iff outcome `i` is a member."""
        bits = 0
        for i, m in enumerate(self.mask):
            if m:
                bits |= 1 << i
        return bits

    def as_array(self) -> np.ndarray:
        return np.array(self.mask, dtype=bool)

    def __repr__(self) -> str:
        return f"Event({self.outcome_ids()!r}, size={self.size})"
