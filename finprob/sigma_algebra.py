"""
Sigma-algebras over finite outcome spaces.

This module provides both directions of the same closure relation:

  - verification: does a given event collection satisfy the axioms
    (contains the empty and full event, closed under complement and union)?
  - generation: the smallest collection containing a set of generators that
    does satisfy them, computed as a least fixed point.

Events are handled internally through their canonical integer encoding
(`Event.to_bits`), so complement is an XOR with the full mask, union is a
bitwise OR, and deduplication is a plain hash-set lookup.

Closure under intersection is not checked separately: given complement and
union closure, it follows from De Morgan's law A ∩ B = ~(~A ∪ ~B).

The generated algebra has 2^a members, where a is the number of atoms the
generators induce (outcomes are grouped by which generators contain them).
`generate` refuses generator sets inducing more than `max_atoms` atoms; the
number of outcomes alone is not limited.
"""

from __future__ import annotations

import logging
from typing import FrozenSet, Iterable, Iterator, List, Optional, Set, Tuple

from finprob.errors import ClosureLimitError, SizeMismatchError
from finprob.space import Event, OutcomeSpace

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATOMS = 12


def _full_bits(n: int) -> int:
    return (1 << int(n)) - 1


def count_atoms(generators: Iterable[int], n: int) -> int:
    """
    Number of atoms of the sigma-algebra generated by `generators` over `n` outcomes.

    Two outcomes share an atom iff every generator contains both or neither,
    so this counts the distinct membership signatures across outcomes.
    """
    gens = [int(g) for g in generators]
    signatures = {tuple((g >> i) & 1 for g in gens) for i in range(int(n))}
    return len(signatures)


def is_closed(masks: FrozenSet[int], n: int) -> bool:
    """
    Check the sigma-algebra axioms on a set of canonical masks over `n` outcomes.

    The pairwise union check visits every ordered pair, including a mask with
    itself, so the cost is O(k^2) for k distinct masks.
    """
    full = _full_bits(n)
    if 0 not in masks or full not in masks:
        return False
    for m in masks:
        if (m ^ full) not in masks:
            return False
        for m2 in masks:
            if (m | m2) not in masks:
                return False
    return True


def close(seed: Iterable[int], n: int) -> Set[int]:
    """
    Smallest set of masks containing `seed`, the empty and the full mask that
    is closed under complement and union.

    Each pass reads a frozen snapshot of the previous pass. Pairs made only of
    masks that were already present before the previous pass were combined
    then, so a pass only scans pairs involving at least one mask added by the
    previous pass. The fixed point is the same as scanning every pair.
    """
    full = _full_bits(n)
    current: Set[int] = {0, full}
    current.update(int(m) for m in seed)
    frontier: Set[int] = set(current)
    passes = 0

    while frontier:
        passes += 1
        snapshot = frozenset(current)
        added: Set[int] = set()
        for m in frontier:
            comp = m ^ full
            if comp not in snapshot:
                added.add(comp)
            for m2 in snapshot:
                uni = m | m2
                if uni not in snapshot:
                    added.add(uni)
        logger.debug(
            "closure pass %d: %d masks, %d new", passes, len(snapshot), len(added)
        )
        current.update(added)
        frontier = added

    logger.debug("closure reached fixed point after %d passes (%d masks)", passes, len(current))
    return current


class SigmaAlgebra:
    """
    An outcome space together with a collection of events.

    The collection is stored as given (order preserved, no deduplication) and
    need not be a sigma-algebra; `is_sigma_algebra` is a query, not an
    invariant. Collections produced by `generate` are always valid.

    Args:
        omega: Outcome space the events are defined over.
        events: Event collection to wrap.
    """

    def __init__(self, omega: OutcomeSpace, events: Iterable[Event] = ()) -> None:
        self.omega = omega
        self.size: int = int(omega.size)
        self._events: Tuple[Event, ...] = tuple(events)
        self._masks: Optional[FrozenSet[int]] = None

    @property
    def outcome_space(self) -> OutcomeSpace:
        return self.omega

    @property
    def events(self) -> Tuple[Event, ...]:
        return self._events

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(self._events)

    def _distinct_masks(self) -> Optional[FrozenSet[int]]:
        # None signals an event over a different universe size.
        if self._masks is None:
            if any(e.size != self.size for e in self._events):
                return None
            self._masks = frozenset(e.to_bits() for e in self._events)
        return self._masks

    def contains(self, event: Event) -> bool:
        if event.size != self.size:
            return False
        masks = self._distinct_masks()
        if masks is None:
            return event in self._events
        return event.to_bits() in masks

    def __contains__(self, event: object) -> bool:
        return isinstance(event, Event) and self.contains(event)

    def is_sigma_algebra(self) -> bool:
        """
        Verify the sigma-algebra axioms against the stored collection.

        Returns:
            True iff the distinct events include the empty and full event and
            are closed under complement and pairwise union. A collection with
            events over a different universe size is never a sigma-algebra.
        """
        if int(self.omega.size) != self.size:
            logger.debug(
                "outcome space grew from %d to %d outcomes; not a sigma-algebra over it",
                self.size,
                self.omega.size,
            )
            return False
        masks = self._distinct_masks()
        if masks is None:
            logger.debug("collection holds events not sized %d; not a sigma-algebra", self.size)
            return False
        return is_closed(masks, self.size)

    def atoms(self) -> List[Event]:
        """
        Minimal non-empty events of the collection.

        For a valid sigma-algebra these partition the outcome space and every
        member is a union of atoms. Atoms are ordered by their lowest outcome id.
        """
        masks = self._distinct_masks()
        if masks is None:
            raise SizeMismatchError(
                f"Collection holds events not sized {self.size}; atoms are undefined"
            )
        nonempty = [m for m in masks if m]
        minimal = [
            m for m in nonempty if not any(o != m and (o & m) == o for o in nonempty)
        ]
        minimal.sort(key=lambda m: (m & -m).bit_length())
        return [Event.from_bits(m, self.size) for m in minimal]

    @staticmethod
    def generate(
        omega: OutcomeSpace,
        generators: Iterable[Event],
        *,
        max_atoms: int = DEFAULT_MAX_ATOMS,
    ) -> "SigmaAlgebra":
        """
        Build the smallest sigma-algebra over `omega` containing `generators`.

        The seed (empty event, full event, generators) is closed under
        complement and pairwise union until a pass adds nothing. The result
        has 2^a events for the a atoms the generators induce, so the cost
        depends on the generators rather than on the number of outcomes.
        Events are returned sorted by mask (lexicographic, non-member before
        member).

        Args:
            omega: Outcome space.
            generators: Seed events, each sized to `omega`.
            max_atoms: Refuse generator sets inducing more atoms than this.

        Returns:
            A new SigmaAlgebra whose collection is closed.

        Raises:
            SizeMismatchError: If a generator is not sized to `omega`.
            ClosureLimitError: If the generators induce more than `max_atoms` atoms.
        """
        generators = list(generators)
        n = int(omega.size)
        for g in generators:
            if g.size != n:
                raise SizeMismatchError(
                    f"Generator of size {g.size} used with space of size {n}"
                )

        seed = [g.to_bits() for g in generators]
        a = count_atoms(seed, n)
        if a > int(max_atoms):
            raise ClosureLimitError(
                f"Generators induce too many atoms for explicit generation (atoms={a}, "
                f"max_atoms={int(max_atoms)}, events=2^{a})."
            )

        masks = close(seed, n)
        events = sorted((Event.from_bits(m, n) for m in masks), key=lambda e: e.mask)
        logger.debug(
            "generated sigma-algebra with %d events from %d generators over %d outcomes",
            len(events),
            len(generators),
            n,
        )
        algebra = SigmaAlgebra(omega, events)
        algebra._masks = frozenset(masks)
        return algebra

    def __repr__(self) -> str:
        return f"SigmaAlgebra(size={self.size}, events={len(self._events)})"
