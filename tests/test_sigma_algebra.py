"""
Unit tests for sigma-algebra verification and generation.

Generation and verification are two directions of the same closure relation,
so every generated collection is also checked with the verifier.
"""

import itertools
import logging

import pytest

from finprob.errors import ClosureLimitError, SizeMismatchError
from finprob.sigma_algebra import DEFAULT_MAX_ATOMS, SigmaAlgebra, close, count_atoms, is_closed
from finprob.space import Event, OutcomeSpace


def _space(n: int) -> OutcomeSpace:
    return OutcomeSpace([str(i + 1) for i in range(n)])


def _masks(algebra: SigmaAlgebra) -> set[tuple[bool, ...]]:
    return {e.mask for e in algebra.events}


def _all_events(n: int) -> list[Event]:
    return [Event(bits) for bits in itertools.product([False, True], repeat=n)]


class TestIsSigmaAlgebra:
    """Test suite for axiom verification."""

    def test_trivial_algebra(self) -> None:
        omega = OutcomeSpace(["heads", "tails"])
        n = omega.size
        sa = SigmaAlgebra(omega, [Event.empty(n), Event.full(n)])

        assert sa.outcome_space is omega
        assert len(sa.events) == 2
        assert sa.is_sigma_algebra()

    def test_single_event_is_not_closed(self) -> None:
        omega = _space(3)
        only_a = Event([True, False, False])
        assert not SigmaAlgebra(omega, [only_a]).is_sigma_algebra()

    def test_missing_complement(self) -> None:
        omega = _space(3)
        n = omega.size
        only_a = Event([True, False, False])
        sa = SigmaAlgebra(omega, [Event.empty(n), only_a, Event.full(n)])
        assert not sa.is_sigma_algebra()

    def test_missing_union(self) -> None:
        omega = _space(3)
        n = omega.size
        only_a = Event([True, False, False])
        only_b = Event([False, True, False])
        not_a = Event([False, True, True])
        not_b = Event([True, False, True])
        sa = SigmaAlgebra(
            omega, [Event.empty(n), only_a, only_b, not_a, not_b, Event.full(n)]
        )
        # {A} ∪ {B} = {A, B} is absent.
        assert not sa.is_sigma_algebra()

    def test_duplicates_are_ignored(self) -> None:
        omega = _space(2)
        n = omega.size
        events = [Event.empty(n), Event.full(n), Event.full(n), Event.empty(n)]
        sa = SigmaAlgebra(omega, events)
        assert len(sa.events) == 4
        assert sa.is_sigma_algebra()

    def test_power_set_is_sigma_algebra(self) -> None:
        omega = _space(3)
        assert SigmaAlgebra(omega, _all_events(3)).is_sigma_algebra()

    def test_wrong_sized_event_is_rejected_not_raised(self) -> None:
        omega = _space(2)
        events = [Event.empty(2), Event.full(2), Event.full(3)]
        assert not SigmaAlgebra(omega, events).is_sigma_algebra()

    def test_grown_space_is_not_sigma_algebra(self) -> None:
        omega = _space(2)
        sa = SigmaAlgebra(omega, [Event.empty(2), Event.full(2)])
        assert sa.is_sigma_algebra()
        omega.add_outcome("3")
        assert not sa.is_sigma_algebra()

    def test_contains(self) -> None:
        omega = _space(2)
        sa = SigmaAlgebra(omega, [Event.empty(2), Event.full(2)])
        assert Event.full(2) in sa
        assert Event([True, False]) not in sa
        assert Event.full(3) not in sa


class TestGenerate:
    """Test suite for sigma-algebra generation."""

    def test_generate_from_single_event(self) -> None:
        omega = OutcomeSpace(["A", "B"])
        generated = SigmaAlgebra.generate(omega, [Event([True, False])])

        events = generated.events
        assert len(events) == 4
        assert generated.is_sigma_algebra()
        assert any(not e.contains(0) and e.contains(1) for e in events)

    def test_generate_separating_generators_gives_power_set(self) -> None:
        omega = _space(4)
        g1 = Event([True, True, False, False])
        g2 = Event([False, True, True, False])

        sa = SigmaAlgebra.generate(omega, [g1, g2])
        assert sa.is_sigma_algebra()
        assert len(sa.events) == 16

    def test_generate_from_nothing(self) -> None:
        omega = _space(2)
        sa = SigmaAlgebra.generate(omega, [])
        assert len(sa.events) == 2
        assert sa.is_sigma_algebra()

    def test_events_are_sorted_and_distinct(self) -> None:
        omega = _space(3)
        g = Event([False, True, True])
        sa = SigmaAlgebra.generate(omega, [g, g, Event.empty(3)])
        masks = [e.mask for e in sa.events]
        assert masks == sorted(masks)
        assert len(set(masks)) == len(masks)
        assert masks[0] == (False, False, False)
        assert masks[-1] == (True, True, True)

    def test_partition_generators(self) -> None:
        omega = _space(5)
        blocks = [Event.from_ids(5, [0, 1]), Event.from_ids(5, [2]), Event.from_ids(5, [3, 4])]
        sa = SigmaAlgebra.generate(omega, blocks)
        # A partition into k blocks generates 2^k events.
        assert len(sa) == 8
        assert [a.outcome_ids() for a in sa.atoms()] == [[0, 1], [2], [3, 4]]

    def test_closure_correctness_exhaustive(self) -> None:
        # Every pair of generators over a 3-outcome space.
        omega = _space(3)
        events = _all_events(3)
        for g1, g2 in itertools.combinations_with_replacement(events, 2):
            sa = SigmaAlgebra.generate(omega, [g1, g2])
            assert SigmaAlgebra(omega, sa.events).is_sigma_algebra()
            assert len(sa.events) <= 2 ** omega.size
            assert g1 in sa and g2 in sa

    def test_idempotence(self) -> None:
        omega = _space(4)
        gens = [Event([True, False, False, True]), Event([True, True, False, False])]
        first = SigmaAlgebra.generate(omega, gens)
        second = SigmaAlgebra.generate(omega, first.events)
        assert _masks(first) == _masks(second)

    def test_minimality(self) -> None:
        # Any sigma-algebra containing the generator contains the generated one.
        omega = _space(4)
        g = Event([True, True, False, False])
        generated = SigmaAlgebra.generate(omega, [g])
        power_set = SigmaAlgebra(omega, _all_events(4))
        assert _masks(generated) <= _masks(power_set)
        assert len(generated) == 4

    def test_closed_under_intersection(self) -> None:
        omega = _space(4)
        sa = SigmaAlgebra.generate(omega, [Event([True, False, True, False])])
        for a in sa.events:
            for b in sa.events:
                assert (a & b) in sa

    def test_generator_size_mismatch(self) -> None:
        omega = _space(3)
        with pytest.raises(SizeMismatchError):
            SigmaAlgebra.generate(omega, [Event.full(2)])

    def test_closure_limit_counts_atoms(self) -> None:
        omega = _space(5)
        singletons = [Event.from_ids(5, [i]) for i in range(4)]
        with pytest.raises(ClosureLimitError, match="too many atoms"):
            SigmaAlgebra.generate(omega, singletons, max_atoms=4)
        # Three singletons leave four atoms, which is within the limit.
        assert len(SigmaAlgebra.generate(omega, singletons[:3], max_atoms=4)) == 16

    def test_large_space_with_one_generator(self) -> None:
        omega = _space(52)
        hearts = omega.event(range(13))
        sa = SigmaAlgebra.generate(omega, [hearts])

        assert len(sa) == 4
        assert sa.is_sigma_algebra()
        assert hearts in sa and ~hearts in sa
        assert [a.outcome_ids() for a in sa.atoms()] == [list(range(13)), list(range(13, 52))]

    def test_large_space_without_generators(self) -> None:
        omega = _space(200)
        sa = SigmaAlgebra.generate(omega, [])
        assert len(sa) == 2
        assert sa.is_sigma_algebra()

    def test_many_outcomes_many_atoms_is_refused(self) -> None:
        omega = _space(40)
        singletons = [Event.from_ids(40, [i]) for i in range(DEFAULT_MAX_ATOMS)]
        with pytest.raises(ClosureLimitError):
            SigmaAlgebra.generate(omega, singletons)

    def test_empty_space(self) -> None:
        omega = OutcomeSpace()
        sa = SigmaAlgebra.generate(omega, [])
        assert len(sa) == 1
        assert sa.is_sigma_algebra()

    def test_logs_fixed_point(self, caplog: pytest.LogCaptureFixture) -> None:
        omega = _space(2)
        with caplog.at_level(logging.DEBUG, logger="finprob.sigma_algebra"):
            SigmaAlgebra.generate(omega, [Event([True, False])])
        assert "fixed point" in caplog.text


class TestMaskHelpers:
    """Test suite for the integer-mask closure helpers."""

    def test_close_and_is_closed_agree(self) -> None:
        masks = close([0b0011, 0b0110], 4)
        assert len(masks) == 16
        assert is_closed(frozenset(masks), 4)

    def test_is_closed_requires_empty_and_full(self) -> None:
        assert not is_closed(frozenset({0b01, 0b10}), 2)
        assert is_closed(frozenset({0b00, 0b11}), 2)

    def test_count_atoms(self) -> None:
        assert count_atoms([], 0) == 0
        assert count_atoms([], 5) == 1
        assert count_atoms([0b0011], 4) == 2
        assert count_atoms([0b0011, 0b0110], 4) == 4
        # Duplicate and complementary generators split nothing further.
        assert count_atoms([0b0011, 0b1100, 0b0011], 4) == 2
