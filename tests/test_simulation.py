"""
Unit tests for Monte Carlo experiments and law-of-large-numbers simulation.

Seeded generators keep every run reproducible; tolerances are several
standard errors wide.
"""

import math

import numpy as np
import pytest

from finprob.distributions import (
    BernoulliDistribution,
    BinomialDistribution,
    CauchyDistribution,
    ExponentialDistribution,
    LaplaceDistribution,
    NormalDistribution,
    PoissonDistribution,
    UniformDistribution,
)
from finprob.errors import SizeMismatchError
from finprob.experiment import DistributionExperiment
from finprob.lln import LawOfLargeNumbersSimulator


class TestDistributionExperiment:
    """Test suite for DistributionExperiment class."""

    def test_normal_moments(self) -> None:
        rng = np.random.default_rng(123)
        dist = NormalDistribution(5.0, 2.0)
        stats = DistributionExperiment(dist, 20000).run(rng)

        assert stats.empirical_mean == pytest.approx(dist.theoretical_mean(), abs=0.1)
        assert stats.empirical_variance == pytest.approx(dist.theoretical_variance(), abs=0.3)
        assert stats.mean_error == pytest.approx(abs(stats.empirical_mean - 5.0))
        assert stats.mean_error > 0.0

    def test_binomial_moments(self) -> None:
        rng = np.random.default_rng(777)
        dist = BinomialDistribution(20, 0.3)
        stats = DistributionExperiment(dist, 50000).run(rng)
        assert stats.empirical_mean == pytest.approx(6.0, abs=0.2)
        assert stats.empirical_variance == pytest.approx(4.2, abs=0.5)

    def test_cauchy_errors_are_nan(self) -> None:
        rng = np.random.default_rng(42)
        stats = DistributionExperiment(CauchyDistribution(0.0, 1.0), 1000).run(rng)
        assert not math.isnan(stats.empirical_mean)
        assert math.isnan(stats.mean_error)
        assert math.isnan(stats.variance_error)

    def test_sample_size_validation(self) -> None:
        with pytest.raises(ValueError):
            DistributionExperiment(NormalDistribution(0.0, 1.0), 1)

    def test_empirical_cdf_and_kolmogorov_distance(self) -> None:
        rng = np.random.default_rng(42)
        exp = DistributionExperiment(UniformDistribution(0.0, 1.0), 1000)
        grid = [0.1, 0.5, 0.9]

        ecdf = exp.empirical_cdf(grid, rng, 1000)
        assert len(ecdf) == len(grid)
        assert ecdf[1] == pytest.approx(0.5, abs=0.1)
        assert np.all(np.diff(ecdf) >= 0.0)

        ks = exp.kolmogorov_distance(grid, ecdf)
        assert 0.0 <= ks < 0.1

    def test_empirical_cdf_outside_support(self) -> None:
        rng = np.random.default_rng(1)
        exp = DistributionExperiment(UniformDistribution(0.0, 1.0), 100)
        ecdf = exp.empirical_cdf([-1.0, 2.0], rng)
        assert ecdf.tolist() == [0.0, 1.0]

    def test_kolmogorov_distance_on_unbounded_grid(self) -> None:
        exp = DistributionExperiment(PoissonDistribution(2.0), 10)
        assert exp.kolmogorov_distance([-math.inf, math.inf], [0.0, 1.0]) == 0.0
        ecdf = exp.empirical_cdf([math.inf], np.random.default_rng(3))
        assert ecdf.tolist() == [1.0]

    def test_kolmogorov_length_mismatch(self) -> None:
        exp = DistributionExperiment(UniformDistribution(0.0, 1.0), 10)
        with pytest.raises(SizeMismatchError):
            exp.kolmogorov_distance([0.1, 0.2], [0.1])


class TestLawOfLargeNumbers:
    """Test suite for LawOfLargeNumbersSimulator class."""

    def test_bernoulli_mean_converges(self) -> None:
        rng = np.random.default_rng(123)
        dist = BernoulliDistribution(0.3)
        result = LawOfLargeNumbersSimulator(dist).simulate(rng, 100000, 5000)

        assert len(result.entries) == 20
        last = result.entries[-1]
        assert last.n == 100000
        assert last.sample_mean == pytest.approx(0.3, abs=0.05)
        assert last.abs_error < 0.05
        for prev, cur in zip(result.entries, result.entries[1:]):
            assert cur.n == prev.n + 5000

    def test_uniform_errors_non_negative(self) -> None:
        rng = np.random.default_rng(456)
        result = LawOfLargeNumbersSimulator(UniformDistribution(2.0, 5.0)).simulate(
            rng, 50000, 1000
        )
        assert result.entries[-1].sample_mean == pytest.approx(3.5, abs=0.1)
        assert np.all(result.abs_errors() >= 0.0)

    def test_final_entry_when_not_multiple(self) -> None:
        rng = np.random.default_rng(789)
        result = LawOfLargeNumbersSimulator(ExponentialDistribution(2.0)).simulate(
            rng, 10500, 2000
        )
        assert result.sample_counts().tolist() == [2000, 4000, 6000, 8000, 10000, 10500]
        assert result.entries[-1].sample_mean == pytest.approx(0.5, abs=0.05)

    def test_counts_strictly_increase(self) -> None:
        rng = np.random.default_rng(101112)
        result = LawOfLargeNumbersSimulator(LaplaceDistribution(3.0, 1.5)).simulate(
            rng, 70000, 1500
        )
        assert np.all(np.diff(result.sample_counts()) > 0)
        assert result.entries[-1].n == 70000
        assert result.entries[-1].sample_mean == pytest.approx(3.0, abs=0.1)

    def test_cauchy_has_no_error(self) -> None:
        rng = np.random.default_rng(131415)
        result = LawOfLargeNumbersSimulator(CauchyDistribution(0.0, 1.0)).simulate(
            rng, 30000, 1000
        )
        assert result.entries
        assert np.all(np.isfinite(result.sample_means()))
        assert np.all(np.isnan(result.abs_errors()))

    def test_invalid_arguments(self) -> None:
        sim = LawOfLargeNumbersSimulator(NormalDistribution(0.0, 1.0))
        rng = np.random.default_rng(0)
        with pytest.raises(ValueError):
            sim.simulate(rng, 100, 0)
        with pytest.raises(ValueError):
            sim.simulate(rng, 0, 10)
