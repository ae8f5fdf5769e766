"""
Monte Carlo experiments comparing sampled statistics with theoretical ones.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from finprob.distributions import Distribution
from finprob.errors import SizeMismatchError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExperimentStats:
    """
    Empirical moments of one sample run.

    Attributes:
        empirical_mean: Sample mean.
        empirical_variance: Unbiased sample variance (ddof=1).
        mean_error: |empirical_mean - theoretical mean|, NaN when the
            distribution has no mean.
        variance_error: |empirical_variance - theoretical variance|, NaN when
            the distribution has no variance.
    """

    empirical_mean: float
    empirical_variance: float
    mean_error: float
    variance_error: float


class DistributionExperiment:
    """
    Draws samples from a distribution and measures how well they match it.

    Args:
        dist: Distribution to sample from.
        sample_size: Number of draws per `run`. Must be at least 2 so the
            unbiased variance is defined.
    """

    def __init__(self, dist: Distribution, sample_size: int) -> None:
        if int(sample_size) < 2:
            raise ValueError(f"sample_size must be at least 2, got {sample_size}")
        self.dist = dist
        self.sample_size = int(sample_size)

    def run(self, rng: np.random.Generator) -> ExperimentStats:
        samples = self.dist.sample_n(rng, self.sample_size)
        emp_mean = float(np.mean(samples))
        emp_var = float(np.var(samples, ddof=1))

        t_mean = float(self.dist.theoretical_mean())
        t_var = float(self.dist.theoretical_variance())
        stats = ExperimentStats(
            empirical_mean=emp_mean,
            empirical_variance=emp_var,
            mean_error=float("nan") if math.isnan(t_mean) else abs(emp_mean - t_mean),
            variance_error=float("nan") if math.isnan(t_var) else abs(emp_var - t_var),
        )
        logger.debug(
            "experiment %s n=%d: mean=%.6g var=%.6g",
            type(self.dist).__name__,
            self.sample_size,
            emp_mean,
            emp_var,
        )
        return stats

    def empirical_cdf(
        self,
        grid: Sequence[float],
        rng: np.random.Generator,
        sample_size: Optional[int] = None,
    ) -> np.ndarray:
        """
        Empirical CDF of a fresh sample, evaluated on `grid`.

        Args:
            grid: Points at which to evaluate.
            rng: Random source.
            sample_size: Number of draws. Defaults to this experiment's size.

        Returns:
            Array aligned with `grid`: fraction of samples <= each point.
        """
        n = self.sample_size if sample_size is None else int(sample_size)
        if n < 1:
            raise ValueError(f"sample_size must be positive, got {n}")
        samples = np.sort(self.dist.sample_n(rng, n))
        counts = np.searchsorted(samples, np.asarray(grid, dtype=float), side="right")
        return counts.astype(float) / float(n)

    def kolmogorov_distance(
        self, grid: Sequence[float], empirical_cdf: Sequence[float]
    ) -> float:
        """
        Largest gap between an empirical CDF and the theoretical CDF on `grid`.

        Raises:
            SizeMismatchError: If `grid` and `empirical_cdf` differ in length.
        """
        if len(grid) != len(empirical_cdf):
            raise SizeMismatchError(
                f"grid has {len(grid)} points but empirical_cdf has {len(empirical_cdf)}"
            )
        max_dist = 0.0
        for x, e in zip(grid, empirical_cdf):
            max_dist = max(max_dist, abs(float(e) - self.dist.cdf(float(x))))
        return float(max_dist)
