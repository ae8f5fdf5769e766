"""
Law of large numbers: running sample means against the theoretical mean.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List

import numpy as np

from finprob.distributions import Distribution

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LLNPathEntry:
    n: int
    sample_mean: float
    # NaN when the distribution has no mean.
    abs_error: float


@dataclass
class LLNPathResult:
    """
    Checkpoints of a single running-mean path, ordered by sample count.
    """

    entries: List[LLNPathEntry] = field(default_factory=list)

    def sample_counts(self) -> np.ndarray:
        return np.array([e.n for e in self.entries], dtype=int)

    def sample_means(self) -> np.ndarray:
        return np.array([e.sample_mean for e in self.entries], dtype=float)

    def abs_errors(self) -> np.ndarray:
        return np.array([e.abs_error for e in self.entries], dtype=float)


class LawOfLargeNumbersSimulator:
    """
    Simulates the convergence of the sample mean for one distribution.
    """

    def __init__(self, dist: Distribution) -> None:
        self.dist = dist

    def simulate(self, rng: np.random.Generator, max_n: int, step: int) -> LLNPathResult:
        """
        Draw `max_n` samples and record the running mean every `step` draws.

        A final checkpoint at `max_n` is added when `max_n` is not a multiple
        of `step`.

        Args:
            rng: Random source.
            max_n: Total number of draws.
            step: Checkpoint spacing.

        Returns:
            LLNPathResult with one entry per checkpoint.

        Raises:
            ValueError: If `max_n` or `step` is not positive.
        """
        max_n = int(max_n)
        step = int(step)
        if max_n < 1:
            raise ValueError(f"max_n must be positive, got {max_n}")
        if step < 1:
            raise ValueError(f"step must be positive, got {step}")

        theoretical_mean = float(self.dist.theoretical_mean())
        running = np.cumsum(self.dist.sample_n(rng, max_n))

        checkpoints = list(range(step, max_n + 1, step))
        if max_n % step != 0:
            checkpoints.append(max_n)

        result = LLNPathResult()
        for n in checkpoints:
            sample_mean = float(running[n - 1] / n)
            diff = (
                float("nan")
                if math.isnan(theoretical_mean)
                else abs(sample_mean - theoretical_mean)
            )
            result.entries.append(LLNPathEntry(n=n, sample_mean=sample_mean, abs_error=diff))

        logger.debug(
            "LLN path for %s: %d checkpoints up to n=%d",
            type(self.dist).__name__,
            len(result.entries),
            max_n,
        )
        return result
