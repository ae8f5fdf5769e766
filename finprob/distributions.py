"""
Named probability distributions.

Each distribution exposes its density (or mass) function, its cumulative
distribution function, sampling from a `numpy.random.Generator`, and its
theoretical mean and variance. Moments that do not exist (Cauchy) are NaN.

Discrete distributions treat `x` as an integer when it is within
`INTEGER_TOLERANCE` of one; any other `x` has mass zero. Their CDFs are 0 at
-inf, 1 at +inf and NaN at NaN.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np
from scipy.special import bdtr, erf, gammaln, pdtr

INTEGER_TOLERANCE = 1e-9


def _as_count(x: float) -> Optional[int]:
    if not math.isfinite(float(x)):
        return None
    k = int(round(float(x)))
    if abs(float(x) - k) > INTEGER_TOLERANCE:
        return None
    return k


def _nonfinite_cdf(x: float) -> Optional[float]:
    """CDF value of any distribution at a non-finite `x`; None when `x` is finite."""
    x = float(x)
    if math.isnan(x):
        return math.nan
    if math.isinf(x):
        return 1.0 if x > 0 else 0.0
    return None


def _check_probability(p: float, name: str = "p") -> float:
    p = float(p)
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"{name} must be in [0, 1], got {p}")
    return p


def _check_positive(value: float, name: str) -> float:
    value = float(value)
    if not value > 0.0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


class Distribution(ABC):
    """
    Base class for univariate distributions.
    """

    @abstractmethod
    def pdf(self, x: float) -> float:
        """
        Density at `x` (probability mass for discrete distributions).
        """
        pass

    @abstractmethod
    def cdf(self, x: float) -> float:
        pass

    @abstractmethod
    def sample(self, rng: np.random.Generator) -> float:
        pass

    @abstractmethod
    def theoretical_mean(self) -> float:
        pass

    @abstractmethod
    def theoretical_variance(self) -> float:
        pass

    def sample_n(self, rng: np.random.Generator, size: int) -> np.ndarray:
        """
        Draw `size` independent samples.

        Subclasses with a vectorized numpy sampler override this; the default
        calls `sample` repeatedly.
        """
        return np.array([self.sample(rng) for _ in range(int(size))], dtype=float)


class BernoulliDistribution(Distribution):
    """Single trial with success probability `p`, taking values 0 and 1."""

    def __init__(self, p: float) -> None:
        self.p = _check_probability(p)

    def pdf(self, x: float) -> float:
        if x == 1.0:
            return self.p
        if x == 0.0:
            return 1.0 - self.p
        return 0.0

    def cdf(self, x: float) -> float:
        limit = _nonfinite_cdf(x)
        if limit is not None:
            return limit
        if x < 0.0:
            return 0.0
        if x < 1.0:
            return 1.0 - self.p
        return 1.0

    def sample(self, rng: np.random.Generator) -> float:
        return 1.0 if rng.random() < self.p else 0.0

    def sample_n(self, rng: np.random.Generator, size: int) -> np.ndarray:
        return (rng.random(int(size)) < self.p).astype(float)

    def theoretical_mean(self) -> float:
        return self.p

    def theoretical_variance(self) -> float:
        return self.p * (1.0 - self.p)


class BinomialDistribution(Distribution):
    """Number of successes in `n` independent trials with probability `p`."""

    def __init__(self, n: int, p: float) -> None:
        if int(n) < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        self.n = int(n)
        self.p = _check_probability(p)

    def pdf(self, x: float) -> float:
        k = _as_count(x)
        if k is None or k < 0 or k > self.n:
            return 0.0
        # Degenerate p: log(0) is avoided by handling the point masses directly.
        if self.p == 0.0:
            return 1.0 if k == 0 else 0.0
        if self.p == 1.0:
            return 1.0 if k == self.n else 0.0
        log_coeff = gammaln(self.n + 1) - gammaln(k + 1) - gammaln(self.n - k + 1)
        return float(
            math.exp(log_coeff + k * math.log(self.p) + (self.n - k) * math.log(1.0 - self.p))
        )

    def cdf(self, x: float) -> float:
        limit = _nonfinite_cdf(x)
        if limit is not None:
            return limit
        if x < 0.0:
            return 0.0
        if x >= self.n:
            return 1.0
        return float(bdtr(math.floor(x), self.n, self.p))

    def sample(self, rng: np.random.Generator) -> float:
        return float(rng.binomial(self.n, self.p))

    def sample_n(self, rng: np.random.Generator, size: int) -> np.ndarray:
        return rng.binomial(self.n, self.p, size=int(size)).astype(float)

    def theoretical_mean(self) -> float:
        return self.n * self.p

    def theoretical_variance(self) -> float:
        return self.n * self.p * (1.0 - self.p)


class GeometricDistribution(Distribution):
    """Number of trials up to and including the first success (support 1, 2, ...)."""

    def __init__(self, p: float) -> None:
        p = _check_probability(p)
        if p == 0.0:
            raise ValueError("p must be positive for a geometric distribution")
        self.p = p

    def pdf(self, x: float) -> float:
        k = _as_count(x)
        if k is None or k < 1:
            return 0.0
        return float((1.0 - self.p) ** (k - 1) * self.p)

    def cdf(self, x: float) -> float:
        limit = _nonfinite_cdf(x)
        if limit is not None:
            return limit
        if x < 1.0:
            return 0.0
        return float(1.0 - (1.0 - self.p) ** math.floor(x))

    def sample(self, rng: np.random.Generator) -> float:
        # numpy's geometric counts trials, so its support already starts at 1.
        return float(rng.geometric(self.p))

    def sample_n(self, rng: np.random.Generator, size: int) -> np.ndarray:
        return rng.geometric(self.p, size=int(size)).astype(float)

    def theoretical_mean(self) -> float:
        return 1.0 / self.p

    def theoretical_variance(self) -> float:
        return (1.0 - self.p) / (self.p * self.p)


class PoissonDistribution(Distribution):
    """Count of events at rate `lam`."""

    def __init__(self, lam: float) -> None:
        self.lam = _check_positive(lam, "lam")

    def pdf(self, x: float) -> float:
        k = _as_count(x)
        if k is None or k < 0:
            return 0.0
        return float(math.exp(k * math.log(self.lam) - self.lam - gammaln(k + 1)))

    def cdf(self, x: float) -> float:
        limit = _nonfinite_cdf(x)
        if limit is not None:
            return limit
        if x < 0.0:
            return 0.0
        return float(pdtr(math.floor(x), self.lam))

    def sample(self, rng: np.random.Generator) -> float:
        return float(rng.poisson(self.lam))

    def sample_n(self, rng: np.random.Generator, size: int) -> np.ndarray:
        return rng.poisson(self.lam, size=int(size)).astype(float)

    def theoretical_mean(self) -> float:
        return self.lam

    def theoretical_variance(self) -> float:
        return self.lam


class UniformDistribution(Distribution):
    """Continuous uniform distribution on [a, b]."""

    def __init__(self, a: float, b: float) -> None:
        if not float(a) < float(b):
            raise ValueError(f"Uniform bounds must satisfy a < b, got a={a}, b={b}")
        self.a = float(a)
        self.b = float(b)

    def pdf(self, x: float) -> float:
        if self.a <= x <= self.b:
            return 1.0 / (self.b - self.a)
        return 0.0

    def cdf(self, x: float) -> float:
        if x < self.a:
            return 0.0
        if x > self.b:
            return 1.0
        return (x - self.a) / (self.b - self.a)

    def sample(self, rng: np.random.Generator) -> float:
        return float(rng.uniform(self.a, self.b))

    def sample_n(self, rng: np.random.Generator, size: int) -> np.ndarray:
        return rng.uniform(self.a, self.b, size=int(size))

    def theoretical_mean(self) -> float:
        return (self.a + self.b) / 2.0

    def theoretical_variance(self) -> float:
        return (self.b - self.a) ** 2 / 12.0


class NormalDistribution(Distribution):
    """Gaussian with the given mean and standard deviation."""

    def __init__(self, mean: float, stddev: float) -> None:
        self.mean = float(mean)
        self.stddev = _check_positive(stddev, "stddev")

    def pdf(self, x: float) -> float:
        z = (x - self.mean) / self.stddev
        return float(math.exp(-0.5 * z * z) / (self.stddev * math.sqrt(2.0 * math.pi)))

    def cdf(self, x: float) -> float:
        return float(0.5 * (1.0 + erf((x - self.mean) / (self.stddev * math.sqrt(2.0)))))

    def sample(self, rng: np.random.Generator) -> float:
        return float(rng.normal(self.mean, self.stddev))

    def sample_n(self, rng: np.random.Generator, size: int) -> np.ndarray:
        return rng.normal(self.mean, self.stddev, size=int(size))

    def theoretical_mean(self) -> float:
        return self.mean

    def theoretical_variance(self) -> float:
        return self.stddev * self.stddev


class ExponentialDistribution(Distribution):
    """Waiting time at rate `lam`."""

    def __init__(self, lam: float) -> None:
        self.lam = _check_positive(lam, "lam")

    def pdf(self, x: float) -> float:
        return 0.0 if x < 0.0 else float(self.lam * math.exp(-self.lam * x))

    def cdf(self, x: float) -> float:
        return 0.0 if x < 0.0 else float(1.0 - math.exp(-self.lam * x))

    def sample(self, rng: np.random.Generator) -> float:
        return float(rng.exponential(1.0 / self.lam))

    def sample_n(self, rng: np.random.Generator, size: int) -> np.ndarray:
        return rng.exponential(1.0 / self.lam, size=int(size))

    def theoretical_mean(self) -> float:
        return 1.0 / self.lam

    def theoretical_variance(self) -> float:
        return 1.0 / (self.lam * self.lam)


class LaplaceDistribution(Distribution):
    """Double-exponential distribution with location `mu` and scale `b`."""

    def __init__(self, mu: float, b: float) -> None:
        self.mu = float(mu)
        self.b = _check_positive(b, "b")

    def pdf(self, x: float) -> float:
        return float(math.exp(-abs(x - self.mu) / self.b) / (2.0 * self.b))

    def cdf(self, x: float) -> float:
        if x < self.mu:
            return float(0.5 * math.exp((x - self.mu) / self.b))
        return float(1.0 - 0.5 * math.exp(-(x - self.mu) / self.b))

    def sample(self, rng: np.random.Generator) -> float:
        return float(rng.laplace(self.mu, self.b))

    def sample_n(self, rng: np.random.Generator, size: int) -> np.ndarray:
        return rng.laplace(self.mu, self.b, size=int(size))

    def theoretical_mean(self) -> float:
        return self.mu

    def theoretical_variance(self) -> float:
        return 2.0 * self.b * self.b


class CauchyDistribution(Distribution):
    """Cauchy distribution with location `x0` and scale `gamma`; no finite moments."""

    def __init__(self, x0: float, gamma: float) -> None:
        self.x0 = float(x0)
        self.gamma = _check_positive(gamma, "gamma")

    def pdf(self, x: float) -> float:
        z = (x - self.x0) / self.gamma
        return float(1.0 / (math.pi * self.gamma * (1.0 + z * z)))

    def cdf(self, x: float) -> float:
        return float(math.atan((x - self.x0) / self.gamma) / math.pi + 0.5)

    def sample(self, rng: np.random.Generator) -> float:
        return float(self.x0 + self.gamma * rng.standard_cauchy())

    def sample_n(self, rng: np.random.Generator, size: int) -> np.ndarray:
        return self.x0 + self.gamma * rng.standard_cauchy(size=int(size))

    def theoretical_mean(self) -> float:
        return float("nan")

    def theoretical_variance(self) -> float:
        return float("nan")
