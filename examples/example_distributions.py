"""
Monte Carlo experiments against theoretical moments and CDFs.

For each named distribution, a sample is drawn and its empirical mean and
variance are compared with the theoretical ones. For the uniform distribution
the empirical CDF and its Kolmogorov distance are also shown.
"""

from __future__ import annotations

import os

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np

from finprob.distributions import (
    BernoulliDistribution,
    BinomialDistribution,
    CauchyDistribution,
    ExponentialDistribution,
    GeometricDistribution,
    LaplaceDistribution,
    NormalDistribution,
    PoissonDistribution,
    UniformDistribution,
)
from finprob.experiment import DistributionExperiment
from finprob.visualization import DistributionVisualizer


def _get_results_dir() -> str:
    """Determine the results directory path."""
    results_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), '..', 'results')
    os.makedirs(results_dir, exist_ok=True)
    return results_dir


def main() -> None:
    rng = np.random.default_rng(123)
    distributions = [
        BernoulliDistribution(0.3),
        BinomialDistribution(20, 0.3),
        GeometricDistribution(0.4),
        PoissonDistribution(3.0),
        UniformDistribution(0.0, 2.0),
        NormalDistribution(5.0, 2.0),
        ExponentialDistribution(2.0),
        LaplaceDistribution(0.0, 1.0),
        CauchyDistribution(0.0, 1.0),
    ]

    print(f"{'distribution':28} {'mean':>10} {'mean err':>10} {'var':>10} {'var err':>10}")
    for dist in distributions:
        stats = DistributionExperiment(dist, 20000).run(rng)
        print(
            f"{type(dist).__name__:28} {stats.empirical_mean:10.4f} {stats.mean_error:10.4f} "
            f"{stats.empirical_variance:10.4f} {stats.variance_error:10.4f}"
        )

    uniform = UniformDistribution(0.0, 1.0)
    experiment = DistributionExperiment(uniform, 1000)
    grid = np.linspace(0.0, 1.0, 21)
    ecdf = experiment.empirical_cdf(grid, rng)
    print("Kolmogorov distance (uniform, n=1000):", experiment.kolmogorov_distance(grid, ecdf))

    results_dir = _get_results_dir()
    ax = DistributionVisualizer.plot_ecdf(uniform, grid, ecdf)
    plot_path = os.path.join(results_dir, "example_distributions_ecdf.png")
    ax.figure.savefig(plot_path, dpi=150, bbox_inches='tight')
    plt.close(ax.figure)
    print(f"Saved plot: {plot_path}")


if __name__ == "__main__":
    main()
