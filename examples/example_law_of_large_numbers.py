"""
Law of large numbers: running means for a distribution with a mean (Bernoulli)
and one without (Cauchy).
"""

from __future__ import annotations

import os

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np

from finprob.distributions import BernoulliDistribution, CauchyDistribution
from finprob.lln import LawOfLargeNumbersSimulator
from finprob.visualization import ConvergenceVisualizer


def _get_results_dir() -> str:
    """Determine the results directory path."""
    results_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), '..', 'results')
    os.makedirs(results_dir, exist_ok=True)
    return results_dir


def main() -> None:
    rng = np.random.default_rng(123)

    bernoulli = BernoulliDistribution(0.3)
    path = LawOfLargeNumbersSimulator(bernoulli).simulate(rng, 100000, 5000)
    print("Bernoulli(0.3):")
    for entry in path.entries[::4]:
        print(f"  n={entry.n:6d}  mean={entry.sample_mean:.4f}  |error|={entry.abs_error:.4f}")

    cauchy = CauchyDistribution(0.0, 1.0)
    cauchy_path = LawOfLargeNumbersSimulator(cauchy).simulate(rng, 30000, 1000)
    print("Cauchy(0, 1) running means (no convergence expected):")
    for entry in cauchy_path.entries[::6]:
        print(f"  n={entry.n:6d}  mean={entry.sample_mean:.4f}")

    results_dir = _get_results_dir()
    fig, axes = plt.subplots(1, 2, figsize=(12, 4))
    ConvergenceVisualizer.plot_lln_path(
        path, theoretical_mean=bernoulli.theoretical_mean(), ax=axes[0], title="Bernoulli(0.3)"
    )
    ConvergenceVisualizer.plot_lln_path(cauchy_path, ax=axes[1], title="Cauchy(0, 1)")
    plt.tight_layout()
    plot_path = os.path.join(results_dir, "example_law_of_large_numbers.png")
    fig.savefig(plot_path, dpi=150, bbox_inches='tight')
    plt.close(fig)
    print(f"Saved plot: {plot_path}")


if __name__ == "__main__":
    main()
