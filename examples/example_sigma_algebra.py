"""
Sigma-algebra generation on a four-outcome space.

The `finprob` core is demonstrated:
  - an outcome space and a probability measure are defined,
  - a sigma-algebra is generated from two events and verified,
  - its atoms and their probabilities are inspected,
  - measurability of a random variable is checked against it.
"""

from __future__ import annotations

import os

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from finprob import DiscreteRandomVariable, OutcomeSpace, ProbabilityMeasure, SigmaAlgebra
from finprob.visualization import EventVisualizer


def _get_results_dir() -> str:
    """Determine the results directory path."""
    results_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), '..', 'results')
    os.makedirs(results_dir, exist_ok=True)
    return results_dir


def main() -> None:
    omega = OutcomeSpace(["rain", "cloud", "sun", "snow"])
    P = ProbabilityMeasure.from_atoms(omega, [0.3, 0.25, 0.35, 0.1])
    print("Measure valid:", P.is_valid())

    wet = omega.event([0, 3])
    cold = omega.event([0, 1, 3])

    # One generator only: the algebra cannot tell rain from snow.
    coarse = SigmaAlgebra.generate(omega, [wet])
    print(f"sigma(wet): {len(coarse)} events, valid={coarse.is_sigma_algebra()}")

    fine = SigmaAlgebra.generate(omega, [wet, cold])
    print(f"sigma(wet, cold): {len(fine)} events, valid={fine.is_sigma_algebra()}")
    for atom in fine.atoms():
        names = [omega.name(i) for i in atom.outcome_ids()]
        print(f"  atom {names}: P={P.probability(atom):.3f}")

    # Umbrella needed: 1 on wet days.
    umbrella = DiscreteRandomVariable(omega, P, [1.0, 0.0, 0.0, 1.0])
    print("E[umbrella] =", umbrella.expected_value())
    print("umbrella measurable w.r.t. sigma(wet):", umbrella.is_measurable(coarse))

    temperature = DiscreteRandomVariable(omega, P, [12.0, 15.0, 24.0, -2.0])
    print("temperature measurable w.r.t. sigma(wet, cold):", temperature.is_measurable(fine))

    results_dir = _get_results_dir()
    ax = EventVisualizer.plot_atom_probabilities(fine, P)
    plot_path = os.path.join(results_dir, "example_sigma_algebra_atoms.png")
    ax.figure.savefig(plot_path, dpi=150, bbox_inches='tight')
    plt.close(ax.figure)
    print(f"Saved plot: {plot_path}")


if __name__ == "__main__":
    main()
