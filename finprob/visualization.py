"""
Visualization tools for probability spaces and simulations.

This module provides plotting helpers for law-of-large-numbers paths,
empirical versus theoretical CDFs, Markov transition matrices and event
probabilities over the atoms of a sigma-algebra.
"""

from __future__ import annotations

from typing import Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np

from finprob.distributions import Distribution
from finprob.lln import LLNPathResult
from finprob.markov.chain import MarkovChain
from finprob.measure import ProbabilityMeasure
from finprob.sigma_algebra import SigmaAlgebra


class ConvergenceVisualizer:
    """
    Visualizations for law-of-large-numbers simulations.
    """

    @staticmethod
    def plot_lln_path(
        result: LLNPathResult,
        theoretical_mean: Optional[float] = None,
        ax: Optional[plt.Axes] = None,
        title: str = "Running sample mean",
    ) -> plt.Axes:
        """
        Plot the running sample mean against the number of draws.

        Args:
            result: Simulated path.
            theoretical_mean: If given and finite, drawn as a horizontal line.
            ax: Matplotlib axes to plot on. If None, creates new figure.
            title: Axes title.

        Returns:
            Matplotlib axes object.

        Raises:
            ValueError: If the path has no entries.
        """
        if not result.entries:
            raise ValueError("LLN path has no entries to plot")
        if ax is None:
            _, ax = plt.subplots(figsize=(8, 4))

        ax.plot(result.sample_counts(), result.sample_means(), marker="o", label="sample mean")
        if theoretical_mean is not None and np.isfinite(theoretical_mean):
            ax.axhline(float(theoretical_mean), color="black", linestyle="--", label="theoretical mean")
        ax.set_xlabel("n")
        ax.set_ylabel("Mean")
        ax.set_title(title)
        ax.legend()
        return ax


class DistributionVisualizer:
    """
    Visualizations comparing samples with theoretical distributions.
    """

    @staticmethod
    def plot_ecdf(
        dist: Distribution,
        grid: Sequence[float],
        empirical_cdf: Sequence[float],
        ax: Optional[plt.Axes] = None,
        title: str = "Empirical vs theoretical CDF",
    ) -> plt.Axes:
        """
        Plot an empirical CDF as steps next to the distribution's CDF.
        """
        if len(grid) != len(empirical_cdf):
            raise ValueError("grid and empirical_cdf must have the same length")
        if ax is None:
            _, ax = plt.subplots(figsize=(8, 4))

        x = np.asarray(grid, dtype=float)
        ax.step(x, np.asarray(empirical_cdf, dtype=float), where="post", label="empirical")
        ax.plot(x, [dist.cdf(float(v)) for v in x], label="theoretical")
        ax.set_ylim(0.0, 1.0)
        ax.set_xlabel("x")
        ax.set_ylabel("F(x)")
        ax.set_title(title)
        ax.legend()
        return ax


class MarkovVisualizer:
    """
    Visualizations for Markov chains.
    """

    @staticmethod
    def plot_transition_matrix(
        chain: MarkovChain,
        ax: Optional[plt.Axes] = None,
        title: str = "Transition probabilities",
    ) -> plt.Axes:
        states = chain.states()
        if not states:
            raise ValueError("Chain has no states to plot")
        if ax is None:
            _, ax = plt.subplots(figsize=(8, 6))

        im = ax.imshow(chain.transition_matrix(), cmap="Blues", vmin=0.0, vmax=1.0, aspect="auto")
        ax.set_xticks(np.arange(len(states)))
        ax.set_yticks(np.arange(len(states)))
        ax.set_xticklabels(states)
        ax.set_yticklabels(states)
        ax.set_xlabel("Next state")
        ax.set_ylabel("Current state")
        ax.set_title(title)

        plt.colorbar(im, ax=ax, label="Probability")
        return ax


class EventVisualizer:
    """
    Visualizations for measures over sigma-algebras.
    """

    @staticmethod
    def plot_atom_probabilities(
        algebra: SigmaAlgebra,
        measure: ProbabilityMeasure,
        ax: Optional[plt.Axes] = None,
        title: str = "Probability of sigma-algebra atoms",
    ) -> plt.Axes:
        """
        Bar chart of P(atom) for each atom of `algebra`, labelled by outcome names.
        """
        if ax is None:
            _, ax = plt.subplots(figsize=(10, 4))

        names = algebra.outcome_space.outcomes
        atoms = algebra.atoms()
        labels = ["{" + ",".join(names[i] for i in a.outcome_ids()) + "}" for a in atoms]
        values = [measure.probability(a) for a in atoms]

        ax.bar(labels, values, alpha=0.8)
        ax.set_ylim(0.0, 1.0)
        ax.set_ylabel("Probability")
        ax.set_title(title)
        return ax
