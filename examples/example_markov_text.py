"""
Markov text generation at word and character level.

A small corpus is used to train both models; generated text, the most likely
successors of a word, and the chain's communicating classes are printed.
"""

from __future__ import annotations

import os

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np

from finprob.markov import MarkovTextModel, TokenLevel, TransitionGraphBuilder
from finprob.visualization import MarkovVisualizer

CORPUS = (
    "The cat sat on the mat. The dog sat on the log. "
    "The cat saw the dog, and the dog saw the cat! "
    "Don't let the cat sit on the dog's mat."
)


def _get_results_dir() -> str:
    """Determine the results directory path."""
    results_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), '..', 'results')
    os.makedirs(results_dir, exist_ok=True)
    return results_dir


def main() -> None:
    rng = np.random.default_rng(123)

    words = MarkovTextModel(TokenLevel.WORD)
    words.train_from_text(CORPUS)
    print("Vocabulary size:", len(words.chain.states()))
    print("Successors of 'the':")
    succ = sorted(words.chain.next_distribution("the").items(), key=lambda kv: -kv[1])
    for token, p in succ:
        print(f"  {token!r}: {p:.3f}")
    print("Generated (word level):", words.generate_text(20, rng, "The"))

    chars = MarkovTextModel(TokenLevel.CHARACTER)
    chars.train_from_text(CORPUS)
    print("Generated (character level):", repr(chars.generate_text(60, rng, "T")))

    builder = TransitionGraphBuilder(words.chain)
    graph = builder.build()
    print(f"Transition graph: {graph.number_of_nodes()} nodes, {graph.number_of_edges()} edges")
    print("Absorbing states:", builder.absorbing_states())
    print("Largest communicating class:", builder.communicating_classes()[0])

    small = MarkovTextModel(TokenLevel.WORD)
    small.train_from_text("The cat sat on the mat. The dog sat on the log.")
    results_dir = _get_results_dir()
    ax = MarkovVisualizer.plot_transition_matrix(small.chain)
    plot_path = os.path.join(results_dir, "example_markov_text_transitions.png")
    ax.figure.savefig(plot_path, dpi=150, bbox_inches='tight')
    plt.close(ax.figure)
    print(f"Saved plot: {plot_path}")


if __name__ == "__main__":
    main()
