"""
Markov chains over discrete states and a Markov text model built on them.

These models are independent of the probability-space types in `finprob`;
they estimate transition probabilities from observed sequences.
"""

from finprob.markov.chain import MarkovChain
from finprob.markov.graph import TransitionGraphBuilder
from finprob.markov.text import MarkovTextModel, TokenLevel

__all__ = [
    "MarkovChain",
    "MarkovTextModel",
    "TokenLevel",
    "TransitionGraphBuilder",
]
