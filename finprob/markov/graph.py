"""
Graph export for Markov chains.

Converts observed transitions into a directed networkx graph, so standard
graph algorithms (reachability, strongly connected components) can be used to
inspect the chain's structure.
"""

from __future__ import annotations

from typing import List

from finprob.markov.chain import MarkovChain

try:
    import networkx as nx
except ImportError as exc:  # pragma: no cover
    raise ImportError(
        "Transition graphs require networkx. Install with: pip install networkx"
    ) from exc


class TransitionGraphBuilder:
    """
    Builds networkx graphs from trained Markov chains.

    Nodes are states. Edges are observed transitions and carry:
      - "weight": transition probability,
      - "count": number of observed transitions.
    """

    def __init__(self, chain: MarkovChain) -> None:
        self.chain = chain

    def build(self, *, min_probability: float = 0.0) -> nx.DiGraph:
        """
        Build the transition graph.

        Args:
            min_probability: Skip edges whose transition probability is below
                this threshold.

        Returns:
            Directed graph with one node per state.
        """
        graph = nx.DiGraph()
        states = self.chain.states()
        graph.add_nodes_from(states)

        counts = self.chain.counts()
        probs = self.chain.transition_matrix()
        for i, src in enumerate(states):
            for j, dst in enumerate(states):
                if counts[i, j] <= 0 or probs[i, j] < float(min_probability):
                    continue
                graph.add_edge(
                    src,
                    dst,
                    weight=float(probs[i, j]),
                    count=int(counts[i, j]),
                )
        return graph

    def absorbing_states(self) -> List[str]:
        """States with no observed successor (where generation stops)."""
        graph = self.build()
        return [n for n in graph.nodes() if graph.out_degree(n) == 0]

    def communicating_classes(self) -> List[List[str]]:
        """
        Strongly connected components of the transition graph, each sorted,
        largest first.
        """
        graph = self.build()
        classes = [sorted(c) for c in nx.strongly_connected_components(graph)]
        classes.sort(key=lambda c: (-len(c), c))
        return classes
