"""
First-order Markov chains estimated from observed state sequences.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

import numpy as np

State = str


class MarkovChain:
    """
    Transition counts between string states, trained incrementally.

    States are registered in first-seen order; that order defines the rows and
    columns of `transition_matrix` and the result of `states`.
    """

    def __init__(self) -> None:
        self._index: Dict[State, int] = {}
        self._states: List[State] = []
        self._counts = np.zeros((0, 0), dtype=np.int64)

    def _ensure_state(self, s: State) -> int:
        idx = self._index.get(s)
        if idx is not None:
            return idx
        idx = len(self._states)
        self._index[s] = idx
        self._states.append(s)
        grown = np.zeros((idx + 1, idx + 1), dtype=np.int64)
        grown[:idx, :idx] = self._counts
        self._counts = grown
        return idx

    def train(self, sequence: Sequence[State]) -> None:
        """
        Add the transitions of `sequence` to the counts.

        Every element is registered as a state, even when the sequence has a
        single element and contributes no transition.
        """
        for s in sequence:
            self._ensure_state(s)
        for cur, nxt in zip(sequence, sequence[1:]):
            self._counts[self._index[cur], self._index[nxt]] += 1

    def _row(self, state: State) -> Optional[np.ndarray]:
        idx = self._index.get(state)
        if idx is None:
            return None
        row = self._counts[idx]
        if int(row.sum()) == 0:
            return None
        return row

    def next_distribution(self, current: State) -> Dict[State, float]:
        """
        Empirical distribution of the successor of `current`.

        Returns an empty dict for unknown states and for states never observed
        with a successor.
        """
        row = self._row(current)
        if row is None:
            return {}
        total = float(row.sum())
        return {
            self._states[j]: float(c) / total for j, c in enumerate(row) if c > 0
        }

    def transition_probability(self, src: State, dst: State) -> float:
        row = self._row(src)
        if row is None or dst not in self._index:
            return 0.0
        return float(row[self._index[dst]]) / float(row.sum())

    def sample_next(self, current: State, rng: np.random.Generator) -> Optional[State]:
        row = self._row(current)
        if row is None:
            return None
        probs = row.astype(float) / float(row.sum())
        return self._states[int(rng.choice(len(self._states), p=probs))]

    def generate(self, start: State, length: int, rng: np.random.Generator) -> List[State]:
        """
        Walk the chain from `start` for up to `length` states.

        The walk stops early at a state with no observed successor. `start`
        itself is always the first element when `length` is positive.
        """
        if int(length) <= 0:
            return []
        out: List[State] = [start]
        while len(out) < int(length):
            nxt = self.sample_next(out[-1], rng)
            if nxt is None:
                break
            out.append(nxt)
        return out

    def states(self) -> List[State]:
        return list(self._states)

    def counts(self) -> np.ndarray:
        return self._counts.copy()

    def transition_matrix(self) -> np.ndarray:
        """
        Row-normalized transition matrix; rows of dead-end states are zero.
        """
        counts = self._counts.astype(float)
        sums = counts.sum(axis=1, keepdims=True)
        out = np.zeros_like(counts)
        np.divide(counts, sums, out=out, where=sums > 0)
        return out
