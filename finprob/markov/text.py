"""
Markov text generation at character or word granularity.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List

import numpy as np

from finprob.markov.chain import MarkovChain

logger = logging.getLogger(__name__)


class TokenLevel(Enum):
    CHARACTER = "character"
    WORD = "word"


def _is_word_char(c: str) -> bool:
    return c.isalnum() or c == "'"


class MarkovTextModel:
    """
    A Markov chain over text tokens.

    At word level, a token is a maximal run of alphanumerics and apostrophes,
    or a single punctuation character. Whitespace only separates tokens.
    At character level every character, whitespace included, is a token.
    """

    def __init__(self, level: TokenLevel = TokenLevel.WORD) -> None:
        self.level = TokenLevel(level)
        self._chain = MarkovChain()

    @property
    def chain(self) -> MarkovChain:
        return self._chain

    def train_from_text(self, text: str) -> None:
        self._chain.train(self.tokenize(text))

    def generate_text(
        self,
        num_tokens: int,
        rng: np.random.Generator,
        start_token: str = "",
    ) -> str:
        """
        Generate up to `num_tokens` tokens and join them back into text.

        An empty `start_token` starts from the first state seen in training.
        An unknown one does the same, with a warning.
        """
        if int(num_tokens) <= 0:
            return ""
        states = self._chain.states()
        if not states:
            return ""
        start = start_token
        if not start:
            start = states[0]
        elif start not in states:
            logger.warning(
                "start token %r not in vocabulary; starting from %r", start, states[0]
            )
            start = states[0]
        return self.detokenize(self._chain.generate(start, int(num_tokens), rng))

    def tokenize(self, text: str) -> List[str]:
        if self.level is TokenLevel.CHARACTER:
            return list(text)

        tokens: List[str] = []
        word: List[str] = []
        for c in text:
            if _is_word_char(c):
                word.append(c)
                continue
            if word:
                tokens.append("".join(word))
                word = []
            if not c.isspace():
                tokens.append(c)
        if word:
            tokens.append("".join(word))
        return tokens

    def detokenize(self, tokens: List[str]) -> str:
        if not tokens:
            return ""
        if self.level is TokenLevel.CHARACTER:
            return "".join(tokens)

        parts = [tokens[0]]
        for t in tokens[1:]:
            # Punctuation attaches to the preceding token.
            if len(t) == 1 and not _is_word_char(t):
                parts.append(t)
            else:
                parts.append(" " + t)
        return "".join(parts)
