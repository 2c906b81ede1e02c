"""
Random-walk text generation over a TransitionTable.

When the walk lands on a token that is unknown or has no successors, the
whole walk is thrown away and started again from the fallback seed
(the sentence boundary 。) with the fallback length. Restarts are capped,
and a fallback seed that is itself a dead end fails immediately.
"""
from __future__ import annotations

import logging
import random
from typing import List, Optional

from wordora.services.markov import TokenStatus, TransitionTable

logger = logging.getLogger(__name__)

FALLBACK_SEED = "。"
FALLBACK_LENGTH = 20
MAX_RESTARTS = 64


class GenerationError(RuntimeError):
    """Generation could not reach the requested length."""

    def __init__(self, message: str, seed: str = "", restarts: int = 0):
        super().__init__(message)
        self.seed = seed
        self.restarts = restarts


class Generator:
    def __init__(
        self,
        table: TransitionTable,
        fallback_seed: str = FALLBACK_SEED,
        fallback_length: int = FALLBACK_LENGTH,
        max_restarts: int = MAX_RESTARTS,
        rng: Optional[random.Random] = None,
    ):
        self.table = table
        self.fallback_seed = fallback_seed
        self.fallback_length = fallback_length
        self.max_restarts = max(1, max_restarts)
        self.rng = rng

    def fallback_ready(self) -> bool:
        return self.table.status(self.fallback_seed) is TokenStatus.ACTIVE

    def _walk(self, seed: str, length: int) -> Optional[List[str]]:
        """One walk; None on a dead end."""
        output = [seed]
        current = seed
        for _ in range(length):
            nxt = self.table.sample_successor(current, self.rng)
            if nxt is None:
                return None
            output.append(nxt)
            current = nxt
        return output

    def generate(self, seed: str, length: int) -> str:
        """
        Walk up to `length` tokens from `seed` and join them with spaces.

        Args:
            seed: Starting token (kept as the first word of the output)
            length: Number of tokens to append after the seed

        Raises:
            GenerationError: the fallback seed is a dead end, or too many
                restarts happened in a row
        """
        restarts = 0
        while True:
            output = self._walk(seed, length)
            if output is not None:
                return " ".join(output)

            if not self.fallback_ready():
                raise GenerationError(
                    f"dead end at seed {seed!r} and fallback {self.fallback_seed!r} "
                    f"has no transitions",
                    seed=seed,
                    restarts=restarts,
                )
            if restarts >= self.max_restarts:
                raise GenerationError(
                    f"gave up after {restarts} restarts",
                    seed=seed,
                    restarts=restarts,
                )

            restarts += 1
            logger.debug(f"[Markov] Dead end from {seed!r}, restart #{restarts}")
            seed, length = self.fallback_seed, self.fallback_length
