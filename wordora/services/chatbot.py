"""
ChatBot: tokenizer + transition table + generator behind one object.
"""
from __future__ import annotations

import logging
import random
from typing import Optional

from wordora.services.generator import (
    FALLBACK_LENGTH,
    FALLBACK_SEED,
    MAX_RESTARTS,
    Generator,
)
from wordora.services.markov import ChainStats, TransitionTable
from wordora.services.tokenizer import SEED_WIDTH, TRAIN_WIDTH, first_token, tokenize

logger = logging.getLogger(__name__)


class ChatBot:
    """
    Markov chat bot.

    Learns from a corpus once, then answers each user line with a random
    walk seeded from the first chunk of that line.
    """

    def __init__(
        self,
        train_width: int = TRAIN_WIDTH,
        seed_width: int = SEED_WIDTH,
        reply_length: int = 20,
        fallback_seed: str = FALLBACK_SEED,
        fallback_length: int = FALLBACK_LENGTH,
        max_restarts: int = MAX_RESTARTS,
        rng: Optional[random.Random] = None,
    ):
        self.train_width = train_width
        self.seed_width = seed_width
        self.reply_length = reply_length
        self.table = TransitionTable()
        self.generator = Generator(
            self.table,
            fallback_seed=fallback_seed,
            fallback_length=fallback_length,
            max_restarts=max_restarts,
            rng=rng,
        )

    @classmethod
    def from_settings(cls, settings) -> "ChatBot":
        rng = random.Random(settings.RANDOM_SEED) if settings.RANDOM_SEED is not None else None
        return cls(
            train_width=settings.TRAIN_CHUNK_WIDTH,
            seed_width=settings.SEED_CHUNK_WIDTH,
            reply_length=settings.REPLY_LENGTH,
            fallback_seed=settings.FALLBACK_SEED,
            fallback_length=settings.FALLBACK_LENGTH,
            max_restarts=settings.MAX_RESTARTS,
            rng=rng,
        )

    @property
    def is_trained(self) -> bool:
        return len(self.table) > 0

    def train(self, text: str) -> "ChatBot":
        tokens = tokenize(text, self.train_width)
        self.table.learn(tokens)
        logger.info(f"[Markov] Trained on {len(tokens)} tokens, vocab={len(self.table)}")

        if not self.generator.fallback_ready():
            logger.warning(
                f"[Markov] Fallback seed {self.generator.fallback_seed!r} has no transitions; "
                "dead ends will raise instead of restarting"
            )
        return self

    def seed_for(self, user_input: str) -> str:
        return first_token(user_input, self.seed_width)

    def reply(self, user_input: str, length: Optional[int] = None) -> str:
        """
        Generate a reply to one user line.

        Empty or untokenizable input seeds with "", which is unknown to the
        table, so the reply comes from the fallback restart.
        """
        seed = self.seed_for(user_input)
        return self.generator.generate(seed, self.reply_length if length is None else length)

    def stats(self, top_n: int = 10) -> ChainStats:
        return self.table.stats(top_n)


def build_chatbot(text: str, **kwargs) -> ChatBot:
    return ChatBot(**kwargs).train(text)
