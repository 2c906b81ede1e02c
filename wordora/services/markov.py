"""
First-order Markov chain over tokens (CPU-only).
Each token maps to the list of tokens that followed it in training,
duplicates kept so that multiplicity encodes frequency.
Training: from a token sequence or raw text; no persistence.
"""
from __future__ import annotations

import logging
import random
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from wordora.services.tokenizer import TRAIN_WIDTH, tokenize

logger = logging.getLogger(__name__)


class TokenStatus(str, Enum):
    """Where a token stands in the chain."""
    UNKNOWN = "unknown"
    TERMINAL = "terminal"
    ACTIVE = "active"


@dataclass
class TransitionRecord:
    """A token and every successor observed after it."""
    word: str
    successors: List[str] = field(default_factory=list)
    counts: Counter = field(default_factory=Counter)

    def add_transition(self, token: str):
        self.successors.append(token)
        self.counts[token] += 1

    @property
    def is_terminal(self) -> bool:
        return not self.successors


@dataclass
class ChainStats:
    """Summary of a trained chain."""
    vocab_size: int = 0
    transition_count: int = 0
    terminal_tokens: List[str] = field(default_factory=list)
    top_tokens: List[Tuple[str, int]] = field(default_factory=list)


class TransitionTable:
    def __init__(self):
        self.records: Dict[str, TransitionRecord] = {}

    def _record(self, token: str) -> TransitionRecord:
        record = self.records.get(token)
        if record is None:
            record = TransitionRecord(token)
            self.records[token] = record
        return record

    def learn(self, tokens: Iterable[str]):
        """
        Add every adjacent (token, next) pair to the table.

        The last token gets a record but no successor. Learning the same
        sequence twice doubles its counts.
        """
        tokens = list(tokens)
        for i, token in enumerate(tokens):
            record = self._record(token)
            if i + 1 < len(tokens):
                record.add_transition(tokens[i + 1])

        logger.debug(f"[Markov] Learned {len(tokens)} tokens, vocab={len(self.records)}")
        return self

    def learn_text(self, text: str, width: int = TRAIN_WIDTH):
        return self.learn(tokenize(text, width))

    def status(self, token: str) -> TokenStatus:
        record = self.records.get(token)
        if record is None:
            return TokenStatus.UNKNOWN
        if record.is_terminal:
            return TokenStatus.TERMINAL
        return TokenStatus.ACTIVE

    def sample_successor(self, token: str, rng: Optional[random.Random] = None) -> Optional[str]:
        """
        Pick the next token, weighted by observation count.

        Returns None when the token is unknown or terminal.
        """
        record = self.records.get(token)
        if record is None or record.is_terminal:
            return None

        choices = list(record.counts.keys())
        weights = list(record.counts.values())
        return (rng or random).choices(choices, weights=weights, k=1)[0]

    def successors(self, token: str) -> List[str]:
        record = self.records.get(token)
        return list(record.successors) if record else []

    def get(self, token: str) -> Optional[TransitionRecord]:
        return self.records.get(token)

    def stats(self, top_n: int = 10) -> ChainStats:
        totals: Counter = Counter()
        for record in self.records.values():
            totals.update(record.counts)

        return ChainStats(
            vocab_size=len(self.records),
            transition_count=sum(totals.values()),
            terminal_tokens=sorted(w for w, r in self.records.items() if r.is_terminal),
            top_tokens=totals.most_common(top_n),
        )

    def __contains__(self, token: object) -> bool:
        return token in self.records

    def __len__(self) -> int:
        return len(self.records)


def train_from_text(text: str, width: int = TRAIN_WIDTH) -> TransitionTable:
    table = TransitionTable()
    table.learn_text(text, width)
    return table
