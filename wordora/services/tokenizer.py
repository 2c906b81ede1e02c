"""
Mixed-script tokenizer for Japanese/English chat text.

Japanese has no spaces between words, so tokens are cut at script
boundaries instead:
- Kanji runs
- Hiragana runs
- Katakana runs (with the prolonged sound mark ー)
- ASCII letters together with the full-width 。 and 、

Everything else (spaces, digits, emoji, other punctuation) is dropped and
acts as a separator. Each run is then cut into fixed-width chunks so the
Markov chain keys on short, frequently repeated strings.
"""
from __future__ import annotations

import re
from typing import List

SCRIPT_RUN = re.compile(r"[一-龯]+|[ぁ-ん]+|[ァ-ヴー]+|[。、a-zA-Z]+")

TRAIN_WIDTH = 5
SEED_WIDTH = 3


def separate_tokens(text: str) -> List[str]:
    """Split text into script-homogeneous runs, left to right."""
    runs = SCRIPT_RUN.findall(text)
    return " ".join(runs).split()


def chunk_string(text: str, width: int) -> List[str]:
    """
    Cut text into consecutive pieces of at most `width` characters.

    Works on code points, so multi-byte scripts are never split mid-character.
    """
    if width < 1:
        raise ValueError(f"chunk width must be positive, got {width}")
    return [text[i : i + width] for i in range(0, len(text), width)]


def tokenize(text: str, width: int = TRAIN_WIDTH) -> List[str]:
    """Tokenize training text: script runs, each chunked by `width`."""
    tokens: List[str] = []
    for run in separate_tokens(text):
        tokens.extend(chunk_string(run, width))
    return tokens


def tokenize_seed(text: str, width: int = SEED_WIDTH) -> List[str]:
    """
    Tokenize user input for seeding generation.

    Runs are glued back together before chunking, so "今日は" seeds with
    "今日は" rather than "今日".
    """
    return chunk_string("".join(separate_tokens(text)), width)


def first_token(text: str, width: int = SEED_WIDTH) -> str:
    """First seed token of `text`, or "" when nothing survives tokenizing."""
    tokens = tokenize_seed(text, width)
    return tokens[0] if tokens else ""
