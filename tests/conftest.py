"""
Shared pytest fixtures for Markov chat bot tests.
"""
import random
from pathlib import Path

import pytest

from wordora.services.chatbot import ChatBot
from wordora.services.markov import TransitionTable


# Small mixed-script conversation corpus
SAMPLE_CORPUS = (
    "今日は天気がいいですね。天気が悪い日もあります。明日はどうなるでしょうか？\n"
    "最近、友達とカフェに行きました。☕ 美味しいケーキを食べて、とても楽しかったです！\n"
    "I love listening to music while working. 🎧 It helps me focus.\n"
    "仕事中に音楽を聴くのが好きです。集中するのに役立ちます。\n"
)


@pytest.fixture
def sample_corpus() -> str:
    """Sample mixed Japanese/English training text."""
    return SAMPLE_CORPUS


@pytest.fixture
def rng() -> random.Random:
    """Seeded random generator for reproducible walks."""
    return random.Random(1234)


@pytest.fixture
def trained_table(sample_corpus) -> TransitionTable:
    """Transition table learned from the sample corpus."""
    table = TransitionTable()
    table.learn_text(sample_corpus)
    return table


@pytest.fixture
def chatbot(sample_corpus, rng) -> ChatBot:
    """Chat bot trained on the sample corpus."""
    return ChatBot(rng=rng).train(sample_corpus)


@pytest.fixture
def corpus_path(sample_corpus, tmp_path) -> Path:
    """Write the sample corpus to a temporary file."""
    file_path = tmp_path / "corpus.txt"
    file_path.write_text(sample_corpus, encoding="utf-8")
    return file_path

