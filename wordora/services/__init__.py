"""
Text generation services: tokenizer, Markov chain, generator and chat bot.
"""

from .tokenizer import chunk_string, first_token, separate_tokens, tokenize, tokenize_seed
from .markov import ChainStats, TokenStatus, TransitionRecord, TransitionTable, train_from_text
from .generator import GenerationError, Generator
from .chatbot import ChatBot, build_chatbot
from .corpus import load_corpus

__all__ = [
    "chunk_string",
    "first_token",
    "separate_tokens",
    "tokenize",
    "tokenize_seed",
    "ChainStats",
    "TokenStatus",
    "TransitionRecord",
    "TransitionTable",
    "train_from_text",
    "GenerationError",
    "Generator",
    "ChatBot",
    "build_chatbot",
    "load_corpus",
]
