"""
Wordora: a Markov chain chat bot for mixed Japanese/English text.
"""

__version__ = "0.1.0"
