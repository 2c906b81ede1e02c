"""
Training corpus loading.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_CORPUS_PATH = Path(__file__).resolve().parent.parent / "data" / "corpus.txt"


def load_corpus(path: Optional[Union[str, Path]] = None) -> str:
    """
    Read a UTF-8 training text.

    Args:
        path: Text file to read; the packaged chat corpus when None

    Returns:
        The file content as one string
    """
    corpus_path = Path(path) if path is not None else DEFAULT_CORPUS_PATH
    if not corpus_path.exists():
        raise FileNotFoundError(f"corpus not found: {corpus_path}")

    text = corpus_path.read_text(encoding="utf-8")
    logger.info(f"[Corpus] Loaded {len(text)} characters from {corpus_path}")
    return text
