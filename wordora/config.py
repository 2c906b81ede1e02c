"""
Wordora Configuration
"""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # ===== Service =====
    SERVICE_NAME: str = Field(default="wordora", env="SERVICE_NAME")  # type: ignore
    SERVICE_VERSION: str = Field(default="0.1.0", env="SERVICE_VERSION")  # type: ignore
    HOST: str = Field(default="0.0.0.0", env="HOST")  # type: ignore
    PORT: int = Field(default=8000, env="PORT")  # type: ignore
    LOG_LEVEL: str = Field(default="info", env="LOG_LEVEL")  # type: ignore
    DEBUG: bool = Field(default=False, env="DEBUG")  # type: ignore

    # ===== Corpus =====
    # None means the packaged wordora/data/corpus.txt
    CORPUS_PATH: Optional[str] = Field(default=None, env="CORPUS_PATH")  # type: ignore
    PRELOAD_CORPUS: bool = Field(default=True, env="PRELOAD_CORPUS")  # type: ignore

    # ===== Tokenizer =====
    TRAIN_CHUNK_WIDTH: int = Field(default=5, ge=1, env="TRAIN_CHUNK_WIDTH")  # type: ignore
    SEED_CHUNK_WIDTH: int = Field(default=3, ge=1, env="SEED_CHUNK_WIDTH")  # type: ignore

    # ===== Generation =====
    REPLY_LENGTH: int = Field(default=20, ge=0, env="REPLY_LENGTH")  # type: ignore
    MAX_GENERATE_LENGTH: int = Field(default=1000, ge=0, env="MAX_GENERATE_LENGTH")  # type: ignore
    FALLBACK_SEED: str = Field(default="。", env="FALLBACK_SEED")  # type: ignore
    FALLBACK_LENGTH: int = Field(default=20, ge=0, env="FALLBACK_LENGTH")  # type: ignore
    MAX_RESTARTS: int = Field(default=64, ge=1, env="MAX_RESTARTS")  # type: ignore
    RANDOM_SEED: Optional[int] = Field(default=None, env="RANDOM_SEED")  # type: ignore

    # ===== Console =====
    EXIT_COMMAND: str = Field(default="exit", env="EXIT_COMMAND")  # type: ignore
    PROMPT: str = Field(default="あなた: ", env="PROMPT")  # type: ignore
    REPLY_LABEL: str = Field(default="Bot: ", env="REPLY_LABEL")  # type: ignore
    BANNER: str = Field(default="🔹 Wordora Markov ChatBot 🔹", env="BANNER")  # type: ignore

    # >>> pydantic v2 settings config <<<
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
