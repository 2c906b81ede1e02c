"""
Logging helpers shared by the app, the CLI and the routers.

A single stream handler lives on the package logger `wordora`. Service
modules use plain logging.getLogger(__name__) and reach it through
propagation, so one level setting covers the whole package.
"""
import logging
import sys
from typing import Optional, Set, Union

from wordora.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ROOT_LOGGER = "wordora"

# Loggers whose level was set explicitly through setup_logger
_configured: Set[str] = set()


def _resolve_level(level: Union[str, int, None]) -> int:
    if level is None:
        level = settings.LOG_LEVEL
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO


def _attach_handler(logger: logging.Logger):
    if not any(getattr(h, "_wordora", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        handler._wordora = True  # type: ignore[attr-defined]
        logger.addHandler(handler)


def _in_package(name: str) -> bool:
    return name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + ".")


def setup_logger(name: str, level: Union[str, int, None] = None) -> logging.Logger:
    """
    Get a logger that writes through the package handler.

    Args:
        name: Logger name (usually __name__)
        level: Level name or number; defaults to settings.LOG_LEVEL

    Returns:
        Configured logger
    """
    package = logging.getLogger(ROOT_LOGGER)
    _attach_handler(package)
    if package.level == logging.NOTSET:
        package.setLevel(_resolve_level(None))

    logger = logging.getLogger(name)
    logger.setLevel(_resolve_level(level))
    _configured.add(name)

    # e.g. "__main__" when a module is run as a script
    if not _in_package(name):
        _attach_handler(logger)

    return logger


def set_level(level: Optional[str]) -> None:
    """Change the level of the package logger and every logger set up here."""
    if not level:
        return
    resolved = _resolve_level(level)
    logging.getLogger(ROOT_LOGGER).setLevel(resolved)
    for name in _configured:
        logging.getLogger(name).setLevel(resolved)
