"""Logger setup for spgraph.

Every module logs under the ``spgraph`` hierarchy. Heap pushes, pops and
evictions and edge insertions are traced at DEBUG; detected negative cycles
are reported at WARNING. The package logger gets a single stdout handler the
first time a module asks for a logger.
"""

import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = "spgraph"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure(level: int = logging.INFO, stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Attach the spgraph handler to the package logger.

    Does nothing if the package logger already has a handler, so the level and
    stream of the first call stick until reset_logging().

    Args:
        level: Level for the package logger.
        stream: Output stream, stdout by default.

    Returns:
        The ``spgraph`` logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a module (pass __name__); its level follows the package logger."""
    configure()
    return logging.getLogger(name)


def set_log_level(level: int) -> None:
    configure().setLevel(level)


def enable_debug_logging() -> None:
    """Show heap and graph construction traces."""
    set_log_level(logging.DEBUG)


def reset_logging() -> None:
    """Drop the package handler and level (used by tests)."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
