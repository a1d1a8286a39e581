"""
logger.py: Logging setup for the game.
"""

import logging
import sys

ROOT_LOGGER = "flappy_bird"
LOG_FORMAT = "%(asctime)s [%(levelname).1s] %(name)s: %(message)s"


def setup_logging(level: str = "info"):
    """Configure the flappy_bird root logger."""
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    root.addHandler(console)


def get_logger(name: str) -> logging.Logger:
    """Return a child logger under the flappy_bird namespace."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
