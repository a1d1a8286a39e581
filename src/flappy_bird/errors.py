"""
errors.py: Exception types raised by the game.
"""

from pathlib import Path


class FlappyError(Exception):
    """Base class for game errors."""


class AssetLoadError(FlappyError):
    """A required sprite or font could not be loaded."""

    def __init__(self, path: Path, reason: str = "not found"):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not load resource {self.path.name} ({self.path}): {reason}")
