"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from .constants import (
    BIRD_START_X, BIRD_START_Y, BIRD_SCALE, BIRD_TEXTURE_WIDTH,
    BIRD_HITBOX_FACTOR, ROTATION_FACTOR, PIPE_SCALE_X, PIPE_SCALE_Y,
    PIPE_TEXTURE_SIZE, PIPE_GAP
)


class RoundState(Enum):
    NOT_STARTED = "not_started"
    FLYING = "flying"
    GAME_OVER = "game_over"


class Orientation(Enum):
    """Which side of the gap a pipe sits on."""
    TOP = "top"
    BOTTOM = "bottom"


class Action(Enum):
    """Discrete player inputs consumed by the engine once per tick."""
    FLAP = "flap"


@dataclass(frozen=True)
class Rect:
    """Axis-aligned float rectangle (pygame.Rect truncates to ints)."""
    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height


@dataclass
class Bird:
    """The player's bird. Reused across rounds."""
    x: float = BIRD_START_X
    y: float = BIRD_START_Y
    velocity: float = 0.0
    width: float = BIRD_TEXTURE_WIDTH * BIRD_SCALE

    @property
    def rotation(self) -> float:
        """Visual tilt in degrees, derived from velocity."""
        return self.velocity * ROTATION_FACTOR

    @property
    def radius(self) -> float:
        return (self.width / 2.0) * BIRD_HITBOX_FACTOR

    def respawn(self):
        self.x = BIRD_START_X
        self.y = BIRD_START_Y
        self.velocity = 0.0


@dataclass
class Pipe:
    """
    One half of an obstacle pair.

    gap_y is the pipe's gap-facing edge: the bottom edge of a TOP pipe,
    the top edge of a BOTTOM pipe.
    """
    x: float
    gap_y: float
    orientation: Orientation
    width: float = PIPE_TEXTURE_SIZE[0] * PIPE_SCALE_X
    height: float = PIPE_TEXTURE_SIZE[1] * PIPE_SCALE_Y

    @property
    def bounds(self) -> Rect:
        """Untrimmed bounding box of the scaled sprite."""
        if self.orientation is Orientation.TOP:
            return Rect(self.x, self.gap_y - self.height, self.width, self.height)
        return Rect(self.x, self.gap_y, self.width, self.height)

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2.0


def make_pipe_pair(x: float, gap_y: float, width: float, height: float) -> Tuple[Pipe, Pipe]:
    """Builds a TOP/BOTTOM pair sharing one gap."""
    top = Pipe(x=x, gap_y=gap_y, orientation=Orientation.TOP, width=width, height=height)
    bottom = Pipe(x=x, gap_y=gap_y + PIPE_GAP, orientation=Orientation.BOTTOM,
                  width=width, height=height)
    return top, bottom


@dataclass
class RoundStats:
    """Score bookkeeping for the current round and the process lifetime."""
    score: int = 0
    high_score: int = 0
    new_record: bool = False

    def record_game_over(self) -> bool:
        """Folds the final score into the high score. Returns the new-record flag."""
        self.new_record = self.score > self.high_score
        if self.new_record:
            self.high_score = self.score
        return self.new_record

    def reset_round(self):
        self.score = 0
        self.new_record = False


@dataclass(frozen=True)
class PipeView:
    x: float
    gap_y: float
    orientation: Orientation
    width: float
    height: float


@dataclass(frozen=True)
class FrameState:
    """Read-only snapshot of everything the presentation layer draws."""
    state: RoundState
    bird_x: float
    bird_y: float
    bird_rotation: float
    pipes: Tuple[PipeView, ...] = field(default_factory=tuple)
    score: int = 0
    high_score: int = 0
    new_record: bool = False

    @property
    def game_over(self) -> bool:
        return self.state is RoundState.GAME_OVER

