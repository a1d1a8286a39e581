"""
physics_core.py: Deterministic bird kinematics, hitbox geometry and collision logic.
"""

import math
from typing import Iterable, Tuple

from .constants import (
    GRAVITY, JUMP_IMPULSE, SCREEN_HEIGHT, PIPE_SIDE_TRIM, PIPE_GAP_TRIM
)
from .data_models import Bird, Pipe, Rect, Orientation

Point = Tuple[float, float]


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p1[0] - p2[0], p1[1] - p2[1])


def pipe_hitbox(pipe: Pipe, side_trim: float = PIPE_SIDE_TRIM,
                gap_trim: float = PIPE_GAP_TRIM) -> Rect:
    """
    Trims a pipe's sprite bounds down to its visible body.

    The sprite has transparent padding on both sides and a lip at the
    gap-facing end. Only the gap-facing edge is trimmed vertically: a TOP
    pipe loses height at its bottom, a BOTTOM pipe has its top pushed down.
    Trim values are fixed pixels for the default sprite scale.
    """
    bounds = pipe.bounds
    left = bounds.left + side_trim
    width = bounds.width - side_trim * 2
    top = bounds.top
    height = bounds.height - gap_trim

    if pipe.orientation is Orientation.BOTTOM:
        top += gap_trim

    return Rect(left, top, width, height)


class PhysicsCore:
    """
    Shared deterministic physics used by the game engine.
    """

    SCREEN_HEIGHT = SCREEN_HEIGHT

    def apply_gravity_and_movement(self, bird: Bird):
        """Advances the bird by one tick."""
        bird.velocity += GRAVITY
        bird.y += bird.velocity

    def flap(self) -> float:
        """Returns the velocity after a flap."""
        return JUMP_IMPULSE

    def out_of_bounds(self, bird: Bird) -> bool:
        return bird.y < 0 or bird.y > self.SCREEN_HEIGHT

    def check_collision(self, bird: Bird, pipe: Pipe) -> bool:
        """Circle (bird) against trimmed rectangle (pipe)."""
        rect = pipe_hitbox(pipe)
        closest_x = max(rect.left, min(bird.x, rect.right))
        closest_y = max(rect.top, min(bird.y, rect.bottom))
        return distance((bird.x, bird.y), (closest_x, closest_y)) < bird.radius

    def collides_any(self, bird: Bird, pipes: Iterable[Pipe]) -> bool:
        return any(self.check_collision(bird, pipe) for pipe in pipes)
