"""
pipe_manager.py: Spawning, scrolling, scoring and recycling of pipe pairs.
"""

import random
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Iterator, Optional, Tuple

from .constants import (
    PIPE_SPAWN_X, PIPE_GAP_MIN_Y, PIPE_GAP_RANGE, PIPE_SPEED,
    PIPE_SPAWN_INTERVAL, PIPE_TEXTURE_SIZE, PIPE_SCALE_X, PIPE_SCALE_Y
)
from .data_models import Pipe, Orientation, make_pipe_pair
from .logger import get_logger

log = get_logger("pipes")


@dataclass
class PipeManager:
    """
    Owns the active pipes in spawn order.

    All pipes move at the same speed and only ever enter at PIPE_SPAWN_X, so
    spawn order is also left-to-right order. Off-screen pipes are therefore
    always at the front of the deque.
    """
    pipe_width: float = PIPE_TEXTURE_SIZE[0] * PIPE_SCALE_X
    pipe_height: float = PIPE_TEXTURE_SIZE[1] * PIPE_SCALE_Y
    rng: random.Random = field(default_factory=random.Random)
    pipes: Deque[Pipe] = field(default_factory=deque)
    spawn_elapsed: float = 0.0

    def __iter__(self) -> Iterator[Pipe]:
        return iter(self.pipes)

    def __len__(self) -> int:
        return len(self.pipes)

    def random_gap_y(self) -> float:
        return float(self.rng.randrange(PIPE_GAP_MIN_Y, PIPE_GAP_MIN_Y + PIPE_GAP_RANGE))

    def spawn(self, gap_y: Optional[float] = None) -> Tuple[Pipe, Pipe]:
        """Adds a TOP/BOTTOM pair at the right edge of the play area."""
        if gap_y is None:
            gap_y = self.random_gap_y()
        pair = make_pipe_pair(PIPE_SPAWN_X, gap_y, self.pipe_width, self.pipe_height)
        self.pipes.extend(pair)
        self.spawn_elapsed = 0.0
        log.debug("Spawned pipe pair with gap at y=%.1f", gap_y)
        return pair

    def tick_clock(self, dt: float):
        """Accumulates simulated time since the last spawn."""
        self.spawn_elapsed += dt

    def maybe_spawn(self) -> bool:
        """
        Spawns a pair once the interval has strictly elapsed. The clock
        restarts from zero only on a spawn.
        """
        if self.spawn_elapsed > PIPE_SPAWN_INTERVAL:
            self.spawn()
            return True
        return False

    def tick_spawn_timer(self, dt: float) -> bool:
        self.tick_clock(dt)
        return self.maybe_spawn()

    def advance(self):
        """Moves every pipe left by one tick's worth of travel."""
        for pipe in self.pipes:
            pipe.x -= PIPE_SPEED

    def score_crossings(self, bird_x: float) -> int:
        """
        Counts pairs whose centre crossed bird_x on this tick.

        Only BOTTOM pipes are counted so each pair scores once. The window
        (bird_x - PIPE_SPEED, bird_x] is exactly one tick of travel wide.
        """
        window_start = bird_x - PIPE_SPEED
        return sum(
            1 for pipe in self.pipes
            if pipe.orientation is Orientation.BOTTOM
            and window_start < pipe.center_x <= bird_x
        )

    def reap(self) -> int:
        """Drops pipes that have fully left the screen. Returns how many."""
        removed = 0
        while self.pipes and self.pipes[0].x + self.pipes[0].width < 0:
            self.pipes.popleft()
            removed += 1
        return removed

    def clear(self):
        """Empties the pipes. The spawn clock keeps running."""
        self.pipes.clear()
