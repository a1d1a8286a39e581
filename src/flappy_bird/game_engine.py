"""
game_engine.py: The single-player simulation step and round bookkeeping.
"""

import random
from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

from .constants import TICK_TIME
from .data_models import (
    Action, Bird, FrameState, PipeView, RoundState, RoundStats
)
from .logger import get_logger
from .physics_core import PhysicsCore
from .pipe_manager import PipeManager

log = get_logger("engine")


@dataclass
class GameEngine(PhysicsCore):
    """
    Owns the bird, the pipes and the round state.
    Inherits kinematics and collision from PhysicsCore.
    """
    bird: Bird = field(default_factory=Bird)
    pipes: PipeManager = field(default_factory=PipeManager)
    stats: RoundStats = field(default_factory=RoundStats)
    state: RoundState = RoundState.NOT_STARTED
    tick_count: int = 0

    @classmethod
    def create(cls, bird_width: Optional[float] = None,
               pipe_size: Optional[Tuple[float, float]] = None,
               seed: Optional[int] = None) -> "GameEngine":
        """Builds an engine sized to the loaded sprites."""
        bird = Bird() if bird_width is None else Bird(width=bird_width)
        manager = PipeManager(rng=random.Random(seed))
        if pipe_size is not None:
            manager.pipe_width, manager.pipe_height = pipe_size
        return cls(bird=bird, pipes=manager)

    @property
    def score(self) -> int:
        return self.stats.score

    @property
    def high_score(self) -> int:
        return self.stats.high_score

    @property
    def new_record(self) -> bool:
        return self.stats.new_record

    def step(self, actions: Iterable[Action] = (), dt: float = TICK_TIME):
        """
        The main simulation step. Order matters: input, bird, bounds,
        spawn, pipes, then game-over bookkeeping.

        The spawn clock runs on every tick, including the waiting and
        game-over screens; only the spawn check is limited to flight.
        """
        self.tick_count += 1
        self.pipes.tick_clock(dt)
        crashed = False

        # 1. Input
        for action in actions:
            if action is Action.FLAP:
                self._handle_flap()

        if self.state is RoundState.FLYING:
            # 2. Bird physics
            self.apply_gravity_and_movement(self.bird)

            # 3. Floor/Ceiling
            if self.out_of_bounds(self.bird):
                crashed = True
            else:
                # 4. Spawn
                self.pipes.maybe_spawn()

                # 5. Move, collide, score, recycle
                self.pipes.advance()
                crashed = self.collides_any(self.bird, self.pipes)
                self.stats.score += self.pipes.score_crossings(self.bird.x)
                self.pipes.reap()

        # 6. Game over bookkeeping, once per transition
        if crashed:
            self.state = RoundState.GAME_OVER
            self.stats.record_game_over()
            log.info("Game over: score=%d best=%d new_record=%s",
                     self.stats.score, self.stats.high_score, self.stats.new_record)

    def _handle_flap(self):
        if self.state is RoundState.GAME_OVER:
            self.reset()
        elif self.state is RoundState.NOT_STARTED:
            self.state = RoundState.FLYING
            self.bird.velocity = self.flap()
            log.info("Round started")
        else:
            self.bird.velocity = self.flap()

    def reset(self):
        """Restart transition: back to NOT_STARTED with a fresh round."""
        self.bird.respawn()
        self.pipes.clear()
        self.stats.reset_round()
        self.state = RoundState.NOT_STARTED
        log.debug("Round reset (best=%d)", self.stats.high_score)

    def snapshot(self) -> FrameState:
        """Prepares an immutable view of the current state for rendering."""
        return FrameState(
            state=self.state,
            bird_x=self.bird.x,
            bird_y=self.bird.y,
            bird_rotation=self.bird.rotation,
            pipes=tuple(
                PipeView(p.x, p.gap_y, p.orientation, p.width, p.height)
                for p in self.pipes
            ),
            score=self.stats.score,
            high_score=self.stats.high_score,
            new_record=self.stats.new_record,
        )
