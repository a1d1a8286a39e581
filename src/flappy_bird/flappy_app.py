"""
flappy_app.py

Window, input polling and the fixed-rate tick loop. The simulation itself
lives in game_engine; this module only feeds it input and draws its state.
"""

from typing import List

import pygame

from .assets import Assets
from .constants import SCREEN_WIDTH, SCREEN_HEIGHT, WINDOW_TITLE, FPS, TICK_TIME
from .data_models import Action
from .game_engine import GameEngine
from .logger import get_logger
from .renderer import Renderer

log = get_logger("app")


class FlappyApp:
    def __init__(self, assets: Assets):
        self.assets = assets
        self.engine = GameEngine.create(bird_width=assets.bird_width,
                                        pipe_size=assets.pipe_size)
        self.clock = pygame.time.Clock()
        self.running = False

    def _poll_input(self) -> List[Action]:
        """Drains the event queue. Edge-triggered: one action per press."""
        actions = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_SPACE:
                    actions.append(Action.FLAP)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                actions.append(Action.FLAP)
        return actions

    def run(self):
        """The main execution loop."""
        pygame.init()
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        renderer = Renderer(screen, self.assets)
        log.info("Window opened (%dx%d @ %d fps)", SCREEN_WIDTH, SCREEN_HEIGHT, FPS)

        self.running = True
        try:
            while self.running:
                actions = self._poll_input()
                if not self.running:
                    break
                # Fixed simulated step, not the measured frame time
                self.engine.step(actions, dt=TICK_TIME)
                renderer.draw(self.engine.snapshot())
                self.clock.tick(FPS)
        finally:
            log.info("Window closed after %d ticks (best=%d)",
                     self.engine.tick_count, self.engine.high_score)
            pygame.quit()
