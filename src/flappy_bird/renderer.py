"""
renderer.py: Draws a FrameState with pygame. Never feeds state back.
"""

from typing import List, Sequence, Tuple

import pygame

from .assets import Assets
from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, BIRD_SCALE, PIPE_SCALE_X, PIPE_SCALE_Y,
    SKY_COLOR, OVERLAY_COLOR, WHITE, BLACK, RED, YELLOW,
    SCORE_FONT_SIZE, TITLE_FONT_SIZE, SUMMARY_FONT_SIZE, PROMPT_FONT_SIZE,
    SCORE_POS, TITLE_CENTER, SUMMARY_CENTER, PROMPT_CENTER
)
from .data_models import FrameState, Orientation

RESTART_PROMPT = ("Press SPACE", "to Restart")


def game_over_lines(frame: FrameState) -> List[str]:
    """Text of the final-score panel."""
    lines = [f"Score: {frame.score}", f"Best: {frame.high_score}"]
    if frame.new_record:
        lines.append("!NEW RECORD!")
    return lines


def render_outlined(font: pygame.font.Font, text: str, color, outline=BLACK,
                    thickness: int = 2) -> pygame.Surface:
    """Renders text with a solid outline by stamping the outline colour around it."""
    body = font.render(text, True, color)
    edge = font.render(text, True, outline)
    w, h = body.get_width() + thickness * 2, body.get_height() + thickness * 2
    surf = pygame.Surface((w, h), pygame.SRCALPHA)
    for dx in range(-thickness, thickness + 1):
        for dy in range(-thickness, thickness + 1):
            if dx or dy:
                surf.blit(edge, (thickness + dx, thickness + dy))
    surf.blit(body, (thickness, thickness))
    return surf


def _scaled(image: pygame.Surface, sx: float, sy: float) -> pygame.Surface:
    size = (max(1, round(image.get_width() * sx)), max(1, round(image.get_height() * sy)))
    return pygame.transform.scale(image, size)


class Renderer:
    def __init__(self, screen: pygame.Surface, assets: Assets):
        self.screen = screen
        self.assets = assets

        # convert_alpha needs an open display, so scaling happens here
        bird = assets.bird_image.convert_alpha()
        pipe = assets.pipe_image.convert_alpha()
        self.bird_sprite = _scaled(bird, BIRD_SCALE, BIRD_SCALE)
        self.bottom_pipe = _scaled(pipe, PIPE_SCALE_X, PIPE_SCALE_Y)
        self.top_pipe = pygame.transform.flip(self.bottom_pipe, False, True)

        self.overlay = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SRCALPHA)
        self.overlay.fill(OVERLAY_COLOR)

        self.title = render_outlined(assets.font(TITLE_FONT_SIZE), "GAME OVER", RED, thickness=3)
        self.prompt = [
            render_outlined(assets.font(PROMPT_FONT_SIZE), line, YELLOW)
            for line in RESTART_PROMPT
        ]

    def draw(self, frame: FrameState):
        screen = self.screen
        screen.fill(SKY_COLOR)

        for pipe in frame.pipes:
            if pipe.orientation is Orientation.TOP:
                screen.blit(self.top_pipe, (pipe.x, pipe.gap_y - pipe.height))
            else:
                screen.blit(self.bottom_pipe, (pipe.x, pipe.gap_y))

        # pygame rotates counter-clockwise, positive tilt means nose down
        bird = pygame.transform.rotate(self.bird_sprite, -frame.bird_rotation)
        screen.blit(bird, bird.get_rect(center=(frame.bird_x, frame.bird_y)))

        if frame.game_over:
            screen.blit(self.overlay, (0, 0))
            self._blit_centered([self.title], TITLE_CENTER)
            summary_font = self.assets.font(SUMMARY_FONT_SIZE)
            self._blit_centered(
                [render_outlined(summary_font, line, WHITE) for line in game_over_lines(frame)],
                SUMMARY_CENTER,
            )
            self._blit_centered(self.prompt, PROMPT_CENTER)
        else:
            score = render_outlined(self.assets.font(SCORE_FONT_SIZE), str(frame.score),
                                    WHITE, thickness=3)
            screen.blit(score, SCORE_POS)

        pygame.display.flip()

    def _blit_centered(self, lines: Sequence[pygame.Surface], center: Tuple[int, int]):
        """Stacks lines vertically as one block centred on center."""
        total = sum(s.get_height() for s in lines)
        y = center[1] - total // 2
        for surf in lines:
            self.screen.blit(surf, surf.get_rect(midtop=(center[0], y)))
            y += surf.get_height()
