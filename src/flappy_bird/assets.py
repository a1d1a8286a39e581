"""
assets.py: Loading of the bird sprite, pipe sprite and font.

Every asset is required. The first one that fails raises AssetLoadError
naming the file, before any window is opened.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Tuple

import pygame

from .constants import (
    ASSET_DIR, BIRD_IMAGE, PIPE_IMAGE, FONT_FILE, BIRD_SCALE,
    PIPE_SCALE_X, PIPE_SCALE_Y, SCORE_FONT_SIZE, TITLE_FONT_SIZE,
    SUMMARY_FONT_SIZE, PROMPT_FONT_SIZE
)
from .errors import AssetLoadError
from .logger import get_logger

log = get_logger("assets")

FONT_SIZES = (SCORE_FONT_SIZE, TITLE_FONT_SIZE, SUMMARY_FONT_SIZE, PROMPT_FONT_SIZE)


@dataclass
class Assets:
    bird_image: pygame.Surface
    pipe_image: pygame.Surface
    fonts: Dict[int, pygame.font.Font] = field(default_factory=dict)

    @property
    def bird_width(self) -> float:
        """On-screen bird width after scaling."""
        return self.bird_image.get_width() * BIRD_SCALE

    @property
    def pipe_size(self) -> Tuple[float, float]:
        """On-screen pipe (width, height) after scaling."""
        return (self.pipe_image.get_width() * PIPE_SCALE_X,
                self.pipe_image.get_height() * PIPE_SCALE_Y)

    def font(self, size: int) -> pygame.font.Font:
        return self.fonts[size]


def _require(asset_dir: Path, name: str) -> Path:
    path = asset_dir / name
    if not path.is_file():
        raise AssetLoadError(path)
    return path


def load_image(asset_dir: Path, name: str) -> pygame.Surface:
    path = _require(asset_dir, name)
    try:
        image = pygame.image.load(str(path))
    except (pygame.error, OSError) as e:
        raise AssetLoadError(path, str(e)) from e
    log.debug("Loaded %s (%dx%d)", name, image.get_width(), image.get_height())
    return image


def load_fonts(asset_dir: Path, name: str) -> Dict[int, pygame.font.Font]:
    path = _require(asset_dir, name)
    if not pygame.font.get_init():
        pygame.font.init()
    fonts = {}
    try:
        for size in FONT_SIZES:
            fonts[size] = pygame.font.Font(str(path), size)
    except (pygame.error, OSError) as e:
        raise AssetLoadError(path, str(e)) from e
    log.debug("Loaded %s at sizes %s", name, sorted(fonts))
    return fonts


def load_assets(asset_dir: Path = ASSET_DIR) -> Assets:
    """Loads bird.png, pipe.png and font.ttf from asset_dir."""
    asset_dir = Path(asset_dir)
    bird = load_image(asset_dir, BIRD_IMAGE)
    pipe = load_image(asset_dir, PIPE_IMAGE)
    fonts = load_fonts(asset_dir, FONT_FILE)
    log.info("Assets loaded from %s", asset_dir.resolve())
    return Assets(bird_image=bird, pipe_image=pipe, fonts=fonts)
