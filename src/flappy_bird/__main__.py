"""
__main__.py: Process entry point. Run with `python -m flappy_bird`.
"""

import sys

import pygame

from .assets import load_assets
from .constants import ASSET_DIR, LOG_LEVEL
from .errors import AssetLoadError
from .flappy_app import FlappyApp
from .logger import get_logger, setup_logging

log = get_logger("main")


def main() -> int:
    setup_logging(LOG_LEVEL)
    try:
        assets = load_assets(ASSET_DIR)
    except AssetLoadError as e:
        log.error("Error: %s", e)
        pygame.quit()
        raise SystemExit(1) from e

    FlappyApp(assets).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
