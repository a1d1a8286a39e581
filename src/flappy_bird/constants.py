"""
constants.py: Centralized configuration for the game world, physics and rendering.
"""

import os
from pathlib import Path

# -------- Window & Timing Config --------
SCREEN_WIDTH = 400
SCREEN_HEIGHT = 600
WINDOW_TITLE = "Flappy Bird - Final"
FPS = 60                        # Reference tick rate
TICK_TIME = 1.0 / FPS           # Simulated seconds per tick

# -------- Bird Config --------
BIRD_START_X = 70.0             # Fixed bird X position (also the spawn point)
BIRD_START_Y = 300.0
BIRD_SCALE = 0.12               # Sprite scale applied to bird.png
BIRD_TEXTURE_WIDTH = 500        # Fallback texture width when no sprite is loaded
BIRD_HITBOX_FACTOR = 0.7        # Collision radius = factor * half the visual width

# -------- Physics Config (Pixels / Tick) --------
# Frame-coupled constants: tuned for FPS ticks per second
GRAVITY = 0.6
JUMP_IMPULSE = -8.5             # Velocity is set to this on flap, not added
ROTATION_FACTOR = 3.0           # Degrees of tilt per unit of vertical velocity

# -------- Pipe Config --------
PIPE_SCALE_X = 0.8
PIPE_SCALE_Y = 1.8
PIPE_TEXTURE_SIZE = (400, 320)  # Fallback texture size when no sprite is loaded
PIPE_SPAWN_X = 450.0            # Just past the right edge of the play area
PIPE_GAP = 160.0                # Vertical gap between top and bottom pipe
PIPE_GAP_MIN_Y = 150            # Gap position drawn from [MIN, MIN + RANGE)
PIPE_GAP_RANGE = 250
PIPE_SPEED = 3.5                # Horizontal pixels per tick; also the scoring window width
PIPE_SPAWN_INTERVAL = 1.6       # Simulated seconds between spawns

# -------- Hitbox Trim Config --------
# Fixed pixel margins for transparent padding in pipe.png at the scales above.
# They do not scale with resolution.
PIPE_SIDE_TRIM = 140.0
PIPE_GAP_TRIM = 50.0

# -------- Asset Config --------
ASSET_DIR = Path(os.environ.get("FLAPPY_ASSET_DIR", "."))
BIRD_IMAGE = "bird.png"
PIPE_IMAGE = "pipe.png"
FONT_FILE = "font.ttf"

# -------- Rendering Config --------
SKY_COLOR = (135, 206, 235)
OVERLAY_COLOR = (0, 0, 0, 150)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)
YELLOW = (255, 255, 0)
SCORE_FONT_SIZE = 50
TITLE_FONT_SIZE = 50
SUMMARY_FONT_SIZE = 30
PROMPT_FONT_SIZE = 25
SCORE_POS = (180, 50)
TITLE_CENTER = (200, 150)
SUMMARY_CENTER = (200, 280)
PROMPT_CENTER = (200, 450)

# -------- Logging Config --------
LOG_LEVEL = os.environ.get("FLAPPY_LOG_LEVEL", "info")
