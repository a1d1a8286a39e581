"""
flappy_bird: Single-screen Flappy Bird built on pygame.
"""

from .data_models import Action, Bird, FrameState, Orientation, Pipe, Rect, RoundState
from .errors import AssetLoadError, FlappyError
from .game_engine import GameEngine
from .physics_core import PhysicsCore, distance, pipe_hitbox
from .pipe_manager import PipeManager

__version__ = "1.0.0"
