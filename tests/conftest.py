import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from flappy_bird.data_models import Bird, RoundState  # noqa: E402
from flappy_bird.game_engine import GameEngine  # noqa: E402


@pytest.fixture
def engine():
    return GameEngine.create(bird_width=60.0, pipe_size=(320.0, 576.0), seed=1234)


@pytest.fixture
def flying_engine(engine):
    engine.state = RoundState.FLYING
    return engine


@pytest.fixture
def bird():
    return Bird(x=70.0, y=300.0, velocity=0.0, width=60.0)
