import os

# headless pygame for the whole test session
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pytest

from snake.config import Config, RIGHT
from snake.game import GameEngine, GameState


@pytest.fixture
def engine():
    return GameEngine(Config(seed=0))


@pytest.fixture
def place():
    """Load a hand-built state into an engine."""
    def _place(engine, snake, direction=RIGHT, food=(15, 15), score=0, high_score=0):
        engine.load(GameState(
            snake=list(snake),
            direction=direction,
            pending=direction,
            food=food,
            score=score,
            high_score=high_score,
        ))
        return engine
    return _place


@pytest.fixture
def rng():
    return np.random.default_rng(123)
