import os
import random

import pytest

# Headless pygame for the view and controller tests.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from gridsnake.config import PHASE_PLAYING
from gridsnake.model import Direction, GameState


class FixedRng:
    """randrange() stand-in that replays a fixed sequence of values."""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = 0

    def randrange(self, stop):
        self.calls += 1
        value = self.values.pop(0) if self.values else 0
        assert 0 <= value < stop
        return value


def make_state(snake, direction=(0, -1), pending=None, food=(0, 0),
               score=0, phase=PHASE_PLAYING):
    direction = Direction(*direction)
    return GameState(
        snake=tuple(snake),
        direction=direction,
        pending=Direction(*pending) if pending else direction,
        food=food,
        score=score,
        phase=phase,
    )


@pytest.fixture
def rng():
    return random.Random(1234)
