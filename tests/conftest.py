import os
import sys

# Render off-screen; must be set before pygame opens a display.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import random

import pytest

from envs.game_env import GameLoop


class SequenceRandom(random.Random):
    """Random whose randrange returns queued values, then falls back to a seed."""

    def __init__(self, values=()):
        super().__init__(0)
        self.values = list(values)

    def randrange(self, *args, **kwargs):
        if self.values:
            return self.values.pop(0)
        return super().randrange(*args, **kwargs)


@pytest.fixture
def rng():
    # Food at (20, 20) keeps it off the default snake's path.
    return SequenceRandom([20, 20])


@pytest.fixture
def game(rng):
    return GameLoop(24, 24, rng=rng)
