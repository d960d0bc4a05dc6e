import os
import sys

# pygame must not try to open a real window or audio device under test.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import numpy as np
import pygame
import pytest

from color_cycle import build_color_table
from frame_clock import FrameClock


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def surface():
    return pygame.Surface((400, 300))


@pytest.fixture
def frame_clock():
    return FrameClock()


@pytest.fixture(scope="session")
def color_table():
    return build_color_table()
