# tests/conftest.py
import os
import random

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame as pg
import pytest

from grid_snake.config import WINDOW_HEIGHT, WINDOW_WIDTH, Key


class FakeControls:
    """Controls stand-in: whatever is in ``pressed`` is held down."""

    def __init__(self, *keys: Key):
        self.pressed = set(keys)

    def is_key_down(self, key: Key) -> bool:
        return key in self.pressed


@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()


@pytest.fixture
def screen():
    # Plain Surface is enough for draw tests (no display mode needed)
    return pg.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def controls():
    return FakeControls()
