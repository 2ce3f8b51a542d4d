"""Shared fixtures. pygame is forced onto SDL's dummy drivers so nothing opens a window."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random
from unittest.mock import Mock

import pygame
import pytest

from retro_snake.config import GameConfig


class ScriptedRandom(random.Random):
    """Random whose randint returns queued values first, then falls back to a seeded stream."""

    def __init__(self, values=(), seed=0):
        super().__init__(seed)
        self.queue = list(values)

    def randint(self, a, b):
        if self.queue:
            return self.queue.pop(0)
        return super().randint(a, b)


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def media():
    return Mock()


@pytest.fixture
def pygame_headless():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def scripted_random():
    return ScriptedRandom
