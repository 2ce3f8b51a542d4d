"""Retro Snake: a small grid snake game on pygame."""

from .config import GameConfig
from .errors import ConfigError, GridFullError, SnakeError
from .food import Food
from .game import Game, TickTimer
from .snake import Snake

__version__ = "1.0.0"

__all__ = [
    "ConfigError",
    "Food",
    "Game",
    "GameConfig",
    "GridFullError",
    "Snake",
    "SnakeError",
    "TickTimer",
]
