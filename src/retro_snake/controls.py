"""
Keyboard to direction mapping.

The snake itself accepts any heading; this module refuses the exact reverse
of the current one so a key press can never fold the head onto the neck.
Any accepted key also re-arms a game that is waiting after GameOver.
"""

from __future__ import annotations

from typing import Collection, Dict, Optional

from .config import Cell
from .game import Game
from .snake import DOWN_VEC, LEFT_VEC, RIGHT_VEC, UP_VEC, is_opposite

UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"

KEY_DIRECTIONS: Dict[str, Cell] = {
    UP: UP_VEC,
    DOWN: DOWN_VEC,
    LEFT: LEFT_VEC,
    RIGHT: RIGHT_VEC,
}
# Checked in this order; the first acceptable key wins the frame.
KEY_PRIORITY = (UP, DOWN, LEFT, RIGHT)


def can_turn(current: Cell, requested: Cell) -> bool:
    return not is_opposite(current, requested)


def apply_keys(game: Game, pressed: Collection[str]) -> Optional[str]:
    """Apply at most one pressed key to the game and return it, or None."""
    for key in KEY_PRIORITY:
        if key not in pressed:
            continue
        direction = KEY_DIRECTIONS[key]
        if can_turn(game.snake.direction, direction):
            game.snake.direction = direction
            game.rearm()
            return key
    return None
