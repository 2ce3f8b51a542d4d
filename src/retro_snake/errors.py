"""Exceptions raised by Retro Snake.

Collisions are not errors: they are ordinary GameOver transitions handled
inside :class:`retro_snake.game.Game`. The classes below cover bad
configuration and the (practically unreachable) full-grid case.
"""


class SnakeError(Exception):
    """Base class for all Retro Snake errors."""
    pass


class ConfigError(SnakeError):
    """A GameConfig value is out of range or inconsistent."""
    pass


class GridFullError(SnakeError):
    """No free cell is left to place the food on."""
    pass
