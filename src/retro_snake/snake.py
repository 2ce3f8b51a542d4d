"""Snake entity: body, heading and growth."""

from __future__ import annotations

from collections import deque
from itertools import islice
from typing import Deque, Iterable, Tuple

from .config import INITIAL_BODY, INITIAL_DIRECTION, Cell

RIGHT_VEC: Cell = (1, 0)
LEFT_VEC: Cell = (-1, 0)
DOWN_VEC: Cell = (0, 1)
UP_VEC: Cell = (0, -1)
DIRECTIONS: Tuple[Cell, ...] = (RIGHT_VEC, LEFT_VEC, DOWN_VEC, UP_VEC)


def add_cells(a: Cell, b: Cell) -> Cell:
    return a[0] + b[0], a[1] + b[1]


def is_opposite(a: Cell, b: Cell) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


class Snake:
    """
    Head-first body moving one cell per tick.

    Bounds are not checked here: after an update the head may sit one cell
    outside the grid until the Game notices the edge collision.
    """

    def __init__(
        self,
        initial_body: Iterable[Cell] = INITIAL_BODY,
        initial_direction: Cell = INITIAL_DIRECTION,
    ) -> None:
        self._initial_body: Tuple[Cell, ...] = tuple(initial_body)
        self._initial_direction = initial_direction
        self.body: Deque[Cell] = deque(self._initial_body)
        self.direction: Cell = initial_direction
        self.pending_growth = False

    @property
    def head(self) -> Cell:
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def update(self) -> None:
        self.body.appendleft(add_cells(self.head, self.direction))
        if self.pending_growth:
            self.pending_growth = False
        else:
            self.body.pop()

    def grow(self) -> None:
        """Keep the tail on the next update."""
        self.pending_growth = True

    def reset(self) -> None:
        self.body = deque(self._initial_body)
        self.direction = self._initial_direction
        self.pending_growth = False

    def occupies(self, cell: Cell) -> bool:
        return cell in self.body

    def hits_itself(self) -> bool:
        return self.head in islice(self.body, 1, None)
