"""Food placement."""

from __future__ import annotations

import logging
import random
from typing import Any, Collection, Optional

from .config import Cell, GameConfig
from .errors import GridFullError

logger = logging.getLogger(__name__)


class Food:
    """
    A single food cell.

    The texture is an opaque handle owned by whoever loaded it (see
    ``retro_snake.assets.GameAssets``); Food only borrows it for drawing.
    """

    def __init__(
        self,
        config: GameConfig,
        rng: random.Random,
        occupied: Collection[Cell] = (),
        texture: Optional[Any] = None,
    ) -> None:
        self.config = config
        self.rng = rng
        self.texture = texture
        self.position: Cell = self.place_randomly(occupied)

    def random_cell(self) -> Cell:
        hi = self.config.cell_count - 1
        return self.rng.randint(0, hi), self.rng.randint(0, hi)

    def place_randomly(self, occupied: Collection[Cell]) -> Cell:
        """
        Move to a uniformly random cell not in ``occupied`` and return it.

        Rejection sampling is tried ``config.placement_attempts`` times; after
        that the position is drawn from the explicit list of free cells.
        Raises GridFullError when every cell is occupied.
        """
        taken = set(occupied)
        for _ in range(self.config.placement_attempts):
            cell = self.random_cell()
            if cell not in taken:
                self.position = cell
                return cell

        free = [c for c in self.config.all_cells() if c not in taken]
        if not free:
            raise GridFullError(f"all {self.config.cell_count ** 2} cells are occupied")
        logger.debug(f"Rejection sampling gave up, choosing among {len(free)} free cells")
        self.position = self.rng.choice(free)
        return self.position

    def draw(self, media) -> None:
        if self.texture is not None:
            media.draw_textured_cell(self.position, self.texture)
        else:
            media.draw_cell(self.position, self.config.food_color)
