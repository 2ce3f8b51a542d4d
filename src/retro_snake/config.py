"""
Game configuration.

All layout, timing and color settings live in one frozen dataclass that is
passed into the Game, Food and the pygame frontend. Nothing here touches
pygame, so the core can be built and tested without a graphics context.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Tuple

from .errors import ConfigError

Cell = Tuple[int, int]
Color = Tuple[int, int, int]

# -----------------------------------------------------------------------------
# Defaults
# -----------------------------------------------------------------------------
GREEN: Color = (173, 204, 96)
DARK_GREEN: Color = (43, 51, 24)

INITIAL_BODY: Tuple[Cell, ...] = ((6, 9), (5, 9), (4, 9))
INITIAL_DIRECTION: Cell = (1, 0)

FOOD_TEXTURE = Path("graphics") / "food.png"
EAT_SOUND = Path("sounds") / "eat.mp3"
WALL_SOUND = Path("sounds") / "wall.mp3"


@dataclass(frozen=True)
class GameConfig:
    cell_size: int = 30
    cell_count: int = 25
    offset: int = 75

    # Seconds between simulation ticks; the only speed parameter.
    tick_interval: float = 0.15
    fps: int = 60

    initial_body: Tuple[Cell, ...] = INITIAL_BODY
    initial_direction: Cell = INITIAL_DIRECTION

    # Rejected random samples before falling back to the free-cell list.
    placement_attempts: int = 1000

    background_color: Color = GREEN
    snake_color: Color = DARK_GREEN
    food_color: Color = DARK_GREEN
    segment_roundness: float = 0.5
    title: str = "Retro Snake!"

    assets_dir: Path = field(default_factory=lambda: Path("assets"))

    def __post_init__(self) -> None:
        # Accept lists from callers (e.g. JSON or argparse) but store tuples.
        object.__setattr__(self, "initial_body", tuple(tuple(c) for c in self.initial_body))
        object.__setattr__(self, "initial_direction", tuple(self.initial_direction))
        object.__setattr__(self, "assets_dir", Path(self.assets_dir))
        self.validate()

    def validate(self) -> None:
        """Raise ConfigError if any setting is unusable."""
        for name in ("cell_size", "cell_count", "fps"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)}")
        if self.offset < 0:
            raise ConfigError(f"offset must not be negative, got {self.offset}")
        if self.tick_interval <= 0:
            raise ConfigError(f"tick_interval must be positive, got {self.tick_interval}")
        if self.placement_attempts < 0:
            raise ConfigError(f"placement_attempts must not be negative, got {self.placement_attempts}")
        if not 0.0 <= self.segment_roundness <= 1.0:
            raise ConfigError(f"segment_roundness must be within [0, 1], got {self.segment_roundness}")

        dx, dy = self.initial_direction
        if abs(dx) + abs(dy) != 1:
            raise ConfigError(f"initial_direction must be a unit vector, got {self.initial_direction}")

        body = self.initial_body
        if not body:
            raise ConfigError("initial_body must contain at least one cell")
        if len(set(body)) != len(body):
            raise ConfigError(f"initial_body overlaps itself: {body}")
        for cell in body:
            if not self.within_grid(cell):
                raise ConfigError(f"initial_body cell {cell} lies outside a {self.cell_count}x{self.cell_count} grid")
        for a, b in zip(body, body[1:]):
            if abs(a[0] - b[0]) + abs(a[1] - b[1]) != 1:
                raise ConfigError(f"initial_body cells {a} and {b} are not adjacent")
        if len(body) > 1 and (body[0][0] + dx, body[0][1] + dy) == body[1]:
            raise ConfigError("initial_direction points back into the body")

    # ---------------------------- geometry ------------------------------------
    @property
    def grid_px(self) -> int:
        return self.cell_size * self.cell_count

    @property
    def window_size(self) -> Tuple[int, int]:
        side = 2 * self.offset + self.grid_px
        return side, side

    def within_grid(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.cell_count and 0 <= y < self.cell_count

    def all_cells(self) -> Iterator[Cell]:
        for y in range(self.cell_count):
            for x in range(self.cell_count):
                yield (x, y)

    def cell_to_px(self, cell: Cell) -> Tuple[int, int]:
        x, y = cell
        return self.offset + x * self.cell_size, self.offset + y * self.cell_size

    def cell_rect(self, cell: Cell) -> Tuple[int, int, int, int]:
        px, py = self.cell_to_px(cell)
        return px, py, self.cell_size, self.cell_size

    # ---------------------------- assets --------------------------------------
    @property
    def food_texture_path(self) -> Path:
        return self.assets_dir / FOOD_TEXTURE

    @property
    def eat_sound_path(self) -> Path:
        return self.assets_dir / EAT_SOUND

    @property
    def wall_sound_path(self) -> Path:
        return self.assets_dir / WALL_SOUND
