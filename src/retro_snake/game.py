"""
Game orchestration: tick gating, collision checks and scoring.

One tick runs ``Snake.update`` and then checks food, edges and tail, in that
order. Collisions never raise; they end the run through ``game_over`` and the
game idles until a direction key re-arms it.
"""

from __future__ import annotations

import logging
import random
from typing import Any, Optional, Protocol

from .config import Cell, Color, GameConfig
from .food import Food
from .snake import Snake

logger = logging.getLogger(__name__)


class Media(Protocol):
    """What the game needs from the rendering/audio side."""

    def draw_cell(self, cell: Cell, color: Color) -> None: ...
    def draw_textured_cell(self, cell: Cell, texture: Any) -> None: ...
    def play_sound(self, sound: Any) -> None: ...


class TickTimer:
    """Fires at most once per ``interval`` seconds of a monotonic clock."""

    def __init__(self, interval: float) -> None:
        self.interval = interval
        self.last_tick = 0.0

    def ready(self, now: float) -> bool:
        if now - self.last_tick >= self.interval:
            self.last_tick = now
            return True
        return False


class Game:
    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
        media: Optional[Media] = None,
        eat_sound: Any = None,
        wall_sound: Any = None,
        food_texture: Any = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self.media = media
        self.eat_sound = eat_sound
        self.wall_sound = wall_sound

        self.snake = Snake(self.config.initial_body, self.config.initial_direction)
        self.food = Food(self.config, self.rng, self.snake.body, texture=food_texture)
        self.timer = TickTimer(self.config.tick_interval)
        self.running = True
        self.score = 0

    def _play(self, sound: Any) -> None:
        if self.media is not None and sound is not None:
            self.media.play_sound(sound)

    # ---------------------------- state transitions ---------------------------
    def rearm(self) -> None:
        self.running = True

    def game_over(self, reason: str = "") -> None:
        logger.info(f"Game over ({reason or 'unknown'}), final score {self.score}")
        self.snake.reset()
        self.score = 0
        self.food.place_randomly(self.snake.body)
        self.running = False
        self._play(self.wall_sound)

    # ---------------------------- tick ----------------------------------------
    def advance(self, now: float) -> bool:
        """Run one update if the tick interval has elapsed; report whether it did."""
        if self.timer.ready(now):
            self.update()
            return True
        return False

    def update(self) -> None:
        if not self.running:
            return
        self.snake.update()
        self.check_collision_with_food()
        if self.check_collision_with_edges():
            self.game_over("wall")
        elif self.check_collision_with_tail():
            self.game_over("self")

    def check_collision_with_food(self) -> bool:
        if self.snake.head != self.food.position:
            return False
        self.food.place_randomly(self.snake.body)
        self.snake.grow()
        self.score += 1
        logger.debug(f"Ate food, score {self.score}, next food at {self.food.position}")
        self._play(self.eat_sound)
        return True

    def check_collision_with_edges(self) -> bool:
        return not self.config.within_grid(self.snake.head)

    def check_collision_with_tail(self) -> bool:
        return self.snake.hits_itself()

    # ---------------------------- rendering -----------------------------------
    def draw(self, media: Optional[Media] = None) -> None:
        media = media or self.media
        if media is None:
            return
        self.food.draw(media)
        for cell in self.snake.body:
            media.draw_cell(cell, self.config.snake_color)
