"""
Retro Snake: pygame window, frame loop and command line.

Controls: Arrows/WASD to steer (any accepted key restarts after a crash),
ESC or closing the window quits.
"""

from __future__ import annotations

import argparse
import logging
import random
from pathlib import Path
from typing import Any, List, Optional, Set, Tuple

import pygame

from .assets import GameAssets
from .config import Cell, Color, GameConfig
from .controls import DOWN, LEFT, RIGHT, UP, apply_keys
from .errors import ConfigError
from .game import Game

logger = logging.getLogger(__name__)

KEYMAP = {
    pygame.K_UP: UP,
    pygame.K_w: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_d: RIGHT,
}

FONT_NAME = "consolas,menlo,monospace,arial"
FONT_SIZE = 40
BORDER = 5


def key_for_event(event: pygame.event.Event) -> Optional[str]:
    if event.type != pygame.KEYDOWN:
        return None
    return KEYMAP.get(event.key)


def draw_text(surf: pygame.Surface, font: pygame.font.Font, text: str, color: Color, topleft: Tuple[int, int]) -> None:
    s = font.render(text, True, color)
    rect = s.get_rect()
    rect.topleft = topleft
    surf.blit(s, rect)


# -----------------------------------------------------------------------------
# Frontend
# -----------------------------------------------------------------------------
class PygameFrontend:
    """Window, clock, input and audio output; a ``Media`` for the Game."""

    def __init__(self, config: GameConfig, sound_enabled: bool = True) -> None:
        self.config = config
        self.sound_enabled = sound_enabled
        self.quit_requested = False
        self.screen: Optional[pygame.Surface] = None
        self.clock: Optional[pygame.time.Clock] = None
        self.font: Optional[pygame.font.Font] = None

    def __enter__(self) -> "PygameFrontend":
        pygame.init()
        self.screen = pygame.display.set_mode(self.config.window_size)
        pygame.display.set_caption(self.config.title)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)
        logger.info(f"Opened {self.config.window_size[0]}x{self.config.window_size[1]} window")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.screen = None
        self.font = None
        pygame.quit()

    # ---------------------------- collaborator --------------------------------
    def current_time(self) -> float:
        return pygame.time.get_ticks() / 1000.0

    def poll_keys(self) -> Set[str]:
        pressed: Set[str] = set()
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                self.quit_requested = True
            elif e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE:
                self.quit_requested = True
            else:
                key = key_for_event(e)
                if key is not None:
                    pressed.add(key)
        return pressed

    def draw_cell(self, cell: Cell, color: Color) -> None:
        radius = int(self.config.cell_size * self.config.segment_roundness / 2)
        pygame.draw.rect(self.screen, color, self.config.cell_rect(cell), border_radius=radius)

    def draw_textured_cell(self, cell: Cell, texture: Any) -> None:
        self.screen.blit(texture, self.config.cell_to_px(cell))

    def play_sound(self, sound: Any) -> None:
        if self.sound_enabled and sound is not None:
            sound.play()

    # ---------------------------- frame ---------------------------------------
    def begin_frame(self, score: int) -> None:
        cfg = self.config
        self.screen.fill(cfg.background_color)
        frame = pygame.Rect(cfg.offset - BORDER, cfg.offset - BORDER, cfg.grid_px + 2 * BORDER, cfg.grid_px + 2 * BORDER)
        pygame.draw.rect(self.screen, cfg.snake_color, frame, BORDER)
        draw_text(self.screen, self.font, "Retro Snake", cfg.snake_color, (cfg.offset - BORDER, 20))
        draw_text(self.screen, self.font, f"Score: {score}", cfg.snake_color,
                  (cfg.offset - BORDER, cfg.offset + cfg.grid_px + 10))

    def end_frame(self) -> None:
        pygame.display.flip()
        self.clock.tick(self.config.fps)


# -----------------------------------------------------------------------------
# Loop
# -----------------------------------------------------------------------------
def run(config: GameConfig, seed: Optional[int] = None, sound: bool = True) -> None:
    with PygameFrontend(config, sound_enabled=sound) as frontend, GameAssets(config, enable_sound=sound) as assets:
        game = Game(
            config,
            rng=random.Random(seed),
            media=frontend,
            eat_sound=assets.eat_sound,
            wall_sound=assets.wall_sound,
            food_texture=assets.food_texture,
        )
        logger.info("Starting game loop")
        while not frontend.quit_requested:
            game.advance(frontend.current_time())
            apply_keys(game, frontend.poll_keys())
            frontend.begin_frame(game.score)
            game.draw(frontend)
            frontend.end_frame()
        logger.info("Window closed, shutting down")


# -----------------------------------------------------------------------------
# Command line
# -----------------------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    defaults = GameConfig()
    parser = argparse.ArgumentParser(prog="retro-snake", description=__doc__,
                                     formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--cell-size", type=int, default=defaults.cell_size,
                        help=f"Pixels per grid cell (default: {defaults.cell_size})")
    parser.add_argument("--cell-count", type=int, default=defaults.cell_count,
                        help=f"Cells per side of the square grid (default: {defaults.cell_count})")
    parser.add_argument("--interval", type=float, default=defaults.tick_interval,
                        help=f"Seconds between snake moves (default: {defaults.tick_interval})")
    parser.add_argument("--fps", type=int, default=defaults.fps,
                        help=f"Target frame rate (default: {defaults.fps})")
    parser.add_argument("--assets-dir", type=Path, default=defaults.assets_dir,
                        help="Directory holding graphics/food.png and sounds/*.mp3")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement")
    parser.add_argument("--mute", action="store_true",
                        help="Disable sound")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity (default: INFO)")
    return parser


def config_from_args(args: argparse.Namespace) -> GameConfig:
    return GameConfig(
        cell_size=args.cell_size,
        cell_count=args.cell_count,
        tick_interval=args.interval,
        fps=args.fps,
        assets_dir=args.assets_dir,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        config = config_from_args(args)
    except ConfigError as e:
        parser.error(str(e))

    run(config, seed=args.seed, sound=not args.mute)
    return 0
