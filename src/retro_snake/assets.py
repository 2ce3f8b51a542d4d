"""
Texture and sound loading.

``GameAssets`` acquires the food texture and the eat/wall sounds when the
``with`` block is entered and releases them when it exits. Missing files are
not fatal: the texture is drawn procedurally and the sounds become short
synthesized blips, and if the mixer cannot start the game simply runs silent.
"""

from __future__ import annotations

import array
import logging
from pathlib import Path
from typing import Optional

import pygame

from .config import Color, GameConfig

logger = logging.getLogger(__name__)

EAT_TONE = (600, 0.06)
WALL_TONE = (220, 0.12)


# -----------------------------------------------------------------------------
# Textures
# -----------------------------------------------------------------------------
def make_food_surface(size: int, color: Color) -> pygame.Surface:
    surf = pygame.Surface((size, size), pygame.SRCALPHA)
    inset = max(1, size // 8)
    rect = pygame.Rect(inset, inset, size - 2 * inset, size - 2 * inset)
    pygame.draw.rect(surf, color, rect, border_radius=size // 3)
    # highlight
    pygame.draw.circle(surf, (240, 244, 248), (size // 2 + inset, size // 2 - inset), max(1, size // 10))
    return surf


def load_texture(path: Path, size: int, fallback_color: Color) -> pygame.Surface:
    try:
        surf = pygame.image.load(str(path))
    except (pygame.error, OSError) as e:
        logger.warning(f"Could not load texture {path} ({e}); drawing it instead")
        return make_food_surface(size, fallback_color)

    if pygame.display.get_surface() is not None:
        surf = surf.convert_alpha()
    if surf.get_size() != (size, size):
        surf = pygame.transform.scale(surf, (size, size))
    return surf


# -----------------------------------------------------------------------------
# Sounds
# -----------------------------------------------------------------------------
def init_mixer() -> bool:
    """Start the mixer if needed; report whether audio is available."""
    if pygame.mixer.get_init():
        return True
    try:
        pygame.mixer.init(frequency=22050, size=-16, channels=1, buffer=256)
    except pygame.error as e:
        logger.warning(f"Audio unavailable ({e}); running without sound")
        return False
    return True


def make_tone(freq: int, sec: float) -> Optional[pygame.mixer.Sound]:
    """Square-wave blip matching the mixer's current format."""
    init = pygame.mixer.get_init()
    if not init:
        return None
    rate, _size, channels = init
    length = int(rate * sec)
    samples = array.array("h")
    for i in range(length):
        t = i / rate
        s = 0.5 if (int(t * freq * 2) % 2 == 0) else -0.5
        samples.extend([int(3000 * s)] * channels)
    return pygame.mixer.Sound(buffer=samples)


def load_sound(path: Path, tone) -> Optional[pygame.mixer.Sound]:
    try:
        return pygame.mixer.Sound(str(path))
    except (pygame.error, OSError) as e:
        logger.warning(f"Could not load sound {path} ({e}); using a synthesized tone")
    try:
        return make_tone(*tone)
    except pygame.error as e:
        logger.warning(f"Could not synthesize tone ({e}); sound disabled")
        return None


# -----------------------------------------------------------------------------
# Scoped ownership
# -----------------------------------------------------------------------------
class GameAssets:
    """Owns the food texture and both sounds for the duration of a ``with`` block."""

    def __init__(self, config: GameConfig, enable_sound: bool = True) -> None:
        self.config = config
        self.enable_sound = enable_sound
        self.food_texture: Optional[pygame.Surface] = None
        self.eat_sound: Optional[pygame.mixer.Sound] = None
        self.wall_sound: Optional[pygame.mixer.Sound] = None
        self._started_mixer = False

    def __enter__(self) -> "GameAssets":
        cfg = self.config
        self.food_texture = load_texture(cfg.food_texture_path, cfg.cell_size, cfg.food_color)
        if self.enable_sound:
            had_mixer = bool(pygame.mixer.get_init())
            if init_mixer():
                self._started_mixer = not had_mixer
                self.eat_sound = load_sound(cfg.eat_sound_path, EAT_TONE)
                self.wall_sound = load_sound(cfg.wall_sound_path, WALL_TONE)
        logger.debug("Assets loaded")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        for snd in (self.eat_sound, self.wall_sound):
            if snd is not None:
                snd.stop()
        self.eat_sound = None
        self.wall_sound = None
        self.food_texture = None
        if self._started_mixer:
            pygame.mixer.quit()
            self._started_mixer = False
        logger.debug("Assets released")
