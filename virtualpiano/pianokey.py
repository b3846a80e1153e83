"""A single key of the on-screen piano."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

import pygame

from virtualpiano.audio import PitchedSound

logger = logging.getLogger(__name__)

Point = tuple[float, float]
RGB = tuple[int, int, int]

_PRESSED_WHITE: RGB = (0, 170, 255)
_PRESSED_BLACK: RGB = (40, 40, 40)
_OUTLINE: RGB = (0, 0, 0)


class KeyColor(Enum):
    WHITE = (255, 255, 255)
    BLACK = (0, 0, 0)


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    def contains(self, point: Point) -> bool:
        """Whether the point lies inside the rectangle or on its edge."""
        px, py = point
        return self.x <= px <= self.x + self.width and self.y <= py <= self.y + self.height

    def to_pygame(self) -> pygame.Rect:
        return pygame.Rect(round(self.x), round(self.y), round(self.width), round(self.height))


@dataclass
class PianoKey:
    """A key's shape, colour, index and pitch, with its own sound if one was given."""

    rect: Rect
    color: KeyColor
    key: int
    pitch: float
    sound_path: str = ""
    pressed: bool = False
    sound: PitchedSound | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.sound_path:
            logger.debug("No sound path provided for key %d", self.key)
            return
        rate = self.pitch
        if rate <= 0.0:
            logger.warning("Invalid pitch value %s for key %d - using default 1.0", rate, self.key)
            rate = 1.0
        path = Path(self.sound_path)
        if not path.is_file():
            logger.warning("Sound file not found: %s", path)
            return
        self.sound = PitchedSound(path, rate=rate)

    def contains(self, point: Point) -> bool:
        result = self.rect.contains(point)
        logger.debug("Checking if point %s is in key %d: %s", point, self.key, result)
        return result

    def fill_color(self) -> RGB:
        """Colour the key is painted with in its current state."""
        if self.pressed:
            if self.color is KeyColor.WHITE:
                return _PRESSED_WHITE
            if self.color is KeyColor.BLACK:
                return _PRESSED_BLACK
        return self.color.value

    def play_sound(self) -> bool:
        """Play the key's own sound; return whether anything played."""
        if self.sound is None:
            logger.warning("Cannot play sound for key %d - no sound loaded", self.key)
            return False
        return self.sound.play()

    def draw(self, surface: pygame.Surface) -> None:
        area = self.rect.to_pygame()
        pygame.draw.rect(surface, self.fill_color(), area)
        pygame.draw.rect(surface, _OUTLINE, area, width=1)