"""The keyboard: key layout, key and mouse handling, and playback of notes."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterable, Protocol, Sequence

import pygame

from virtualpiano.audio import (
    SOUND_FILE,
    PitchedSound,
    default_sound_candidates,
    find_sound_file,
    pitch_factor,
)
from virtualpiano.pianokey import KeyColor, PianoKey, Point, Rect
from virtualpiano.scheduler import Scheduler

logger = logging.getLogger(__name__)

WHITE_KEY_COUNT = 14
BLACK_KEY_COUNT = 10
KEY_COUNT = WHITE_KEY_COUNT + BLACK_KEY_COUNT
RELEASE_DELAY_MS = 300
BLACK_KEY_POSITIONS = (0, 1, 3, 4, 5, 7, 8, 10, 11, 12)
BLACK_KEY_WIDTH_RATIO = 0.6
BLACK_KEY_HEIGHT_RATIO = 0.7
BLACK_KEY_OFFSET = 0.75

_WHITE_KEYS = (
    pygame.K_q, pygame.K_w, pygame.K_e, pygame.K_r, pygame.K_t, pygame.K_y, pygame.K_u,
    pygame.K_i, pygame.K_o, pygame.K_p, pygame.K_LEFTBRACKET, pygame.K_RIGHTBRACKET,
    pygame.K_BACKSLASH, pygame.K_a,
)
_BLACK_KEYS = (
    pygame.K_1, pygame.K_2, pygame.K_3, pygame.K_4, pygame.K_5,
    pygame.K_6, pygame.K_7, pygame.K_8, pygame.K_9, pygame.K_0,
)
_KEY_MAP = {
    **{code: index for index, code in enumerate(_WHITE_KEYS)},
    **{code: WHITE_KEY_COUNT + index for index, code in enumerate(_BLACK_KEYS)},
}


class Sound(Protocol):
    def play(self) -> bool: ...

    def stop(self) -> None: ...


def map_key_to_index(key: int) -> int | None:
    """Piano key index for a keyboard key code, or None if the key is not mapped."""
    return _KEY_MAP.get(key)


def create_piano_keys(width: float, height: float, sound_path: str = "") -> list[PianoKey]:
    """Lay out 14 white keys (indices 0-13) followed by 10 black keys (14-23)."""
    key_width = width / WHITE_KEY_COUNT
    keys = [
        PianoKey(
            Rect(i * key_width, 0, key_width, height),
            KeyColor.WHITE,
            i,
            pitch_factor(i),
            sound_path,
        )
        for i in range(WHITE_KEY_COUNT)
    ]
    black_width = key_width * BLACK_KEY_WIDTH_RATIO
    black_height = height * BLACK_KEY_HEIGHT_RATIO
    for offset, position in enumerate(BLACK_KEY_POSITIONS):
        index = WHITE_KEY_COUNT + offset
        x = (position + BLACK_KEY_OFFSET) * key_width
        keys.append(
            PianoKey(
                Rect(x, 0, black_width, black_height),
                KeyColor.BLACK,
                index,
                pitch_factor(index),
                sound_path,
            )
        )
    logger.debug("Created %d piano keys", len(keys))
    return keys


def _load_sounds(candidates: Iterable[str | Path]) -> list[PitchedSound]:
    path = find_sound_file(candidates)
    if path is None:
        logger.warning("Sound file not found: %s", SOUND_FILE)
        path = Path(SOUND_FILE)
    return [PitchedSound(path, rate=pitch_factor(i)) for i in range(KEY_COUNT)]


class Piano:
    """Holds the keys and their sounds and reacts to keyboard and mouse input."""

    def __init__(
        self,
        width: float = 1000,
        height: float = 400,
        *,
        sounds: Sequence[Sound] | None = None,
        sound_candidates: Iterable[str | Path] | None = None,
        scheduler: Scheduler | None = None,
        key_sound_path: str = SOUND_FILE,
    ) -> None:
        self.width = width
        self.height = height
        self.scheduler = scheduler if scheduler is not None else Scheduler()
        if sounds is None:
            if sound_candidates is None:
                sound_candidates = default_sound_candidates(Path(sys.argv[0]).resolve().parent)
            sounds = _load_sounds(sound_candidates)
        self.sounds: list[Sound] = list(sounds)
        self.keys = create_piano_keys(width, height, key_sound_path)
        self._pressed: set[int] = set()

    @property
    def pressed_keys(self) -> frozenset[int]:
        return frozenset(self._pressed)

    def _set_pressed(self, index: int, pressed: bool) -> None:
        if pressed:
            self._pressed.add(index)
        else:
            self._pressed.discard(index)
        key = next((k for k in self.keys if k.key == index), None)
        if key is not None:
            key.pressed = pressed

    def _sound_for(self, index: int) -> Sound | None:
        if not self.sounds:
            return None
        return self.sounds[index % len(self.sounds)]

    def _strike(self, index: int) -> None:
        """Press a key, play its sound and release it again after a short delay."""
        self._set_pressed(index, True)
        sound = self._sound_for(index)
        if sound is not None:
            sound.play()
        self.scheduler.call_later(RELEASE_DELAY_MS, lambda: self._set_pressed(index, False))

    def key_press(self, key: int, auto_repeat: bool = False) -> bool:
        """Handle a key going down; return whether the key was used."""
        if auto_repeat:
            return False
        index = map_key_to_index(key)
        if index is None or not self.sounds:
            return False
        self._strike(index)
        return True

    def key_release(self, key: int, auto_repeat: bool = False) -> bool:
        """Handle a key coming up; return whether the key was used."""
        if auto_repeat:
            return False
        index = map_key_to_index(key)
        if index is None:
            return False
        self._set_pressed(index, False)
        return True

    def key_at(self, point: Point) -> PianoKey | None:
        """The key under a point; black keys lie on top of white ones."""
        black = self.keys[WHITE_KEY_COUNT:]
        white = self.keys[:WHITE_KEY_COUNT]
        return next((k for k in (*black, *white) if k.contains(point)), None)

    def mouse_press(self, point: Point) -> int | None:
        """Press the key under the point; return its index, or None if there is none."""
        key = self.key_at(point)
        if key is None:
            return None
        if key.key not in self._pressed:
            self._set_pressed(key.key, True)
            sound = self._sound_for(key.key)
            if sound is not None:
                sound.play()
        return key.key

    def mouse_release(self, point: Point) -> int | None:
        """Release the key under the point; return its index, or None if there is none."""
        key = self.key_at(point)
        if key is None:
            return None
        if key.key in self._pressed:
            self._set_pressed(key.key, False)
        return key.key

    def play_key(self, key: int) -> bool:
        """Strike the key with the given index; return False if it is out of range."""
        if not 0 <= key < len(self.sounds):
            return False
        self._strike(key)
        return True

    def focus_out(self) -> None:
        """Release every key, as when the window loses focus."""
        self._pressed.clear()
        for key in self.keys:
            key.pressed = False

    def draw(self, surface: pygame.Surface) -> None:
        for key in self.keys:
            key.draw(surface)