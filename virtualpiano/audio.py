"""Loading the sample sound and playing it back at a shifted pitch."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

import numpy as np

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

logger = logging.getLogger(__name__)

SOUND_FILE = "piano/Sounds/piano_D4.wav"
BASE_KEY = 2


def pitch_factor(index: int) -> float:
    """Playback rate for a key index, with index 2 (D4) sounding at its natural pitch."""
    return 2.0 ** ((index - BASE_KEY) / 12.0)


def default_sound_candidates(app_dir: str | os.PathLike[str]) -> list[Path]:
    """Places to look for the sample, in order of preference."""
    return [
        Path(SOUND_FILE),
        Path("Sounds/piano_D4.wav"),
        Path("./Sounds/piano_D4.wav"),
        Path("../Sounds/piano_D4.wav"),
        Path("../../Sounds/piano_D4.wav"),
        Path(app_dir) / "Sounds" / "piano_D4.wav",
    ]


def find_sound_file(candidates: Iterable[str | os.PathLike[str]]) -> Path | None:
    """Return the first candidate that exists as a file, or None."""
    for candidate in candidates:
        path = Path(candidate)
        if path.is_file():
            logger.debug("Found sound file at: %s", path)
            return path
    return None


def resample(samples: np.ndarray, rate: float) -> np.ndarray:
    """Resample audio so it plays ``rate`` times faster, by linear interpolation.

    ``samples`` is one-dimensional or (frames, channels); the dtype is kept.
    """
    if rate <= 0:
        raise ValueError(f"rate must be positive: {rate}")
    samples = np.asarray(samples)
    frames = samples.shape[0]
    if frames == 0:
        return samples.copy()
    out_frames = max(1, int(round(frames / rate)))
    positions = np.minimum(np.arange(out_frames) * rate, frames - 1)
    source = np.arange(frames)
    if samples.ndim == 1:
        result = np.interp(positions, source, samples)
    else:
        result = np.column_stack(
            [np.interp(positions, source, channel) for channel in samples.T]
        )
    if np.issubdtype(samples.dtype, np.integer):
        info = np.iinfo(samples.dtype)
        result = np.clip(np.rint(result), info.min, info.max)
    return result.astype(samples.dtype)


class PitchedSound:
    """A sound file played back at a fixed rate; loaded on first use."""

    def __init__(self, path: str | os.PathLike[str], rate: float = 1.0, volume: float = 1.0) -> None:
        if rate <= 0:
            raise ValueError(f"rate must be positive: {rate}")
        if not 0.0 <= volume <= 1.0:
            raise ValueError(f"volume must be between 0 and 1: {volume}")
        self.path = Path(path)
        self.rate = rate
        self.volume = volume
        self._sound: pygame.mixer.Sound | None = None

    @property
    def loaded(self) -> bool:
        return self._sound is not None

    def _load(self) -> pygame.mixer.Sound | None:
        if self._sound is not None:
            return self._sound
        if pygame.mixer.get_init() is None:
            logger.debug("Audio mixer not initialised; cannot play %s", self.path)
            return None
        try:
            base = pygame.mixer.Sound(str(self.path))
        except (pygame.error, FileNotFoundError) as exc:
            logger.warning("Failed to load sound file %s: %s", self.path, exc)
            return None
        shifted = resample(pygame.sndarray.array(base), self.rate)
        sound = pygame.sndarray.make_sound(np.ascontiguousarray(shifted))
        sound.set_volume(self.volume)
        self._sound = sound
        return sound

    def play(self) -> bool:
        """Restart the sound from the beginning; return whether anything played."""
        self.stop()
        sound = self._load()
        if sound is None:
            return False
        sound.play()
        return True

    def stop(self) -> None:
        if self._sound is not None:
            self._sound.stop()