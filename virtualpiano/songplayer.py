"""Playing songs on the piano, one note after another."""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from virtualpiano.scheduler import Scheduler
from virtualpiano.song import Song

logger = logging.getLogger(__name__)


class _Playable(Protocol):
    scheduler: Scheduler

    def play_key(self, key: int) -> bool: ...


def default_songs() -> list[Song]:
    """The songs that come with the piano."""
    happy_birthday = [
        (4, 400), (4, 400), (6, 600), (4, 600), (9, 600), (8, 1000),
        (4, 400), (4, 400), (6, 600), (4, 600), (11, 600), (9, 1000),
        (4, 400), (4, 400), (16, 600), (13, 600), (9, 600), (8, 600), (6, 1000),
        (14, 400), (14, 400), (13, 600), (9, 600), (11, 600), (9, 1000),
    ]
    twinkle = [
        (7, 400), (7, 400), (14, 400), (14, 400), (16, 400), (16, 400), (14, 800),
        (12, 400), (12, 400), (11, 400), (11, 400), (9, 400), (9, 400), (7, 800),
        (14, 400), (14, 400), (12, 400), (12, 400), (11, 400), (11, 400), (9, 800),
        (14, 400), (14, 400), (12, 400), (12, 400), (11, 400), (11, 400), (9, 800),
    ]
    jingle_bells = [
        (9, 400), (9, 400), (9, 800),
        (9, 400), (9, 400), (9, 800),
        (9, 400), (12, 400), (5, 400), (7, 400),
        (9, 800),
        (10, 400), (10, 400), (10, 300), (10, 500),
        (10, 500), (9, 400), (9, 400), (9, 350),
        (9, 350), (7, 400), (7, 400), (9, 400),
        (7, 800), (12, 800),
    ]
    mary = [
        (5, 400), (3, 400), (1, 400), (3, 400),
        (5, 400), (5, 400), (5, 800),
        (3, 400), (3, 400), (3, 800),
        (5, 400), (8, 400), (8, 800),
        (5, 400), (3, 400), (1, 400), (3, 400),
        (5, 400), (5, 400), (5, 400), (5, 400),
        (3, 400), (3, 400), (5, 400), (3, 400),
        (1, 1000),
    ]
    fur_elise = [
        (11, 300), (18, 300), (11, 300), (18, 300), (11, 300), (15, 300), (17, 300), (16, 300),
        (10, 600), (13, 300), (15, 300), (16, 300),
        (11, 600), (13, 300), (15, 300), (16, 300),
        (11, 300), (18, 300), (11, 300), (18, 300), (11, 300), (15, 300), (17, 300), (16, 300),
        (10, 600), (13, 300), (15, 300), (16, 300),
        (11, 800),
    ]
    return [
        Song("Happy Birthday", happy_birthday),
        Song("Twinkle Twinkle Little Star", twinkle),
        Song("Jingle Bells", jingle_bells),
        Song("Mary Had a Little Lamb", mary),
        Song("Für Elise", fur_elise),
    ]


class SongPlayer:
    """Plays a chosen song on a piano, timing each note with a scheduler."""

    def __init__(self, piano: _Playable, scheduler: Scheduler | None = None) -> None:
        self.piano = piano
        self.scheduler = scheduler if scheduler is not None else piano.scheduler
        self._songs: list[Song] = default_songs()
        self._current_song: int | None = None
        self._current_note = 0
        self._playing = False
        self._timer = None
        self._finished_callbacks: list[Callable[[], object]] = []
        logger.debug("Loaded %d songs", len(self._songs))

    @property
    def songs(self) -> tuple[Song, ...]:
        return tuple(self._songs)

    @property
    def playing(self) -> bool:
        return self._playing

    def add_song(self, song: Song) -> None:
        self._songs.append(song)

    def on_finished(self, callback: Callable[[], object]) -> None:
        """Register a callback run whenever a song plays to its end."""
        self._finished_callbacks.append(callback)

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self.scheduler.cancel(self._timer)
            self._timer = None

    def start_playing(self, song_index: int) -> None:
        """Start the song at ``song_index`` from its first note."""
        if not 0 <= song_index < len(self._songs):
            raise IndexError(f"invalid song index: {song_index}")
        self._current_song = song_index
        self._current_note = 0
        self._playing = True
        logger.debug("Starting to play: %s", self._songs[song_index].name)
        self.play_next_note()

    def stop_playing(self) -> None:
        self._playing = False
        self._cancel_timer()
        self._current_note = 0

    def play_next_note(self) -> None:
        """Play the current note and schedule the next; finish when none are left."""
        if not self._playing or self._current_song is None:
            return
        notes = self._songs[self._current_song].notes
        if self._current_note >= len(notes):
            self.stop_playing()
            for callback in list(self._finished_callbacks):
                callback()
            return
        note = notes[self._current_note]
        self.piano.play_key(note.key)
        self._cancel_timer()
        self._timer = self.scheduler.call_later(note.duration_ms, self.play_next_note)
        self._current_note += 1