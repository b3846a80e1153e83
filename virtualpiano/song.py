"""Songs as named sequences of timed notes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, NamedTuple


class Note(NamedTuple):
    """One note of a song: the piano key to strike and how long to wait after it."""

    key: int
    duration_ms: int


@dataclass(frozen=True)
class Song:
    """A named, immutable sequence of notes."""

    name: str
    notes: tuple[Note, ...] = field(default_factory=tuple)

    def __init__(self, name: str, notes: Iterable[tuple[int, int]] = ()) -> None:
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "notes", tuple(Note(*note) for note in notes))

    def __len__(self) -> int:
        return len(self.notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(self.notes)