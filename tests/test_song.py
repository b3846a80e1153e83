import pytest

from virtualpiano.song import Note, Song


def test_note_fields():
    note = Note(4, 400)
    assert note.key == 4
    assert note.duration_ms == 400


def test_song_converts_pairs_to_notes():
    song = Song("Happy Birthday", [(4, 400), (6, 600)])
    assert song.notes == (Note(4, 400), Note(6, 600))
    assert all(isinstance(n, Note) for n in song.notes)


def test_song_len_and_iter():
    pairs = [(7, 400), (7, 400), (14, 800)]
    song = Song("Twinkle Twinkle Little Star", pairs)
    assert len(song) == len(pairs)
    assert [tuple(n) for n in song] == pairs


def test_song_name():
    assert Song("Für Elise", []).name == "Für Elise"


def test_empty_song():
    song = Song("Empty")
    assert len(song) == 0
    assert list(song) == []


def test_song_is_independent_of_source_list():
    pairs = [(1, 1000)]
    song = Song("Mary Had a Little Lamb", pairs)
    pairs.append((5, 400))
    assert len(song) == 1


def test_song_is_immutable():
    song = Song("Jingle Bells", [(9, 400)])
    with pytest.raises(AttributeError):
        song.name = "Other"
    assert song.name == "Jingle Bells"
    assert song.notes == (Note(9, 400),)


def test_song_equality():
    assert Song("A", [(1, 2)]) == Song("A", [Note(1, 2)])