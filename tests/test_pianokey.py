import pygame
import pytest

from virtualpiano.pianokey import KeyColor, PianoKey, Rect


def test_rect_contains_inside_and_edges():
    rect = Rect(10, 0, 20, 40)
    assert rect.contains((15, 20))
    assert rect.contains((10, 0))
    assert rect.contains((30, 40))


def test_rect_excludes_outside():
    rect = Rect(10, 0, 20, 40)
    assert not rect.contains((9.9, 20))
    assert not rect.contains((15, 40.1))


def test_key_contains_delegates_to_rect():
    key = PianoKey(Rect(0, 0, 50, 100), KeyColor.WHITE, 0, 1.0)
    assert key.contains((25, 50))
    assert not key.contains((60, 50))


def test_unpressed_fill_is_key_color():
    white = PianoKey(Rect(0, 0, 1, 1), KeyColor.WHITE, 0, 1.0)
    black = PianoKey(Rect(0, 0, 1, 1), KeyColor.BLACK, 14, 1.0)
    assert white.fill_color() == KeyColor.WHITE.value
    assert black.fill_color() == KeyColor.BLACK.value


def test_pressed_fill_colors():
    white = PianoKey(Rect(0, 0, 1, 1), KeyColor.WHITE, 0, 1.0, pressed=True)
    black = PianoKey(Rect(0, 0, 1, 1), KeyColor.BLACK, 14, 1.0, pressed=True)
    assert white.fill_color() == (0, 170, 255)
    assert black.fill_color() == (40, 40, 40)


def test_no_sound_path_means_no_sound():
    key = PianoKey(Rect(0, 0, 1, 1), KeyColor.WHITE, 3, 1.0)
    assert key.sound is None
    assert key.play_sound() is False


def test_missing_sound_file_means_no_sound(tmp_path):
    key = PianoKey(Rect(0, 0, 1, 1), KeyColor.WHITE, 3, 1.0, str(tmp_path / "none.wav"))
    assert key.sound is None


def test_invalid_pitch_falls_back_to_natural_rate(tmp_path):
    wav = tmp_path / "piano_D4.wav"
    wav.write_bytes(b"RIFF")
    key = PianoKey(Rect(0, 0, 1, 1), KeyColor.WHITE, 3, -2.0, str(wav))
    assert key.sound is not None
    assert key.sound.rate == pytest.approx(1.0)
    assert key.pitch == -2.0


def test_valid_pitch_sets_rate(tmp_path):
    wav = tmp_path / "piano_D4.wav"
    wav.write_bytes(b"RIFF")
    key = PianoKey(Rect(0, 0, 1, 1), KeyColor.BLACK, 14, 1.5, str(wav))
    assert key.sound.rate == pytest.approx(1.5)


def test_draw_fills_and_outlines():
    surface = pygame.Surface((100, 100))
    surface.fill((255, 0, 0))
    key = PianoKey(Rect(10, 10, 50, 50), KeyColor.WHITE, 0, 1.0, pressed=True)
    key.draw(surface)
    assert tuple(surface.get_at((35, 35)))[:3] == (0, 170, 255)
    assert tuple(surface.get_at((10, 10)))[:3] == KeyColor.BLACK.value
    assert tuple(surface.get_at((80, 80)))[:3] == (255, 0, 0)


def test_pressing_changes_drawn_color():
    surface = pygame.Surface((40, 40))
    key = PianoKey(Rect(0, 0, 40, 40), KeyColor.BLACK, 14, 1.0)
    key.draw(surface)
    before = tuple(surface.get_at((20, 20)))[:3]
    key.pressed = True
    key.draw(surface)
    after = tuple(surface.get_at((20, 20)))[:3]
    assert before == KeyColor.BLACK.value
    assert after == key.fill_color()