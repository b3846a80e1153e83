"""The piano window: the keyboard, a song chooser and a play/stop button."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

import pygame

from virtualpiano.audio import default_sound_candidates
from virtualpiano.piano import Piano
from virtualpiano.songplayer import SongPlayer, default_songs

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Virtual Piano"
WINDOW_SIZE = (1000, 500)
PIANO_SIZE = (1000, 400)
FPS = 60

PLAY_LABEL = "Play"
STOP_LABEL = "Stop"

PREV_BUTTON = pygame.Rect(10, 420, 50, 60)
SONG_BOX = pygame.Rect(70, 420, 580, 60)
NEXT_BUTTON = pygame.Rect(660, 420, 50, 60)
PLAY_BUTTON = pygame.Rect(720, 420, 270, 60)

_BACKGROUND = (230, 230, 230)
_CONTROL_FILL = (250, 250, 250)
_CONTROL_OUTLINE = (120, 120, 120)
_TEXT = (20, 20, 20)


class PianoApp:
    """Ties a piano and a song player to window events and drawing."""

    def __init__(
        self,
        piano: Piano | None = None,
        player: SongPlayer | None = None,
        *,
        sound_path: str | Path | None = None,
        song_index: int = 0,
    ) -> None:
        if piano is None:
            candidates = list(default_sound_candidates(Path(sys.argv[0]).resolve().parent))
            if sound_path is not None:
                candidates.insert(0, Path(sound_path))
            piano = Piano(*PIANO_SIZE, sound_candidates=candidates)
        self.piano = piano
        self.player = player if player is not None else SongPlayer(piano)
        self.button_label = PLAY_LABEL
        self.running = False
        self.selected_song = 0
        self.select_song(song_index)
        self.player.on_finished(self._song_finished)

    def _song_finished(self) -> None:
        self.button_label = PLAY_LABEL

    def select_song(self, index: int) -> None:
        """Choose the song the play button starts."""
        if not 0 <= index < len(self.player.songs):
            raise IndexError(f"invalid song index: {index}")
        self.selected_song = index

    def _step_song(self, step: int) -> None:
        count = len(self.player.songs)
        if count:
            self.select_song((self.selected_song + step) % count)

    def toggle_play(self) -> None:
        """Stop the song if one is playing, otherwise start the selected one."""
        if self.player.playing:
            self.player.stop_playing()
            self.button_label = PLAY_LABEL
        else:
            self.player.start_playing(self.selected_song)
            self.button_label = STOP_LABEL

    def _click(self, pos: tuple[int, int]) -> bool:
        if PLAY_BUTTON.collidepoint(pos):
            self.toggle_play()
            return True
        if PREV_BUTTON.collidepoint(pos):
            self._step_song(-1)
            return True
        if NEXT_BUTTON.collidepoint(pos) or SONG_BOX.collidepoint(pos):
            self._step_song(1)
            return True
        return self.piano.mouse_press(pos) is not None

    def handle_event(self, event: pygame.event.Event) -> bool:
        """React to one window event; return whether it was used."""
        if event.type == pygame.QUIT:
            self.running = False
            return True
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_UP:
                self._step_song(-1)
                return True
            if event.key == pygame.K_DOWN:
                self._step_song(1)
                return True
            if event.key == pygame.K_SPACE:
                self.toggle_play()
                return True
            return self.piano.key_press(event.key)
        if event.type == pygame.KEYUP:
            return self.piano.key_release(event.key)
        if event.type == pygame.MOUSEBUTTONDOWN:
            return self._click(event.pos)
        if event.type == pygame.MOUSEBUTTONUP:
            return self.piano.mouse_release(event.pos) is not None
        if event.type == pygame.WINDOWFOCUSLOST:
            self.piano.focus_out()
            return True
        return False

    def _draw_button(self, surface: pygame.Surface, font: pygame.font.Font,
                     area: pygame.Rect, text: str) -> None:
        pygame.draw.rect(surface, _CONTROL_FILL, area)
        pygame.draw.rect(surface, _CONTROL_OUTLINE, area, width=1)
        rendered = font.render(text, True, _TEXT)
        surface.blit(rendered, rendered.get_rect(center=area.center))

    def _draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        surface.fill(_BACKGROUND)
        self.piano.draw(surface)
        song = self.player.songs[self.selected_song]
        self._draw_button(surface, font, PREV_BUTTON, "<")
        self._draw_button(surface, font, SONG_BOX, song.name)
        self._draw_button(surface, font, NEXT_BUTTON, ">")
        self._draw_button(surface, font, PLAY_BUTTON, self.button_label)

    def run(self) -> None:
        """Open the window and process events until it is closed."""
        pygame.init()
        try:
            pygame.mixer.init()
        except pygame.error as exc:
            logger.warning("Audio output unavailable: %s", exc)
        try:
            screen = pygame.display.set_mode(WINDOW_SIZE)
            pygame.display.set_caption(WINDOW_TITLE)
            font = pygame.font.Font(None, 28)
            clock = pygame.time.Clock()
            schedulers = list({id(s): s for s in (self.piano.scheduler,
                                                  self.player.scheduler)}.values())
            self.running = True
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                elapsed = clock.tick(FPS)
                for scheduler in schedulers:
                    scheduler.advance(elapsed)
                self._draw(screen, font)
                pygame.display.flip()
        finally:
            self.player.stop_playing()
            pygame.quit()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="virtualpiano", description="Play a piano on the keyboard.")
    parser.add_argument("--song", type=int, default=0, help="index of the song selected at start")
    parser.add_argument("--sound", type=Path, default=None, help="sample sound file to use")
    parser.add_argument("--list-songs", action="store_true", help="print the songs and exit")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    songs = default_songs()
    if args.list_songs:
        for index, song in enumerate(songs):
            print(f"{index}: {song.name}")
        return 0
    if not 0 <= args.song < len(songs):
        parser.error(f"song index must be between 0 and {len(songs) - 1}")
    PianoApp(sound_path=args.sound, song_index=args.song).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())