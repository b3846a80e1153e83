# virtualpiano

A small on-screen piano with 24 keys: 14 white and 10 black. You play it
with the computer keyboard or the mouse, or you let it play one of its
built-in songs.

Every note comes from one sample, `piano_D4.wav`. The piano resamples it to
raise or lower the pitch, one semitone per key. Key 2 plays the sample at its
own pitch.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
virtualpiano
```

Options:

| Option | Meaning |
|--------|---------|
| `--song N` | index of the song selected at start (default 0) |
| `--sound PATH` | sample file to try before the usual places |
| `--list-songs` | print the songs with their indices and exit |

The piano looks for the sample in these places, in this order:

- the file given with `--sound`, if there is one
- `piano/Sounds/piano_D4.wav`
- `Sounds/piano_D4.wav`
- `./Sounds/piano_D4.wav`
- `../Sounds/piano_D4.wav`
- `../../Sounds/piano_D4.wav`
- `Sounds/piano_D4.wav` in the directory of the program that was started

If it finds none of them, or if no audio output is available, the piano
still draws and reacts to input. It just makes no sound.

## Playing

| Keys | Piano keys |
|------|------------|
| `Q W E R T Y U I O P [ ] \ A` | white keys 0–13 |
| `1 2 3 4 5 6 7 8 9 0` | black keys 14–23 |

You can also click a key with the mouse. Black keys lie on top of the white
keys, so a click where the two overlap plays the black key. A key lights up
while it is pressed. A key struck from the keyboard is released when you let
go of it, or after 300 ms at the latest. When the window loses focus, every
key is released.

## Songs

The controls under the keyboard show the selected song:

- `<` and `>`, or the Up and Down arrow keys, step through the songs. A
  click on the song name also steps to the next one.
- **Play** starts the selected song. While a song plays, the button reads
  **Stop** and stops it. The Space key does the same.
- The button turns back to **Play** when the song ends.

The built-in songs are:

0. Happy Birthday
1. Twinkle Twinkle Little Star
2. Jingle Bells
3. Mary Had a Little Lamb
4. Für Elise

## Using it as a library

```python
from virtualpiano.piano import Piano
from virtualpiano.song import Note, Song
from virtualpiano.songplayer import SongPlayer, default_songs

for song in default_songs():
    print(song.name, len(song))

piano = Piano()
player = SongPlayer(piano)
player.add_song(Song("Scale", [Note(key, 300) for key in range(14)]))
player.on_finished(lambda: print("done"))
player.start_playing(len(player.songs) - 1)

piano.scheduler.advance(300 * 14)  # play the whole scale
```

- `Song` is an immutable name plus a tuple of `Note(key, duration_ms)`.
- `SongPlayer.start_playing` raises `IndexError` for an index that is out of
  range.
- `Piano` handles input with `key_press`, `key_release`, `mouse_press`,
  `mouse_release` and `focus_out`. It strikes keys with `play_key`. Its
  `pressed_keys` property holds the keys that are currently down.
- Timing comes from `virtualpiano.scheduler.Scheduler`. It has no clock of
  its own: you move it forward with `advance(ms)`. That way you can step
  through songs and key releases in tests without waiting in real time. The
  window's main loop advances it once per frame.

## What it does not do

The piano has no recording. It cannot save or load songs from files. The
only songs are the built-in ones and those added with `SongPlayer.add_song`.
It takes no MIDI input or output.