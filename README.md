# arrowbeat

A small rhythm game for the terminal. Arrows fall down the screen in time with
a short tune. Press the matching direction while an arrow is inside the hit
zone. The round ends when you press a wrong direction key, when an arrow falls
past the zone, or when the tune runs out.

## Installing

```
pip install .
```

The game runs on the standard `curses` module, so it needs a terminal where
`curses` is available, for example Linux or macOS.

## Playing

```
arrowbeat
```

The menu lists **Easy**, **Medium**, **Hard** and **Exit**.

- Move through the menu with the up and down arrow keys. The selection wraps
  around at both ends.
- Press Enter to confirm.
- While playing, use the four arrow keys.
- On the game-over screen, press Esc, Backspace or `b` to return to the menu.

Messages such as "Missed! Game Over" and "New Record!" appear below the play
field.

| Difficulty | Note interval | Arrow speed (pixels per tick) |
|------------|---------------|-------------------------------|
| Easy       | 1000 ms       | 2                             |
| Medium     | 700 ms        | 3                             |
| Hard       | 500 ms        | 4                             |

Each hit scores one point and starts a 200 ms shrinking animation. At every
multiple of 5 points the game speeds up, as long as the note interval is still
above 200 ms: the interval drops by 50 ms and arrows fall one pixel per tick
faster.

### Options

| Option | Meaning |
|--------|---------|
| `--records-dir DIR` | Directory that holds the best scores. Default: `~/.arrowbeat`. |
| `--tick MS` | Milliseconds per frame, a positive integer. Default: 10. |
| `--bell` | Ring the terminal bell for each note and each hit. |
| `--show-records` | Print the best score for each difficulty and exit. |

### Best scores

Each difficulty keeps its best score in its own text file inside the records
directory:

- `arrowbeat_record_easy.txt`
- `arrowbeat_record_medium.txt`
- `arrowbeat_record_hard.txt`

The score is written as decimal text whenever a round ends above the stored
record. A missing file, or one that cannot be read, counts as 0.

## Using it as a library

```python
from arrowbeat.music import Difficulty, get_rhythm
from arrowbeat.records import RecordStore
from arrowbeat.game import Game, GameState, Key
from arrowbeat.render import render

store = RecordStore("scores")
game = Game(store, clock=my_clock, sound=my_sound, notify=print)
game.start(Difficulty.EASY)
game.handle_key(Key.LEFT)
game.update()
print(render(game))
```

### `arrowbeat.music`

- `Direction`, `Difficulty` and `NoteEvent(frequency, duration, direction)`.
- `get_rhythm(difficulty)` returns the note sequence for a difficulty. A
  frequency of 0 means silence. A direction of `Direction.NONE` spawns no
  arrow.

### `arrowbeat.records`

- `record_filename(difficulty)` returns the file name for a difficulty.
- `RecordStore(directory)` provides `path`, `load` and `save`.

### `arrowbeat.game`

`Game(store, clock=None, sound=None, notify=None)` holds the whole game.

- `clock()` returns milliseconds. It defaults to a monotonic clock.
- `sound(frequency, duration)` and `notify(message)` default to doing nothing.

Its methods:

- `start(difficulty)` begins a round.
- `handle_key(key)` applies one press of a `Key`: `UP`, `DOWN`, `LEFT`,
  `RIGHT`, `OK` or `BACK`.
- `update()` advances one tick.

Its state can be read from these attributes:

- `state` (a `GameState`)
- `selection`, `difficulty`, `score`, `record`
- `arrow` (an `Arrow`)
- `exit_requested`, which is set when **Exit** is chosen in the menu

`arrow_size(elapsed)` gives the size of a hit arrow partway through its
shrinking animation.

### `arrowbeat.render`

These functions draw the 128×64-pixel screen as a text grid of 64 columns by
16 rows. Each character cell covers 2×4 pixels.

- `render(game)` draws whichever screen matches the game's state.
- `render_menu(selection)`, `render_game(game)` and `render_game_over(game)`
  each draw one screen.
- `arrow_triangle(direction, y, size)` returns the corners of an arrow in
  pixels.

## What it does not do

- It plays no real tones. The notes' frequencies and durations are passed to
  the `sound` callback. The command line can only ring the terminal bell
  (`--bell`).
- It has no graphical window. The screen is drawn as text with `curses`.

## Running the tests

```
pip install .[test]
pytest
```