"""Game state and rules: menu, falling arrows, hits, misses and records."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from arrowbeat.music import Difficulty, Direction, NoteEvent, get_rhythm
from arrowbeat.records import RecordStore

SCREEN_WIDTH = 128
SCREEN_HEIGHT = 64
ARROW_SIZE = 10
HIT_ZONE_Y = SCREEN_HEIGHT - 15
HIT_ZONE_RANGE = 10
HIT_ANIM_DURATION = 200

MENU_OPTIONS = ("Easy", "Medium", "Hard", "Exit")
EXIT_SELECTION = len(MENU_OPTIONS) - 1

MISSED_MESSAGE = "Missed! Game Over"
RECORD_MESSAGE = "New Record!"
HIT_SOUND = (1000, 100)

_SPEEDUP_EVERY = 5
_SPEEDUP_FLOOR = 200
_SPEEDUP_STEP = 50

_SETTINGS = {
    Difficulty.EASY: (1000, 2),
    Difficulty.MEDIUM: (700, 3),
    Difficulty.HARD: (500, 4),
}


class GameState(Enum):
    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class Key(Enum):
    """A short press of one of the device buttons."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    OK = "ok"
    BACK = "back"


_KEY_DIRECTIONS = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}


@dataclass
class Arrow:
    """The single arrow currently on screen."""

    direction: Direction = Direction.NONE
    y: int = 0
    active: bool = False
    hit_animation_active: bool = False
    hit_animation_start: int = 0


def arrow_size(elapsed: int) -> int:
    """Size of a hit arrow after `elapsed` ms of its shrinking animation."""
    if elapsed < HIT_ANIM_DURATION:
        factor = 1.0 - 0.7 * (elapsed / HIT_ANIM_DURATION)
        return int(ARROW_SIZE * factor)
    return 0


def _monotonic_ms() -> int:
    return time.monotonic_ns() // 1_000_000


def _silent(frequency: int, duration: int) -> None:
    return None


def _ignore(message: str) -> None:
    return None


class Game:
    """The whole game; `clock` returns milliseconds."""

    def __init__(
        self,
        store: RecordStore,
        clock: Optional[Callable[[], int]] = None,
        sound: Optional[Callable[[int, int], None]] = None,
        notify: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.store = store
        self.clock = clock or _monotonic_ms
        self.sound = sound or _silent
        self.notify = notify or _ignore
        self.state = GameState.MENU
        self.selection = int(Difficulty.EASY)
        self.difficulty = Difficulty.EASY
        self.rhythm: tuple[NoteEvent, ...] = ()
        self.rhythm_index = 0
        self.arrow = Arrow()
        self.score = 0
        self.record = 0
        self.last_note_time = 0
        self.note_interval = 0
        self.arrow_speed = 0
        self.exit_requested = False

    def start(self, difficulty: Difficulty) -> None:
        """Begin a round at the given difficulty."""
        difficulty = Difficulty(difficulty)
        self.difficulty = difficulty
        self.selection = int(difficulty)
        self.rhythm = get_rhythm(difficulty)
        self.rhythm_index = 0
        self.score = 0
        self.arrow = Arrow()
        self.state = GameState.PLAYING
        self.record = self.store.load(difficulty)
        self.note_interval, self.arrow_speed = _SETTINGS[difficulty]
        self.last_note_time = self.clock()

    def handle_key(self, key: Key) -> None:
        """Apply one short button press."""
        if self.state is GameState.MENU:
            self._menu_key(key)
        elif self.state is GameState.PLAYING:
            self._play_key(key)
        elif key is Key.BACK:
            self.state = GameState.MENU

    def _menu_key(self, key: Key) -> None:
        if key is Key.UP:
            self.selection = self.selection - 1 if self.selection > 0 else EXIT_SELECTION
        elif key is Key.DOWN:
            self.selection = self.selection + 1 if self.selection < EXIT_SELECTION else 0
        elif key is Key.OK:
            if self.selection == EXIT_SELECTION:
                self.exit_requested = True
            else:
                self.start(Difficulty(self.selection))

    def _play_key(self, key: Key) -> None:
        arrow = self.arrow
        if not arrow.active:
            return
        pressed = _KEY_DIRECTIONS.get(key)
        if pressed is None or arrow.hit_animation_active:
            return
        in_zone = HIT_ZONE_Y - HIT_ZONE_RANGE <= arrow.y <= HIT_ZONE_Y + HIT_ZONE_RANGE
        if pressed is arrow.direction and in_zone:
            self.score += 1
            arrow.hit_animation_active = True
            arrow.hit_animation_start = self.clock()
            self.sound(*HIT_SOUND)
            if self.score % _SPEEDUP_EVERY == 0 and self.note_interval > _SPEEDUP_FLOOR:
                self.note_interval -= _SPEEDUP_STEP
                self.arrow_speed += 1
        else:
            self._missed()

    def update(self) -> None:
        """Advance one tick: play due notes, move the arrow, end the round."""
        if self.state is not GameState.PLAYING:
            return
        now = self.clock()
        if now - self.last_note_time >= self.note_interval:
            if self.rhythm_index < len(self.rhythm):
                note = self.rhythm[self.rhythm_index]
                self.rhythm_index += 1
                self.last_note_time = now
                if note.frequency > 0:
                    self.sound(note.frequency, note.duration)
                if note.direction is not Direction.NONE and not self.arrow.active:
                    self.arrow = Arrow(direction=note.direction, active=True)
            else:
                self.state = GameState.GAME_OVER
                self._check_record()

        arrow = self.arrow
        if arrow.active and not arrow.hit_animation_active:
            arrow.y += self.arrow_speed
            if arrow.y > HIT_ZONE_Y + HIT_ZONE_RANGE:
                self._missed()
        elif arrow.hit_animation_active:
            if self.clock() - arrow.hit_animation_start >= HIT_ANIM_DURATION:
                arrow.active = False
                arrow.hit_animation_active = False

    def _missed(self) -> None:
        self.state = GameState.GAME_OVER
        self.notify(MISSED_MESSAGE)
        self._check_record()

    def _check_record(self) -> None:
        if self.score > self.record:
            self.record = self.score
            self.store.save(self.difficulty, self.record)
            self.notify(RECORD_MESSAGE)