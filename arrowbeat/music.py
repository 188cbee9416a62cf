"""Note sequences that drive the falling arrows."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class Direction(Enum):
    """Direction of an arrow; NONE marks a note with no arrow."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    NONE = "none"


class Difficulty(IntEnum):
    """Game difficulty levels, in menu order."""

    EASY = 0
    MEDIUM = 1
    HARD = 2


@dataclass(frozen=True)
class NoteEvent:
    """One step of a rhythm: a tone (0 Hz is silence) and the arrow it spawns."""

    frequency: int
    duration: int
    direction: Direction


_EASY_RHYTHM = (
    NoteEvent(440, 500, Direction.LEFT),
    NoteEvent(0, 300, Direction.NONE),
    NoteEvent(440, 500, Direction.RIGHT),
    NoteEvent(0, 300, Direction.NONE),
    NoteEvent(660, 500, Direction.UP),
    NoteEvent(0, 300, Direction.NONE),
    NoteEvent(440, 500, Direction.DOWN),
    NoteEvent(0, 300, Direction.NONE),
)

_MEDIUM_RHYTHM = (
    NoteEvent(660, 400, Direction.RIGHT),
    NoteEvent(0, 200, Direction.NONE),
    NoteEvent(660, 400, Direction.LEFT),
    NoteEvent(880, 400, Direction.UP),
    NoteEvent(660, 400, Direction.DOWN),
)

_HARD_RHYTHM = (
    NoteEvent(880, 300, Direction.DOWN),
    NoteEvent(660, 300, Direction.LEFT),
    NoteEvent(880, 300, Direction.RIGHT),
    NoteEvent(660, 300, Direction.UP),
    NoteEvent(1040, 300, Direction.LEFT),
    NoteEvent(880, 300, Direction.RIGHT),
)


def get_rhythm(difficulty: Difficulty) -> tuple[NoteEvent, ...]:
    """Return the note sequence for a difficulty; anything else gets the hard one."""
    if difficulty == Difficulty.EASY:
        return _EASY_RHYTHM
    if difficulty == Difficulty.MEDIUM:
        return _MEDIUM_RHYTHM
    return _HARD_RHYTHM