import dataclasses

import pytest

from arrowbeat.music import Difficulty, Direction, NoteEvent, get_rhythm


def test_easy_rhythm_starts_with_left_note():
    rhythm = get_rhythm(Difficulty.EASY)
    assert rhythm[0] == NoteEvent(440, 500, Direction.LEFT)
    assert len(rhythm) == 8


def test_easy_arrow_order():
    arrows = [n.direction for n in get_rhythm(Difficulty.EASY) if n.direction is not Direction.NONE]
    assert arrows == [Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN]


def test_medium_rhythm_contents():
    rhythm = get_rhythm(Difficulty.MEDIUM)
    assert [n.frequency for n in rhythm] == [660, 0, 660, 880, 660]
    assert rhythm[1] == NoteEvent(0, 200, Direction.NONE)


def test_hard_rhythm_highest_note():
    rhythm = get_rhythm(Difficulty.HARD)
    assert rhythm[4] == NoteEvent(1040, 300, Direction.LEFT)
    assert all(n.duration == 300 for n in rhythm)


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_silence_never_spawns_arrow(difficulty):
    for note in get_rhythm(difficulty):
        assert (note.frequency == 0) == (note.direction is Direction.NONE)


def test_rhythms_differ_per_difficulty():
    assert get_rhythm(Difficulty.EASY) != get_rhythm(Difficulty.MEDIUM)
    assert get_rhythm(Difficulty.MEDIUM) != get_rhythm(Difficulty.HARD)


def test_note_event_is_immutable():
    note = get_rhythm(Difficulty.EASY)[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        note.frequency = 1
    assert note.frequency == 440
    assert get_rhythm(Difficulty.EASY)[0] == NoteEvent(440, 500, Direction.LEFT)