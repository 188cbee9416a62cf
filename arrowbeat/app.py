"""Terminal front end for the rhythm game."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

from arrowbeat.game import Game, Key
from arrowbeat.music import Difficulty
from arrowbeat.records import RecordStore
from arrowbeat.render import ROWS, render


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return value


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line options."""
    parser = argparse.ArgumentParser(prog="arrowbeat", description="Hit the falling arrows in time.")
    parser.add_argument(
        "--records-dir",
        type=Path,
        default=Path.home() / ".arrowbeat",
        help="directory holding best scores",
    )
    parser.add_argument("--tick", type=_positive_int, default=10, help="milliseconds per frame")
    parser.add_argument("--bell", action="store_true", help="ring the terminal bell for notes")
    parser.add_argument("--show-records", action="store_true", help="print best scores and exit")
    return parser.parse_args(argv)


def _run(screen, store: RecordStore, args: argparse.Namespace) -> None:
    import curses

    screen.nodelay(True)
    screen.keypad(True)
    try:
        curses.curs_set(0)
    except curses.error:
        pass

    messages: list[str] = []

    def ring(frequency: int, duration: int) -> None:
        curses.beep()

    game = Game(store, sound=ring if args.bell else None, notify=messages.append)
    keymap = {
        curses.KEY_UP: Key.UP,
        curses.KEY_DOWN: Key.DOWN,
        curses.KEY_LEFT: Key.LEFT,
        curses.KEY_RIGHT: Key.RIGHT,
        curses.KEY_ENTER: Key.OK,
        10: Key.OK,
        13: Key.OK,
        27: Key.BACK,
        127: Key.BACK,
        curses.KEY_BACKSPACE: Key.BACK,
        ord("b"): Key.BACK,
    }

    while not game.exit_requested:
        key = keymap.get(screen.getch())
        if key is not None:
            game.handle_key(key)
        game.update()
        screen.erase()
        for row, line in enumerate(render(game).splitlines()):
            try:
                screen.addstr(row, 0, line)
            except curses.error:
                pass
        if messages:
            try:
                screen.addstr(ROWS + 1, 0, messages[-1])
            except curses.error:
                pass
        screen.refresh()
        curses.napms(args.tick)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game, or print the stored records."""
    args = parse_args(argv)
    store = RecordStore(args.records_dir)
    if args.show_records:
        for difficulty in Difficulty:
            print(f"{difficulty.name.capitalize()}: {store.load(difficulty)}")
        return 0

    import curses

    curses.wrapper(_run, store, args)
    return 0