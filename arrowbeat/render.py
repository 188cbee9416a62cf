"""Text rendering of the game screen on a coarse character grid."""

from __future__ import annotations

from typing import Optional

from arrowbeat.game import (
    ARROW_SIZE,
    HIT_ZONE_RANGE,
    HIT_ZONE_Y,
    MENU_OPTIONS,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Game,
    GameState,
    arrow_size,
)
from arrowbeat.music import Direction

TITLE = "Arrow Beat"
CELL_WIDTH = 2
CELL_HEIGHT = 4
COLUMNS = SCREEN_WIDTH // CELL_WIDTH
ROWS = SCREEN_HEIGHT // CELL_HEIGHT

_FILL = "#"
_LINE = "-"

_LANES = {
    Direction.UP: SCREEN_WIDTH // 2,
    Direction.DOWN: SCREEN_WIDTH // 2,
    Direction.LEFT: SCREEN_WIDTH // 4,
    Direction.RIGHT: 3 * SCREEN_WIDTH // 4,
}

Point = tuple[int, int]


def arrow_triangle(direction: Direction, y: int, size: int) -> Optional[tuple[Point, Point, Point]]:
    """Return the corners of an arrow in screen pixels, or None if nothing is drawn."""
    x = _LANES.get(direction)
    if x is None or size <= 0:
        return None
    half = size // 2
    if direction is Direction.UP:
        return (x, y - half), (x - half, y + half), (x + half, y + half)
    if direction is Direction.DOWN:
        return (x, y + half), (x - half, y - half), (x + half, y - half)
    if direction is Direction.LEFT:
        return (x - half, y), (x + half, y - half), (x + half, y + half)
    return (x + half, y), (x - half, y - half), (x - half, y + half)


def _cross(a: Point, b: Point, p: Point) -> int:
    return (b[0] - a[0]) * (p[1] - a[1]) - (b[1] - a[1]) * (p[0] - a[0])


def _inside(p: Point, a: Point, b: Point, c: Point) -> bool:
    signs = (_cross(a, b, p), _cross(b, c, p), _cross(c, a, p))
    return not (any(s < 0 for s in signs) and any(s > 0 for s in signs))


class _Frame:
    def __init__(self) -> None:
        self.cells = [[" "] * COLUMNS for _ in range(ROWS)]

    def fill_triangle(self, corners: tuple[Point, Point, Point]) -> None:
        a, b, c = corners
        xs = [p[0] for p in corners]
        ys = [p[1] for p in corners]
        for py in range(max(min(ys), 0), min(max(ys), SCREEN_HEIGHT - 1) + 1):
            for px in range(max(min(xs), 0), min(max(xs), SCREEN_WIDTH - 1) + 1):
                if _inside((px, py), a, b, c):
                    self.cells[py // CELL_HEIGHT][px // CELL_WIDTH] = _FILL

    def hline(self, y: int) -> None:
        row = y // CELL_HEIGHT
        if 0 <= row < ROWS:
            self.cells[row] = [_LINE if ch == " " else ch for ch in self.cells[row]]

    def text(self, center_x: int, y: int, value: str) -> None:
        row = y // CELL_HEIGHT
        if not 0 <= row < ROWS:
            return
        start = center_x // CELL_WIDTH - len(value) // 2
        for offset, ch in enumerate(value):
            col = start + offset
            if 0 <= col < COLUMNS:
                self.cells[row][col] = ch

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self.cells)


def _score_line(game: Game) -> str:
    return f"Score: {game.score}  Record: {game.record}"


def render_menu(selection: int) -> str:
    """Draw the difficulty menu with a marker beside the selected entry."""
    frame = _Frame()
    frame.text(SCREEN_WIDTH // 2, 10, TITLE)
    for index, option in enumerate(MENU_OPTIONS):
        y = 25 + index * 12
        if index == selection:
            frame.text(SCREEN_WIDTH // 2 - 20, y, ">")
        frame.text(SCREEN_WIDTH // 2 + 10, y, option)
    return str(frame)


def render_game(game: Game) -> str:
    """Draw the arrow, the hit zone and the score."""
    frame = _Frame()
    arrow = game.arrow
    if arrow.active:
        size = ARROW_SIZE
        if arrow.hit_animation_active:
            size = arrow_size(game.clock() - arrow.hit_animation_start)
        corners = arrow_triangle(arrow.direction, arrow.y, size)
        if corners is not None:
            frame.fill_triangle(corners)
    frame.hline(HIT_ZONE_Y)
    frame.hline(HIT_ZONE_Y - HIT_ZONE_RANGE)
    frame.text(SCREEN_WIDTH // 2, SCREEN_HEIGHT - 5, _score_line(game))
    return str(frame)


def render_game_over(game: Game) -> str:
    """Draw the final score screen."""
    frame = _Frame()
    frame.text(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2 - 10, "Game Over")
    frame.text(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2 + 10, _score_line(game))
    frame.text(SCREEN_WIDTH // 2, SCREEN_HEIGHT - 10, "Press BACK")
    return str(frame)


def render(game: Game) -> str:
    """Draw whichever screen matches the game's state."""
    if game.state is GameState.MENU:
        return render_menu(game.selection)
    if game.state is GameState.PLAYING:
        return render_game(game)
    return render_game_over(game)