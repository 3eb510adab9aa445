"""Glyph selection for drawing the snake and trophies."""

from __future__ import annotations

from typing import TYPE_CHECKING

from snake_pit.interfaces import Color
from snake_pit.snake import Direction

if TYPE_CHECKING:
    from snake_pit.grid import Coord
    from snake_pit.interfaces import Renderer
    from snake_pit.snake import SnakeBody
    from snake_pit.trophy import Trophy

HEAD_GLYPHS: dict[Direction, str] = {
    Direction.UP: "\u2809",  # ⠉
    Direction.DOWN: "\u28c0",  # ⣀
    Direction.LEFT: "\u2806",  # ⠆
    Direction.RIGHT: "\u2830",  # ⠰
}

# Corner pieces keyed by (previous direction, current direction).
_CORNERS: dict[tuple[Direction, Direction], str] = {
    (Direction.RIGHT, Direction.UP): "\u255d",  # ╝
    (Direction.DOWN, Direction.LEFT): "\u255d",
    (Direction.LEFT, Direction.UP): "\u255a",  # ╚
    (Direction.DOWN, Direction.RIGHT): "\u255a",
    (Direction.RIGHT, Direction.DOWN): "\u2557",  # ╗
    (Direction.UP, Direction.LEFT): "\u2557",
    (Direction.LEFT, Direction.DOWN): "\u2554",  # ╔
    (Direction.UP, Direction.RIGHT): "\u2554",
}


def head_glyph(direction: Direction) -> str:
    return HEAD_GLYPHS[direction]


def neck_glyph(prev_direction: Direction, direction: Direction) -> str:
    """Connector for the segment behind the head."""
    if prev_direction == direction:
        if direction in (Direction.UP, Direction.DOWN):
            return "\u2551"  # ║
        return "\u2550"  # ═
    return _CORNERS[(prev_direction, direction)]


def tail_glyph(tail: Coord, ahead: Coord) -> str:
    """Tail tip pointing away from the segment *ahead* of it."""
    dr = tail.row - ahead.row
    if dr > 0:
        return "\u255c"  # ╜ moving up
    if dr < 0:
        return "\u2553"  # ╓ moving down
    if tail.col - ahead.col > 0:
        return "\u2555"  # ╕ moving left
    return "\u2558"  # ╘ moving right


def paint_snake(renderer: Renderer, body: SnakeBody, erased: Coord | None) -> None:
    """Draw the changes caused by one head commit.

    The neck is drawn before the tail so a two-cell snake shows its tail.
    """
    if erased is not None:
        renderer.erase_cell(erased)

    renderer.draw_cell(body.head, head_glyph(body.direction), Color.SNAKE)

    if body.length >= 2:
        neck = body.neck
        if neck is not None:
            renderer.draw_cell(
                neck, neck_glyph(body.prev_direction, body.direction), Color.SNAKE,
            )

        tail = body.slot_ahead(1)
        ahead = body.slot_ahead(2)
        if tail is not None and ahead is not None:
            renderer.draw_cell(tail, tail_glyph(tail, ahead), Color.SNAKE)

    renderer.refresh()


def paint_trophy(renderer: Renderer, trophy: Trophy) -> None:
    renderer.draw_cell(trophy.position, str(trophy.value), Color.TROPHY)
    renderer.refresh()
