"""Boundary protocols between the game core and its front end."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from snake_pit.grid import Coord
    from snake_pit.resolver import Command


class Color(enum.IntEnum):
    """Colour pair slots understood by renderers."""

    DEFAULT = 0
    SNAKE = 1
    TROPHY = 2


class Renderer(Protocol):
    def draw_cell(self, coord: Coord, glyph: str, color: Color) -> None: ...

    def erase_cell(self, coord: Coord) -> None: ...

    def refresh(self) -> None: ...


class InputSource(Protocol):
    """Non-blocking key source. ``poll_key`` returns ``None`` when idle."""

    def poll_key(self) -> Command | None: ...

    def flush(self) -> None: ...


class Feedback(Protocol):
    def show_message(self, text: str) -> None: ...
