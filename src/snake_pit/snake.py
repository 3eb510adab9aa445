"""Snake body stored as a fixed-capacity ring with slack slots."""

from __future__ import annotations

import enum
from collections.abc import Iterator

from snake_pit.grid import Coord


class Direction(enum.Enum):
    """Cardinal movement directions with (row_delta, col_delta) values."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class SnakeBody:
    """A snake held in a ring of coordinate slots that never reallocates mid-game.

    Each slot is either live (a :class:`Coord`) or slack (``None``). The ring
    spans the first ``length`` slots. Walking backward from the head index
    yields the live cells first, head to tail, followed by any slack slots.
    Slack slots appear after growth and at the start of a game; they are
    recycled by :meth:`commit_head` without anything being erased, which is
    what keeps the drawn tail still while the snake grows.
    """

    def __init__(self) -> None:
        self._slots: list[Coord | None] = []
        self._capacity = 0
        self._length = 0
        self._head_index = -1
        self.direction = Direction.RIGHT
        self.prev_direction = Direction.RIGHT

    def reset(
        self,
        capacity: int,
        initial_length: int = 3,
        direction: Direction = Direction.RIGHT,
    ) -> None:
        """Prepare the ring for a new game.

        The slot list is reused unless *capacity* exceeds it. All slots start
        slack, so the first :meth:`commit_head` creates the only live cell and
        the body unrolls to *initial_length* over the following moves.
        """
        if capacity < 1:
            raise ValueError("Snake capacity must be at least 1.")
        if not 1 <= initial_length <= capacity:
            raise ValueError("Initial length must be between 1 and the capacity.")
        if capacity > len(self._slots):
            self._slots = [None] * capacity
        else:
            self._slots[:] = [None] * len(self._slots)
        self._capacity = capacity
        self._length = initial_length
        # First commit increments onto index 0.
        self._head_index = -1
        self.direction = direction
        self.prev_direction = direction

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def length(self) -> int:
        """Logical length, slack slots included."""
        return self._length

    @property
    def head_index(self) -> int:
        return self._head_index

    @property
    def head(self) -> Coord:
        assert self._head_index >= 0, "snake has no head before the first commit"
        head = self._slots[self._head_index]
        assert head is not None, "head slot desynchronised from the ring"
        return head

    @property
    def neck(self) -> Coord | None:
        """The cell directly behind the head, if any."""
        if self._length < 2:
            return None
        return self.slot_ahead(-1)

    @property
    def live_count(self) -> int:
        return sum(1 for _ in self.cells())

    def slot_ahead(self, offset: int) -> Coord | None:
        """Return the slot *offset* positions after the head in ring order.

        ``slot_ahead(1)`` is the slot the next commit will overwrite, i.e. the
        tail tip when the ring holds no slack.
        """
        return self._slots[(self._head_index + offset) % self._length]

    def cells(self) -> Iterator[Coord]:
        """Yield the live cells from head to tail."""
        for k in range(self._length):
            slot = self._slots[(self._head_index - k) % self._length]
            if slot is not None:
                yield slot

    def commit_head(self, new_head: Coord) -> Coord | None:
        """Advance the head into the next ring slot.

        Returns the coordinate that was recycled and must be erased, or
        ``None`` when the slot was slack.
        """
        assert self._length > 0, "commit_head called on a body that was never reset"
        self._head_index = (self._head_index + 1) % self._length
        discarded = self._slots[self._head_index]
        self._slots[self._head_index] = new_head
        return discarded

    def grow(self, by: int) -> int:
        """Increase the logical length by *by*, clamped to the capacity.

        Live cells between the slot after the head and the logical end of the
        ring move *by* slots further on, leaving *by* slack slots directly
        ahead of the head. Returns the growth actually applied.
        """
        assert by >= 0, "growth must be non-negative"
        applied = min(by, self._capacity - self._length)
        if applied == 0:
            return 0

        new_length = self._length + applied
        assert new_length <= len(self._slots), "growth past the allocated ring"
        for index in range(new_length - 1, self._head_index + applied, -1):
            source = index - applied
            self._slots[index] = self._slots[source]
            self._slots[source] = None
        self._length = new_length
        return applied

    def occupies(self, coord: Coord) -> bool:
        """Check whether any live cell equals *coord*."""
        return any(
            self._slots[i] == coord for i in range(self._length)
        )

    def collides(self, coord: Coord) -> bool:
        """Check whether a candidate next head would hit the body.

        The slot the next commit overwrites is vacating and is skipped. Only
        odd offsets behind the head are examined: a neighbour of the head
        can never share a cell with an even offset on a grid.
        """
        for k in range(1, self._length - 1, 2):
            if self._slots[(self._head_index - k) % self._length] == coord:
                return True
        return False

    def to_dict(self) -> dict:
        """Serialize body state to a dictionary."""
        return {
            "cells": [list(c) for c in self.cells()],
            "length": self._length,
            "capacity": self._capacity,
            "direction": self.direction.name,
            "prev_direction": self.prev_direction.name,
        }
