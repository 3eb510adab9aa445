"""Pit geometry for the snake game."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np


class Coord(NamedTuple):
    """A (row, col) cell position, consistent with NumPy indexing."""

    row: int
    col: int

    def offset(self, dr: int, dc: int) -> Coord:
        """Return the coordinate shifted by the given deltas."""
        return Coord(self.row + dr, self.col + dc)


class Pit:
    """Rectangular play area surrounded by a one-cell wall ring.

    ``rows`` and ``cols`` describe the whole drawable area, walls included.
    Row/col ``0`` and ``rows - 1``/``cols - 1`` are walls; everything in
    between is the interior the snake and trophies live in.
    """

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 4 or cols < 4:
            raise ValueError("Pit dimensions must be at least 4×4.")
        self.rows = rows
        self.cols = cols

    @property
    def win_length(self) -> int:
        """Body length that wins the game: half the pit perimeter."""
        return self.rows + self.cols

    @property
    def center(self) -> Coord:
        return Coord(self.rows // 2, self.cols // 2)

    @property
    def interior_area(self) -> int:
        return (self.rows - 2) * (self.cols - 2)

    def in_interior(self, coord: Coord) -> bool:
        """Check whether a coordinate lies strictly inside the wall ring."""
        return 0 < coord.row < self.rows - 1 and 0 < coord.col < self.cols - 1

    def random_interior(self, rng: np.random.Generator) -> Coord:
        """Draw a uniformly random interior coordinate."""
        row = int(rng.integers(1, self.rows - 1))
        col = int(rng.integers(1, self.cols - 1))
        return Coord(row, col)

    def free_cells(self, occupied: list[Coord]) -> int:
        """Count interior cells not covered by *occupied*."""
        mask = np.zeros((self.rows, self.cols), dtype=bool)
        for row, col in occupied:
            mask[row, col] = True
        return int(np.count_nonzero(~mask[1:-1, 1:-1]))

    def to_dict(self) -> dict:
        """Serialize pit geometry to a dictionary."""
        return {
            "rows": self.rows,
            "cols": self.cols,
            "win_length": self.win_length,
        }
