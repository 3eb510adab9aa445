"""Trophy spawning, expiry and award logic."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from snake_pit.config import GameConfig

if TYPE_CHECKING:
    from snake_pit.grid import Coord, Pit
    from snake_pit.snake import SnakeBody

logger = logging.getLogger(__name__)


@dataclass
class Trophy:
    """A timed collectible that grows the snake by ``value`` when eaten."""

    position: Coord
    value: int
    ticks_remaining: int

    @property
    def expired(self) -> bool:
        return self.ticks_remaining <= 0

    def to_dict(self) -> dict:
        return {
            "position": list(self.position),
            "value": self.value,
            "ticks_remaining": self.ticks_remaining,
        }


class TrophyManager:
    """Keeps at most one trophy in the pit.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    """

    def __init__(
        self,
        pit: Pit,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.pit = pit
        self.config = config or GameConfig()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.trophy: Trophy | None = None

    @property
    def due(self) -> bool:
        """Whether a new trophy should be spawned this tick."""
        return self.trophy is None or self.trophy.expired

    def spawn(self, body: SnakeBody) -> Trophy | None:
        """Place a new trophy on a random interior cell the body does not cover.

        Returns ``None`` without touching the RNG when the interior is full.
        """
        if self.pit.free_cells(list(body.cells())) == 0:
            logger.warning("No free cells available for trophy spawning.")
            return None

        while True:
            position = self.pit.random_interior(self.rng)
            if not body.occupies(position):
                break

        cfg = self.config
        value = int(self.rng.integers(cfg.trophy_value_min, cfg.trophy_value_max + 1))
        lifetime = int(self.rng.integers(
            cfg.tick_rate * cfg.trophy_lifetime_min_s,
            cfg.tick_rate * cfg.trophy_lifetime_max_s + 1,
        ))
        self.trophy = Trophy(position, value, lifetime)
        logger.debug(
            "Trophy %d spawned at %s for %d ticks.", value, position, lifetime,
        )
        return self.trophy

    def tick(self) -> None:
        """Count the active trophy down by one tick."""
        if self.trophy is not None:
            self.trophy.ticks_remaining -= 1

    def try_award(self, head: Coord) -> int | None:
        """Consume the trophy if *head* lands on it and return its value."""
        if self.trophy is None or self.trophy.position != head:
            return None
        value = self.trophy.value
        self.trophy = None
        return value

    def clear(self) -> None:
        self.trophy = None

    def to_dict(self) -> dict:
        """Serialize trophy state to a dictionary."""
        return {"trophy": self.trophy.to_dict() if self.trophy else None}
