"""Game timing and trophy configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Tunable game constants.

    Supports JSON serialization so a tweaked setup can be replayed.
    """

    # Clock
    tick_rate: int = 50
    ticks_per_move_max: int | None = None
    ticks_per_move_min: int = 3

    # Snake
    initial_length: int = 3

    # Input
    max_input_drain: int = 10

    # Trophies
    trophy_value_min: int = 1
    trophy_value_max: int = 9
    trophy_lifetime_min_s: int = 1
    trophy_lifetime_max_s: int = 9

    seed: int | None = field(default=None)

    def __post_init__(self) -> None:
        if self.tick_rate < 1:
            raise ValueError("tick_rate must be at least 1.")
        if self.ticks_per_move_max is None:
            object.__setattr__(
                self, "ticks_per_move_max", self.tick_rate // 4,
            )
        if self.ticks_per_move_min < 1:
            raise ValueError("ticks_per_move_min must be at least 1.")
        if self.ticks_per_move_max < self.ticks_per_move_min:
            raise ValueError(
                "ticks_per_move_max must not be below ticks_per_move_min."
            )
        if self.initial_length < 1:
            raise ValueError("initial_length must be at least 1.")
        if self.max_input_drain < 1:
            raise ValueError("max_input_drain must be at least 1.")
        if not 1 <= self.trophy_value_min <= self.trophy_value_max <= 9:
            raise ValueError("trophy values must satisfy 1 <= min <= max <= 9.")
        if not 0 < self.trophy_lifetime_min_s <= self.trophy_lifetime_max_s:
            raise ValueError(
                "trophy lifetimes must satisfy 0 < min <= max seconds."
            )

    @property
    def seconds_per_tick(self) -> float:
        return 1.0 / self.tick_rate

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
