"""Snake Pit: tick-driven terminal snake game engine."""

from snake_pit.config import GameConfig
from snake_pit.engine import GameEngine, GameLoop, read_input, ticks_per_move
from snake_pit.grid import Coord, Pit
from snake_pit.resolver import Command, GameResult, LossReason, Outcome, resolve
from snake_pit.snake import Direction, SnakeBody
from snake_pit.trophy import Trophy, TrophyManager

__all__ = [
    "Command",
    "Coord",
    "Direction",
    "GameConfig",
    "GameEngine",
    "GameLoop",
    "GameResult",
    "LossReason",
    "Outcome",
    "Pit",
    "SnakeBody",
    "Trophy",
    "TrophyManager",
    "read_input",
    "resolve",
    "ticks_per_move",
]
