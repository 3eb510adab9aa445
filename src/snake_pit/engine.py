"""Tick-driven game engine composing pit, snake body, resolver and trophies."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

import numpy as np

from snake_pit.config import GameConfig
from snake_pit.glyphs import paint_snake, paint_trophy
from snake_pit.grid import Pit
from snake_pit.interfaces import Feedback, InputSource, Renderer
from snake_pit.resolver import Command, GameResult, Outcome, resolve
from snake_pit.snake import Direction, SnakeBody
from snake_pit.trophy import TrophyManager

logger = logging.getLogger(__name__)


def ticks_per_move(
    length: int,
    win_length: int,
    max_ticks: int,
    min_ticks: int,
) -> int:
    """Movement interval in ticks, shrinking linearly as the snake grows.

    ``max_ticks`` at length 0 and ``min_ticks`` at ``win_length``. The
    interpolation spans one extra tick so the lengths just short of a win
    already reach the fastest speed; the result never drops below
    ``min_ticks``.
    """
    delta = max_ticks - min_ticks + 1
    return max(min_ticks, int(max_ticks - delta * (length / win_length)))


def read_input(source: InputSource, max_drain: int = 10) -> Command | None:
    """Return the most recent pending command, dropping older ones.

    At most *max_drain* keys are read; anything still queued is flushed.
    """
    latest: Command | None = None
    for _ in range(max_drain):
        key = source.poll_key()
        if key is None:
            break
        latest = key
    source.flush()
    return latest


class GameEngine:
    """Single-snake, tick-based game engine.

    The engine owns the snake body, the trophy manager and the game result.
    Each call to :meth:`step` advances the game by one clock tick; the snake
    itself only moves every :attr:`current_ticks_per_move` ticks.
    """

    def __init__(
        self,
        renderer: Renderer,
        feedback: Feedback,
        input_source: InputSource | None = None,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.renderer = renderer
        self.feedback = feedback
        self.input_source = input_source

        self.body = SnakeBody()
        self.pit: Pit | None = None
        self.trophies: TrophyManager | None = None
        self.result = GameResult.PLAYING
        self.outcome: Outcome | None = None
        self.win_length = 0
        self.tick = 0
        self.current_ticks_per_move = 0
        self.ticks_since_move = 0

    def reset(self, pit: Pit, direction: Direction | None = None) -> None:
        """Start a new game in *pit*.

        The win length is taken from the pit here and stays fixed until the
        next reset. The starting direction is random unless given.
        """
        if direction is None:
            direction = list(Direction)[int(self.rng.integers(len(Direction)))]

        self.pit = pit
        self.win_length = pit.win_length
        self.body.reset(self.win_length, self.config.initial_length, direction)
        self.trophies = TrophyManager(pit, self.config, self.rng)
        self.result = GameResult.PLAYING
        self.outcome = None
        self.tick = 0
        self.current_ticks_per_move = self._speed()
        # Move on the first tick.
        self.ticks_since_move = self.current_ticks_per_move

        erased = self.body.commit_head(pit.center)
        paint_snake(self.renderer, self.body, erased)
        self._show_progress()
        logger.info(
            "New game: pit %dx%d, win length %d, heading %s.",
            pit.rows, pit.cols, self.win_length, direction.name,
        )

    @property
    def game_over(self) -> bool:
        return self.result != GameResult.PLAYING

    def step(self) -> GameResult:
        """Advance the game by one clock tick and return the result."""
        if self.game_over:
            return self.result
        assert self.trophies is not None, "reset() must be called before step()"

        self.tick += 1
        self.ticks_since_move += 1
        self.trophies.tick()

        if self.ticks_since_move >= self.current_ticks_per_move:
            self.ticks_since_move = 0
            command = None
            if self.input_source is not None:
                command = read_input(self.input_source, self.config.max_input_drain)
            if self.move(command).is_terminal:
                return self.result

        # Trophies regenerate after the move so a trophy eaten on the tick
        # it expires still counts.
        if self.trophies.due:
            self._regenerate_trophy()

        return self.result

    def move(self, command: Command | None) -> Outcome:
        """Resolve and apply one snake movement."""
        if self.game_over:
            assert self.outcome is not None
            return self.outcome
        assert self.pit is not None and self.trophies is not None

        outcome = resolve(command, self.body, self.pit)
        if outcome.is_terminal:
            self._finish(outcome)
            return outcome

        next_head = outcome.next_head
        value = self.trophies.try_award(next_head)
        if value is not None:
            grown = self.body.grow(value)
            self.current_ticks_per_move = self._speed()
            self._show_progress()
            logger.info(
                "Trophy %d eaten at %s, grew by %d to %d.",
                value, next_head, grown, self.body.length,
            )

        erased = self.body.commit_head(next_head)
        paint_snake(self.renderer, self.body, erased)

        # Checked after the commit so the trophy is never left uneaten on a win.
        if self.body.length >= self.win_length:
            outcome = Outcome.win()
            self._finish(outcome)
        return outcome

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.tick,
            "result": self.result.value,
            "win_length": self.win_length,
            "ticks_per_move": self.current_ticks_per_move,
            "pit": self.pit.to_dict() if self.pit else None,
            "snake": self.body.to_dict(),
            "trophies": self.trophies.to_dict() if self.trophies else None,
        }

    def _speed(self) -> int:
        return ticks_per_move(
            self.body.length,
            self.win_length,
            self.config.ticks_per_move_max,
            self.config.ticks_per_move_min,
        )

    def _regenerate_trophy(self) -> None:
        assert self.trophies is not None
        old = self.trophies.trophy
        if old is not None:
            self.renderer.erase_cell(old.position)
            self.renderer.refresh()
        trophy = self.trophies.spawn(self.body)
        if trophy is not None:
            paint_trophy(self.renderer, trophy)

    def _show_progress(self) -> None:
        self.feedback.show_message(f"Win: {self.body.length}/{self.win_length}")

    def _finish(self, outcome: Outcome) -> None:
        """Record a terminal outcome; nothing mutates the game afterwards."""
        self.result = outcome.result
        self.outcome = outcome
        if outcome.message:
            self.feedback.show_message(outcome.message)
        logger.info(
            "Game ended at tick %d: %s (length %d/%d).",
            self.tick, outcome.result.value, self.body.length, self.win_length,
        )


class GameLoop:
    """Fixed-rate driver that ticks an engine until the game ends.

    The sleep between ticks is not interruptible; there is no abort API.
    """

    def __init__(
        self,
        engine: GameEngine,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.engine = engine
        self._sleep = sleep

    def run(self) -> GameResult:
        interval = self.engine.config.seconds_per_tick
        while True:
            result = self.engine.step()
            if result != GameResult.PLAYING:
                return result
            self._sleep(interval)
