"""Movement resolution: input interpretation, reversal, wall and self collision."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from snake_pit.grid import Coord, Pit
from snake_pit.snake import Direction, SnakeBody


class GameResult(enum.Enum):
    """Overall game state. ``PLAYING`` is the only non-terminal value."""

    PLAYING = "playing"
    WIN = "win"
    LOSS = "loss"


CHEAT_MESSAGE = "You cheated!"


class LossReason(enum.Enum):
    """Why a game was lost, with the message shown to the player."""

    CHEATED = CHEAT_MESSAGE
    REVERSED = "You can't go backwards!"
    HIT_WALL = "You ran into the edge of the pit!"
    HIT_SELF = "You hit yourself!"


class Command(enum.Enum):
    """Player intents decoded from raw keys."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    CHEAT_WIN = "cheat_win"
    CHEAT_LOSS = "cheat_loss"
    UNRECOGNIZED = "unrecognized"

    @property
    def direction(self) -> Direction | None:
        return _COMMAND_DIRECTIONS.get(self)


_COMMAND_DIRECTIONS: dict[Command, Direction] = {
    Command.UP: Direction.UP,
    Command.DOWN: Direction.DOWN,
    Command.LEFT: Direction.LEFT,
    Command.RIGHT: Direction.RIGHT,
}


@dataclass(frozen=True)
class Outcome:
    """Result of resolving one movement tick."""

    result: GameResult
    next_head: Coord | None = None
    reason: LossReason | None = None
    message: str | None = None

    @classmethod
    def win(cls, message: str | None = None) -> Outcome:
        return cls(GameResult.WIN, message=message)

    @classmethod
    def loss(cls, reason: LossReason) -> Outcome:
        return cls(GameResult.LOSS, reason=reason, message=reason.value)

    @property
    def is_terminal(self) -> bool:
        return self.result != GameResult.PLAYING


def step_head(head: Coord, direction: Direction) -> Coord:
    """Offset *head* by one cell in *direction*."""
    if direction == Direction.UP:
        return head.offset(-1, 0)
    if direction == Direction.DOWN:
        return head.offset(1, 0)
    if direction == Direction.LEFT:
        return head.offset(0, -1)
    if direction == Direction.RIGHT:
        return head.offset(0, 1)
    raise ValueError(f"Unknown direction {direction!r}.")


def resolve(command: Command | None, body: SnakeBody, pit: Pit) -> Outcome:
    """Decide the next head position or a terminal outcome.

    ``None`` (no key pending) and :attr:`Command.UNRECOGNIZED` keep the
    current direction. The body's directions are only updated when the move
    is legal; a terminal outcome leaves the body untouched.
    """
    if command == Command.CHEAT_WIN:
        return Outcome.win(CHEAT_MESSAGE)
    if command == Command.CHEAT_LOSS:
        return Outcome.loss(LossReason.CHEATED)

    requested = command.direction if command is not None else None
    if requested is None:
        requested = body.direction

    if requested == body.direction.opposite:
        return Outcome.loss(LossReason.REVERSED)

    next_head = step_head(body.head, requested)

    if not pit.in_interior(next_head):
        return Outcome.loss(LossReason.HIT_WALL)

    if body.collides(next_head):
        return Outcome.loss(LossReason.HIT_SELF)

    body.prev_direction = body.direction
    body.direction = requested
    return Outcome(GameResult.PLAYING, next_head=next_head)
