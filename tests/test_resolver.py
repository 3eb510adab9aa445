"""Tests for movement resolution."""

import pytest

from snake_pit.grid import Coord, Pit
from snake_pit.resolver import (
    Command,
    GameResult,
    LossReason,
    Outcome,
    resolve,
    step_head,
)
from snake_pit.snake import Direction


@pytest.fixture
def pit():
    return Pit(10, 10)


class TestCommand:
    def test_movement_commands_have_directions(self):
        assert Command.UP.direction == Direction.UP
        assert Command.RIGHT.direction == Direction.RIGHT

    def test_other_commands_have_none(self):
        assert Command.CHEAT_WIN.direction is None
        assert Command.UNRECOGNIZED.direction is None


class TestStepHead:
    @pytest.mark.parametrize(
        ("direction", "expected"),
        [
            (Direction.UP, Coord(4, 5)),
            (Direction.DOWN, Coord(6, 5)),
            (Direction.LEFT, Coord(5, 4)),
            (Direction.RIGHT, Coord(5, 6)),
        ],
    )
    def test_offsets(self, direction, expected):
        assert step_head(Coord(5, 5), direction) == expected


class TestCheats:
    def test_cheat_win(self, pit, body_of):
        outcome = resolve(Command.CHEAT_WIN, body_of([(5, 5)]), pit)
        assert outcome.result == GameResult.WIN
        assert outcome.message == "You cheated!"

    def test_cheat_loss(self, pit, body_of):
        outcome = resolve(Command.CHEAT_LOSS, body_of([(5, 5)]), pit)
        assert outcome.result == GameResult.LOSS
        assert outcome.reason == LossReason.CHEATED

    def test_cheat_wins_even_against_a_wall(self, pit, body_of):
        body = body_of([(1, 8)], direction=Direction.UP)
        assert resolve(Command.CHEAT_WIN, body, pit).result == GameResult.WIN


class TestReversal:
    @pytest.mark.parametrize("direction", list(Direction))
    @pytest.mark.parametrize("length", [1, 2, 5])
    def test_reversal_always_loses(self, pit, body_of, direction, length):
        dr, dc = direction.value
        cells = [(5 - dr * i, 5 - dc * i) for i in range(length)]
        body = body_of(cells, direction=direction)
        reverse = Command(direction.opposite.name.lower())
        outcome = resolve(reverse, body, pit)
        assert outcome.result == GameResult.LOSS
        assert outcome.reason == LossReason.REVERSED
        assert outcome.message == "You can't go backwards!"


class TestDirectionHandling:
    def test_no_key_keeps_direction(self, pit, body_of):
        body = body_of([(5, 5), (5, 4)], direction=Direction.RIGHT)
        outcome = resolve(None, body, pit)
        assert outcome == Outcome(GameResult.PLAYING, next_head=Coord(5, 6))

    def test_unrecognized_keeps_direction(self, pit, body_of):
        body = body_of([(5, 5), (5, 4)], direction=Direction.RIGHT)
        outcome = resolve(Command.UNRECOGNIZED, body, pit)
        assert outcome.next_head == Coord(5, 6)
        assert body.direction == Direction.RIGHT

    def test_turn_updates_directions(self, pit, body_of):
        body = body_of([(5, 5), (5, 4)], direction=Direction.RIGHT)
        outcome = resolve(Command.UP, body, pit)
        assert outcome.next_head == Coord(4, 5)
        assert body.direction == Direction.UP
        assert body.prev_direction == Direction.RIGHT

    def test_terminal_outcome_leaves_body_alone(self, pit, body_of):
        body = body_of([(5, 5), (5, 4)], direction=Direction.RIGHT)
        resolve(Command.LEFT, body, pit)
        assert body.direction == Direction.RIGHT
        assert body.prev_direction == Direction.RIGHT
        assert body.head == Coord(5, 5)


class TestWalls:
    @pytest.mark.parametrize(
        ("head", "command"),
        [
            ((1, 5), Command.UP),
            ((8, 5), Command.DOWN),
            ((5, 1), Command.LEFT),
            ((5, 8), Command.RIGHT),
        ],
    )
    def test_hit_wall(self, pit, body_of, head, command):
        body = body_of([head], direction=command.direction)
        outcome = resolve(command, body, pit)
        assert outcome.result == GameResult.LOSS
        assert outcome.reason == LossReason.HIT_WALL

    def test_last_interior_cell_is_fine(self, pit, body_of):
        body = body_of([(5, 7)], direction=Direction.RIGHT)
        outcome = resolve(Command.RIGHT, body, pit)
        assert outcome.result == GameResult.PLAYING
        assert outcome.next_head == Coord(5, 8)


class TestSelfCollision:
    def test_hit_self(self, pit, body_of):
        body = body_of(
            [(5, 5), (5, 4), (4, 4), (4, 5), (4, 6)], direction=Direction.RIGHT,
        )
        outcome = resolve(Command.UP, body, pit)
        assert outcome.result == GameResult.LOSS
        assert outcome.reason == LossReason.HIT_SELF
        assert outcome.message == "You hit yourself!"

    def test_chasing_the_tail_is_fine(self, pit, body_of):
        body = body_of([(5, 5), (5, 4), (4, 4), (4, 5)], direction=Direction.RIGHT)
        outcome = resolve(Command.UP, body, pit)
        assert outcome.result == GameResult.PLAYING
        assert outcome.next_head == Coord(4, 5)


class TestOutcome:
    def test_terminal_flags(self):
        assert Outcome.win().is_terminal
        assert Outcome.loss(LossReason.HIT_WALL).is_terminal
        assert not Outcome(GameResult.PLAYING, next_head=Coord(1, 1)).is_terminal
