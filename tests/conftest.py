"""Shared fakes for the game collaborators."""

from collections import deque

import numpy as np
import pytest

from snake_pit.config import GameConfig
from snake_pit.engine import GameEngine
from snake_pit.grid import Coord, Pit
from snake_pit.snake import Direction, SnakeBody


class RecordingScreen:
    """Renderer and feedback line that remembers what was drawn."""

    def __init__(self):
        self.cells = {}
        self.erased = []
        self.messages = []
        self.refreshes = 0

    def draw_cell(self, coord, glyph, color):
        self.cells[coord] = (glyph, color)

    def erase_cell(self, coord):
        self.cells.pop(coord, None)
        self.erased.append(coord)

    def refresh(self):
        self.refreshes += 1

    def show_message(self, text):
        self.messages.append(text)


class ScriptedInput:
    """Key queue; ``flush`` drops whatever was not read."""

    def __init__(self, *keys):
        self.queue = deque(keys)
        self.polls = 0
        self.flushes = 0

    def push(self, *keys):
        self.queue.extend(keys)

    def poll_key(self):
        self.polls += 1
        return self.queue.popleft() if self.queue else None

    def flush(self):
        self.flushes += 1
        self.queue.clear()


def build_body(cells, capacity=20, direction=Direction.RIGHT):
    """Build a body whose live cells are *cells*, listed head first."""
    body = SnakeBody()
    body.reset(capacity, initial_length=len(cells), direction=direction)
    for cell in reversed(cells):
        body.commit_head(Coord(*cell))
    return body


@pytest.fixture
def body_of():
    return build_body


@pytest.fixture
def screen():
    return RecordingScreen()


@pytest.fixture
def make_engine(screen):
    """Factory for an engine reset into a fresh pit."""

    def _make(
        rows=10,
        cols=10,
        direction=Direction.RIGHT,
        seed=0,
        input_source=None,
        config=None,
    ):
        engine = GameEngine(
            screen,
            screen,
            input_source=input_source,
            config=config or GameConfig(seed=seed),
            rng=np.random.default_rng(seed),
        )
        engine.reset(Pit(rows, cols), direction=direction)
        return engine

    return _make
