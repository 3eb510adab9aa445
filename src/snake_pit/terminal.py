"""Curses front end: renderer, keyboard input, feedback line and banners."""

from __future__ import annotations

import curses
import locale
import logging

from snake_pit.config import GameConfig
from snake_pit.engine import GameEngine, GameLoop
from snake_pit.grid import Coord, Pit
from snake_pit.interfaces import Color
from snake_pit.resolver import Command, GameResult

logger = logging.getLogger(__name__)

TITLE = "Snake-Pit"

KEY_COMMANDS: dict[int, Command] = {
    curses.KEY_UP: Command.UP,
    curses.KEY_DOWN: Command.DOWN,
    curses.KEY_LEFT: Command.LEFT,
    curses.KEY_RIGHT: Command.RIGHT,
    # Cheat codes are capitals only.
    ord("W"): Command.CHEAT_WIN,
    ord("L"): Command.CHEAT_LOSS,
}

_ARROW_KEYS = (curses.KEY_UP, curses.KEY_DOWN, curses.KEY_LEFT, curses.KEY_RIGHT)

WIN_BANNER = (
    "__   __                     _       _ ",
    "\\ \\ / /                    (_)     | |",
    " \\ V /___  _   _  __      ___ _ __ | |",
    "  \\ // _ \\| | | | \\ \\ /\\ / / | '_ \\| |",
    "  | | (_) | |_| |  \\ V  V /| | | | |_|",
    "  \\_/\\___/ \\__,_|   \\_/\\_/ |_|_| |_(_)",
)

LOSS_BANNER = (
    "__   __            _",
    "\\ \\ / /           | |",
    " \\ V /___  _   _  | | ___  ___  ___",
    "  \\ // _ \\| | | | | |/ _ \\/ __|/ _ \\",
    "  | | (_) | |_| | | | (_) \\__ \\  __/_ ",
    "  \\_/\\___/ \\__,_| |_|\\___/|___/\\___(_)",
)

_BANNER_WIDTH = 38


def decode_key(key: int) -> Command | None:
    """Map a curses key code to a command; ``-1`` means no key pending."""
    if key == -1:
        return None
    return KEY_COMMANDS.get(key, Command.UNRECOGNIZED)


def setup_curses(stdscr: curses.window) -> dict[Color, int]:
    """Configure the screen for play and return colour attributes."""
    try:
        curses.curs_set(0)
    except curses.error:
        logger.debug("Terminal cannot hide the cursor.")
    curses.noecho()
    curses.use_default_colors()
    curses.start_color()
    curses.init_pair(Color.SNAKE, curses.COLOR_BLACK, curses.COLOR_GREEN)
    curses.init_pair(Color.TROPHY, curses.COLOR_BLACK, curses.COLOR_YELLOW)
    stdscr.nodelay(True)
    stdscr.keypad(True)
    return {color: curses.color_pair(color) for color in Color}


class CursesScreen:
    """Renderer, input source and feedback line over one curses window."""

    def __init__(
        self,
        stdscr: curses.window,
        attrs: dict[Color, int] | None = None,
    ) -> None:
        self.stdscr = stdscr
        self._attrs = attrs or {}

    def pit(self) -> Pit:
        """Pit covering the whole window."""
        rows, cols = self.stdscr.getmaxyx()
        return Pit(rows, cols)

    def draw_border(self) -> None:
        self.stdscr.box()
        self._put(0, 1, TITLE)

    # --- Renderer ---

    def draw_cell(self, coord: Coord, glyph: str, color: Color) -> None:
        self._put(coord.row, coord.col, glyph, self._attrs.get(color, 0))

    def erase_cell(self, coord: Coord) -> None:
        self._put(coord.row, coord.col, " ")

    def refresh(self) -> None:
        self.stdscr.refresh()

    # --- InputSource ---

    def poll_key(self) -> Command | None:
        return decode_key(self.stdscr.getch())

    def flush(self) -> None:
        curses.flushinp()

    # --- Feedback ---

    def show_message(self, text: str) -> None:
        """Write a status line centred on the bottom wall."""
        rows, cols = self.stdscr.getmaxyx()
        self._put(rows - 1, cols // 2 - len(text) // 2, text)
        self.refresh()

    def show_finish(self, result: GameResult) -> None:
        """Draw the end-of-game banner in the middle of the screen."""
        rows, cols = self.stdscr.getmaxyx()
        center_r, center_c = rows // 2, cols // 2
        won = result == GameResult.WIN

        if rows < 6:
            self._put(center_r, center_c - 4, "You win!" if won else "You lose.")
        else:
            banner = WIN_BANNER if won else LOSS_BANNER
            top = center_r - 3
            left = center_c - _BANNER_WIDTH // 2
            for offset, line in enumerate(banner):
                self._put(top + offset, left, line)
        self.refresh()

    def wait_for_exit(self) -> None:
        """Block until a non-arrow key is pressed."""
        self.stdscr.nodelay(False)
        curses.flushinp()
        while self.stdscr.getch() in _ARROW_KEYS:
            pass

    def _put(self, row: int, col: int, text: str, attr: int = 0) -> None:
        # Writing the bottom-right cell or off-screen raises; ignore it.
        try:
            self.stdscr.addstr(row, col, text, attr)
        except curses.error:
            pass


def _run(stdscr: curses.window, config: GameConfig) -> GameResult:
    attrs = setup_curses(stdscr)
    screen = CursesScreen(stdscr, attrs)
    stdscr.clear()
    pit = screen.pit()
    screen.draw_border()

    engine = GameEngine(screen, screen, input_source=screen, config=config)
    engine.reset(pit)
    result = GameLoop(engine).run()

    screen.show_finish(result)
    screen.wait_for_exit()
    return result


def play(config: GameConfig | None = None) -> GameResult:
    """Run one interactive game in the current terminal."""
    locale.setlocale(locale.LC_ALL, "")
    return curses.wrapper(_run, config or GameConfig())
