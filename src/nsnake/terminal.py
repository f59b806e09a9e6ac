"""Curses front end: color pairs, key mapping, drawing and the main loop."""

from __future__ import annotations

import curses
import locale
import logging
import time
from collections.abc import Callable

import numpy as np

from nsnake.config import GameConfig
from nsnake.engine import Action, GameEngine
from nsnake.pixels import Color, PixelField, paint_game
from nsnake.render import PAIR_COUNT, HalfBlockRenderer, RenderCell, color_pair_index

logger = logging.getLogger(__name__)

# Screen layout: score, message, then the boxed board.
SCORE_ROW = 0
MESSAGE_ROW = 1
BOX_TOP = 2

_KEY_ACTIONS: dict[int, Action] = {
    curses.KEY_UP: Action.UP,
    curses.KEY_DOWN: Action.DOWN,
    curses.KEY_LEFT: Action.LEFT,
    curses.KEY_RIGHT: Action.RIGHT,
    curses.KEY_ENTER: Action.CONFIRM,
    ord("\n"): Action.CONFIRM,
    ord("\r"): Action.CONFIRM,
    ord("q"): Action.QUIT,
    27: Action.QUIT,  # Esc
}


class TerminalError(RuntimeError):
    """The terminal cannot display the game."""


class ColorPairTable:
    """Registers one curses color pair per ordered (fg, bg) color pair."""

    def register(self) -> None:
        curses.start_color()
        available = curses.COLOR_PAIRS - 1
        if available < PAIR_COUNT:
            raise TerminalError(
                f"Not enough color pairs available: need {PAIR_COUNT}, "
                f"terminal offers {available}.",
            )
        for fg in Color:
            for bg in Color:
                curses.init_pair(color_pair_index(fg, bg), int(fg), int(bg))
        logger.debug("Registered %d color pairs.", PAIR_COUNT)


def read_action(window: curses.window) -> Action | None:
    """Poll one key and translate it; ``None`` when nothing useful was pressed."""
    key = window.getch()
    return _KEY_ACTIONS.get(key)


def _addstr(window: curses.window, y: int, x: int, text: str, attr: int = 0) -> None:
    try:
        window.addstr(y, x, text, attr)
    except curses.error:
        # Writing past the edge of a small terminal.
        pass


def draw_box(window: curses.window, top: int, left: int, width: int, height: int) -> None:
    """Draw a frame whose corners sit at (top, left) and (top+height, left+width)."""
    _addstr(window, top, left, "┌" + "─" * (width - 1) + "┐")
    for y in range(top + 1, top + height):
        _addstr(window, y, left, "│")
        _addstr(window, y, left + width, "│")
    _addstr(window, top + height, left, "└" + "─" * (width - 1) + "┘")


def draw_frame(
    window: curses.window,
    engine: GameEngine,
    cells: list[list[RenderCell]],
) -> None:
    """Draw score, message and the encoded board."""
    _addstr(window, SCORE_ROW, 0, f"Score: {engine.score}")
    window.clrtoeol()
    _addstr(window, MESSAGE_ROW, 0, engine.message)
    window.clrtoeol()

    columns = len(cells[0]) if cells else 0
    draw_box(window, BOX_TOP, 0, columns + 1, len(cells) + 1)
    for r, row in enumerate(cells):
        for c, cell in enumerate(row):
            _addstr(
                window, BOX_TOP + 1 + r, 1 + c,
                cell.glyph.value, curses.color_pair(cell.pair),
            )


def run(
    window: curses.window,
    config: GameConfig,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Play until the quit key is pressed. Returns the final score."""
    try:
        curses.curs_set(0)
    except curses.error:
        logger.debug("Terminal cannot hide the cursor.")
    window.nodelay(True)
    window.keypad(True)
    ColorPairTable().register()

    rng = np.random.default_rng(config.seed)
    engine = GameEngine(config.board_size, rng, config.initial_length)
    field = PixelField(engine.board_size)
    renderer = HalfBlockRenderer()

    while True:
        paint_game(field, engine)
        draw_frame(window, engine, renderer.render(field))
        window.refresh()

        sleep(config.tick_interval(engine.score))
        action = read_action(window)
        if action is Action.QUIT:
            break
        engine.tick(action, rng)

    logger.info("Quit with score %d.", engine.score)
    return engine.score


def play(config: GameConfig) -> int:
    """Set up the terminal, run the game and restore the terminal."""
    locale.setlocale(locale.LC_ALL, "")
    return curses.wrapper(run, config)
