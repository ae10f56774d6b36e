"""curses frontend: terminal setup, key mapping, drawing, and the game loop."""

from __future__ import annotations

import curses
import logging

from .clock import FrameClock
from .config import FPS, GAME_OVER_PAUSE_MS
from .controls import Command, apply_command
from .engine import TickOutcome
from .session import GameSession, SessionSnapshot

logger = logging.getLogger(__name__)

# curses reserves pair 0 for the terminal default colours.
PAIR_EMPTY = 1
PAIR_SNAKE = 2
PAIR_ITEM = 3

# Glyphs used when the terminal has no colour support.
CELL_GLYPHS = {
    PAIR_EMPTY: "  ",
    PAIR_SNAKE: "[]",
    PAIR_ITEM: "()",
}

KEY_TO_COMMAND: dict[int, Command] = {
    ord("a"): Command.LEFT,
    curses.KEY_LEFT: Command.LEFT,
    ord("d"): Command.RIGHT,
    curses.KEY_RIGHT: Command.RIGHT,
    ord("w"): Command.UP,
    curses.KEY_UP: Command.UP,
    ord("s"): Command.DOWN,
    curses.KEY_DOWN: Command.DOWN,
    ord("q"): Command.QUIT,
}


def cell_origin(pos: tuple[int, int]) -> tuple[int, int]:
    """Map a board cell to its (row, column) on screen inside the border."""
    x, y = pos
    return y + 1, x * 2 + 1


class TerminalGame:
    """Drives one session on a curses window until death or quit."""

    def __init__(
        self,
        stdscr: "curses.window",
        session: GameSession,
        clock: FrameClock | None = None,
    ) -> None:
        self.stdscr = stdscr
        self.session = session
        self.clock = clock or FrameClock()
        self.frame_delay_ms = max(1, 1000 // FPS)
        self.colors_enabled = False
        self._setup_screen()

    def _setup_screen(self) -> None:
        try:
            curses.curs_set(0)
        except curses.error:
            pass  # some terminals cannot hide the cursor
        self.stdscr.nodelay(True)
        self.stdscr.timeout(0)
        self.stdscr.keypad(True)

        if curses.has_colors():
            curses.start_color()
            curses.init_pair(PAIR_EMPTY, curses.COLOR_BLACK, curses.COLOR_BLACK)
            curses.init_pair(PAIR_SNAKE, curses.COLOR_GREEN, curses.COLOR_GREEN)
            curses.init_pair(PAIR_ITEM, curses.COLOR_RED, curses.COLOR_RED)
            self.colors_enabled = True
        logger.debug("Terminal ready, colours %s", self.colors_enabled)

    # --- Input ---------------------------------------------------------

    def poll_command(self) -> Command:
        """Non-blocking read of one key, translated into a command."""
        return KEY_TO_COMMAND.get(self.stdscr.getch(), Command.NONE)

    # --- Draw ----------------------------------------------------------

    def _put(self, row: int, col: int, text: str, attr: int = 0) -> None:
        try:
            self.stdscr.addstr(row, col, text, attr)
        except curses.error:
            # Writing the bottom-right cell or outside a small terminal.
            pass

    def _draw_cell(self, pos: tuple[int, int], pair: int) -> None:
        row, col = cell_origin(pos)
        if self.colors_enabled:
            self._put(row, col, "  ", curses.color_pair(pair))
        else:
            self._put(row, col, CELL_GLYPHS[pair])

    def draw(self, snapshot: SessionSnapshot) -> None:
        """Render board, snake, item and score from a snapshot."""
        self.stdscr.box()
        for y in range(snapshot.height):
            for x in range(snapshot.width):
                self._draw_cell((x, y), PAIR_EMPTY)
        for pos in snapshot.segments:
            self._draw_cell(pos, PAIR_SNAKE)
        if snapshot.item is not None:
            self._draw_cell(snapshot.item, PAIR_ITEM)
        self._put(snapshot.height + 1, 1, f"Score: {snapshot.score:03d}")
        self.stdscr.refresh()

    def game_over(self, snapshot: SessionSnapshot) -> None:
        """Show the final score and block until one key is pressed."""
        self._put(snapshot.height // 2 + 1, snapshot.width - 5, "Game Over!")
        self._put(
            snapshot.height // 2 + 2,
            snapshot.width - 12,
            f"Your final score is: {snapshot.score:03d}",
        )
        self.stdscr.refresh()
        curses.napms(GAME_OVER_PAUSE_MS)
        curses.flushinp()
        self.stdscr.nodelay(False)
        self.stdscr.timeout(-1)
        self.stdscr.getch()

    # --- Main loop -----------------------------------------------------

    def start(self) -> int:
        """Run poll, tick, draw until the snake dies or the player quits."""
        self.draw(self.session.snapshot())
        while True:
            elapsed = self.clock.tick()
            if not apply_command(self.session, self.poll_command()):
                break
            if self.session.tick(elapsed) is TickOutcome.DEAD:
                break
            self.draw(self.session.snapshot())
            curses.napms(self.frame_delay_ms)

        snapshot = self.session.snapshot()
        self.game_over(snapshot)
        return snapshot.score


def run_terminal(session: GameSession) -> int:
    """Play ``session`` in the terminal; the screen is restored on every exit."""
    return curses.wrapper(lambda stdscr: TerminalGame(stdscr, session).start())
