"""Tests for the curses frontend against a fake window."""

import curses
from unittest.mock import MagicMock, call

import pytest

from termsnake import terminal
from termsnake.chain import SegmentChain
from termsnake.config import GAME_OVER_PAUSE_MS
from termsnake.controls import Command
from termsnake.engine import TickOutcome
from termsnake.session import GameSession
from termsnake.terminal import PAIR_SNAKE, TerminalGame, cell_origin


@pytest.fixture
def fake_curses(monkeypatch):
    """Stub the curses calls that need a real terminal."""
    stubs = {}
    for name in ("curs_set", "start_color", "init_pair", "napms", "flushinp"):
        stubs[name] = MagicMock()
        monkeypatch.setattr(curses, name, stubs[name])
    stubs["has_colors"] = MagicMock(return_value=False)
    monkeypatch.setattr(curses, "has_colors", stubs["has_colors"])
    stubs["color_pair"] = MagicMock(side_effect=lambda pair: pair << 8)
    monkeypatch.setattr(curses, "color_pair", stubs["color_pair"])
    return stubs


@pytest.fixture
def stdscr():
    return MagicMock()


def _session():
    return GameSession(SegmentChain([(5, 0), (5, 1)]), width=10, height=10, item=(0, 9))


def _clock(elapsed):
    clock = MagicMock()
    clock.tick.return_value = elapsed
    return clock


class TestKeyMapping:
    @pytest.mark.parametrize(
        "key,command",
        [
            (ord("a"), Command.LEFT),
            (curses.KEY_LEFT, Command.LEFT),
            (ord("d"), Command.RIGHT),
            (curses.KEY_RIGHT, Command.RIGHT),
            (ord("w"), Command.UP),
            (curses.KEY_UP, Command.UP),
            (ord("s"), Command.DOWN),
            (curses.KEY_DOWN, Command.DOWN),
            (ord("q"), Command.QUIT),
            (-1, Command.NONE),
            (ord("z"), Command.NONE),
        ],
    )
    def test_poll_command(self, fake_curses, stdscr, key, command):
        game = TerminalGame(stdscr, _session(), clock=_clock(0))
        stdscr.getch.return_value = key
        assert game.poll_command() is command


class TestSetup:
    def test_input_is_non_blocking(self, fake_curses, stdscr):
        TerminalGame(stdscr, _session(), clock=_clock(0))
        stdscr.nodelay.assert_called_with(True)
        stdscr.timeout.assert_called_with(0)
        stdscr.keypad.assert_called_with(True)

    def test_colour_pairs_registered_when_supported(self, fake_curses, stdscr):
        fake_curses["has_colors"].return_value = True
        game = TerminalGame(stdscr, _session(), clock=_clock(0))
        assert game.colors_enabled
        assert fake_curses["init_pair"].call_count == 3

    def test_hidden_cursor_is_optional(self, fake_curses, stdscr):
        fake_curses["curs_set"].side_effect = curses.error
        game = TerminalGame(stdscr, _session(), clock=_clock(0))
        assert game.stdscr is stdscr


class TestDraw:
    def test_cell_origin_is_two_columns_wide(self):
        assert cell_origin((0, 0)) == (1, 1)
        assert cell_origin((3, 4)) == (5, 7)

    def test_draws_snake_item_and_score(self, fake_curses, stdscr):
        session = _session()
        game = TerminalGame(stdscr, session, clock=_clock(0))
        game.draw(session.snapshot())

        stdscr.addstr.assert_any_call(1, 11, "[]", 0)
        stdscr.addstr.assert_any_call(2, 11, "[]", 0)
        stdscr.addstr.assert_any_call(10, 1, "()", 0)
        stdscr.addstr.assert_any_call(11, 1, "Score: 002", 0)
        stdscr.box.assert_called_once()
        stdscr.refresh.assert_called_once()

    def test_coloured_cells_use_colour_pairs(self, fake_curses, stdscr):
        fake_curses["has_colors"].return_value = True
        session = _session()
        game = TerminalGame(stdscr, session, clock=_clock(0))
        game.draw(session.snapshot())
        stdscr.addstr.assert_any_call(1, 11, "  ", PAIR_SNAKE << 8)

    def test_draw_errors_are_ignored(self, fake_curses, stdscr):
        stdscr.addstr.side_effect = curses.error
        session = _session()
        game = TerminalGame(stdscr, session, clock=_clock(0))
        game.draw(session.snapshot())
        stdscr.refresh.assert_called_once()


class TestLoop:
    def test_runs_until_death_then_waits_for_a_key(self, fake_curses, stdscr):
        session = _session()
        stdscr.getch.side_effect = [-1, ord("x")]
        game = TerminalGame(stdscr, session, clock=_clock(201))

        assert game.start() == 2

        assert session.outcome is TickOutcome.DEAD
        assert stdscr.getch.call_count == 2
        fake_curses["napms"].assert_called_with(GAME_OVER_PAUSE_MS)
        stdscr.addstr.assert_any_call(6, 5, "Game Over!", 0)
        stdscr.addstr.assert_any_call(7, -2, "Your final score is: 002", 0)
        stdscr.timeout.assert_called_with(-1)

    def test_quit_ends_the_loop_without_dying(self, fake_curses, stdscr):
        session = _session()
        stdscr.getch.side_effect = [ord("q"), ord("x")]
        game = TerminalGame(stdscr, session, clock=_clock(201))

        assert game.start() == 2
        assert session.outcome is TickOutcome.ALIVE
        assert session.chain.head_position() == (5, 0)

    def test_turn_then_move(self, fake_curses, stdscr):
        session = _session()
        stdscr.getch.side_effect = [ord("d"), -1, ord("q"), ord("x")]
        game = TerminalGame(stdscr, session, clock=_clock(201))

        game.start()

        assert session.chain.positions() == ((7, 0), (6, 0))
        assert fake_curses["napms"].call_args_list[:2] == [
            call(game.frame_delay_ms),
            call(game.frame_delay_ms),
        ]


def test_run_terminal_uses_wrapper(monkeypatch):
    session = _session()
    started = []

    class FakeGame:
        def __init__(self, stdscr, game_session):
            started.append((stdscr, game_session))

        def start(self):
            return 42

    monkeypatch.setattr(terminal, "TerminalGame", FakeGame)
    monkeypatch.setattr(curses, "wrapper", lambda func: func("screen"))

    assert terminal.run_terminal(session) == 42
    assert started == [("screen", session)]
