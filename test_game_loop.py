"""
Tests for the main game loop, driven by scripted events and a fake surface.
"""

from fakes import ScriptedEvents
from display.events import PointerDownEvent, QuitEvent
from logic.board import Cell, Player
from logic.game_state import GameStatus
from main import TicTacToeGame


def click(index):
    """A click in the middle of a cell."""
    row, col = divmod(index, 3)
    return PointerDownEvent(col * 100 + 50, row * 100 + 50)


def test_quit_ends_the_game(surface, config, capsys):
    events = ScriptedEvents([[], [QuitEvent()]])
    state = TicTacToeGame(events, surface, config).run()

    assert state.status == GameStatus.IN_PROGRESS
    assert events.polls == 2
    assert surface.frames == 2
    assert "quit" in capsys.readouterr().out


def test_top_row_win(surface, config, capsys):
    events = ScriptedEvents([[click(i)] for i in (0, 3, 1, 4, 2)])
    game = TicTacToeGame(events, surface, config)
    state = game.run()

    assert state.status == GameStatus.WON
    assert state.winner == Player.X
    assert not game.is_running
    # One poll and one frame per click, nothing after the winning move
    assert events.polls == 5
    assert surface.frames == 5
    assert "X wins!" in capsys.readouterr().out


def test_tie(surface, config, capsys):
    moves = (0, 1, 2, 4, 3, 5, 7, 6, 8)
    events = ScriptedEvents([[click(i) for i in moves]])
    state = TicTacToeGame(events, surface, config).run()

    assert state.status == GameStatus.TIE
    assert surface.frames == 1
    assert "Tie!" in capsys.readouterr().out


def test_repeated_click_is_ignored(surface, config):
    events = ScriptedEvents([[click(0)], [click(0)], [QuitEvent()]])
    state = TicTacToeGame(events, surface, config).run()

    assert state.board.get(0) == Cell.X
    assert state.current_player == Player.O
    assert state.move_count == 1


def test_clicks_after_win_are_ignored(surface, config):
    events = ScriptedEvents([[click(i) for i in (0, 3, 1, 4, 2, 8)]])
    state = TicTacToeGame(events, surface, config).run()

    assert state.winner == Player.X
    assert state.board.get(8) == Cell.EMPTY
    assert state.move_count == 5


def test_quit_stops_remaining_events(surface, config):
    events = ScriptedEvents([[click(0), QuitEvent(), click(4)]])
    state = TicTacToeGame(events, surface, config).run()

    assert state.board.get(0) == Cell.X
    assert state.board.get(4) == Cell.EMPTY


def test_final_frame_is_held(surface, config):
    config.RESULT_HOLD_MS = 250
    events = ScriptedEvents([[click(i) for i in (0, 3, 1, 4, 2)]])
    TicTacToeGame(events, surface, config).run()

    assert surface.waited_ms == 250


def test_no_hold_after_quit(surface, config):
    config.RESULT_HOLD_MS = 250
    TicTacToeGame(ScriptedEvents([[QuitEvent()]]), surface, config).run()

    assert surface.waited_ms == 0
