"""
Test doubles for TicTacToe tests.
Fake surfaces and event sources so no window is ever created.
"""

from display.config import DisplayConfig
from display.events import QuitEvent
from logic.board import Board, Cell


class FakeSurface:
    """Records every draw call instead of drawing."""

    def __init__(self):
        self.calls = []
        self.points = []
        self.frames = 0
        self.waited_ms = 0

    def set_color(self, color):
        self.calls.append(("set_color", tuple(color)))

    def clear(self):
        self.calls.append(("clear",))

    def draw_line(self, x1, y1, x2, y2):
        self.calls.append(("draw_line", x1, y1, x2, y2))

    def draw_point(self, x, y):
        self.points.append((x, y))

    def present(self):
        self.calls.append(("present",))
        self.frames += 1

    def wait(self, delay_ms):
        self.waited_ms += delay_ms

    def lines(self):
        return [call[1:] for call in self.calls if call[0] == "draw_line"]


class ScriptedEvents:
    """
    Hands out one batch of events per poll.
    Once the script runs out it keeps answering with QuitEvent.
    """

    def __init__(self, batches):
        self.batches = list(batches)
        self.polls = 0

    def poll_events(self):
        self.polls += 1
        if self.batches:
            return self.batches.pop(0)
        return [QuitEvent()]


class QuietConfig(DisplayConfig):
    RESULT_HOLD_MS = 0


class BigConfig(QuietConfig):
    """A 600x600 window: every cell is 200 pixels."""
    WINDOW_WIDTH = 600
    WINDOW_HEIGHT = 600


def make_board(text: str) -> Board:
    """Build a board from 9 characters of 'X', 'O' or '.'."""
    lookup = {"X": Cell.X, "O": Cell.O, ".": Cell.EMPTY}
    return Board.from_cells(lookup[ch] for ch in text)
