"""
Board renderer for TicTacToe.
Turns the board into draw calls on a surface.
"""

from typing import Optional

from logic.board import Board, Cell
from .config import DisplayConfig
from .drawing import draw_circle


class BoardRenderer:
    """
    Draws the grid and the marks, once per frame.

    The renderer only reads the board. Any object with set_color(),
    draw_line(), draw_point(), clear() and present() works as a surface.
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: Display configuration. Uses defaults if not provided.
        """
        self.config = config or DisplayConfig()

    def render(self, surface, board: Board):
        """
        Draw a complete frame and show it.

        Args:
            surface: The drawing target.
            board: The board to draw.
        """
        surface.set_color(self.config.BACKGROUND_COLOR)
        surface.clear()

        surface.set_color(self.config.LINE_COLOR)
        self.draw_grid(surface)

        size = self.config.BOARD_SIZE
        for index, cell in enumerate(board.cells()):
            row, col = divmod(index, size)
            if cell == Cell.X:
                self.draw_x(surface, row, col)
            elif cell == Cell.O:
                self.draw_o(surface, row, col)

        surface.present()

    def draw_grid(self, surface):
        """Draw the 2 vertical and 2 horizontal dividers."""
        cfg = self.config
        width, height = cfg.WINDOW_WIDTH, cfg.WINDOW_HEIGHT

        # Vertical lines
        for i in range(1, cfg.BOARD_SIZE):
            x = i * cfg.cell_width
            surface.draw_line(x, 0, x, height)

        # Horizontal lines
        for i in range(1, cfg.BOARD_SIZE):
            y = i * cfg.cell_height
            surface.draw_line(0, y, width, y)

    def draw_x(self, surface, row: int, col: int):
        """Draw an X as the two diagonals of the cell."""
        w, h = self.config.cell_width, self.config.cell_height
        left, top = col * w, row * h
        right, bottom = left + w, top + h

        surface.draw_line(left, top, right, bottom)
        surface.draw_line(right, top, left, bottom)

    def draw_o(self, surface, row: int, col: int):
        """Draw an O centred in the cell."""
        w, h = self.config.cell_width, self.config.cell_height
        cx = col * w + w // 2
        cy = row * h + h // 2
        radius = min(w, h) // 2 - self.config.PADDING

        draw_circle(surface, cx, cy, radius)
