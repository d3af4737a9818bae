"""
Maps mouse clicks to board cells.
"""

from typing import Optional

from logic.game_state import GameState
from .config import DisplayConfig


class InputMapper:
    """
    Converts window pixel coordinates into row-major cell indices.
    Clicks are assumed to land inside the window.
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        self.config = config or DisplayConfig()

    def cell_index(self, x: int, y: int) -> int:
        """
        Get the cell under a pixel.

        Args:
            x: Window x coordinate.
            y: Window y coordinate.

        Returns:
            Cell index, row * 3 + col.
        """
        row = y // self.config.cell_height
        col = x // self.config.cell_width
        return row * self.config.BOARD_SIZE + col

    def handle_click(self, game_state: GameState, x: int, y: int) -> bool:
        """Forward a click to the game. Returns True if it became a move."""
        return game_state.apply_move(self.cell_index(x, y))
