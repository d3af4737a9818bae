"""
Win checker for TicTacToe.
Checks if a player has completed a line or if the board is a draw.
"""

from typing import Optional, Tuple
from .board import Board, Cell, Player


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 identical marks in a row
    (horizontally, vertically, or diagonally).
    The board never grows, so all 8 lines are simply checked one by one.
    """

    # All possible winning lines (row-major cell indices)
    WINNING_LINES = [
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    ]

    def check_winner(self, board: Board) -> Optional[Player]:
        """
        Check if there's a winner.

        Does not decide ties - a full board with no line is still None.

        Args:
            board: The board to check.

        Returns:
            The winning Player, or None if no line is complete.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return winner

        return None

    def _check_line(self, board: Board, line: Tuple[int, int, int]) -> Optional[Player]:
        """
        Check if a single line has a winner.

        Args:
            board: The game board.
            line: Three cell indices to check.

        Returns:
            The Player owning all 3 cells, None otherwise.
        """
        a, b, c = (board.get(i) for i in line)
        if a == Cell.EMPTY or not a == b == c:
            return None
        return Player.X if a == Cell.X else Player.O

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        Args:
            board: The board to check.

        Returns:
            True if the board is full and nobody has a line.
        """
        if self.check_winner(board) is not None:
            return False
        return board.is_full()
