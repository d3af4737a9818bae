"""
Board model for TicTacToe.
Holds the 3x3 grid of cells and the two players.
"""

from enum import Enum
from typing import Iterable, List, Tuple


class Cell(Enum):
    """What can sit in a board cell."""
    EMPTY = " "
    X = "X"
    O = "O"


class Player(Enum):
    """The two players in the game. X always moves first."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X

    @property
    def mark(self) -> Cell:
        """The cell value this player writes on the board."""
        return Cell.X if self == Player.X else Cell.O


BOARD_SIZE = 3
NUM_CELLS = BOARD_SIZE * BOARD_SIZE


class Board:
    """
    The 3x3 grid, stored row-major (index = row * 3 + col).

    Cells are write-once: once a mark is placed it never changes.
    """

    def __init__(self):
        self._cells: List[Cell] = [Cell.EMPTY] * NUM_CELLS

    @classmethod
    def from_cells(cls, cells: Iterable[Cell]) -> "Board":
        """
        Build a board from 9 cells (any position, legal or not).

        Args:
            cells: Nine Cell values in row-major order.

        Raises:
            ValueError: If there are not exactly 9 cells.
            TypeError: If any item is not a Cell.

        Returns:
            A new Board.
        """
        cells = list(cells)
        if len(cells) != NUM_CELLS:
            raise ValueError(f"A board needs {NUM_CELLS} cells, got {len(cells)}")
        for cell in cells:
            if not isinstance(cell, Cell):
                raise TypeError(f"Board cells must be Cell values, got {cell!r}")
        board = cls()
        board._cells = cells
        return board

    def get(self, index: int) -> Cell:
        """Get the cell at a row-major index (0-8)."""
        self._check_index(index)
        return self._cells[index]

    def set(self, index: int, cell: Cell) -> bool:
        """
        Place a mark in a cell.

        Args:
            index: Row-major index (0-8).
            cell: The mark to write.

        Returns:
            True if placed, False if the cell was already occupied.
        """
        self._check_index(index)
        if self._cells[index] != Cell.EMPTY:
            return False
        self._cells[index] = cell
        return True

    def is_full(self) -> bool:
        return Cell.EMPTY not in self._cells

    def empty_cells(self) -> List[int]:
        """Indices of all empty cells."""
        return [i for i, cell in enumerate(self._cells) if cell == Cell.EMPTY]

    def cells(self) -> Tuple[Cell, ...]:
        """Read-only snapshot of all 9 cells."""
        return tuple(self._cells)

    def render_text(self) -> str:
        """Board as text, for printing to the console."""
        rows = []
        for row in range(BOARD_SIZE):
            start = row * BOARD_SIZE
            rows.append(" | ".join(c.value for c in self._cells[start:start + BOARD_SIZE]))
        return "\n---------\n".join(rows)

    def __len__(self) -> int:
        return NUM_CELLS

    def _check_index(self, index: int):
        if not 0 <= index < NUM_CELLS:
            raise IndexError(f"Cell index {index} out of range (0-{NUM_CELLS - 1})")
