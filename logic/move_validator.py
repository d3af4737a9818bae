"""
Move validator for TicTacToe.
Decides whether a click may become a move.
"""

from typing import Optional, TYPE_CHECKING
from dataclasses import dataclass
from .board import Cell, NUM_CELLS

if TYPE_CHECKING:
    from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Index must be on the board (0-8)
    3. Can only place on empty cells
    """

    def validate_move(self, game_state: "GameState", index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Row-major cell index.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if not 0 <= index < NUM_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-{NUM_CELLS - 1}."
            )

        cell = game_state.board.get(index)
        if cell != Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {cell.value}"
            )

        return ValidationResult(is_valid=True)
