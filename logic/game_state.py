"""
Game state management for TicTacToe.
Tracks the board, whose turn it is, and whether the game has ended.
"""

from enum import Enum
from typing import Optional
from dataclasses import dataclass, field

from .board import Board, Player
from .move_validator import MoveValidator
from .win_checker import WinChecker


class GameStatus(Enum):
    """Where the game is. WON and TIE are terminal."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    TIE = "tie"


@dataclass
class GameState:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The 3x3 board
    - Current player (X moves first)
    - Game status (in progress, won, tie) and the winner
    - How many moves were accepted

    Once the status leaves IN_PROGRESS it never changes again.
    """

    board: Board = field(default_factory=Board)
    current_player: Player = Player.X
    status: GameStatus = GameStatus.IN_PROGRESS
    winner: Optional[Player] = None
    move_count: int = 0

    # Print rejected moves and every accepted move
    verbose: bool = False

    validator: MoveValidator = field(default_factory=MoveValidator, repr=False)
    win_checker: WinChecker = field(default_factory=WinChecker, repr=False)

    @property
    def is_game_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    @property
    def is_draw(self) -> bool:
        return self.status == GameStatus.TIE

    def apply_move(self, index: int) -> bool:
        """
        Place the current player's mark in a cell.

        Rejected moves (game over, occupied cell) change nothing at all:
        not the board, not the player, not the status.

        Args:
            index: Row-major cell index (0-8).

        Returns:
            True if the move was accepted, False if it was ignored.
        """
        result = self.validator.validate_move(self, index)
        if not result.is_valid:
            if self.verbose:
                print(f"Move ignored: {result.error_message}")
            return False

        player = self.current_player
        self.board.set(index, player.mark)
        self.move_count += 1

        if self.verbose:
            print(f"{player.value} plays cell {index}")

        winner = self.win_checker.check_winner(self.board)
        if winner is not None:
            self.winner = winner
            self.status = GameStatus.WON
        elif self.win_checker.check_draw(self.board):
            self.status = GameStatus.TIE
        else:
            self.current_player = player.opposite()

        return True

    def result_message(self) -> str:
        """Short result line, empty while the game is still going."""
        if self.status == GameStatus.WON:
            return f"{self.winner.value} wins!"
        if self.is_draw:
            return "Tie!"
        return ""

    def print_board(self):
        """Print the board and the game status to the console."""
        print()
        print(self.board.render_text())

        if self.is_game_over:
            print(f"\n{self.result_message()}")
        else:
            print(f"\nCurrent turn: {self.current_player.value}")
