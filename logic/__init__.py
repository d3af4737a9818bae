"""
Logic module for TicTacToe.
Handles the board, game state, move rules and win detection.
"""

from .board import Board, Cell, Player
from .game_state import GameState, GameStatus
from .move_validator import MoveValidator
from .win_checker import WinChecker
