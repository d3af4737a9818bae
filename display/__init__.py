"""
Display module for TicTacToe.
Handles drawing and mouse input. The OpenCV window lives in display.window.
"""

from .config import DisplayConfig
from .events import PointerDownEvent, QuitEvent
from .board_renderer import BoardRenderer
from .input_mapper import InputMapper
