"""
Game window for TicTacToe.
An OpenCV window that is both the drawing surface and the event source.
"""

from collections import deque
from typing import Deque, List, Optional, Tuple

import cv2
import numpy as np

from .config import DisplayConfig
from .events import Event, PointerDownEvent, QuitEvent


class Window:
    """
    Simple OpenCV window wrapper.

    Drawing goes to a numpy BGR canvas; present() copies it to the screen.
    Mouse clicks are queued by a callback and handed out by poll_events().
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        """
        Initialize the window (nothing is shown until open()).

        Args:
            config: Display configuration. Uses defaults if not provided.
        """
        self.config = config or DisplayConfig()
        self.canvas = np.zeros(
            (self.config.WINDOW_HEIGHT, self.config.WINDOW_WIDTH, 3),
            dtype=np.uint8
        )
        self.color: Tuple[int, int, int] = self.config.LINE_COLOR
        self.is_opened = False
        self._pending: Deque[Event] = deque()

    def open(self) -> bool:
        """
        Create the window and start listening for clicks.

        Returns:
            True if the window was created, False otherwise.
        """
        title = self.config.WINDOW_TITLE
        try:
            cv2.namedWindow(title, cv2.WINDOW_AUTOSIZE)
            cv2.setMouseCallback(title, self._on_mouse)
        except cv2.error as e:
            print(f"ERROR: Could not create window: {e}")
            return False

        print(f"Window opened! Size: {self.config.WINDOW_WIDTH}x{self.config.WINDOW_HEIGHT}")
        self.is_opened = True
        return True

    def close(self):
        """Destroy the window and release resources."""
        if self.is_opened:
            cv2.destroyWindow(self.config.WINDOW_TITLE)
            cv2.waitKey(1)
        self.is_opened = False
        print("Window closed.")

    # ==================== SURFACE ====================

    def set_color(self, color: Tuple[int, int, int]):
        """Set the BGR colour used by the following draw calls."""
        self.color = tuple(int(c) for c in color)

    def clear(self):
        """Fill the whole canvas with the current colour."""
        self.canvas[:, :] = self.color

    def draw_line(self, x1: int, y1: int, x2: int, y2: int):
        cv2.line(self.canvas, (x1, y1), (x2, y2), self.color, 1)

    def draw_point(self, x: int, y: int):
        # Points off the canvas are dropped
        if 0 <= x < self.canvas.shape[1] and 0 <= y < self.canvas.shape[0]:
            self.canvas[y, x] = self.color

    def present(self):
        """Show the canvas in the window."""
        if self.is_opened:
            cv2.imshow(self.config.WINDOW_TITLE, self.canvas)

    # ==================== EVENTS ====================

    def poll_events(self) -> List[Event]:
        """
        Pump window events for one frame and return what happened.

        Returns:
            Queued clicks, followed by a QuitEvent if the user asked to quit.
        """
        key = cv2.waitKey(self.config.FRAME_DELAY_MS) & 0xFF

        events = list(self._pending)
        self._pending.clear()

        if key in self.config.QUIT_KEYS or self._was_closed():
            events.append(QuitEvent())

        return events

    def wait(self, delay_ms: int):
        """Keep the window responsive for a while without reading input."""
        if self.is_opened and delay_ms > 0:
            cv2.waitKey(delay_ms)

    def _was_closed(self) -> bool:
        """True once the user closed the window with the title bar button."""
        if not self.is_opened:
            return True
        try:
            visible = cv2.getWindowProperty(self.config.WINDOW_TITLE, cv2.WND_PROP_VISIBLE)
        except cv2.error:
            return True
        return visible < 1

    def _on_mouse(self, event, x, y, flags, param):
        """OpenCV mouse callback."""
        if event == cv2.EVENT_LBUTTONDOWN:
            self._pending.append(PointerDownEvent(x, y))
