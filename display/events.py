"""
Input events delivered by the game window.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class QuitEvent:
    """The user closed the window or pressed a quit key."""


@dataclass(frozen=True)
class PointerDownEvent:
    """Left mouse button pressed at window-local pixel coordinates."""
    x: int
    y: int


Event = Union[QuitEvent, PointerDownEvent]
