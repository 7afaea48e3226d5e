"""Press-and-drag panning of a scrollable area."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Cursor(Enum):
    ARROW = "arrow"
    CLOSED_HAND = "closed_hand"


@dataclass
class ScrollBar:
    """A scroll position kept within its range."""

    maximum: int
    minimum: int = 0
    value: int = 0

    def __post_init__(self) -> None:
        if self.maximum < self.minimum:
            raise ValueError("maximum must not be below minimum")
        self.set_value(self.value)

    def set_value(self, value: int) -> int:
        """Move to *value*, clamped to the range, and return the new value."""
        self.value = max(self.minimum, min(self.maximum, value))
        return self.value


@dataclass
class DragScroller:
    """Pans two scroll bars while the left button is held and the pointer moves."""

    horizontal: ScrollBar = field(init=False)
    vertical: ScrollBar = field(init=False)
    dragging: bool = field(init=False, default=False)
    last_pos: tuple[int, int] = field(init=False, default=(0, 0))
    cursor: Cursor = field(init=False, default=Cursor.ARROW)

    def __init__(self, horizontal_max: int, vertical_max: int) -> None:
        self.horizontal = ScrollBar(horizontal_max)
        self.vertical = ScrollBar(vertical_max)
        self.dragging = False
        self.last_pos = (0, 0)
        self.cursor = Cursor.ARROW

    def press(self, x: int, y: int, left_button: bool = True) -> None:
        if left_button:
            self.dragging = True
            self.last_pos = (x, y)
            self.cursor = Cursor.CLOSED_HAND

    def move(self, x: int, y: int) -> tuple[int, int]:
        """Follow the pointer; return the scroll position afterwards."""
        if self.dragging:
            last_x, last_y = self.last_pos
            self.horizontal.set_value(self.horizontal.value - (x - last_x))
            self.vertical.set_value(self.vertical.value - (y - last_y))
            self.last_pos = (x, y)
        return self.horizontal.value, self.vertical.value

    def release(self) -> None:
        self.dragging = False
        self.cursor = Cursor.ARROW