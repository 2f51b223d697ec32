"""Component alignment inside a grid area."""

from enum import Enum

# Alignment bits, combined as one vertical and one horizontal bit per value.
ALIGNMENT_LEFT = 1
ALIGNMENT_RIGHT = 2
ALIGNMENT_TOP = 4
ALIGNMENT_BOTTOM = 8
ALIGNMENT_HORIZONTAL_CENTER = 16
ALIGNMENT_VERTICAL_CENTER = 32


class Alignment(int, Enum):
    """Where a component sits inside its area.

    The value is a bitmask of one vertical bit and one horizontal bit.
    """

    TOP_LEFT = ALIGNMENT_TOP | ALIGNMENT_LEFT
    TOP_CENTER = ALIGNMENT_TOP | ALIGNMENT_HORIZONTAL_CENTER
    TOP_RIGHT = ALIGNMENT_TOP | ALIGNMENT_RIGHT
    MIDDLE_LEFT = ALIGNMENT_VERTICAL_CENTER | ALIGNMENT_LEFT
    MIDDLE_CENTER = ALIGNMENT_VERTICAL_CENTER | ALIGNMENT_HORIZONTAL_CENTER
    MIDDLE_RIGHT = ALIGNMENT_VERTICAL_CENTER | ALIGNMENT_RIGHT
    BOTTOM_LEFT = ALIGNMENT_BOTTOM | ALIGNMENT_LEFT
    BOTTOM_CENTER = ALIGNMENT_BOTTOM | ALIGNMENT_HORIZONTAL_CENTER
    BOTTOM_RIGHT = ALIGNMENT_BOTTOM | ALIGNMENT_RIGHT

    @property
    def bitmask(self) -> int:
        return int(self.value)

    @property
    def is_top(self) -> bool:
        return bool(self.value & ALIGNMENT_TOP)

    @property
    def is_bottom(self) -> bool:
        return bool(self.value & ALIGNMENT_BOTTOM)

    @property
    def is_middle(self) -> bool:
        return bool(self.value & ALIGNMENT_VERTICAL_CENTER)

    @property
    def is_left(self) -> bool:
        return bool(self.value & ALIGNMENT_LEFT)

    @property
    def is_right(self) -> bool:
        return bool(self.value & ALIGNMENT_RIGHT)

    @property
    def is_center(self) -> bool:
        return bool(self.value & ALIGNMENT_HORIZONTAL_CENTER)

    @property
    def vertical(self) -> str:
        """Vertical part as a CSS ``align-self`` value."""
        if self.is_top:
            return "start"
        if self.is_bottom:
            return "end"
        return "center"

    @property
    def horizontal(self) -> str:
        """Horizontal part as a CSS ``justify-self`` value."""
        if self.is_left:
            return "start"
        if self.is_right:
            return "end"
        return "center"
