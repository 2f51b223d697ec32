"""Auto placement cursor."""

from gridlayout.models.base_models import Area


class Cursor:
    """Next cell considered by automatic placement.

    The cursor is not kept inside the grid: it may point one row below the
    last row (or past the last column after the column count shrank), in
    which case the next automatic placement grows the grid.
    """

    def __init__(self) -> None:
        self.x: int = 0
        self.y: int = 0

    def __repr__(self) -> str:
        return f"Cursor(x={self.x}, y={self.y})"

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    def reset(self) -> None:
        self.x = 0
        self.y = 0

    def advance(self, columns: int) -> None:
        """Step one cell to the right, wrapping to the start of the next row."""
        self.x += 1
        if self.x >= columns:
            self.x = 0
            self.y += 1

    def reposition_after(self, area: Area, columns: int) -> bool:
        """Move past a freshly placed area if it covers the cursor.

        The cursor goes one column right of the area, on the area's first
        row. When that overflows the columns it wraps to column 0, below the
        area's last row if the area starts at the left edge and below its
        first row otherwise, so cells left of the area on the following row
        are not skipped.

        Args:
            area: Area that was just placed
            columns: Current column count

        Returns:
            True if the cursor moved
        """
        if not area.contains(self.x, self.y):
            return False

        self.x = area.column2 + 1
        if self.x >= columns:
            self.x = 0
            self.y = (area.row2 if area.column1 == 0 else area.row1) + 1
        else:
            self.y = area.row1
        return True
