"""Pydantic models for grid areas and layout configuration."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from gridlayout.models.alignment import Alignment


class Area(BaseModel):
    """Axis-aligned rectangle of grid cells.

    Corners are zero-based and inclusive. Ordering of the corners and
    grid bounds are validated by the layout, not here, so that a
    malformed request can still be reported with its area attached.
    """

    model_config = ConfigDict(frozen=True)

    column1: int
    row1: int
    column2: int
    row2: int

    @classmethod
    def cell(cls, column: int, row: int) -> "Area":
        """Single-cell area at (column, row)."""
        return cls(column1=column, row1=row, column2=column, row2=row)

    @property
    def column_span(self) -> int:
        return self.column2 - self.column1 + 1

    @property
    def row_span(self) -> int:
        return self.row2 - self.row1 + 1

    def overlaps(self, other: "Area") -> bool:
        """Check whether the two areas share at least one cell.

        Args:
            other: Area to test against

        Returns:
            True when the projections intersect on both axes
        """
        return (
            self.column1 <= other.column2
            and self.column2 >= other.column1
            and self.row1 <= other.row2
            and self.row2 >= other.row1
        )

    def contains(self, column: int, row: int) -> bool:
        """Check whether the cell (column, row) lies inside the area."""
        return self.column1 <= column <= self.column2 and self.row1 <= row <= self.row2

    def starts_after(self, other: "Area") -> bool:
        """True if this area starts on a later row, or on the same row at a later column."""
        if self.row1 != other.row1:
            return self.row1 > other.row1
        return self.column1 > other.column1

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.column1, self.row1, self.column2, self.row2)


class MarginInfo(BaseModel):
    """Margin toggles for the four sides of the layout."""

    model_config = ConfigDict(frozen=True)

    top: bool = False
    right: bool = False
    bottom: bool = False
    left: bool = False

    @classmethod
    def all(cls, enabled: bool) -> "MarginInfo":
        """Margin with every side set to ``enabled``."""
        return cls(top=enabled, right=enabled, bottom=enabled, left=enabled)

    @property
    def has_all(self) -> bool:
        return self.top and self.right and self.bottom and self.left

    @property
    def has_none(self) -> bool:
        return not (self.top or self.right or self.bottom or self.left)


class PlacementInfo(BaseModel):
    """A placed item as reported in a layout snapshot."""

    item: str = Field(..., description="repr() of the caller supplied item handle")
    area: Area
    alignment: Alignment


class LayoutSnapshot(BaseModel):
    """Point-in-time view of a layout, for diagnostics."""

    columns: int = Field(..., ge=1, description="Number of columns")
    rows: int = Field(..., ge=1, description="Number of rows")
    cursor: tuple[int, int] = Field(..., description="Next auto placement cell (x, y)")
    column_widths: list[str] = Field(..., description="Column template entries")
    column_expand_ratios: list[float | None] | None = Field(None, description="Expand ratios, if any were set")
    margin: MarginInfo
    spacing: bool
    placements: list[PlacementInfo] = Field(default_factory=list, description="Placements in layout order")

    def to_log_fields(self) -> dict[str, Any]:
        """Flatten the snapshot for structured logging."""
        return {
            "columns": self.columns,
            "rows": self.rows,
            "cursor": list(self.cursor),
            "component_count": len(self.placements),
        }
