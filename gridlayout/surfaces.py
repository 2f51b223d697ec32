"""In-memory visual surface.

Keeps the state a CSS grid container would end up with: one grid-area
style per attached item plus the container's templates, margin and
spacing. Used as the default surface of a layout and in tests.
"""

from collections.abc import Hashable, Sequence

from gridlayout.exceptions import SurfaceRejectedException
from gridlayout.logging_config import get_logger, log_with_context
from gridlayout.models.base_models import Area, MarginInfo

logger = get_logger(__name__)


def grid_area_style(area: Area) -> dict[str, str]:
    """CSS grid line placement for an area (grid lines are 1-based, end exclusive)."""
    return {
        "grid-row-start": str(area.row1 + 1),
        "grid-row-end": str(area.row2 + 2),
        "grid-column-start": str(area.column1 + 1),
        "grid-column-end": str(area.column2 + 2),
    }


class InMemorySurface:
    """Visual surface that records what it was told to render."""

    def __init__(self) -> None:
        self._styles: dict[Hashable, dict[str, str]] = {}
        self.column_template: str = ""
        self.row_template: str = ""
        self.margin: MarginInfo = MarginInfo()
        self.spacing: bool = False

    def __contains__(self, item: Hashable) -> bool:
        return item in self._styles

    @property
    def items(self) -> list[Hashable]:
        """Attached items, in attach order."""
        return list(self._styles)

    def style_of(self, item: Hashable) -> dict[str, str]:
        return dict(self._styles[item])

    def attach(self, item: Hashable, area: Area) -> None:
        if item in self._styles:
            raise SurfaceRejectedException(
                "Item is already attached to the surface",
                details={"item": repr(item)},
            )
        self._styles[item] = grid_area_style(area)

    def detach(self, item: Hashable) -> None:
        self._styles.pop(item, None)

    def detach_all(self) -> None:
        self._styles.clear()

    def apply_column_template(self, widths: Sequence[str]) -> None:
        self.column_template = " ".join(widths)
        log_with_context(
            logger,
            "debug",
            "Column template applied",
            template=self.column_template,
            event_type="surface_column_template",
        )

    def apply_row_template(self, heights: Sequence[str]) -> None:
        self.row_template = " ".join(heights)

    def apply_margin(self, margin: MarginInfo) -> None:
        self.margin = margin

    def apply_spacing(self, enabled: bool) -> None:
        self.spacing = enabled
