"""Protocol definitions for the layout's visual surface collaborator."""

from collections.abc import Hashable, Sequence
from typing import Protocol, runtime_checkable

from gridlayout.models.base_models import Area, MarginInfo


@runtime_checkable
class VisualSurfaceProtocol(Protocol):
    """Protocol for surfaces that render placed components.

    The layout owns all placement bookkeeping; a surface only receives
    instructions. This allows for swapping the rendering backend and for
    easier testing.
    """

    def attach(self, item: Hashable, area: Area) -> None:
        """Render ``item`` over ``area``.

        Raises:
            Exception: Any exception rejects the item; the layout rolls the
                placement back and re-raises it.
        """
        ...

    def detach(self, item: Hashable) -> None:
        """Stop rendering ``item`` (best effort)."""
        ...

    def detach_all(self) -> None:
        """Stop rendering every item (best effort)."""
        ...

    def apply_column_template(self, widths: Sequence[str]) -> None:
        """Apply one width entry per column."""
        ...

    def apply_row_template(self, heights: Sequence[str]) -> None:
        """Apply one height entry per row."""
        ...

    def apply_margin(self, margin: MarginInfo) -> None:
        ...

    def apply_spacing(self, enabled: bool) -> None:
        ...
