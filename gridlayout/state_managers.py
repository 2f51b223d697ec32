"""State managers for sharing a layout between concurrent tasks.

``GridLayout`` itself is synchronous and not meant for concurrent
mutation. This module wraps it behind an asyncio.Lock for applications
that drive one layout from several tasks. All state managers inherit from
StateManager ABC.
"""

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Hashable

from gridlayout.config import Settings
from gridlayout.grid_layout import GridLayout
from gridlayout.logging_config import get_logger, log_with_context
from gridlayout.models.base_models import Area, LayoutSnapshot
from gridlayout.protocols import VisualSurfaceProtocol

logger = get_logger(__name__)


class StateManager(ABC):
    """Base class for all state managers.

    State managers provide task-safe access to mutable state.
    All subclasses must implement lifecycle methods.
    """

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize the state manager (called during application startup)."""
        pass

    @abstractmethod
    async def cleanup(self) -> None:
        """Cleanup resources (called during application shutdown)."""
        pass


class GridLayoutManager(StateManager):
    """Manages one GridLayout behind a lock.

    Every operation runs to completion while holding the lock, so the
    layout sees the same one-call-at-a-time sequence it would in a
    single-threaded program.
    """

    def __init__(
        self,
        columns: int = 1,
        rows: int = 1,
        surface: VisualSurfaceProtocol | None = None,
        settings: Settings | None = None,
    ):
        """Initialize the grid layout manager."""
        self._columns = columns
        self._rows = rows
        self._surface = surface
        self._settings = settings
        self._layout: GridLayout | None = None
        self._lock = asyncio.Lock()

    @property
    def layout(self) -> GridLayout:
        """The managed layout. Raises RuntimeError before initialize()."""
        if self._layout is None:
            raise RuntimeError("Grid layout manager not initialized.")
        return self._layout

    async def initialize(self) -> None:
        """Create the managed layout."""
        async with self._lock:
            if self._layout is None:
                self._layout = GridLayout(self._columns, self._rows, surface=self._surface, settings=self._settings)
                log_with_context(
                    logger,
                    "info",
                    "Grid layout manager initialized",
                    columns=self._columns,
                    rows=self._rows,
                    event_type="layout_manager_initialized",
                )

    async def cleanup(self) -> None:
        """Remove every component from the layout."""
        async with self._lock:
            if self._layout is not None:
                self._layout.remove_all_components()
                log_with_context(logger, "info", "Grid layout manager cleaned up", event_type="layout_manager_cleanup")

    async def add_component(
        self,
        item: Hashable,
        column1: int | None = None,
        row1: int | None = None,
        column2: int | None = None,
        row2: int | None = None,
    ) -> Area:
        """Add a component, automatically or at explicit coordinates.

        Returns:
            The area the component now occupies
        """
        async with self._lock:
            return self.layout.add_component(item, column1, row1, column2, row2)

    async def remove_component(self, item: Hashable) -> None:
        async with self._lock:
            self.layout.remove_component(item)

    async def remove_all_components(self) -> None:
        async with self._lock:
            self.layout.remove_all_components()

    async def get_component(self, column: int, row: int) -> Hashable | None:
        async with self._lock:
            return self.layout.get_component(column, row)

    async def snapshot(self) -> LayoutSnapshot:
        """Get a consistent snapshot of the layout.

        Returns:
            LayoutSnapshot taken while holding the lock
        """
        async with self._lock:
            return self.layout.snapshot()
