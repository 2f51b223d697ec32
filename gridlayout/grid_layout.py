"""Grid layout: placement bookkeeping for components on a column x row grid.

Components are opaque, hashable handles supplied by the caller. Each one
occupies a rectangular area of cells; areas never overlap and always lie
inside the grid. Components are kept in top-down, left-right order of
their areas, and a cursor tracks where the next component without
explicit coordinates goes.

Rendering is delegated to a visual surface (see ``VisualSurfaceProtocol``):
the layout validates and records every change first and then tells the
surface what to draw.
"""

from collections.abc import Hashable, Iterator

from gridlayout.column_template import ColumnTemplate
from gridlayout.config import Settings, get_settings
from gridlayout.cursor import Cursor
from gridlayout.exceptions import InvalidArgumentException, OutOfBoundsException, OverlapsException
from gridlayout.logging_config import get_logger, log_with_context
from gridlayout.models.alignment import Alignment
from gridlayout.models.base_models import Area, LayoutSnapshot, MarginInfo, PlacementInfo
from gridlayout.models.units import Unit
from gridlayout.protocols import VisualSurfaceProtocol
from gridlayout.surfaces import InMemorySurface

logger = get_logger(__name__)

ALIGNMENT_DEFAULT = Alignment.TOP_LEFT


def _require_int(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentException(f"{name} must be an integer", details={name: repr(value)})
    return value


def _require_item(item: object) -> Hashable:
    if item is None:
        raise InvalidArgumentException("Component must not be None")
    if not isinstance(item, Hashable):
        raise InvalidArgumentException("Component must be hashable", details={"item": repr(item)})
    return item


class GridLayout:
    """A grid of ``columns`` x ``rows`` cells holding components in areas.

    The grid may grow or shrink later. It grows automatically when a
    component is added without coordinates and no free cell is left
    inside the current bounds.

    Example:
        layout = GridLayout(4, 4)
        layout.add_component("title", 0, 0, 3, 0)
        layout.add_component("menu")  # lands at (0, 1)
    """

    def __init__(
        self,
        columns: int = 1,
        rows: int = 1,
        surface: VisualSurfaceProtocol | None = None,
        settings: Settings | None = None,
    ):
        """Initialize the layout.

        Args:
            columns: Initial number of columns, at least 1
            rows: Initial number of rows, at least 1
            surface: Visual surface receiving render instructions;
                an ``InMemorySurface`` when omitted
            settings: Settings override; the shared ``get_settings()``
                instance when omitted
        """
        self._settings = settings if settings is not None else get_settings()
        self._surface: VisualSurfaceProtocol = surface if surface is not None else InMemorySurface()

        self._columns = 0
        self._rows = 0
        self._components: list[Hashable] = []
        self._areas: dict[Hashable, Area] = {}
        self._alignments: dict[Hashable, Alignment] = {}
        self._cursor = Cursor()
        self._template = ColumnTemplate(
            0,
            default_width=self._settings.default_column_width,
            preserve_widths=self._settings.preserve_column_widths,
            precision=self._settings.percentage_precision,
        )
        self._default_alignment = ALIGNMENT_DEFAULT
        self._margin = MarginInfo()
        self._spacing = False

        self.set_columns(columns)
        self.set_rows(rows)

    def __repr__(self) -> str:
        return f"GridLayout(columns={self._columns}, rows={self._rows}, components={len(self._components)})"

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(list(self._components))

    def __contains__(self, item: object) -> bool:
        return isinstance(item, Hashable) and item in self._areas

    # ------------------------------------------------------------------
    # Dimensions
    # ------------------------------------------------------------------

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def surface(self) -> VisualSurfaceProtocol:
        return self._surface

    def set_columns(self, columns: int) -> None:
        """Set the number of columns.

        Args:
            columns: New column count, at least 1

        Raises:
            InvalidArgumentException: columns is not a positive integer
            OutOfBoundsException: A component would fall outside the grid
        """
        columns = _require_int(columns, "columns")
        if columns < 1:
            raise InvalidArgumentException(
                "The number of columns and rows in the grid must be at least 1", details={"columns": columns}
            )
        if columns == self._columns:
            return

        for item in self._components:
            area = self._areas[item]
            if area.column2 >= columns:
                raise OutOfBoundsException(
                    f"Cannot shrink to {columns} columns, a component occupies column {area.column2}", area
                )

        self._template.resize(columns)
        self._columns = columns
        self._surface.apply_column_template(self._template.widths)
        log_with_context(logger, "debug", "Column count changed", columns=columns, event_type="columns_changed")

    def set_rows(self, rows: int) -> None:
        """Set the number of rows.

        Args:
            rows: New row count, at least 1

        Raises:
            InvalidArgumentException: rows is not a positive integer
            OutOfBoundsException: A component would fall outside the grid
        """
        rows = _require_int(rows, "rows")
        if rows < 1:
            raise InvalidArgumentException(
                "The number of columns and rows in the grid must be at least 1", details={"rows": rows}
            )
        if rows == self._rows:
            return

        for item in self._components:
            area = self._areas[item]
            if area.row2 >= rows:
                raise OutOfBoundsException(f"Cannot shrink to {rows} rows, a component occupies row {area.row2}", area)

        self._rows = rows
        self._surface.apply_row_template([self._settings.default_row_height] * rows)
        log_with_context(logger, "debug", "Row count changed", rows=rows, event_type="rows_changed")

    # ------------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------------

    @property
    def cursor_x(self) -> int:
        return self._cursor.x

    @property
    def cursor_y(self) -> int:
        return self._cursor.y

    @property
    def cursor(self) -> tuple[int, int]:
        return self._cursor.position

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------

    def add_component(
        self,
        item: Hashable,
        column1: int | None = None,
        row1: int | None = None,
        column2: int | None = None,
        row2: int | None = None,
    ) -> Area:
        """Add a component to the grid.

        Without coordinates the component goes to the first free cell at or
        after the cursor, growing the grid if needed. With ``column1`` and
        ``row1`` only it takes that single cell. With all four coordinates
        it takes the area from the upper left corner (column1, row1) to the
        lower right corner (column2, row2), inclusive and zero-based.

        Args:
            item: Component handle, hashable and not yet in the layout
            column1: Column of the upper left corner
            row1: Row of the upper left corner
            column2: Column of the lower right corner (defaults to column1)
            row2: Row of the lower right corner (defaults to row1)

        Returns:
            The area the component now occupies

        Raises:
            InvalidArgumentException: Bad item or coordinates
            OutOfBoundsException: Area not inside the grid
            OverlapsException: Area intersects another component
        """
        if column1 is None and row1 is None:
            if column2 is not None or row2 is not None:
                raise InvalidArgumentException("The upper left corner is required when a lower right corner is given")
            return self._auto_place(item)
        if column1 is None or row1 is None:
            raise InvalidArgumentException("Both column1 and row1 are required", details={"column1": column1, "row1": row1})

        column1 = _require_int(column1, "column1")
        row1 = _require_int(row1, "row1")
        column2 = column1 if column2 is None else _require_int(column2, "column2")
        row2 = row1 if row2 is None else _require_int(row2, "row2")
        return self.place(item, Area(column1=column1, row1=row1, column2=column2, row2=row2))

    def place(self, item: Hashable, area: Area) -> Area:
        """Add a component over an explicit area.

        Validation happens before any state changes. If the surface rejects
        the component, the placement is rolled back and the surface's
        exception propagates.

        Raises:
            InvalidArgumentException: Bad item or inverted corners
            OutOfBoundsException: Area not inside the grid
            OverlapsException: Area intersects another component
        """
        self._check_new_item(item)
        if area.column2 < area.column1 or area.row2 < area.row1:
            raise InvalidArgumentException("Illegal coordinates for the component", details={"area": area.as_tuple()})
        if area.column1 < 0 or area.row1 < 0 or area.column2 >= self._columns or area.row2 >= self._rows:
            raise OutOfBoundsException(
                f"Area {area.as_tuple()} is outside the {self._columns}x{self._rows} grid",
                area,
                details={"columns": self._columns, "rows": self._rows},
            )
        for existing in self._components:
            existing_area = self._areas[existing]
            if existing_area.overlaps(area):
                raise OverlapsException(
                    f"Area {area.as_tuple()} overlaps component {existing!r} at {existing_area.as_tuple()}",
                    existing_area,
                    existing,
                )

        # Respect top-down, left-right ordering
        index = len(self._components)
        for position, existing in enumerate(self._components):
            if self._areas[existing].starts_after(area):
                index = position
                break
        self._components.insert(index, item)
        self._areas[item] = area
        self._alignments[item] = self._default_alignment

        try:
            self._surface.attach(item, area)
        except Exception as e:
            del self._components[index]
            del self._areas[item]
            del self._alignments[item]
            log_with_context(
                logger,
                "warning",
                "Visual surface rejected component, placement rolled back",
                item=repr(item),
                area=area.as_tuple(),
                error=str(e),
                event_type="component_rejected",
            )
            raise

        # Use the first position outside this area, even if it's occupied
        self._cursor.reposition_after(area, self._columns)
        log_with_context(
            logger,
            "debug",
            "Component placed",
            item=repr(item),
            area=area.as_tuple(),
            cursor=self._cursor.position,
            event_type="component_placed",
        )
        return area

    def _auto_place(self, item: Hashable) -> Area:
        self._check_new_item(item)
        saved_cursor = self._cursor.position
        saved_columns, saved_rows = self._columns, self._rows
        saved_widths, saved_ratios = self._template.widths, self._template.expand_ratios

        while not self.is_free(Area.cell(self._cursor.x, self._cursor.y)):
            self._cursor.advance(self._columns)

        try:
            if self._cursor.x >= self._columns:
                self.set_columns(self._cursor.x + 1)
            if self._cursor.y >= self._rows:
                self.set_rows(self._cursor.y + 1)
                log_with_context(
                    logger, "debug", "Grid grown for automatic placement", rows=self._rows, event_type="grid_grown"
                )
            return self.place(item, Area.cell(self._cursor.x, self._cursor.y))
        except Exception:
            self.set_rows(saved_rows)
            if self._columns != saved_columns:
                self.set_columns(saved_columns)
                # Shrinking back may have reset widths
                self._template.restore(saved_widths, saved_ratios)
                self._surface.apply_column_template(self._template.widths)
            self._cursor.x, self._cursor.y = saved_cursor
            raise

    def _check_new_item(self, item: Hashable) -> None:
        _require_item(item)
        if item in self._areas:
            raise InvalidArgumentException("Component is already in the layout", details={"item": repr(item)})

    def is_free(self, area: Area) -> bool:
        """Check that no component occupies any cell of ``area``. Bounds are not consulted."""
        return not any(existing.overlaps(area) for existing in self._areas.values())

    def remove_component(self, item: Hashable) -> None:
        """Remove a component. Unknown components are ignored; the cursor does not move."""
        if item is None or item not in self:
            return

        self._components.remove(item)
        del self._areas[item]
        del self._alignments[item]
        self._surface.detach(item)
        log_with_context(logger, "debug", "Component removed", item=repr(item), event_type="component_removed")

    def remove_all_components(self) -> None:
        """Remove every component and move the cursor back to (0, 0)."""
        self._surface.detach_all()
        self._components.clear()
        self._areas.clear()
        self._alignments.clear()
        self._cursor.reset()
        log_with_context(logger, "debug", "All components removed", event_type="components_cleared")

    def replace_component(self, old_item: Hashable, new_item: Hashable) -> None:
        """Replace a component with another one without changing position.

        If ``old_item`` is not in the layout, ``new_item`` is added like a
        component without coordinates. If ``new_item`` is not in the layout
        it takes over the area of ``old_item``, which is removed. If both are
        in the layout their areas are swapped; alignments stay with their
        components. If the surface rejects a component the layout is left
        as it was and the surface's exception propagates.
        """
        old_area = self._areas.get(old_item) if old_item in self else None
        new_area = self._areas.get(new_item) if new_item in self else None

        if old_area is None:
            self.add_component(new_item)
            return

        if new_area is None:
            _require_item(new_item)
            old_alignment = self._alignments[old_item]
            saved_cursor = self._cursor.position
            self.remove_component(old_item)
            try:
                self.place(new_item, old_area)
            except Exception:
                self.place(old_item, old_area)
                self._alignments[old_item] = old_alignment
                self._cursor.x, self._cursor.y = saved_cursor
                raise
            return

        if old_item == new_item:
            return

        saved_order = list(self._components)
        self._areas[old_item], self._areas[new_item] = new_area, old_area
        self._components.sort(key=lambda c: (self._areas[c].row1, self._areas[c].column1))
        try:
            self._reattach(old_item, new_item)
        except Exception as e:
            self._areas[old_item], self._areas[new_item] = old_area, new_area
            self._components[:] = saved_order
            log_with_context(
                logger,
                "warning",
                "Visual surface rejected swapped component, swap rolled back",
                old_item=repr(old_item),
                new_item=repr(new_item),
                error=str(e),
                event_type="component_rejected",
            )
            self._reattach(old_item, new_item)
            raise
        log_with_context(
            logger,
            "debug",
            "Components swapped",
            old_item=repr(old_item),
            new_item=repr(new_item),
            event_type="components_swapped",
        )

    def _reattach(self, *items: Hashable) -> None:
        for item in items:
            self._surface.detach(item)
            self._surface.attach(item, self._areas[item])

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    @property
    def components(self) -> tuple[Hashable, ...]:
        """Components in top-down, left-right order."""
        return tuple(self._components)

    @property
    def component_count(self) -> int:
        return len(self._components)

    def get_component(self, column: int, row: int) -> Hashable | None:
        """Return the component covering cell (column, row), or None."""
        for item in self._components:
            if self._areas[item].contains(column, row):
                return item
        return None

    def get_component_area(self, item: Hashable) -> Area:
        if item not in self:
            raise InvalidArgumentException("The given component is not a child of this layout", details={"item": repr(item)})
        return self._areas[item]

    # ------------------------------------------------------------------
    # Column widths
    # ------------------------------------------------------------------

    @property
    def column_widths(self) -> list[str]:
        return self._template.widths

    @property
    def column_expand_ratios(self) -> list[float | None] | None:
        return self._template.expand_ratios

    def get_column_width(self, index: int) -> str:
        """Width of the column at 1-based ``index``."""
        index = _require_int(index, "index")
        if not 1 <= index <= self._columns:
            raise InvalidArgumentException(
                f"Column index must be between 1 and {self._columns}", details={"index": index}
            )
        return self._template.widths[index - 1]

    def set_column_width(self, index: int, width: str | float, unit: Unit | None = None) -> None:
        """Set the width of the column at 1-based ``index``.

        ``width`` is either a literal template entry (``"120px"``, ``"30%"``,
        ``"auto"``) or a number combined with ``unit``.
        """
        spec = self._template.set_width(index, width, unit)
        self._surface.apply_column_template(self._template.widths)
        log_with_context(logger, "debug", "Column width set", index=index, width=spec, event_type="column_width_set")

    def set_column_expand_ratio(self, index: int, ratio: float) -> None:
        """Set the expand ratio of the column at 1-based ``index``.

        Every column with a ratio gets ``ratio / sum(ratios)`` of the width
        as a percentage; columns without a ratio keep their width.
        """
        widths = self._template.set_expand_ratio(index, ratio)
        self._surface.apply_column_template(widths)
        log_with_context(
            logger, "debug", "Column expand ratio set", index=index, ratio=ratio, event_type="column_expand_ratio_set"
        )

    def get_column_expand_ratio(self, index: int) -> float:
        return self._template.get_expand_ratio(index)

    # ------------------------------------------------------------------
    # Alignment, margin and spacing
    # ------------------------------------------------------------------

    @property
    def default_component_alignment(self) -> Alignment:
        return self._default_alignment

    @default_component_alignment.setter
    def default_component_alignment(self, alignment: Alignment) -> None:
        if not isinstance(alignment, Alignment):
            raise InvalidArgumentException("Default alignment must be an Alignment", details={"alignment": repr(alignment)})
        self._default_alignment = alignment

    def get_component_alignment(self, item: Hashable) -> Alignment:
        if item not in self:
            raise InvalidArgumentException("The given component is not a child of this layout", details={"item": repr(item)})
        return self._alignments[item]

    def set_component_alignment(self, item: Hashable, alignment: Alignment | None) -> None:
        """Set the alignment of a component inside its area; None resets it to top-left."""
        if item not in self:
            raise InvalidArgumentException(
                "Component must be added to layout before using set_component_alignment()", details={"item": repr(item)}
            )
        if alignment is not None and not isinstance(alignment, Alignment):
            raise InvalidArgumentException("Alignment must be an Alignment", details={"alignment": repr(alignment)})
        self._alignments[item] = ALIGNMENT_DEFAULT if alignment is None else alignment

    @property
    def margin(self) -> MarginInfo:
        return self._margin

    def set_margin(self, margin: bool | MarginInfo) -> None:
        """Enable or disable margins, on every side (bool) or per side (MarginInfo)."""
        if isinstance(margin, bool):
            margin = MarginInfo.all(margin)
        elif not isinstance(margin, MarginInfo):
            raise InvalidArgumentException("Margin must be a bool or a MarginInfo", details={"margin": repr(margin)})
        self._margin = margin
        self._surface.apply_margin(margin)

    @property
    def spacing(self) -> bool:
        return self._spacing

    def set_spacing(self, enabled: bool) -> None:
        self._spacing = bool(enabled)
        self._surface.apply_spacing(self._spacing)

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def snapshot(self) -> LayoutSnapshot:
        """Capture dimensions, cursor, templates and placements."""
        return LayoutSnapshot(
            columns=self._columns,
            rows=self._rows,
            cursor=self._cursor.position,
            column_widths=self._template.widths,
            column_expand_ratios=self._template.expand_ratios,
            margin=self._margin,
            spacing=self._spacing,
            placements=[
                PlacementInfo(item=repr(item), area=self._areas[item], alignment=self._alignments[item])
                for item in self._components
            ],
        )
