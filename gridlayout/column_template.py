"""Column width bookkeeping: explicit widths and legacy expand ratios."""

from numbers import Real

from gridlayout.exceptions import InvalidArgumentException
from gridlayout.models.units import Unit


class ColumnTemplate:
    """One width entry per column.

    Widths are literal template strings (``auto``, ``120px``, ``25%``...).
    Expand ratios are an alternative way of setting widths: every column
    with a ratio gets its proportional share of 100%, expressed as a
    percentage width. The ratio list only exists once a ratio was set.
    """

    def __init__(
        self,
        columns: int,
        default_width: str = "auto",
        preserve_widths: bool = True,
        precision: int = 6,
    ):
        self._default_width = default_width
        self._preserve_widths = preserve_widths
        self._precision = precision
        self._widths: list[str] = [default_width] * columns
        self._ratios: list[float | None] | None = None

    def __len__(self) -> int:
        return len(self._widths)

    @property
    def widths(self) -> list[str]:
        return list(self._widths)

    @property
    def expand_ratios(self) -> list[float | None] | None:
        return None if self._ratios is None else list(self._ratios)

    def resize(self, columns: int) -> None:
        """Match the template to a new column count.

        With ``preserve_widths`` the widths of the columns kept by the resize
        survive and new columns get the default width; otherwise every
        column is reset to the default width.
        """
        kept = min(columns, len(self._widths))
        if self._preserve_widths:
            self._widths = self._widths[:kept] + [self._default_width] * (columns - kept)
        else:
            self._widths = [self._default_width] * columns

        if self._ratios is not None:
            self._ratios = self._ratios[:kept] + [None] * (columns - kept)
            if self._preserve_widths:
                self._project_ratios()

    def set_width(self, index: int, width: str | float, unit: Unit | None = None) -> str:
        """Set the width of a column.

        Args:
            index: 1-based column index
            width: Literal template string, or a number combined with ``unit``
            unit: Unit of a numeric width

        Returns:
            The stored width string

        Raises:
            InvalidArgumentException: Bad index or width
        """
        position = self._position(index)

        if isinstance(width, str):
            if unit is not None:
                raise InvalidArgumentException("A unit can only be given with a numeric width", details={"width": width})
            spec = width.strip()
            if not spec:
                raise InvalidArgumentException("Column width must not be empty", details={"index": index})
        else:
            if unit is None:
                raise InvalidArgumentException("A numeric column width needs a unit", details={"width": width})
            if isinstance(width, bool) or not isinstance(width, Real) or not width >= 0:
                raise InvalidArgumentException(
                    "Column width must be a non-negative number", details={"index": index, "width": width}
                )
            try:
                unit = Unit(unit)
            except ValueError as e:
                raise InvalidArgumentException(f"Unknown unit {unit!r}", details={"unit": str(unit)}) from e
            spec = unit.format(float(width), self._precision)

        self._widths[position] = spec
        return spec

    def set_expand_ratio(self, index: int, ratio: float) -> list[str]:
        """Store an expand ratio and recompute the ratio based widths.

        Args:
            index: 1-based column index
            ratio: Non-negative relative share of the width

        Returns:
            The resulting widths

        Raises:
            InvalidArgumentException: Bad index or ratio
        """
        position = self._position(index)
        if isinstance(ratio, bool) or not isinstance(ratio, Real) or not ratio >= 0:
            raise InvalidArgumentException(
                "Expand ratio must be a non-negative number", details={"index": index, "ratio": ratio}
            )

        if self._ratios is None:
            self._ratios = [None] * len(self._widths)
        self._ratios[position] = float(ratio)
        self._project_ratios()
        return self.widths

    def get_expand_ratio(self, index: int) -> float:
        position = self._position(index)
        if self._ratios is None or self._ratios[position] is None:
            return 0.0
        return self._ratios[position]

    def restore(self, widths: list[str], ratios: list[float | None] | None) -> None:
        """Put back widths and ratios previously read from ``widths`` and ``expand_ratios``."""
        self._widths = list(widths)
        self._ratios = None if ratios is None else list(ratios)

    def _position(self, index: int) -> int:
        if isinstance(index, bool) or not isinstance(index, int) or not 1 <= index <= len(self._widths):
            raise InvalidArgumentException(
                f"Column index must be between 1 and {len(self._widths)}",
                details={"index": index, "columns": len(self._widths)},
            )
        return index - 1

    def _project_ratios(self) -> None:
        if self._ratios is None:
            return
        total = sum(ratio for ratio in self._ratios if ratio is not None)
        for position, ratio in enumerate(self._ratios):
            if ratio is None:
                continue
            if total > 0:
                self._widths[position] = Unit.PERCENTAGE.format(ratio / total * 100, self._precision)
            else:
                # Nothing to share out
                self._widths[position] = self._default_width
