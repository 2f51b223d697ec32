"""Size units accepted for numeric column widths."""

from enum import Enum


class Unit(str, Enum):
    """CSS length units."""

    PIXELS = "px"
    POINTS = "pt"
    PICAS = "pc"
    EM = "em"
    REM = "rem"
    EX = "ex"
    MM = "mm"
    CM = "cm"
    INCH = "in"
    PERCENTAGE = "%"

    def format(self, value: float, precision: int = 6) -> str:
        """Render ``value`` followed by the unit symbol, e.g. ``10em`` or ``33.3333%``."""
        return f"{value:.{precision}g}{self.value}"
