"""Custom exceptions for the grid layout engine."""

from collections.abc import Hashable
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from gridlayout.models.base_models import Area


class ErrorCode(str, Enum):
    """Error codes for structured error reporting."""

    # Generic errors
    GRID_LAYOUT_ERROR = "GRID_LAYOUT_ERROR"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"

    # Placement errors
    OUT_OF_BOUNDS = "OUT_OF_BOUNDS"
    OVERLAPS = "OVERLAPS"

    # Visual surface errors
    SURFACE_ERROR = "SURFACE_ERROR"
    SURFACE_REJECTED = "SURFACE_REJECTED"


class GridLayoutException(Exception):
    """Base exception for grid layout errors.

    All custom exceptions should inherit from this class so callers can
    catch every layout failure with a single except clause.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.GRID_LAYOUT_ERROR,
        details: dict[str, Any] | None = None,
    ):
        """Initialize grid layout exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)


class InvalidArgumentException(GridLayoutException):
    """Malformed input: null item, bad dimension, inverted corners, unknown item."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, code=ErrorCode.INVALID_ARGUMENT, details=details)


class OutOfBoundsException(GridLayoutException):
    """An area, or a shrink operation, would fall outside the grid bounds."""

    def __init__(self, message: str, area: "Area", details: dict[str, Any] | None = None):
        self.area = area
        super().__init__(
            message,
            code=ErrorCode.OUT_OF_BOUNDS,
            details={"area": area.as_tuple(), **(details or {})},
        )


class OverlapsException(GridLayoutException):
    """A requested area intersects an existing placement.

    ``area`` and ``item`` describe the existing placement that conflicts,
    not the rejected request.
    """

    def __init__(
        self,
        message: str,
        area: "Area",
        item: Hashable,
        details: dict[str, Any] | None = None,
    ):
        self.area = area
        self.item = item
        super().__init__(
            message,
            code=ErrorCode.OVERLAPS,
            details={"area": area.as_tuple(), "item": repr(item), **(details or {})},
        )


class SurfaceException(GridLayoutException):
    """Visual surface errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.SURFACE_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, details)


class SurfaceRejectedException(SurfaceException):
    """The visual surface refused to attach an item."""

    def __init__(self, message: str = "Visual surface rejected the item", details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.SURFACE_REJECTED,
            details=details,
        )
