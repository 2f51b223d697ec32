"""Grid placement engine for laying out components on a column x row grid."""

from importlib.metadata import PackageNotFoundError, version

from gridlayout.exceptions import (
    ErrorCode,
    GridLayoutException,
    InvalidArgumentException,
    OutOfBoundsException,
    OverlapsException,
    SurfaceException,
    SurfaceRejectedException,
)
from gridlayout.grid_layout import GridLayout
from gridlayout.models import Alignment, Area, LayoutSnapshot, MarginInfo, Unit
from gridlayout.state_managers import GridLayoutManager
from gridlayout.surfaces import InMemorySurface

try:
    __version__ = version("gridlayout")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "Alignment",
    "Area",
    "ErrorCode",
    "GridLayout",
    "GridLayoutException",
    "GridLayoutManager",
    "InMemorySurface",
    "InvalidArgumentException",
    "LayoutSnapshot",
    "MarginInfo",
    "OutOfBoundsException",
    "OverlapsException",
    "SurfaceException",
    "SurfaceRejectedException",
    "Unit",
]
