"""Grid layout models"""

from gridlayout.models.alignment import Alignment
from gridlayout.models.base_models import Area, LayoutSnapshot, MarginInfo, PlacementInfo
from gridlayout.models.units import Unit

__all__ = [
    "Alignment",
    "Area",
    "LayoutSnapshot",
    "MarginInfo",
    "PlacementInfo",
    "Unit",
]
