"""Core domain primitives for the outline map service."""

from .models import (
    BoundingRegion,
    LatLng,
    LayerPhase,
    LayerSnapshot,
    Location,
    OutlineNode,
)
from .exceptions import MapboxError, OutlineMapError, TreeFormatError

__all__ = [
    "BoundingRegion",
    "LatLng",
    "LayerPhase",
    "LayerSnapshot",
    "Location",
    "OutlineNode",
    "MapboxError",
    "OutlineMapError",
    "TreeFormatError",
]
