"""Data models.

Defines the value types used throughout the toolkit:
- Position / BoundingBox: coordinates and seam-aware boxes
- Point / LineString / Polygon: the geometry union
- Single / Multi / Collection: geometry containers
"""

from geoturf.models.geometry import (
    Collection,
    Geometry,
    GeometryObject,
    LineString,
    Multi,
    Point,
    Polygon,
    Single,
    ensure_geometry,
)
from geoturf.models.position import BoundingBox, Position

__all__ = [
    "BoundingBox",
    "Collection",
    "Geometry",
    "GeometryObject",
    "LineString",
    "Multi",
    "Point",
    "Polygon",
    "Position",
    "Single",
    "ensure_geometry",
]
