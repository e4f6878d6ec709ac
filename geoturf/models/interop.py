"""Conversion between geoturf geometries and Shapely geometries.

Shapely uses planar ``(x, y)`` = ``(lon, lat)`` ordering.  Callers use
these helpers when they need Shapely's validity, containment or area
operations on a result produced by the geoturf algorithms.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from geoturf.core.exceptions import GeometryTypeError
from geoturf.models.geometry import Geometry, LineString, Point, Polygon, ensure_geometry
from geoturf.models.position import Position

if TYPE_CHECKING:
    from shapely.geometry.base import BaseGeometry


def to_shapely(geometry: Geometry) -> BaseGeometry:
    """Convert a geoturf geometry to the equivalent Shapely geometry.

    An empty polygon (exterior clipped away) becomes an empty Shapely
    polygon.

    Raises:
        GeometryTypeError: If ``geometry`` is not a known variant.
    """
    from shapely.geometry import LineString as ShapelyLineString
    from shapely.geometry import Point as ShapelyPoint
    from shapely.geometry import Polygon as ShapelyPolygon

    geometry = ensure_geometry(geometry)
    if isinstance(geometry, Point):
        return ShapelyPoint(geometry.position.x, geometry.position.y)
    if isinstance(geometry, LineString):
        return ShapelyLineString([(p.x, p.y) for p in geometry.positions])
    if geometry.is_empty:
        return ShapelyPolygon()
    return ShapelyPolygon(
        [(p.x, p.y) for p in geometry.exterior],
        holes=[[(p.x, p.y) for p in ring] for ring in geometry.interiors] or None,
    )


def from_shapely(shape: BaseGeometry) -> Geometry:
    """Convert a Shapely Point, LineString or Polygon to a geoturf geometry.

    Raises:
        GeometryTypeError: For any other Shapely geometry type
            (multi-part geometries and collections included).
    """
    geom_type = shape.geom_type
    if geom_type == "Point":
        return Point(Position.from_xy(shape.x, shape.y))
    if geom_type == "LineString":
        return LineString.of(Position.from_xy(x, y) for x, y, *_ in shape.coords)
    if geom_type == "Polygon":
        if shape.is_empty:
            return Polygon()
        return Polygon.of(
            (Position.from_xy(x, y) for x, y, *_ in shape.exterior.coords),
            [[Position.from_xy(x, y) for x, y, *_ in ring.coords] for ring in shape.interiors],
        )
    msg = f"Unsupported Shapely geometry type: {geom_type}"
    raise GeometryTypeError(msg)
