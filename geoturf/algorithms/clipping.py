"""Bounding box clipping (Sutherland-Hodgman).

Clips rings, lines and polygons against an axis-aligned box one
half-plane at a time, in edge-code order left, right, bottom, top.
Each pass feeds its output to the next; an empty pass ends the clip.

Every point is classified with ``edge_code`` before any intersection is
computed, and ``intersect`` is only reached when the classification of
two consecutive points differs.  A segment parallel to the tested edge
therefore never reaches the division in ``intersect``.

The box must not span the anti-meridian; ``antimeridian`` moves
geometries into the ``[0, 360)`` frame before clipping.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from geoturf.core.constants import (
    CLIP_EDGE_ORDER,
    EDGE_BOTTOM,
    EDGE_LEFT,
    EDGE_RIGHT,
    EDGE_TOP,
    MIN_RING_VERTICES,
)
from geoturf.models.geometry import Geometry, LineString, Point, Polygon, ensure_geometry
from geoturf.models.position import BoundingBox, Position

logger = logging.getLogger("geoturf.algorithms.clipping")


# ---------------------------------------------------------------------------
# Edge classification
# ---------------------------------------------------------------------------


def edge_code(position: Position, box: BoundingBox) -> int:
    """Classify ``position`` against the four half-planes of ``box``.

    Returns a 4-bit code: 1 left of the box, 2 right of it, 4 below,
    8 above.  Zero means inside or on the boundary.
    """
    code = 0
    if position.x < box.left:
        code |= EDGE_LEFT
    elif position.x > box.right:
        code |= EDGE_RIGHT
    if position.y < box.bottom:
        code |= EDGE_BOTTOM
    elif position.y > box.top:
        code |= EDGE_TOP
    return code


def intersect(a: Position, b: Position, edge: int, box: BoundingBox) -> Position:
    """Intersection of segment ``a -> b`` with the line carrying ``edge``.

    Only valid when ``a`` and ``b`` lie on opposite sides of that edge.

    Raises:
        ValueError: If ``edge`` is not one of the four edge bits.
    """
    if edge & EDGE_TOP:
        return Position.from_xy(a.x + (b.x - a.x) * (box.top - a.y) / (b.y - a.y), box.top)
    if edge & EDGE_BOTTOM:
        return Position.from_xy(a.x + (b.x - a.x) * (box.bottom - a.y) / (b.y - a.y), box.bottom)
    if edge & EDGE_RIGHT:
        return Position.from_xy(box.right, a.y + (b.y - a.y) * (box.right - a.x) / (b.x - a.x))
    if edge & EDGE_LEFT:
        return Position.from_xy(box.left, a.y + (b.y - a.y) * (box.left - a.x) / (b.x - a.x))
    msg = f"Unknown clip edge: {edge}"
    raise ValueError(msg)


# ---------------------------------------------------------------------------
# Sutherland-Hodgman
# ---------------------------------------------------------------------------


def clip_positions(
    positions: Sequence[Position],
    box: BoundingBox,
    *,
    close: bool,
) -> list[Position]:
    """Clip a position sequence against ``box``.

    Args:
        positions: Ring or line vertices.
        box: Non-spanning clip box.
        close: Treat the sequence as a ring, i.e. also clip the edge
            from the last point back to the first.

    Returns:
        The clipped vertices, with consecutive duplicates collapsed;
        empty if nothing lies inside the box.  No ring closure is
        applied here (see ``clip_ring``).
    """
    points = list(positions)
    for edge in CLIP_EDGE_ORDER:
        if not points:
            break
        result: list[Position] = []
        prev = points[-1] if close else points[0]
        prev_inside = not edge_code(prev, box) & edge

        for point in points:
            inside = not edge_code(point, box) & edge
            if inside != prev_inside:
                _append_distinct(result, intersect(prev, point, edge, box))
            if inside:
                _append_distinct(result, point)
            prev = point
            prev_inside = inside

        points = result
    return points


def clip_ring(
    ring: Sequence[Position],
    box: BoundingBox,
    *,
    min_ring_vertices: int = MIN_RING_VERTICES,
) -> list[Position]:
    """Clip a closed ring and repair its closure.

    ``min_ring_vertices`` is normally ``GeoTurfConfig.min_ring_vertices``.

    Returns:
        The clipped ring with first == last, or an empty list if fewer
        than ``min_ring_vertices`` positions remain.
    """
    clipped = clip_positions(ring, box, close=True)
    if not clipped:
        return []
    if clipped[0] != clipped[-1]:
        clipped.append(clipped[0])
    if len(clipped) < min_ring_vertices:
        return []
    return clipped


def clip_line(line: LineString, box: BoundingBox) -> LineString:
    """Clip an open line string; the result is not closed."""
    return LineString.of(clip_positions(line.positions, box, close=False))


def clip_polygon(
    polygon: Polygon,
    box: BoundingBox,
    *,
    min_ring_vertices: int = MIN_RING_VERTICES,
) -> Polygon:
    """Clip every ring of ``polygon`` independently.

    Degenerate rings are dropped.  If the exterior is clipped away the
    result is an empty polygon, whatever happens to the interiors.
    """
    if polygon.is_empty:
        return Polygon()
    exterior = clip_ring(polygon.exterior, box, min_ring_vertices=min_ring_vertices)
    if not exterior:
        logger.debug("Polygon clipped away | box=%s", box)
        return Polygon()

    interiors = [
        clipped
        for clipped in (
            clip_ring(ring, box, min_ring_vertices=min_ring_vertices)
            for ring in polygon.interiors
        )
        if clipped
    ]
    return Polygon.of(exterior, interiors)


def clip_geometry(geometry: Geometry, box: BoundingBox) -> Geometry:
    """Clip any geometry variant; points pass through unchanged.

    Raises:
        GeometryTypeError: If ``geometry`` is not a known variant.
    """
    geometry = ensure_geometry(geometry)
    if isinstance(geometry, Point):
        return geometry
    if isinstance(geometry, LineString):
        return clip_line(geometry, box)
    return clip_polygon(geometry, box)


def _append_distinct(result: list[Position], position: Position) -> None:
    """Append ``position`` unless it repeats the last emitted vertex.

    A vertex lying exactly on a clip edge is also the intersection of
    its neighbouring segment with that edge.
    """
    if not result or result[-1] != position:
        result.append(position)
