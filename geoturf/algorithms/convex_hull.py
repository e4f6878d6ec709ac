"""Convex hull construction (Andrew's monotone chain).

Builds the hull from one lexicographic sort plus a lower and an upper
chain pass, O(n log n).  Longitude is ``x`` and latitude is ``y``.

Point sets whose bounding box spans the anti-meridian are hulled in the
``[0, 360)`` frame and mapped back into ``(-180, 180]`` afterwards, so a
cluster straddling ±180° is not hulled "the long way round".
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from geoturf.models.geometry import Polygon
from geoturf.models.position import BoundingBox, Position
from geoturf.utils.longitude import normalize_longitude, to_positive_frame

logger = logging.getLogger("geoturf.algorithms.convex_hull")


def convex_hull(points: Iterable[Position]) -> list[Position]:
    """Compute the convex hull of a set of positions.

    Args:
        points: Unordered positions.

    Returns:
        The hull as a closed ring (first == last), counter-clockwise,
        starting at the lexicographically smallest ``(lon, lat)``
        vertex.  Collinear vertices are dropped, so all-collinear
        input collapses to its two extremes ``[a, b, a]``.  Fewer than
        two input points are returned unchanged.
    """
    items = list(points)
    if len(items) < 2:
        return items

    bbox = BoundingBox.from_positions(items, allow_spanning_antimeridian=True)
    wrapped = bbox.spans_antimeridian
    if wrapped:
        items = [p.with_longitude(to_positive_frame(p.longitude)) for p in items]

    ordered = sorted(items, key=lambda p: (p.x, p.y))
    lower = _chain(ordered)
    upper = _chain(reversed(ordered))

    # Each chain ends on the other's first point.
    hull = lower[:-1] + upper[:-1]
    if hull:
        hull.append(hull[0])

    if wrapped:
        hull = [p.with_longitude(normalize_longitude(p.longitude)) for p in hull]

    logger.debug(
        "Convex hull | points=%d | vertices=%d | antimeridian=%s",
        len(items),
        max(len(hull) - 1, 0),
        wrapped,
    )
    return hull


def convex_hull_polygon(points: Iterable[Position]) -> Polygon:
    """Compute the convex hull of ``points`` as a single-ring ``Polygon``."""
    return Polygon.of(convex_hull(points))


def _cross(o: Position, a: Position, b: Position) -> float:
    """Z component of ``(a - o) x (b - o)``; positive for a left turn."""
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def _chain(points: Iterable[Position]) -> list[Position]:
    stack: list[Position] = []
    for point in points:
        while len(stack) >= 2 and _cross(stack[-2], stack[-1], point) <= 0:
            stack.pop()
        stack.append(point)
    return stack
