"""Polygon smoothing using Chaikin's corner-cutting algorithm.

Each pass replaces every ring edge ``(p0, p1)`` with the two points at
one and three quarters along it, then closes the ring again.  Repeated
passes converge towards a quadratic B-spline of the original outline.
Smoothing can produce degenerate or self-intersecting rings for
pathological input; callers that need valid output should check it
(e.g. with Shapely via ``geoturf.models.interop``).
"""

from __future__ import annotations

from collections.abc import Sequence

from geoturf.core.constants import DEFAULT_SMOOTHING_ITERATIONS
from geoturf.core.exceptions import ValidationError
from geoturf.models.geometry import Polygon
from geoturf.models.position import Position


def smooth_polygon(polygon: Polygon, iterations: int = DEFAULT_SMOOTHING_ITERATIONS) -> Polygon:
    """Smooth every ring of ``polygon``.

    Args:
        polygon: Polygon with closed rings.
        iterations: Number of Chaikin passes; ``0`` returns an equal
            polygon.  Callers loading ``GeoTurfConfig`` pass its
            ``smoothing_iterations``.

    Raises:
        ValidationError: If ``iterations`` is negative.
    """
    if iterations < 0:
        msg = f"Smoothing iterations must be >= 0, got {iterations}"
        raise ValidationError(msg, stage="smoothing", code="SMOOTHING_INVALID")

    rings = polygon.rings
    for _ in range(iterations):
        rings = tuple(_smooth_ring(ring) for ring in rings)
    return Polygon(rings)


def _smooth_ring(ring: Sequence[Position]) -> tuple[Position, ...]:
    if len(ring) < 2:
        return tuple(ring)
    out: list[Position] = []
    for p0, p1 in zip(ring, ring[1:]):
        out.append(_lerp(p0, p1, 0.25))
        out.append(_lerp(p0, p1, 0.75))
    out.append(out[0])
    return tuple(out)


def _lerp(p0: Position, p1: Position, t: float) -> Position:
    return Position(
        latitude=(1 - t) * p0.latitude + t * p1.latitude,
        longitude=(1 - t) * p0.longitude + t * p1.longitude,
    )
