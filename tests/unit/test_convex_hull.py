"""Unit tests for monotone-chain convex hull construction.

Covers:
- Exact hull of a square with interior and edge points
- Closure, counter-clockwise orientation and containment (checked with Shapely)
- Collinear pruning and degenerate input
- Anti-meridian-spanning point sets
"""

from __future__ import annotations

import random

from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon as ShapelyPolygon

from geoturf.algorithms.convex_hull import _cross, convex_hull, convex_hull_polygon
from geoturf.models.geometry import Polygon
from geoturf.models.position import Position
from tests.conftest import ring


def _random_points(seed: int, count: int) -> list[Position]:
    rng = random.Random(seed)
    return [Position(rng.uniform(-60, 60), rng.uniform(-120, 120)) for _ in range(count)]


# ===========================================================================
# Basic hulls
# ===========================================================================


class TestConvexHullShape:
    """Exact hull results for hand-checked inputs."""

    def test_square_with_interior_and_edge_points(self) -> None:
        points = list(ring((0, 0), (10, 0), (10, 10), (0, 10), (5, 5), (5, 0)))
        assert convex_hull(points) == list(ring((0, 0), (10, 0), (10, 10), (0, 10), (0, 0)))

    def test_input_order_does_not_matter(self) -> None:
        points = list(ring((0, 0), (10, 0), (10, 10), (0, 10), (5, 5)))
        assert convex_hull(points) == convex_hull(list(reversed(points)))

    def test_triangle(self) -> None:
        points = list(ring((0, 0), (4, 0), (2, 3)))
        assert convex_hull(points) == list(ring((0, 0), (4, 0), (2, 3), (0, 0)))

    def test_hull_polygon_wraps_ring(self) -> None:
        points = list(ring((0, 0), (4, 0), (2, 3)))
        polygon = convex_hull_polygon(points)
        assert isinstance(polygon, Polygon)
        assert list(polygon.exterior) == convex_hull(points)
        assert polygon.interiors == ()


# ===========================================================================
# Hull properties
# ===========================================================================


class TestConvexHullProperties:
    """Closure, orientation, containment and collinearity."""

    def test_ring_is_closed(self) -> None:
        hull = convex_hull(_random_points(1, 50))
        assert hull[0] == hull[-1]

    def test_counter_clockwise(self) -> None:
        hull = convex_hull(_random_points(2, 50))
        shape = ShapelyPolygon([(p.x, p.y) for p in hull])
        assert shape.exterior.is_ccw

    def test_every_point_is_covered(self) -> None:
        points = _random_points(3, 200)
        hull = convex_hull(points)
        shape = ShapelyPolygon([(p.x, p.y) for p in hull])
        assert shape.is_valid
        for p in points:
            assert shape.buffer(1e-9).covers(ShapelyPoint(p.x, p.y))

    def test_no_three_consecutive_vertices_collinear(self) -> None:
        hull = convex_hull(_random_points(4, 100))
        vertices = hull[:-1]
        n = len(vertices)
        for i in range(n):
            assert _cross(vertices[i], vertices[(i + 1) % n], vertices[(i + 2) % n]) > 0

    def test_starts_at_smallest_lon_lat(self) -> None:
        points = _random_points(5, 30)
        hull = convex_hull(points)
        assert hull[0] == min(points, key=lambda p: (p.longitude, p.latitude))


# ===========================================================================
# Degenerate input
# ===========================================================================


class TestConvexHullDegenerate:
    """Inputs that cannot form a proper polygon."""

    def test_empty_input(self) -> None:
        assert convex_hull([]) == []

    def test_single_point_returned_unchanged(self) -> None:
        assert convex_hull([Position(1.0, 2.0)]) == [Position(1.0, 2.0)]

    def test_two_points(self) -> None:
        points = list(ring((0, 0), (3, 1)))
        assert convex_hull(points) == list(ring((0, 0), (3, 1), (0, 0)))

    def test_collinear_points_collapse_to_extremes(self) -> None:
        points = list(ring((1, 1), (0, 0), (2, 2), (3, 3)))
        assert convex_hull(points) == list(ring((0, 0), (3, 3), (0, 0)))

    def test_identical_points_collapse_to_one_vertex(self) -> None:
        assert convex_hull([Position(5.0, 5.0)] * 3) == [Position(5.0, 5.0)] * 3


# ===========================================================================
# Anti-meridian
# ===========================================================================


class TestConvexHullAntimeridian:
    """Point sets straddling the ±180° seam."""

    def test_hull_across_seam(self) -> None:
        points = list(ring((170, -10), (-170, -10), (-170, 10), (170, 10), (179, 0)))
        assert convex_hull(points) == list(
            ring((170, -10), (-170, -10), (-170, 10), (170, 10), (170, -10))
        )

    def test_seam_hull_longitudes_in_range(self) -> None:
        points = list(ring((175, 5), (-175, 5), (-178, -5), (178, -5), (180, 0)))
        hull = convex_hull(points)
        assert all(-180 < p.longitude <= 180 for p in hull)
        assert hull[0] == hull[-1]

    def test_vertex_at_minus_180_hulls_across_seam(self) -> None:
        points = list(ring((170, 0), (-180, 0), (175, 5)))
        assert convex_hull(points) == list(ring((170, 0), (180, 0), (175, 5), (170, 0)))

    def test_wide_non_spanning_set_is_not_wrapped(self) -> None:
        """A set wider than 180 degrees that is narrower unwrapped stays put."""
        points = list(ring((-100, 0), (0, 10), (100, 0), (0, -10)))
        hull = convex_hull(points)
        assert hull == list(ring((-100, 0), (0, -10), (100, 0), (0, 10), (-100, 0)))
