"""Positions and bounding boxes.

A ``Position`` is a latitude/longitude pair in degrees.  Every planar
algorithm in the toolkit treats longitude as ``x`` and latitude as
``y``.

A ``BoundingBox`` is described by its south-westerly and north-easterly
corners.  When built with ``allow_spanning_antimeridian=True`` the box
may cross the ±180° seam, in which case its west edge is numerically
greater than its east edge.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace

from geoturf.core.constants import ANTIMERIDIAN, MAX_LONGITUDE_SPAN
from geoturf.core.exceptions import EmptyGeometryError
from geoturf.utils.longitude import normalize_longitude, to_positive_frame, wrap


@dataclass(frozen=True, slots=True)
class Position:
    """A single coordinate.

    Attributes:
        latitude: Latitude in degrees.
        longitude: Longitude in degrees.  Conventionally in
            ``[-180, 180]``; intermediate results may use ``[0, 360)``.
    """

    latitude: float
    longitude: float

    @property
    def x(self) -> float:
        return self.longitude

    @property
    def y(self) -> float:
        return self.latitude

    @classmethod
    def from_xy(cls, x: float, y: float) -> Position:
        """Build a position from planar ``(x, y)`` = ``(lon, lat)``."""
        return cls(latitude=y, longitude=x)

    def with_longitude(self, longitude: float) -> Position:
        return replace(self, longitude=longitude)


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """An axis-aligned latitude/longitude box.

    Attributes:
        south: South-westerly latitude.
        west: South-westerly longitude.
        north: North-easterly latitude.
        east: North-easterly longitude.
    """

    south: float
    west: float
    north: float
    east: float

    @property
    def left(self) -> float:
        return self.west

    @property
    def right(self) -> float:
        return self.east

    @property
    def bottom(self) -> float:
        return self.south

    @property
    def top(self) -> float:
        return self.north

    @property
    def spans_antimeridian(self) -> bool:
        """Whether the box crosses the ±180° seam (west edge east of east edge)."""
        return self.west > self.east

    @classmethod
    def from_positions(
        cls,
        positions: Iterable[Position],
        *,
        allow_spanning_antimeridian: bool = False,
    ) -> BoundingBox:
        """Compute the bounding box of a set of positions.

        With ``allow_spanning_antimeridian`` a set whose raw longitude
        extent exceeds 180° is re-measured in the ``[0, 360)`` frame.  If
        that frame is narrower, the box is taken from it: the west edge is
        normalized back into ``(-180, 180]`` and the east edge into
        ``[-180, 180)``, so ``west > east`` even when the eastern extreme
        is exactly -180.

        Raises:
            EmptyGeometryError: If ``positions`` is empty.
        """
        items = list(positions)
        if not items:
            msg = "Cannot compute a bounding box of zero positions"
            raise EmptyGeometryError(msg)

        lats = [p.latitude for p in items]
        lons = [p.longitude for p in items]
        south, north = min(lats), max(lats)
        west, east = min(lons), max(lons)

        if allow_spanning_antimeridian and east - west > MAX_LONGITUDE_SPAN:
            shifted = [to_positive_frame(lon) for lon in lons]
            shifted_west, shifted_east = min(shifted), max(shifted)
            if shifted_east - shifted_west < east - west:
                west = normalize_longitude(shifted_west)
                # East edge in [-180, 180) so a vertex at -180 keeps west > east.
                east = wrap(shifted_east, -ANTIMERIDIAN, ANTIMERIDIAN)

        return cls(south=south, west=west, north=north, east=east)

    def contains(self, position: Position, *, ignore_boundary: bool = True) -> bool:
        """Whether ``position`` lies inside the box.

        With ``ignore_boundary`` (the default) points on an edge are
        outside; otherwise edges count as inside.
        """
        if ignore_boundary:
            return (
                self.south < position.latitude < self.north
                and self.west < position.longitude < self.east
            )
        return (
            self.south <= position.latitude <= self.north
            and self.west <= position.longitude <= self.east
        )
