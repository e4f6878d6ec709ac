"""Geometry variants consumed and produced by the algorithms.

``Geometry`` is a closed union of ``Point``, ``LineString`` and
``Polygon``.  ``GeometryObject`` wraps geometries as a ``Single``, a
``Multi`` or a nested ``Collection``.  All values are immutable; every
algorithm returns newly built instances.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Literal, TypeAlias

from geoturf.core.exceptions import GeometryTypeError
from geoturf.models.position import Position


@dataclass(frozen=True, slots=True)
class Point:
    """A single position."""

    position: Position

    kind: Literal["point"] = field(default="point", init=False, repr=False)

    @property
    def positions(self) -> tuple[Position, ...]:
        return (self.position,)


@dataclass(frozen=True, slots=True)
class LineString:
    """An open sequence of positions."""

    positions: tuple[Position, ...] = ()

    kind: Literal["line_string"] = field(default="line_string", init=False, repr=False)

    @classmethod
    def of(cls, positions: Iterable[Position]) -> LineString:
        return cls(positions=tuple(positions))


@dataclass(frozen=True, slots=True)
class Polygon:
    """An exterior ring followed by zero or more interior rings (holes).

    A polygon whose exterior was clipped away has no rings at all;
    ``is_empty`` reports this so callers can drop it.
    """

    rings: tuple[tuple[Position, ...], ...] = ()

    kind: Literal["polygon"] = field(default="polygon", init=False, repr=False)

    @classmethod
    def of(
        cls,
        exterior: Iterable[Position],
        interiors: Iterable[Iterable[Position]] = (),
    ) -> Polygon:
        return cls(rings=(tuple(exterior), *(tuple(ring) for ring in interiors)))

    @property
    def exterior(self) -> tuple[Position, ...]:
        return self.rings[0] if self.rings else ()

    @property
    def interiors(self) -> tuple[tuple[Position, ...], ...]:
        return self.rings[1:]

    @property
    def positions(self) -> tuple[Position, ...]:
        return tuple(p for ring in self.rings for p in ring)

    @property
    def is_empty(self) -> bool:
        return not self.exterior


Geometry: TypeAlias = Point | LineString | Polygon


# ---------------------------------------------------------------------------
# Geometry containers
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Single:
    """Exactly one geometry."""

    geometry: Geometry

    @property
    def geometries(self) -> tuple[Geometry, ...]:
        return (self.geometry,)


@dataclass(frozen=True, slots=True)
class Multi:
    """Several geometries treated as one object (e.g. the two halves of a split)."""

    members: tuple[Geometry, ...] = ()

    @property
    def geometries(self) -> tuple[Geometry, ...]:
        return self.members


@dataclass(frozen=True, slots=True)
class Collection:
    """A nested collection of geometry objects."""

    objects: tuple[GeometryObject, ...] = ()

    @property
    def geometries(self) -> tuple[Geometry, ...]:
        return tuple(g for obj in self.objects for g in obj.geometries)


GeometryObject: TypeAlias = Single | Multi | Collection


def ensure_geometry(value: object) -> Geometry:
    """Return ``value`` if it is a known geometry variant.

    Raises:
        GeometryTypeError: For anything that is not a Point, LineString
            or Polygon.
    """
    if isinstance(value, Point | LineString | Polygon):
        return value
    msg = f"Unsupported geometry type: {type(value).__name__}"
    raise GeometryTypeError(msg)
