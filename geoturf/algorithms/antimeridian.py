"""Anti-meridian splitting.

Renderers and many GIS tools cannot draw a line or ring that jumps
across the ±180° seam.  ``split_geometry`` detects seam-spanning
geometries and breaks them into an easterly part (west edge up to
+180°) and a westerly part (-180° up to the east edge):

1. Compute a seam-aware bounding box; return ``Single`` if it does not
   span the anti-meridian.
2. Move every longitude into the ``[0, 360)`` frame.
3. Clip against the easterly box ``[west, 180]`` and the westerly box
   ``[180, east + 360]``.
4. Move the westerly part back into ``[-180, 180)``.

Both halves are always returned, even when one clips to nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from geoturf.algorithms.clipping import clip_geometry
from geoturf.core.constants import ANTIMERIDIAN
from geoturf.core.exceptions import GeometryTypeError
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
from geoturf.models.position import BoundingBox
from geoturf.utils.longitude import to_positive_frame, wrap

logger = logging.getLogger("geoturf.algorithms.antimeridian")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def split_geometry(geometry: Geometry) -> GeometryObject:
    """Split ``geometry`` at the anti-meridian if it crosses it.

    Returns:
        ``Single(geometry)`` when no split is needed, otherwise
        ``Multi((easterly, westerly))``.  Either half may be empty
        (an empty line or a polygon without rings); callers decide
        whether to drop it.

    Raises:
        GeometryTypeError: If ``geometry`` is not a known variant.
    """
    geometry = ensure_geometry(geometry)
    positions = geometry.positions
    if not positions:
        return Single(geometry)

    bbox = BoundingBox.from_positions(positions, allow_spanning_antimeridian=True)
    if not bbox.spans_antimeridian:
        return Single(geometry)

    normalized = _map_longitudes(geometry, to_positive_frame)

    # West edge is already positive when the box spans the seam.
    easterly_box = BoundingBox(south=bbox.south, west=bbox.west, north=bbox.north, east=ANTIMERIDIAN)
    westerly_box = BoundingBox(
        south=bbox.south,
        west=ANTIMERIDIAN,
        north=bbox.north,
        east=to_positive_frame(bbox.east),
    )

    easterly = clip_geometry(normalized, easterly_box)
    westerly = _map_longitudes(
        clip_geometry(normalized, westerly_box),
        lambda lon: wrap(lon, -ANTIMERIDIAN, ANTIMERIDIAN),
    )

    logger.debug(
        "Antimeridian split | kind=%s | west=%.4f | east=%.4f",
        geometry.kind,
        bbox.west,
        bbox.east,
    )
    return Multi((easterly, westerly))


def split_geometry_object(obj: GeometryObject) -> GeometryObject:
    """Apply ``split_geometry`` to every geometry inside ``obj``.

    A ``Single`` yields whatever ``split_geometry`` returns.  A ``Multi``
    keeps its shape with split members flattened in place.  A
    ``Collection`` is processed recursively.
    """
    if isinstance(obj, Single):
        return split_geometry(obj.geometry)
    if isinstance(obj, Multi):
        return Multi(
            tuple(part for member in obj.members for part in split_geometry(member).geometries)
        )
    if isinstance(obj, Collection):
        return Collection(tuple(split_geometry_object(child) for child in obj.objects))
    msg = f"Unsupported geometry object: {type(obj).__name__}"
    raise GeometryTypeError(msg)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _map_longitudes(geometry: Geometry, fn: Callable[[float], float]) -> Geometry:
    """Return a copy of ``geometry`` with ``fn`` applied to every longitude."""
    if isinstance(geometry, Point):
        return geometry
    if isinstance(geometry, LineString):
        return LineString.of(p.with_longitude(fn(p.longitude)) for p in geometry.positions)
    return Polygon(
        tuple(tuple(p.with_longitude(fn(p.longitude)) for p in ring) for ring in geometry.rings)
    )
