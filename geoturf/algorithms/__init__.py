"""Geometry algorithms.

- polyline: encoded polyline codec
- convex_hull: Andrew's monotone chain hull
- clipping: Sutherland-Hodgman bounding box clipping
- antimeridian: seam detection and geometry splitting
- smoothing: Chaikin polygon smoothing
"""

from geoturf.algorithms.antimeridian import split_geometry, split_geometry_object
from geoturf.algorithms.clipping import (
    clip_geometry,
    clip_line,
    clip_polygon,
    clip_positions,
    clip_ring,
    edge_code,
)
from geoturf.algorithms.convex_hull import convex_hull, convex_hull_polygon
from geoturf.algorithms.polyline import (
    decode_line_string,
    decode_polyline,
    encode_line_string,
    encode_polyline,
)
from geoturf.algorithms.smoothing import smooth_polygon

__all__ = [
    "clip_geometry",
    "clip_line",
    "clip_polygon",
    "clip_positions",
    "clip_ring",
    "convex_hull",
    "convex_hull_polygon",
    "decode_line_string",
    "decode_polyline",
    "edge_code",
    "encode_line_string",
    "encode_polyline",
    "smooth_polygon",
    "split_geometry",
    "split_geometry_object",
]
