"""GeoTurf geometry toolkit.

Pure computational-geometry algorithms over latitude/longitude
coordinate sequences: the encoded polyline codec, monotone-chain
convex hulls, Sutherland-Hodgman bounding box clipping, and
anti-meridian splitting of points, lines and polygons.
"""

__version__ = "0.1.0"
