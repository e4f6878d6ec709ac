"""Shared constants: single source of truth.

Centralises the encoded polyline parameters, clipping edge codes and
longitude frames used across the algorithm modules.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Encoded polyline format
# ---------------------------------------------------------------------------

DEFAULT_POLYLINE_PRECISION: float = 1e5
"""Default coordinate resolution: 1e-5 degrees per integer step."""

POLYLINE_CHAR_OFFSET: int = 63
"""Added to each 5-bit chunk so the output stays in printable ASCII."""

POLYLINE_CHUNK_BITS: int = 5
POLYLINE_CHUNK_MASK: int = 0x1F
POLYLINE_CONTINUATION_BIT: int = 0x20

# ---------------------------------------------------------------------------
# Bounding box edge codes (bit per half-plane)
# ---------------------------------------------------------------------------

EDGE_LEFT: int = 1
EDGE_RIGHT: int = 2
EDGE_BOTTOM: int = 4
EDGE_TOP: int = 8

CLIP_EDGE_ORDER: tuple[int, ...] = (EDGE_LEFT, EDGE_RIGHT, EDGE_BOTTOM, EDGE_TOP)
"""Order in which the clipper processes the four half-planes."""

# Minimum vertices for a renderable ring (3 distinct + closing = 4)
MIN_RING_VERTICES: int = 4

# ---------------------------------------------------------------------------
# Longitude frames
# ---------------------------------------------------------------------------

ANTIMERIDIAN: float = 180.0
FULL_TURN: float = 360.0
MAX_LONGITUDE_SPAN: float = 180.0
"""Raw longitude widths above this are re-measured across the seam."""

DEFAULT_SMOOTHING_ITERATIONS: int = 3
