"""Encoded polyline codec.

Compresses a sequence of positions into a printable ASCII string and
back.  Each coordinate is scaled by ``precision`` and rounded to an
integer; consecutive points are stored as deltas, zig-zag mapped to
unsigned values, and emitted five bits at a time (low bits first) with
``0x20`` as the continuation flag and ``63`` added to every chunk.

Decoding is permissive: a truncated string ends the stream at the last
complete coordinate instead of raising.

Round-trip laws (same precision):
- ``decode_polyline(encode_polyline(P)) == P`` for positions representable
  at the codec's resolution.
- ``encode_polyline(decode_polyline(S)) == S`` for strings produced by
  this encoder.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from geoturf.core.constants import (
    DEFAULT_POLYLINE_PRECISION,
    POLYLINE_CHAR_OFFSET,
    POLYLINE_CHUNK_BITS,
    POLYLINE_CHUNK_MASK,
    POLYLINE_CONTINUATION_BIT,
)
from geoturf.core.exceptions import PolylineError
from geoturf.models.geometry import LineString
from geoturf.models.position import Position

logger = logging.getLogger("geoturf.algorithms.polyline")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def decode_polyline(
    text: str | bytes,
    precision: float = DEFAULT_POLYLINE_PRECISION,
) -> list[Position]:
    """Decode an encoded polyline string into positions.

    Args:
        text: The encoded polyline.  A single trailing NUL terminator
            is ignored.
        precision: Scale factor the string was encoded with, usually
            ``GeoTurfConfig.polyline_precision``.

    Returns:
        One ``Position`` per complete coordinate pair, in order.  An
        empty string yields an empty list.

    Raises:
        PolylineError: If ``precision`` is not positive.
    """
    _validate_precision(precision)
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    if data.endswith(b"\x00"):
        data = data[:-1]

    length = len(data)
    idx = 0
    latitude = 0
    longitude = 0
    positions: list[Position] = []

    while idx < length:
        delta_lat, idx = _decode_value(data, idx)
        delta_lon, idx = _decode_value(data, idx)
        if delta_lat is None or delta_lon is None:
            logger.debug(
                "Polyline truncated | length=%d | decoded=%d",
                length,
                len(positions),
            )
            break
        latitude += delta_lat
        longitude += delta_lon
        positions.append(Position(latitude=latitude / precision, longitude=longitude / precision))

    return positions


def encode_polyline(
    positions: Iterable[Position],
    precision: float = DEFAULT_POLYLINE_PRECISION,
) -> str:
    """Encode positions into an encoded polyline string.

    Args:
        positions: Positions in path order.
        precision: Scale factor (``1e5`` for the classic format);
            callers loading ``GeoTurfConfig`` pass its
            ``polyline_precision``.

    Returns:
        The encoded string; empty for no positions.

    Raises:
        PolylineError: If ``precision`` is not positive or a coordinate
            is not finite.
    """
    _validate_precision(precision)
    prev_lat = 0
    prev_lon = 0
    chunks: list[str] = []

    for index, position in enumerate(positions):
        if not (math.isfinite(position.latitude) and math.isfinite(position.longitude)):
            msg = f"Cannot encode non-finite coordinate at index {index}: {position!r}"
            raise PolylineError(msg)
        int_lat = _round_half_away(position.latitude * precision)
        int_lon = _round_half_away(position.longitude * precision)
        chunks.append(_encode_value(int_lat - prev_lat))
        chunks.append(_encode_value(int_lon - prev_lon))
        prev_lat, prev_lon = int_lat, int_lon

    return "".join(chunks)


def decode_line_string(
    text: str | bytes,
    precision: float = DEFAULT_POLYLINE_PRECISION,
) -> LineString:
    """Decode an encoded polyline directly into a ``LineString``."""
    return LineString.of(decode_polyline(text, precision))


def encode_line_string(
    line: LineString,
    precision: float = DEFAULT_POLYLINE_PRECISION,
) -> str:
    """Encode the positions of a ``LineString``."""
    return encode_polyline(line.positions, precision)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _decode_value(data: bytes, idx: int) -> tuple[int | None, int]:
    """Read one zig-zag encoded value starting at ``idx``.

    Returns ``(None, len(data))`` if the buffer ends before a chunk
    with a clear continuation bit is read.
    """
    result = 0
    shift = 0
    while True:
        if idx >= len(data):
            return None, len(data)
        digit = data[idx] - POLYLINE_CHAR_OFFSET
        idx += 1
        result |= (digit & POLYLINE_CHUNK_MASK) << shift
        shift += POLYLINE_CHUNK_BITS
        if digit < POLYLINE_CONTINUATION_BIT:
            break
    delta = ~(result >> 1) if result & 1 else result >> 1
    return delta, idx


def _encode_value(value: int) -> str:
    """Zig-zag encode ``value`` and emit it as 5-bit chunks."""
    remaining = ~(value << 1) if value < 0 else value << 1
    out: list[str] = []
    while True:
        chunk = remaining & POLYLINE_CHUNK_MASK
        remaining >>= POLYLINE_CHUNK_BITS
        if remaining:
            chunk |= POLYLINE_CONTINUATION_BIT
        out.append(chr(chunk + POLYLINE_CHAR_OFFSET))
        if not remaining:
            return "".join(out)


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    magnitude = abs(value)
    whole = math.floor(magnitude)
    # magnitude - whole is exact in floating point; magnitude + 0.5 is not.
    if magnitude - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, value))


def _validate_precision(precision: float) -> None:
    if not precision > 0:
        msg = f"Polyline precision must be > 0, got {precision!r}"
        raise PolylineError(msg)
