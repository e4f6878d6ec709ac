"""Longitude wrapping helpers shared by the hull and anti-meridian code.

Wrapping is plain modular arithmetic: no range validation is done, so
out-of-range inputs (e.g. ``540.0``) are folded like any other value.
"""

from __future__ import annotations

from geoturf.core.constants import ANTIMERIDIAN, FULL_TURN


def wrap(value: float, minimum: float, maximum: float) -> float:
    """Wrap ``value`` into the half-open interval ``[minimum, maximum)``.

    Examples:
        >>> wrap(-170.0, 0.0, 360.0)
        190.0
        >>> wrap(190.0, -180.0, 180.0)
        -170.0
    """
    return (value - minimum) % (maximum - minimum) + minimum


def normalize_longitude(lon: float) -> float:
    """Map a longitude into ``(-180, 180]``."""
    wrapped = wrap(lon, -ANTIMERIDIAN, ANTIMERIDIAN)
    if wrapped == -ANTIMERIDIAN:
        return ANTIMERIDIAN
    return wrapped


def to_positive_frame(lon: float) -> float:
    """Map a longitude into the seam-free ``[0, 360)`` frame."""
    return wrap(lon, 0.0, FULL_TURN)
