"""Toolkit configuration loaded from environment variables.

All values have defaults matching the module-level constants, so the
algorithms work without any environment set.  Callers that want the
values to be operator-tunable load a ``GeoTurfConfig`` once and pass
its fields to the algorithm functions.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any numeric
    value is out of its valid range.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from geoturf.core.constants import (
    DEFAULT_POLYLINE_PRECISION,
    DEFAULT_SMOOTHING_ITERATIONS,
    MIN_RING_VERTICES,
)
from geoturf.core.exceptions import GeoTurfError


class ConfigValidationError(GeoTurfError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class GeoTurfConfig:
    """Immutable toolkit configuration.

    Attributes:
        polyline_precision: Scale factor for the encoded polyline codec
            (``1e5`` for the classic format, ``1e6`` for polyline6).
        smoothing_iterations: Default Chaikin smoothing passes.
        min_ring_vertices: Minimum vertex count (closing vertex included)
            for a clipped ring to survive.
    """

    polyline_precision: float = DEFAULT_POLYLINE_PRECISION
    smoothing_iterations: int = DEFAULT_SMOOTHING_ITERATIONS
    min_ring_vertices: int = MIN_RING_VERTICES

    @classmethod
    def from_env(cls) -> GeoTurfConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a numeric value is out of range.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``GEOTURF_POLYLINE_PRECISION=abc``).
        """
        config = cls(
            polyline_precision=float(
                os.getenv("GEOTURF_POLYLINE_PRECISION", str(DEFAULT_POLYLINE_PRECISION))
            ),
            smoothing_iterations=int(
                os.getenv("GEOTURF_SMOOTHING_ITERATIONS", str(DEFAULT_SMOOTHING_ITERATIONS))
            ),
            min_ring_vertices=int(os.getenv("GEOTURF_MIN_RING_VERTICES", str(MIN_RING_VERTICES))),
        )
        _validate(config)
        return config


def _validate(config: GeoTurfConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if not config.polyline_precision > 0:
        raise ConfigValidationError(
            "GEOTURF_POLYLINE_PRECISION",
            config.polyline_precision,
            "must be > 0",
        )

    if config.smoothing_iterations < 0:
        raise ConfigValidationError(
            "GEOTURF_SMOOTHING_ITERATIONS",
            config.smoothing_iterations,
            "must be >= 0",
        )

    if config.min_ring_vertices < MIN_RING_VERTICES:
        raise ConfigValidationError(
            "GEOTURF_MIN_RING_VERTICES",
            config.min_ring_vertices,
            f"must be >= {MIN_RING_VERTICES} (3 distinct vertices + closure)",
        )
