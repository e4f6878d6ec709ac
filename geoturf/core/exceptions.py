"""Unified exception taxonomy.

Every geoturf exception inherits from ``GeoTurfError`` and carries
structured context fields (``stage``, ``code``) so callers composing
the algorithms can report failures consistently.

Taxonomy categories
-------------------
- ``ValidationError``:  invalid arguments or configuration.
- ``ContractError``:    a value of an unsupported type crossed a
                      module boundary (e.g. an unknown geometry).

The algorithms degrade silently on bad *data* (truncated polylines,
degenerate hulls, rings clipped away entirely).  Exceptions are only
raised for invalid *usage*.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging.
"""

from __future__ import annotations


class GeoTurfError(Exception):
    """Base exception for all geoturf errors.

    Attributes:
        message: Human-readable error description.
        stage: Component where the error occurred
            (e.g. ``"polyline"``, ``"antimeridian"``).
        code: Machine-readable error code (e.g. ``"POLYLINE_INVALID"``).
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ContractError):
            return "contract"
        if isinstance(self, ValidationError):
            return "validation"
        return "error"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(GeoTurfError):
    """Invalid argument or configuration value."""


class ContractError(GeoTurfError):
    """Unsupported value crossed a module boundary."""


# ---------------------------------------------------------------------------
# Concrete errors
# ---------------------------------------------------------------------------


class PolylineError(ValidationError):
    """Raised when the polyline codec is called with unusable arguments."""

    default_stage = "polyline"
    default_code = "POLYLINE_INVALID"


class EmptyGeometryError(ValidationError):
    """Raised when an operation needs at least one position but got none."""

    default_stage = "geometry"
    default_code = "GEOMETRY_EMPTY"


class GeometryTypeError(ContractError):
    """Raised when a geometry variant is not one the algorithms know."""

    default_stage = "geometry"
    default_code = "GEOMETRY_TYPE_UNSUPPORTED"
