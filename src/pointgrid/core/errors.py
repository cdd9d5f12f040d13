"""Exception taxonomy for the geometry primitives.

Every error raised by ``pointgrid`` inherits from ``GeometryError`` and
carries a stable machine-readable ``code``. Errors also subclass the
closest builtin so callers can catch them generically (``ValueError``,
``TypeError``, ``LookupError``...).

Categories
----------
- Construction errors (``DimensionMismatchError``, ``NoDirectionError``,
  ``GridParseError``...): recoverable, the caller decides what to do.
- ``PreconditionError``: the API was used outside its defined domain
  (empty-grid bounds, unit vector index out of range, rotating a diagonal).
"""

from __future__ import annotations


class GeometryError(Exception):
    """Base exception for all geometry/grid errors."""

    default_code: str = "GEOMETRY_ERROR"

    def __init__(self, message: str = "", *, code: str = "") -> None:
        self.message = message
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def category(self) -> str:
        return "precondition" if isinstance(self, PreconditionError) else "invalid_input"

    def to_error_dict(self) -> dict[str, object]:
        return {
            "category": self.category,
            "code": self.code,
            "message": self.message,
            "error_type": type(self).__name__,
        }


class DimensionMismatchError(GeometryError, ValueError):
    default_code = "DIMENSION_MISMATCH"

    def __init__(self, expected: int, actual: int, *, what: str = "point") -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected {what} of dimension {expected}, got dimension {actual}")


class NoDirectionError(GeometryError, ValueError):
    """The displacement between two points is not a single compass step."""

    default_code = "NO_DIRECTION"

    def __init__(self, start: object, end: object) -> None:
        self.start = start
        self.end = end
        super().__init__(f"Could not find direction from {start} to {end}")


class GridParseError(GeometryError, ValueError):
    default_code = "PARSE_FAILED"

    def __init__(self, message: str, *, line: int | None = None) -> None:
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class UnsupportedScalarError(GeometryError, TypeError):
    default_code = "UNSUPPORTED_SCALAR"


class UnsupportedDimensionError(GeometryError, ValueError):
    default_code = "UNSUPPORTED_DIMENSION"


class PreconditionError(GeometryError):
    """A documented precondition of the called operation does not hold."""

    default_code = "PRECONDITION_VIOLATED"


class InvalidUnitDimensionError(PreconditionError, IndexError):
    default_code = "INVALID_UNIT_DIMENSION"

    def __init__(self, index: int, dimension: int) -> None:
        self.index = index
        self.dimension = dimension
        super().__init__(f"unit vector axis {index} out of range for dimension {dimension}")


class UnsupportedRotationError(PreconditionError, NotImplementedError):
    default_code = "UNSUPPORTED_ROTATION"


class EmptyGridError(PreconditionError, LookupError):
    default_code = "EMPTY_GRID"
