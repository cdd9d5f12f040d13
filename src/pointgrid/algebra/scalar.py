import math
from typing import Any, Protocol, TypeVar, runtime_checkable

import numpy as np


# ------------- Capabilities --------------------
@runtime_checkable
class Scalar(Protocol):
    """
    Numeric kind usable as a point coordinate.
    Requires ring arithmetic, total ordering, equality and hashing.
    int, float, Fraction, Decimal and numpy scalars all qualify.
    """

    def __add__(self, other: Any) -> Any: ...
    def __sub__(self, other: Any) -> Any: ...
    def __mul__(self, other: Any) -> Any: ...
    def __lt__(self, other: Any) -> bool: ...
    def __le__(self, other: Any) -> bool: ...
    def __eq__(self, other: object) -> bool: ...
    def __hash__(self) -> int: ...


@runtime_checkable
class SignedScalar(Scalar, Protocol):
    """Scalar with an absolute value (Manhattan metrics)."""

    def __abs__(self) -> Any: ...
    def __neg__(self) -> Any: ...


@runtime_checkable
class ContinuousScalar(SignedScalar, Protocol):
    """Scalar supporting true division and square roots (Euclidean metrics)."""

    def __truediv__(self, other: Any) -> Any: ...
    def __float__(self) -> float: ...


T = TypeVar("T", bound=Scalar)


# ------------- Helpers --------------------


def zero_like(value):
    """Additive identity of the same kind as ``value``."""
    return type(value)(0)


def is_integral(value) -> bool:
    # bool is an int subclass but never a coordinate
    if isinstance(value, bool | np.bool_):
        return False
    return isinstance(value, int | np.integer)


def sqrt(value):
    method = getattr(value, "sqrt", None)
    if callable(method):
        return method()  # Decimal keeps its precision
    return math.sqrt(value)
