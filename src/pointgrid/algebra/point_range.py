# pointgrid/algebra/point_range.py
from __future__ import annotations

from dataclasses import dataclass

from pointgrid.algebra.point import Point
from pointgrid.core.errors import DimensionMismatchError
from pointgrid.grid.iterator import PointGridIterator


@dataclass(frozen=True, init=False, repr=False)
class PointRange:
    """Axis-aligned box: `min` inclusive, `max` exclusive on every axis."""

    min: Point
    max: Point

    def __init__(self, corner1: Point, corner2: Point):
        if len(corner1) != len(corner2):
            raise DimensionMismatchError(len(corner1), len(corner2), what="corner")
        # any two opposite corners describe the same box
        object.__setattr__(self, "min", corner1.min_componentwise(corner2))
        object.__setattr__(self, "max", corner1.max_componentwise(corner2))

    @classmethod
    def default(cls, *, dimension: int = 2, scalar: type = int) -> PointRange:
        return cls(
            Point.zero(dimension=dimension, scalar=scalar),
            Point.one(dimension=dimension, scalar=scalar),
        )

    @property
    def dimension(self) -> int:
        return len(self.min)

    def contains(self, point: Point) -> bool:
        if len(point) != len(self.min):
            raise DimensionMismatchError(len(self.min), len(point))
        return all(lo <= c < hi for lo, c, hi in zip(self.min, point, self.max, strict=True))

    def __contains__(self, point: Point) -> bool:
        return self.contains(point)

    def intersects(self, other: PointRange) -> bool:
        if other.dimension != self.dimension:
            raise DimensionMismatchError(self.dimension, other.dimension, what="range")
        # touching faces do not overlap (max is exclusive)
        return not any(
            a_lo >= b_hi or b_lo >= a_hi
            for a_lo, a_hi, b_lo, b_hi in zip(self.min, self.max, other.min, other.max, strict=True)
        )

    def is_empty(self) -> bool:
        return any(lo == hi for lo, hi in zip(self.min, self.max))

    def size(self) -> Point:
        return self.max - self.min

    def points(self) -> PointGridIterator:
        return PointGridIterator(self.min, self.max)

    def __add__(self, offset):
        if not isinstance(offset, Point):
            return NotImplemented
        return PointRange(self.min + offset, self.max + offset)

    def __sub__(self, offset):
        if not isinstance(offset, Point):
            return NotImplemented
        return PointRange(self.min - offset, self.max - offset)

    def __repr__(self):
        lo = ", ".join(str(c) for c in self.min)
        hi = ", ".join(str(c) for c in self.max)
        return f"PointRange[({lo})->({hi})]"

    __str__ = __repr__


Rectangle = PointRange
Cube = PointRange
Hypercube = PointRange
