# pointgrid/grid/iterator.py
from __future__ import annotations

from pointgrid.algebra.point import Point
from pointgrid.core.errors import DimensionMismatchError


class PointGridIterator:
    """
    Lazy enumeration of every point in the half-open box [lower_bound, upper_bound).

    Row-major odometer: the last axis varies fastest. `last` is the next point
    to emit; the iterator is exhausted once `last == upper_bound`. Not
    restartable, build a new one with the same bounds to iterate again.
    """

    def __init__(self, lower_bound: Point, upper_bound: Point):
        if len(lower_bound) != len(upper_bound):
            raise DimensionMismatchError(len(lower_bound), len(upper_bound), what="bound")
        self.lower_bound = lower_bound
        self.upper_bound = upper_bound
        empty = any(lo >= hi for lo, hi in zip(lower_bound, upper_bound))
        self.last = upper_bound if empty else lower_bound

    def __iter__(self) -> PointGridIterator:
        return self

    def __next__(self) -> Point:
        if self.last == self.upper_bound:
            raise StopIteration

        result = self.last
        cursor = list(result)
        for axis in reversed(range(len(cursor))):
            if cursor[axis] + 1 >= self.upper_bound[axis]:
                cursor[axis] = self.lower_bound[axis]  # carry into the next slower axis
            else:
                cursor[axis] += 1
                self.last = result.from_iterable(cursor)
                return result
        self.last = self.upper_bound
        return result

    def __repr__(self):
        return (
            f"PointGridIterator(lower_bound={self.lower_bound!r}, "
            f"upper_bound={self.upper_bound!r}, last={self.last!r})"
        )
