# pointgrid/algebra/direction.py
from __future__ import annotations

from enum import Enum

from pointgrid.algebra.point import Point, Point2
from pointgrid.core.errors import (
    DimensionMismatchError,
    NoDirectionError,
    UnsupportedRotationError,
)


class Point2Direction(Enum):
    """
    8-way compass on a 2D grid. Values are (dx, dy) unit steps with y growing
    downward, so North is (0, -1).
    """

    NORTH = (0, -1)
    NORTH_EAST = (1, -1)
    EAST = (1, 0)
    SOUTH_EAST = (1, 1)
    SOUTH = (0, 1)
    SOUTH_WEST = (-1, 1)
    WEST = (-1, 0)
    NORTH_WEST = (-1, -1)

    @classmethod
    def all(cls) -> tuple[Point2Direction, ...]:
        """Cardinal directions: N, E, S, W."""
        return _CARDINAL

    @classmethod
    def all_with_diagonals(cls) -> tuple[Point2Direction, ...]:
        """All 8 directions clockwise from North."""
        return _COMPASS

    @classmethod
    def from_vector(cls, vector: Point) -> Point2Direction:
        try:
            return cls(tuple(vector))
        except ValueError:
            raise NoDirectionError(Point2(0, 0), vector) from None

    @classmethod
    def from_points(cls, start: Point, end: Point) -> Point2Direction:
        """Direction of the single step from `start` to the adjacent `end`."""
        delta = end - start
        if len(delta) != 2:
            raise DimensionMismatchError(2, len(delta))
        try:
            return cls(tuple(delta))
        except ValueError:
            raise NoDirectionError(start, end) from None

    @property
    def is_cardinal(self) -> bool:
        return 0 in self.value

    @property
    def is_diagonal(self) -> bool:
        return not self.is_cardinal

    def to_vector(self, *, scalar: type = int) -> Point2:
        dx, dy = self.value
        return Point2(scalar(dx), scalar(dy))

    def direction_left(self) -> Point2Direction:
        try:
            return _LEFT[self]
        except KeyError:
            raise UnsupportedRotationError(f"cannot turn left from diagonal {self.name}") from None

    def direction_right(self) -> Point2Direction:
        try:
            return _RIGHT[self]
        except KeyError:
            raise UnsupportedRotationError(
                f"cannot turn right from diagonal {self.name}"
            ) from None

    def direction_flip(self) -> Point2Direction:
        dx, dy = self.value
        return Point2Direction((-dx, -dy))

    def __str__(self):
        return _ARROWS[self]


_D = Point2Direction

_CARDINAL = (_D.NORTH, _D.EAST, _D.SOUTH, _D.WEST)
_COMPASS = (
    _D.NORTH,
    _D.NORTH_EAST,
    _D.EAST,
    _D.SOUTH_EAST,
    _D.SOUTH,
    _D.SOUTH_WEST,
    _D.WEST,
    _D.NORTH_WEST,
)
_RIGHT = {d: _CARDINAL[(i + 1) % 4] for i, d in enumerate(_CARDINAL)}
_LEFT = {d: _CARDINAL[(i - 1) % 4] for i, d in enumerate(_CARDINAL)}
_ARROWS = {
    _D.NORTH: "↑",
    _D.NORTH_EAST: "↗",
    _D.EAST: "→",
    _D.SOUTH_EAST: "↘",
    _D.SOUTH: "↓",
    _D.SOUTH_WEST: "↙",
    _D.WEST: "←",
    _D.NORTH_WEST: "↖",
}
