# pointgrid/algebra/point.py
from __future__ import annotations

import functools
import operator
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any, ClassVar, Generic

from pointgrid.algebra.scalar import ContinuousScalar, SignedScalar, T, sqrt, zero_like
from pointgrid.core.errors import DimensionMismatchError, InvalidUnitDimensionError

if TYPE_CHECKING:
    from pointgrid.algebra.direction import Point2Direction


@functools.total_ordering
class Point(Generic[T]):
    """
    Fixed-size coordinate tuple over a scalar kind.

    Immutable value type: equality, hashing and ordering are structural over
    the coordinate tuple (exact comparison, no float tolerance). The generic
    class accepts any dimension >= 1; Point2/Point3/Point4 pin the arity and
    add named accessors.
    """

    __slots__ = ("_coords",)

    arity: ClassVar[int | None] = None
    # numpy scalars must defer to our reflected operators (k * p)
    __array_ufunc__ = None

    def __init__(self, *coords: T):
        fixed = type(self).arity
        if fixed is not None and len(coords) != fixed:
            raise DimensionMismatchError(fixed, len(coords))
        if not coords:
            raise ValueError("a point needs at least one coordinate")
        object.__setattr__(self, "_coords", tuple(coords))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), self._coords)

    # --------------- Construction -----------------------------

    @classmethod
    def _build(cls, coords: Iterable[Any]) -> Point:
        coords = tuple(coords)
        if cls is Point:
            return point_of(coords)
        if cls.arity is not None and len(coords) != cls.arity:
            raise DimensionMismatchError(cls.arity, len(coords))
        return cls(*coords)

    @classmethod
    def _resolve_dimension(cls, dimension: int | None) -> int:
        if cls.arity is not None:
            if dimension is not None and dimension != cls.arity:
                raise DimensionMismatchError(cls.arity, dimension)
            return cls.arity
        if dimension is None:
            raise TypeError(f"{cls.__name__} needs an explicit dimension=")
        if dimension < 1:
            raise ValueError(f"dimension must be >= 1, got {dimension}")
        return dimension

    @classmethod
    def from_iterable(cls, values: Iterable[T]) -> Point:
        return cls._build(values)

    @classmethod
    def filled(cls, value: T, *, dimension: int | None = None) -> Point:
        return cls._build([value] * cls._resolve_dimension(dimension))

    @classmethod
    def zero(cls, *, dimension: int | None = None, scalar: type = int) -> Point:
        return cls.filled(scalar(0), dimension=dimension)

    @classmethod
    def one(cls, *, dimension: int | None = None, scalar: type = int) -> Point:
        return cls.filled(scalar(1), dimension=dimension)

    @classmethod
    def origin(cls, *, dimension: int | None = None, scalar: type = int) -> Point:
        return cls.zero(dimension=dimension, scalar=scalar)

    @classmethod
    def unit_in_dimension(
        cls, axis: int, *, dimension: int | None = None, scalar: type = int
    ) -> Point:
        n = cls._resolve_dimension(dimension)
        if not 0 <= axis < n:
            raise InvalidUnitDimensionError(axis, n)
        return cls._build(scalar(1) if i == axis else scalar(0) for i in range(n))

    @classmethod
    def unit_vectors(cls, *, dimension: int | None = None, scalar: type = int) -> list[Point]:
        n = cls._resolve_dimension(dimension)
        return [cls.unit_in_dimension(i, dimension=n, scalar=scalar) for i in range(n)]

    @classmethod
    def directions(cls, *, dimension: int | None = None, scalar: type = int) -> list[Point]:
        """Axis-aligned unit steps: all negative ones (axis order), then all positive ones."""
        n = cls._resolve_dimension(dimension)
        units = cls.unit_vectors(dimension=n, scalar=scalar)
        zero = cls.zero(dimension=n, scalar=scalar)
        return [zero - u for u in units] + units

    @classmethod
    def directions_with_diagonals(
        cls, *, dimension: int | None = None, scalar: type = int
    ) -> list[Point]:
        """
        All 3^N - 1 non-zero steps with components in {-1, 0, 1}.
        Axis 0 is expanded first (outermost), so the zero vector ends up at
        index 3^N // 2 of the full enumeration and is dropped from there.
        """
        n = cls._resolve_dimension(dimension)
        vectors = [cls.zero(dimension=n, scalar=scalar)]
        for axis in range(n):
            unit = cls.unit_in_dimension(axis, dimension=n, scalar=scalar)
            vectors = [w for v in vectors for w in (v - unit, v, v + unit)]
        del vectors[3**n // 2]
        return vectors

    # --------------- Accessors -----------------------------

    @property
    def coords(self) -> tuple[T, ...]:
        return self._coords

    @property
    def dimension(self) -> int:
        return len(self._coords)

    def to_tuple(self) -> tuple[T, ...]:
        return self._coords

    def __len__(self) -> int:
        return len(self._coords)

    def __iter__(self) -> Iterator[T]:
        return iter(self._coords)

    def __getitem__(self, index):
        return self._coords[index]

    def is_zero(self) -> bool:
        return all(c == 0 for c in self._coords)

    def is_one(self) -> bool:
        return all(c == 1 for c in self._coords)

    # --------------- Arithmetic -----------------------------

    def _check_same_dimension(self, other: Point) -> None:
        if len(other._coords) != len(self._coords):
            raise DimensionMismatchError(len(self._coords), len(other._coords))

    def _make(self, coords: Iterable[Any]) -> Point:
        return type(self)._build(coords)

    def __add__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        self._check_same_dimension(other)
        return self._make(a + b for a, b in zip(self._coords, other._coords))

    def __sub__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        self._check_same_dimension(other)
        return self._make(a - b for a, b in zip(self._coords, other._coords))

    def __neg__(self):
        return self._make(-c for c in self._coords)

    def __mul__(self, scalar):
        if isinstance(scalar, Point):
            return NotImplemented
        return self._make(c * scalar for c in self._coords)

    __rmul__ = __mul__

    # --------------- Geometry -----------------------------

    def _fold(self, values: Iterable[Any]):
        return functools.reduce(operator.add, values, zero_like(self._coords[0]))

    def length_euclid_squared(self):
        return self._fold(c * c for c in self._coords)

    def length_euclid(self) -> ContinuousScalar:
        return sqrt(self.length_euclid_squared())

    def distance_euclid_squared_from(self, other: Point):
        return (self - other).length_euclid_squared()

    def distance_euclid_from(self, other: Point) -> ContinuousScalar:
        return (self - other).length_euclid()

    def length_manhattan(self) -> SignedScalar:
        return self._fold(abs(c) for c in self._coords)

    def distance_manhattan_from(self, other: Point) -> SignedScalar:
        return (self - other).length_manhattan()

    def dot(self, other: Point):
        self._check_same_dimension(other)
        return self._fold(a * b for a, b in zip(self._coords, other._coords))

    def min_componentwise(self, other: Point) -> Point:
        self._check_same_dimension(other)
        return self._make(min(a, b) for a, b in zip(self._coords, other._coords))

    def max_componentwise(self, other: Point) -> Point:
        self._check_same_dimension(other)
        return self._make(max(a, b) for a, b in zip(self._coords, other._coords))

    def vec_to(self, other: Point) -> Point:
        return other - self

    def neighbors(self, *, diagonals: bool = False) -> list[Point]:
        n = len(self._coords)
        steps = (
            type(self).directions_with_diagonals(dimension=n)
            if diagonals
            else type(self).directions(dimension=n)
        )
        return [self + s for s in steps]

    # --------------- Comparison / display -----------------------------

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self._coords == other._coords

    def __lt__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self._coords < other._coords

    def __hash__(self):
        return hash(self._coords)

    def __repr__(self):
        return "Point[" + ", ".join(repr(c) for c in self._coords) + "]"

    def __str__(self):
        return "Point[" + ", ".join(str(c) for c in self._coords) + "]"


class Point2(Point[T]):
    __slots__ = ()
    arity = 2

    def __init__(self, x: T, y: T):
        super().__init__(x, y)

    @property
    def x(self) -> T:
        return self._coords[0]

    @property
    def y(self) -> T:
        return self._coords[1]

    def cross(self, other: Point2):
        """Pseudo-cross product: z component of the 3D cross of (x, y, 0) vectors."""
        return self.x * other.y - self.y * other.x

    def get_point_in_direction(self, direction: Point2Direction, distance: T = 1) -> Point2:
        """
        Step `distance` cells toward `direction`. Diagonals move `distance` on
        both axes (grid adjacency, not Euclidean length).
        """
        return self + direction.to_vector(scalar=type(distance)) * distance


class Point3(Point[T]):
    __slots__ = ()
    arity = 3

    def __init__(self, x: T, y: T, z: T):
        super().__init__(x, y, z)

    @property
    def x(self) -> T:
        return self._coords[0]

    @property
    def y(self) -> T:
        return self._coords[1]

    @property
    def z(self) -> T:
        return self._coords[2]

    def cross(self, other: Point3) -> Point3:
        """Right-handed cross product (not normalized)."""
        a, b = self._coords, other._coords
        return Point3(
            a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0],
        )


class Point4(Point[T]):
    __slots__ = ()
    arity = 4

    def __init__(self, x: T, y: T, z: T, w: T):
        super().__init__(x, y, z, w)

    @property
    def x(self) -> T:
        return self._coords[0]

    @property
    def y(self) -> T:
        return self._coords[1]

    @property
    def z(self) -> T:
        return self._coords[2]

    @property
    def w(self) -> T:
        return self._coords[3]


_NAMED: dict[int, type[Point]] = {2: Point2, 3: Point3, 4: Point4}


def point_of(coords: Iterable[Any]) -> Point:
    """Build the named specialisation for 2/3/4 coordinates, a plain Point otherwise."""
    coords = tuple(coords)
    return _NAMED.get(len(coords), Point)(*coords)
