# pointgrid/grid/point_grid.py
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from pointgrid.algebra.point import Point
from pointgrid.algebra.point_range import PointRange
from pointgrid.config.models import RenderModel
from pointgrid.core.errors import DimensionMismatchError, EmptyGridError
from pointgrid.grid.iterator import PointGridIterator
from pointgrid.grid.render import render_grid

U = TypeVar("U")


@dataclass
class PointGrid(Generic[U]):
    """
    Sparse mapping from points to payloads. Only inserted cells exist; there
    is no default filling of the bounding box. The dimension is fixed either
    explicitly or by the first inserted point.
    """

    cells: dict[Point, U] = field(default_factory=dict)
    dimension: int | None = None

    def __post_init__(self):
        self.cells = dict(self.cells)
        for p in self.cells:
            self._check_dimension(p)

    @classmethod
    def from_items(cls, items: Iterable[tuple[Point, U]], *, dimension: int | None = None):
        grid = cls(dimension=dimension)
        for p, value in items:
            grid.insert(p, value)
        return grid

    def _check_dimension(self, p: Point) -> None:
        if self.dimension is None:
            self.dimension = len(p)
        elif len(p) != self.dimension:
            raise DimensionMismatchError(self.dimension, len(p))

    # --------------- Mapping -----------------------------

    def insert(self, p: Point, value: U) -> None:
        """Store `value` at `p`, replacing whatever was there."""
        self._check_dimension(p)
        self.cells[p] = value

    def get(self, p: Point, default: U | None = None) -> U | None:
        return self.cells.get(p, default)

    def __getitem__(self, p: Point) -> U:
        return self.cells[p]

    def __setitem__(self, p: Point, value: U) -> None:
        self.insert(p, value)

    def __contains__(self, p: object) -> bool:
        return p in self.cells

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.cells)

    def points(self):
        return self.cells.keys()

    def values(self):
        return self.cells.values()

    def items(self):
        return self.cells.items()

    def copy(self) -> PointGrid[U]:
        return PointGrid(dict(self.cells), self.dimension)

    # --------------- Bounds -----------------------------

    def dimensions(self) -> tuple[Point, Point]:
        """Per-axis (min, max) over occupied cells, both inclusive."""
        if not self.cells:
            raise EmptyGridError("bounds of an empty grid are undefined")
        keys = iter(self.cells)
        first = next(keys)
        lo, hi = list(first), list(first)
        for p in keys:
            for axis, c in enumerate(p):
                if c < lo[axis]:
                    lo[axis] = c
                elif c > hi[axis]:
                    hi[axis] = c
        return first.from_iterable(lo), first.from_iterable(hi)

    def dimensions_as_range(self) -> PointRange:
        lo, hi = self.dimensions()
        return PointRange(lo, hi + Point.one(dimension=len(hi), scalar=type(hi[0])))

    def iter_full_bounds(self) -> PointGridIterator:
        """Every coordinate of the bounding box, occupied or not."""
        box = self.dimensions_as_range()
        return PointGridIterator(box.min, box.max)

    # --------------- Display -----------------------------

    def render(self, options: RenderModel | Mapping | None = None) -> str:
        return render_grid(self, options)

    def __str__(self):
        return self.render()

    def __repr__(self):
        return f"PointGrid(dimension={self.dimension}, cells={len(self.cells)})"
