# pointgrid/grid/dense.py
import logging

import numpy as np

from pointgrid.algebra.point import Point, point_of
from pointgrid.algebra.scalar import is_integral
from pointgrid.core.errors import (
    DimensionMismatchError,
    UnsupportedDimensionError,
    UnsupportedScalarError,
)
from pointgrid.grid.point_grid import PointGrid
from pointgrid.io.grid_logging import log_event

log = logging.getLogger(__name__)


def to_array(grid: PointGrid, *, fill=None, dtype=object) -> tuple[np.ndarray, Point]:
    """
    Dense copy of the grid's bounding box.

    Returns (array, origin) where array[p - origin] holds the payload at p,
    axes in point order (axis 0 first), and `fill` marks empty cells.
    """
    lo, hi = grid.dimensions()
    if not all(is_integral(c) for c in (*lo, *hi)):
        raise UnsupportedScalarError("only grids with integer coordinates have a dense form")

    shape = tuple(int(h - l) + 1 for l, h in zip(lo, hi))
    array = np.full(shape, fill, dtype=dtype)
    for p, value in grid.items():
        array[tuple(int(c - l) for c, l in zip(p, lo))] = value
    log_event(log, logging.DEBUG, "grid_densified", shape=shape, cells=len(grid))
    return array, lo


def from_array(array, *, origin: Point | None = None, skip=None) -> PointGrid:
    """
    Sparse grid from a dense array; array[i, j, ...] lands at origin + (i, j, ...).
    None cells, and cells equal to `skip` when given, stay empty.
    """
    array = np.asarray(array)
    if array.ndim == 0:
        raise UnsupportedDimensionError("a 0-d array has no cells to place")
    if origin is None:
        origin = Point.zero(dimension=array.ndim)
    if len(origin) != array.ndim:
        raise DimensionMismatchError(array.ndim, len(origin), what="origin")
    if not all(is_integral(c) for c in origin):
        raise UnsupportedScalarError("array origin must have integer coordinates")

    grid: PointGrid = PointGrid(dimension=array.ndim)
    for idx in np.ndindex(array.shape):
        value = array[idx]
        if value is None or (skip is not None and value == skip):
            continue
        if isinstance(value, np.generic):
            value = value.item()
        grid.insert(origin + point_of(idx), value)
    log_event(log, logging.DEBUG, "grid_sparsified", shape=array.shape, cells=len(grid))
    return grid
