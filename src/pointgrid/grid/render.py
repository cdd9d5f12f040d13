# pointgrid/grid/render.py
from __future__ import annotations

import itertools
from collections.abc import Mapping
from typing import TYPE_CHECKING

from pointgrid.algebra.scalar import is_integral
from pointgrid.config.models import RenderModel
from pointgrid.core.errors import UnsupportedDimensionError, UnsupportedScalarError

if TYPE_CHECKING:
    from pointgrid.grid.point_grid import PointGrid

RENDERABLE_DIMENSIONS = (2, 3, 4)

_MISSING = object()


def _options(options: RenderModel | Mapping | None) -> RenderModel:
    if options is None:
        return RenderModel()
    return options if isinstance(options, RenderModel) else RenderModel.model_validate(options)


def render_grid(grid: PointGrid, options: RenderModel | Mapping | None = None) -> str:
    """
    Text picture of a 2D/3D/4D grid.

    Axis 0 runs horizontally within a row, axis 1 selects the row, and each
    higher axis k stacks layers separated by k-1 blank lines. Empty cells
    use `empty_cell`; occupied cells use str(payload).
    """
    opts = _options(options)
    lo, hi = grid.dimensions()
    if len(lo) not in RENDERABLE_DIMENSIONS:
        raise UnsupportedDimensionError(
            f"grids of dimension {len(lo)} cannot be rendered as text"
        )
    if not all(is_integral(c) for c in (*lo, *hi)):
        raise UnsupportedScalarError("only grids with integer coordinates can be rendered")

    n = len(lo)
    lines = [f"Grid ({lo}, {hi}):"] if opts.show_header else []
    xs = range(lo[0], hi[0] + 1)
    # slowest axis first: (axis n-1, ..., axis 1)
    outer = [range(lo[axis], hi[axis] + 1) for axis in reversed(range(1, n))]

    prev = None
    for idx in itertools.product(*outer):
        if prev is not None:
            changed = next(pos for pos, (a, b) in enumerate(zip(prev, idx)) if a != b)
            lines.extend([""] * (n - 1 - changed - 1))
        prev = idx

        higher = tuple(reversed(idx))
        row = []
        for x in xs:
            value = grid.cells.get(lo.from_iterable((x, *higher)), _MISSING)
            row.append(opts.empty_cell if value is _MISSING else str(value))
        lines.append("".join(row))

    return "\n".join(lines) + "\n"
