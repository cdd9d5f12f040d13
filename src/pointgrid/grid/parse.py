# pointgrid/grid/parse.py
import logging
from collections.abc import Callable

from pointgrid.algebra.point import Point, Point2, point_of
from pointgrid.core.errors import GridParseError
from pointgrid.grid.point_grid import PointGrid
from pointgrid.io.grid_logging import log_event

log = logging.getLogger(__name__)


def _keep_visible(ch: str) -> str | None:
    return None if ch.isspace() else ch


def _trimmed_lines(text: str) -> list[str]:
    lines = text.splitlines()
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    return lines


def parse_char_grid(text: str, convert: Callable[[str], object] | None = None) -> PointGrid:
    """
    Character map -> 2D grid, x = column, y = line (growing downward).
    `convert(ch)` returns the payload, or None to leave the cell empty.
    """
    convert = convert or _keep_visible
    grid: PointGrid = PointGrid(dimension=2)
    lines = _trimmed_lines(text)
    for y, row in enumerate(lines):
        for x, ch in enumerate(row):
            value = convert(ch)
            if value is not None:
                grid.insert(Point2(x, y), value)
    log_event(log, logging.DEBUG, "char_grid_parsed", rows=len(lines), cells=len(grid))
    return grid


def parse_points(
    text: str,
    *,
    dimension: int | None = None,
    sep: str = ",",
    scalar: Callable[[str], object] = int,
) -> list[Point]:
    """One point per non-blank line, e.g. '162,817,812'."""
    points: list[Point] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        parts = [part.strip() for part in line.split(sep)]
        if dimension is None:
            dimension = len(parts)
        if len(parts) != dimension:
            raise GridParseError(
                f"expected {dimension} components, got {len(parts)}: {line!r}", line=lineno
            )
        try:
            coords = [scalar(part) for part in parts]
        except (ValueError, ArithmeticError) as exc:
            raise GridParseError(f"bad component in {line!r}: {exc}", line=lineno) from exc
        points.append(point_of(coords))
    log_event(log, logging.DEBUG, "points_parsed", count=len(points), dimension=dimension)
    return points
