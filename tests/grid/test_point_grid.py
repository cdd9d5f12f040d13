import pytest

from pointgrid.algebra.point import Point2, Point3
from pointgrid.algebra.point_range import PointRange
from pointgrid.core.errors import DimensionMismatchError, EmptyGridError, PreconditionError
from pointgrid.grid.point_grid import PointGrid


@pytest.fixture
def spread_grid() -> PointGrid[bool]:
    pg: PointGrid[bool] = PointGrid()
    pg.insert(Point2(0, 0), True)
    pg.insert(Point2(-20, 20), True)
    pg.insert(Point2(20, -10), True)
    return pg


def test_dimensions_are_per_axis(spread_grid):
    assert spread_grid.dimensions() == (Point2(-20, -10), Point2(20, 20))


def test_dimensions_as_range_is_half_open(spread_grid):
    box = spread_grid.dimensions_as_range()
    assert box == PointRange(Point2(-20, -10), Point2(21, 21))
    assert all(box.contains(p) for p in spread_grid)


def test_iter_full_bounds_covers_empty_cells_too():
    pg = PointGrid.from_items([(Point2(0, 0), "a"), (Point2(2, 1), "b")])
    cells = list(pg.iter_full_bounds())
    assert len(cells) == 6
    assert cells[0] == Point2(0, 0) and cells[-1] == Point2(2, 1)
    assert sum(1 for p in cells if p in pg) == 2


def test_single_cell_grid_bounds():
    pg = PointGrid.from_items([(Point3(4, 5, 6), 1)])
    assert pg.dimensions() == (Point3(4, 5, 6), Point3(4, 5, 6))
    assert list(pg.iter_full_bounds()) == [Point3(4, 5, 6)]


@pytest.mark.parametrize("query", ["dimensions", "dimensions_as_range", "iter_full_bounds"])
def test_bounds_of_empty_grid_violate_a_precondition(query):
    pg = PointGrid()
    with pytest.raises(EmptyGridError) as err:
        getattr(pg, query)()
    assert isinstance(err.value, PreconditionError)
    assert err.value.code == "EMPTY_GRID"


def test_last_insert_wins():
    pg = PointGrid()
    pg.insert(Point2(1, 1), "first")
    pg.insert(Point2(1, 1), "second")
    assert len(pg) == 1
    assert pg.get(Point2(1, 1)) == "second"


def test_get_never_inserts():
    pg = PointGrid()
    assert pg.get(Point2(3, 3)) is None
    assert pg.get(Point2(3, 3), ".") == "."
    assert Point2(3, 3) not in pg
    assert len(pg) == 0
    with pytest.raises(KeyError):
        pg[Point2(3, 3)]


def test_mapping_helpers():
    pg = PointGrid()
    pg[Point2(0, 1)] = 5
    pg[Point2(1, 0)] = 7
    assert sorted(pg.points()) == [Point2(0, 1), Point2(1, 0)]
    assert sorted(pg.values()) == [5, 7]
    assert dict(pg.items()) == {Point2(0, 1): 5, Point2(1, 0): 7}
    assert set(pg) == {Point2(0, 1), Point2(1, 0)}
    assert pg[Point2(1, 0)] == 7


def test_copy_is_independent():
    pg = PointGrid.from_items([(Point2(0, 0), 1)])
    clone = pg.copy()
    clone.insert(Point2(1, 1), 2)
    assert len(pg) == 1 and len(clone) == 2
    assert pg != clone
    assert pg == PointGrid({Point2(0, 0): 1})


def test_grid_owns_its_cells():
    source = {Point2(0, 0): 1}
    pg = PointGrid(source)
    source[Point3(1, 1, 1)] = 2
    source[Point2(0, 0)] = 9
    assert len(pg) == 1
    assert Point3(1, 1, 1) not in pg
    assert pg[Point2(0, 0)] == 1


def test_dimension_is_fixed_by_first_insert():
    pg = PointGrid()
    pg.insert(Point2(0, 0), 1)
    assert pg.dimension == 2
    with pytest.raises(DimensionMismatchError):
        pg.insert(Point3(0, 0, 0), 1)
    with pytest.raises(DimensionMismatchError):
        PointGrid({Point2(0, 0): 1}, dimension=3)


def test_repr_never_needs_bounds():
    assert repr(PointGrid()) == "PointGrid(dimension=None, cells=0)"
    assert repr(PointGrid.from_items([(Point2(1, 1), 0)])) == "PointGrid(dimension=2, cells=1)"


def test_float_coordinates_still_have_bounds():
    pg = PointGrid.from_items([(Point2(0.5, 2.0), "a"), (Point2(-1.5, 3.0), "b")])
    assert pg.dimensions() == (Point2(-1.5, 2.0), Point2(0.5, 3.0))
    assert pg.dimensions_as_range().max == Point2(1.5, 4.0)
