from fractions import Fraction

import pytest

from pointgrid.algebra.direction import Point2Direction
from pointgrid.algebra.point import Point2, Point3
from pointgrid.core.errors import GridParseError
from pointgrid.grid.parse import parse_char_grid, parse_points

ROLLS = """
..@@.
@@@.@

"""


def test_char_grid_keeps_visible_characters_by_default():
    pg = parse_char_grid("#.\n #\n")
    assert dict(pg.items()) == {Point2(0, 0): "#", Point2(1, 0): ".", Point2(1, 1): "#"}
    assert pg.dimension == 2


def test_char_grid_with_converter_and_blank_edges():
    pg = parse_char_grid(ROLLS, lambda ch: True if ch == "@" else None)
    assert len(pg) == 6
    assert Point2(2, 0) in pg and Point2(0, 1) in pg
    assert Point2(0, 0) not in pg
    assert pg.dimensions() == (Point2(0, 0), Point2(4, 1))


def test_parsed_grid_supports_neighbour_counting():
    pg = parse_char_grid(ROLLS, lambda ch: ch if ch == "@" else None)
    centre = Point2(2, 1)
    around = sum(
        1 for d in Point2Direction.all_with_diagonals() if centre.get_point_in_direction(d, 1) in pg
    )
    assert around == 3


def test_char_grid_keeps_leading_spaces_of_first_row():
    pg = parse_char_grid("\n  x\n")
    assert list(pg.points()) == [Point2(2, 0)]


def test_parse_points():
    pts = parse_points("162,817,812\n57,618,57\n\n906,360,560\n")
    assert pts == [Point3(162, 817, 812), Point3(57, 618, 57), Point3(906, 360, 560)]
    assert all(type(p) is Point3 for p in pts)


def test_parse_points_with_separator_and_scalar():
    pts = parse_points("1/2 3\n-1 0\n", sep=" ", scalar=Fraction)
    assert pts == [Point2(Fraction(1, 2), Fraction(3)), Point2(Fraction(-1), Fraction(0))]


def test_parse_points_rejects_ragged_lines():
    with pytest.raises(GridParseError) as err:
        parse_points("1,2,3\n4,5\n")
    assert err.value.line == 2
    assert "line 2" in str(err.value)


def test_parse_points_rejects_bad_numbers():
    with pytest.raises(GridParseError) as err:
        parse_points("1,2\n3,x\n", dimension=2)
    assert err.value.line == 2
    assert isinstance(err.value, ValueError)


def test_parse_points_enforces_requested_dimension():
    with pytest.raises(GridParseError):
        parse_points("1,2\n", dimension=3)
