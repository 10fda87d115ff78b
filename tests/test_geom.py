import math

import pytest

from flatgeom.flat import Geom0, Geom1
from flatgeom.geom import (
    Coord,
    GeomError,
    Layout,
    LayoutMismatchError,
    StrideMismatchError,
    UnsupportedLayoutError,
    UnsupportedTypeError,
    set_srid,
    transform_in_place,
)
from flatgeom.linestring import LineString


@pytest.mark.parametrize(
    "layout, want",
    [
        (Layout.NO_LAYOUT, "NoLayout"),
        (Layout.XY, "XY"),
        (Layout.XYZ, "XYZ"),
        (Layout.XYM, "XYM"),
        (Layout.XYZM, "XYZM"),
        (Layout(5), "Layout(5)"),
    ],
)
def test_layout_string(layout, want):
    assert str(layout) == want


@pytest.mark.parametrize(
    "layout, stride, m_index, z_index",
    [
        (Layout.NO_LAYOUT, 0, -1, -1),
        (Layout.XY, 2, -1, -1),
        (Layout.XYZ, 3, -1, 2),
        (Layout.XYM, 3, 2, -1),
        (Layout.XYZM, 4, 3, 2),
        (Layout(10), 10, 3, 2),
    ],
)
def test_layout_dimensions(layout, stride, m_index, z_index):
    assert layout.stride() == stride
    assert layout.m_index() == m_index
    assert layout.z_index() == z_index


def test_layout_from_int():
    assert Layout(0) is Layout.NO_LAYOUT
    assert Layout(7) is Layout(7)
    assert int(Layout(7)) == 7


def test_layout_invalid():
    with pytest.raises(ValueError):
        Layout(-1)


@pytest.mark.parametrize(
    "c, other, want",
    [
        ([1.0, 2.0], [2.0, 3.0], [2.0, 3.0]),
        ([1.0, 2.0, 3.0], [2.0, 3.0, 4.0], [2.0, 3.0, 4.0]),
        ([1.0, 2.0], [2.0, 3.0, 4.0], [2.0, 3.0]),
        ([1.0, 2.0, 3.0], [2.0, 3.0], [2.0, 3.0, 3.0]),
    ],
)
def test_set(c, other, want):
    coord = Coord(c)
    coord.set(Coord(other))
    assert coord == want


@pytest.mark.parametrize(
    "c1, c2, layout, equal",
    [
        ([], [0, 0], Layout.XY, False),
        ([], [], Layout.XY, True),
        ([1, 0], [], Layout.XY, False),
        ([1, 0], [1], Layout.XY, False),
        ([1], [], Layout.XY, False),
        ([1], [1], Layout.XY, True),
        ([1], [0], Layout.XY, False),
        ([0, 0], [0, 0], Layout.XY, True),
        ([0, 0], [1, 0], Layout.XY, False),
        ([0, 1], [0, 0], Layout.XY, False),
        ([0, 0, 3], [0, 0], Layout.XY, True),
        ([0, 0, 3], [0, 0, 3], Layout.XYZ, True),
        ([0, 0, 3], [0, 0, 4], Layout.XYZ, False),
        ([0, 0, 3, 4, 5, 6, 7, 8, 9, 10], [0, 0, 3, 4, 5, 6, 7, 8, 9, 10], Layout(10), True),
        ([0, 0, 3, 4, 5, 6, 7, 8, 9, 10], [0, 0, 3, 4, 5, 6, 8, 8, 9, 10], Layout(10), False),
    ],
)
def test_equal_coords(c1, c2, layout, equal):
    assert Coord(c1).equal(layout, Coord(c2)) is equal


def test_equal_coords_nan():
    assert Coord([math.nan, 1]).equal(Layout.XY, Coord([math.nan, 1]))
    assert not Coord([math.nan, 1]).equal(Layout.XY, Coord([0, 1]))


@pytest.mark.parametrize(
    "src, dest, expected, layout",
    [
        ([0, 0], [1, 1], [0, 0], Layout.XY),
        ([1, 0], [], [], Layout(0)),
        ([], [1, 2], [1, 2], Layout.XY),
        ([3], [1, 2], [3, 2], Layout.XY),
    ],
)
def test_set_coord(src, dest, expected, layout):
    coord = Coord(dest)
    coord.set(Coord(src))
    assert coord.equal(layout, Coord(expected))


def test_coord_accessors_and_clone():
    c = Coord([1.5, 2.5, 3.5])
    assert c.x() == 1.5
    assert c.y() == 2.5
    clone = c.clone()
    clone[0] = 9.0
    assert c == [1.5, 2.5, 3.5]
    assert isinstance(clone, Coord) and clone == [9.0, 2.5, 3.5]


def _shift(coord):
    coord[:] = [value + i + 1 for i, value in enumerate(coord)]


@pytest.mark.parametrize(
    "g, expected",
    [
        (Geom0(Layout.XY, [0, 0]), Geom0(Layout.XY, [1, 2])),
        (Geom0(Layout.XYZ, [0, 0, 0]), Geom0(Layout.XYZ, [1, 2, 3])),
        (Geom1(Layout.XY, [0, 0, 10, 10]), Geom1(Layout.XY, [1, 2, 11, 12])),
    ],
)
def test_transform_in_place(g, expected):
    result = transform_in_place(g, _shift)
    assert result is g
    assert result == expected


def test_set_srid_unsupported():
    with pytest.raises(UnsupportedTypeError) as excinfo:
        set_srid(None, 4326)
    assert str(excinfo.value) == "geom: unsupported type NoneType"


def test_set_srid_delegates():
    g = LineString.from_flat(Layout.XY, [1.0, 2.0, 3.0, 4.0])
    result = set_srid(g, 4326)
    assert result is g
    assert result.srid == 4326


def test_error_messages():
    err = LayoutMismatchError(Layout.XY, Layout.XYZ)
    assert str(err) == "geom: layout mismatch, got XY, want XYZ"
    assert isinstance(err, GeomError)
    assert str(StrideMismatchError(3, 2)) == "geom: stride mismatch, got 3, want 2"
    assert str(UnsupportedLayoutError(Layout(7))) == "geom: unsupported layout Layout(7)"