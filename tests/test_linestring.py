import pytest

from flatgeom.geom import Layout, StrideMismatchError, set_srid
from flatgeom.linestring import LineString


@pytest.mark.parametrize(
    "layout, coords, flat, stride",
    [
        (Layout.XY, [[1, 2], [3, 4], [5, 6]], [1, 2, 3, 4, 5, 6], 2),
        (Layout.XYZ, [[1, 2, 3], [4, 5, 6], [7, 8, 9]], [1, 2, 3, 4, 5, 6, 7, 8, 9], 3),
        (Layout.XYM, [[1, 2, 3], [4, 5, 6], [7, 8, 9]], [1, 2, 3, 4, 5, 6, 7, 8, 9], 3),
        (
            Layout.XYZM,
            [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]],
            [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12],
            4,
        ),
    ],
)
def test_line_string(layout, coords, flat, stride):
    ls = LineString(layout).set_coords(coords)
    ls.verify()
    assert ls.layout == layout
    assert ls.stride == stride
    assert ls.flat_coords == flat
    assert ls.ends() == []
    assert ls.endss() == []
    assert ls.coords() == coords
    assert ls.num_coords() == len(coords)
    for i, c in enumerate(coords):
        assert ls.coord(i) == c
    clone = ls.clone()
    assert clone == ls
    clone.flat_coords[0] = 100
    assert ls.flat_coords[0] == flat[0]


@pytest.mark.parametrize(
    "val, i, f",
    [
        (-0.5, 0, 0.0),
        (0.0, 0, 0.0),
        (0.5, 0, 0.5),
        (1.0, 1, 0.0),
        (1.5, 1, 0.5),
        (2.0, 2, 0.0),
        (2.5, 2, 0.0),
    ],
)
def test_interpolate(val, i, f):
    ls = LineString(Layout.XYM).set_coords([[1, 2, 0], [2, 4, 1], [3, 8, 2]])
    assert ls.interpolate(val, 2) == (i, f)


def test_interpolate_empty():
    with pytest.raises(ValueError):
        LineString(Layout.XYM).interpolate(0, 0)


@pytest.mark.parametrize(
    "coords, got",
    [
        ([[1, 2], []], 0),
        ([[1, 2], [1]], 1),
        ([[1, 2], [3, 4, 5]], 3),
    ],
)
def test_stride_mismatch(coords, got):
    with pytest.raises(StrideMismatchError) as info:
        LineString(Layout.XY).set_coords(coords)
    assert (info.value.got, info.value.want) == (got, 2)


@pytest.mark.parametrize("coords", [None, [], [[1, 2], [3, 4]]])
def test_stride_ok(coords):
    ls = LineString(Layout.XY).set_coords(coords)
    assert ls.coords() == (coords or [])


def test_set_srid():
    assert LineString(Layout.NO_LAYOUT).set_srid(4326).srid == 4326
    assert set_srid(LineString(Layout.NO_LAYOUT), 4326).srid == 4326


def test_sub_line_string():
    ls = LineString(Layout.XY).set_coords([[0, 1], [2, 3], [4, 5]])
    assert ls.sub_line_string(0, 1).flat_coords == [0, 1]
    assert ls.sub_line_string(1, 3).coords() == [[2, 3], [4, 5]]


def test_length_and_area():
    assert LineString(Layout.XY).length() == 0
    assert LineString(Layout.XY).set_coords([[0, 0], [1, 0]]).length() == 1
    assert LineString(Layout.XY).set_coords([[0, 0], [1, 0]]).area() == 0


def test_reverse():
    ls = LineString(Layout.XYZM).set_coords([[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]])
    ls.reverse()
    assert ls == LineString(Layout.XYZM).set_coords(
        [[9, 10, 11, 12], [5, 6, 7, 8], [1, 2, 3, 4]]
    )


def test_swap():
    a = LineString(Layout.XY).set_coords([[1, 2]])
    b = LineString(Layout.XYZ).set_coords([[3, 4, 5]])
    a.swap(b)
    assert a.layout == Layout.XYZ and a.flat_coords == [3, 4, 5]
    assert b.layout == Layout.XY and b.flat_coords == [1, 2]


def test_from_flat():
    ls = LineString.from_flat(Layout.XY, [0, 0, 1, 1, 3, 4])
    assert ls.coords() == [[0, 0], [1, 1], [3, 4]]