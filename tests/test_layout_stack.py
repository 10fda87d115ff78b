import pytest

from flatgeom.geom import Layout
from flatgeom.wkt.layout_stack import LayoutStack


def test_initial_frame():
    stack = LayoutStack()
    assert stack.at_top_level()
    assert stack.top_layout() == Layout.NO_LAYOUT
    assert stack.top_in_base_type_collection() is True
    assert stack.top_next_point_must_be_empty() is False


@pytest.mark.parametrize("layout", [Layout.XYM, Layout.XYZ, Layout.XYZM])
def test_push_and_pop_typed_collection(layout):
    stack = LayoutStack()
    stack.push(layout)
    assert not stack.at_top_level()
    assert stack.top_layout() == layout
    assert stack.top_in_base_type_collection() is False
    assert stack.pop() == layout
    assert stack.at_top_level()


def test_push_base_type_collection_inherits_outer_frame():
    stack = LayoutStack()
    stack.push(Layout.XYZ)
    stack.push(Layout.NO_LAYOUT)
    assert stack.top_layout() == Layout.XYZ
    assert stack.top_in_base_type_collection() is False


def test_base_type_collection_at_top_level_stays_base_type():
    stack = LayoutStack()
    stack.push(Layout.NO_LAYOUT)
    assert stack.top_layout() == Layout.NO_LAYOUT
    assert stack.top_in_base_type_collection() is True


def test_set_top_layout_only_affects_top_frame():
    stack = LayoutStack()
    stack.push(Layout.NO_LAYOUT)
    stack.set_top_layout(Layout.XY)
    assert stack.pop() == Layout.XY
    assert stack.top_layout() == Layout.NO_LAYOUT


def test_set_top_layout_rejects_no_layout():
    with pytest.raises(ValueError):
        LayoutStack().set_top_layout(Layout.NO_LAYOUT)


def test_push_rejects_xy():
    with pytest.raises(ValueError):
        LayoutStack().push(Layout.XY)


def test_pop_top_level_raises():
    with pytest.raises(RuntimeError):
        LayoutStack().pop()


def test_next_point_must_be_empty_in_xym():
    stack = LayoutStack()
    stack.push(Layout.XYM)
    stack.set_top_next_point_must_be_empty(True)
    assert stack.top_next_point_must_be_empty() is True
    stack.set_top_next_point_must_be_empty(False)
    assert stack.top_next_point_must_be_empty() is False


def test_next_point_must_be_empty_requires_xym():
    stack = LayoutStack()
    stack.push(Layout.XYZ)
    with pytest.raises(RuntimeError):
        stack.set_top_next_point_must_be_empty(True)


def test_frames_left_check():
    stack = LayoutStack()
    stack.push(Layout.XYM)
    with pytest.raises(RuntimeError):
        stack.assert_no_geometry_collection_frames_left()
    stack.pop()
    stack.assert_no_geometry_collection_frames_left()
    assert stack.at_top_level()