"""The stack of layouts tracked while reading nested geometry collections."""

from __future__ import annotations

from dataclasses import dataclass

from ..geom import Layout

_COLLECTION_LAYOUTS = (Layout.XYM, Layout.XYZ, Layout.XYZM)
_CONCRETE_LAYOUTS = (Layout.XY, Layout.XYM, Layout.XYZ, Layout.XYZM)


@dataclass
class _Frame:
    layout: Layout
    # True at the top level or inside a collection without a type suffix.
    in_base_type_collection: bool
    # True when the next base type geometry must be EMPTY, which is the only
    # base type geometry allowed inside an XYM collection.
    next_point_must_be_empty: bool = False


class LayoutStack:
    """One frame for the top level plus one for each open geometry collection.

    The top level frame is never popped.
    """

    def __init__(self) -> None:
        self._frames = [_Frame(Layout.NO_LAYOUT, True)]

    def _top(self) -> _Frame:
        if not self._frames:
            raise RuntimeError("layout stack is empty")
        return self._frames[-1]

    def push(self, layout: Layout) -> None:
        """Open a frame for a geometry collection with the given layout."""
        frame = _Frame(layout, self.top_in_base_type_collection())
        if layout == Layout.NO_LAYOUT:
            frame.layout = self.top_layout()
        elif layout in _COLLECTION_LAYOUTS:
            frame.layout = Layout(layout)
            frame.in_base_type_collection = False
        else:
            raise ValueError(f"unexpected layout {layout} for a collection frame")
        self._frames.append(frame)

    def pop(self) -> Layout:
        """Close the innermost collection frame and return its layout."""
        self._top()
        if self.at_top_level():
            raise RuntimeError("top level stack frame should never be popped")
        return self._frames.pop().layout

    def top_layout(self) -> Layout:
        """Return the layout of the innermost frame."""
        return self._top().layout

    def top_in_base_type_collection(self) -> bool:
        """Return whether the innermost frame is a base type context."""
        return self._top().in_base_type_collection

    def top_next_point_must_be_empty(self) -> bool:
        """Return whether the next base type geometry must be EMPTY."""
        return self._top().next_point_must_be_empty

    def set_top_layout(self, layout: Layout) -> None:
        """Set the layout of the innermost frame."""
        if layout == Layout.NO_LAYOUT:
            raise ValueError("the top layout cannot be set to no layout")
        if layout not in _CONCRETE_LAYOUTS:
            raise ValueError(f"unknown layout {layout}")
        self._top().layout = Layout(layout)

    def set_top_next_point_must_be_empty(self, value: bool) -> None:
        """Require, or stop requiring, the next base type geometry to be EMPTY."""
        if self.top_layout() != Layout.XYM:
            raise RuntimeError("only an XYM collection can require an EMPTY geometry")
        self._top().next_point_must_be_empty = value

    def at_top_level(self) -> bool:
        """Return whether no collection frame is open."""
        return len(self._frames) == 1

    def assert_no_geometry_collection_frames_left(self) -> None:
        """Raise RuntimeError if a collection frame is still open."""
        if not self.at_top_level():
            raise RuntimeError("layout stack still has geometrycollection frames")