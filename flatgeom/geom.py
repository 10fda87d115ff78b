"""Layouts, coordinates and errors shared by all geometry types."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Any, Callable, Sequence


class Layout(IntEnum):
    """The meaning of each ordinate of an N-dimensional coordinate.

    Values above XYZM are valid layouts: the first ordinates are X, Y, Z and
    M and the extra ones have no special meaning.
    """

    NO_LAYOUT = 0
    XY = 1
    XYZ = 2
    XYM = 3
    XYZM = 4

    @classmethod
    def _missing_(cls, value: object) -> Layout | None:
        if isinstance(value, int) and not isinstance(value, bool) and value > 4:
            member = int.__new__(cls, value)
            member._name_ = f"Layout({value})"
            member._value_ = value
            return cls._value2member_map_.setdefault(value, member)
        return None

    def __str__(self) -> str:
        if self is Layout.NO_LAYOUT:
            return "NoLayout"
        if int(self) <= 4:
            return self.name
        return f"Layout({int(self)})"

    def stride(self) -> int:
        """Return the number of dimensions."""
        return {0: 0, 1: 2, 2: 3, 3: 3, 4: 4}.get(int(self), int(self))

    def m_index(self) -> int:
        """Return the index of the M dimension, or -1 if there is none."""
        if self in (Layout.NO_LAYOUT, Layout.XY, Layout.XYZ):
            return -1
        if self is Layout.XYM:
            return 2
        return 3

    def z_index(self) -> int:
        """Return the index of the Z dimension, or -1 if there is none."""
        if self in (Layout.NO_LAYOUT, Layout.XY, Layout.XYM):
            return -1
        return 2


class Coord(list):
    """An N-dimensional coordinate."""

    def clone(self) -> Coord:
        """Return an independent copy."""
        return Coord(self)

    def x(self) -> float:
        """Return the first ordinate."""
        return self[0]

    def y(self) -> float:
        """Return the second ordinate."""
        return self[1]

    def set(self, other: Sequence[float]) -> None:
        """Copy as many ordinates of other as fit into this coordinate."""
        n = min(len(self), len(other))
        self[:n] = other[:n]

    def equal(self, layout: Layout, other: Sequence[float]) -> bool:
        """Compare the ordinates covered by layout, treating NaNs as equal."""
        stride = Layout(layout).stride()
        num_ords = min(len(self), stride)
        if (len(self) < stride or len(other) < stride) and len(self) != len(other):
            return False
        for a, b in zip(self[:num_ords], other[:num_ords]):
            if math.isnan(a) or math.isnan(b):
                if not (math.isnan(a) and math.isnan(b)):
                    return False
            elif a != b:
                return False
        return True


class GeomError(Exception):
    """Base class for geometry errors."""


class LayoutMismatchError(GeomError):
    """Geometries with different layouts cannot be combined."""

    def __init__(self, got: Layout, want: Layout) -> None:
        self.got = got
        self.want = want
        super().__init__(f"geom: layout mismatch, got {got!s}, want {want!s}")


class StrideMismatchError(GeomError):
    """A coordinate does not have the expected number of ordinates."""

    def __init__(self, got: int, want: int) -> None:
        self.got = got
        self.want = want
        super().__init__(f"geom: stride mismatch, got {got}, want {want}")


class UnsupportedLayoutError(GeomError):
    """The requested layout is not supported."""

    def __init__(self, layout: Layout) -> None:
        self.layout = layout
        super().__init__(f"geom: unsupported layout {layout!s}")


class UnsupportedTypeError(GeomError):
    """The requested type is not supported."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"geom: unsupported type {type(value).__name__}")


class VerifyError(GeomError):
    """A geometry's internal structure is inconsistent."""


def set_srid(g: Any, srid: int) -> Any:
    """Set the SRID of an arbitrary geometry and return it."""
    setter = getattr(g, "set_srid", None)
    if g is None or not callable(setter):
        raise UnsupportedTypeError(g)
    return setter(srid)


def _value_of(g: Any, name: str) -> Any:
    value = getattr(g, name)
    return value() if callable(value) else value


def transform_in_place(g: Any, f: Callable[[Coord], None]) -> Any:
    """Replace every coordinate of g with the result of f mutating it."""
    flat_coords = _value_of(g, "flat_coords")
    stride = _value_of(g, "stride")
    if stride > 0:
        for start in range(0, len(flat_coords), stride):
            coord = Coord(flat_coords[start:start + stride])
            f(coord)
            flat_coords[start:start + stride] = coord
    return g