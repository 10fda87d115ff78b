"""Flat coordinate storage and the algorithms that work on it."""

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence

from .geom import Coord, Layout, StrideMismatchError, VerifyError

INCORRECT_END = "geom: incorrect end"
LENGTH_STRIDE_MISMATCH = "geom: length/stride mismatch"
MISALIGNED_END = "geom: misaligned end"
NON_EMPTY_ENDS = "geom: non-empty ends"
NON_EMPTY_ENDSS = "geom: non-empty endss"
NON_EMPTY_FLAT_COORDS = "geom: non-empty flatCoords"
OUT_OF_ORDER_END = "geom: out-of-order end"
STRIDE_LAYOUT_MISMATCH = "geom: stride/layout mismatch"


class Geom0:
    """Storage for a geometry holding at most one coordinate."""

    def __init__(
        self,
        layout: Layout = Layout.NO_LAYOUT,
        flat_coords: Optional[Iterable[float]] = None,
        *,
        stride: Optional[int] = None,
        srid: int = 0,
    ) -> None:
        self.layout = Layout(layout)
        self.stride = self.layout.stride() if stride is None else stride
        self.flat_coords = [] if flat_coords is None else list(flat_coords)
        self.srid = srid

    def _state(self) -> tuple:
        return (self.layout, self.stride, self.flat_coords, self.srid)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._state() == other._state()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(layout={self.layout!s}, stride={self.stride}, "
            f"flat_coords={self.flat_coords!r}, srid={self.srid})"
        )

    def coords(self) -> Coord:
        """Return the single coordinate."""
        return inflate0(self.flat_coords, 0, len(self.flat_coords), self.stride)

    def empty(self) -> bool:
        """Return True if there are no coordinates."""
        return not self.flat_coords

    def ends(self) -> list[int]:
        """Return the end indexes of sub-structures: none."""
        return []

    def endss(self) -> list[list[int]]:
        """Return the end indexes of sub-sub-structures: none."""
        return []

    def num_coords(self) -> int:
        """Return the number of coordinates, i.e. 1."""
        return 1

    def _set_coords(self, coord: Sequence[float]) -> None:
        self.flat_coords = deflate0([], coord, self.stride)

    def _check_stride(self) -> bool:
        """Check stride against layout; return True if stride is zero."""
        if self.stride != self.layout.stride():
            raise VerifyError(STRIDE_LAYOUT_MISMATCH)
        if self.stride == 0:
            if self.flat_coords:
                raise VerifyError(NON_EMPTY_FLAT_COORDS)
            return True
        return False

    def verify(self) -> None:
        """Raise VerifyError if the internal structure is inconsistent."""
        if self._check_stride():
            return
        if len(self.flat_coords) != self.stride:
            raise VerifyError(LENGTH_STRIDE_MISMATCH)


class Geom1(Geom0):
    """Storage for a geometry holding a sequence of coordinates."""

    def coord(self, i: int) -> Coord:
        """Return a copy of the ith coordinate."""
        if not 0 <= i < self.num_coords():
            raise IndexError(f"coordinate index {i} out of range")
        return Coord(self.flat_coords[i * self.stride:(i + 1) * self.stride])

    def coords(self) -> list[Coord]:  # type: ignore[override]
        """Return all coordinates."""
        return inflate1(self.flat_coords, 0, len(self.flat_coords), self.stride)

    def num_coords(self) -> int:
        """Return the number of coordinates."""
        return len(self.flat_coords) // self.stride

    def reverse(self) -> None:
        """Reverse the order of the coordinates."""
        reverse1(self.flat_coords, 0, len(self.flat_coords), self.stride)

    def _set_coords(self, coords: Iterable[Sequence[float]]) -> None:  # type: ignore[override]
        self.flat_coords = deflate1([], coords, self.stride)

    def verify(self) -> None:
        """Raise VerifyError if the internal structure is inconsistent."""
        if self._check_stride():
            return
        if len(self.flat_coords) % self.stride != 0:
            raise VerifyError(LENGTH_STRIDE_MISMATCH)


def _check_ends(ends: Iterable[int], offset: int, stride: int) -> int:
    for end in ends:
        if end % stride != 0:
            raise VerifyError(MISALIGNED_END)
        if end < offset:
            raise VerifyError(OUT_OF_ORDER_END)
        offset = end
    return offset


class Geom2(Geom1):
    """Storage for a geometry holding sequences of coordinates."""

    def __init__(
        self,
        layout: Layout = Layout.NO_LAYOUT,
        flat_coords: Optional[Iterable[float]] = None,
        ends: Optional[Iterable[int]] = None,
        *,
        stride: Optional[int] = None,
        srid: int = 0,
    ) -> None:
        super().__init__(layout, flat_coords, stride=stride, srid=srid)
        self._ends = [] if ends is None else list(ends)

    def _state(self) -> tuple:
        return super()._state() + (self._ends,)

    def __repr__(self) -> str:
        return f"{super().__repr__()[:-1]}, ends={self._ends!r})"

    def coords(self) -> list[list[Coord]]:  # type: ignore[override]
        """Return the coordinates of every sub-structure."""
        return inflate2(self.flat_coords, 0, self._ends, self.stride)

    def ends(self) -> list[int]:
        """Return the end indexes of all sub-structures."""
        return self._ends

    def reverse(self) -> None:
        """Reverse the coordinates of each sub-structure."""
        reverse2(self.flat_coords, 0, self._ends, self.stride)

    def _set_coords(self, coords: Iterable[Iterable[Sequence[float]]]) -> None:  # type: ignore[override]
        self.flat_coords, self._ends = deflate2([], [], coords, self.stride)

    def verify(self) -> None:
        """Raise VerifyError if the internal structure is inconsistent."""
        if self.stride != self.layout.stride():
            raise VerifyError(STRIDE_LAYOUT_MISMATCH)
        if self.stride == 0:
            if self.flat_coords:
                raise VerifyError(NON_EMPTY_FLAT_COORDS)
            if self._ends:
                raise VerifyError(NON_EMPTY_ENDS)
            return
        if len(self.flat_coords) % self.stride != 0:
            raise VerifyError(LENGTH_STRIDE_MISMATCH)
        if _check_ends(self._ends, 0, self.stride) != len(self.flat_coords):
            raise VerifyError(INCORRECT_END)


class Geom3(Geom1):
    """Storage for a geometry holding sequences of sequences of coordinates."""

    def __init__(
        self,
        layout: Layout = Layout.NO_LAYOUT,
        flat_coords: Optional[Iterable[float]] = None,
        endss: Optional[Iterable[Iterable[int]]] = None,
        *,
        stride: Optional[int] = None,
        srid: int = 0,
    ) -> None:
        super().__init__(layout, flat_coords, stride=stride, srid=srid)
        self._endss = [] if endss is None else [list(ends) for ends in endss]

    def _state(self) -> tuple:
        return super()._state() + (self._endss,)

    def __repr__(self) -> str:
        return f"{super().__repr__()[:-1]}, endss={self._endss!r})"

    def coords(self) -> list[list[list[Coord]]]:  # type: ignore[override]
        """Return the coordinates of every sub-sub-structure."""
        return inflate3(self.flat_coords, 0, self._endss, self.stride)

    def endss(self) -> list[list[int]]:
        """Return the end indexes of all sub-sub-structures."""
        return self._endss

    def reverse(self) -> None:
        """Reverse the coordinates of each sub-sub-structure."""
        reverse3(self.flat_coords, 0, self._endss, self.stride)

    def _set_coords(self, coords: Iterable[Iterable[Iterable[Sequence[float]]]]) -> None:  # type: ignore[override]
        self.flat_coords, self._endss = deflate3([], [], coords, self.stride)

    def verify(self) -> None:
        """Raise VerifyError if the internal structure is inconsistent."""
        if self.stride != self.layout.stride():
            raise VerifyError(STRIDE_LAYOUT_MISMATCH)
        if self.stride == 0:
            if self.flat_coords:
                raise VerifyError(NON_EMPTY_FLAT_COORDS)
            if self._endss:
                raise VerifyError(NON_EMPTY_ENDSS)
            return
        if len(self.flat_coords) % self.stride != 0:
            raise VerifyError(LENGTH_STRIDE_MISMATCH)
        offset = 0
        for ends in self._endss:
            offset = _check_ends(ends, offset, self.stride)
        if offset != len(self.flat_coords):
            raise VerifyError(INCORRECT_END)


def double_area1(flat_coords: Sequence[float], offset: int, end: int, stride: int) -> float:
    """Return twice the signed area of one ring."""
    return sum(
        (
            (flat_coords[i + 1] - flat_coords[i + 1 - stride])
            * (flat_coords[i] + flat_coords[i - stride])
            for i in range(offset + stride, end, stride)
        ),
        0.0,
    )


def double_area2(flat_coords: Sequence[float], offset: int, ends: Sequence[int], stride: int) -> float:
    """Return twice the area of a polygon: the first ring minus the others."""
    double_area = 0.0
    for i, end in enumerate(ends):
        da = double_area1(flat_coords, offset, end, stride)
        double_area = da if i == 0 else double_area - da
        offset = end
    return double_area


def double_area3(
    flat_coords: Sequence[float], offset: int, endss: Sequence[Sequence[int]], stride: int
) -> float:
    """Return twice the total area of several polygons."""
    double_area = 0.0
    for ends in endss:
        double_area += double_area2(flat_coords, offset, ends, stride)
        offset = ends[-1]
    return double_area


def _extend(out: list[float], coord: Sequence[float], stride: int) -> None:
    if len(coord) != stride:
        raise StrideMismatchError(len(coord), stride)
    out.extend(coord)


def deflate0(flat_coords: Optional[Sequence[float]], coord: Sequence[float], stride: int) -> list[float]:
    """Return flat_coords followed by coord."""
    out = list(flat_coords or ())
    _extend(out, coord, stride)
    return out


def deflate1(
    flat_coords: Optional[Sequence[float]], coords1: Optional[Iterable[Sequence[float]]], stride: int
) -> list[float]:
    """Return flat_coords followed by all of coords1."""
    out = list(flat_coords or ())
    for coord in coords1 or ():
        _extend(out, coord, stride)
    return out


def deflate2(
    flat_coords: Optional[Sequence[float]],
    ends: Optional[Sequence[int]],
    coords2: Optional[Iterable[Iterable[Sequence[float]]]],
    stride: int,
) -> tuple[list[float], list[int]]:
    """Append each sequence of coords2, recording where each one ends."""
    out = list(flat_coords or ())
    out_ends = list(ends or ())
    for coords1 in coords2 or ():
        for coord in coords1 or ():
            _extend(out, coord, stride)
        out_ends.append(len(out))
    return out, out_ends


def deflate3(
    flat_coords: Optional[Sequence[float]],
    endss: Optional[Sequence[Sequence[int]]],
    coords3: Optional[Iterable[Iterable[Iterable[Sequence[float]]]]],
    stride: int,
) -> tuple[list[float], list[list[int]]]:
    """Append each sequence of sequences of coords3, recording their ends."""
    out = list(flat_coords or ())
    out_endss = [list(ends) for ends in endss or ()]
    for coords2 in coords3 or ():
        ends: list[int] = []
        for coords1 in coords2 or ():
            for coord in coords1 or ():
                _extend(out, coord, stride)
            ends.append(len(out))
        out_endss.append(ends)
    return out, out_endss


def inflate0(flat_coords: Sequence[float], offset: int, end: int, stride: int) -> Coord:
    """Return the single coordinate between offset and end."""
    if offset + stride != end:
        raise ValueError("geom: stride mismatch")
    return Coord(flat_coords[offset:end])


def inflate1(flat_coords: Sequence[float], offset: int, end: int, stride: int) -> list[Coord]:
    """Return the coordinates between offset and end."""
    count = (end - offset) // stride
    return [
        inflate0(flat_coords, start, start + stride, stride)
        for start in range(offset, offset + count * stride, stride)
    ]


def inflate2(flat_coords: Sequence[float], offset: int, ends: Sequence[int], stride: int) -> list[list[Coord]]:
    """Return the coordinates of each sub-structure."""
    coords2 = []
    for end in ends:
        coords2.append(inflate1(flat_coords, offset, end, stride))
        offset = end
    return coords2


def inflate3(
    flat_coords: Sequence[float], offset: int, endss: Sequence[Sequence[int]], stride: int
) -> list[list[list[Coord]]]:
    """Return the coordinates of each sub-sub-structure."""
    coords3 = []
    for ends in endss:
        coords3.append(inflate2(flat_coords, offset, ends, stride))
        if ends:
            offset = ends[-1]
    return coords3


def length1(flat_coords: Sequence[float], offset: int, end: int, stride: int) -> float:
    """Return the planar length of the line between offset and end."""
    length = 0.0
    for i in range(offset + stride, end, stride):
        dx = flat_coords[i] - flat_coords[i - stride]
        dy = flat_coords[i + 1] - flat_coords[i + 1 - stride]
        length += math.sqrt(dx * dx + dy * dy)
    return length


def length2(flat_coords: Sequence[float], offset: int, ends: Sequence[int], stride: int) -> float:
    """Return the total length of several lines."""
    length = 0.0
    for end in ends:
        length += length1(flat_coords, offset, end, stride)
        offset = end
    return length


def length3(flat_coords: Sequence[float], offset: int, endss: Sequence[Sequence[int]], stride: int) -> float:
    """Return the total length of several groups of lines."""
    length = 0.0
    for ends in endss:
        length += length2(flat_coords, offset, ends, stride)
        offset = ends[-1]
    return length


def reverse1(flat_coords: list[float], offset: int, end: int, stride: int) -> None:
    """Reverse, in place, the order of the coordinates between offset and end."""
    if end <= offset or stride <= 0:
        return
    chunks = [flat_coords[i:i + stride] for i in range(offset, end, stride)]
    flat_coords[offset:end] = [value for chunk in reversed(chunks) for value in chunk]


def reverse2(flat_coords: list[float], offset: int, ends: Sequence[int], stride: int) -> None:
    """Reverse, in place, the coordinates of each sub-structure."""
    for end in ends:
        reverse1(flat_coords, offset, end, stride)
        offset = end


def reverse3(flat_coords: list[float], offset: int, endss: Sequence[Sequence[int]], stride: int) -> None:
    """Reverse, in place, the coordinates of each sub-sub-structure."""
    for ends in endss:
        if not ends:
            continue
        reverse2(flat_coords, offset, ends, stride)
        offset = ends[-1]