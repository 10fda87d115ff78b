"""Line strings: single unbroken lines through zero or more points."""

from __future__ import annotations

from bisect import bisect_right
from typing import Iterable, Optional, Sequence

from .flat import Geom1, length1
from .geom import Layout


class LineString(Geom1):
    """A single, unbroken line, linearly interpolated between its points."""

    @classmethod
    def from_flat(cls, layout: Layout, flat_coords: Optional[Iterable[float]]) -> LineString:
        """Return a LineString built from flat coordinates."""
        return cls(layout, flat_coords)

    def area(self) -> float:
        """Return the area, i.e. zero."""
        return 0.0

    def clone(self) -> LineString:
        """Return an independent copy."""
        return type(self)(self.layout, self.flat_coords, stride=self.stride, srid=self.srid)

    def interpolate(self, val: float, dim: int) -> tuple[int, float]:
        """Return the index and fractional delta of val in dimension dim."""
        n = len(self.flat_coords)
        if n == 0:
            raise ValueError("geom: empty linestring")
        stride = self.stride
        if val <= self.flat_coords[dim]:
            return 0, 0.0
        if self.flat_coords[n - stride + dim] <= val:
            return (n - 1) // stride, 0.0
        values = self.flat_coords[dim::stride]
        low = bisect_right(values, val) - 1
        val0 = values[low]
        if val == val0:
            return low, 0.0
        val1 = values[low + 1]
        return low, (val - val0) / (val1 - val0)

    def length(self) -> float:
        """Return the length of the line."""
        return length1(self.flat_coords, 0, len(self.flat_coords), self.stride)

    def set_coords(self, coords: Optional[Iterable[Sequence[float]]]) -> LineString:
        """Set the coordinates and return self."""
        self._set_coords(coords)
        return self

    def set_srid(self, srid: int) -> LineString:
        """Set the SRID and return self."""
        self.srid = srid
        return self

    def sub_line_string(self, start: int, stop: int) -> LineString:
        """Return the LineString of the points from index start up to stop."""
        return LineString.from_flat(
            self.layout, self.flat_coords[start * self.stride:stop * self.stride]
        )

    def swap(self, other: LineString) -> None:
        """Exchange the contents of self and other."""
        self.__dict__, other.__dict__ = other.__dict__, self.__dict__