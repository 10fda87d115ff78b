"""Collections of line strings."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from .flat import Geom2, length2
from .geom import LayoutMismatchError, Layout
from .linestring import LineString


class MultiLineString(Geom2):
    """A collection of LineStrings."""

    @classmethod
    def from_flat(
        cls,
        layout: Layout,
        flat_coords: Optional[Iterable[float]],
        ends: Optional[Iterable[int]],
    ) -> MultiLineString:
        """Return a MultiLineString built from flat coordinates and ends."""
        return cls(layout, flat_coords, ends)

    def area(self) -> float:
        """Return the area, i.e. zero."""
        return 0.0

    def clone(self) -> MultiLineString:
        """Return an independent copy."""
        return type(self)(
            self.layout, self.flat_coords, self._ends, stride=self.stride, srid=self.srid
        )

    def length(self) -> float:
        """Return the sum of the lengths of the LineStrings."""
        return length2(self.flat_coords, 0, self._ends, self.stride)

    def line_string(self, i: int) -> LineString:
        """Return the ith LineString."""
        offset = self._ends[i - 1] if i > 0 else 0
        end = self._ends[i]
        if offset == end:
            return LineString(self.layout)
        return LineString.from_flat(self.layout, self.flat_coords[offset:end])

    def num_line_strings(self) -> int:
        """Return the number of LineStrings."""
        return len(self._ends)

    def push(self, line_string: LineString) -> MultiLineString:
        """Append a LineString and return self."""
        if line_string.layout != self.layout:
            raise LayoutMismatchError(line_string.layout, self.layout)
        self.flat_coords.extend(line_string.flat_coords)
        self._ends.append(len(self.flat_coords))
        return self

    def set_coords(
        self, coords: Optional[Iterable[Optional[Iterable[Sequence[float]]]]]
    ) -> MultiLineString:
        """Set the coordinates and return self."""
        self._set_coords(coords)
        return self

    def set_srid(self, srid: int) -> MultiLineString:
        """Set the SRID and return self."""
        self.srid = srid
        return self

    def swap(self, other: MultiLineString) -> None:
        """Exchange the contents of self and other."""
        self.__dict__, other.__dict__ = other.__dict__, self.__dict__