"""Collections of points, which may include empty points."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from .flat import Geom2, inflate0
from .geom import Coord, Layout, StrideMismatchError


class MultiPoint(Geom2):
    """A collection of points.

    An empty point is recorded as an end equal to the previous end.
    """

    def __init__(
        self,
        layout: Layout = Layout.NO_LAYOUT,
        flat_coords: Optional[Iterable[float]] = None,
        ends: Optional[Iterable[int]] = None,
        *,
        stride: Optional[int] = None,
        srid: int = 0,
    ) -> None:
        super().__init__(layout, flat_coords, ends, stride=stride, srid=srid)
        if ends is None and self.flat_coords:
            count = len(self.flat_coords) // self.stride if self.stride > 0 else 0
            self._ends = [(i + 1) * self.stride for i in range(count)]

    @classmethod
    def from_flat(
        cls,
        layout: Layout,
        flat_coords: Optional[Iterable[float]],
        ends: Optional[Iterable[int]] = None,
    ) -> MultiPoint:
        """Return a MultiPoint from flat coordinates.

        Without ends every point is taken to be non-empty.
        """
        return cls(layout, flat_coords, ends)

    def area(self) -> float:
        """Return the area, i.e. zero."""
        return 0.0

    def clone(self) -> MultiPoint:
        """Return an independent copy."""
        return type(self)(
            self.layout, self.flat_coords, self._ends, stride=self.stride, srid=self.srid
        )

    def length(self) -> float:
        """Return the length, i.e. zero."""
        return 0.0

    def coord(self, i: int) -> Optional[Coord]:
        """Return the ith coordinate, or None if that point is empty."""
        before = self._ends[i - 1] if i > 0 else 0
        end = self._ends[i]
        if end == before:
            return None
        return Coord(self.flat_coords[before:end])

    def coords(self) -> list[Optional[Coord]]:  # type: ignore[override]
        """Return all coordinates, with None for empty points."""
        coords: list[Optional[Coord]] = []
        offset = 0
        prev_end = 0
        for end in self._ends:
            if end != prev_end:
                coords.append(inflate0(self.flat_coords, offset, offset + self.stride, self.stride))
                offset += self.stride
            else:
                coords.append(None)
            prev_end = end
        return coords

    def num_coords(self) -> int:
        """Return the number of points, empty ones included."""
        return len(self._ends)

    def num_points(self) -> int:
        """Return the number of points, empty ones included."""
        return len(self._ends)

    def set_coords(self, coords: Optional[Iterable[Optional[Sequence[float]]]]) -> MultiPoint:
        """Set the coordinates, None meaning an empty point, and return self."""
        flat: list[float] = []
        ends: list[int] = []
        for c in coords or ():
            if c is not None:
                if len(c) != self.stride:
                    raise StrideMismatchError(len(c), self.stride)
                flat.extend(c)
            ends.append(len(flat))
        self.flat_coords = flat
        self._ends = ends
        return self

    def set_srid(self, srid: int) -> MultiPoint:
        """Set the SRID and return self."""
        self.srid = srid
        return self

    def swap(self, other: MultiPoint) -> None:
        """Exchange the contents of self and other."""
        self.__dict__, other.__dict__ = other.__dict__, self.__dict__