"""Linear rings: closed lines that bound polygons."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from .flat import Geom1, double_area1, length1
from .geom import Layout


class LinearRing(Geom1):
    """A linear ring."""

    @classmethod
    def from_flat(cls, layout: Layout, flat_coords: Optional[Iterable[float]]) -> LinearRing:
        """Return a LinearRing built from flat coordinates."""
        return cls(layout, flat_coords)

    def area(self) -> float:
        """Return the signed area."""
        return double_area1(self.flat_coords, 0, len(self.flat_coords), self.stride) / 2

    def clone(self) -> LinearRing:
        """Return an independent copy."""
        return type(self)(self.layout, self.flat_coords, stride=self.stride, srid=self.srid)

    def length(self) -> float:
        """Return the length of the perimeter."""
        return length1(self.flat_coords, 0, len(self.flat_coords), self.stride)

    def set_coords(self, coords: Optional[Iterable[Sequence[float]]]) -> LinearRing:
        """Set the coordinates and return self."""
        self._set_coords(coords)
        return self

    def set_srid(self, srid: int) -> LinearRing:
        """Set the SRID and return self."""
        self.srid = srid
        return self

    def swap(self, other: LinearRing) -> None:
        """Exchange the contents of self and other."""
        self.__dict__, other.__dict__ = other.__dict__, self.__dict__