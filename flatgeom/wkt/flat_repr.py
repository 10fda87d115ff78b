"""Flat coordinate representations built up while reading WKT."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence


@dataclass
class GeomFlatCoordsRepr:
    """Flat coordinates with the end index of each part."""

    flat_coords: Optional[list[float]] = None
    ends: list[int] = field(default_factory=list)


@dataclass
class MultiPolygonFlatCoordsRepr:
    """Flat coordinates with the ring ends of each polygon."""

    flat_coords: list[float] = field(default_factory=list)
    endss: list[list[int]] = field(default_factory=list)


def make_geom_flat_coords_repr(flat_coords: Sequence[float]) -> GeomFlatCoordsRepr:
    """Return a single part ending at the end of flat_coords."""
    coords = list(flat_coords)
    return GeomFlatCoordsRepr(coords, [len(coords)])


def append_geom_flat_coords_reprs(
    p1: GeomFlatCoordsRepr, p2: GeomFlatCoordsRepr
) -> GeomFlatCoordsRepr:
    """Return p1 followed by p2, with p2's ends shifted past p1."""
    shift = p1.ends[-1] if p1.ends else 0
    return GeomFlatCoordsRepr(
        list(p1.flat_coords or ()) + list(p2.flat_coords or ()),
        list(p1.ends) + [end + shift for end in p2.ends],
    )


def make_multi_polygon_flat_coords_repr(
    p: GeomFlatCoordsRepr,
) -> MultiPolygonFlatCoordsRepr:
    """Return a multipolygon of one polygon; None coordinates mean EMPTY."""
    if p.flat_coords is None:
        return MultiPolygonFlatCoordsRepr([], [[]])
    return MultiPolygonFlatCoordsRepr(list(p.flat_coords), [list(p.ends)])


def append_multi_polygon_flat_coords_repr(
    p1: MultiPolygonFlatCoordsRepr, p2: MultiPolygonFlatCoordsRepr
) -> MultiPolygonFlatCoordsRepr:
    """Return p1 followed by p2, with p2's ends shifted past p1."""
    shift = next((ends[-1] for ends in reversed(p1.endss) if ends), 0)
    return MultiPolygonFlatCoordsRepr(
        list(p1.flat_coords) + list(p2.flat_coords),
        [list(ends) for ends in p1.endss]
        + [[end + shift for end in ends] for ends in p2.endss],
    )