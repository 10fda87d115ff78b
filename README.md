# flatgeom

Geometry types for geospatial work. Every geometry keeps its coordinates in one
flat list of floats. Structure is recorded as end offsets into that list, so the
data stays compact and cheap to walk.

## Installing

```
pip install flatgeom
```

## Layouts and coordinates (`flatgeom.geom`)

A `Layout` says what each coordinate holds: `XY`, `XYZ`, `XYM` or `XYZM`
(`NO_LAYOUT` means unknown; `Layout(n)` for n above 4 is also valid).
`Layout.stride()` gives the number of values per coordinate. `m_index()` and
`z_index()` give the position of the M and Z values, or -1 when the layout has
none.

A `Coord` is a list of floats. It has `x()`, `y()`, `set(other)`, `clone()`
and `equal(layout, other)`. `equal` treats two NaN values as the same.

`set_srid(g, srid)` sets the SRID of any geometry that has a `set_srid` method
and raises `UnsupportedTypeError` otherwise. `transform_in_place(g, f)` calls
`f` on each coordinate of `g` and writes back what `f` changed.

Errors derive from `GeomError`: `LayoutMismatchError`, `StrideMismatchError`,
`UnsupportedLayoutError`, `UnsupportedTypeError` and `VerifyError`.

## Geometries

```python
from flatgeom.geom import Layout
from flatgeom.linestring import LineString
from flatgeom.linearring import LinearRing
from flatgeom.multilinestring import MultiLineString
from flatgeom.multipoint import MultiPoint

ls = LineString(Layout.XY).set_coords([[0.0, 0.0], [3.0, 4.0]])
ls.length()                 # 5.0
ls.coords()                 # [[0.0, 0.0], [3.0, 4.0]]
ls.flat_coords              # [0.0, 0.0, 3.0, 4.0]

ring = LinearRing(Layout.XY).set_coords(
    [[0, 0], [1, 0], [1, 1], [0, 1], [0, 0]]
)
ring.area()                 # 1.0, positive for a counter-clockwise ring

mls = MultiLineString(Layout.XY).set_coords([[[1, 2], [3, 4]], []])
mls.ends()                  # [4, 4]
mls.line_string(1).empty()  # True

mp = MultiPoint(Layout.XY).set_coords([[1, 2], None, [3, 4]])
mp.coord(1)                 # None: an empty point
mp.ends()                   # [2, 2, 4]
```

Each type also has `from_flat(...)` to build it from flat coordinates,
`clone()`, `set_srid(srid)`, `swap(other)`, `reverse()` and `verify()`, which
raises `VerifyError` when the flat coordinates, stride and ends disagree.

`LineString.interpolate(val, dim)` searches along one dimension and returns the
index of the segment and the fraction of the way along it:

```python
ls = LineString(Layout.XYM).set_coords([[1, 2, 0], [2, 4, 1], [3, 8, 2]])
ls.interpolate(0.5, 2)      # (0, 0.5)
```

`LineString.sub_line_string(start, stop)` returns the points from `start` up to
`stop`. `MultiLineString.push(line_string)` appends a line.

`set_coords` raises `StrideMismatchError` when a coordinate has the wrong number
of values. `push` raises `LayoutMismatchError` when the layouts differ.

The flat-array algorithms themselves (`deflate*`, `inflate*`, `length*`,
`double_area*`, `reverse*`) live in `flatgeom.flat` with the storage base
classes `Geom0` to `Geom3`.

## Reading Well Known Text

`flatgeom.wkt.lexer.Lexer` splits WKT into `Token`s and checks layouts and
strides as the parts of a geometry are reported to it, including the special
rules for `GEOMETRYCOLLECTION M`. It does not raise: the first problem is kept
in `last_error` as a `WKTSyntaxError`, and `lex()` then returns `Token.EOF`.

```python
from flatgeom.wkt.lexer import Lexer, Token

lexer = Lexer("POINT{0 0}")
lexer.lex()                 # (Token.POINT, None)
lexer.lex()                 # (Token.EOF, None)
print(lexer.last_error)
```

```
syntax error: invalid character at line 1, pos 5
LINE 1: POINT{0 0}
             ^
```

`flatgeom.wkt.layout_stack.LayoutStack` and `flatgeom.wkt.flat_repr` hold the
state a reader builds up: the layout of each open collection, and flat
coordinates with their ends.

## What it does not do

- There is no geometry collection type, and no point or polygon types.
- There is no WKT writer.
- There is no complete WKT reader: the lexer tokenizes and validates, but
  nothing in the package turns its tokens into geometry objects.

## Testing helpers

`flatgeom.geomtest.coords_equal_rel(c1, c2, epsilon)` compares two coordinates to
within a relative tolerance.

## Running the tests

```
pip install flatgeom[test]
pytest
```