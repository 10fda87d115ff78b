"""Tokenizer and layout bookkeeping for reading WKT."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional, Sequence

from ..geom import Layout
from .errors import WKTSyntaxError
from .layout_stack import LayoutStack

# How the layout of a geometry is found:
#
# A base type keyword has no Z, M or ZM suffix (POINT, not POINTZ). The layout
# comes from the first keyword that carries a suffix; failing that, from the
# number of ordinates of the first point. A collection takes the layout of its
# first member.
#
# Special cases for collections:
# 1. GEOMETRYCOLLECTION without a suffix may hold XYM members, although a base
#    type geometry is otherwise only XY, XYZ or XYZM.
# 2. A base type EMPTY geometry inside a collection with a suffix takes the
#    collection's layout, although it is otherwise XY.
# 3. So inside an XYM collection a base type geometry is allowed only if it is
#    EMPTY: GEOMETRYCOLLECTION M (POINT EMPTY) is read, but
#    GEOMETRYCOLLECTION M (POINT(0 0 0)) is not.


class Token(Enum):
    """The kinds of token found in WKT."""

    EOF = "$end"
    LPAREN = "'('"
    RPAREN = "')'"
    COMMA = "','"
    NUM = "NUM"
    EMPTY = "EMPTY"
    POINT = "POINT"
    POINTM = "POINTM"
    POINTZ = "POINTZ"
    POINTZM = "POINTZM"
    LINESTRING = "LINESTRING"
    LINESTRINGM = "LINESTRINGM"
    LINESTRINGZ = "LINESTRINGZ"
    LINESTRINGZM = "LINESTRINGZM"
    POLYGON = "POLYGON"
    POLYGONM = "POLYGONM"
    POLYGONZ = "POLYGONZ"
    POLYGONZM = "POLYGONZM"
    MULTIPOINT = "MULTIPOINT"
    MULTIPOINTM = "MULTIPOINTM"
    MULTIPOINTZ = "MULTIPOINTZ"
    MULTIPOINTZM = "MULTIPOINTZM"
    MULTILINESTRING = "MULTILINESTRING"
    MULTILINESTRINGM = "MULTILINESTRINGM"
    MULTILINESTRINGZ = "MULTILINESTRINGZ"
    MULTILINESTRINGZM = "MULTILINESTRINGZM"
    MULTIPOLYGON = "MULTIPOLYGON"
    MULTIPOLYGONM = "MULTIPOLYGONM"
    MULTIPOLYGONZ = "MULTIPOLYGONZ"
    MULTIPOLYGONZM = "MULTIPOLYGONZM"
    GEOMETRYCOLLECTION = "GEOMETRYCOLLECTION"
    GEOMETRYCOLLECTIONM = "GEOMETRYCOLLECTIONM"
    GEOMETRYCOLLECTIONZ = "GEOMETRYCOLLECTIONZ"
    GEOMETRYCOLLECTIONZM = "GEOMETRYCOLLECTIONZM"


_PUNCTUATION = {"(": Token.LPAREN, ")": Token.RPAREN, ",": Token.COMMA}
_NON_KEYWORDS = {Token.EOF, Token.LPAREN, Token.RPAREN, Token.COMMA, Token.NUM}
_KEYWORDS = {t.value: t for t in Token if t not in _NON_KEYWORDS}

_KNOWN_LAYOUTS = (Layout.NO_LAYOUT, Layout.XY, Layout.XYM, Layout.XYZ, Layout.XYZM)
_LAYOUT_NAMES = {
    Layout.NO_LAYOUT: "not XYM",
    Layout.XY: "XY",
    Layout.XYM: "XYM",
    Layout.XYZ: "XYZ",
    Layout.XYZM: "XYZM",
}
_STRIDE_LAYOUTS = {2: Layout.XY, 3: Layout.XYZ, 4: Layout.XYZM}

_M_VARIANT_HINT = "the M variant is required for non-empty XYM geometries in GEOMETRYCOLLECTIONs"


@dataclass
class _Pos:
    """A position in the input, both absolute and as line and column."""

    wkt_pos: int = 0
    line_num: int = 0
    line_start: int = 0
    line_pos: int = 0

    def advance_one(self) -> None:
        self.wkt_pos += 1
        self.line_pos += 1

    def advance_line(self) -> None:
        self.wkt_pos += 1
        self.line_num += 1
        self.line_start = self.wkt_pos
        self.line_pos = 0


def _is_num_char(c: str) -> bool:
    return c != "" and (c in "-.eE+" or c.isdecimal())


def _is_valid_first_num_char(c: str) -> bool:
    # A leading '+' is not accepted, and a number must not start with an
    # exponent, which keeps numbers apart from keywords.
    if c in ("+", "e", "E"):
        return False
    return _is_num_char(c)


def _check_layout(layout: Layout) -> Layout:
    if layout not in _KNOWN_LAYOUTS:
        raise ValueError(f"unknown layout {int(layout)}")
    return Layout(layout)


def keyword_token(tok_str: str) -> Token:
    """Return the token for a WKT keyword, or Token.EOF if there is none."""
    return _KEYWORDS.get(tok_str.upper(), Token.EOF)


def is_valid_stride_for_layout(stride: int, layout: Layout) -> bool:
    """Return whether a point with stride ordinates fits layout."""
    layout = _check_layout(Layout(layout))
    if layout == Layout.NO_LAYOUT:
        return True
    return stride == layout.stride()


def default_layout_for_stride(stride: int) -> Layout:
    """Return the layout a base type geometry with stride ordinates has."""
    try:
        return _STRIDE_LAYOUTS[stride]
    except KeyError:
        raise ValueError(f"unsupported stride {stride}") from None


def is_compatible_layout(outer_layout: Layout, inner_layout: Layout) -> bool:
    """Return whether inner_layout may appear inside outer_layout."""
    outer = _check_layout(Layout(outer_layout))
    inner = _check_layout(Layout(inner_layout))
    return outer == inner or outer == Layout.NO_LAYOUT


def layout_name(layout: Layout) -> str:
    """Return the name of layout as used in error messages."""
    return _LAYOUT_NAMES[_check_layout(Layout(layout))]


class Lexer:
    """Splits WKT into tokens and checks the layouts met along the way.

    Errors do not raise: the first one is kept in last_error, and lex then
    returns Token.EOF.
    """

    def __init__(self, wkt: str) -> None:
        self.wkt = wkt
        self._cur = _Pos()
        self._last = _Pos()
        self.ret: Any = None
        self.layout_stack = LayoutStack()
        self.last_error: Optional[WKTSyntaxError] = None

    # Tokenizing.

    def lex(self) -> tuple[Token, Optional[float]]:
        """Return the next token and, for numbers, its value."""
        self._trim_left()
        self._last = replace(self._cur)
        c = self._peek()
        if c == "":
            return Token.EOF, None
        if c in _PUNCTUATION:
            self._next()
            return _PUNCTUATION[c], None
        if c.isalpha():
            return self._keyword(), None
        if _is_valid_first_num_char(c):
            return self._num()
        self._next()
        self._set_lex_error("character")
        return Token.EOF, None

    def _keyword(self) -> Token:
        chars = []
        while self._peek().isalpha():
            chars.append(self._next().upper())
        word = "".join(chars)
        if word != "EMPTY":
            self._trim_left()
            if self._peek().upper() == "Z":
                self._next()
                word += "Z"
            if self._peek().upper() == "M":
                self._next()
                word += "M"
        token = keyword_token(word)
        if token is Token.EOF:
            self._set_lex_error("keyword")
        return token

    def _num(self) -> tuple[Token, Optional[float]]:
        chars = []
        while _is_num_char(self._peek()):
            chars.append(self._next())
        text = "".join(chars)
        try:
            if not text.isascii():
                raise ValueError(text)
            value = float(text)
            if math.isinf(value):
                raise ValueError(text)
        except ValueError:
            self._set_lex_error("number")
            return Token.EOF, None
        return Token.NUM, value

    def _peek(self) -> str:
        if self._cur.wkt_pos >= len(self.wkt):
            return ""
        return self.wkt[self._cur.wkt_pos]

    def _next(self) -> str:
        c = self._peek()
        if c == "\n":
            self._cur.advance_line()
        elif c:
            self._cur.advance_one()
        return c

    def _trim_left(self) -> None:
        while self._peek().isspace():
            self._next()

    # Layout checks called while parsing.

    def validate_stride_and_set_default_layout_if_no_layout(self, stride: int) -> bool:
        """Check a point's stride against the layout, fixing it if unknown."""
        if not is_valid_stride_for_layout(stride, self._cur_layout()):
            self._set_incorrect_stride_error(stride)
            return False
        self._set_layout_if_no_layout(default_layout_for_stride(stride))
        return True

    def validate_non_empty_geometry_allowed(self) -> bool:
        """Check that a non-empty geometry may follow the last keyword."""
        if self.layout_stack.top_next_point_must_be_empty():
            if self._cur_layout() != Layout.XYM:
                raise RuntimeError("next point must be empty but layout is not XYM")
            self._set_incorrect_layout_error(Layout.NO_LAYOUT, _M_VARIANT_HINT)
            return False
        return True

    def validate_and_set_layout_if_no_layout(self, layout: Layout) -> bool:
        """Check a keyword's layout against the layout, fixing it if unknown."""
        if not is_compatible_layout(self._cur_layout(), layout):
            self._set_incorrect_layout_error(layout)
            return False
        self._set_layout_if_no_layout(layout)
        return True

    def validate_base_geometry_type_allowed(self) -> bool:
        """Check that a keyword without a suffix is allowed here."""
        if not self.layout_stack.top_in_base_type_collection():
            # Inside an XYM collection a base type geometry must be EMPTY.
            if self._cur_layout() == Layout.XYM:
                self.layout_stack.set_top_next_point_must_be_empty(True)
            return True
        if self._cur_layout() == Layout.XYM:
            if self.layout_stack.at_top_level():
                raise RuntimeError("base geometry check for XYM layout at top level")
            self._set_incorrect_layout_error(Layout.NO_LAYOUT, _M_VARIANT_HINT)
            return False
        return True

    def validate_base_type_empty_allowed(self) -> bool:
        """Check that EMPTY after a keyword without a suffix is allowed here."""
        if not self.layout_stack.top_in_base_type_collection():
            if self._cur_layout() == Layout.XYM:
                self.layout_stack.set_top_next_point_must_be_empty(False)
            return True
        layout = self._cur_layout()
        if layout == Layout.NO_LAYOUT:
            self._set_layout_if_no_layout(Layout.XY)
            return True
        if layout == Layout.XY:
            return True
        self._set_incorrect_layout_error(Layout.XY, "EMPTY is XY layout in base geometry type")
        return False

    def validate_and_push_layout_stack_frame(self, layout: Layout) -> bool:
        """Check a collection's layout and open a frame for it."""
        if layout != Layout.NO_LAYOUT and not is_compatible_layout(self._cur_layout(), layout):
            self._set_incorrect_layout_error(layout)
            return False
        self.layout_stack.push(layout)
        return True

    def validate_and_pop_layout_stack_frame(self) -> bool:
        """Close a collection's frame, passing its layout outwards."""
        popped = self.layout_stack.pop()
        if not is_compatible_layout(self._cur_layout(), popped):
            raise RuntimeError("uncaught layout incompatibility")
        self._set_layout_if_no_layout(popped)
        return True

    def validate_layout_stack_at_end(self) -> bool:
        """Check that every collection frame has been closed."""
        self.layout_stack.assert_no_geometry_collection_frames_left()
        return True

    def is_valid_point(self, flat_coords: Sequence[float]) -> bool:
        """Check the number of ordinates of a point."""
        stride = len(flat_coords)
        if stride < 2:
            self._set_parse_error("not enough coordinates", "each point needs at least 2 coords")
            return False
        if stride > 4:
            self._set_parse_error("too many coordinates", "each point can have at most 4 coords")
            return False
        return self.validate_stride_and_set_default_layout_if_no_layout(stride)

    def is_valid_line_string(self, flat_coords: Sequence[float]) -> bool:
        """Check that a non-empty line string has at least two points."""
        if len(flat_coords) < 2 * self._cur_layout().stride():
            self._set_parse_error(
                "non-empty linestring with only one point", "minimum number of points is 2"
            )
            return False
        return True

    def is_valid_polygon_ring(self, flat_coords: Sequence[float]) -> bool:
        """Check that a ring has at least four points and is closed."""
        layout = self._cur_layout()
        stride = layout.stride()
        if len(flat_coords) < 4 * stride:
            self._set_parse_error(
                "polygon ring doesn't have enough points", "minimum number of points is 4"
            )
            return False
        dimensions = 3 if layout.z_index() != -1 else 2
        last = len(flat_coords) - stride
        if any(flat_coords[i] != flat_coords[last + i] for i in range(dimensions)):
            self._set_parse_error(
                "polygon ring not closed", "ensure first and last point are the same"
            )
            return False
        return True

    # Errors.

    def error(self, message: str) -> None:
        """Record an error reported by the parser."""
        self._set_syntax_error(message.removeprefix("syntax error: ")
                               if hasattr(message, "removeprefix")
                               else message, "")

    def _cur_layout(self) -> Layout:
        return self.layout_stack.top_layout()

    def _set_layout_if_no_layout(self, layout: Layout) -> None:
        if self._cur_layout() == Layout.NO_LAYOUT:
            self.layout_stack.set_top_layout(layout)

    def _set_incorrect_stride_error(self, stride: int, hint: str = "") -> None:
        layout = self._cur_layout()
        problem = (
            f"mixed dimensionality, parsed layout is {layout_name(layout)} "
            f"so expecting {layout.stride()} coords but got {stride} coords"
        )
        self._set_parse_error(problem, hint)

    def _set_incorrect_layout_error(self, layout: Layout, hint: str = "") -> None:
        problem = (
            f"mixed dimensionality, parsed layout is {layout_name(self._cur_layout())} "
            f"but encountered layout of {layout_name(layout)}"
        )
        self._set_parse_error(problem, hint)

    def _set_lex_error(self, expected: str) -> None:
        self._set_syntax_error(f"invalid {expected}", "")

    def _set_parse_error(self, problem: str, hint: str) -> None:
        self._set_syntax_error(problem, hint)

    def _set_syntax_error(self, problem: str, hint: str) -> None:
        if self.last_error is not None:
            return
        self.last_error = WKTSyntaxError(
            self.wkt,
            problem,
            self._last.line_num + 1,
            self._last.line_start,
            self._last.line_pos,
            hint,
        )