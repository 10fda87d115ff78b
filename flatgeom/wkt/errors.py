"""Errors raised while reading WKT."""

from __future__ import annotations

_LEFT_PADDING = 30
_RIGHT_PADDING = 30


class WKTSyntaxError(ValueError):
    """A syntax error in WKT, reported with a snippet of the offending line."""

    def __init__(
        self,
        wkt: str,
        problem: str,
        line_num: int,
        line_start: int,
        line_pos: int,
        hint: str = "",
    ) -> None:
        self.wkt = wkt
        self.problem = problem
        self.line_num = line_num
        self.line_start = line_start
        self.line_pos = line_pos
        self.hint = hint
        super().__init__(self._message())

    def _message(self) -> str:
        message = (
            f"syntax error: {self.problem} at line {self.line_num}, pos {self.line_pos}\n"
        )
        line_end = self.wkt.find("\n", self.line_start)
        if line_end == -1:
            line_end = len(self.wkt)

        prefix = f"LINE {self.line_num}: "
        suffix = "\n"

        snip_pos = self.line_pos
        snip_start = self.line_start
        left_min = self.line_start + self.line_pos - _LEFT_PADDING
        if snip_start < left_min:
            snip_pos -= left_min - snip_start
            snip_start = left_min
            prefix += "..."
        snip_end = line_end
        right_max = self.line_start + self.line_pos + _RIGHT_PADDING
        if snip_end > right_max:
            snip_end = right_max
            suffix = "..." + suffix

        snippet = self.wkt[snip_start:snip_end].replace("\t", " ")
        message += prefix + snippet + suffix
        message += " " * (len(prefix) + snip_pos) + "^"
        if self.hint:
            message += f"\nHINT: {self.hint}"
        return message