"""Helpers for comparing coordinates in tests."""

from __future__ import annotations

import math
from typing import Sequence


def coords_equal_rel(c1: Sequence[float], c2: Sequence[float], epsilon: float) -> bool:
    """Return True if c1 and c2 are relatively equal to within epsilon."""
    if len(c1) != len(c2):
        return False
    for a, b in zip(c1, c2):
        if a == 0 or b == 0:
            if abs(a - b) > math.sqrt(epsilon):
                return False
        elif abs(a / b - 1) > epsilon:
            return False
    return True