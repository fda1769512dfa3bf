"""Math helpers — clamping, vector normalization. No engine imports."""

from __future__ import annotations

import math


def clamp(value: int, lo: int, hi: int) -> int:
    """Clamp an integer into [lo, hi]."""
    return max(lo, min(hi, value))


def normalize(x: float, y: float) -> tuple[float, float]:
    """Return (x, y) scaled to unit length. Zero vector maps to (0, 0)."""
    norm = math.hypot(x, y)
    if norm == 0.0:
        return (0.0, 0.0)
    return (x / norm, y / norm)


def to_pixel(coord: float, last: int) -> int:
    """Floor a pointer coordinate to its pixel, clamped into [0, last].

    Infinite coordinates land on the matching edge. NaN is not handled here.
    """
    if coord <= 0:
        return 0
    if coord >= last:
        return last
    return int(math.floor(coord))
