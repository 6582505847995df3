"""Planar vector helpers operating on (x, y) tuples."""
from __future__ import annotations

import math

Vec2 = tuple[float, float]

ZERO: Vec2 = (0.0, 0.0)


def lerp(a: Vec2, b: Vec2, t: float) -> Vec2:
    """Point at fraction t along the segment a->b. t is not clamped."""
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


def distance(a: Vec2, b: Vec2) -> float:
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    return math.sqrt(dx * dx + dy * dy)
