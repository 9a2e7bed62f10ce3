"""Plane geometry primitives used by the road generator."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point in the plane."""

    x: float
    y: float


def angle_between(a: Point, b: Point) -> float:
    """Return the direction from ``a`` to ``b`` in degrees, in (-180, 180]."""
    return math.degrees(math.atan2(b.y - a.y, b.x - a.x))