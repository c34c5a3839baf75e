"""Two-dimensional points and small geometric helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point (or vector) in the plane."""

    x: float
    y: float


def normalize(p: Point) -> Point:
    """Return the vector ``p`` scaled to unit length.

    Raises ZeroDivisionError for the zero vector.
    """
    scale = 1.0 / math.sqrt(p.x * p.x + p.y * p.y)
    return Point(scale * p.x, scale * p.y)


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(a.x - b.x, a.y - b.y)