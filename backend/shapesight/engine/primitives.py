"""Point value type and the two primitive measurements everything else builds on."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        return Point(self.x * factor, self.y * factor)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


ORIGIN = Point(0.0, 0.0)


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p1.x - p2.x, p1.y - p2.y)


def cross_product(p1: Point, p2: Point, p3: Point) -> float:
    """Z-component of (p2 - p1) x (p3 - p1).

    Positive = counter-clockwise turn at p2, negative = clockwise, ~0 = collinear.
    The magnitude is twice the area of triangle p1-p2-p3.
    """
    return (p2.x - p1.x) * (p3.y - p1.y) - (p2.y - p1.y) * (p3.x - p1.x)


def rotate_point(p: Point, radians: float) -> Point:
    """Rotate counter-clockwise about the origin."""
    cos_t = math.cos(radians)
    sin_t = math.sin(radians)
    return Point(p.x * cos_t - p.y * sin_t, p.x * sin_t + p.y * cos_t)
