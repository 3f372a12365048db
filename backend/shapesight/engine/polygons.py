"""Convexity test and the simplified polygon analysis.

In this analysis area is only reported for convex polygons; a concave
polygon comes back with area 0.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from shapesight.engine.constants import EPSILON
from shapesight.engine.errors import TooFewVerticesError
from shapesight.engine.primitives import Point, cross_product
from shapesight.utils.geometry import as_array, shoelace_area


@dataclass(frozen=True)
class PolygonProperties:
    is_convex: bool
    area: float
    vertex_count: int


def is_convex(points: Sequence[Point]) -> bool:
    """True if every non-collinear turn along the ring has the same sign."""
    n = len(points)
    if n < 3:
        return False

    sign = 0
    for i in range(n):
        cross = cross_product(points[i], points[(i + 1) % n], points[(i + 2) % n])
        if abs(cross) < EPSILON:
            continue  # collinear
        current = 1 if cross > 0 else -1
        if sign == 0:
            sign = current
        elif sign != current:
            return False
    return True


def polygon_area(points: Sequence[Point]) -> float:
    """Shoelace area; 0 for fewer than 3 points."""
    if len(points) < 3:
        return 0.0
    return shoelace_area(as_array(p.as_tuple() for p in points))


def analyze_polygon(points: Sequence[Point]) -> PolygonProperties:
    if len(points) < 3:
        raise TooFewVerticesError("A polygon must have at least 3 vertices")

    convex = is_convex(points)
    return PolygonProperties(
        is_convex=convex,
        area=polygon_area(points) if convex else 0.0,
        vertex_count=len(points),
    )
