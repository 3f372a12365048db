"""Triangle classification from side lengths."""

from __future__ import annotations

from dataclasses import dataclass

from shapesight.engine.constants import EPSILON
from shapesight.engine.errors import DegenerateTriangleError
from shapesight.engine.metrics import heron_area
from shapesight.engine.primitives import Point, distance


@dataclass(frozen=True)
class TriangleInfo:
    side_a: float
    side_b: float
    side_c: float
    is_equilateral: bool
    is_isosceles: bool
    is_scalene: bool
    is_right_triangle: bool
    area: float
    perimeter: float


def is_valid_triangle(a: float, b: float, c: float) -> bool:
    """Strict triangle inequality, no tolerance: equality means collinear."""
    return not (a + b <= c or b + c <= a or c + a <= b)


def is_right_triangle(a: float, b: float, c: float) -> bool:
    s1, s2, hypotenuse = sorted((a, b, c))
    return abs(s1 * s1 + s2 * s2 - hypotenuse * hypotenuse) < EPSILON


def classify_triangle(a: float, b: float, c: float) -> TriangleInfo:
    """Classify a triangle given its three side lengths.

    Raises:
        DegenerateTriangleError: if any side is >= the sum of the other two.
    """
    if not is_valid_triangle(a, b, c):
        raise DegenerateTriangleError(
            "Invalid triangle: the points are collinear or degenerate"
        )

    ab = abs(a - b) < EPSILON
    bc = abs(b - c) < EPSILON
    ca = abs(c - a) < EPSILON

    is_equilateral = ab and bc and ca
    is_isosceles = is_equilateral or ab or bc or ca

    return TriangleInfo(
        side_a=a,
        side_b=b,
        side_c=c,
        is_equilateral=is_equilateral,
        is_isosceles=is_isosceles,
        is_scalene=not is_isosceles,
        is_right_triangle=is_right_triangle(a, b, c),
        area=heron_area(a, b, c),
        perimeter=a + b + c,
    )


def analyze_triangle(point_a: Point, point_b: Point, point_c: Point) -> TriangleInfo:
    """Classify the triangle spanned by three vertices (sides AB, BC, CA)."""
    return classify_triangle(
        distance(point_a, point_b),
        distance(point_b, point_c),
        distance(point_c, point_a),
    )
