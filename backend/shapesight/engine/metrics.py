"""Shape metrics: area, perimeter, centroid and bounding box per shape kind.

Centroid and bounding box are taken over a small per-kind sample point set:
the vertices for triangles and polygons, the 4 derived corners for
rectangles, the center alone for circles. The centroid is therefore the
vertex mean, not the area centroid.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import assert_never

from shapesight.engine.errors import ShapeValidationError, TooFewVerticesError, UnsupportedShapeError
from shapesight.engine.primitives import Point, distance
from shapesight.engine.shapes import Circle, Polygon, Rectangle, Shape, Triangle
from shapesight.engine.units import METERS, MeasurementUnit, convert_area, convert_distance
from shapesight.utils.geometry import as_array, bbox, centroid, ring_length, shoelace_area


@dataclass(frozen=True)
class BoundingBox:
    min_x: float
    min_y: float
    max_x: float
    max_y: float


@dataclass(frozen=True)
class ShapeMetrics:
    area: float
    perimeter: float
    centroid: Point
    bounding_box: BoundingBox


def heron_area(a: float, b: float, c: float) -> float:
    """Triangle area from side lengths.

    Rounding can push the radicand slightly below zero for collinear input;
    that is clamped to 0 rather than returning NaN.
    """
    s = (a + b + c) / 2
    return math.sqrt(max(s * (s - a) * (s - b) * (s - c), 0.0))


def triangle_sides(triangle: Triangle) -> tuple[float, float, float]:
    """Side lengths AB, BC, CA."""
    if len(triangle.vertices) != 3:
        raise ShapeValidationError(
            f"Triangle must have exactly 3 vertices, got {len(triangle.vertices)}"
        )
    a, b, c = triangle.vertices
    return distance(a, b), distance(b, c), distance(c, a)


def sample_points(shape: Shape) -> tuple[Point, ...]:
    """Representative points used for centroid and bounding box."""
    if isinstance(shape, Triangle):
        return shape.vertices
    if isinstance(shape, Circle):
        return (shape.center,)
    if isinstance(shape, Rectangle):
        return shape.corners()
    if isinstance(shape, Polygon):
        return shape.vertices
    assert_never(shape)


def _area_and_perimeter(shape: Shape) -> tuple[float, float]:
    if isinstance(shape, Triangle):
        a, b, c = triangle_sides(shape)
        return heron_area(a, b, c), a + b + c
    if isinstance(shape, Circle):
        return math.pi * shape.radius * shape.radius, 2 * math.pi * shape.radius
    if isinstance(shape, Rectangle):
        return shape.width * shape.height, 2 * (shape.width + shape.height)
    if isinstance(shape, Polygon):
        if len(shape.vertices) < 3:
            raise TooFewVerticesError(
                f"A polygon must have at least 3 vertices, got {len(shape.vertices)}"
            )
        pts = as_array(p.as_tuple() for p in shape.vertices)
        return shoelace_area(pts), ring_length(pts)
    assert_never(shape)


def compute_metrics(shape: Shape, unit: MeasurementUnit = METERS) -> ShapeMetrics:
    """Compute area, perimeter, centroid and bounding box for any shape variant.

    Area and perimeter are converted to ``unit``; centroid and bounding box are
    left in the shape's own coordinates.
    """
    if not isinstance(shape, (Triangle, Circle, Rectangle, Polygon)):
        raise UnsupportedShapeError(f"Unsupported shape type: {type(shape).__name__}")

    area, perimeter = _area_and_perimeter(shape)

    pts = as_array(p.as_tuple() for p in sample_points(shape))
    cx, cy = centroid(pts)
    xmin, ymin, xmax, ymax = bbox(pts)

    return ShapeMetrics(
        area=convert_area(area, unit),
        perimeter=convert_distance(perimeter, unit),
        centroid=Point(cx, cy),
        bounding_box=BoundingBox(min_x=xmin, min_y=ymin, max_x=xmax, max_y=ymax),
    )
