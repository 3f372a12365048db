"""Similarity transforms: scale, then rotate about the origin, then translate.

Rectangles are a special case. Only the top-left anchor goes through the
full transform; width and height are scaled but never rotated, so a
rectangle stays axis-aligned whatever the rotation angle.
"""

from __future__ import annotations

from shapesight.engine.errors import UnsupportedShapeError
from shapesight.engine.primitives import ORIGIN, Point, rotate_point
from shapesight.engine.shapes import Circle, Polygon, Rectangle, Shape, Triangle


def transform_point(p: Point, translate: Point, scale: float, rotate_radians: float) -> Point:
    return rotate_point(p * scale, rotate_radians) + translate


def transform_shape(
    shape: Shape,
    translate: Point = ORIGIN,
    scale: float = 1.0,
    rotate_radians: float = 0.0,
) -> Shape:
    """Return a new shape of the same variant with the transform applied."""

    def apply(p: Point) -> Point:
        return transform_point(p, translate, scale, rotate_radians)

    if isinstance(shape, Triangle):
        return Triangle(vertices=tuple(apply(v) for v in shape.vertices))
    if isinstance(shape, Circle):
        return Circle(center=apply(shape.center), radius=shape.radius * scale)
    if isinstance(shape, Rectangle):
        return Rectangle(
            top_left=apply(shape.top_left),
            width=shape.width * scale,
            height=shape.height * scale,
        )
    if isinstance(shape, Polygon):
        return Polygon(vertices=tuple(apply(v) for v in shape.vertices))
    raise UnsupportedShapeError(f"Unsupported shape type: {type(shape).__name__}")
