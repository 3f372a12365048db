"""Shared test fixtures."""

from __future__ import annotations


import pytest

from shapesight.engine.primitives import Point
from shapesight.engine.shapes import Circle, DrawableShape, Polygon, Rectangle, Triangle


RIGHT_TRIANGLE = Triangle(vertices=(Point(0, 0), Point(3, 0), Point(0, 4)))

UNIT_CIRCLE = Circle(center=Point(1, 1), radius=1.0)

RECT_2X3 = Rectangle(top_left=Point(1, 2), width=2.0, height=3.0)

UNIT_SQUARE = Polygon(vertices=(Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)))

# Chevron with a reflex vertex at (2, 1)
REFLEX_QUAD = Polygon(vertices=(Point(0, 0), Point(2, 1), Point(4, 0), Point(2, 3)))

MALFORMED_TRIANGLE = Triangle(vertices=(Point(0, 0), Point(1, 0)))

ALL_SHAPES = [RIGHT_TRIANGLE, UNIT_CIRCLE, RECT_2X3, UNIT_SQUARE]


# Wire-format counterparts for API tests

RIGHT_TRIANGLE_JSON = {
    "kind": "triangle",
    "vertices": [{"x": 0, "y": 0}, {"x": 3, "y": 0}, {"x": 0, "y": 4}],
}

UNIT_CIRCLE_JSON = {"kind": "circle", "center": {"x": 1, "y": 1}, "radius": 1.0}

RECT_2X3_JSON = {"kind": "rectangle", "top_left": {"x": 1, "y": 2}, "width": 2.0, "height": 3.0}

UNIT_SQUARE_JSON = {
    "kind": "polygon",
    "vertices": [{"x": 0, "y": 0}, {"x": 1, "y": 0}, {"x": 1, "y": 1}, {"x": 0, "y": 1}],
}


@pytest.fixture
def drawables() -> list[DrawableShape]:
    return [
        DrawableShape(id="tri", geometry=RIGHT_TRIANGLE),  # area 6
        DrawableShape(id="circle", geometry=UNIT_CIRCLE),  # area pi
        DrawableShape(id="rect", geometry=RECT_2X3),  # area 6
        DrawableShape(id="square", geometry=UNIT_SQUARE),  # area 1
    ]
