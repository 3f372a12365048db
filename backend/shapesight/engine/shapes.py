"""Shape variants, a closed tagged union of immutable value types.

Shape = Triangle | Circle | Rectangle | Polygon. Code that branches on the
variant does so with an isinstance chain ending in assert_never, so adding a
fifth variant is flagged by the type checker at every dispatch site.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from shapesight.engine.primitives import Point


@dataclass(frozen=True)
class Triangle:
    # Should hold exactly 3 points. The count is checked when metrics are
    # computed, not here, so a malformed triangle can still be carried
    # through a batch and reported per item.
    vertices: tuple[Point, ...]


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: float


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle anchored at its top-left corner."""

    top_left: Point
    width: float
    height: float

    def corners(self) -> tuple[Point, Point, Point, Point]:
        tl = self.top_left
        return (
            tl,
            tl + Point(self.width, 0.0),
            tl + Point(self.width, self.height),
            tl + Point(0.0, self.height),
        )


@dataclass(frozen=True)
class Polygon:
    # Ordered boundary, implicitly closed (last vertex connects to first).
    vertices: tuple[Point, ...]


Shape = Union[Triangle, Circle, Rectangle, Polygon]


@dataclass(frozen=True)
class DrawableShape:
    """A shape with a caller-assigned identity, used by batch and ranking."""

    id: str
    geometry: Shape
