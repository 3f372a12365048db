"""Wire models for points, shapes and units, and their mapping to engine types.

Shapes and units are discriminated on ``kind``.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from shapesight.engine import metrics as m
from shapesight.engine import shapes as s
from shapesight.engine import units as u
from shapesight.engine.errors import UnsupportedShapeError
from shapesight.engine.primitives import Point


class PointModel(BaseModel):
    x: float
    y: float

    def to_engine(self) -> Point:
        return Point(self.x, self.y)

    @classmethod
    def from_engine(cls, p: Point) -> PointModel:
        return cls(x=p.x, y=p.y)


class TriangleModel(BaseModel):
    kind: Literal["triangle"] = "triangle"
    # Not length-checked here: a malformed triangle is rejected by the engine,
    # which lets a batch report it per item.
    vertices: list[PointModel]

    def to_engine(self) -> s.Triangle:
        return s.Triangle(vertices=tuple(v.to_engine() for v in self.vertices))


class CircleModel(BaseModel):
    kind: Literal["circle"] = "circle"
    center: PointModel
    radius: float

    def to_engine(self) -> s.Circle:
        return s.Circle(center=self.center.to_engine(), radius=self.radius)


class RectangleModel(BaseModel):
    kind: Literal["rectangle"] = "rectangle"
    top_left: PointModel
    width: float
    height: float

    def to_engine(self) -> s.Rectangle:
        return s.Rectangle(top_left=self.top_left.to_engine(), width=self.width, height=self.height)


class PolygonModel(BaseModel):
    kind: Literal["polygon"] = "polygon"
    vertices: list[PointModel]

    def to_engine(self) -> s.Polygon:
        return s.Polygon(vertices=tuple(v.to_engine() for v in self.vertices))


ShapeModel = Annotated[
    Union[TriangleModel, CircleModel, RectangleModel, PolygonModel],
    Field(discriminator="kind"),
]


def shape_from_engine(shape: s.Shape) -> ShapeModel:
    if isinstance(shape, s.Triangle):
        return TriangleModel(vertices=[PointModel.from_engine(v) for v in shape.vertices])
    if isinstance(shape, s.Circle):
        return CircleModel(center=PointModel.from_engine(shape.center), radius=shape.radius)
    if isinstance(shape, s.Rectangle):
        return RectangleModel(
            top_left=PointModel.from_engine(shape.top_left),
            width=shape.width,
            height=shape.height,
        )
    if isinstance(shape, s.Polygon):
        return PolygonModel(vertices=[PointModel.from_engine(v) for v in shape.vertices])
    raise UnsupportedShapeError(f"Unsupported shape type: {type(shape).__name__}")


class DrawableShapeModel(BaseModel):
    id: str
    geometry: ShapeModel

    def to_engine(self) -> s.DrawableShape:
        return s.DrawableShape(id=self.id, geometry=self.geometry.to_engine())

    @classmethod
    def from_engine(cls, shape: s.DrawableShape) -> DrawableShapeModel:
        return cls(id=shape.id, geometry=shape_from_engine(shape.geometry))


class MetersUnit(BaseModel):
    kind: Literal["meters"] = "meters"

    def to_engine(self) -> u.MeasurementUnit:
        return u.METERS


class FeetUnit(BaseModel):
    kind: Literal["feet"] = "feet"

    def to_engine(self) -> u.MeasurementUnit:
        return u.FEET


class CustomUnit(BaseModel):
    kind: Literal["custom"] = "custom"
    factor: float = Field(..., description="Linear scale applied to lengths (squared for areas)")

    def to_engine(self) -> u.MeasurementUnit:
        return u.Custom(factor=self.factor)


UnitModel = Annotated[
    Union[MetersUnit, FeetUnit, CustomUnit],
    Field(discriminator="kind"),
]


class BoundingBoxModel(BaseModel):
    min_x: float
    min_y: float
    max_x: float
    max_y: float


class ShapeMetricsModel(BaseModel):
    area: float
    perimeter: float
    centroid: PointModel
    bounding_box: BoundingBoxModel

    @classmethod
    def from_engine(cls, metrics: m.ShapeMetrics) -> ShapeMetricsModel:
        bb = metrics.bounding_box
        return cls(
            area=metrics.area,
            perimeter=metrics.perimeter,
            centroid=PointModel.from_engine(metrics.centroid),
            bounding_box=BoundingBoxModel(min_x=bb.min_x, min_y=bb.min_y, max_x=bb.max_x, max_y=bb.max_y),
        )
