"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from shapesight.engine.batch import RankingCriterion
from shapesight.models.geometry import DrawableShapeModel, MetersUnit, PointModel, ShapeModel, UnitModel


class CalculateMetricsRequest(BaseModel):
    shape: ShapeModel
    unit: UnitModel = Field(default_factory=MetersUnit, description="Unit for area and perimeter")


class AnalyzeTriangleRequest(BaseModel):
    vertices: list[PointModel] = Field(..., min_length=3, max_length=3, description="Exactly 3 vertices")


class BatchAnalyzeRequest(BaseModel):
    shapes: list[DrawableShapeModel] = Field(default_factory=list)
    unit: UnitModel = Field(default_factory=MetersUnit)


class TransformShapeRequest(BaseModel):
    shape: ShapeModel
    translate: PointModel = Field(default_factory=lambda: PointModel(x=0.0, y=0.0))
    scale: float = Field(default=1.0, description="Uniform scale, applied first")
    rotate_radians: float = Field(default=0.0, description="CCW rotation about the origin, applied after scaling")


class FindLargestShapeRequest(BaseModel):
    shapes: list[DrawableShapeModel] = Field(default_factory=list)
    criterion: RankingCriterion = RankingCriterion.AREA
    unit: UnitModel = Field(default_factory=MetersUnit)


class LegacyTriangleRequest(BaseModel):
    point_a: PointModel
    point_b: PointModel
    point_c: PointModel


class LegacyPolygonRequest(BaseModel):
    points: list[PointModel] = Field(default_factory=list)
