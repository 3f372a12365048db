"""API response models."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field

from shapesight.models.geometry import DrawableShapeModel, ShapeMetricsModel, ShapeModel


def _now() -> datetime:
    return datetime.now(timezone.utc)


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    env: str = "development"
    operations: list[str] = Field(default_factory=list)


class TriangleInfoModel(BaseModel):
    side_a: float
    side_b: float
    side_c: float
    is_equilateral: bool
    is_isosceles: bool
    is_scalene: bool
    is_right_triangle: bool
    area: float
    perimeter: float


class PolygonPropertiesModel(BaseModel):
    is_convex: bool
    area: float
    vertex_count: int


class ShapeAnalysisResultModel(BaseModel):
    shape_id: str
    metrics: ShapeMetricsModel | None = None
    error: str | None = None


class RankedEntryModel(BaseModel):
    shape_id: str
    value: float


class CalculateMetricsResponse(BaseModel):
    metrics: ShapeMetricsModel
    timestamp: datetime = Field(default_factory=_now)


class AnalyzeTriangleResponse(BaseModel):
    info: TriangleInfoModel
    metrics: ShapeMetricsModel
    timestamp: datetime = Field(default_factory=_now)


class BatchAnalyzeResponse(BaseModel):
    results: list[ShapeAnalysisResultModel] = Field(default_factory=list)
    total_area: float = 0.0
    shape_count: int = 0
    timestamp: datetime = Field(default_factory=_now)


class TransformShapeResponse(BaseModel):
    transformed: ShapeModel
    original_metrics: ShapeMetricsModel
    transformed_metrics: ShapeMetricsModel
    timestamp: datetime = Field(default_factory=_now)


class FindLargestShapeResponse(BaseModel):
    largest: DrawableShapeModel
    metrics: ShapeMetricsModel
    ranked_shapes: list[RankedEntryModel] = Field(default_factory=list)
    timestamp: datetime = Field(default_factory=_now)


class LegacyTriangleResponse(BaseModel):
    properties: TriangleInfoModel


class LegacyPolygonResponse(BaseModel):
    properties: PolygonPropertiesModel
