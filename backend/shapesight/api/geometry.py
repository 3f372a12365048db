"""POST /api/geometry/* — metrics, triangle analysis, batch, transform and ranking."""

from __future__ import annotations

from fastapi import APIRouter

from shapesight.engine import (
    METERS,
    Success,
    Triangle,
    analyze_triangle,
    batch_analyze,
    compute_metrics,
    find_largest_shape,
    transform_shape,
)
from shapesight.models.geometry import DrawableShapeModel, ShapeMetricsModel, shape_from_engine
from shapesight.models.requests import (
    AnalyzeTriangleRequest,
    BatchAnalyzeRequest,
    CalculateMetricsRequest,
    FindLargestShapeRequest,
    TransformShapeRequest,
)
from shapesight.models.responses import (
    AnalyzeTriangleResponse,
    BatchAnalyzeResponse,
    CalculateMetricsResponse,
    FindLargestShapeResponse,
    RankedEntryModel,
    ShapeAnalysisResultModel,
    TransformShapeResponse,
    TriangleInfoModel,
)

router = APIRouter(prefix="/geometry")


@router.post("/metrics", response_model=CalculateMetricsResponse)
async def calculate_metrics(req: CalculateMetricsRequest) -> CalculateMetricsResponse:
    metrics = compute_metrics(req.shape.to_engine(), req.unit.to_engine())
    return CalculateMetricsResponse(metrics=ShapeMetricsModel.from_engine(metrics))


@router.post("/triangle", response_model=AnalyzeTriangleResponse)
async def triangle(req: AnalyzeTriangleRequest) -> AnalyzeTriangleResponse:
    a, b, c = (v.to_engine() for v in req.vertices)
    info = analyze_triangle(a, b, c)
    metrics = compute_metrics(Triangle(vertices=(a, b, c)), METERS)
    return AnalyzeTriangleResponse(
        info=TriangleInfoModel.model_validate(info, from_attributes=True),
        metrics=ShapeMetricsModel.from_engine(metrics),
    )


@router.post("/batch", response_model=BatchAnalyzeResponse)
async def batch(req: BatchAnalyzeRequest) -> BatchAnalyzeResponse:
    summary = batch_analyze([s.to_engine() for s in req.shapes], req.unit.to_engine())

    results = []
    for r in summary.results:
        if isinstance(r, Success):
            results.append(
                ShapeAnalysisResultModel(shape_id=r.shape_id, metrics=ShapeMetricsModel.from_engine(r.metrics))
            )
        else:
            results.append(ShapeAnalysisResultModel(shape_id=r.shape_id, error=r.error))

    return BatchAnalyzeResponse(
        results=results,
        total_area=summary.total_area,
        shape_count=summary.shape_count,
    )


@router.post("/transform", response_model=TransformShapeResponse)
async def transform(req: TransformShapeRequest) -> TransformShapeResponse:
    original = req.shape.to_engine()
    transformed = transform_shape(
        original,
        translate=req.translate.to_engine(),
        scale=req.scale,
        rotate_radians=req.rotate_radians,
    )
    return TransformShapeResponse(
        transformed=shape_from_engine(transformed),
        original_metrics=ShapeMetricsModel.from_engine(compute_metrics(original, METERS)),
        transformed_metrics=ShapeMetricsModel.from_engine(compute_metrics(transformed, METERS)),
    )


@router.post("/largest", response_model=FindLargestShapeResponse)
async def largest(req: FindLargestShapeRequest) -> FindLargestShapeResponse:
    result = find_largest_shape(
        [s.to_engine() for s in req.shapes],
        criterion=req.criterion,
        unit=req.unit.to_engine(),
    )
    return FindLargestShapeResponse(
        largest=DrawableShapeModel.from_engine(result.shape),
        metrics=ShapeMetricsModel.from_engine(result.metrics),
        ranked_shapes=[RankedEntryModel(shape_id=e.shape_id, value=e.value) for e in result.ranked],
    )
