"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from shapesight import __version__
from shapesight.config import Settings
from shapesight.dependencies import get_settings
from shapesight.models.responses import HealthResponse

router = APIRouter()

_OPERATIONS = [
    "CalculateMetrics",
    "AnalyzeTriangle",
    "BatchAnalyze",
    "TransformShape",
    "FindLargestShape",
    "LegacyAnalyzeTriangle",
    "LegacyAnalyzePolygon",
]


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        env=settings.shapesight_env,
        operations=list(_OPERATIONS),
    )
