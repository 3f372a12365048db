"""POST /api/legacy/* — the simplified triangle and polygon analyses.

No units, timestamps or transforms; concave polygons report area 0.
"""

from __future__ import annotations

from fastapi import APIRouter

from shapesight.engine import analyze_polygon, analyze_triangle
from shapesight.models.requests import LegacyPolygonRequest, LegacyTriangleRequest
from shapesight.models.responses import (
    LegacyPolygonResponse,
    LegacyTriangleResponse,
    PolygonPropertiesModel,
    TriangleInfoModel,
)

router = APIRouter(prefix="/legacy")


@router.post("/triangle", response_model=LegacyTriangleResponse)
async def triangle(req: LegacyTriangleRequest) -> LegacyTriangleResponse:
    info = analyze_triangle(req.point_a.to_engine(), req.point_b.to_engine(), req.point_c.to_engine())
    return LegacyTriangleResponse(properties=TriangleInfoModel.model_validate(info, from_attributes=True))


@router.post("/polygon", response_model=LegacyPolygonResponse)
async def polygon(req: LegacyPolygonRequest) -> LegacyPolygonResponse:
    props = analyze_polygon([p.to_engine() for p in req.points])
    return LegacyPolygonResponse(properties=PolygonPropertiesModel.model_validate(props, from_attributes=True))
