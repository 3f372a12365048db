"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from shapesight.api import geometry, health, legacy

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(geometry.router)
api_router.include_router(legacy.router)
