"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shapesight import __version__
from shapesight.config import settings
from shapesight.engine.errors import GeometryError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.shapesight_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def _geometry_error_handler(request: Request, exc: GeometryError) -> JSONResponse:
    logger.warning("%s %s rejected: %s: %s", request.method, request.url.path, type(exc).__name__, exc)
    return JSONResponse(
        status_code=400,
        content={"error": type(exc).__name__, "detail": str(exc)},
    )


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("%s %s failed", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"error": "InternalError", "detail": "Internal server error"},
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="ShapeSight",
        description="Geometric analysis service — shape metrics, triangle classification, transforms and ranking",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(GeometryError, _geometry_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)

    from shapesight.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info("Geometry service listening on http://%s:%d/api", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
