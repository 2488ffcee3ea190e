"""REST API serving cached NFL projections."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from ppnfl.api.schemas import ErrorResponse, StatusResponse
from ppnfl.config import Settings
from ppnfl.fetch import FetchError, status_of
from ppnfl.models import ProjectionRecord
from ppnfl.service import ProjectionService


logger = logging.getLogger("uvicorn.error")

RATE_LIMITED_MESSAGE = "Too Many Requests - provider or target rate limited"


def create_app(
    settings: Optional[Settings] = None,
    *,
    service: Optional[ProjectionService] = None,
) -> FastAPI:
    settings = settings or Settings.from_env()
    app = FastAPI(title="ppnfl projections")
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.state.settings = settings
    app.state.projection_service = service or ProjectionService(settings)

    @app.get("/", response_model=StatusResponse)
    async def index(request: Request) -> StatusResponse:
        projections: ProjectionService = request.app.state.projection_service
        return StatusResponse(
            cache_ttl_sec=projections.settings.cache_ttl,
            priority=projections.strategy.value,
        )

    @app.get(
        "/nfl",
        response_model=list[ProjectionRecord],
        responses={429: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    async def nfl(request: Request):
        projections: ProjectionService = request.app.state.projection_service
        try:
            return await projections.get_projections()
        except FetchError as exc:
            status = status_of(exc) or 500
            logger.error("[/nfl] error: %s %s", status, exc)
            if status == 429:
                return JSONResponse(status_code=429, content={"error": RATE_LIMITED_MESSAGE})
            return JSONResponse(status_code=500, content={"error": str(exc) or "unknown error"})
        except Exception as exc:
            logger.exception("[/nfl] error: 500 %s", exc)
            return JSONResponse(status_code=500, content={"error": str(exc) or "unknown error"})

    return app
