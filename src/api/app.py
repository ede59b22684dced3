"""
FastAPI application factory.

* Registers routes for regions, distance and admin.
* Opens / closes the shared httpx client via lifespan events.
* Maps unknown district / city names to 404.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.api.routes import admin, distance, regions
from src.config import settings
from src.domain.entities import UnknownRegion
from src.infrastructure import http_client as _http

logging.basicConfig(level=settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the Overpass connection pool on startup; close it on shutdown."""
    await _http.open_http_client()
    yield
    await _http.close_http_client()


async def _unknown_region_handler(request: Request, exc: UnknownRegion):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Uttarakhand Hotels Map API",
        description=(
            "Lists district bounding boxes, fetches hotels inside them from "
            "the Overpass API, and computes straight-line distances from a "
            "source city to a hotel."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_exception_handler(UnknownRegion, _unknown_region_handler)

    # Routers
    app.include_router(regions.router, prefix="/api/v1")
    app.include_router(distance.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    return app
