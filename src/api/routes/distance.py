"""
Distance endpoint
=================

GET /api/v1/distance?city=<name>&lat=<lat>&lon=<lon>
    -- great-circle km from a source city to a point (e.g. a hotel marker)
"""

from __future__ import annotations

from fastapi import APIRouter, Query

from src.api.schemas import DistanceResponse, ErrorResponse, LocationResponse
from src.domain.distance import distance_between, format_km
from src.domain.entities import Location
from src.domain.regions import get_city

router = APIRouter(tags=["distance"])


@router.get(
    "/distance",
    response_model=DistanceResponse,
    summary="Distance from a source city to a point",
    responses={404: {"model": ErrorResponse, "description": "Unknown city"}},
)
async def distance(
    city: str,
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
):
    source = get_city(city)
    target = Location(lat, lon)
    km = distance_between(source.location, target)
    return DistanceResponse(
        city=source.name,
        source=LocationResponse.model_validate(source.location),
        target=LocationResponse.model_validate(target),
        distance_km=km,
        display=format_km(km),
    )
