"""
Region endpoints
================

GET /api/v1/districts                -- all districts with bbox and center
GET /api/v1/districts/{name}/view    -- map initialisation for a district
GET /api/v1/districts/{name}/hotels  -- hotels inside the district bbox
GET /api/v1/districts/{name}/map     -- full map view: markers, popups, line
GET /api/v1/cities                   -- source cities for distance lookup
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends

from src.api.dependencies import get_overpass_client
from src.api.schemas import (
    BoundingBoxResponse,
    CityResponse,
    DistrictResponse,
    ErrorResponse,
    HotelResponse,
    LocationResponse,
    MapInitResponse,
    MapViewResponse,
    MarkerResponse,
    PolylineResponse,
    TileLayerResponse,
)
from src.config import settings
from src.domain.entities import District
from src.domain.map_view import TILE_LAYERS
from src.domain.regions import CITIES, DISTRICTS, get_district
from src.infrastructure.overpass_client import OverpassClient
from src.services.viewer import ViewerSession

router = APIRouter(tags=["regions"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Unknown district or city"}}


def _district_dto(district: District) -> DistrictResponse:
    return DistrictResponse(
        name=district.name,
        bbox=BoundingBoxResponse.model_validate(district.bbox),
        center=LocationResponse.model_validate(district.bbox.center()),
    )


@router.get(
    "/districts",
    response_model=list[DistrictResponse],
    summary="List districts",
)
async def list_districts():
    return [_district_dto(d) for d in DISTRICTS.values()]


@router.get(
    "/districts/{name}/view",
    response_model=MapInitResponse,
    summary="Initial map view for a district",
    responses=_NOT_FOUND,
)
async def district_view(name: str):
    district = get_district(name)
    return MapInitResponse(
        district=district.name,
        center=LocationResponse.model_validate(district.bbox.center()),
        zoom=settings.default_zoom,
        layers=[TileLayerResponse.model_validate(layer) for layer in TILE_LAYERS],
    )


@router.get(
    "/districts/{name}/hotels",
    response_model=list[HotelResponse],
    summary="Hotels inside a district",
    description=(
        "Queries Overpass for tourism=hotel nodes, ways and relations in the "
        "district's bounding box.  Upstream failures yield an empty list."
    ),
    responses=_NOT_FOUND,
)
async def district_hotels(
    name: str,
    overpass: OverpassClient = Depends(get_overpass_client),
):
    district = get_district(name)
    hotels = await overpass.fetch_hotels(district.bbox)
    return [HotelResponse.model_validate(h) for h in hotels]


@router.get(
    "/districts/{name}/map",
    response_model=MapViewResponse,
    summary="Everything the map widget draws for a selection",
    description=(
        "Fetches the district's hotels, applies the optional source city and "
        "clicked hotel, and returns markers, popups and the source-to-hotel "
        "line.  A hotel click without a city, or with an id not in the "
        "district, selects nothing."
    ),
    responses=_NOT_FOUND,
)
async def district_map(
    name: str,
    city: Optional[str] = None,
    hotel_id: Optional[int] = None,
    overpass: OverpassClient = Depends(get_overpass_client),
):
    session = ViewerSession(overpass, district=name)
    await session.load()
    session.select_city(city)
    if hotel_id is not None:
        session.click_hotel(hotel_id)

    state, view = session.state, session.view()
    return MapViewResponse(
        district=state.district.name,
        center=LocationResponse.model_validate(view.center),
        zoom=view.zoom,
        layers=[TileLayerResponse.model_validate(layer) for layer in view.layers],
        city=state.city.name if state.city else None,
        selected_hotel_id=state.hotel.id if state.hotel else None,
        distance_km=state.distance_km,
        markers=[MarkerResponse.model_validate(m) for m in view.markers],
        line=PolylineResponse.model_validate(view.line) if view.line else None,
    )


@router.get(
    "/cities",
    response_model=list[CityResponse],
    summary="List source cities",
)
async def list_cities():
    return [CityResponse.model_validate(c) for c in CITIES.values()]
