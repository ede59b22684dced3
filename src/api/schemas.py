"""Pydantic response schemas for the REST API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from src.domain.enums import BaseLayer, MarkerKind


# ── Shared ────────────────────────────────────────────────────────────


class LocationResponse(BaseModel):
    latitude: float
    longitude: float

    model_config = {"from_attributes": True}


class BoundingBoxResponse(BaseModel):
    south: float
    west: float
    north: float
    east: float

    model_config = {"from_attributes": True}


# ── Regions ───────────────────────────────────────────────────────────


class DistrictResponse(BaseModel):
    name: str
    bbox: BoundingBoxResponse
    center: LocationResponse


class CityResponse(BaseModel):
    name: str
    location: LocationResponse

    model_config = {"from_attributes": True}


class TileLayerResponse(BaseModel):
    name: BaseLayer
    url: str
    attribution: str
    checked: bool = False

    model_config = {"from_attributes": True}


class MapInitResponse(BaseModel):
    district: str
    center: LocationResponse
    zoom: int
    layers: list[TileLayerResponse]


class MarkerResponse(BaseModel):
    kind: MarkerKind
    position: LocationResponse
    popup: str
    icon_url: Optional[str] = None
    hotel_id: Optional[int] = None

    model_config = {"from_attributes": True}


class PolylineResponse(BaseModel):
    positions: list[LocationResponse]
    color: str
    weight: int

    model_config = {"from_attributes": True}


class MapViewResponse(MapInitResponse):
    city: Optional[str] = None
    selected_hotel_id: Optional[int] = None
    distance_km: Optional[float] = None
    markers: list[MarkerResponse] = []
    line: Optional[PolylineResponse] = None


# ── Hotels / distance ─────────────────────────────────────────────────


class HotelResponse(BaseModel):
    id: int
    lat: float
    lon: float
    name: str

    model_config = {"from_attributes": True}


class DistanceResponse(BaseModel):
    city: str
    source: LocationResponse
    target: LocationResponse
    distance_km: float = Field(..., ge=0)
    display: str = Field(..., description="Distance rounded to two decimals.")


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    detail: str
