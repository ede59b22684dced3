"""
Map view model.

Describes, for a given ``SelectionState``, what the Leaflet widget should
draw: initial view, base layers, markers and the source-to-hotel line.
The browser only renders this; it makes no decisions of its own.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .distance import format_km
from .entities import Location
from .enums import BaseLayer, MarkerKind
from .selection import SelectionState

_ESRI_TILES = "https://server.arcgisonline.com/ArcGIS/rest/services/{service}/MapServer/tile/{{z}}/{{y}}/{{x}}"

RED_MARKER_ICON = (
    "https://raw.githubusercontent.com/pointhi/leaflet-color-markers/"
    "master/img/marker-icon-red.png"
)


@dataclass(frozen=True)
class TileLayer:
    name: BaseLayer
    url: str
    attribution: str
    checked: bool = False


TILE_LAYERS: tuple[TileLayer, ...] = (
    TileLayer(
        name=BaseLayer.SATELLITE,
        url=_ESRI_TILES.format(service="World_Imagery"),
        attribution=(
            "Tiles &copy; Esri &mdash; Source: Esri, i-cubed, USDA, USGS, "
            "AEX, GeoEye, Getmapping, Aerogrid, IGN, IGP, UPR-EGP, and the "
            "GIS User Community"
        ),
        checked=True,
    ),
    TileLayer(
        name=BaseLayer.TERRAIN,
        url=_ESRI_TILES.format(service="World_Terrain_Base"),
        attribution="Tiles &copy; Esri &mdash; Source: Esri and others",
    ),
)


@dataclass(frozen=True)
class Marker:
    kind: MarkerKind
    position: Location
    popup: str
    icon_url: Optional[str] = None
    hotel_id: Optional[int] = None


@dataclass(frozen=True)
class Polyline:
    positions: tuple[Location, Location]
    color: str = "blue"
    weight: int = 3


@dataclass(frozen=True)
class MapView:
    center: Location
    zoom: int
    layers: tuple[TileLayer, ...] = TILE_LAYERS
    markers: tuple[Marker, ...] = field(default_factory=tuple)
    line: Optional[Polyline] = None


def hotel_popup(state: SelectionState, hotel_id: int, hotel_name: str) -> str:
    """Hotel name, plus the distance line when this hotel is the selected one."""
    if (
        state.city is None
        or state.hotel is None
        or state.distance_km is None
        or state.hotel.id != hotel_id
    ):
        return hotel_name
    return (
        f"{hotel_name}\nDistance from {state.city.name} to {hotel_name}: "
        f"{format_km(state.distance_km)} km"
    )


def build_map_view(state: SelectionState, zoom: int) -> MapView:
    markers: list[Marker] = []

    if state.city is not None:
        markers.append(
            Marker(
                kind=MarkerKind.SOURCE,
                position=state.city.location,
                popup=f"{state.city.name} (Source Location)",
            )
        )

    for hotel in state.hotels:
        markers.append(
            Marker(
                kind=MarkerKind.HOTEL,
                position=hotel.location,
                popup=hotel_popup(state, hotel.id, hotel.name),
                icon_url=RED_MARKER_ICON,
                hotel_id=hotel.id,
            )
        )

    line = None
    if state.city is not None and state.hotel is not None:
        line = Polyline(positions=(state.city.location, state.hotel.location))

    return MapView(
        center=state.district.bbox.center(),
        zoom=zoom,
        markers=tuple(markers),
        line=line,
    )
