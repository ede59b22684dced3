"""
Static registries of Uttarakhand districts and source cities.

Bounding boxes are (south, west, north, east) in degrees, the order the
Overpass ``(s,w,n,e)`` filter takes.  Dict order is the order shown in
the district / city dropdowns.
"""

from __future__ import annotations

from .entities import BoundingBox, City, District, Location, UnknownRegion

_DISTRICT_BOUNDS: dict[str, tuple[float, float, float, float]] = {
    "Almora": (29.3, 79.1, 29.9, 79.9),
    "Bageshwar": (29.7, 79.4, 30.1, 79.9),
    "Chamoli": (30.1, 79.2, 31.2, 80.5),
    "Champawat": (29.5, 80.0, 30.1, 80.6),
    "Dehradun": (30.0, 77.9, 30.4, 78.3),
    "Haridwar": (29.7, 77.7, 30.0, 78.3),
    "Nainital": (29.0, 79.2, 29.7, 79.8),
    "PauriGarhwal": (29.5, 78.5, 30.2, 79.5),
    "Pithoragarh": (29.4, 80.0, 30.2, 80.6),
    "Rudraprayag": (30.3, 79.0, 30.9, 79.7),
    "TehriGarhwal": (30.2, 78.2, 30.8, 79.1),
    "UdhamSinghNagar": (28.9, 78.8, 29.2, 79.3),
    "Uttarkashi": (30.8, 78.1, 31.7, 79.3),
}

_CITY_COORDS: dict[str, tuple[float, float]] = {
    "Dehradun": (30.3165, 78.0322),
    "Nainital": (29.3919, 79.4542),
    "Haridwar": (29.9457, 78.1642),
    "Almora": (29.598, 79.6503),
    "Pithoragarh": (29.5817, 80.2304),
    "Rishikesh": (30.0869, 78.2676),
}

DISTRICTS: dict[str, District] = {
    name: District(name, BoundingBox.from_tuple(bbox))
    for name, bbox in _DISTRICT_BOUNDS.items()
}

CITIES: dict[str, City] = {
    name: City(name, Location(lat, lon))
    for name, (lat, lon) in _CITY_COORDS.items()
}


def get_district(name: str) -> District:
    try:
        return DISTRICTS[name]
    except KeyError:
        raise UnknownRegion(f"Unknown district: {name}") from None


def get_city(name: str) -> City:
    try:
        return CITIES[name]
    except KeyError:
        raise UnknownRegion(f"Unknown city: {name}") from None
