"""
Distance calculation using the Haversine formula.

Assumption
----------
Distances are straight-line (great-circle) on a sphere of radius 6371 km,
not road distances.  The viewer draws a straight polyline between the
source city and the hotel, so the number shown matches the line drawn.

Complexity: O(1) per call.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .entities import Location

EARTH_RADIUS_KM = 6_371.0


def haversine_km(
    lat1: float, lng1: float, lat2: float, lng2: float
) -> float:
    """Return the great-circle distance in **km** between two points."""
    lat1_r, lat2_r = math.radians(lat1), math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlng = math.radians(lng2 - lng1)

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlng / 2) ** 2
    )
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(a))


def distance_between(a: Location, b: Location) -> float:
    return haversine_km(a.latitude, a.longitude, b.latitude, b.longitude)


def format_km(distance_km: float) -> str:
    """Two-decimal rendering used in marker popups, e.g. ``"41.23"``."""
    return f"{distance_km:.2f}"
