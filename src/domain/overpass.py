"""
Overpass QL query construction and response normalisation.

Query shape
-----------
One union over node / way / relation, each filtered by
``["tourism"="hotel"]`` and the district's ``(s,w,n,e)`` box.  ``out center``
makes Overpass attach a ``center`` point to ways and relations so that
every element can be placed as a single marker.

Normalisation
-------------
Each element yields a ``Hotel`` if it carries an integer ``id`` and a usable
coordinate, either top-level ``lat`` / ``lon`` (nodes) or ``center.lat`` /
``center.lon`` (ways, relations).  Anything else is dropped.  Output order follows the
response order.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Optional

from .entities import BoundingBox, Hotel, Location
from .enums import ElementType

HOTEL_TAG = '["tourism"="hotel"]'
DEFAULT_QUERY_TIMEOUT = 25
DEFAULT_HOTEL_NAME = "Unnamed Hotel"


def build_hotel_query(
    bbox: BoundingBox | tuple[float, float, float, float],
    timeout: int = DEFAULT_QUERY_TIMEOUT,
) -> str:
    """Return the Overpass QL for every hotel feature inside *bbox*."""
    if not isinstance(bbox, BoundingBox):
        bbox = BoundingBox.from_tuple(bbox)
    area = "({},{},{},{})".format(*bbox.as_tuple())

    lines = [f"[out:json][timeout:{timeout}];", "("]
    lines += [f"  {kind.value}{HOTEL_TAG}{area};" for kind in ElementType]
    lines += [");", "out center;"]
    return "\n".join(lines)


def _number(value: Any) -> Optional[float]:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _identifier(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _element_location(element: Mapping[str, Any]) -> Optional[Location]:
    lat, lon = _number(element.get("lat")), _number(element.get("lon"))
    if lat is not None and lon is not None:
        return Location(lat, lon)

    center = element.get("center")
    if isinstance(center, Mapping):
        lat, lon = _number(center.get("lat")), _number(center.get("lon"))
        if lat is not None and lon is not None:
            return Location(lat, lon)
    return None


def _element_name(element: Mapping[str, Any], default: str) -> str:
    tags = element.get("tags")
    if isinstance(tags, Mapping):
        name = tags.get("name")
        if isinstance(name, str) and name:
            return name
    return default


def normalize_elements(
    elements: Iterable[Any], default_name: str = DEFAULT_HOTEL_NAME
) -> list[Hotel]:
    """Turn raw Overpass ``elements`` into ``Hotel`` records.  O(n)."""
    hotels: list[Hotel] = []
    for element in elements:
        if not isinstance(element, Mapping):
            continue
        hotel_id = _identifier(element.get("id"))
        location = _element_location(element)
        if hotel_id is None or location is None:
            continue
        hotels.append(
            Hotel(
                id=hotel_id,
                location=location,
                name=_element_name(element, default_name),
            )
        )
    return hotels
