"""
Async Overpass API client.

One GET per district; the QL query travels URL-encoded in the ``data``
parameter.  Any transport error, non-2xx status or malformed body is
logged and degrades to an empty hotel list.  There is no retry.
"""

from __future__ import annotations

import logging

import httpx

from src.config import settings
from src.domain.entities import BoundingBox, Hotel
from src.domain.overpass import (
    DEFAULT_HOTEL_NAME,
    build_hotel_query,
    normalize_elements,
)

logger = logging.getLogger(__name__)


class OverpassClient:
    def __init__(
        self,
        http: httpx.AsyncClient,
        url: str | None = None,
        default_name: str = DEFAULT_HOTEL_NAME,
    ):
        self.http = http
        self.url = settings.overpass_url if url is None else url
        self.default_name = default_name

    async def fetch_hotels(self, bbox: BoundingBox) -> list[Hotel]:
        """Return hotels inside *bbox*, or ``[]`` if the fetch fails."""
        query = build_hotel_query(bbox)
        try:
            resp = await self.http.get(self.url, params={"data": query})
            resp.raise_for_status()
            data = resp.json()
        except (httpx.HTTPError, ValueError):
            logger.exception("Error fetching hotels for bbox %s", bbox.as_tuple())
            return []

        elements = data.get("elements") if isinstance(data, dict) else None
        if not isinstance(elements, list):
            logger.warning(
                "Overpass response without an elements list for bbox %s",
                bbox.as_tuple(),
            )
            return []

        hotels = normalize_elements(elements, self.default_name)
        logger.info(
            "Fetched %d hotels (%d elements) for bbox %s",
            len(hotels),
            len(elements),
            bbox.as_tuple(),
        )
        return hotels
