"""
Viewer session
==============

Owns one client's ``SelectionState`` and drives the control flow:

    district selection -> bbox lookup -> Overpass fetch -> hotel list
    -> hotel click -> distance -> map view

Concurrency
-----------
Single-threaded asyncio.  Each district selection issues exactly one fetch
and is not cancelled when the user switches again.  The fetch is tagged with
the snapshot's ``request_id`` and its result is applied through
``SelectionState.receive_hotels``, which drops results for superseded
requests, so the most recent selection always wins regardless of the order
in which responses arrive.
"""

from __future__ import annotations

import logging
from typing import Optional

from src.config import settings
from src.domain.entities import Hotel
from src.domain.map_view import MapView, build_map_view
from src.domain.regions import get_city, get_district
from src.domain.selection import SelectionState
from src.infrastructure.overpass_client import OverpassClient

logger = logging.getLogger(__name__)


class ViewerSession:
    def __init__(
        self, overpass: OverpassClient, district: Optional[str] = None
    ):
        self.overpass = overpass
        self.state = SelectionState(
            district=get_district(
                settings.default_district if district is None else district
            )
        )

    async def load(self) -> SelectionState:
        """Fetch hotels for the initial district."""
        return await self.select_district(self.state.district.name)

    async def select_district(self, name: str) -> SelectionState:
        district = get_district(name)
        self.state = self.state.select_district(district)
        request_id = self.state.request_id

        hotels = await self.overpass.fetch_hotels(district.bbox)

        latest = self.state.request_id
        self.state = self.state.receive_hotels(request_id, hotels)
        if request_id != latest:
            logger.debug(
                "Dropping stale hotels for %s (request %d, latest %d)",
                name,
                request_id,
                latest,
            )
        return self.state

    def select_city(self, name: Optional[str]) -> SelectionState:
        self.state = self.state.select_city(get_city(name) if name else None)
        return self.state

    def click_hotel(self, hotel_id: int) -> SelectionState:
        hotel = self._find_hotel(hotel_id)
        if hotel is None:
            logger.warning("Click on unknown hotel id %s", hotel_id)
            self.state = self.state.clear()
        else:
            self.state = self.state.click_hotel(hotel)
        return self.state

    def click_map(self) -> SelectionState:
        self.state = self.state.click_map()
        return self.state

    def view(self) -> MapView:
        return build_map_view(self.state, zoom=settings.default_zoom)

    def _find_hotel(self, hotel_id: int) -> Optional[Hotel]:
        return next((h for h in self.state.hotels if h.id == hotel_id), None)
