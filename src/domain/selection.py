"""
Viewer selection state as an immutable snapshot.

Every user action returns a *new* ``SelectionState``; nothing is mutated
in place, so a half-applied update is never observable.

Invariants
----------
* ``hotel`` and ``distance_km`` are set together and cleared together.
* ``hotels`` is replaced wholesale on every district change, never merged.
* ``request_id`` grows by one per district selection.  Only the response
  tagged with the current id is applied (latest request wins).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Optional

from .distance import distance_between
from .entities import City, District, Hotel


@dataclass(frozen=True)
class SelectionState:
    district: District
    city: Optional[City] = None
    hotels: tuple[Hotel, ...] = ()
    hotel: Optional[Hotel] = None
    distance_km: Optional[float] = None
    request_id: int = 0

    def select_district(self, district: District) -> SelectionState:
        """Switch district, drop the old hotels and start a new request."""
        return replace(
            self,
            district=district,
            hotels=(),
            hotel=None,
            distance_km=None,
            request_id=self.request_id + 1,
        )

    def receive_hotels(
        self, request_id: int, hotels: Iterable[Hotel]
    ) -> SelectionState:
        """Apply a fetch result; results for superseded requests are ignored."""
        if request_id != self.request_id:
            return self
        return replace(self, hotels=tuple(hotels), hotel=None, distance_km=None)

    def select_city(self, city: Optional[City]) -> SelectionState:
        return replace(self, city=city, hotel=None, distance_km=None)

    def click_hotel(self, hotel: Hotel) -> SelectionState:
        if self.city is None:
            return self.clear()
        return replace(
            self,
            hotel=hotel,
            distance_km=distance_between(self.city.location, hotel.location),
        )

    def click_map(self) -> SelectionState:
        return self.clear()

    def clear(self) -> SelectionState:
        if self.hotel is None and self.distance_km is None:
            return self
        return replace(self, hotel=None, distance_km=None)
