"""
Viewer session tests.

Demonstrates:
1. One fetch per district selection, with the old hotel list discarded.
2. Latest request wins when fetches resolve out of order.
3. Hotel / map clicks drive distance and line state.
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock

import pytest

from src.domain.entities import UnknownRegion
from src.domain.regions import DISTRICTS
from src.services.viewer import ViewerSession
from tests.conftest import FakeOverpassClient, hotel

DEHRADUN = DISTRICTS["Dehradun"].bbox.as_tuple()
ALMORA = DISTRICTS["Almora"].bbox.as_tuple()
HARIDWAR = DISTRICTS["Haridwar"].bbox.as_tuple()


@pytest.fixture
def overpass() -> FakeOverpassClient:
    return FakeOverpassClient(
        {
            DEHRADUN: [hotel(1, 30.32, 78.04, "Ramada"), hotel(2, 30.33, 78.01)],
            ALMORA: [hotel(10, 29.6, 79.66, "Almora Inn")],
            HARIDWAR: [hotel(20, 29.95, 78.16, "Ganga View")],
        }
    )


class TestDistrictSelection:
    def test_default_district(self, overpass):
        session = ViewerSession(overpass)
        assert session.state.district.name == "Dehradun"
        assert overpass.calls == []

    @pytest.mark.asyncio
    async def test_load_fetches_initial_district(self, overpass):
        session = ViewerSession(overpass)
        state = await session.load()
        assert overpass.calls == [DEHRADUN]
        assert [h.id for h in state.hotels] == [1, 2]

    @pytest.mark.asyncio
    async def test_one_fetch_per_selection(self, overpass):
        session = ViewerSession(overpass)
        await session.select_district("Almora")
        await session.select_district("Haridwar")
        assert overpass.calls == [ALMORA, HARIDWAR]

    @pytest.mark.asyncio
    async def test_no_residual_hotels(self, overpass):
        session = ViewerSession(overpass)
        await session.load()
        state = await session.select_district("Almora")
        assert [h.id for h in state.hotels] == [10]

    @pytest.mark.asyncio
    async def test_clears_distance(self, overpass):
        session = ViewerSession(overpass)
        await session.load()
        session.select_city("Haridwar")
        session.click_hotel(1)
        assert session.state.distance_km is not None

        state = await session.select_district("Almora")
        assert state.hotel is None
        assert state.distance_km is None

    @pytest.mark.asyncio
    async def test_unknown_district(self, overpass):
        session = ViewerSession(overpass)
        with pytest.raises(UnknownRegion):
            await session.select_district("Atlantis")
        assert overpass.calls == []

    @pytest.mark.asyncio
    async def test_fetch_failure_shows_no_hotels(self):
        failing = AsyncMock()
        failing.fetch_hotels = AsyncMock(return_value=[])
        session = ViewerSession(failing)
        state = await session.select_district("Chamoli")
        assert state.hotels == ()
        failing.fetch_hotels.assert_awaited_once_with(DISTRICTS["Chamoli"].bbox)


class TestLatestRequestWins:
    @pytest.mark.asyncio
    async def test_stale_fetch_does_not_overwrite(self, overpass):
        session = ViewerSession(overpass)
        overpass.gates[ALMORA] = asyncio.Event()

        slow = asyncio.create_task(session.select_district("Almora"))
        await asyncio.sleep(0)  # let the Almora fetch start and block

        await session.select_district("Haridwar")
        overpass.gates[ALMORA].set()
        await slow

        assert session.state.district.name == "Haridwar"
        assert [h.id for h in session.state.hotels] == [20]

    @pytest.mark.asyncio
    async def test_in_order_responses(self, overpass):
        session = ViewerSession(overpass)
        await session.select_district("Almora")
        await session.select_district("Haridwar")
        assert [h.id for h in session.state.hotels] == [20]


class TestClicks:
    @pytest.mark.asyncio
    async def test_hotel_click_with_city(self, overpass):
        session = ViewerSession(overpass)
        await session.load()
        session.select_city("Dehradun")
        state = session.click_hotel(1)

        assert state.hotel.name == "Ramada"
        assert state.distance_km > 0
        assert session.view().line is not None

    @pytest.mark.asyncio
    async def test_hotel_click_without_city(self, overpass):
        session = ViewerSession(overpass)
        await session.load()
        state = session.click_hotel(1)
        assert state.hotel is None
        assert state.distance_km is None

    @pytest.mark.asyncio
    async def test_unknown_hotel_click_clears(self, overpass):
        session = ViewerSession(overpass)
        await session.load()
        session.select_city("Dehradun")
        session.click_hotel(1)
        state = session.click_hotel(999)
        assert state.hotel is None

    @pytest.mark.asyncio
    async def test_map_click_clears(self, overpass):
        session = ViewerSession(overpass)
        await session.load()
        session.select_city("Dehradun")
        session.click_hotel(2)
        state = session.click_map()
        assert (state.hotel, state.distance_km) == (None, None)
        assert session.view().line is None

    def test_clear_city(self, overpass):
        session = ViewerSession(overpass)
        session.select_city("Almora")
        assert session.select_city(None).city is None

    def test_unknown_city(self, overpass):
        session = ViewerSession(overpass)
        with pytest.raises(UnknownRegion):
            session.select_city("Atlantis")
