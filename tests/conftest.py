"""
Shared test fixtures.

The Overpass API is never contacted: HTTP-level tests use
``httpx.MockTransport`` and service-level tests use a scripted fake client.
"""

import asyncio

import httpx
import pytest

from src.domain.entities import Hotel, Location


# ── Sample Overpass payload ───────────────────────────────────────────


SAMPLE_ELEMENTS = [
    {
        "type": "node",
        "id": 101,
        "lat": 30.3256,
        "lon": 78.0437,
        "tags": {"tourism": "hotel", "name": "Ramada"},
    },
    {
        "type": "way",
        "id": 202,
        "center": {"lat": 30.3301, "lon": 78.0102},
        "tags": {"tourism": "hotel"},
    },
    {
        "type": "relation",
        "id": 303,
        "tags": {"tourism": "hotel", "name": "Nowhere Inn"},
    },
]


@pytest.fixture
def overpass_payload() -> dict:
    return {"version": 0.6, "elements": [dict(e) for e in SAMPLE_ELEMENTS]}


def make_http_client(handler) -> httpx.AsyncClient:
    """AsyncClient whose every request is answered by *handler*."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


# ── Fake Overpass client ──────────────────────────────────────────────


class FakeOverpassClient:
    """
    Stands in for ``OverpassClient``.

    ``responses`` maps a bbox tuple to the hotels returned for it.  When a
    bbox has an ``asyncio.Event`` in ``gates`` the fetch blocks until the
    test sets it, which lets a test resolve fetches out of order.
    """

    def __init__(self, responses=None):
        self.responses = responses or {}
        self.gates: dict[tuple, asyncio.Event] = {}
        self.calls: list[tuple] = []

    async def fetch_hotels(self, bbox):
        key = bbox.as_tuple()
        self.calls.append(key)
        gate = self.gates.get(key)
        if gate is not None:
            await gate.wait()
        return list(self.responses.get(key, []))


def hotel(id_: int, lat: float, lon: float, name: str = "Hotel") -> Hotel:
    return Hotel(id=id_, location=Location(lat, lon), name=name)
