"""FastAPI dependency injection helpers."""

import httpx
from fastapi import Depends

from src.infrastructure.http_client import get_http_client
from src.infrastructure.overpass_client import OverpassClient


def get_overpass_client(
    http: httpx.AsyncClient = Depends(get_http_client),
) -> OverpassClient:
    """Overpass client bound to the app-wide connection pool."""
    return OverpassClient(http)
