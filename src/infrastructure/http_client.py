"""Shared httpx connection pool, opened and closed by the app lifespan."""

from __future__ import annotations

import httpx

from src.config import settings

_client: httpx.AsyncClient | None = None


async def open_http_client() -> httpx.AsyncClient:
    global _client
    if _client is None:
        _client = httpx.AsyncClient(timeout=settings.http_timeout_seconds)
    return _client


async def close_http_client() -> None:
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None


def get_http_client() -> httpx.AsyncClient:
    """Return the shared client; the app lifespan must have opened it."""
    if _client is None:
        raise RuntimeError("HTTP client is not open")
    return _client
