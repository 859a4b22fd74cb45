"""Request-scoped dependencies for reaching the score store."""

from __future__ import annotations

from typing import AsyncIterator

import httpx
from fastapi import Depends

from .config import StoreSettings, load_store_settings


def get_store_settings() -> StoreSettings:
    """FastAPI dependency returning the Airtable settings."""

    return load_store_settings()


async def get_http_client(
    settings: StoreSettings = Depends(get_store_settings),
) -> AsyncIterator[httpx.AsyncClient]:
    """FastAPI dependency that yields an HTTP client for one request."""

    async with httpx.AsyncClient(timeout=settings.timeout) as client:
        yield client


__all__ = ["get_http_client", "get_store_settings"]
