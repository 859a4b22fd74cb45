"""Score submission and leaderboard endpoints.

Dispatch is by method alone: every path other than the system routes reaches
these handlers.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ...core import StoreSettings, get_http_client, get_store_settings
from ...models import ScoreRecord
from ...services.airtable import fetch_leaderboard, upsert_score
from ...services.submissions import parse_submission
from ..handlers import GatewayRoute

logger = logging.getLogger(__name__)

router = APIRouter(tags=["scores"], route_class=GatewayRoute)


async def read_submission(request: Request) -> ScoreRecord:
    """FastAPI dependency that validates the body before the store is touched."""

    return parse_submission(await request.body())


@router.post("/")
@router.post("/{path:path}", include_in_schema=False)
async def submit_score(
    record: ScoreRecord = Depends(read_submission),
    settings: StoreSettings = Depends(get_store_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
) -> JSONResponse:
    """Validate a score and upsert it into the store by user id."""

    stored = await upsert_score(client, settings, record)
    logger.info("Saved score %d for user %s", record.score, record.user_id)
    return JSONResponse(stored)


@router.get("/")
@router.get("/{path:path}", include_in_schema=False)
async def get_leaderboard(
    settings: StoreSettings = Depends(get_store_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
) -> List[Dict[str, Any]]:
    """Return ``{username, score}`` pairs in the order of the store's view."""

    entries = await fetch_leaderboard(client, settings)
    return [entry.model_dump() for entry in entries]


__all__ = ["read_submission", "router"]
