"""Airtable REST client for writing and listing score records.

API docs: https://airtable.com/developers/web/api/introduction
Writes are upserts merged on the ``User ID`` column, so resubmitting for the
same user updates that user's row instead of adding a new one.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, List, Optional, Tuple

import httpx
from pydantic import ValidationError

from ..core.config import StoreSettings
from ..core.errors import ConfigurationError, StoreError
from ..models import (
    SCORE_FIELD,
    USER_ID_FIELD,
    USERNAME_FIELD,
    LeaderboardEntry,
    ScoreRecord,
    StoreRecordPage,
)

logger = logging.getLogger(__name__)

SAVE_FAILED = "Failed to save score"
FETCH_FAILED = "Failed to fetch leaderboard"


def _error_body(response: httpx.Response) -> str:
    try:
        return str(response.json())
    except ValueError:
        return response.text


def build_upsert_payload(record: ScoreRecord) -> Dict[str, Any]:
    """Request body for a single-record upsert keyed on the user id."""

    return {
        "performUpsert": {"fieldsToMergeOn": [USER_ID_FIELD]},
        "records": [{"fields": record.to_store_fields()}],
    }


async def upsert_score(
    client: httpx.AsyncClient, settings: StoreSettings, record: ScoreRecord
) -> Any:
    """Create or update the row for ``record.user_id``.

    Returns Airtable's response body unchanged.
    """
    url = settings.table_url
    logger.info("Sending PATCH to %s", url)
    try:
        response = await client.patch(
            url,
            headers={
                "Authorization": settings.auth_header,
                "Content-Type": "application/json",
            },
            json=build_upsert_payload(record),
        )
    except httpx.HTTPError as exc:
        raise StoreError(SAVE_FAILED, detail=f"Airtable request failed: {exc!r}") from exc

    if not response.is_success:
        raise StoreError(
            SAVE_FAILED,
            detail=f"Airtable returned {response.status_code}: {_error_body(response)}",
        )

    try:
        return response.json()
    except ValueError as exc:
        raise StoreError(SAVE_FAILED, detail="Airtable returned a non-JSON body") from exc


async def _fetch_page(
    client: httpx.AsyncClient, settings: StoreSettings, offset: Optional[str]
) -> StoreRecordPage:
    params: List[Tuple[str, str]] = [
        ("fields[]", USERNAME_FIELD),
        ("fields[]", SCORE_FIELD),
        ("view", settings.view_id or ""),
    ]
    if offset:
        params.append(("offset", offset))

    try:
        response = await client.get(
            settings.table_url,
            headers={"Authorization": settings.auth_header},
            params=params,
        )
    except httpx.HTTPError as exc:
        raise StoreError(FETCH_FAILED, detail=f"Airtable request failed: {exc!r}") from exc

    if not response.is_success:
        raise StoreError(
            FETCH_FAILED,
            detail=f"Airtable returned {response.status_code}: {_error_body(response)}",
        )

    try:
        return StoreRecordPage.model_validate(response.json())
    except (ValueError, ValidationError) as exc:
        raise StoreError(FETCH_FAILED, detail=f"Unexpected Airtable response: {exc}") from exc


async def fetch_leaderboard(
    client: httpx.AsyncClient, settings: StoreSettings
) -> List[LeaderboardEntry]:
    """List every record in the configured view, in the view's order.

    Pages are requested one after another until Airtable stops returning an
    ``offset``. A record without a string username and numeric score fails the
    whole listing.
    """
    if not settings.view_id:
        raise ConfigurationError("Missing required environment variable: AIRTABLE_VIEW_ID")

    started = time.perf_counter()
    entries: List[LeaderboardEntry] = []
    offset: Optional[str] = None
    pages = 0
    while True:
        page = await _fetch_page(client, settings, offset)
        pages += 1
        for record in page.records:
            try:
                entries.append(LeaderboardEntry.model_validate(record.fields))
            except ValidationError as exc:
                raise StoreError(
                    FETCH_FAILED,
                    detail=f"Invalid record data in Airtable (record {record.id}): {exc}",
                ) from exc
        offset = page.offset
        if not offset:
            break

    logger.info(
        "Fetched %d records in %d page(s) from Airtable in %.1fms",
        len(entries),
        pages,
        (time.perf_counter() - started) * 1000,
    )
    return entries


__all__ = [
    "FETCH_FAILED",
    "SAVE_FAILED",
    "build_upsert_payload",
    "fetch_leaderboard",
    "upsert_score",
]
