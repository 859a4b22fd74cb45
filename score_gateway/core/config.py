"""Application settings and environment helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, List, Optional

from dotenv import load_dotenv

from .errors import ConfigurationError

load_dotenv(override=False)


def _require_env(name: str) -> str:
    """Return a required environment variable or raise an error."""

    value = os.getenv(name)
    if not value:
        raise ConfigurationError(f"Missing required environment variable: {name}")
    return value


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number") from exc


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


# Airtable store -------------------------------------------------------------
DEFAULT_API_URL = "https://api.airtable.com/v0"


@dataclass(frozen=True)
class StoreSettings:
    """Connection details for the Airtable table holding the scores."""

    base_id: str
    table_id: str
    api_key: str
    view_id: Optional[str] = None
    api_url: str = DEFAULT_API_URL
    timeout: float = 20.0

    @property
    def table_url(self) -> str:
        return f"{self.api_url.rstrip('/')}/{self.base_id}/{self.table_id}"

    @property
    def auth_header(self) -> str:
        return f"Bearer {self.api_key}"


@lru_cache(maxsize=1)
def load_store_settings() -> StoreSettings:
    """Read store settings from the environment once per process."""

    return StoreSettings(
        base_id=_require_env("AIRTABLE_BASE_ID"),
        table_id=_require_env("AIRTABLE_TABLE_ID"),
        api_key=_require_env("AIRTABLE_API_KEY"),
        view_id=os.getenv("AIRTABLE_VIEW_ID") or None,
        api_url=os.getenv("AIRTABLE_API_URL") or DEFAULT_API_URL,
        timeout=_env_float("AIRTABLE_TIMEOUT", 20.0),
    )


# CORS -----------------------------------------------------------------------
# FRONTEND_ORIGIN can contain a comma-separated list for multi-domain deploys.
_frontend_origins = _split_csv(os.getenv("FRONTEND_ORIGIN"))
_additional_origins = _split_csv(os.getenv("ADDITIONAL_ALLOWED_ORIGINS"))

_local_dev_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

ALLOWED_CORS_ORIGINS = _unique(
    [
        *_frontend_origins,
        *_additional_origins,
        *_local_dev_origins,
    ]
)


# Runtime behaviour ----------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "DEFAULT_API_URL",
    "LOG_LEVEL",
    "StoreSettings",
    "load_store_settings",
]
