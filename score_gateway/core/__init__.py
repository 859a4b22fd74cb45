"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    DEFAULT_API_URL,
    LOG_LEVEL,
    StoreSettings,
    load_store_settings,
)
from .errors import ConfigurationError, GatewayError, StoreError, SubmissionError
from .http import get_http_client, get_store_settings

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "DEFAULT_API_URL",
    "LOG_LEVEL",
    "ConfigurationError",
    "GatewayError",
    "StoreError",
    "StoreSettings",
    "SubmissionError",
    "get_http_client",
    "get_store_settings",
    "load_store_settings",
]
