"""Exception types raised by the gateway and their HTTP status codes."""

from __future__ import annotations

from typing import Optional


class GatewayError(Exception):
    """Base error carrying the message that is safe to show a client."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SubmissionError(GatewayError):
    """The client sent a score submission that breaks a validation rule."""

    status_code = 400


class StoreError(GatewayError):
    """The Airtable call failed or returned something we cannot use.

    ``message`` stays generic; ``detail`` holds what went wrong upstream and is
    only ever logged.
    """

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.detail = detail


class ConfigurationError(GatewayError, RuntimeError):
    """A required environment variable is missing or malformed."""


__all__ = ["ConfigurationError", "GatewayError", "StoreError", "SubmissionError"]
