"""Validation and normalization of inbound score submissions."""

from __future__ import annotations

import json
import math
import re
from typing import Any, Dict

from ..core.errors import SubmissionError
from ..models import ScoreRecord

USERNAME_MAX_LENGTH = 255
REQUIRED_FIELDS = ("user_id", "score", "username")

_UUID_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE
)


def decode_body(raw: bytes) -> Dict[str, Any]:
    """Decode a request body into a JSON object."""

    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise SubmissionError("Request body is not valid JSON") from exc
    if not isinstance(data, dict):
        raise SubmissionError("JSON data is not an object")
    return data


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_submission(data: Dict[str, Any]) -> None:
    """Check a decoded submission; the first broken rule is raised."""

    for field in REQUIRED_FIELDS:
        if field not in data:
            raise SubmissionError(f"Missing '{field}' field")

    user_id = data["user_id"]
    if not isinstance(user_id, str):
        raise SubmissionError("User ID is not a string")
    if not _UUID_RE.match(user_id):
        raise SubmissionError("User ID is not a valid UUID")

    score = data["score"]
    if not _is_number(score):
        raise SubmissionError("Score is not a number")
    # Python ints are unbounded; only floats can be NaN or infinite.
    if isinstance(score, float) and not math.isfinite(score):
        raise SubmissionError("Score is not a finite number")
    if score < 0:
        raise SubmissionError("Score is negative")

    username = data["username"]
    if not isinstance(username, str):
        raise SubmissionError("Username is not a string")
    if not username.strip():
        raise SubmissionError("Username is empty")


def normalize_submission(data: Dict[str, Any]) -> ScoreRecord:
    """Build the record stored for an already validated submission."""

    return ScoreRecord(
        user_id=data["user_id"].lower(),
        username=data["username"].strip()[:USERNAME_MAX_LENGTH],
        score=math.floor(data["score"]),
    )


def parse_submission(raw: bytes) -> ScoreRecord:
    """Decode, validate and normalize a raw submission body."""

    data = decode_body(raw)
    validate_submission(data)
    return normalize_submission(data)


__all__ = [
    "REQUIRED_FIELDS",
    "USERNAME_MAX_LENGTH",
    "decode_body",
    "normalize_submission",
    "parse_submission",
    "validate_submission",
]
