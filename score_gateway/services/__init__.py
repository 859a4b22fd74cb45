"""Service layer helpers."""

from .airtable import build_upsert_payload, fetch_leaderboard, upsert_score
from .submissions import normalize_submission, parse_submission, validate_submission

__all__ = [
    "build_upsert_payload",
    "fetch_leaderboard",
    "normalize_submission",
    "parse_submission",
    "upsert_score",
    "validate_submission",
]
