"""Data model exports."""

from .score import (
    SCORE_FIELD,
    USER_ID_FIELD,
    USERNAME_FIELD,
    LeaderboardEntry,
    ScoreRecord,
    StoreRecord,
    StoreRecordPage,
)

__all__ = [
    "LeaderboardEntry",
    "SCORE_FIELD",
    "ScoreRecord",
    "StoreRecord",
    "StoreRecordPage",
    "USERNAME_FIELD",
    "USER_ID_FIELD",
]
