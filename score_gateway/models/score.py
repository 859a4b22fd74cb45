"""Data models for score records and the Airtable payloads that carry them."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr

# Column names in the Airtable table.
USERNAME_FIELD = "Username"
SCORE_FIELD = "Score"
USER_ID_FIELD = "User ID"


class ScoreRecord(BaseModel):
    """A normalized submission, ready to be written to the store."""

    user_id: str
    username: str = Field(min_length=1, max_length=255)
    score: int = Field(ge=0)

    def to_store_fields(self) -> Dict[str, Any]:
        return {
            USERNAME_FIELD: self.username,
            SCORE_FIELD: self.score,
            USER_ID_FIELD: self.user_id,
        }


class LeaderboardEntry(BaseModel):
    """One row of the leaderboard as returned to clients."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    username: StrictStr = Field(alias=USERNAME_FIELD)
    score: Union[StrictInt, StrictFloat] = Field(alias=SCORE_FIELD)


class StoreRecord(BaseModel):
    """A single Airtable record; ``fields`` omits empty cells."""

    id: Optional[str] = None
    createdTime: Optional[str] = None
    fields: Dict[str, Any] = Field(default_factory=dict)


class StoreRecordPage(BaseModel):
    """One page of an Airtable list-records response."""

    records: List[StoreRecord]
    offset: Optional[str] = None


__all__ = [
    "LeaderboardEntry",
    "SCORE_FIELD",
    "ScoreRecord",
    "StoreRecord",
    "StoreRecordPage",
    "USERNAME_FIELD",
    "USER_ID_FIELD",
]
