"""
Data models for the HN search session.

Pydantic models for decoded search results and the session snapshot
handed to the view, plus the enums controlling state and output.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from models.config import ResponseFormat, SearchStatus

__all__ = [
    "ResponseFormat",
    "SearchStatus",
    "Hit",
    "ResultPage",
    "SessionState",
]

# ══════════════════════════════════════════════════════════════════════════════
# Search Results
# ══════════════════════════════════════════════════════════════════════════════


class Hit(BaseModel):
    """One story returned by the search API."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )

    id: str = Field(..., alias="objectID", min_length=1)
    title: Optional[str] = None
    url: Optional[str] = None
    author: Optional[str] = None
    comment_count: int = Field(default=0, alias="num_comments")
    points: int = 0

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        """Algolia ids are strings, but tolerate numeric ones."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("comment_count", "points", mode="before")
    @classmethod
    def null_counts_to_zero(cls, v):
        return 0 if v is None else v


class ResultPage(BaseModel):
    """A batch of hits for one page of one query."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )

    hits: list[Hit] = Field(default_factory=list)
    page: int = Field(..., ge=0)
    nb_pages: Optional[int] = Field(default=None, alias="nbPages")

    @property
    def has_more(self) -> bool:
        """True unless the API said this is the last page."""
        if self.nb_pages is None:
            return True
        return self.page + 1 < self.nb_pages


# ══════════════════════════════════════════════════════════════════════════════
# Session Snapshot
# ══════════════════════════════════════════════════════════════════════════════


class SessionState(BaseModel):
    """Everything the view reads from the controller."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    active_query: str = ""
    active_search_key: str = ""
    is_loading: bool = False
    last_error: Optional[Exception] = None
    status: SearchStatus = SearchStatus.IDLE
