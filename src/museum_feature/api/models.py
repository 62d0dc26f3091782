"""Pydantic models for the feature API."""

from pydantic import BaseModel


class SearchRequest(BaseModel):
    """Search request payload."""

    term: str
    value: str


class StateResponse(BaseModel):
    """Snapshot of the shared view state."""

    is_loading: bool
    result_count: int
    featured_title: str | None = None
