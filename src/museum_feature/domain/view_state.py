"""Shared view state for the feature detail view."""

from dataclasses import dataclass, field

from museum_feature.domain.records import Record


@dataclass(frozen=True)
class SearchQuery:
    """Term/value pair submitted when a searchable field is activated."""

    term: str
    value: str


@dataclass
class ViewState:
    """Loading flag and current result set, owned by the controller."""

    is_loading: bool = False
    search_results: tuple[Record, ...] = field(default_factory=tuple)
