"""Controller owning the feature view's shared state."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from museum_feature.adapters.harvard_client import SearchClient
from museum_feature.domain.records import Record
from museum_feature.domain.render_tree import ClickEvent, Element
from museum_feature.domain.view_state import SearchQuery, ViewState
from museum_feature.services.feature import FeatureView

_logger = logging.getLogger(__name__)


@dataclass(eq=False)
class FeatureController:
    """Owns the loading flag, result set and featured record.

    The view layer only receives ``set_is_loading`` and ``set_search_results``
    and never holds the state itself.
    """

    search_client: SearchClient
    state: ViewState = field(default_factory=ViewState)
    featured_result: Record | None = None

    def set_is_loading(self, flag: bool) -> None:
        """Update the loading flag."""
        self.state.is_loading = flag
        _logger.debug("Loading: %s", flag)

    def set_search_results(self, records: Sequence[Record]) -> None:
        """Replace the current result set."""
        self.state.search_results = tuple(records)
        _logger.debug("Search results replaced: count=%s", len(records))

    def feature(self, record: Record | None) -> None:
        """Feature ``record`` in the detail view, or clear it."""
        self.featured_result = record

    def select_result(self, index: int) -> Record:
        """Feature the result at ``index`` and return it."""
        if not 0 <= index < len(self.state.search_results):
            raise IndexError(f"No search result at index {index}")
        record = self.state.search_results[index]
        self.feature(record)
        return record

    def view(self) -> FeatureView:
        """Return a feature view wired to this controller's setters."""
        return FeatureView(
            set_is_loading=self.set_is_loading,
            set_search_results=self.set_search_results,
            search_client=self.search_client,
        )

    def render(self) -> Element:
        """Render the currently featured record."""
        return self.view().render(self.featured_result)

    async def search(self, query: SearchQuery) -> None:
        """Run the same activation flow as clicking a searchable field."""
        searchable = self.view().searchable(query.term, query.value)
        await searchable.on_click(ClickEvent())
