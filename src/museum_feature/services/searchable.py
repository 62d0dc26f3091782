"""Clickable field values that re-run the object search."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from museum_feature.adapters.harvard_client import SearchClient
from museum_feature.domain.records import Record
from museum_feature.domain.render_tree import ClickEvent, Element
from museum_feature.domain.view_state import SearchQuery

_logger = logging.getLogger(__name__)

SetIsLoading = Callable[[bool], None]
SetSearchResults = Callable[[Sequence[Record]], None]


@dataclass(frozen=True)
class SearchableField:
    """Label bound to a term/value pair that searches when clicked.

    Overlapping activations are neither deduplicated nor cancelled; whichever
    query completes last publishes its results.
    """

    search_term: str | None
    search_value: str | None
    set_is_loading: SetIsLoading
    set_search_results: SetSearchResults
    search_client: SearchClient

    @property
    def query(self) -> SearchQuery:
        """Return the query submitted on activation."""
        return SearchQuery(term=self.search_term or "", value=self.search_value or "")

    def render(self) -> Element:
        """Render the clickable label."""
        return Element(
            tag="span",
            class_name="content",
            children=(
                Element(tag="a", attrs=(("href", "#"),), text=self.search_term or ""),
            ),
        )

    async def on_click(self, event: ClickEvent) -> None:
        """Run the search and publish its results through the shared setters."""
        event.prevent_default()
        self.set_is_loading(True)
        query = self.query
        try:
            results = await self.search_client.fetch_query_results(
                query.term, query.value
            )
            self.set_search_results(results)
        except Exception:
            _logger.exception(
                "Search failed: term=%s value=%s", query.term, query.value
            )
        finally:
            self.set_is_loading(False)
