"""Detail view for the featured catalog record."""

from dataclasses import dataclass

from museum_feature.adapters.harvard_client import SearchClient
from museum_feature.domain.records import Record
from museum_feature.domain.render_tree import Element
from museum_feature.services.searchable import (
    SearchableField,
    SetIsLoading,
    SetSearchResults,
)


@dataclass(frozen=True)
class FeatureView:
    """Render a record's facts, searchable fields and photos."""

    set_is_loading: SetIsLoading
    set_search_results: SetSearchResults
    search_client: SearchClient

    def render(self, featured_result: Record | None) -> Element:
        """Return the render tree for ``featured_result``, or an empty shell."""
        if featured_result is None:
            return Element(tag="main", id="feature")
        return Element(
            tag="main",
            id="feature",
            children=(
                Element(
                    tag="div",
                    class_name="object-feature",
                    children=(
                        self._header(featured_result),
                        self._facts(featured_result),
                        self._photos(featured_result),
                    ),
                ),
            ),
        )

    def searchable(self, term: str | None, value: str | None) -> SearchableField:
        """Create a searchable field wired to the shared setters."""
        return SearchableField(
            search_term=term,
            search_value=value,
            set_is_loading=self.set_is_loading,
            set_search_results=self.set_search_results,
            search_client=self.search_client,
        )

    def _header(self, record: Record) -> Element:
        return Element(
            tag="header",
            children=(
                Element(tag="h3", text=record.title or ""),
                Element(tag="h4", text=record.dated or ""),
            ),
        )

    def _facts(self, record: Record) -> Element:
        medium_value = record.medium.lower() if record.medium else record.medium
        people = tuple(
            Element(
                tag="span",
                class_name="content",
                children=(self.searchable(person.displayname, person.displayname),),
            )
            for person in record.people or ()
        )
        return Element(
            tag="section",
            class_name="facts",
            children=(
                Element(tag="span", class_name="title", text=record.description or ""),
                _fact("STYLE: ", record.style),
                _fact("DIMENSIONS: ", record.dimensions),
                _fact("", record.division),
                _fact("CONTACT: ", record.contact),
                _fact("CREDIT: ", record.creditline),
                _labeled(
                    "CULTURE: ", self.searchable(record.culture, record.culture)
                ),
                _labeled(
                    "TECHNIQUE: ", self.searchable(record.technique, record.technique)
                ),
                _labeled("MEDIUM: ", self.searchable(record.medium, medium_value)),
                Element(
                    tag="span", class_name="content", text="PEOPLE(S): ", children=people
                ),
            ),
        )

    def _photos(self, record: Record) -> Element:
        # Every entry shows the primary image, not a per-image URL.
        entries = tuple(
            Element(
                tag="div",
                class_name="photos",
                children=(
                    (
                        Element(
                            tag="img",
                            attrs=(
                                ("src", record.primaryimageurl),
                                ("alt", record.description or ""),
                            ),
                        ),
                    )
                    if record.primaryimageurl
                    else ()
                ),
            )
            for _ in record.images or ()
        )
        return Element(tag="section", class_name="photos", children=entries)


def _fact(label: str, value: str | None) -> Element:
    return Element(tag="span", class_name="content", text=f"{label}{value or ''}")


def _labeled(label: str, field: SearchableField) -> Element:
    return Element(tag="span", class_name="content", text=label, children=(field,))
