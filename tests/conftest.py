"""Shared test fixtures."""

from collections.abc import Sequence
from dataclasses import dataclass, field

import pytest

from museum_feature.adapters.harvard_client import QueryFailure, SearchClient
from museum_feature.config import Settings
from museum_feature.containers import AppContainer
from museum_feature.domain.records import Record
from museum_feature.services.controller import FeatureController


@dataclass
class FakeSearchClient(SearchClient):
    """Fake search client that records queries and returns canned records."""

    results: list[Record] = field(default_factory=list)
    error: Exception | None = None
    calls: list[tuple[str, str]] = field(default_factory=list)
    events: list[tuple[object, ...]] | None = None

    async def fetch_query_results(self, term: str, value: str) -> list[Record]:
        self.calls.append((term, value))
        if self.events is not None:
            self.events.append(("fetch", term, value))
        if self.error is not None:
            raise self.error
        return self.results


@dataclass
class RecordingSetters:
    """Loading and results setters that record every call in order."""

    events: list[tuple[object, ...]] = field(default_factory=list)
    loading_calls: list[bool] = field(default_factory=list)
    results_calls: list[list[Record]] = field(default_factory=list)

    def set_is_loading(self, flag: bool) -> None:
        self.loading_calls.append(flag)
        self.events.append(("loading", flag))

    def set_search_results(self, records: Sequence[Record]) -> None:
        self.results_calls.append(list(records))
        self.events.append(("results", len(records)))


def failing_client() -> FakeSearchClient:
    return FakeSearchClient(error=QueryFailure("backend unavailable"))


@pytest.fixture
def settings() -> Settings:
    return Settings(harvard_api_key="test-key")


@pytest.fixture
def search_client() -> FakeSearchClient:
    return FakeSearchClient(results=[Record(title="Vase")])


@pytest.fixture
def setters() -> RecordingSetters:
    return RecordingSetters()


@pytest.fixture
def full_record() -> Record:
    return Record.model_validate(
        {
            "title": "Ritual Wine Vessel",
            "dated": "12th century BCE",
            "description": "Bronze vessel with taotie mask",
            "style": "Anyang",
            "dimensions": "H. 25 cm",
            "division": "Asian and Mediterranean Art",
            "contact": "am_asianmediterranean@harvard.edu",
            "creditline": "Bequest of Grenville L. Winthrop",
            "culture": "Chinese",
            "technique": "Cast",
            "medium": "Bronze",
            "people": [{"displayname": "Ada Lovelace"}],
            "images": [{"imageid": 1}, {"imageid": 2}],
            "primaryimageurl": "http://x/1.jpg",
            "accessionyear": 1943,
        }
    )


@pytest.fixture
def container(settings: Settings, search_client: FakeSearchClient) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        search_client=search_client,
        controller=FeatureController(search_client=search_client),
        close_resources=close_resources,
    )
