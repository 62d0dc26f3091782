"""Harvard Art Museums object search client."""

from dataclasses import dataclass
from typing import Protocol

import httpx
from pydantic import ValidationError

from museum_feature.domain.records import Record


class QueryFailure(Exception):
    """Raised when the object search backend rejects a query."""


class SearchClient(Protocol):
    """Interface for running a term/value object search."""

    async def fetch_query_results(self, term: str, value: str) -> list[Record]:
        """Return the records matching a term/value query."""


@dataclass
class HttpxHarvardClient(SearchClient):
    """HTTPX-backed object search client."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 15

    @classmethod
    def create(
        cls, api_key: str, base_url: str, timeout_seconds: float = 15
    ) -> "HttpxHarvardClient":
        """Create a search client with a managed httpx session."""
        return cls(
            api_key=api_key,
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def fetch_query_results(self, term: str, value: str) -> list[Record]:
        """Search objects where ``term`` matches any of the dash-separated values."""
        url = f"{self.base_url}/object"
        params = {"apikey": self.api_key, term: "|".join(value.split("-"))}
        try:
            response = await self.http_client.get(
                url, params=params, timeout=self.timeout_seconds
            )
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise QueryFailure(f"Object search failed for {term}={value}") from exc
        if not isinstance(payload, dict):
            raise QueryFailure("Object search returned an unexpected payload")
        try:
            return [Record.model_validate(item) for item in payload.get("records", [])]
        except ValidationError as exc:
            raise QueryFailure("Object search returned malformed records") from exc

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
