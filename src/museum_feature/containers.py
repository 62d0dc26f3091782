"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from museum_feature.adapters.harvard_client import HttpxHarvardClient, SearchClient
from museum_feature.config import Settings
from museum_feature.services.controller import FeatureController


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    search_client: SearchClient
    controller: FeatureController
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    search_client = HttpxHarvardClient.create(
        api_key=resolved_settings.harvard_api_key,
        base_url=resolved_settings.harvard_base_url,
        timeout_seconds=resolved_settings.search_timeout_seconds,
    )
    controller = FeatureController(search_client=search_client)

    async def close_resources() -> None:
        await search_client.close()

    return AppContainer(
        settings=resolved_settings,
        search_client=search_client,
        controller=controller,
        close_resources=close_resources,
    )
