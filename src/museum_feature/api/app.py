"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import HTMLResponse

from museum_feature.api.models import SearchRequest, StateResponse
from museum_feature.app_logging import configure_logging
from museum_feature.containers import AppContainer
from museum_feature.domain.render_tree import to_html
from museum_feature.domain.view_state import SearchQuery
from museum_feature.services.controller import FeatureController


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/feature", response_class=HTMLResponse)
    async def feature(request: Request) -> HTMLResponse:
        """Render the featured record."""
        controller = _controller(request)
        return HTMLResponse(to_html(controller.render()))

    @app.post("/feature/{index}", response_class=HTMLResponse)
    async def select_feature(index: int, request: Request) -> HTMLResponse:
        """Feature a result from the current result set."""
        controller = _controller(request)
        try:
            controller.select_result(index)
        except IndexError as exc:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
            ) from exc
        return HTMLResponse(to_html(controller.render()))

    @app.get("/state")
    async def state(request: Request) -> StateResponse:
        """Return the shared loading flag and result summary."""
        return _state_response(_controller(request))

    @app.post("/search")
    async def search(payload: SearchRequest, request: Request) -> StateResponse:
        """Run a term/value search and replace the result set."""
        controller = _controller(request)
        logger.info("Search requested: term=%s value=%s", payload.term, payload.value)
        await controller.search(SearchQuery(term=payload.term, value=payload.value))
        return _state_response(controller)

    return app


def _controller(request: Request) -> FeatureController:
    container: AppContainer = request.app.state.container
    return container.controller


def _state_response(controller: FeatureController) -> StateResponse:
    featured = controller.featured_result
    return StateResponse(
        is_loading=controller.state.is_loading,
        result_count=len(controller.state.search_results),
        featured_title=featured.title if featured else None,
    )
