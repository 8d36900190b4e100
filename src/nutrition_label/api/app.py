"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse, Response

from nutrition_label.api.schemas import (
    FoodPayload,
    LabelRequest,
    LabelResponse,
    SearchResponse,
)
from nutrition_label.app_logging import configure_logging
from nutrition_label.containers import AppContainer
from nutrition_label.domain.errors import LabelError, ProviderError
from nutrition_label.domain.label import LabelSummary
from nutrition_label.services.selection import Selection


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Nutrition Label Builder", lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(ProviderError)
    async def provider_error_handler(
        request: Request, exc: ProviderError
    ) -> JSONResponse:
        logger.warning("Food provider error on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": _format_error(container, exc, "Food search failed.")},
        )

    @app.exception_handler(LabelError)
    async def label_error_handler(request: Request, exc: LabelError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/units")
    async def units(request: Request) -> dict[str, dict[str, float]]:
        """Household units and their gram equivalents."""
        state_container: AppContainer = request.app.state.container
        return {"units": dict(state_container.units.factors)}

    @app.get("/foods/search")
    async def search_foods(
        request: Request,
        query: str = Query(min_length=1),
        page: int = Query(default=1, ge=1),
        page_size: int | None = Query(default=None, ge=1, le=200),
    ) -> SearchResponse:
        """Return one page of FoodData Central results."""
        state_container: AppContainer = request.app.state.container
        search_service = state_container.search_service
        foods = await search_service.search(query, page=page, page_size=page_size)
        return SearchResponse(
            query=query,
            page=page,
            page_size=page_size or search_service.page_size,
            foods=[FoodPayload.from_record(food) for food in foods],
        )

    @app.post("/labels")
    async def build_label(payload: LabelRequest, request: Request) -> LabelResponse:
        """Compute the nutrition facts label for a selection."""
        summary = _summarize(request.app.state.container, payload)
        return LabelResponse.from_summary(summary)

    @app.post("/labels/{fmt}")
    async def render_label(
        fmt: str, payload: LabelRequest, request: Request
    ) -> Response:
        """Render the label as text or printable HTML."""
        state_container: AppContainer = request.app.state.container
        renderer = state_container.renderers.get(fmt)
        if renderer is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Unknown label format: {fmt}",
            )
        body = renderer.render(_summarize(state_container, payload))
        return Response(body, media_type=renderer.media_type)

    return app


def _summarize(container: AppContainer, payload: LabelRequest) -> LabelSummary:
    """Build a selection from the request and compute its summary."""
    selection = Selection(
        units=container.units,
        strict_units=container.settings.strict_household_units,
    )
    selection.servings_per_container = payload.servings_per_container
    for item in payload.items:
        selection.add(item.food.to_record(), quantity=item.quantity, unit=item.unit)
    return container.label_service.build_summary(
        selection.entries, selection.servings_per_container
    )


def _format_error(container: AppContainer, exc: Exception, fallback: str) -> str:
    """Return a client-facing error message with local debug info."""
    if container.settings.environment == "local":
        detail = f"{type(exc).__name__}: {exc}".strip()
        if detail:
            return f"{fallback} (debug: {detail})"
    return fallback
