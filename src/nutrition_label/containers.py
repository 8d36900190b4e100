"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from nutrition_label.adapters.fdc_client import HttpxFdcClient
from nutrition_label.config import Settings
from nutrition_label.domain.reference import (
    DAILY_VALUES,
    HOUSEHOLD_UNITS,
    DailyValueTable,
    UnitConversionTable,
)
from nutrition_label.services.cache import InMemoryCache
from nutrition_label.services.label import LabelService
from nutrition_label.services.rendering import (
    HtmlLabelRenderer,
    LabelRenderer,
    PlainTextLabelRenderer,
)
from nutrition_label.services.search import FoodSearchService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    units: UnitConversionTable
    search_service: FoodSearchService
    label_service: LabelService
    renderers: dict[str, LabelRenderer]
    close_resources: Callable[[], Awaitable[None]]


def build_container(
    settings: Settings | None = None,
    units: UnitConversionTable = HOUSEHOLD_UNITS,
    daily_values: DailyValueTable = DAILY_VALUES,
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    fdc_client = HttpxFdcClient.create(
        api_key=resolved_settings.fdc_api_key,
        base_url=resolved_settings.fdc_base_url,
        timeout_seconds=resolved_settings.fdc_timeout_seconds,
    )
    search_service = FoodSearchService(
        fdc_client=fdc_client,
        cache=InMemoryCache(),
        page_size=resolved_settings.search_page_size,
        cache_ttl_seconds=resolved_settings.search_cache_ttl_seconds,
        retry_attempts=resolved_settings.search_retry_attempts,
    )
    label_service = LabelService(units=units, daily_values=daily_values)

    async def close_resources() -> None:
        await fdc_client.close()

    return AppContainer(
        settings=resolved_settings,
        units=units,
        search_service=search_service,
        label_service=label_service,
        renderers={"text": PlainTextLabelRenderer(), "html": HtmlLabelRenderer()},
        close_resources=close_resources,
    )
