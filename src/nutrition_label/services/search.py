"""Food search backed by USDA FoodData Central."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from nutrition_label.adapters.fdc_client import FdcClient
from nutrition_label.domain.errors import ProviderError
from nutrition_label.domain.foods import FoodRecord, NutrientSample
from nutrition_label.services.cache import Cache

_logger = logging.getLogger(__name__)


@dataclass
class FoodSearchService:
    """Paged food search with caching and a short retry."""

    fdc_client: FdcClient
    cache: Cache
    page_size: int = 10
    cache_ttl_seconds: int = 3600
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    async def search(
        self, query: str, page: int = 1, page_size: int | None = None
    ) -> list[FoodRecord]:
        """Return one page of foods matching ``query``.

        Raises ProviderError when FDC cannot be reached or rejects the request.
        An empty list means the search succeeded with no matches.
        """
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")
        size = page_size or self.page_size
        cache_key = f"fdc:search:{query.strip().lower()}:{page}:{size}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, list):
            return cached

        payload = await self._call_with_retry(
            lambda: self.fdc_client.search_foods(
                query, page_number=page, page_size=size
            ),
            action=f"search:{query}:{page}",
        )
        try:
            foods = [parse_food(item) for item in payload.get("foods") or []]
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise ProviderError("Malformed FDC search response") from exc
        self.cache.set(cache_key, foods, ttl_seconds=self.cache_ttl_seconds)
        _logger.info(
            "Food search: query=%r page=%s results=%s", query, page, len(foods)
        )
        return foods

    async def _call_with_retry(
        self, func: Callable[[], Awaitable[dict[str, object]]], *, action: str
    ) -> dict[str, object]:
        attempt = 0
        while True:
            try:
                return await func()
            except ProviderError:
                raise
            except Exception as exc:
                attempt += 1
                status_code = _status_code_from_exception(exc)
                _logger.warning(
                    "FDC %s failed (attempt %s/%s, status=%s): %s",
                    action,
                    attempt,
                    self.retry_attempts + 1,
                    status_code,
                    exc,
                )
                if attempt > self.retry_attempts:
                    raise ProviderError(
                        f"Food search failed (status={status_code})"
                    ) from exc
                await asyncio.sleep(self.retry_delay_seconds)


def parse_food(payload: dict[str, object]) -> FoodRecord:
    """Build a FoodRecord from an FDC search result item."""
    nutrients = []
    for raw in payload.get("foodNutrients") or []:
        nutrient_id = raw.get("nutrientId")
        value = raw.get("value")
        if nutrient_id is None or value is None:
            continue
        nutrients.append(
            NutrientSample(
                nutrient_id=int(nutrient_id),
                amount_per_100=max(float(value), 0.0),
                unit=str(raw.get("unitName") or ""),
                name=raw.get("nutrientName"),
            )
        )
    return FoodRecord(
        id=int(payload["fdcId"]),
        description=str(payload.get("description") or ""),
        nutrients=tuple(nutrients),
        brand_owner=payload.get("brandOwner"),
        food_category=payload.get("foodCategory"),
        data_type=payload.get("dataType"),
    )


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
