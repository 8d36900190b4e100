"""USDA FoodData Central search client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from nutrition_label.domain.errors import ProviderError

DEFAULT_TIMEOUT_SECONDS = 15.0


class FdcClient(Protocol):
    """Interface for FoodData Central food searches."""

    async def search_foods(
        self, query: str, page_number: int = 1, page_size: int = 10
    ) -> dict[str, object]:
        """Return one raw page of search results."""


@dataclass
class HttpxFdcClient(FdcClient):
    """HTTPX-backed FDC client."""

    api_key: str | None
    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def create(
        cls,
        api_key: str | None,
        base_url: str,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> "HttpxFdcClient":
        """Create an FDC client with a managed httpx session."""
        return cls(
            api_key=api_key,
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def search_foods(
        self, query: str, page_number: int = 1, page_size: int = 10
    ) -> dict[str, object]:
        """Search foods by free-text query."""
        if not self.api_key:
            raise ProviderError("Missing FoodData Central API key (FDC_API_KEY)")
        response = await self.http_client.get(
            f"{self.base_url}/foods/search",
            params={
                "query": query,
                "api_key": self.api_key,
                "pageNumber": page_number,
                "pageSize": page_size,
            },
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
