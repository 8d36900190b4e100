"""Shared test fixtures."""

import logging
from dataclasses import dataclass, field

import pytest

from nutrition_label.adapters.fdc_client import FdcClient
from nutrition_label.config import Settings
from nutrition_label.containers import AppContainer
from nutrition_label.domain.foods import (
    CHOLESTEROL,
    DIETARY_FIBER,
    ENERGY,
    ENERGY_ATWATER_GENERAL,
    PROTEIN,
    SATURATED_FAT,
    SODIUM,
    TOTAL_CARBOHYDRATE,
    TOTAL_FAT,
    FoodRecord,
    NutrientSample,
)
from nutrition_label.domain.reference import DAILY_VALUES, HOUSEHOLD_UNITS
from nutrition_label.services.cache import InMemoryCache
from nutrition_label.services.label import LabelService
from nutrition_label.services.rendering import (
    HtmlLabelRenderer,
    PlainTextLabelRenderer,
)
from nutrition_label.services.search import FoodSearchService


def _fdc_nutrient(
    nutrient_id: int, name: str, unit: str, value: float
) -> dict[str, object]:
    return {
        "nutrientId": nutrient_id,
        "nutrientName": name,
        "unitName": unit,
        "value": value,
    }


APPLE_PAYLOAD: dict[str, object] = {
    "fdcId": 1750340,
    "description": "Apple",
    "dataType": "Foundation",
    "foodCategory": "Fruits and Fruit Juices",
    "foodNutrients": [
        _fdc_nutrient(ENERGY, "Energy", "KCAL", 52),
        _fdc_nutrient(TOTAL_FAT, "Total lipid (fat)", "G", 0.2),
        _fdc_nutrient(TOTAL_CARBOHYDRATE, "Carbohydrate, by difference", "G", 13.8),
        _fdc_nutrient(DIETARY_FIBER, "Fiber, total dietary", "G", 2.4),
        _fdc_nutrient(PROTEIN, "Protein", "G", 0.3),
        _fdc_nutrient(SODIUM, "Sodium, Na", "MG", 1),
    ],
}


@dataclass
class FakeFdcClient(FdcClient):
    """Fake FDC client with in-memory responses."""

    search_payload: dict[str, object] = field(
        default_factory=lambda: {"totalHits": 1, "foods": [APPLE_PAYLOAD]}
    )
    error: Exception | None = None
    calls: list[tuple[str, int, int]] = field(default_factory=list)

    async def search_foods(
        self, query: str, page_number: int = 1, page_size: int = 10
    ) -> dict[str, object]:
        self.calls.append((query, page_number, page_size))
        if self.error is not None:
            raise self.error
        return self.search_payload


@pytest.fixture(autouse=True)
def propagate_package_logs() -> None:
    # create_app turns propagation off; caplog listens on the root logger
    logging.getLogger("nutrition_label").propagate = True


@pytest.fixture
def apple() -> FoodRecord:
    return FoodRecord(
        id=1,
        description="Apple",
        nutrients=(
            NutrientSample(ENERGY, 52, "KCAL"),
            NutrientSample(TOTAL_FAT, 0.2, "G"),
            NutrientSample(TOTAL_CARBOHYDRATE, 13.8, "G"),
            NutrientSample(DIETARY_FIBER, 2.4, "G"),
            NutrientSample(PROTEIN, 0.3, "G"),
            NutrientSample(SODIUM, 1, "MG"),
        ),
    )


@pytest.fixture
def butter() -> FoodRecord:
    return FoodRecord(
        id=2,
        description="Butter, salted",
        nutrients=(
            NutrientSample(ENERGY_ATWATER_GENERAL, 717, "KCAL"),
            NutrientSample(TOTAL_FAT, 81.1, "G"),
            NutrientSample(SATURATED_FAT, 51.4, "G"),
            NutrientSample(CHOLESTEROL, 215, "MG"),
            NutrientSample(SODIUM, 643, "MG"),
            NutrientSample(PROTEIN, 0.85, "G"),
        ),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, fdc_api_key="fdc-key", environment="test")


@pytest.fixture
def fdc_client() -> FakeFdcClient:
    return FakeFdcClient()


@pytest.fixture
def container(settings: Settings, fdc_client: FakeFdcClient) -> AppContainer:
    search_service = FoodSearchService(
        fdc_client=fdc_client,
        cache=InMemoryCache(),
        page_size=settings.search_page_size,
        retry_attempts=settings.search_retry_attempts,
        retry_delay_seconds=0,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        units=HOUSEHOLD_UNITS,
        search_service=search_service,
        label_service=LabelService(units=HOUSEHOLD_UNITS, daily_values=DAILY_VALUES),
        renderers={"text": PlainTextLabelRenderer(), "html": HtmlLabelRenderer()},
        close_resources=close_resources,
    )
