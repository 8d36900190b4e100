"""Pydantic models for the HTTP API."""

from pydantic import BaseModel, Field

from nutrition_label.domain.foods import FoodRecord, NutrientSample
from nutrition_label.domain.label import LabelRow, LabelSummary
from nutrition_label.services.label import round_amount


class NutrientPayload(BaseModel):
    """Nutrient amount per 100 g."""

    nutrient_id: int
    amount_per_100: float = Field(ge=0)
    unit: str = ""
    name: str | None = None


class FoodPayload(BaseModel):
    """Food record as exchanged with clients."""

    id: int
    description: str
    nutrients: list[NutrientPayload] = Field(default_factory=list)
    brand_owner: str | None = None
    food_category: str | None = None
    data_type: str | None = None

    @classmethod
    def from_record(cls, record: FoodRecord) -> "FoodPayload":
        return cls(
            id=record.id,
            description=record.description,
            nutrients=[
                NutrientPayload(
                    nutrient_id=sample.nutrient_id,
                    amount_per_100=sample.amount_per_100,
                    unit=sample.unit,
                    name=sample.name,
                )
                for sample in record.nutrients
            ],
            brand_owner=record.brand_owner,
            food_category=record.food_category,
            data_type=record.data_type,
        )

    def to_record(self) -> FoodRecord:
        return FoodRecord(
            id=self.id,
            description=self.description,
            nutrients=tuple(
                NutrientSample(
                    nutrient_id=nutrient.nutrient_id,
                    amount_per_100=nutrient.amount_per_100,
                    unit=nutrient.unit,
                    name=nutrient.name,
                )
                for nutrient in self.nutrients
            ),
            brand_owner=self.brand_owner,
            food_category=self.food_category,
            data_type=self.data_type,
        )


class SearchResponse(BaseModel):
    """One page of food search results."""

    query: str
    page: int
    page_size: int
    foods: list[FoodPayload]


class LabelItem(BaseModel):
    """A selected food with optional serving parameters."""

    food: FoodPayload
    quantity: float | None = None
    unit: str | None = None


class LabelRequest(BaseModel):
    """Selection to build a label from."""

    items: list[LabelItem] = Field(default_factory=list)
    servings_per_container: float = 1


class LabelRowPayload(BaseModel):
    """Nutrient row with display-rounded amounts."""

    key: str
    name: str
    unit: str
    indent: int
    amount_per_serving: float
    amount_total: float
    percent_daily_value: int | None

    @classmethod
    def from_row(cls, row: LabelRow) -> "LabelRowPayload":
        return cls(
            key=row.key,
            name=row.name,
            unit=row.unit,
            indent=row.indent,
            amount_per_serving=round_amount(row.amount_per_serving),
            amount_total=round_amount(row.amount_total),
            percent_daily_value=row.percent_daily_value,
        )


class LabelResponse(BaseModel):
    """Computed nutrition facts label."""

    servings_per_container: float
    total_mass_grams: float
    calories_per_serving: float
    calories_total: float
    rows: list[LabelRowPayload]
    ingredients: str

    @classmethod
    def from_summary(cls, summary: LabelSummary) -> "LabelResponse":
        return cls(
            servings_per_container=summary.servings_per_container,
            total_mass_grams=round_amount(summary.total_mass_grams),
            calories_per_serving=round_amount(summary.calories_per_serving),
            calories_total=round_amount(summary.calories_total),
            rows=[LabelRowPayload.from_row(row) for row in summary.rows],
            ingredients=summary.ingredients,
        )
