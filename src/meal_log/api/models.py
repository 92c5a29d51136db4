"""Pydantic models for API requests and responses."""

from pydantic import BaseModel, Field

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


class MealIn(BaseModel):
    """Meal entry payload; nutrient fields accept numbers or numeric text."""

    date: str | None = Field(default=None, pattern=DATE_PATTERN)
    time: str | None = None
    name: str = ""
    kcal: float | str | None = None
    protein: float | str | None = None
    fat: float | str | None = None
    carbohydrate: float | str | None = None
    fiber: float | str | None = None
    sodium: float | str | None = None


class MealOut(BaseModel):
    """Stored meal."""

    id: int | None
    date: str
    time: str
    band: str
    name: str
    kcal: float
    protein: float
    fat: float
    carbohydrate: float
    fiber: float
    sodium: float


class NutrientsOut(BaseModel):
    """Nutrient values."""

    kcal: float
    protein: float
    fat: float
    carbohydrate: float
    fiber: float
    sodium: float


class DaySummaryOut(BaseModel):
    """Daily totals and score."""

    date: str
    meals: list[MealOut]
    totals: NutrientsOut
    score: int
    burned_kcal: float


class WorkoutIn(BaseModel):
    """Workout entry payload."""

    date: str | None = Field(default=None, pattern=DATE_PATTERN)
    activity: str
    quantity: float | str | None = None


class WorkoutOut(BaseModel):
    """Stored workout."""

    id: int | None
    date: str
    activity: str
    unit: str
    quantity: float
    kcal: float


class ActivityOut(BaseModel):
    """Dictionary activity."""

    id: str
    name: str
    unit: str
    coefficient: float


class WeightIn(BaseModel):
    """Body weight payload."""

    weight_kg: float = Field(gt=0)


class WeightOut(BaseModel):
    """Current body weight."""

    weight_kg: float


class FoodOut(BaseModel):
    """Dictionary food suggestion."""

    name: str
    aliases: list[str]
    kcal: float
    protein: float
    fat: float
    carbohydrate: float
    fiber: float
    sodium: float


class BarcodeOut(BaseModel):
    """Barcode product with per-100g baseline and a scaled portion."""

    barcode: str
    name: str
    per_100g: NutrientsOut
    serving_g: float | None
    net_g: float
    portion: NutrientsOut
