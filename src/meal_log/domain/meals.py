"""Domain models for meal logging."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MealDraft:
    """Raw meal input as entered, before validation and coercion."""

    date: str
    time: str
    name: str = ""
    kcal: object = 0
    protein: object = 0
    fat: object = 0
    carbohydrate: object = 0
    fiber: object = 0
    sodium: object = 0


@dataclass(frozen=True)
class Meal:
    """A logged meal. ``sodium`` is the salt equivalent in grams."""

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
    id: int | None = None


@dataclass(frozen=True)
class DayTotals:
    """Summed nutrients for one day of meals."""

    kcal: float = 0.0
    protein: float = 0.0
    fat: float = 0.0
    carbohydrate: float = 0.0
    fiber: float = 0.0
    sodium: float = 0.0


@dataclass(frozen=True)
class DaySummary:
    """Meals, totals, score and burned energy for a date."""

    date: str
    meals: list[Meal]
    totals: DayTotals
    score: int
    burned_kcal: float = 0.0
