"""Meal logging service."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol

from meal_log.domain.errors import InvalidMealTimeError, MealNotFoundError
from meal_log.domain.meals import DaySummary, Meal, MealDraft
from meal_log.domain.numeric import to_float
from meal_log.domain.scoring import calc_daily_score, sum_meals
from meal_log.domain.timebands import assign_band, is_valid_hhmm

_logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for meals."""

    def insert_meal(self, meal: Meal) -> int:
        """Persist a meal and return its id."""

    def list_meals(self, date: str) -> list[Meal]:
        """Return meals logged on a date, oldest first."""

    def delete_meal(self, meal_id: int) -> bool:
        """Delete a meal, returning False when it did not exist."""


@dataclass
class MealLogService:
    """Service that validates, stores and summarizes meals."""

    repository: MealRepository

    def save_meal(self, draft: MealDraft) -> Meal:
        """Validate a draft, derive its time band and persist it."""
        time = draft.time.strip()
        if not is_valid_hhmm(time):
            raise InvalidMealTimeError(f"Time must be HH:MM (e.g. 08:00): {time!r}")
        meal = Meal(
            date=draft.date,
            time=time,
            band=assign_band(time),
            name=draft.name.strip(),
            kcal=_non_negative(draft.kcal),
            protein=_non_negative(draft.protein),
            fat=_non_negative(draft.fat),
            carbohydrate=_non_negative(draft.carbohydrate),
            fiber=_non_negative(draft.fiber),
            sodium=_non_negative(draft.sodium),
        )
        meal_id = self.repository.insert_meal(meal)
        _logger.info("Meal saved: id=%s date=%s band=%s", meal_id, meal.date, meal.band)
        return replace(meal, id=meal_id)

    def list_meals(self, date: str) -> list[Meal]:
        """Return the meals logged on a date."""
        return self.repository.list_meals(date)

    def delete_meal(self, meal_id: int) -> None:
        """Delete a meal by id."""
        if not self.repository.delete_meal(meal_id):
            raise MealNotFoundError(f"Meal not found: {meal_id}")
        _logger.info("Meal deleted: id=%s", meal_id)

    def day_summary(self, date: str, burned_kcal: float = 0.0) -> DaySummary:
        """Return meals, totals and the daily score for a date."""
        meals = self.repository.list_meals(date)
        totals = sum_meals(meals)
        return DaySummary(
            date=date,
            meals=meals,
            totals=totals,
            score=calc_daily_score(totals),
            burned_kcal=burned_kcal,
        )


def _non_negative(value: object) -> float:
    return max(0.0, to_float(value))
