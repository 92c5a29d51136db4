"""Tests for meal log service."""

import pytest

from meal_log.domain.errors import InvalidMealTimeError, MealNotFoundError
from meal_log.domain.meals import MealDraft
from meal_log.services.meals import MealLogService


def test_save_meal_derives_band_and_coerces_numbers(
    meal_log_service: MealLogService,
) -> None:
    meal = meal_log_service.save_meal(
        MealDraft(
            date="2024-03-05",
            time="12:30",
            name="  Ramen ",
            kcal="436",
            protein="abc",
            fat=-3,
            carbohydrate=68,
            fiber=None,
            sodium="6,0",
        )
    )

    assert meal.id == 1
    assert meal.band == "midday"
    assert meal.name == "Ramen"
    assert meal.kcal == 436
    assert meal.protein == 0
    assert meal.fat == 0
    assert meal.carbohydrate == 68
    assert meal.fiber == 0
    assert meal.sodium == 6


@pytest.mark.parametrize("time", ["8:00", "08-00", "", "noon", "０８:３０"])
def test_save_meal_rejects_bad_time(
    meal_log_service: MealLogService, meal_repository, time: str
) -> None:
    with pytest.raises(InvalidMealTimeError):
        meal_log_service.save_meal(MealDraft(date="2024-03-05", time=time))

    assert meal_repository.meals == {}


def test_list_meals_filters_by_date(meal_log_service: MealLogService) -> None:
    meal_log_service.save_meal(MealDraft(date="2024-03-05", time="07:00", name="a"))
    meal_log_service.save_meal(MealDraft(date="2024-03-06", time="07:00", name="b"))
    meal_log_service.save_meal(MealDraft(date="2024-03-05", time="21:00", name="c"))

    meals = meal_log_service.list_meals("2024-03-05")

    assert [meal.name for meal in meals] == ["a", "c"]
    assert [meal.band for meal in meals] == ["morning", "snack"]


def test_delete_meal(meal_log_service: MealLogService) -> None:
    meal = meal_log_service.save_meal(MealDraft(date="2024-03-05", time="07:00"))
    assert meal.id is not None

    meal_log_service.delete_meal(meal.id)

    assert meal_log_service.list_meals("2024-03-05") == []
    with pytest.raises(MealNotFoundError):
        meal_log_service.delete_meal(meal.id)


def test_day_summary_totals_and_score(meal_log_service: MealLogService) -> None:
    meal_log_service.save_meal(
        MealDraft(
            date="2024-03-05",
            time="08:00",
            kcal=900,
            protein=60,
            fat=30,
            carbohydrate=150,
            fiber=11,
            sodium=3,
        )
    )
    meal_log_service.save_meal(
        MealDraft(
            date="2024-03-05",
            time="19:00",
            kcal=1100,
            protein=70,
            fat=30,
            carbohydrate=160,
            fiber=10,
            sodium=4,
        )
    )

    summary = meal_log_service.day_summary("2024-03-05", burned_kcal=120)

    assert len(summary.meals) == 2
    assert summary.totals.kcal == 2000
    assert summary.totals.protein == 130
    assert summary.score == 100
    assert summary.burned_kcal == 120


def test_day_summary_for_empty_day(meal_log_service: MealLogService) -> None:
    summary = meal_log_service.day_summary("2024-01-01")

    assert summary.meals == []
    assert summary.score == 60
