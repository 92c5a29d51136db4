"""Tests for workout and body weight services."""

import pytest

from meal_log.domain.errors import InvalidWeightError, UnknownActivityError
from meal_log.services.user_settings import BodyWeightService
from meal_log.services.workouts import WorkoutService


def test_weight_defaults_to_70(body_weight_service: BodyWeightService) -> None:
    assert body_weight_service.get_weight_kg() == 70


def test_set_weight_rounds_and_persists(
    body_weight_service: BodyWeightService, settings_repository
) -> None:
    stored = body_weight_service.set_weight_kg(72.6)

    assert stored == 73
    assert settings_repository.values["weightKg"] == "73"
    assert body_weight_service.get_weight_kg() == 73


@pytest.mark.parametrize("weight", [0, -5, "abc", None])
def test_set_weight_rejects_non_positive(
    body_weight_service: BodyWeightService, weight: object
) -> None:
    with pytest.raises(InvalidWeightError):
        body_weight_service.set_weight_kg(weight)


@pytest.mark.parametrize("stored", ["abc", "0", "-3", ""])
def test_unusable_stored_weight_falls_back(
    body_weight_service: BodyWeightService, settings_repository, stored: str
) -> None:
    settings_repository.values["weightKg"] = stored

    assert body_weight_service.get_weight_kg() == 70


def test_log_workout_uses_default_weight(workout_service: WorkoutService) -> None:
    workout = workout_service.log_workout("2024-03-05", "pushup", 10)

    assert workout.id == 1
    assert workout.unit == "rep"
    assert workout.quantity == 10
    assert workout.kcal == 91


def test_log_workout_uses_stored_weight(
    workout_service: WorkoutService, body_weight_service: BodyWeightService
) -> None:
    body_weight_service.set_weight_kg(80)

    workout = workout_service.log_workout("2024-03-05", "walk", "30")

    assert workout.unit == "min"
    assert workout.kcal == 168


def test_log_workout_clamps_negative_quantity(workout_service: WorkoutService) -> None:
    workout = workout_service.log_workout("2024-03-05", "jog", -15)

    assert workout.quantity == 0
    assert workout.kcal == 0


def test_unknown_activity(workout_service: WorkoutService) -> None:
    with pytest.raises(UnknownActivityError):
        workout_service.log_workout("2024-03-05", "swim", 10)

    assert workout_service.list_workouts("2024-03-05") == []


def test_day_burned_kcal(workout_service: WorkoutService) -> None:
    workout_service.log_workout("2024-03-05", "pushup", 10)
    workout_service.log_workout("2024-03-05", "run", 5)
    workout_service.log_workout("2024-03-06", "run", 5)

    assert workout_service.day_burned_kcal("2024-03-05") == 91 + 350
    assert len(workout_service.list_workouts("2024-03-05")) == 2
