"""Tests for the activity dictionary and workout kcal estimate."""

import pytest

from meal_log.domain.activities import ACTIVITIES, calc_workout_kcal, get_activity
from meal_log.domain.errors import UnknownActivityError


def test_dictionary_units() -> None:
    units = {activity.id: activity.unit for activity in ACTIVITIES}

    assert units["pushup"] == "rep"
    assert units["plank"] == "min"
    assert units["run"] == "km"
    assert len(ACTIVITIES) == 8


def test_get_activity_unknown_raises() -> None:
    with pytest.raises(UnknownActivityError):
        get_activity("swim")


def test_kcal_is_weight_times_coefficient_times_quantity() -> None:
    assert calc_workout_kcal(70, "pushup", 10) == 91
    assert calc_workout_kcal(80, "walk", 30) == 168
    assert calc_workout_kcal(65, "run", 5) == 325


def test_kcal_defaults_weight_to_70() -> None:
    assert calc_workout_kcal(None, "plank", 2) == 25
    assert calc_workout_kcal(0, "plank", 2) == 25


def test_kcal_is_never_negative() -> None:
    assert calc_workout_kcal(70, "squat", -20) == 0
    assert calc_workout_kcal(70, "squat", "abc") == 0
    assert calc_workout_kcal(-70, "squat", 20) == 0
