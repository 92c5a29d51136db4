"""Workout logging service."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol

from meal_log.domain.activities import Workout, calc_workout_kcal, get_activity
from meal_log.domain.numeric import to_float
from meal_log.services.user_settings import BodyWeightService

_logger = logging.getLogger(__name__)


class WorkoutRepository(Protocol):
    """Persistence interface for workouts."""

    def insert_workout(self, workout: Workout) -> int:
        """Persist a workout and return its id."""

    def list_workouts(self, date: str) -> list[Workout]:
        """Return workouts logged on a date, oldest first."""


@dataclass
class WorkoutService:
    """Service that estimates and stores workouts."""

    repository: WorkoutRepository
    body_weight_service: BodyWeightService

    def log_workout(self, date: str, activity_id: str, quantity: object) -> Workout:
        """Estimate kcal from the current body weight and persist the workout."""
        activity = get_activity(activity_id)
        amount = max(0.0, to_float(quantity))
        weight = self.body_weight_service.get_weight_kg()
        workout = Workout(
            date=date,
            activity=activity.id,
            unit=activity.unit,
            quantity=amount,
            kcal=float(calc_workout_kcal(weight, activity.id, amount)),
        )
        workout_id = self.repository.insert_workout(workout)
        _logger.info(
            "Workout saved: id=%s activity=%s qty=%s kcal=%s",
            workout_id,
            workout.activity,
            workout.quantity,
            workout.kcal,
        )
        return replace(workout, id=workout_id)

    def list_workouts(self, date: str) -> list[Workout]:
        """Return the workouts logged on a date."""
        return self.repository.list_workouts(date)

    def day_burned_kcal(self, date: str) -> float:
        """Return the kcal burned across a date's workouts."""
        return sum(workout.kcal for workout in self.repository.list_workouts(date))
