"""Daily nutrition score.

Each of protein, fat and carbohydrate earns up to 25 points by closeness to
its target. Fiber earns up to 25 points for reaching its target and sodium
(salt equivalent) keeps 25 points up to its ceiling, decaying linearly to 0 at
twice the ceiling. The sum is clamped to [60, 100].
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass

from meal_log.domain.meals import DayTotals, Meal
from meal_log.domain.numeric import round_half_up, to_float

SUB_SCORE_POINTS = 25
MIN_SCORE = 60
MAX_SCORE = 100


@dataclass(frozen=True)
class NutritionTargets:
    """Daily targets in grams."""

    protein: float = 130
    fat: float = 60
    carbohydrate: float = 310
    fiber: float = 21
    sodium: float = 7


TARGETS = NutritionTargets()


def score_around_target(value: float, target: float) -> int:
    """Score proximity to a target, 25 at the target and 0 at 2x or 0."""
    if not math.isfinite(value) or target <= 0:
        return 0
    ratio = max(0.0, 1 - abs(value - target) / target)
    return round_half_up(ratio * SUB_SCORE_POINTS)


def score_fiber(value: float, target: float = TARGETS.fiber) -> int:
    """Score fiber sufficiency, capped once the target is reached."""
    if not math.isfinite(value) or target <= 0:
        return 0
    ratio = max(0.0, min(1.0, value / target))
    return round_half_up(ratio * SUB_SCORE_POINTS)


def score_sodium(value: float, target: float = TARGETS.sodium) -> int:
    """Score sodium against a ceiling."""
    if not math.isfinite(value) or target <= 0:
        return 0
    if value <= target:
        return SUB_SCORE_POINTS
    ratio = max(0.0, 1 - (value - target) / target)
    return round_half_up(ratio * SUB_SCORE_POINTS)


def calc_daily_score(totals: DayTotals, targets: NutritionTargets = TARGETS) -> int:
    """Return the daily score for aggregated totals."""
    total = (
        score_around_target(totals.protein, targets.protein)
        + score_around_target(totals.fat, targets.fat)
        + score_around_target(totals.carbohydrate, targets.carbohydrate)
        + score_fiber(totals.fiber, targets.fiber)
        + score_sodium(totals.sodium, targets.sodium)
    )
    return max(MIN_SCORE, min(MAX_SCORE, total))


def sum_meals(meals: Iterable[Meal]) -> DayTotals:
    """Sum a day's meals, counting malformed or negative values as 0."""
    kcal = protein = fat = carbohydrate = fiber = sodium = 0.0
    for meal in meals:
        kcal += max(0.0, to_float(meal.kcal))
        protein += max(0.0, to_float(meal.protein))
        fat += max(0.0, to_float(meal.fat))
        carbohydrate += max(0.0, to_float(meal.carbohydrate))
        fiber += max(0.0, to_float(meal.fiber))
        sodium += max(0.0, to_float(meal.sodium))
    return DayTotals(
        kcal=kcal,
        protein=protein,
        fat=fat,
        carbohydrate=carbohydrate,
        fiber=fiber,
        sodium=sodium,
    )
