"""Activity dictionary and workout energy estimate."""

from dataclasses import dataclass

from meal_log.domain.errors import UnknownActivityError
from meal_log.domain.numeric import round_half_up, to_float

DEFAULT_WEIGHT_KG = 70.0


@dataclass(frozen=True)
class Activity:
    """A movement with a body-weight coefficient per unit.

    ``coefficient`` is kcal per kg of body weight for one unit: one rep,
    one minute or one kilometre depending on ``unit``.
    """

    id: str
    name: str
    unit: str
    coefficient: float


ACTIVITIES: tuple[Activity, ...] = (
    Activity("pushup", "Push-up", "rep", 0.13),
    Activity("squat", "Squat", "rep", 0.10),
    Activity("pullup", "Pull-up", "rep", 0.30),
    Activity("lunge", "Lunge", "rep", 0.12),
    Activity("plank", "Plank", "min", 0.18),
    Activity("walk", "Walk", "min", 0.07),
    Activity("jog", "Jog", "min", 0.12),
    # roughly body weight (kg) x distance (km)
    Activity("run", "Run", "km", 1.0),
)

_BY_ID = {activity.id: activity for activity in ACTIVITIES}


@dataclass(frozen=True)
class Workout:
    """A logged workout with its estimated energy."""

    date: str
    activity: str
    unit: str
    quantity: float
    kcal: float
    id: int | None = None


def get_activity(activity_id: str) -> Activity:
    """Return an activity by id."""
    activity = _BY_ID.get(activity_id)
    if activity is None:
        raise UnknownActivityError(f"Unknown activity: {activity_id}")
    return activity


def calc_workout_kcal(weight_kg: object, activity_id: str, quantity: object) -> int:
    """Estimate burned kcal as weight x coefficient x quantity, never negative."""
    activity = get_activity(activity_id)
    weight = to_float(weight_kg) or DEFAULT_WEIGHT_KG
    amount = max(0.0, to_float(quantity))
    return max(0, round_half_up(weight * activity.coefficient * amount))
