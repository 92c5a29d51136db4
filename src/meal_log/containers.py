"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from meal_log.adapters.json_food_dictionary import load_food_dictionary
from meal_log.adapters.openfoodfacts_client import HttpxOpenFoodFactsClient
from meal_log.adapters.sqlite_database import connect, init_db
from meal_log.adapters.sqlite_meal_repository import SqliteMealRepository
from meal_log.adapters.sqlite_settings_repository import SqliteSettingsRepository
from meal_log.adapters.sqlite_workout_repository import SqliteWorkoutRepository
from meal_log.config import Settings
from meal_log.services.barcode import BarcodeService
from meal_log.services.food_search import FoodSearchService
from meal_log.services.meals import MealLogService
from meal_log.services.user_settings import BodyWeightService
from meal_log.services.workouts import WorkoutService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    meal_log_service: MealLogService
    workout_service: WorkoutService
    body_weight_service: BodyWeightService
    food_search_service: FoodSearchService
    barcode_service: BarcodeService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    conn = connect(resolved_settings.db_path)
    init_db(conn)
    body_weight_service = BodyWeightService(
        SqliteSettingsRepository(conn),
        default_weight_kg=resolved_settings.default_weight_kg,
    )
    meal_log_service = MealLogService(SqliteMealRepository(conn))
    workout_service = WorkoutService(
        repository=SqliteWorkoutRepository(conn),
        body_weight_service=body_weight_service,
    )
    food_search_service = FoodSearchService(
        foods=load_food_dictionary(resolved_settings.food_dictionary_path),
        threshold=resolved_settings.food_search_threshold,
    )
    openfoodfacts_client = HttpxOpenFoodFactsClient.create(
        base_url=resolved_settings.openfoodfacts_base_url,
        timeout_seconds=resolved_settings.http_timeout_seconds,
    )
    barcode_service = BarcodeService(openfoodfacts_client)

    async def close_resources() -> None:
        await openfoodfacts_client.close()
        conn.close()

    return AppContainer(
        settings=resolved_settings,
        meal_log_service=meal_log_service,
        workout_service=workout_service,
        body_weight_service=body_weight_service,
        food_search_service=food_search_service,
        barcode_service=barcode_service,
        close_resources=close_resources,
    )
