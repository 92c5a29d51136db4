"""Shared test fixtures."""

from dataclasses import dataclass, field, replace

import pytest

from meal_log.adapters.json_food_dictionary import load_food_dictionary
from meal_log.adapters.openfoodfacts_client import OpenFoodFactsClient
from meal_log.config import Settings
from meal_log.containers import AppContainer
from meal_log.domain.activities import Workout
from meal_log.domain.meals import Meal
from meal_log.services.barcode import BarcodeService
from meal_log.services.food_search import FoodSearchService
from meal_log.services.meals import MealLogService, MealRepository
from meal_log.services.user_settings import BodyWeightService, SettingsRepository
from meal_log.services.workouts import WorkoutRepository, WorkoutService


@dataclass
class InMemoryMealRepository(MealRepository):
    """In-memory meal repository for tests."""

    meals: dict[int, Meal] = field(default_factory=dict)
    next_id: int = 1

    def insert_meal(self, meal: Meal) -> int:
        meal_id = self.next_id
        self.next_id += 1
        self.meals[meal_id] = replace(meal, id=meal_id)
        return meal_id

    def list_meals(self, date: str) -> list[Meal]:
        return [meal for meal in self.meals.values() if meal.date == date]

    def delete_meal(self, meal_id: int) -> bool:
        return self.meals.pop(meal_id, None) is not None


@dataclass
class InMemoryWorkoutRepository(WorkoutRepository):
    """In-memory workout repository for tests."""

    workouts: list[Workout] = field(default_factory=list)

    def insert_workout(self, workout: Workout) -> int:
        workout_id = len(self.workouts) + 1
        self.workouts.append(replace(workout, id=workout_id))
        return workout_id

    def list_workouts(self, date: str) -> list[Workout]:
        return [workout for workout in self.workouts if workout.date == date]


@dataclass
class InMemorySettingsRepository(SettingsRepository):
    """In-memory settings repository for tests."""

    values: dict[str, str] = field(default_factory=dict)

    def get_setting(self, key: str) -> str | None:
        return self.values.get(key)

    def set_setting(self, key: str, value: str) -> None:
        self.values[key] = value


@dataclass
class FakeOpenFoodFactsClient(OpenFoodFactsClient):
    """Fake OpenFoodFacts client serving products from a dict."""

    products: dict[str, dict[str, object]] = field(
        default_factory=lambda: {
            "4901234567890": {
                "product_name": "Oat Drink",
                "serving_quantity": "200",
                "nutriments": {
                    "energy-kcal_100g": 46,
                    "proteins_100g": 1,
                    "fat_100g": 1.5,
                    "carbohydrates_100g": 6.5,
                    "fiber_100g": "0,8",
                    "salt_100g": 0.1,
                },
            }
        }
    )
    calls: list[str] = field(default_factory=list)

    async def get_product(self, barcode: str) -> dict[str, object]:
        self.calls.append(barcode)
        product = self.products.get(barcode)
        if product is None:
            return {"status": 0, "status_verbose": "product not found"}
        return {"status": 1, "code": barcode, "product": product}


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(db_path=tmp_path / "meal.db")


@pytest.fixture
def meal_repository() -> InMemoryMealRepository:
    return InMemoryMealRepository()


@pytest.fixture
def settings_repository() -> InMemorySettingsRepository:
    return InMemorySettingsRepository()


@pytest.fixture
def body_weight_service(
    settings_repository: InMemorySettingsRepository,
) -> BodyWeightService:
    return BodyWeightService(settings_repository)


@pytest.fixture
def meal_log_service(meal_repository: InMemoryMealRepository) -> MealLogService:
    return MealLogService(meal_repository)


@pytest.fixture
def workout_service(body_weight_service: BodyWeightService) -> WorkoutService:
    return WorkoutService(
        repository=InMemoryWorkoutRepository(),
        body_weight_service=body_weight_service,
    )


@pytest.fixture
def openfoodfacts_client() -> FakeOpenFoodFactsClient:
    return FakeOpenFoodFactsClient()


@pytest.fixture
def container(
    settings: Settings,
    meal_log_service: MealLogService,
    workout_service: WorkoutService,
    body_weight_service: BodyWeightService,
    openfoodfacts_client: FakeOpenFoodFactsClient,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        meal_log_service=meal_log_service,
        workout_service=workout_service,
        body_weight_service=body_weight_service,
        food_search_service=FoodSearchService(load_food_dictionary()),
        barcode_service=BarcodeService(openfoodfacts_client),
        close_resources=close_resources,
    )
