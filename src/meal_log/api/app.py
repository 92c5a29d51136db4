"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import FastAPI, HTTPException, Path, Query, Request, status

from meal_log.api.models import (
    DATE_PATTERN,
    ActivityOut,
    BarcodeOut,
    DaySummaryOut,
    FoodOut,
    MealIn,
    MealOut,
    NutrientsOut,
    WeightIn,
    WeightOut,
    WorkoutIn,
    WorkoutOut,
)
from meal_log.app_logging import configure_logging
from meal_log.containers import AppContainer
from meal_log.domain.activities import ACTIVITIES
from meal_log.domain.errors import (
    BarcodeLookupError,
    InvalidMealTimeError,
    InvalidWeightError,
    MealNotFoundError,
    ProductNotFoundError,
    UnknownActivityError,
)
from meal_log.domain.meals import MealDraft
from meal_log.domain.timebands import now_hhmm, today_str

UNPROCESSABLE_STATUS = 422


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Meal log API starting: db=%s", container.settings.db_path)
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/meals")
    async def list_meals(
        request: Request, date: str | None = Query(None, pattern=DATE_PATTERN)
    ) -> list[MealOut]:
        """Return meals for a date (today by default)."""
        state_container: AppContainer = request.app.state.container
        meals = state_container.meal_log_service.list_meals(date or today_str())
        return [MealOut(**asdict(meal)) for meal in meals]

    @app.post("/meals", status_code=status.HTTP_201_CREATED)
    async def create_meal(payload: MealIn, request: Request) -> MealOut:
        """Log a meal; the time band is derived from its time."""
        state_container: AppContainer = request.app.state.container
        draft = MealDraft(
            date=payload.date or today_str(),
            time=payload.time if payload.time is not None else now_hhmm(),
            name=payload.name,
            kcal=payload.kcal,
            protein=payload.protein,
            fat=payload.fat,
            carbohydrate=payload.carbohydrate,
            fiber=payload.fiber,
            sodium=payload.sodium,
        )
        try:
            meal = state_container.meal_log_service.save_meal(draft)
        except InvalidMealTimeError as exc:
            raise HTTPException(
                status_code=UNPROCESSABLE_STATUS, detail=str(exc)
            ) from exc
        return MealOut(**asdict(meal))

    @app.delete("/meals/{meal_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_meal(meal_id: int, request: Request) -> None:
        """Delete a meal by id."""
        state_container: AppContainer = request.app.state.container
        try:
            state_container.meal_log_service.delete_meal(meal_id)
        except MealNotFoundError as exc:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
            ) from exc

    @app.get("/days/{date}/summary")
    async def day_summary(
        request: Request, date: str = Path(pattern=DATE_PATTERN)
    ) -> DaySummaryOut:
        """Return totals, score and burned kcal for a date."""
        state_container: AppContainer = request.app.state.container
        burned = state_container.workout_service.day_burned_kcal(date)
        summary = state_container.meal_log_service.day_summary(date, burned)
        return DaySummaryOut(
            date=summary.date,
            meals=[MealOut(**asdict(meal)) for meal in summary.meals],
            totals=NutrientsOut(**asdict(summary.totals)),
            score=summary.score,
            burned_kcal=summary.burned_kcal,
        )

    @app.get("/workouts")
    async def list_workouts(
        request: Request, date: str | None = Query(None, pattern=DATE_PATTERN)
    ) -> list[WorkoutOut]:
        """Return workouts for a date (today by default)."""
        state_container: AppContainer = request.app.state.container
        workouts = state_container.workout_service.list_workouts(date or today_str())
        return [WorkoutOut(**asdict(workout)) for workout in workouts]

    @app.post("/workouts", status_code=status.HTTP_201_CREATED)
    async def create_workout(payload: WorkoutIn, request: Request) -> WorkoutOut:
        """Log a workout with kcal estimated from the stored body weight."""
        state_container: AppContainer = request.app.state.container
        try:
            workout = state_container.workout_service.log_workout(
                payload.date or today_str(), payload.activity, payload.quantity
            )
        except UnknownActivityError as exc:
            raise HTTPException(
                status_code=UNPROCESSABLE_STATUS, detail=str(exc)
            ) from exc
        return WorkoutOut(**asdict(workout))

    @app.get("/activities")
    async def list_activities() -> list[ActivityOut]:
        """Return the activity dictionary."""
        return [ActivityOut(**asdict(activity)) for activity in ACTIVITIES]

    @app.get("/settings/weight")
    async def get_weight(request: Request) -> WeightOut:
        """Return the current body weight."""
        state_container: AppContainer = request.app.state.container
        return WeightOut(weight_kg=state_container.body_weight_service.get_weight_kg())

    @app.put("/settings/weight")
    async def set_weight(payload: WeightIn, request: Request) -> WeightOut:
        """Store the body weight rounded to whole kilograms."""
        state_container: AppContainer = request.app.state.container
        try:
            stored = state_container.body_weight_service.set_weight_kg(
                payload.weight_kg
            )
        except InvalidWeightError as exc:
            raise HTTPException(
                status_code=UNPROCESSABLE_STATUS, detail=str(exc)
            ) from exc
        return WeightOut(weight_kg=stored)

    @app.get("/foods/search")
    async def search_foods(
        request: Request, q: str = "", limit: int = Query(10, ge=1, le=50)
    ) -> list[FoodOut]:
        """Return dictionary foods matching a query."""
        state_container: AppContainer = request.app.state.container
        foods = state_container.food_search_service.search(q, limit=limit)
        return [FoodOut(**asdict(food)) for food in foods]

    @app.get("/barcode/{code}")
    async def lookup_barcode(
        code: str, request: Request, net: float | None = Query(None, ge=0)
    ) -> BarcodeOut:
        """Look up a barcode and scale its nutrients to NET grams."""
        state_container: AppContainer = request.app.state.container
        service = state_container.barcode_service
        try:
            product = await service.lookup(code)
        except ProductNotFoundError as exc:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
            ) from exc
        except BarcodeLookupError as exc:
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)
            ) from exc
        portion = service.portion(product, net)
        return BarcodeOut(
            barcode=product.barcode,
            name=product.name,
            per_100g=NutrientsOut(**asdict(product.per_100g)),
            serving_g=product.serving_g,
            net_g=portion.net_g,
            portion=NutrientsOut(**asdict(portion.nutrients)),
        )

    return app
