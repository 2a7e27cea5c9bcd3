"""FastAPI application exposing the Recetario API."""

from __future__ import annotations

import logging
from datetime import date
from time import perf_counter
from typing import Any, Optional
from uuid import uuid4

from fastapi import Body, Depends, FastAPI, HTTPException, Query, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from pydantic import BaseModel, Field, field_validator

from recetario import __version__, metrics
from recetario.config import Settings, get_settings
from recetario.logging_utils import configure_logging as configure_app_logging
from recetario.models.pantry import Pantry, PantryCategory
from recetario.models.plan import MealPlan, MealType, WeekDay
from recetario.models.recipe import Recipe, RecipeData
from recetario.models.shopping import GeneratedShopping, MergeCounts, ShoppingItem, ShoppingList
from recetario.pantry import PantryService
from recetario.planner.calendar import (
    create_empty_meal_plan,
    get_week_days,
    organize_meals_by_day,
    plan_week_count,
)
from recetario.search import search_recipes
from recetario.server import deps
from recetario.shopping import MealPlanShoppingGenerator, ShoppingListService

logger = logging.getLogger(__name__)


def _json_safe(value: Any) -> Any:
    """Convert non-serializable values into JSON-safe representations."""

    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, (list, tuple)):
        return [_json_safe(entry) for entry in value]
    if isinstance(value, dict):
        return {key: _json_safe(sub_value) for key, sub_value in value.items()}
    return repr(value)


def _configure_logging(settings: Settings) -> None:
    configure_app_logging(settings.log_level, settings.log_format, [settings.api_token or ""])


class IngredientsMergeRequest(BaseModel):
    ingredients: str = Field(max_length=20000)
    recipe_name: str = Field(min_length=1, max_length=255)
    exclude_pantry: Optional[bool] = Field(default=None)


class ManualItemRequest(BaseModel):
    text: str = Field(min_length=1, max_length=255)


class PantryItemCreateRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    category: PantryCategory = Field(default="current")
    quantity: Optional[str] = Field(default=None, max_length=64)


class PantryCategoryRequest(BaseModel):
    category: PantryCategory


class MoveToPantryRequest(BaseModel):
    text: str = Field(min_length=1, max_length=255)


class RecipeUpdateRequest(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    ingredients: Optional[str] = None
    steps: Optional[list[str]] = None
    servings: Optional[int] = Field(default=None, ge=1)
    cooking_time: Optional[str] = Field(default=None, max_length=64)
    cuisine: Optional[str] = Field(default=None, max_length=64)
    difficulty: Optional[str] = Field(default=None, pattern="^(easy|medium|hard)$")
    dietary_tags: Optional[list[str]] = None
    source_url: Optional[str] = Field(default=None, max_length=1024)

    @field_validator("title", "ingredients")
    @classmethod
    def _not_null(cls, value: Optional[str]) -> str:
        if value is None:
            raise ValueError("field cannot be null")
        return value


class MealPlanCreateRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    start_date: date
    num_weeks: int = Field(default=1, ge=1, le=8)


class PlannedMealRequest(BaseModel):
    date: str = Field(pattern=r"^\d{4}-\d{2}-\d{2}$")
    meal_type: MealType
    recipe_id: str = Field(min_length=1, max_length=32)
    recipe_title: str = Field(min_length=1, max_length=255)


class PlanShoppingRequest(BaseModel):
    exclude_pantry: Optional[bool] = Field(default=None)


def create_app() -> FastAPI:
    """Create and configure a FastAPI application instance."""

    settings = get_settings()
    _configure_logging(settings)

    application = FastAPI(title="Recetario", version=__version__)
    logger.debug("Application created with log level %s", settings.log_level)

    if settings.log_requests:
        access_logger = logging.getLogger("recetario.access")

        @application.middleware("http")
        async def log_request_response(request: Request, call_next):
            """Log request/response details and record request metrics."""

            request_id = request.headers.get("X-Request-ID") or uuid4().hex
            request.state.request_id = request_id
            start = perf_counter()
            method = request.method
            path = request.url.path
            try:
                response: Response = await call_next(request)
            except Exception:
                duration_ms = (perf_counter() - start) * 1000
                access_logger.exception(
                    "HTTP %s %s status=500 duration_ms=%.2f",
                    method,
                    path,
                    duration_ms,
                    extra={"request_id": request_id},
                )
                metrics.REQUEST_COUNT.labels(method=method, path=path, status="500").inc()
                metrics.REQUEST_LATENCY.labels(method=method, path=path).observe(duration_ms / 1000.0)
                raise

            duration_ms = (perf_counter() - start) * 1000
            response.headers.setdefault("X-Request-ID", request_id)
            access_logger.info(
                "HTTP %s %s status=%s duration_ms=%.2f",
                method,
                path,
                response.status_code,
                duration_ms,
                extra={"request_id": request_id},
            )
            metrics.REQUEST_COUNT.labels(
                method=method,
                path=path,
                status=str(response.status_code),
            ).inc()
            metrics.REQUEST_LATENCY.labels(method=method, path=path).observe(duration_ms / 1000.0)
            return response

    @application.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        request_id = getattr(request.state, "request_id", None)
        logger.warning(
            "Validation error on %s %s: %s",
            request.method,
            request.url.path,
            exc.errors(),
            extra={"request_id": request_id} if request_id else None,
        )
        detail = [{key: _json_safe(value) for key, value in error.items()} for error in exc.errors()]
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": detail},
        )

    @application.get("/healthz", summary="Liveness probe")
    def healthz() -> dict[str, str]:
        return {"status": "ok", "version": __version__}

    @application.get("/metrics", summary="Prometheus metrics")
    def metrics_endpoint() -> Response:
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Shopping list

    @application.get("/shopping-list", response_model=ShoppingList, summary="Get shopping list")
    def shopping_list_get(
        service: ShoppingListService = Depends(deps.get_shopping_list_service),
    ) -> ShoppingList:
        return service.get_shopping_list()

    @application.post(
        "/shopping-list/ingredients",
        response_model=MergeCounts,
        summary="Merge a recipe's ingredients into the shopping list",
    )
    def shopping_list_add_ingredients(
        payload: IngredientsMergeRequest = Body(...),
        auth: None = Depends(deps.require_api_token),
        service: ShoppingListService = Depends(deps.get_shopping_list_service),
        settings: Settings = Depends(get_settings),
    ) -> MergeCounts:
        exclude_pantry = (
            settings.exclude_pantry_default if payload.exclude_pantry is None else payload.exclude_pantry
        )
        return service.add_ingredients_to_shopping_list(
            payload.ingredients,
            payload.recipe_name,
            exclude_pantry=exclude_pantry,
        )

    @application.post(
        "/shopping-list/items",
        response_model=ShoppingItem,
        status_code=status.HTTP_201_CREATED,
        summary="Add a manual shopping item",
    )
    def shopping_list_add_item(
        payload: ManualItemRequest = Body(...),
        auth: None = Depends(deps.require_api_token),
        service: ShoppingListService = Depends(deps.get_shopping_list_service),
    ) -> ShoppingItem:
        item = service.add_manual_item(payload.text)
        if item is None:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Item text is blank")
        return item

    @application.post(
        "/shopping-list/items/{item_id}/toggle",
        response_model=ShoppingItem,
        summary="Toggle a shopping item's checked flag",
    )
    def shopping_list_toggle(
        item_id: str,
        auth: None = Depends(deps.require_api_token),
        service: ShoppingListService = Depends(deps.get_shopping_list_service),
    ) -> ShoppingItem:
        item = service.toggle_item(item_id)
        if item is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")
        return item

    @application.delete(
        "/shopping-list/items/{item_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        summary="Remove a shopping item",
    )
    def shopping_list_remove(
        item_id: str,
        auth: None = Depends(deps.require_api_token),
        service: ShoppingListService = Depends(deps.get_shopping_list_service),
    ) -> None:
        service.remove_item(item_id)

    @application.post(
        "/shopping-list/clear-checked",
        status_code=status.HTTP_204_NO_CONTENT,
        summary="Remove checked shopping items",
    )
    def shopping_list_clear_checked(
        auth: None = Depends(deps.require_api_token),
        service: ShoppingListService = Depends(deps.get_shopping_list_service),
    ) -> None:
        service.clear_checked_items()

    @application.post(
        "/shopping-list/clear",
        status_code=status.HTTP_204_NO_CONTENT,
        summary="Remove every shopping item",
    )
    def shopping_list_clear(
        auth: None = Depends(deps.require_api_token),
        service: ShoppingListService = Depends(deps.get_shopping_list_service),
    ) -> None:
        service.clear_all_items()

    # Pantry

    @application.get("/pantry", response_model=Pantry, summary="Get pantry")
    def pantry_get(service: PantryService = Depends(deps.get_pantry_service)) -> Pantry:
        return service.get_pantry()

    @application.post("/pantry", response_model=Pantry, summary="Add a pantry item")
    def pantry_add(
        payload: PantryItemCreateRequest = Body(...),
        auth: None = Depends(deps.require_api_token),
        service: PantryService = Depends(deps.get_pantry_service),
    ) -> Pantry:
        service.add_pantry_item(payload.name, payload.category, payload.quantity)
        return service.get_pantry()

    @application.post(
        "/pantry/from-shopping-list",
        response_model=Pantry,
        summary="Record a bought shopping item in the pantry",
    )
    def pantry_move_from_shopping(
        payload: MoveToPantryRequest = Body(...),
        auth: None = Depends(deps.require_api_token),
        service: PantryService = Depends(deps.get_pantry_service),
    ) -> Pantry:
        service.move_shopping_item_to_pantry(payload.text)
        return service.get_pantry()

    @application.put(
        "/pantry/{item_id}/category",
        response_model=Pantry,
        summary="Change a pantry item's category",
    )
    def pantry_set_category(
        item_id: str,
        payload: PantryCategoryRequest = Body(...),
        auth: None = Depends(deps.require_api_token),
        service: PantryService = Depends(deps.get_pantry_service),
    ) -> Pantry:
        service.set_pantry_item_category(item_id, payload.category)
        return service.get_pantry()

    @application.delete(
        "/pantry/{item_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        summary="Remove a pantry item",
    )
    def pantry_remove(
        item_id: str,
        auth: None = Depends(deps.require_api_token),
        service: PantryService = Depends(deps.get_pantry_service),
    ) -> None:
        service.remove_pantry_item(item_id)

    # Recipes

    @application.get("/recipes", response_model=list[Recipe], summary="List recipes")
    def recipes_list(
        q: Optional[str] = Query(default=None, max_length=255),
        provider: deps.RecipeListProvider = Depends(deps.get_recipe_list_provider),
    ) -> list[Recipe]:
        return search_recipes(provider(), q or "")

    @application.get("/recipes/{recipe_id}", response_model=Recipe, summary="Get a recipe")
    def recipes_get(
        recipe_id: str,
        fetcher: deps.RecipeFetcher = Depends(deps.get_recipe_fetcher),
    ) -> Recipe:
        recipe = fetcher(recipe_id)
        if recipe is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found")
        return recipe

    @application.post(
        "/recipes",
        response_model=Recipe,
        status_code=status.HTTP_201_CREATED,
        summary="Create a recipe",
    )
    def recipes_create(
        payload: RecipeData = Body(...),
        auth: None = Depends(deps.require_api_token),
        creator: deps.RecipeCreator = Depends(deps.get_recipe_creator),
        fetcher: deps.RecipeFetcher = Depends(deps.get_recipe_fetcher),
    ) -> Recipe:
        recipe = fetcher(creator(payload))
        assert recipe is not None
        return recipe

    @application.put("/recipes/{recipe_id}", response_model=Recipe, summary="Update a recipe")
    def recipes_update(
        recipe_id: str,
        payload: RecipeUpdateRequest = Body(...),
        auth: None = Depends(deps.require_api_token),
        updater: deps.RecipeUpdater = Depends(deps.get_recipe_updater),
    ) -> Recipe:
        update_payload = payload.model_dump(exclude_unset=True)
        if not update_payload:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="No fields provided for update",
            )
        try:
            return updater(recipe_id, update_payload)
        except ValueError as exc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

    @application.delete(
        "/recipes/{recipe_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        summary="Delete a recipe",
    )
    def recipes_delete(
        recipe_id: str,
        auth: None = Depends(deps.require_api_token),
        deleter: deps.RecipeDeleter = Depends(deps.get_recipe_deleter),
    ) -> None:
        deleter(recipe_id)

    # Meal plans

    @application.get("/meal-plans/current", response_model=MealPlan, summary="Latest meal plan")
    def meal_plans_current(
        provider: deps.CurrentPlanProvider = Depends(deps.get_current_plan_provider),
    ) -> MealPlan:
        plan = provider()
        if plan is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No meal plan yet")
        return plan

    @application.post(
        "/meal-plans",
        response_model=MealPlan,
        status_code=status.HTTP_201_CREATED,
        summary="Create an empty meal plan",
    )
    def meal_plans_create(
        payload: MealPlanCreateRequest = Body(...),
        auth: None = Depends(deps.require_api_token),
        saver: deps.PlanSaver = Depends(deps.get_plan_saver),
    ) -> MealPlan:
        return saver(create_empty_meal_plan(payload.name, payload.start_date, payload.num_weeks))

    @application.get("/meal-plans/{plan_id}", response_model=MealPlan, summary="Get a meal plan")
    def meal_plans_get(
        plan_id: str,
        fetcher: deps.PlanFetcher = Depends(deps.get_plan_fetcher),
    ) -> MealPlan:
        plan = fetcher(plan_id)
        if plan is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Meal plan not found")
        return plan

    @application.get(
        "/meal-plans/{plan_id}/days",
        response_model=list[WeekDay],
        summary="Meal plan calendar with lunch and dinner per day",
    )
    def meal_plans_days(
        plan_id: str,
        fetcher: deps.PlanFetcher = Depends(deps.get_plan_fetcher),
    ) -> list[WeekDay]:
        plan = fetcher(plan_id)
        if plan is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Meal plan not found")
        days = get_week_days(date.fromisoformat(plan.start_date), plan_week_count(plan))
        return organize_meals_by_day(plan, days)

    @application.post(
        "/meal-plans/{plan_id}/meals",
        response_model=MealPlan,
        summary="Schedule a recipe for a day and meal slot",
    )
    def meal_plans_add_meal(
        plan_id: str,
        payload: PlannedMealRequest = Body(...),
        auth: None = Depends(deps.require_api_token),
        adder: deps.PlanMealAdder = Depends(deps.get_plan_meal_adder),
    ) -> MealPlan:
        try:
            return adder(plan_id, payload.model_dump())
        except ValueError as exc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

    @application.delete(
        "/meal-plans/{plan_id}/meals/{meal_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        summary="Remove a planned meal",
    )
    def meal_plans_remove_meal(
        plan_id: str,
        meal_id: str,
        auth: None = Depends(deps.require_api_token),
        remover: deps.PlanMealRemover = Depends(deps.get_plan_meal_remover),
    ) -> None:
        try:
            remover(plan_id, meal_id)
        except ValueError as exc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

    @application.post(
        "/meal-plans/{plan_id}/shopping-list",
        response_model=GeneratedShopping,
        summary="Add every planned recipe's ingredients to the shopping list",
    )
    def meal_plans_generate_shopping(
        plan_id: str,
        payload: PlanShoppingRequest | None = Body(default=None),
        auth: None = Depends(deps.require_api_token),
        fetcher: deps.PlanFetcher = Depends(deps.get_plan_fetcher),
        generator: MealPlanShoppingGenerator = Depends(deps.get_plan_shopping_generator),
        settings: Settings = Depends(get_settings),
    ) -> GeneratedShopping:
        plan = fetcher(plan_id)
        if plan is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Meal plan not found")
        exclude_pantry = settings.exclude_pantry_default
        if payload is not None and payload.exclude_pantry is not None:
            exclude_pantry = payload.exclude_pantry
        return generator.generate_shopping_list_from_plan(plan, exclude_pantry=exclude_pantry)

    return application


app = create_app()

__all__ = ["app", "create_app"]
