"""Dependency definitions for the Recetario API server."""

from __future__ import annotations

from typing import Callable, List, Optional

from fastapi import Depends, HTTPException, Request, status

from recetario.config import get_settings
from recetario.db.meal_plans import (
    add_meal_to_day,
    get_current_meal_plan,
    get_meal_plan_by_id,
    remove_meal_from_day,
    save_meal_plan,
)
from recetario.db.recipes import (
    create_recipe,
    delete_recipe,
    get_recipe_by_id,
    list_recipes,
    update_recipe,
)
from recetario.db.stores import SqlPantryStore, SqlRecipeLookup, SqlShoppingListStore
from recetario.models.plan import MealPlan
from recetario.models.recipe import Recipe, RecipeData
from recetario.pantry import PantryService
from recetario.shopping import MealPlanShoppingGenerator, ShoppingListService

RecipeListProvider = Callable[[], List[Recipe]]
RecipeFetcher = Callable[[str], Optional[Recipe]]
RecipeCreator = Callable[[RecipeData], str]
RecipeUpdater = Callable[[str, dict], Recipe]
RecipeDeleter = Callable[[str], None]
CurrentPlanProvider = Callable[[], Optional[MealPlan]]
PlanFetcher = Callable[[str], Optional[MealPlan]]
PlanSaver = Callable[[MealPlan], MealPlan]
PlanMealAdder = Callable[[str, dict], MealPlan]
PlanMealRemover = Callable[[str, str], MealPlan]


def get_shopping_list_service() -> ShoppingListService:
    return ShoppingListService(SqlShoppingListStore(), SqlPantryStore())


def get_pantry_service() -> PantryService:
    return PantryService(SqlPantryStore())


def get_plan_shopping_generator(
    shopping: ShoppingListService = Depends(get_shopping_list_service),
) -> MealPlanShoppingGenerator:
    return MealPlanShoppingGenerator(SqlRecipeLookup(), shopping)


def get_recipe_list_provider() -> RecipeListProvider:
    return list_recipes


def get_recipe_fetcher() -> RecipeFetcher:
    return get_recipe_by_id


def get_recipe_creator() -> RecipeCreator:
    return create_recipe


def get_recipe_updater() -> RecipeUpdater:
    return lambda recipe_id, payload: update_recipe(recipe_id, **payload)


def get_recipe_deleter() -> RecipeDeleter:
    return delete_recipe


def get_current_plan_provider() -> CurrentPlanProvider:
    return get_current_meal_plan


def get_plan_fetcher() -> PlanFetcher:
    return get_meal_plan_by_id


def get_plan_saver() -> PlanSaver:
    return save_meal_plan


def get_plan_meal_adder() -> PlanMealAdder:
    return lambda plan_id, payload: add_meal_to_day(plan_id, **payload)


def get_plan_meal_remover() -> PlanMealRemover:
    return remove_meal_from_day


def require_api_token(
    request: Request,
    settings=Depends(get_settings),
) -> None:
    """Ensure requests carry the configured API token when one is set."""

    token = settings.api_token
    if not token:
        return

    auth_header = request.headers.get("Authorization")
    if auth_header and auth_header.split("Bearer ")[-1].strip() == token:
        return

    if request.headers.get("X-API-Key") == token:
        return

    raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
