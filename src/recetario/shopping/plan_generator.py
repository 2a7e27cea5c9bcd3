"""Turn a meal plan into shopping list entries."""

from __future__ import annotations

import logging
from typing import List

from recetario import metrics
from recetario.models.plan import MealPlan
from recetario.models.shopping import GeneratedShopping
from recetario.stores import RecipeLookup

from .service import ShoppingListService

logger = logging.getLogger(__name__)


def distinct_recipe_ids(plan: MealPlan) -> List[str]:
    """Return the plan's recipe ids in order of first appearance."""

    return list(dict.fromkeys(meal.recipe_id for meal in plan.meals))


class MealPlanShoppingGenerator:
    """Feeds each distinct recipe of a meal plan to the shopping list once."""

    def __init__(self, recipes: RecipeLookup, shopping: ShoppingListService) -> None:
        self._recipes = recipes
        self._shopping = shopping

    def generate_shopping_list_from_plan(
        self,
        plan: MealPlan,
        exclude_pantry: bool = True,
    ) -> GeneratedShopping:
        summary = GeneratedShopping()
        for recipe_id in distinct_recipe_ids(plan):
            recipe = self._recipes.get_recipe_by_id(recipe_id)
            if recipe is None:
                logger.debug("Recipe %s from plan %s no longer exists; skipping", recipe_id, plan.id)
                metrics.PLAN_RECIPES.labels(result="missing").inc()
                summary.recipes_missing.append(recipe_id)
                continue

            counts = self._shopping.add_ingredients_to_shopping_list(
                recipe.ingredients,
                recipe.title,
                exclude_pantry=exclude_pantry,
            )
            metrics.PLAN_RECIPES.labels(result="merged").inc()
            summary.recipes_merged.append(recipe.title)
            summary.added += counts.added
            summary.skipped += counts.skipped

        logger.info(
            "Generated shopping list from plan %s recipes=%s missing=%s added=%s skipped=%s",
            plan.id,
            len(summary.recipes_merged),
            len(summary.recipes_missing),
            summary.added,
            summary.skipped,
        )
        return summary


__all__ = ["MealPlanShoppingGenerator", "distinct_recipe_ids"]
