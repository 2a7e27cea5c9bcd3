"""Shopping list consolidation: tokenizing, matching, merging and plan generation."""

from .aggregator import merge_ingredients
from .ingredients import is_stocked, matches, tokenize_ingredients
from .plan_generator import MealPlanShoppingGenerator
from .service import ShoppingListService

__all__ = [
    "MealPlanShoppingGenerator",
    "ShoppingListService",
    "is_stocked",
    "matches",
    "merge_ingredients",
    "tokenize_ingredients",
]
