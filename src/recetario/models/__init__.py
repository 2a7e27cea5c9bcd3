"""Pydantic models shared across Recetario modules."""

from .pantry import Pantry, PantryCategory, PantryItem
from .plan import MealPlan, MealType, PlannedMeal, WeekDay
from .recipe import Recipe, RecipeData
from .shopping import GeneratedShopping, MergeCounts, ShoppingItem, ShoppingList

__all__ = [
    "GeneratedShopping",
    "MealPlan",
    "MealType",
    "MergeCounts",
    "Pantry",
    "PantryCategory",
    "PantryItem",
    "PlannedMeal",
    "Recipe",
    "RecipeData",
    "ShoppingItem",
    "ShoppingList",
    "WeekDay",
]
