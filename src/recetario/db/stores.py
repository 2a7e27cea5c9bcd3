"""SQLite-backed implementations of the store interfaces."""

from __future__ import annotations

from typing import Optional

from recetario.models.pantry import Pantry
from recetario.models.recipe import Recipe
from recetario.models.shopping import ShoppingList

from . import pantry, recipes, shopping_list


class SqlShoppingListStore:
    def get_shopping_list(self) -> ShoppingList:
        return shopping_list.get_shopping_list()

    def save_shopping_list(self, value: ShoppingList) -> None:
        shopping_list.save_shopping_list(value)


class SqlPantryStore:
    def get_pantry(self) -> Pantry:
        return pantry.get_pantry()

    def save_pantry(self, value: Pantry) -> None:
        pantry.save_pantry(value)


class SqlRecipeLookup:
    def get_recipe_by_id(self, recipe_id: str) -> Optional[Recipe]:
        return recipes.get_recipe_by_id(recipe_id)


__all__ = ["SqlShoppingListStore", "SqlPantryStore", "SqlRecipeLookup"]
