"""Storage interfaces the shopping and pantry services depend on."""

from __future__ import annotations

from typing import Optional, Protocol

from recetario.models.pantry import Pantry
from recetario.models.recipe import Recipe
from recetario.models.shopping import ShoppingList


class ShoppingListStore(Protocol):
    def get_shopping_list(self) -> ShoppingList: ...

    def save_shopping_list(self, shopping_list: ShoppingList) -> None: ...


class PantryStore(Protocol):
    def get_pantry(self) -> Pantry: ...

    def save_pantry(self, pantry: Pantry) -> None: ...


class RecipeLookup(Protocol):
    def get_recipe_by_id(self, recipe_id: str) -> Optional[Recipe]: ...


__all__ = ["ShoppingListStore", "PantryStore", "RecipeLookup"]
