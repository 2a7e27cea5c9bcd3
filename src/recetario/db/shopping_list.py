"""Shopping list document persistence."""

from __future__ import annotations

from recetario.models.shopping import ShoppingList

from .documents import load_document, store_document

DOC_KEY = "shoppingList/current"


def get_shopping_list() -> ShoppingList:
    """Return the stored shopping list, or an empty one if none was saved yet."""

    payload = load_document(DOC_KEY)
    if payload is None:
        return ShoppingList(items=[], last_cleared=None)
    return ShoppingList.model_validate(payload)


def save_shopping_list(shopping_list: ShoppingList) -> None:
    store_document(DOC_KEY, shopping_list.model_dump(mode="json"))


__all__ = ["DOC_KEY", "get_shopping_list", "save_shopping_list"]
