"""Shopping list operations over injected document stores."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional

from recetario import metrics
from recetario.ids import generate_id
from recetario.models.shopping import MergeCounts, ShoppingItem, ShoppingList
from recetario.stores import PantryStore, ShoppingListStore

from .aggregator import merge_ingredients

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ShoppingListService:
    """Read-modify-write operations on the single shopping list document.

    Every mutation loads the current document, changes a local copy and saves the
    whole document back. There is no locking: concurrent writers lose updates.
    """

    def __init__(
        self,
        store: ShoppingListStore,
        pantry_store: PantryStore,
        *,
        id_factory: Callable[[], str] = generate_id,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._store = store
        self._pantry_store = pantry_store
        self._id_factory = id_factory
        self._clock = clock

    def get_shopping_list(self) -> ShoppingList:
        return self._store.get_shopping_list()

    def _pantry_names(self) -> List[str]:
        return [item.name.lower() for item in self._pantry_store.get_pantry().items]

    def add_ingredients_to_shopping_list(
        self,
        ingredients_text: str,
        recipe_name: str,
        exclude_pantry: bool = True,
    ) -> MergeCounts:
        """Merge a recipe's ingredient block into the list and persist it."""

        shopping_list = self._store.get_shopping_list()
        pantry_names = self._pantry_names() if exclude_pantry else []
        updated, counts = merge_ingredients(
            shopping_list,
            ingredients_text,
            recipe_name,
            exclude_pantry=exclude_pantry,
            pantry_names=pantry_names,
            id_factory=self._id_factory,
        )
        self._store.save_shopping_list(updated)

        metrics.SHOPPING_MERGE_ITEMS.labels(result="added").inc(counts.added)
        metrics.SHOPPING_MERGE_ITEMS.labels(result="merged").inc(counts.merged)
        metrics.SHOPPING_MERGE_ITEMS.labels(result="skipped").inc(counts.skipped)
        logger.info(
            "Merged ingredients recipe=%s added=%s merged=%s skipped=%s",
            recipe_name,
            counts.added,
            counts.merged,
            counts.skipped,
        )
        return counts

    def add_manual_item(self, text: str) -> Optional[ShoppingItem]:
        """Append a hand-typed item with no recipe provenance."""

        cleaned = text.strip()
        if not cleaned:
            logger.debug("Ignoring blank manual shopping item")
            return None

        shopping_list = self._store.get_shopping_list()
        item = ShoppingItem(id=self._id_factory(), text=cleaned, checked=False, from_recipes=[])
        self._store.save_shopping_list(
            shopping_list.model_copy(update={"items": [*shopping_list.items, item]})
        )
        return item

    def toggle_item(self, item_id: str) -> Optional[ShoppingItem]:
        """Flip the checked flag of an item; unknown ids leave the list untouched."""

        shopping_list = self._store.get_shopping_list()
        items = list(shopping_list.items)
        for index, item in enumerate(items):
            if item.id == item_id:
                items[index] = item.model_copy(update={"checked": not item.checked})
                self._store.save_shopping_list(shopping_list.model_copy(update={"items": items}))
                return items[index]
        return None

    def remove_item(self, item_id: str) -> None:
        shopping_list = self._store.get_shopping_list()
        remaining = [item for item in shopping_list.items if item.id != item_id]
        self._store.save_shopping_list(shopping_list.model_copy(update={"items": remaining}))

    def clear_checked_items(self) -> None:
        shopping_list = self._store.get_shopping_list()
        remaining = [item for item in shopping_list.items if not item.checked]
        self._store.save_shopping_list(shopping_list.model_copy(update={"items": remaining}))
        logger.info(
            "Cleared %s checked shopping item(s)",
            len(shopping_list.items) - len(remaining),
        )

    def clear_all_items(self) -> None:
        self._store.save_shopping_list(ShoppingList(items=[], last_cleared=self._clock()))
        logger.info("Shopping list cleared")


__all__ = ["ShoppingListService"]
