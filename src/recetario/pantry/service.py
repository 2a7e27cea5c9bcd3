"""Pantry ("despensa") operations over an injected document store."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional

from recetario.ids import generate_id
from recetario.models.pantry import Pantry, PantryCategory, PantryItem
from recetario.stores import PantryStore

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PantryService:
    """Read-modify-write operations on the single pantry document."""

    def __init__(
        self,
        store: PantryStore,
        *,
        id_factory: Callable[[], str] = generate_id,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._store = store
        self._id_factory = id_factory
        self._clock = clock

    def get_pantry(self) -> Pantry:
        return self._store.get_pantry()

    def list_pantry_names(self) -> List[str]:
        """Return pantry item names lowercased, ready for ``is_stocked``."""

        return [item.name.lower() for item in self._store.get_pantry().items]

    def add_pantry_item(
        self,
        name: str,
        category: PantryCategory,
        quantity: Optional[str] = None,
    ) -> Optional[PantryItem]:
        """Append a pantry item unless one with the same name (any case) exists.

        Returns the created item, or ``None`` when nothing was added.
        """

        cleaned = name.strip()
        if not cleaned:
            logger.debug("Ignoring blank pantry item name")
            return None

        pantry = self._store.get_pantry()
        if any(item.name.lower() == cleaned.lower() for item in pantry.items):
            logger.debug("Pantry already holds '%s'; not adding duplicate", cleaned)
            return None

        item = PantryItem(
            id=self._id_factory(),
            name=cleaned,
            category=category,
            quantity=quantity,
            added_at=self._clock(),
        )
        self._store.save_pantry(pantry.model_copy(update={"items": [*pantry.items, item]}))
        logger.info("Pantry item added name=%s category=%s", item.name, category)
        return item

    def remove_pantry_item(self, item_id: str) -> None:
        pantry = self._store.get_pantry()
        remaining = [item for item in pantry.items if item.id != item_id]
        self._store.save_pantry(pantry.model_copy(update={"items": remaining}))

    def set_pantry_item_category(self, item_id: str, category: PantryCategory) -> Optional[PantryItem]:
        """Change an item's category in place; unknown ids are ignored."""

        pantry = self._store.get_pantry()
        items = list(pantry.items)
        for index, item in enumerate(items):
            if item.id == item_id:
                items[index] = item.model_copy(update={"category": category})
                self._store.save_pantry(pantry.model_copy(update={"items": items}))
                return items[index]
        return None

    def move_shopping_item_to_pantry(self, item_text: str) -> Optional[PantryItem]:
        """Record a bought shopping item as currently stocked.

        The shopping list entry itself is left alone; callers remove it separately.
        """

        return self.add_pantry_item(item_text, "current")


__all__ = ["PantryService"]
