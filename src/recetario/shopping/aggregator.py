"""Merge recipe ingredients into the shopping list document."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence, Tuple

from recetario.ids import generate_id
from recetario.models.shopping import MergeCounts, ShoppingItem, ShoppingList

from .ingredients import is_stocked, matches, tokenize_ingredients

logger = logging.getLogger(__name__)


def find_matching_item(items: Sequence[ShoppingItem], ingredient: str) -> Optional[int]:
    """Return the index of the first item whose text matches the ingredient."""

    for index, item in enumerate(items):
        if matches(ingredient, item.text):
            return index
    return None


def merge_ingredients(
    current: ShoppingList,
    ingredient_block: str,
    recipe_name: str,
    *,
    exclude_pantry: bool = True,
    pantry_names: Sequence[str] = (),
    id_factory: Callable[[], str] = generate_id,
) -> Tuple[ShoppingList, MergeCounts]:
    """Merge one recipe's ingredient block into a copy of ``current``.

    Each ingredient is either skipped (stocked in the pantry), folded into the
    first matching list item (recording ``recipe_name`` as provenance once), or
    appended as a new unchecked item. Items appended earlier in the same call
    take part in matching, so repeated mentions within a block collapse.
    """

    items = list(current.items)
    added = skipped = merged = 0

    for ingredient in tokenize_ingredients(ingredient_block):
        if exclude_pantry and is_stocked(ingredient, pantry_names):
            logger.debug("Skipping '%s' from %s: already in pantry", ingredient, recipe_name)
            skipped += 1
            continue

        index = find_matching_item(items, ingredient)
        if index is None:
            items.append(
                ShoppingItem(
                    id=id_factory(),
                    text=ingredient,
                    checked=False,
                    from_recipes=[recipe_name],
                )
            )
            added += 1
            continue

        existing = items[index]
        merged += 1
        if recipe_name not in existing.from_recipes:
            items[index] = existing.model_copy(
                update={"from_recipes": [*existing.from_recipes, recipe_name]}
            )

    counts = MergeCounts(added=added, skipped=skipped, merged=merged)
    return current.model_copy(update={"items": items}), counts


__all__ = ["find_matching_item", "merge_ingredients"]
