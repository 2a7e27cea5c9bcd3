"""Ingredient text helpers: tokenizing blocks and containment matching."""

from __future__ import annotations

import re
from typing import Iterable, Iterator

_SEPARATORS = re.compile(r"[\n,]")


def tokenize_ingredients(block: str) -> Iterator[str]:
    """Yield trimmed, non-empty ingredients from a newline/comma separated block.

    Fragments are kept whole: ``"2 cups flour"`` is one ingredient, no quantity or
    unit is extracted.
    """

    for fragment in _SEPARATORS.split(block or ""):
        ingredient = fragment.strip()
        if ingredient:
            yield ingredient


def matches(a: str, b: str) -> bool:
    """Return True when either string contains the other, ignoring case.

    Symmetric but not transitive; ``"leche"`` matches ``"Leche entera"``.
    """

    left = a.lower()
    right = b.lower()
    return left in right or right in left


def is_stocked(ingredient: str, pantry_names: Iterable[str]) -> bool:
    """Return True when the ingredient matches any pantry name.

    ``pantry_names`` are expected lowercased already (see ``list_pantry_names``).
    """

    normalized = ingredient.strip().lower()
    return any(matches(normalized, name) for name in pantry_names)


__all__ = ["tokenize_ingredients", "matches", "is_stocked"]
