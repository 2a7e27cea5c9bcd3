"""Recipe search over titles and ingredient text."""

from __future__ import annotations

from typing import Iterable, List

from recetario.models.recipe import Recipe


def search_recipes(recipes: Iterable[Recipe], term: str) -> List[Recipe]:
    """Return recipes whose title or ingredients contain ``term`` (case-insensitive).

    A blank term returns every recipe unchanged.
    """

    needle = (term or "").strip().lower()
    recipes = list(recipes)
    if not needle:
        return recipes
    return [
        recipe
        for recipe in recipes
        if needle in recipe.title.lower() or needle in recipe.ingredients.lower()
    ]


__all__ = ["search_recipes"]
