"""Basic smoke tests for the package."""

from recetario import __version__
from recetario.shopping import merge_ingredients
from recetario.models.shopping import ShoppingList


def test_version_is_set() -> None:
    assert __version__


def test_merge_smoke() -> None:
    updated, counts = merge_ingredients(ShoppingList(), "pan", "Desayuno")

    assert counts.added == 1
    assert updated.items[0].id
