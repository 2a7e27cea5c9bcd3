"""Unit tests for recipe persistence helpers."""

from __future__ import annotations

import pytest

from recetario.db.recipes import (
    create_recipe,
    delete_recipe,
    get_recipe_by_id,
    list_recipes,
    update_recipe,
)
from recetario.models.recipe import RecipeData


def _data(title: str = "Lentejas", **kwargs) -> RecipeData:
    payload = {
        "title": title,
        "ingredients": "lentejas\nchorizo\nzanahoria",
        "steps": ["Remojar", "Cocer"],
        "dietary_tags": ["sin gluten"],
        "created_by": "maria",
    }
    payload.update(kwargs)
    return RecipeData(**payload)


def test_create_and_get_recipe():
    recipe_id = create_recipe(_data(servings=4, difficulty="easy"))

    recipe = get_recipe_by_id(recipe_id)
    assert recipe is not None
    assert recipe.title == "Lentejas"
    assert recipe.steps == ["Remojar", "Cocer"]
    assert recipe.dietary_tags == ["sin gluten"]
    assert recipe.servings == 4
    assert recipe.difficulty == "easy"
    assert recipe.source == "manual"


def test_missing_recipe_returns_none():
    assert get_recipe_by_id("nope") is None


def test_list_recipes_returns_all():
    create_recipe(_data("Paella"))
    create_recipe(_data("Gazpacho"))

    assert {recipe.title for recipe in list_recipes()} == {"Paella", "Gazpacho"}


def test_update_recipe_partial_fields():
    recipe_id = create_recipe(_data())

    updated = update_recipe(recipe_id, title="Lentejas estofadas", steps=["Cocer"])

    assert updated.title == "Lentejas estofadas"
    assert updated.steps == ["Cocer"]
    assert updated.ingredients == "lentejas\nchorizo\nzanahoria"


def test_update_missing_recipe_raises():
    with pytest.raises(ValueError):
        update_recipe("missing", title="x")


def test_delete_recipe():
    recipe_id = create_recipe(_data())

    delete_recipe(recipe_id)
    delete_recipe(recipe_id)

    assert get_recipe_by_id(recipe_id) is None


def test_update_ignores_null_for_required_columns():
    recipe_id = create_recipe(_data())

    updated = update_recipe(recipe_id, title=None, ingredients=None, servings=2)

    assert updated.title == "Lentejas"
    assert updated.ingredients.startswith("lentejas")
    assert updated.servings == 2


def test_created_at_reads_back_as_utc():
    recipe = get_recipe_by_id(create_recipe(_data()))
    assert recipe.created_at.tzinfo is not None
    assert recipe.created_at.utcoffset().total_seconds() == 0
