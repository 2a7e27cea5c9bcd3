"""Tests for merging ingredient blocks into a shopping list."""

from __future__ import annotations

from recetario.models.shopping import ShoppingItem, ShoppingList
from recetario.shopping.aggregator import find_matching_item, merge_ingredients


def test_merge_into_empty_list_adds_every_ingredient(id_factory):
    updated, counts = merge_ingredients(
        ShoppingList(),
        "Tomate\nCebolla, Ajo",
        "Sofrito",
        id_factory=id_factory,
    )

    assert counts.added == 3
    assert counts.skipped == 0
    assert [item.text for item in updated.items] == ["Tomate", "Cebolla", "Ajo"]
    assert [item.id for item in updated.items] == ["item-1", "item-2", "item-3"]
    assert all(item.from_recipes == ["Sofrito"] for item in updated.items)
    assert all(item.checked is False for item in updated.items)


def test_merge_does_not_mutate_the_input_list(id_factory):
    original = ShoppingList(items=[ShoppingItem(id="a", text="leche", from_recipes=["Flan"])])

    merge_ingredients(original, "leche, azucar", "Natillas", id_factory=id_factory)

    assert [item.text for item in original.items] == ["leche"]
    assert original.items[0].from_recipes == ["Flan"]


def test_duplicate_mentions_within_a_block_collapse(id_factory):
    updated, counts = merge_ingredients(
        ShoppingList(),
        "leche\nleche entera",
        "Flan",
        id_factory=id_factory,
    )

    assert counts.added == 1
    assert counts.merged == 1
    assert len(updated.items) == 1
    assert updated.items[0].text == "leche"
    assert updated.items[0].from_recipes == ["Flan"]


def test_merging_same_recipe_twice_records_provenance_once(id_factory):
    first, first_counts = merge_ingredients(
        ShoppingList(), "huevos, harina", "Bizcocho", id_factory=id_factory
    )
    second, second_counts = merge_ingredients(
        first, "huevos, harina", "Bizcocho", id_factory=id_factory
    )

    assert first_counts.added == 2
    assert second_counts.added == 0
    assert second_counts.merged == 2
    assert len(second.items) == 2
    for item in second.items:
        assert item.from_recipes.count("Bizcocho") == 1


def test_matching_item_gains_new_recipe_but_keeps_text_and_checked(id_factory):
    current = ShoppingList(
        items=[ShoppingItem(id="a", text="Leche entera", checked=True, from_recipes=["Flan"])]
    )

    updated, counts = merge_ingredients(current, "leche", "Natillas", id_factory=id_factory)

    assert counts.added == 0
    item = updated.items[0]
    assert item.text == "Leche entera"
    assert item.checked is True
    assert item.from_recipes == ["Flan", "Natillas"]


def test_first_matching_item_in_document_order_wins(id_factory):
    current = ShoppingList(
        items=[
            ShoppingItem(id="a", text="tomate triturado", from_recipes=["Salsa"]),
            ShoppingItem(id="b", text="tomate cherry", from_recipes=["Ensalada"]),
        ]
    )

    updated, _ = merge_ingredients(current, "tomate", "Gazpacho", id_factory=id_factory)

    assert updated.items[0].from_recipes == ["Salsa", "Gazpacho"]
    assert updated.items[1].from_recipes == ["Ensalada"]


def test_pantry_items_are_skipped_when_excluded(id_factory):
    updated, counts = merge_ingredients(
        ShoppingList(),
        "huevos\nharina",
        "Tortitas",
        exclude_pantry=True,
        pantry_names=["huevos"],
        id_factory=id_factory,
    )

    assert counts.added == 1
    assert counts.skipped == 1
    assert [item.text for item in updated.items] == ["harina"]
    assert find_matching_item(updated.items, "huevos") is None


def test_pantry_is_ignored_when_not_excluding(id_factory):
    updated, counts = merge_ingredients(
        ShoppingList(),
        "huevos\nharina",
        "Tortitas",
        exclude_pantry=False,
        pantry_names=["huevos"],
        id_factory=id_factory,
    )

    assert counts.added == 2
    assert counts.skipped == 0
    assert len(updated.items) == 2


def test_empty_block_leaves_list_unchanged(id_factory):
    current = ShoppingList(items=[ShoppingItem(id="a", text="pan")])

    updated, counts = merge_ingredients(current, " \n, ", "Nada", id_factory=id_factory)

    assert updated.items == current.items
    assert (counts.added, counts.skipped, counts.merged) == (0, 0, 0)
