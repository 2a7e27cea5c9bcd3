"""Tests for the shopping list service against in-memory stores."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from recetario.models.shopping import ShoppingItem, ShoppingList
from recetario.shopping.service import ShoppingListService

CLEARED_AT = datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)


@pytest.fixture()
def service(shopping_store, pantry_store, id_factory) -> ShoppingListService:
    return ShoppingListService(
        shopping_store,
        pantry_store,
        id_factory=id_factory,
        clock=lambda: CLEARED_AT,
    )


def test_sofrito_scenario(service, shopping_store):
    counts = service.add_ingredients_to_shopping_list("Tomate\nCebolla, Ajo", "Sofrito")

    assert (counts.added, counts.skipped) == (3, 0)
    items = shopping_store.document.items
    assert len(items) == 3
    assert all(item.from_recipes == ["Sofrito"] for item in items)
    assert all(item.checked is False for item in items)
    assert shopping_store.saves == 1


def test_pantry_filter_skips_stocked_ingredients(service, shopping_store, pantry_store):
    pantry_store.stock("Huevos")

    counts = service.add_ingredients_to_shopping_list("huevos\nharina", "Tortitas")

    assert (counts.added, counts.skipped) == (1, 1)
    assert [item.text for item in shopping_store.document.items] == ["harina"]


def test_pantry_filter_can_be_disabled(service, shopping_store, pantry_store):
    pantry_store.stock("huevos")

    counts = service.add_ingredients_to_shopping_list(
        "huevos\nharina", "Tortitas", exclude_pantry=False
    )

    assert (counts.added, counts.skipped) == (2, 0)


def test_second_recipe_extends_provenance(service, shopping_store):
    service.add_ingredients_to_shopping_list("leche, huevos", "Flan")
    counts = service.add_ingredients_to_shopping_list("leche entera, azucar", "Natillas")

    assert counts.added == 1
    texts = {item.text: item.from_recipes for item in shopping_store.document.items}
    assert texts == {
        "leche": ["Flan", "Natillas"],
        "huevos": ["Flan"],
        "azucar": ["Natillas"],
    }


def test_failed_save_propagates_and_keeps_stored_document(service, shopping_store):
    shopping_store.fail_on_save = True

    with pytest.raises(RuntimeError):
        service.add_ingredients_to_shopping_list("pan", "Tostadas")

    assert shopping_store.document.items == []


def test_add_manual_item_trims_and_has_no_provenance(service, shopping_store):
    item = service.add_manual_item("  papel de cocina ")

    assert item is not None
    assert item.text == "papel de cocina"
    assert item.from_recipes == []
    assert shopping_store.document.items == [item]


def test_add_manual_item_ignores_blank_text(service, shopping_store):
    assert service.add_manual_item("   ") is None
    assert shopping_store.saves == 0


def test_toggle_item_flips_checked(service, shopping_store):
    item = service.add_manual_item("pan")

    toggled = service.toggle_item(item.id)
    assert toggled.checked is True
    assert shopping_store.document.items[0].checked is True

    service.toggle_item(item.id)
    assert shopping_store.document.items[0].checked is False


def test_toggle_unknown_item_does_not_write(service, shopping_store):
    assert service.toggle_item("missing") is None
    assert shopping_store.saves == 0


def test_remove_item(service, shopping_store):
    first = service.add_manual_item("pan")
    second = service.add_manual_item("vino")

    service.remove_item(first.id)
    service.remove_item("missing")

    assert shopping_store.document.items == [second]


def test_clear_checked_items_preserves_order(shopping_store, service):
    shopping_store.document = ShoppingList(
        items=[
            ShoppingItem(id="1", text="a", checked=False),
            ShoppingItem(id="2", text="b", checked=True),
            ShoppingItem(id="3", text="c", checked=False),
            ShoppingItem(id="4", text="d", checked=True),
            ShoppingItem(id="5", text="e", checked=False),
        ]
    )

    service.clear_checked_items()

    assert [item.id for item in shopping_store.document.items] == ["1", "3", "5"]


def test_clear_all_items_stamps_last_cleared(service, shopping_store):
    service.add_manual_item("pan")

    service.clear_all_items()

    assert shopping_store.document.items == []
    assert shopping_store.document.last_cleared == CLEARED_AT
