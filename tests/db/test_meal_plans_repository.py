"""Unit tests for meal plan persistence helpers."""

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from recetario.db.meal_plans import (
    add_meal_to_day,
    get_current_meal_plan,
    get_meal_plan_by_id,
    remove_meal_from_day,
    save_meal_plan,
)
from recetario.planner.calendar import create_empty_meal_plan


def test_no_plans_yet():
    assert get_current_meal_plan() is None
    assert get_meal_plan_by_id("missing") is None


def test_current_plan_is_latest_created():
    older = create_empty_meal_plan("Abril", date(2024, 4, 1), 1)
    older = older.model_copy(update={"created_at": datetime(2024, 3, 30, tzinfo=timezone.utc)})
    newer = create_empty_meal_plan("Mayo", date(2024, 5, 6), 1)
    newer = newer.model_copy(update={"created_at": datetime(2024, 5, 1, tzinfo=timezone.utc)})
    save_meal_plan(newer)
    save_meal_plan(older)

    current = get_current_meal_plan()
    assert current is not None
    assert current.name == "Mayo"


def test_add_meal_replaces_same_slot():
    plan = save_meal_plan(create_empty_meal_plan("Mayo", date(2024, 5, 6), 1))

    add_meal_to_day(plan.id, "2024-05-06", "lunch", "r1", "Paella")
    add_meal_to_day(plan.id, "2024-05-06", "dinner", "r2", "Crema")
    updated = add_meal_to_day(plan.id, "2024-05-06", "lunch", "r3", "Lentejas")

    assert sorted((m.meal_type, m.recipe_title) for m in updated.meals) == [
        ("dinner", "Crema"),
        ("lunch", "Lentejas"),
    ]
    assert get_meal_plan_by_id(plan.id).meals == updated.meals


def test_remove_meal_from_day():
    plan = save_meal_plan(create_empty_meal_plan("Mayo", date(2024, 5, 6), 1))
    updated = add_meal_to_day(plan.id, "2024-05-07", "dinner", "r1", "Tortilla")

    result = remove_meal_from_day(plan.id, updated.meals[0].id)

    assert result.meals == []


def test_editing_missing_plan_raises():
    with pytest.raises(ValueError):
        add_meal_to_day("missing", "2024-05-06", "lunch", "r1", "Paella")
    with pytest.raises(ValueError):
        remove_meal_from_day("missing", "m1")


def test_created_at_reads_back_as_utc():
    plan = save_meal_plan(create_empty_meal_plan("Junio", date(2024, 6, 3), 1))

    stored = get_meal_plan_by_id(plan.id)

    assert stored.created_at.tzinfo is not None
    assert stored.created_at == plan.created_at
