"""Meal plan persistence helpers."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import select

from recetario.ids import generate_id
from recetario.models.plan import MealPlan, MealType, PlannedMeal

from .models import MealPlanORM
from .repository import session_scope

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


def _to_model(row: MealPlanORM) -> MealPlan:
    return MealPlan.model_validate(
        {
            "id": row.id,
            "name": row.name,
            "start_date": row.start_date,
            "end_date": row.end_date,
            "meals": json.loads(row.meals or "[]"),
            "created_at": _as_utc(row.created_at),
        }
    )


def list_meal_plans() -> List[MealPlan]:
    with session_scope() as session:
        rows = (
            session.execute(select(MealPlanORM).order_by(MealPlanORM.created_at.desc()))
            .scalars()
            .all()
        )
        return [_to_model(row) for row in rows]


def get_current_meal_plan() -> Optional[MealPlan]:
    """Return the most recently created plan, if any."""

    with session_scope() as session:
        row = (
            session.execute(select(MealPlanORM).order_by(MealPlanORM.created_at.desc()).limit(1))
            .scalars()
            .first()
        )
        if row is None:
            return None
        return _to_model(row)


def get_meal_plan_by_id(plan_id: str) -> Optional[MealPlan]:
    with session_scope() as session:
        row = session.get(MealPlanORM, plan_id)
        if row is None:
            return None
        return _to_model(row)


def save_meal_plan(plan: MealPlan) -> MealPlan:
    """Insert or replace the plan document."""

    meals = [meal.model_dump(mode="json") for meal in plan.meals]
    with session_scope() as session:
        session.merge(
            MealPlanORM(
                id=plan.id,
                name=plan.name,
                start_date=plan.start_date,
                end_date=plan.end_date,
                meals=json.dumps(meals, ensure_ascii=False),
                created_at=plan.created_at,
            )
        )
    return plan


def _require_plan(plan_id: str) -> MealPlan:
    plan = get_meal_plan_by_id(plan_id)
    if plan is None:
        raise ValueError(f"Meal plan {plan_id} not found")
    return plan


def add_meal_to_day(
    plan_id: str,
    date: str,
    meal_type: MealType,
    recipe_id: str,
    recipe_title: str,
) -> MealPlan:
    """Schedule a recipe, replacing whatever occupied the same date and slot."""

    plan = _require_plan(plan_id)
    meals = [
        meal for meal in plan.meals if not (meal.date == date and meal.meal_type == meal_type)
    ]
    meals.append(
        PlannedMeal(
            id=generate_id(),
            recipe_id=recipe_id,
            recipe_title=recipe_title,
            date=date,
            meal_type=meal_type,
        )
    )
    logger.debug("Planned %s for %s %s in plan %s", recipe_title, date, meal_type, plan_id)
    return save_meal_plan(plan.model_copy(update={"meals": meals}))


def remove_meal_from_day(plan_id: str, meal_id: str) -> MealPlan:
    plan = _require_plan(plan_id)
    meals = [meal for meal in plan.meals if meal.id != meal_id]
    return save_meal_plan(plan.model_copy(update={"meals": meals}))


__all__ = [
    "list_meal_plans",
    "get_current_meal_plan",
    "get_meal_plan_by_id",
    "save_meal_plan",
    "add_meal_to_day",
    "remove_meal_from_day",
]
