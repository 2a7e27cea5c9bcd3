"""Meal plan models."""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

MealType = Literal["lunch", "dinner"]


class PlannedMeal(BaseModel):
    """A recipe scheduled for one meal slot."""

    id: str
    recipe_id: str
    recipe_title: str
    date: str = Field(pattern=r"^\d{4}-\d{2}-\d{2}$")
    meal_type: MealType

    model_config = ConfigDict(frozen=True)


class MealPlan(BaseModel):
    """A multi-week meal plan."""

    id: str
    name: str
    start_date: str
    end_date: str
    meals: list[PlannedMeal] = Field(default_factory=list)
    created_at: datetime

    model_config = ConfigDict(frozen=True)


class WeekDay(BaseModel):
    """Calendar day of a plan with its lunch and dinner slots."""

    date: str
    day_name: str
    day_number: int
    is_today: bool
    lunch: Optional[PlannedMeal] = None
    dinner: Optional[PlannedMeal] = None


__all__ = ["MealType", "PlannedMeal", "MealPlan", "WeekDay"]
