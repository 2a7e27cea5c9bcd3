"""Calendar helpers for building and displaying meal plans."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import List, Optional

from recetario.ids import generate_id
from recetario.models.plan import MealPlan, WeekDay

# Indexed by date.isoweekday() % 7, so Sunday comes first.
DAY_NAMES = ("Domingo", "Lunes", "Martes", "Miercoles", "Jueves", "Viernes", "Sabado")


def format_date(value: date) -> str:
    """Return ``YYYY-MM-DD`` for the given date."""

    return value.strftime("%Y-%m-%d")


def get_week_days(start: date, num_weeks: int, today: Optional[date] = None) -> List[WeekDay]:
    """Return ``num_weeks`` * 7 consecutive days beginning at ``start``."""

    today_str = format_date(today or date.today())
    days: List[WeekDay] = []
    for offset in range(num_weeks * 7):
        current = start + timedelta(days=offset)
        date_str = format_date(current)
        days.append(
            WeekDay(
                date=date_str,
                day_name=DAY_NAMES[current.isoweekday() % 7],
                day_number=current.day,
                is_today=date_str == today_str,
            )
        )
    return days


def create_empty_meal_plan(name: str, start: date, num_weeks: int) -> MealPlan:
    """Build (without saving) a plan spanning ``num_weeks`` whole weeks."""

    end = start + timedelta(days=num_weeks * 7 - 1)
    return MealPlan(
        id=generate_id(),
        name=name,
        start_date=format_date(start),
        end_date=format_date(end),
        meals=[],
        created_at=datetime.now(timezone.utc),
    )


def plan_week_count(plan: MealPlan) -> int:
    start = date.fromisoformat(plan.start_date)
    end = date.fromisoformat(plan.end_date)
    return max(1, ((end - start).days + 1 + 6) // 7)


def organize_meals_by_day(plan: MealPlan, week_days: List[WeekDay]) -> List[WeekDay]:
    """Attach the plan's first lunch and dinner for each day."""

    organized: List[WeekDay] = []
    for day in week_days:
        lunch = next(
            (meal for meal in plan.meals if meal.date == day.date and meal.meal_type == "lunch"),
            None,
        )
        dinner = next(
            (meal for meal in plan.meals if meal.date == day.date and meal.meal_type == "dinner"),
            None,
        )
        organized.append(day.model_copy(update={"lunch": lunch, "dinner": dinner}))
    return organized


__all__ = [
    "DAY_NAMES",
    "format_date",
    "get_week_days",
    "create_empty_meal_plan",
    "plan_week_count",
    "organize_meals_by_day",
]
