"""SQLAlchemy models representing Recetario persistence tables."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Integer, String, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Declarative base class for Recetario ORM models."""


class DocumentORM(Base):
    """Whole JSON document stored under a path-like key (shopping list, pantry)."""

    __tablename__ = "documents"

    key: Mapped[str] = mapped_column(String(128), primary_key=True)
    payload: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class RecipeORM(Base):
    """Household recipe."""

    __tablename__ = "recipes"

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    ingredients: Mapped[str] = mapped_column(Text, nullable=False, default="")
    steps: Mapped[str] = mapped_column(Text, nullable=False, default="[]")
    servings: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    cooking_time: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    cuisine: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    difficulty: Mapped[Optional[str]] = mapped_column(String(16), nullable=True)
    dietary_tags: Mapped[str] = mapped_column(Text, nullable=False, default="[]")
    source: Mapped[str] = mapped_column(String(32), nullable=False, default="manual")
    source_url: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    created_by: Mapped[str] = mapped_column(String(64), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)


class MealPlanORM(Base):
    """Meal plan with its planned meals serialized as JSON."""

    __tablename__ = "meal_plans"

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    start_date: Mapped[str] = mapped_column(String(10), nullable=False)
    end_date: Mapped[str] = mapped_column(String(10), nullable=False)
    meals: Mapped[str] = mapped_column(Text, nullable=False, default="[]")
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)


__all__ = ["Base", "DocumentORM", "RecipeORM", "MealPlanORM"]
