"""Recipe models."""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Difficulty = Literal["easy", "medium", "hard"]
RecipeSource = Literal["manual", "instagram"]


class RecipeData(BaseModel):
    """Editable recipe fields, as submitted by a household member."""

    title: str = Field(min_length=1, max_length=255)
    ingredients: str = Field(default="")
    steps: list[str] = Field(default_factory=list)
    servings: Optional[int] = Field(default=None, ge=1)
    cooking_time: Optional[str] = Field(default=None, max_length=64)
    cuisine: Optional[str] = Field(default=None, max_length=64)
    difficulty: Optional[Difficulty] = Field(default=None)
    dietary_tags: list[str] = Field(default_factory=list)
    source: RecipeSource = Field(default="manual")
    source_url: Optional[str] = Field(default=None, max_length=1024)
    created_by: str = Field(min_length=1, max_length=64)


class Recipe(RecipeData):
    """Stored recipe. ``ingredients`` is one ingredient per line or comma separated."""

    id: str
    created_at: datetime

    model_config = ConfigDict(frozen=True)


__all__ = ["Difficulty", "RecipeSource", "RecipeData", "Recipe"]
