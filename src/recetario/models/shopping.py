"""Shopping list models."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ShoppingItem(BaseModel):
    """One consolidated line on the household shopping list."""

    id: str
    text: str
    checked: bool = Field(default=False)
    from_recipes: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class ShoppingList(BaseModel):
    """The single shopping list document."""

    items: list[ShoppingItem] = Field(default_factory=list)
    last_cleared: Optional[datetime] = Field(default=None)

    model_config = ConfigDict(frozen=True)


class MergeCounts(BaseModel):
    """Outcome of merging one ingredient block into the shopping list."""

    added: int = 0
    skipped: int = 0
    merged: int = 0

    model_config = ConfigDict(frozen=True)


class GeneratedShopping(BaseModel):
    """Summary of a meal plan turned into shopping list entries."""

    recipes_merged: list[str] = Field(default_factory=list)
    recipes_missing: list[str] = Field(default_factory=list)
    added: int = 0
    skipped: int = 0


__all__ = ["ShoppingItem", "ShoppingList", "MergeCounts", "GeneratedShopping"]
