"""Pantry ("despensa") models."""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

PantryCategory = Literal["staple", "current"]


class PantryItem(BaseModel):
    """Ingredient the household already has on hand."""

    id: str
    name: str = Field(min_length=1, max_length=255)
    category: PantryCategory
    quantity: Optional[str] = Field(default=None, max_length=64)
    added_at: datetime

    model_config = ConfigDict(frozen=True)


class Pantry(BaseModel):
    """The single pantry document, items kept in insertion order."""

    items: list[PantryItem] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


__all__ = ["PantryCategory", "PantryItem", "Pantry"]
