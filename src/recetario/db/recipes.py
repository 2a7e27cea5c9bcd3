"""Recipe persistence helpers."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, List, Optional

from sqlalchemy import select

from recetario.ids import generate_id
from recetario.models.recipe import Recipe, RecipeData

from .models import RecipeORM
from .repository import session_scope

logger = logging.getLogger(__name__)

_JSON_FIELDS = {"steps", "dietary_tags"}
_REQUIRED_FIELDS = {"title", "ingredients"}


def _as_utc(value: datetime) -> datetime:
    # SQLite drops the offset; stored values are always UTC.
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


def _to_model(row: RecipeORM) -> Recipe:
    return Recipe.model_validate(
        {
            "id": row.id,
            "title": row.title,
            "ingredients": row.ingredients,
            "steps": json.loads(row.steps or "[]"),
            "servings": row.servings,
            "cooking_time": row.cooking_time,
            "cuisine": row.cuisine,
            "difficulty": row.difficulty,
            "dietary_tags": json.loads(row.dietary_tags or "[]"),
            "source": row.source,
            "source_url": row.source_url,
            "created_by": row.created_by,
            "created_at": _as_utc(row.created_at),
        }
    )


def list_recipes() -> List[Recipe]:
    """Return every recipe, newest first."""

    with session_scope() as session:
        rows = (
            session.execute(select(RecipeORM).order_by(RecipeORM.created_at.desc()))
            .scalars()
            .all()
        )
        return [_to_model(row) for row in rows]


def get_recipe_by_id(recipe_id: str) -> Optional[Recipe]:
    with session_scope() as session:
        row = session.get(RecipeORM, recipe_id)
        if row is None:
            return None
        return _to_model(row)


def create_recipe(data: RecipeData) -> str:
    """Store a new recipe and return its id."""

    payload = data.model_dump()
    recipe_id = generate_id()
    with session_scope() as session:
        session.add(
            RecipeORM(
                id=recipe_id,
                created_at=datetime.now(timezone.utc),
                **{
                    key: json.dumps(value, ensure_ascii=False) if key in _JSON_FIELDS else value
                    for key, value in payload.items()
                },
            )
        )
    logger.info("Recipe created id=%s title=%s", recipe_id, data.title)
    return recipe_id


def update_recipe(recipe_id: str, **fields: Any) -> Recipe:
    """Apply a partial update; raises ``ValueError`` when the recipe is missing."""

    with session_scope() as session:
        row = session.get(RecipeORM, recipe_id)
        if row is None:
            raise ValueError(f"Recipe {recipe_id} not found")

        for key, value in fields.items():
            if key not in RecipeData.model_fields:
                continue
            if value is None and key in _REQUIRED_FIELDS:
                continue
            if key in _JSON_FIELDS:
                value = json.dumps(value or [], ensure_ascii=False)
            setattr(row, key, value)

        session.flush()
        return _to_model(row)


def delete_recipe(recipe_id: str) -> None:
    """Remove a recipe if present."""

    with session_scope() as session:
        row = session.get(RecipeORM, recipe_id)
        if row is not None:
            session.delete(row)


__all__ = [
    "list_recipes",
    "get_recipe_by_id",
    "create_recipe",
    "update_recipe",
    "delete_recipe",
]
