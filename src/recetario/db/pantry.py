"""Pantry ("despensa") document persistence."""

from __future__ import annotations

from typing import List

from recetario.models.pantry import Pantry

from .documents import load_document, store_document

DOC_KEY = "despensa/current"


def get_pantry() -> Pantry:
    payload = load_document(DOC_KEY)
    if payload is None:
        return Pantry(items=[])
    return Pantry.model_validate(payload)


def save_pantry(pantry: Pantry) -> None:
    store_document(DOC_KEY, pantry.model_dump(mode="json"))


def list_pantry_names() -> List[str]:
    """Return pantry item names lowercased."""

    return [item.name.lower() for item in get_pantry().items]


__all__ = ["DOC_KEY", "get_pantry", "save_pantry", "list_pantry_names"]
