"""Pantry ("despensa") inventory operations."""

from .service import PantryService

__all__ = ["PantryService"]
