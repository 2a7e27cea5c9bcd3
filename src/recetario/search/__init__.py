"""Recipe search helpers."""

from .recipes import search_recipes

__all__ = ["search_recipes"]
