"""Meal plan calendar helpers."""
