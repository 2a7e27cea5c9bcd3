"""Prometheus metrics definitions for Recetario."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

REQUEST_COUNT = Counter(
    "recetario_http_requests_total",
    "Total number of HTTP requests processed by the Recetario API",
    ["method", "path", "status"],
)

REQUEST_LATENCY = Histogram(
    "recetario_http_request_duration_seconds",
    "Latency of HTTP requests processed by the Recetario API",
    ["method", "path"],
)

SHOPPING_MERGE_ITEMS = Counter(
    "recetario_shopping_ingredients_total",
    "Ingredients processed by the shopping list aggregator by outcome",
    ["result"],
)

PLAN_RECIPES = Counter(
    "recetario_plan_recipes_total",
    "Recipes resolved while generating shopping lists from meal plans",
    ["result"],
)

__all__ = [
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "SHOPPING_MERGE_ITEMS",
    "PLAN_RECIPES",
]
