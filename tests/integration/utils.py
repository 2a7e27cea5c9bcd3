"""Shared helpers for integration tests."""

from __future__ import annotations

from recetario.config import get_settings


def auth_headers() -> dict[str, str]:
    token = get_settings().api_token
    if not token:
        return {}
    return {"Authorization": f"Bearer {token}"}


def create_recipe(client, title: str, ingredients: str) -> dict:
    response = client.post(
        "/recipes",
        json={"title": title, "ingredients": ingredients, "created_by": "maria"},
        headers=auth_headers(),
    )
    assert response.status_code == 201
    return response.json()
