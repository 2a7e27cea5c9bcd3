"""Shared pytest fixtures for the Recetario test suite."""

from __future__ import annotations

from itertools import count
from typing import Callable, Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from recetario.config import get_settings
from recetario.db.repository import reset_repository_state
from recetario.server.app import create_app
from tests.fakes import InMemoryPantryStore, InMemoryRecipeLookup, InMemoryShoppingListStore


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Ensure each test uses an isolated SQLite database location."""

    db_path = tmp_path / "test_recetario.db"
    monkeypatch.setenv("RECETARIO_DATABASE_PATH", str(db_path))
    monkeypatch.delenv("RECETARIO_API_TOKEN", raising=False)
    get_settings.cache_clear()
    reset_repository_state()
    yield
    reset_repository_state()
    monkeypatch.delenv("RECETARIO_DATABASE_PATH", raising=False)
    get_settings.cache_clear()


@pytest.fixture()
def app() -> Generator[FastAPI, None, None]:
    """Create a new FastAPI app instance for each test and reset overrides."""

    application = create_app()
    yield application
    application.dependency_overrides.clear()


@pytest.fixture()
def client(app) -> TestClient:
    """Return a test client bound to the FastAPI app."""

    return TestClient(app)


@pytest.fixture()
def id_factory() -> Callable[[], str]:
    """Deterministic ids: item-1, item-2, ..."""

    counter = count(1)
    return lambda: f"item-{next(counter)}"


@pytest.fixture()
def shopping_store() -> InMemoryShoppingListStore:
    return InMemoryShoppingListStore()


@pytest.fixture()
def pantry_store() -> InMemoryPantryStore:
    return InMemoryPantryStore()


@pytest.fixture()
def recipe_lookup() -> InMemoryRecipeLookup:
    return InMemoryRecipeLookup()
