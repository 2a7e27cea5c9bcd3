"""ASGI application factory and dependencies for the Recetario server."""

from recetario.server.app import app, create_app

__all__ = ["app", "create_app"]
