"""Helper for running the Recetario ASGI application."""

from __future__ import annotations

import os

import uvicorn


def _parse_port(value: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise SystemExit(f"Invalid RECETARIO_SERVER_PORT '{value}': {exc}") from exc


def main() -> None:
    """Entry point for the ``recetario-server`` script."""

    host = os.environ.get("RECETARIO_SERVER_HOST", "127.0.0.1")
    port = _parse_port(os.environ.get("RECETARIO_SERVER_PORT", "8000"))
    reload_enabled = os.environ.get("RELOAD") == "1"

    uvicorn.run(
        "recetario.server.app:app",
        host=host,
        port=port,
        reload=reload_enabled,
    )


if __name__ == "__main__":
    main()
