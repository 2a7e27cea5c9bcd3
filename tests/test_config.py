"""Tests for settings loading."""

from __future__ import annotations

from pathlib import Path

from recetario.config import get_settings


def test_settings_read_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("RECETARIO_DATABASE_PATH", str(tmp_path / "x.db"))
    monkeypatch.setenv("RECETARIO_EXCLUDE_PANTRY", "no")
    monkeypatch.setenv("RECETARIO_LOG_FORMAT", "json")
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.database_path == tmp_path / "x.db"
    assert settings.exclude_pantry_default is False
    assert settings.log_format == "json"


def test_env_file_fallback(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("RECETARIO_DATABASE_PATH", raising=False)
    Path(".env").write_text("# local\nRECETARIO_API_TOKEN=from-file\n", encoding="utf-8")
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.api_token == "from-file"
    assert settings.database_path == Path("./data/recetario.db")
