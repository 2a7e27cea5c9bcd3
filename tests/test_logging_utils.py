"""Tests for logging utilities and sensitive data redaction."""

from __future__ import annotations

import json
import logging

import pytest

from recetario.logging_utils import configure_logging


def _record(msg: str, *args) -> logging.LogRecord:
    return logging.LogRecord(
        name="recetario.test.redaction",
        level=logging.INFO,
        pathname=__file__,
        lineno=0,
        msg=msg,
        args=args,
        exc_info=None,
    )


@pytest.mark.parametrize("fmt", ["plain", "json"])
def test_secret_redacting_filter(fmt):
    secret = "top-secret-token"
    configure_logging("INFO", fmt, [secret])

    handler = logging.getLogger().handlers[0]
    record = _record("Authorization header Bearer %s", secret)
    for filter_ in handler.filters:
        filter_.filter(record)

    formatted = handler.format(record)
    assert secret not in formatted
    assert "[redacted]" in formatted


def test_json_formatter_includes_request_id():
    configure_logging("DEBUG", "json")

    handler = logging.getLogger().handlers[0]
    record = _record("merged %s ingredient(s)", 3)
    record.request_id = "req-42"

    payload = json.loads(handler.format(record))
    assert payload["message"] == "merged 3 ingredient(s)"
    assert payload["request_id"] == "req-42"
    assert logging.getLogger().level == logging.DEBUG
