"""Identifier helpers shared by stored documents."""

from __future__ import annotations

import secrets
import string

_ALPHABET = string.ascii_lowercase + string.digits
ID_LENGTH = 13


def generate_id(length: int = ID_LENGTH) -> str:
    """Return a short random alphanumeric identifier (uniqueness is not enforced)."""

    return "".join(secrets.choice(_ALPHABET) for _ in range(length))


__all__ = ["generate_id", "ID_LENGTH"]
