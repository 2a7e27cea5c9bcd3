"""Key/value storage of whole JSON documents."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from .models import DocumentORM
from .repository import session_scope

logger = logging.getLogger(__name__)


def load_document(key: str) -> Optional[Dict[str, Any]]:
    """Return the decoded document stored under ``key`` or ``None``."""

    with session_scope() as session:
        row = session.get(DocumentORM, key)
        if row is None:
            return None
        return json.loads(row.payload)


def store_document(key: str, payload: Dict[str, Any]) -> None:
    """Replace the document stored under ``key``."""

    encoded = json.dumps(payload, ensure_ascii=False)
    logger.debug("Persisting document key=%s bytes=%s", key, len(encoded))
    with session_scope() as session:
        session.merge(DocumentORM(key=key, payload=encoded))


__all__ = ["load_document", "store_document"]
