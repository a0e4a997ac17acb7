"""Idempotency key helpers for mutating inventory and order calls."""
from __future__ import annotations

import uuid


def new_idempotency_key() -> str:
    return str(uuid.uuid4())


def idempotency_headers(key: str | None) -> dict[str, str]:
    if not key:
        return {}
    return {"Idempotency-Key": key}
