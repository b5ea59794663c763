"""Opaque identifier generation for users and matches."""

from __future__ import annotations

import uuid


def new_id() -> str:
    """Return a random, collision-resistant identifier (32 hex chars)."""
    return uuid.uuid4().hex
