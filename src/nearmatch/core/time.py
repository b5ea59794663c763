"""
Timestamp helpers.

NearMatch stores every timestamp as a timezone-aware UTC datetime so that the
JSON output is unambiguous regardless of where the server runs.
"""

from __future__ import annotations

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)
