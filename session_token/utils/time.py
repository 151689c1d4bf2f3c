"""UTC time helpers."""

from __future__ import annotations

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def now_ms() -> int:
    """Return current wall-clock time in milliseconds since the epoch."""
    return int(utc_now().timestamp() * 1000)
