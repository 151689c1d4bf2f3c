"""Utility helpers for time operations."""

from .time import now_ms, utc_now

__all__ = ["utc_now", "now_ms"]
