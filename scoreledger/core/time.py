"""Time helpers."""

from __future__ import annotations

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC datetime."""
    return datetime.now(timezone.utc)


def unix_now() -> int:
    """Return the current UNIX timestamp in whole seconds."""
    return int(utcnow().timestamp())


__all__ = ["unix_now", "utcnow"]
