"""Utility functions for the backend."""

from datetime import UTC, datetime


def as_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to naive timestamps.

    SQLite returns ``DateTime(timezone=True)`` columns without tzinfo, and all
    timestamps are written in UTC, so a naive value read back is a UTC value.
    """
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
