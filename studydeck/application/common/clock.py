"""
Clock used by use cases to read the current instant.

Use cases take a ``Clock`` so tests can pin "now" to a fixed calendar day.
"""

from collections.abc import Callable
from datetime import UTC, datetime

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current instant in UTC."""
    return datetime.now(UTC)
