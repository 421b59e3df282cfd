"""Time utilities for consistent timestamp handling."""

from datetime import date, datetime, timezone
from typing import Callable

# Zero-argument callable returning "today"; injected wherever the current
# date matters so tests can pin it.
Clock = Callable[[], date]


def utc_now() -> datetime:
    """Return current UTC timestamp (timezone-aware)."""
    return datetime.now(timezone.utc)


def today() -> date:
    """Return the current calendar date in UTC."""
    return utc_now().date()
