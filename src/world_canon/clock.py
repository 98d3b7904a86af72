"""UTC date helpers used for ``last_modified``, ``created`` and changelog dates."""

from __future__ import annotations

from datetime import UTC, datetime


def now() -> datetime:
    return datetime.now(UTC)


def today() -> str:
    """Return today's UTC date as ``YYYY-MM-DD``."""
    return now().date().isoformat()


def timestamp() -> str:
    """Return the current UTC time as an ISO-8601 string."""
    return now().isoformat()
