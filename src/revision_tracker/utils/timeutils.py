"""Host clock accessors.

All "now" lookups go through this module so tests can patch a single place.
``utcnow()`` returns an aware UTC datetime; ``localnow()`` returns the naive
local wall-clock time the observer sees.
"""

from __future__ import annotations

from datetime import UTC, datetime


def utcnow() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


def localnow() -> datetime:
    """Return the current local wall-clock time as a naive datetime."""
    return datetime.now()
