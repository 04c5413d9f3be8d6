"""Revision date arithmetic and formatting.

Every value handled here is a timezone-aware ``datetime`` pinned to UTC
midnight. Month and year offsets shift the numeric field and let an
overflowing day-of-month carry forward, so 31 January plus one month lands
on 3 March (2 March in a leap year) instead of being clamped to the end of
February.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime, timedelta

from revision_tracker.utils.timeutils import localnow, utcnow

# Offsets applied to the start date, in schedule order
REVISION_INTERVALS: tuple[tuple[str, int], ...] = (
    ("days", 7),  # 1 week
    ("months", 1),  # 1 month
    ("months", 3),  # 3 months
    ("months", 6),  # 6 months
    ("years", 1),  # 1 year
)

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_DATE_PATTERN = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})$")


class InvalidDateError(ValueError):
    """Raised when a start date string is not a valid calendar date."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid date: {value!r}")


def _as_utc(date: datetime) -> datetime:
    if date.tzinfo is None:
        return date.replace(tzinfo=UTC)
    return date.astimezone(UTC)


def _rollover(date: datetime, year: int, month: int) -> datetime:
    """Place ``date``'s day-of-month into ``year``/``month``, carrying overflow."""
    first = date.replace(year=year, month=month, day=1)
    return first + timedelta(days=date.day - 1)


def add_days(date: datetime, days: int) -> datetime:
    """Return a new date ``days`` days after ``date`` (negative goes back)."""
    return _as_utc(date) + timedelta(days=days)


def add_months(date: datetime, months: int) -> datetime:
    """Return a new date with ``months`` added to the UTC month field.

    The day-of-month is kept as is and overflows into the following month
    when the target month is shorter.
    """
    date = _as_utc(date)
    total = date.month - 1 + months
    return _rollover(date, date.year + total // 12, total % 12 + 1)


def add_years(date: datetime, years: int) -> datetime:
    """Return a new date with ``years`` added to the UTC year field.

    29 February moved to a non-leap year becomes 1 March.
    """
    date = _as_utc(date)
    return _rollover(date, date.year + years, date.month)


_OFFSETS = {
    "days": add_days,
    "months": add_months,
    "years": add_years,
}


def parse_start_date(value: str) -> datetime:
    """Parse a ``YYYY-MM-DD`` string as UTC midnight.

    Raises:
        InvalidDateError: if the string is malformed or names a day that
            does not exist (e.g. ``2026-02-30``).
    """
    if not isinstance(value, str):
        raise InvalidDateError(value)
    match = _DATE_PATTERN.match(value.strip())
    if match is None:
        raise InvalidDateError(value)
    year, month, day = (int(part) for part in match.groups())
    try:
        return datetime(year, month, day, tzinfo=UTC)
    except ValueError as e:
        raise InvalidDateError(value) from e


def calculate_revision_dates(start_date: str) -> tuple[datetime, ...]:
    """Compute the five revision dates for a topic started on ``start_date``.

    Each entry is derived directly from the start date, never from the
    previous entry.

    Returns:
        Dates 1 week, 1 month, 3 months, 6 months and 1 year after the start.

    Raises:
        InvalidDateError: if the start date is malformed or any revision
            date falls outside the representable calendar range.
    """
    start = parse_start_date(start_date)
    try:
        return tuple(_OFFSETS[unit](start, amount) for unit, amount in REVISION_INTERVALS)
    except (OverflowError, ValueError) as e:
        raise InvalidDateError(start_date) from e


def get_ordinal_suffix(day: int) -> str:
    """Return the English ordinal suffix for a day number."""
    if 11 <= day % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def format_date(date: datetime) -> str:
    """Format a date for display, e.g. ``"26th July 2026"``."""
    date = _as_utc(date)
    return f"{date.day}{get_ordinal_suffix(date.day)} {MONTH_NAMES[date.month - 1]} {date.year}"


def get_today_utc() -> datetime:
    """Return today's date at UTC midnight.

    "Today" is the observer's local calendar date, re-expressed as UTC.
    """
    now = localnow()
    return datetime(now.year, now.month, now.day, tzinfo=UTC)


def is_future_date(date: datetime) -> bool:
    """Return True if ``date`` is today or later."""
    return _as_utc(date) >= get_today_utc()


def get_today_string() -> str:
    """Return today's UTC calendar date as ``YYYY-MM-DD``."""
    return utcnow().date().isoformat()


def to_iso_string(date: datetime) -> str:
    """Serialize a date as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    date = _as_utc(date)
    return f"{date.strftime('%Y-%m-%dT%H:%M:%S')}.{date.microsecond // 1000:03d}Z"


def parse_iso_datetime(value: str) -> datetime:
    """Parse a stored ISO-8601 timestamp back into an aware UTC datetime.

    Naive timestamps and bare dates are read as UTC.
    """
    try:
        parsed = datetime.fromisoformat(value.strip())
    except (AttributeError, ValueError) as e:
        raise InvalidDateError(value) from e
    return _as_utc(parsed)
