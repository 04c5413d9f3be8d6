"""Agenda items: one topic pinned to one revision date."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from revision_tracker.core.dates import (
    InvalidDateError,
    add_years,
    calculate_revision_dates,
    get_today_utc,
    is_future_date,
    parse_iso_datetime,
    parse_start_date,
    to_iso_string,
)

MAX_TOPIC_LENGTH = 100
MAX_PAST_YEARS = 10


class AgendaError(Exception):
    """Base error for agenda operations."""


class UnknownUserError(AgendaError):
    """Raised when an operation names a user outside the directory."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(f"Unknown user: {user_id}")


@dataclass(frozen=True)
class FormError:
    """A single validation failure attached to a form field."""

    field: str
    message: str


class ValidationError(AgendaError):
    """Raised when a topic submission fails validation."""

    def __init__(self, errors: list[FormError]) -> None:
        self.errors = errors
        super().__init__("; ".join(e.message for e in errors))


@dataclass(frozen=True)
class AgendaItem:
    """A scheduled revision of a topic.

    Attributes:
        topic: The topic label (at most 100 characters)
        date: The revision date, UTC midnight
        start_date: The day the topic was first studied, ``YYYY-MM-DD``
    """

    topic: str
    date: datetime
    start_date: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "topic": self.topic,
            "date": to_iso_string(self.date),
            "startDate": self.start_date,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AgendaItem:
        return cls(
            topic=str(data["topic"]),
            date=parse_iso_datetime(str(data["date"])),
            start_date=str(data.get("startDate", data.get("start_date", ""))),
        )


def validate_topic_form(
    topic: str | None,
    start_date: str | None,
    *,
    max_past_years: int = MAX_PAST_YEARS,
) -> list[FormError]:
    """Check a topic submission and return every problem found.

    Both fields are always checked so all messages can be shown at once.
    """
    errors: list[FormError] = []

    topic = (topic or "").strip()
    if not topic:
        errors.append(FormError("topic-name", "Topic name is required"))
    elif len(topic) > MAX_TOPIC_LENGTH:
        errors.append(
            FormError("topic-name", f"Topic name must be {MAX_TOPIC_LENGTH} characters or less")
        )

    if not start_date:
        errors.append(FormError("start-date", "Start date is required"))
    else:
        try:
            selected = parse_start_date(start_date)
            calculate_revision_dates(start_date)
        except InvalidDateError:
            errors.append(FormError("start-date", "Invalid date selected"))
        else:
            try:
                earliest = add_years(get_today_utc(), -max_past_years)
            except (OverflowError, ValueError):
                # Window reaches before year 1: nothing can be too old.
                earliest = None
            if earliest is not None and selected < earliest:
                errors.append(
                    FormError(
                        "start-date",
                        f"Start date cannot be more than {max_past_years} years in the past",
                    )
                )

    return errors


def build_agenda_items(topic: str, start_date: str) -> list[AgendaItem]:
    """Create one agenda item per revision date of ``start_date``."""
    return [
        AgendaItem(topic=topic, date=date, start_date=start_date)
        for date in calculate_revision_dates(start_date)
    ]


def schedule_topic(
    topic: str | None,
    start_date: str | None,
    *,
    max_past_years: int = MAX_PAST_YEARS,
) -> list[AgendaItem]:
    """Validate a submission and build its agenda items.

    Raises:
        ValidationError: if the topic or start date is rejected
    """
    errors = validate_topic_form(topic, start_date, max_past_years=max_past_years)
    if errors:
        raise ValidationError(errors)
    return build_agenda_items((topic or "").strip(), (start_date or "").strip())


def upcoming_items(items: Iterable[AgendaItem]) -> list[AgendaItem]:
    """Return items dated today or later, earliest first."""
    return sorted((item for item in items if is_future_date(item.date)), key=lambda i: i.date)
