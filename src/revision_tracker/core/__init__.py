"""Core data models for Revision Tracker."""

from revision_tracker.core.agenda import (
    AgendaError,
    AgendaItem,
    FormError,
    UnknownUserError,
    ValidationError,
    build_agenda_items,
    schedule_topic,
    upcoming_items,
    validate_topic_form,
)
from revision_tracker.core.dates import (
    InvalidDateError,
    add_days,
    add_months,
    add_years,
    calculate_revision_dates,
    format_date,
    get_today_string,
    get_today_utc,
    is_future_date,
)
from revision_tracker.core.users import get_user_ids, is_known_user, require_user

__all__ = [
    # Dates
    "InvalidDateError",
    "add_days",
    "add_months",
    "add_years",
    "calculate_revision_dates",
    "format_date",
    "get_today_string",
    "get_today_utc",
    "is_future_date",
    # Agenda
    "AgendaError",
    "AgendaItem",
    "FormError",
    "UnknownUserError",
    "ValidationError",
    "build_agenda_items",
    "schedule_topic",
    "upcoming_items",
    "validate_topic_form",
    # Users
    "get_user_ids",
    "is_known_user",
    "require_user",
]
