"""Revision Tracker - fixed-interval spaced repetition scheduling."""

from revision_tracker.core.dates import calculate_revision_dates, format_date

__version__ = "0.1.0"

__all__ = ["__version__", "calculate_revision_dates", "format_date"]
