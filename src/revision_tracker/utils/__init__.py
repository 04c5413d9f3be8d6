"""Utility modules for Revision Tracker."""

from revision_tracker.utils.timeutils import localnow, utcnow

__all__ = ["localnow", "utcnow"]
