"""Command-line interface for Revision Tracker."""

from revision_tracker.cli.main import app

__all__ = ["app"]
