"""HTTP server for Revision Tracker."""

from revision_tracker.server.app import create_app

__all__ = ["create_app"]
