"""API routes for Revision Tracker server."""

from revision_tracker.server.routes.agenda import router as agenda_router
from revision_tracker.server.routes.ui import router as ui_router

__all__ = ["agenda_router", "ui_router"]
