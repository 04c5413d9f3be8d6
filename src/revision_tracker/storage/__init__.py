"""Storage backends for Revision Tracker."""

from revision_tracker.storage.base import AgendaStorage
from revision_tracker.storage.factory import create_storage
from revision_tracker.storage.memory_store import InMemoryStorage
from revision_tracker.storage.sqlite_store import SQLiteStorage

__all__ = [
    "AgendaStorage",
    "InMemoryStorage",
    "SQLiteStorage",
    "create_storage",
]
