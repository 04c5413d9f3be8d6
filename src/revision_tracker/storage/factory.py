"""Storage backend selection."""

from __future__ import annotations

import logging

from revision_tracker.config import TrackerConfig
from revision_tracker.storage.base import AgendaStorage
from revision_tracker.storage.memory_store import InMemoryStorage
from revision_tracker.storage.sqlite_store import SQLiteStorage

logger = logging.getLogger(__name__)


async def create_storage(config: TrackerConfig) -> AgendaStorage:
    """Create and initialize the backend named by ``config.storage_backend``."""
    storage: AgendaStorage
    if config.storage_backend == "memory":
        storage = InMemoryStorage()
    else:
        storage = SQLiteStorage(db_path=config.db_path)

    await storage.initialize()
    logger.debug("Using %s agenda storage", config.storage_backend)
    return storage
