"""FastAPI application for Revision Tracker."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from revision_tracker import __version__
from revision_tracker.config import TrackerConfig
from revision_tracker.server.dependencies import get_config, get_storage
from revision_tracker.server.routes import agenda_router, ui_router
from revision_tracker.storage.base import AgendaStorage
from revision_tracker.storage.factory import create_storage

logger = logging.getLogger(__name__)


def create_app(
    config: TrackerConfig | None = None,
    storage: AgendaStorage | None = None,
) -> FastAPI:
    """Build the application.

    Args:
        config: Settings to use (loaded from disk/env if omitted)
        storage: Ready-to-use storage. When omitted, a backend is created
            from ``config`` at startup and closed at shutdown.
    """
    config = config or TrackerConfig.load()
    owns_storage = storage is None

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if app.state.storage is None:
            app.state.storage = await create_storage(config)
        try:
            yield
        finally:
            if owns_storage and app.state.storage is not None:
                await app.state.storage.close()
                app.state.storage = None

    app = FastAPI(
        title="Revision Tracker",
        description="Fixed-interval spaced repetition scheduling",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.storage = storage

    async def _storage() -> AgendaStorage:
        if app.state.storage is None:
            raise RuntimeError("Storage not initialized")
        return app.state.storage

    async def _config() -> TrackerConfig:
        return config

    app.dependency_overrides[get_storage] = _storage
    app.dependency_overrides[get_config] = _config

    app.include_router(ui_router)
    app.include_router(agenda_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "healthy", "version": __version__}

    return app
