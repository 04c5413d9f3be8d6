"""Shared dependencies for API routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException

from revision_tracker.config import TrackerConfig
from revision_tracker.core.agenda import UnknownUserError
from revision_tracker.core.users import require_user
from revision_tracker.storage.base import AgendaStorage


async def get_storage() -> AgendaStorage:
    """
    Dependency to get storage instance.

    This is overridden by the application at startup.
    """
    raise NotImplementedError("Storage not configured")


async def get_config() -> TrackerConfig:
    """
    Dependency to get the active configuration.

    This is overridden by the application at startup.
    """
    raise NotImplementedError("Config not configured")


async def get_user_id(user_id: str) -> str:
    """Dependency to validate the user id path parameter."""
    try:
        return require_user(user_id)
    except UnknownUserError as e:
        raise HTTPException(status_code=404, detail=f"User {user_id} not found") from e


StorageDep = Annotated[AgendaStorage, Depends(get_storage)]
ConfigDep = Annotated[TrackerConfig, Depends(get_config)]
UserDep = Annotated[str, Depends(get_user_id)]
