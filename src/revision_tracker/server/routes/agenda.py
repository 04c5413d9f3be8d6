"""JSON API routes for users, schedules and agendas."""

from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from revision_tracker.core.agenda import (
    AgendaItem,
    ValidationError,
    schedule_topic,
    upcoming_items,
)
from revision_tracker.core.dates import (
    InvalidDateError,
    calculate_revision_dates,
    format_date,
    to_iso_string,
)
from revision_tracker.core.users import get_user_ids
from revision_tracker.server.dependencies import ConfigDep, StorageDep, UserDep

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["agenda"])


class TopicRequest(BaseModel):
    """Request body for scheduling a topic."""

    model_config = ConfigDict(populate_by_name=True)

    topic: str = ""
    start_date: str = Field(default="", alias="startDate")


def _item_payload(item: AgendaItem) -> dict[str, Any]:
    return {**item.to_dict(), "formatted": format_date(item.date)}


@router.get("/users")
async def list_users() -> dict[str, Any]:
    users = get_user_ids()
    return {"users": users, "count": len(users)}


@router.get("/schedule")
async def preview_schedule(start: str) -> dict[str, Any]:
    """Preview the revision dates for a start date without storing anything."""
    try:
        dates = calculate_revision_dates(start)
    except InvalidDateError as e:
        raise HTTPException(status_code=400, detail="Invalid date selected") from e

    return {
        "start": start,
        "dates": [{"date": to_iso_string(d), "formatted": format_date(d)} for d in dates],
    }


@router.get("/users/{user_id}/agenda")
async def get_agenda(
    user_id: UserDep,
    storage: StorageDep,
    include_past: Annotated[bool, Query(alias="all")] = False,
) -> dict[str, Any]:
    """Return a user's upcoming revisions, earliest first."""
    stored = await storage.get_data(user_id)
    items = sorted(stored, key=lambda i: i.date) if include_past else upcoming_items(stored)
    return {
        "user_id": user_id,
        "items": [_item_payload(item) for item in items],
        "count": len(items),
    }


@router.post("/users/{user_id}/topics", status_code=201, response_model=None)
async def add_topic(
    user_id: UserDep,
    body: TopicRequest,
    storage: StorageDep,
    config: ConfigDep,
) -> dict[str, Any] | JSONResponse:
    """Validate a topic, compute its schedule and store it."""
    try:
        items = schedule_topic(body.topic, body.start_date, max_past_years=config.max_past_years)
    except ValidationError as e:
        return JSONResponse(
            status_code=422,
            content={"errors": [{"field": err.field, "message": err.message} for err in e.errors]},
        )

    await storage.add_data(user_id, items)
    logger.info("Scheduled %d revisions for user %s", len(items), user_id)
    return {
        "user_id": user_id,
        "items": [_item_payload(item) for item in items],
        "count": len(items),
    }


@router.delete("/users/{user_id}/agenda")
async def clear_agenda(user_id: UserDep, storage: StorageDep) -> dict[str, Any]:
    removed = await storage.clear_data(user_id)
    return {"user_id": user_id, "removed": removed}
