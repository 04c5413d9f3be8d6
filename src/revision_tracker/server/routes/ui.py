"""Browser-facing routes: the agenda page and its add-topic form."""

from __future__ import annotations

import logging
from typing import Annotated
from urllib.parse import urlencode

from fastapi import APIRouter, Form, HTTPException
from fastapi.responses import HTMLResponse, RedirectResponse

from revision_tracker.core.agenda import ValidationError, schedule_topic, upcoming_items
from revision_tracker.core.dates import REVISION_INTERVALS, get_today_string
from revision_tracker.core.users import get_user_ids, is_known_user
from revision_tracker.server.dependencies import ConfigDep, StorageDep, UserDep
from revision_tracker.server.pages import render_page

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ui"])


@router.get("/", response_class=HTMLResponse)
async def index(
    storage: StorageDep,
    user_id: str = "",
    added: str = "",
) -> HTMLResponse:
    """Render the page, with the selected user's upcoming agenda if any."""
    if not user_id:
        return HTMLResponse(render_page(get_user_ids()))
    if not is_known_user(user_id):
        raise HTTPException(status_code=404, detail=f"User {user_id} not found")

    stored = await storage.get_data(user_id)
    announcement = ""
    if added and any(item.topic == added for item in stored):
        count = len(REVISION_INTERVALS)
        announcement = f'Topic "{added}" added successfully with {count} revision dates.'

    return HTMLResponse(
        render_page(
            get_user_ids(),
            selected_user=user_id,
            stored=stored,
            upcoming=upcoming_items(stored),
            start_date=get_today_string(),
            announcement=announcement,
        )
    )


@router.post("/users/{user_id}/topics/form", response_model=None)
async def submit_topic_form(
    user_id: UserDep,
    storage: StorageDep,
    config: ConfigDep,
    topic_name: Annotated[str, Form(alias="topicName")] = "",
    start_date: Annotated[str, Form(alias="startDate")] = "",
) -> HTMLResponse | RedirectResponse:
    """Handle the add-topic form.

    Invalid input re-renders the page with messages; success redirects back
    to the agenda.
    """
    try:
        items = schedule_topic(topic_name, start_date, max_past_years=config.max_past_years)
    except ValidationError as e:
        stored = await storage.get_data(user_id)
        return HTMLResponse(
            render_page(
                get_user_ids(),
                selected_user=user_id,
                stored=stored,
                upcoming=upcoming_items(stored),
                topic=topic_name,
                start_date=start_date,
                errors=e.errors,
            ),
            status_code=422,
        )

    await storage.add_data(user_id, items)
    logger.info("Scheduled %d revisions for user %s", len(items), user_id)

    query = urlencode({"user_id": user_id, "added": items[0].topic})
    return RedirectResponse(url=f"/?{query}", status_code=303)
