"""HTML rendering for the agenda page."""

from __future__ import annotations

from collections.abc import Sequence
from html import escape

from revision_tracker.core.agenda import MAX_TOPIC_LENGTH, AgendaItem, FormError
from revision_tracker.core.dates import format_date

NO_TOPICS_MESSAGE = "No topics to revise yet. Add a topic below to get started!"
NO_UPCOMING_MESSAGE = "No upcoming revisions. All topics are up to date!"

_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Spaced Repetition Tracker</title>
<style>
body {{ font-family: sans-serif; max-width: 40rem; margin: 2rem auto; }}
.agenda-item {{ display: flex; gap: 1rem; padding: 0.25rem 0; }}
.agenda-date {{ font-weight: bold; min-width: 12rem; }}
.error-message {{ color: #b00020; display: block; }}
.sr-only {{ position: absolute; width: 1px; height: 1px; overflow: hidden; }}
</style>
</head>
<body>
<h1>Spaced Repetition Tracker</h1>
<form method="get" action="/">
<label for="user-select">Select user</label>
<select id="user-select" name="user_id" onchange="this.form.submit()">
<option value="">-- Choose a user --</option>
{options}
</select>
<noscript><button type="submit">Show agenda</button></noscript>
</form>
{announcement}
{sections}
</body>
</html>
"""


def _user_options(user_ids: Sequence[str], selected: str | None) -> str:
    return "\n".join(
        f'<option value="{escape(uid)}"{" selected" if uid == selected else ""}>'
        f"User {escape(uid)}</option>"
        for uid in user_ids
    )


def render_agenda(stored: Sequence[AgendaItem], upcoming: Sequence[AgendaItem]) -> str:
    """Render the agenda list, or the matching empty-state message."""
    if not stored:
        return f'<div class="no-agenda">{NO_TOPICS_MESSAGE}</div>'
    if not upcoming:
        return f'<div class="no-agenda">{NO_UPCOMING_MESSAGE}</div>'
    return "\n".join(
        '<div class="agenda-item">'
        f'<div class="agenda-date">{format_date(item.date)}</div>'
        f'<div class="agenda-topic">{escape(item.topic)}</div>'
        "</div>"
        for item in upcoming
    )


def _error_for(errors: Sequence[FormError], field: str) -> tuple[str, str]:
    messages = [e.message for e in errors if e.field == field]
    invalid = ' aria-invalid="true"' if messages else ""
    return invalid, escape(" ".join(messages))


def render_form(
    user_id: str,
    topic: str,
    start_date: str,
    errors: Sequence[FormError],
) -> str:
    topic_invalid, topic_error = _error_for(errors, "topic-name")
    date_invalid, date_error = _error_for(errors, "start-date")
    return f"""<section id="form-section">
<h2>Add a topic</h2>
<form id="add-topic-form" method="post" action="/users/{escape(user_id)}/topics/form">
<label for="topic-name">Topic name</label>
<input id="topic-name" name="topicName" type="text" maxlength="{MAX_TOPIC_LENGTH}"
 value="{escape(topic)}"{topic_invalid}>
<span id="topic-name-error" class="error-message">{topic_error}</span>
<label for="start-date">Start date</label>
<input id="start-date" name="startDate" type="date" value="{escape(start_date)}"{date_invalid}>
<span id="start-date-error" class="error-message">{date_error}</span>
<button type="submit">Add topic</button>
</form>
</section>"""


def render_page(
    user_ids: Sequence[str],
    *,
    selected_user: str | None = None,
    stored: Sequence[AgendaItem] = (),
    upcoming: Sequence[AgendaItem] = (),
    topic: str = "",
    start_date: str = "",
    errors: Sequence[FormError] = (),
    announcement: str = "",
) -> str:
    """Render the full page.

    The agenda and form sections are only shown once a user is selected.
    """
    sections = ""
    if selected_user:
        sections = (
            '<section id="agenda-section">\n<h2>Upcoming revisions</h2>\n'
            f'<div id="agenda-content">\n{render_agenda(stored, upcoming)}\n</div>\n'
            "</section>\n" + render_form(selected_user, topic, start_date, errors)
        )

    announce = ""
    if announcement:
        announce = (
            '<div class="sr-only" aria-live="polite" aria-atomic="true">'
            f"{escape(announcement)}</div>"
        )

    return _PAGE.format(
        options=_user_options(user_ids, selected_user),
        announcement=announce,
        sections=sections,
    )
