"""Revision Tracker CLI main entry point."""

from __future__ import annotations

from typing import Annotated, Optional

import typer

from revision_tracker.cli._helpers import get_config, get_storage, output_result, run_async
from revision_tracker.config import TrackerConfig, configure_logging
from revision_tracker.core.agenda import (
    UnknownUserError,
    ValidationError,
    schedule_topic,
    upcoming_items,
)
from revision_tracker.core.dates import (
    InvalidDateError,
    calculate_revision_dates,
    format_date,
    get_today_string,
    to_iso_string,
)
from revision_tracker.core.users import get_user_ids, require_user

app = typer.Typer(
    name="revtrack",
    help="Revision Tracker - fixed-interval spaced repetition scheduling",
    no_args_is_help=True,
)

INTERVAL_LABELS = ("1 week", "1 month", "3 months", "6 months", "1 year")


@app.callback()
def main(
    log_level: Annotated[
        Optional[str], typer.Option("--log-level", help="Override the configured log level")
    ] = None,
) -> None:
    configure_logging(log_level or get_config().log_level)


def _require_user(user_id: str) -> None:
    try:
        require_user(user_id)
    except UnknownUserError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        typer.echo(f"Known users: {', '.join(get_user_ids())}")
        raise typer.Exit(1)


@app.command()
def users(
    json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
) -> None:
    """List the available users."""
    user_ids = get_user_ids()
    if json_output:
        output_result({"users": user_ids, "count": len(user_ids)}, True)
        return
    for uid in user_ids:
        typer.echo(f"User {uid}")


@app.command()
def schedule(
    start: Annotated[str, typer.Argument(help="Start date (YYYY-MM-DD)")],
    json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
) -> None:
    """Preview the revision dates for a start date.

    Examples:
        revtrack schedule 2026-07-19
    """
    try:
        dates = calculate_revision_dates(start)
    except InvalidDateError:
        output_result({"error": f"Invalid date selected: {start}"})
        raise typer.Exit(1)

    if json_output:
        output_result(
            {"start": start, "dates": [to_iso_string(d) for d in dates]},
            True,
        )
        return

    for label, date in zip(INTERVAL_LABELS, dates):
        typer.echo(f"  {label:<9} {format_date(date)}")


@app.command()
def add(
    user_id: Annotated[str, typer.Argument(help="User id")],
    topic: Annotated[str, typer.Argument(help="Topic name (max 100 characters)")],
    start: Annotated[
        Optional[str], typer.Option("--start", "-s", help="Start date, defaults to today (UTC)")
    ] = None,
) -> None:
    """Schedule revisions for a topic.

    Examples:
        revtrack add 1 "Functions in JS" --start 2026-07-19
    """
    _require_user(user_id)
    config = get_config()
    start_date = start or get_today_string()

    try:
        items = schedule_topic(topic, start_date, max_past_years=config.max_past_years)
    except ValidationError as e:
        for err in e.errors:
            typer.secho(f"Error: {err.message}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    async def _add() -> None:
        storage = await get_storage(config)
        try:
            await storage.add_data(user_id, items)
        finally:
            await storage.close()

    run_async(_add())
    message = f'Topic "{items[0].topic}" added successfully with {len(items)} revision dates.'
    output_result({"message": message})


@app.command()
def agenda(
    user_id: Annotated[str, typer.Argument(help="User id")],
    show_all: Annotated[
        bool, typer.Option("--all", "-a", help="Include revisions already in the past")
    ] = False,
    json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
) -> None:
    """Show a user's upcoming revisions, earliest first."""
    _require_user(user_id)
    config = get_config()

    async def _agenda() -> list:
        storage = await get_storage(config)
        try:
            return await storage.get_data(user_id)
        finally:
            await storage.close()

    stored = run_async(_agenda())
    items = sorted(stored, key=lambda i: i.date) if show_all else upcoming_items(stored)

    if json_output:
        output_result(
            {"user_id": user_id, "items": [i.to_dict() for i in items], "count": len(items)},
            True,
        )
        return

    if not stored:
        typer.echo("No topics to revise yet. Add a topic to get started!")
        return
    if not items:
        typer.echo("No upcoming revisions. All topics are up to date!")
        return

    for item in items:
        typer.secho(f"  {format_date(item.date):<20}", fg=typer.colors.CYAN, nl=False)
        typer.echo(item.topic)


@app.command()
def clear(
    user_id: Annotated[str, typer.Argument(help="User id")],
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
) -> None:
    """Remove every stored revision for a user."""
    _require_user(user_id)
    if not yes:
        typer.confirm(f"Delete all revisions for user {user_id}?", abort=True)
    config = get_config()

    async def _clear() -> int:
        storage = await get_storage(config)
        try:
            return await storage.clear_data(user_id)
        finally:
            await storage.close()

    removed = run_async(_clear())
    output_result({"message": f"Removed {removed} revisions for user {user_id}"})


@app.command()
def init(
    force: Annotated[bool, typer.Option("--force", "-f", help="Overwrite existing config")] = False,
) -> None:
    """Write a default config.toml into the data directory."""
    config = TrackerConfig()
    if config.config_path.exists() and not force:
        typer.secho(f"Config already exists: {config.config_path}", fg=typer.colors.YELLOW)
        return
    path = config.save()
    output_result({"message": f"Config written to {path}"})


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option("--host", help="Bind address")] = None,
    port: Annotated[Optional[int], typer.Option("--port", "-p", help="Bind port")] = None,
) -> None:
    """Run the web interface."""
    import uvicorn

    from revision_tracker.server.app import create_app

    config = get_config()
    uvicorn.run(
        create_app(config),
        host=host or config.host,
        port=port or config.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    app()
