"""Shared helpers for CLI commands."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Coroutine
from typing import Any, TypeVar

import typer

from revision_tracker.config import TrackerConfig
from revision_tracker.storage.base import AgendaStorage
from revision_tracker.storage.factory import create_storage

T = TypeVar("T")


def get_config() -> TrackerConfig:
    """Get CLI configuration."""
    return TrackerConfig.load()


async def get_storage(config: TrackerConfig) -> AgendaStorage:
    """Get initialized storage for the configured backend."""
    return await create_storage(config)


def run_async(coro: Coroutine[Any, Any, T]) -> T:
    return asyncio.run(coro)


def output_result(data: dict[str, Any], as_json: bool = False) -> None:
    """Output result in appropriate format."""
    if as_json:
        typer.echo(json.dumps(data, indent=2, default=str))
    elif "error" in data:
        typer.secho(f"Error: {data['error']}", fg=typer.colors.RED, err=True)
    elif "message" in data:
        typer.secho(data["message"], fg=typer.colors.GREEN)
    else:
        typer.echo(str(data))
