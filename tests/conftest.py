"""Shared fixtures for Revision Tracker tests."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

import pytest

from revision_tracker.core import dates


@pytest.fixture
def frozen_today(monkeypatch: pytest.MonkeyPatch) -> datetime:
    """Pin the host clock to 2026-07-19 09:00 (local and UTC agree)."""
    monkeypatch.setattr(dates, "localnow", lambda: datetime(2026, 7, 19, 9, 0))
    monkeypatch.setattr(dates, "utcnow", lambda: datetime(2026, 7, 19, 9, 0, tzinfo=UTC))
    return datetime(2026, 7, 19, tzinfo=UTC)


@pytest.fixture
def data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point REVTRACK_HOME at a fresh temporary directory."""
    home = tmp_path / "revtrack"
    monkeypatch.setenv("REVTRACK_HOME", str(home))
    monkeypatch.delenv("REVTRACK_STORAGE", raising=False)
    monkeypatch.delenv("REVTRACK_LOG_LEVEL", raising=False)
    return home
