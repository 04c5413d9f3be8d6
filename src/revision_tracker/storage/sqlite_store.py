"""SQLite agenda storage via aiosqlite."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import aiosqlite

from revision_tracker.core.agenda import AgendaItem
from revision_tracker.core.dates import parse_iso_datetime, to_iso_string
from revision_tracker.storage.base import AgendaStorage
from revision_tracker.utils.timeutils import utcnow

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS agenda_items (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id TEXT NOT NULL,
    topic TEXT NOT NULL,
    date TEXT NOT NULL,
    start_date TEXT NOT NULL,
    created_at TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_agenda_items_user ON agenda_items(user_id);
"""


class SQLiteStorage(AgendaStorage):
    """SQLite-backed agenda storage.

    Usage:
        storage = SQLiteStorage(db_path="agenda.db")
        await storage.initialize()
        await storage.add_data("1", items)
        await storage.close()
    """

    def __init__(self, db_path: str | Path) -> None:
        self._db_path = Path(db_path)
        self._conn: aiosqlite.Connection | None = None

    def _ensure_conn(self) -> aiosqlite.Connection:
        if self._conn is None:
            raise RuntimeError("SQLite storage not initialized. Call initialize() first.")
        return self._conn

    async def initialize(self) -> None:
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._conn = await aiosqlite.connect(self._db_path)
        await self._conn.executescript(SCHEMA)
        await self._conn.commit()
        logger.debug("SQLite agenda storage opened: %s", self._db_path)

    async def close(self) -> None:
        if self._conn is not None:
            await self._conn.close()
            self._conn = None

    async def get_data(self, user_id: str) -> list[AgendaItem]:
        conn = self._ensure_conn()
        async with conn.execute(
            "SELECT topic, date, start_date FROM agenda_items WHERE user_id = ? ORDER BY id",
            (user_id,),
        ) as cursor:
            rows = await cursor.fetchall()
        return [
            AgendaItem(topic=topic, date=parse_iso_datetime(date), start_date=start_date)
            for topic, date, start_date in rows
        ]

    async def add_data(self, user_id: str, items: Sequence[AgendaItem]) -> int:
        conn = self._ensure_conn()
        created_at = to_iso_string(utcnow())
        await conn.executemany(
            """INSERT INTO agenda_items (user_id, topic, date, start_date, created_at)
               VALUES (?, ?, ?, ?, ?)""",
            [
                (user_id, item.topic, to_iso_string(item.date), item.start_date, created_at)
                for item in items
            ],
        )
        await conn.commit()
        return len(items)

    async def clear_data(self, user_id: str) -> int:
        conn = self._ensure_conn()
        cursor = await conn.execute("DELETE FROM agenda_items WHERE user_id = ?", (user_id,))
        await conn.commit()
        return cursor.rowcount
