"""In-memory agenda storage, used for tests and throwaway sessions."""

from __future__ import annotations

from collections.abc import Sequence

from revision_tracker.core.agenda import AgendaItem
from revision_tracker.storage.base import AgendaStorage


class InMemoryStorage(AgendaStorage):
    """Agenda storage backed by a dict of lists. Contents are lost on exit."""

    def __init__(self) -> None:
        self._items: dict[str, list[AgendaItem]] = {}

    async def get_data(self, user_id: str) -> list[AgendaItem]:
        return list(self._items.get(user_id, []))

    async def add_data(self, user_id: str, items: Sequence[AgendaItem]) -> int:
        self._items.setdefault(user_id, []).extend(items)
        return len(items)

    async def clear_data(self, user_id: str) -> int:
        return len(self._items.pop(user_id, []))
