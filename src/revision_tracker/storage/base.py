"""Abstract storage interface for agenda items."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from revision_tracker.core.agenda import AgendaItem


class AgendaStorage(ABC):
    """Per-user append-only store of agenda items.

    Items come back in the order they were added. Callers that want a
    chronological view sort with ``upcoming_items()``.
    """

    async def initialize(self) -> None:
        """Prepare the backend. No-op unless overridden."""

    async def close(self) -> None:
        """Release backend resources. No-op unless overridden."""

    @abstractmethod
    async def get_data(self, user_id: str) -> list[AgendaItem]:
        """Return every item stored for ``user_id`` (empty if none)."""
        ...

    @abstractmethod
    async def add_data(self, user_id: str, items: Sequence[AgendaItem]) -> int:
        """Append ``items`` for ``user_id`` and return how many were stored."""
        ...

    @abstractmethod
    async def clear_data(self, user_id: str) -> int:
        """Remove all items for ``user_id`` and return how many were removed."""
        ...
