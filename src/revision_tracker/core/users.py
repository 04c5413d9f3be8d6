"""Fixed directory of known users."""

from __future__ import annotations

from revision_tracker.core.agenda import UnknownUserError

USER_IDS: tuple[str, ...] = ("1", "2", "3", "4", "5")


def get_user_ids() -> list[str]:
    """Return the ids of every user, in display order."""
    return list(USER_IDS)


def is_known_user(user_id: str) -> bool:
    return user_id in USER_IDS


def require_user(user_id: str) -> str:
    """Return ``user_id`` unchanged, or raise UnknownUserError."""
    if not is_known_user(user_id):
        raise UnknownUserError(user_id)
    return user_id
