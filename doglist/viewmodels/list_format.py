"""Row and counter labeling helpers for view models.

Call context:
    ``DogListVM`` and the web projection call these helpers so the Tkinter
    and NiceGUI screens show identical labels.
"""

from __future__ import annotations

FAVORITE_MARK = "★"
NOT_FAVORITE_MARK = "☆"


def favorite_mark(is_favorite: bool) -> str:
    """Star shown next to a dog row."""
    return FAVORITE_MARK if is_favorite else NOT_FAVORITE_MARK


def favorite_action_label(is_favorite: bool) -> str:
    return "Unfavorite" if is_favorite else "Favorite"


def counts_label(total: int, favorites: int) -> str:
    """Summary line rendered above the list."""
    return f"Dogs: {int(total)}   {FAVORITE_MARK}: {int(favorites)}"


def empty_list_label(query: str) -> str:
    text = (query or "").strip()
    if text:
        return f"No dogs match '{text}'."
    return "No dogs yet."


__all__ = [
    "FAVORITE_MARK",
    "NOT_FAVORITE_MARK",
    "counts_label",
    "empty_list_label",
    "favorite_action_label",
    "favorite_mark",
]
