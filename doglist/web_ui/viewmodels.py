"""Thin web-facing projections for NiceGUI bindings.

These helpers translate ``DogListVM`` state into values the NiceGUI page
renders (icons, colors, tooltips) without adding registry logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from doglist.viewmodels.dog_list_vm import DogListVM
from doglist.viewmodels.list_format import favorite_action_label


@dataclass(frozen=True)
class WebDogRow:
    """One rendered list row."""

    name: str
    is_favorite: bool
    favorite_icon: str
    favorite_color: str
    favorite_tooltip: str


def web_row(name: str, is_favorite: bool) -> WebDogRow:
    return WebDogRow(
        name=name,
        is_favorite=bool(is_favorite),
        favorite_icon="favorite" if is_favorite else "favorite_border",
        favorite_color="red" if is_favorite else "grey",
        favorite_tooltip=favorite_action_label(is_favorite),
    )


def web_rows(vm: DogListVM) -> List[WebDogRow]:
    """Rows in display order (favorites first)."""
    return [web_row(name, fav) for name, fav in vm.rows()]


@dataclass(frozen=True)
class WebCounters:
    total: int
    favorites: int

    @property
    def total_text(self) -> str:
        return f": {self.total}"

    @property
    def favorites_text(self) -> str:
        return f": {self.favorites}"


def web_counters(vm: DogListVM) -> WebCounters:
    return WebCounters(total=vm.total_count, favorites=vm.favorite_count)


__all__ = ["WebCounters", "WebDogRow", "web_counters", "web_row", "web_rows"]
