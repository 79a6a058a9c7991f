from __future__ import annotations

"""Domain value objects shared across use-cases and view models."""

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .errors import EmptyNameError


def normalize_name(name: Optional[str]) -> str:
    """Return ``name`` unchanged; raise ``EmptyNameError`` when it is blank."""
    if not isinstance(name, str) or not name.strip():
        raise EmptyNameError()
    return name


def name_key(name: str) -> str:
    """Case-insensitive registry key for ``name``."""
    return name.lower()


@dataclass(frozen=True)
class Dog:
    """One registered dog. ``name`` is the unique key inside a registry."""

    name: str
    """Display name exactly as entered; also the identity key for lookups."""

    is_favorite: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise EmptyNameError()

    @property
    def key(self) -> str:
        return name_key(self.name)

    def matches(self, query: str) -> bool:
        """True when ``query`` is a case-insensitive substring of the name."""
        if not query:
            return True
        return name_key(query) in self.key

    def with_favorite_toggled(self) -> "Dog":
        return replace(self, is_favorite=not self.is_favorite)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class RegistrySnapshot:
    """Immutable view of registry state returned by every mutating operation."""

    dogs: Tuple[Dog, ...] = ()
    """All dogs in insertion order."""

    query: str = ""
    """Active search query used to build ``visible``."""

    visible: Tuple[Dog, ...] = ()
    """Dogs matching ``query``, favorites first."""

    @property
    def total_count(self) -> int:
        return len(self.dogs)

    @property
    def favorite_count(self) -> int:
        return sum(1 for dog in self.dogs if dog.is_favorite)

    def names(self) -> Tuple[str, ...]:
        return tuple(dog.name for dog in self.visible)


__all__ = ["Dog", "RegistrySnapshot", "name_key", "normalize_name"]
