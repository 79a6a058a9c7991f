from __future__ import annotations

from typing import Dict, Iterator, List, Optional

from .entities import Dog, RegistrySnapshot, name_key, normalize_name
from .errors import DuplicateNameError


class DogRegistry:
    """
    In-memory owner of all dogs for one session.

    Dogs are stored by lower-cased name so duplicate checks are constant time.
    The mapping keeps insertion order, which is the order used inside each
    favorite group of :meth:`visible_list`. Counts and the visible list are
    always derived from the stored dogs; nothing is tracked incrementally.
    """

    def __init__(self) -> None:
        self._dogs: Dict[str, Dog] = {}
        self._query: str = ""

    # ------------------------------------------------------------------ #
    # Mutations
    # ------------------------------------------------------------------ #
    def add(self, name: str) -> RegistrySnapshot:
        """Register a new, non-favorite dog.

        Raises:
            EmptyNameError: ``name`` is empty or whitespace only.
            DuplicateNameError: a dog with the same name ignoring case exists.
        """
        clean = normalize_name(name)
        key = name_key(clean)
        if key in self._dogs:
            raise DuplicateNameError(clean)
        self._dogs[key] = Dog(name=clean)
        return self.snapshot()

    def remove(self, name: str) -> RegistrySnapshot:
        """Remove the dog stored under exactly ``name``; no-op when absent."""
        dog = self._lookup_exact(name)
        if dog is not None:
            del self._dogs[dog.key]
        return self.snapshot()

    def toggle_favorite(self, name: str) -> RegistrySnapshot:
        """Flip the favorite flag of the dog stored under exactly ``name``."""
        dog = self._lookup_exact(name)
        if dog is not None:
            self._dogs[dog.key] = dog.with_favorite_toggled()
        return self.snapshot()

    def set_search_query(self, query: Optional[str]) -> None:
        self._query = query or ""

    # ------------------------------------------------------------------ #
    # Derived values
    # ------------------------------------------------------------------ #
    @property
    def search_query(self) -> str:
        return self._query

    def visible_list(self) -> List[Dog]:
        matching = [dog for dog in self._dogs.values() if dog.matches(self._query)]
        # sorted() is stable, so insertion order survives inside each group
        return sorted(matching, key=lambda dog: not dog.is_favorite)

    def favorite_count(self) -> int:
        return sum(1 for dog in self._dogs.values() if dog.is_favorite)

    def total_count(self) -> int:
        return len(self._dogs)

    def snapshot(self) -> RegistrySnapshot:
        return RegistrySnapshot(
            dogs=tuple(self._dogs.values()),
            query=self._query,
            visible=tuple(self.visible_list()),
        )

    # ------------------------------------------------------------------ #
    # Lookup helpers
    # ------------------------------------------------------------------ #
    def get(self, name: str) -> Optional[Dog]:
        """Case-insensitive lookup."""
        if not isinstance(name, str):
            return None
        return self._dogs.get(name_key(name))

    def _lookup_exact(self, name: str) -> Optional[Dog]:
        dog = self.get(name)
        if dog is None or dog.name != name:
            return None
        return dog

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def __iter__(self) -> Iterator[Dog]:
        return iter(list(self._dogs.values()))

    def __len__(self) -> int:
        return len(self._dogs)
