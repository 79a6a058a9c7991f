from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from ..domain.entities import RegistrySnapshot
from ..domain.ports import DogRegistryPort, UseCaseError
from ..domain.registry import DogRegistry
from ..usecases.add_dog import AddDog
from ..usecases.remove_dog import RemoveDog
from ..usecases.search_dogs import SearchDogs
from ..usecases.toggle_favorite import ToggleFavorite
from .list_format import counts_label, empty_list_label

DogRow = Tuple[str, bool]  # (name, is_favorite)


class DogListVM:
    """Holds the dog list screen state and commands. No widgets, no I/O.

    Responsibilities
    - Track the text field, the active search query and the error line
    - Run add/search/favorite/delete through the use cases
    - Push rows, counters and error text to the view via callbacks after
      every state change

    The text field and the active query are separate: typing only edits
    ``name_input``; the query changes when the user triggers a search.
    """

    def __init__(
        self,
        *,
        registry: Optional[DogRegistryPort] = None,
        on_list_changed: Optional[Callable[[List[DogRow]], None]] = None,
        on_counts_changed: Optional[Callable[[int, int], None]] = None,
        on_error_changed: Optional[Callable[[str], None]] = None,
        on_input_changed: Optional[Callable[[str], None]] = None,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self.registry: DogRegistryPort = registry if registry is not None else DogRegistry()
        self.on_list_changed = on_list_changed
        self.on_counts_changed = on_counts_changed
        self.on_error_changed = on_error_changed
        self.on_input_changed = on_input_changed

        self._add = AddDog(self.registry)
        self._remove = RemoveDog(self.registry)
        self._toggle = ToggleFavorite(self.registry)
        self._search = SearchDogs(self.registry)

        self.name_input: str = ""
        self.error_message: str = ""
        self.last_snapshot: RegistrySnapshot = self.registry.snapshot()

    # ---- Input field (called by View) ----
    def set_name_input(self, text: Optional[str]) -> None:
        self.name_input = text or ""
        self._set_error("")

    @property
    def can_submit(self) -> bool:
        """Search and add are only enabled for a non-blank input."""
        return bool(self.name_input.strip())

    # ---- Commands surfaced to View ----
    def cmd_add(self) -> bool:
        """Add the typed name, trimmed. Returns True when the dog was registered.

        Rows hand back the stored name, so the trimmed text is the key used by
        later favorite and delete commands.
        """
        if not self.can_submit:
            return False
        try:
            snapshot = self._add(self.name_input.strip())
        except UseCaseError as exc:
            self._log.info("Add rejected (%s): %s", exc.code, exc.message)
            self._set_error(exc.message)
            return False
        self.name_input = ""
        if self.on_input_changed:
            self.on_input_changed(self.name_input)
        self._set_error("")
        self._publish(snapshot)
        return True

    def cmd_search(self) -> None:
        if not self.can_submit:
            return
        self._log.debug("Search query set to %r", self.name_input)
        self._publish(self._search(self.name_input))

    def cmd_clear_search(self) -> None:
        self._publish(self._search(""))

    def cmd_toggle_favorite(self, name: str) -> None:
        self._log.debug("Toggle favorite %r", name)
        self._publish(self._toggle(name))

    def cmd_delete(self, name: str) -> None:
        self._log.debug("Delete %r", name)
        self._publish(self._remove(name))

    def refresh(self) -> None:
        """Push the current state to the view (initial render)."""
        self._publish(self.registry.snapshot())

    # ---- Derived state ----
    @property
    def search_query(self) -> str:
        return self.last_snapshot.query

    @property
    def total_count(self) -> int:
        return self.registry.total_count()

    @property
    def favorite_count(self) -> int:
        return self.registry.favorite_count()

    def rows(self) -> List[DogRow]:
        return [(dog.name, dog.is_favorite) for dog in self.registry.visible_list()]

    def counts_label(self) -> str:
        return counts_label(self.total_count, self.favorite_count)

    def empty_label(self) -> str:
        return empty_list_label(self.search_query)

    # ---- Helpers ----
    def _set_error(self, message: str) -> None:
        if message == self.error_message:
            return
        self.error_message = message
        if self.on_error_changed:
            self.on_error_changed(message)

    def _publish(self, snapshot: RegistrySnapshot) -> None:
        self.last_snapshot = snapshot
        if self.on_list_changed:
            self.on_list_changed(self.rows())
        if self.on_counts_changed:
            self.on_counts_changed(self.total_count, self.favorite_count)
