from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from ..domain.entities import RegistrySnapshot
from ..domain.ports import DogRegistryPort


@dataclass
class SearchDogs:
    """Replace the active query and return the filtered snapshot."""

    registry: DogRegistryPort

    def __call__(self, query: Optional[str]) -> RegistrySnapshot:
        self.registry.set_search_query(query)
        return self.registry.snapshot()
