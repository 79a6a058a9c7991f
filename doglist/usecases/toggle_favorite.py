from __future__ import annotations
from dataclasses import dataclass

from ..domain.entities import RegistrySnapshot
from ..domain.ports import DogRegistryPort
from .error_mapping import map_registry_error


@dataclass
class ToggleFavorite:
    registry: DogRegistryPort

    def __call__(self, name: str) -> RegistrySnapshot:
        try:
            return self.registry.toggle_favorite(name)
        except Exception as exc:
            raise map_registry_error(exc, default_code="FAVORITE_FAILED") from exc
