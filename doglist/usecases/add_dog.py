from __future__ import annotations

import logging
from dataclasses import dataclass

from ..domain.entities import RegistrySnapshot
from ..domain.ports import DogRegistryPort
from .error_mapping import map_registry_error

log = logging.getLogger(__name__)


@dataclass
class AddDog:
    """Register a new dog; duplicate or blank names surface as ``UseCaseError``."""

    registry: DogRegistryPort

    def __call__(self, name: str) -> RegistrySnapshot:
        try:
            snapshot = self.registry.add(name)
        except Exception as exc:
            raise map_registry_error(exc, default_code="ADD_FAILED") from exc
        log.debug("Added dog %r (total=%d)", name, snapshot.total_count)
        return snapshot
