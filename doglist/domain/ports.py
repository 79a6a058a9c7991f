from __future__ import annotations
from typing import List, Optional, Protocol

from .entities import Dog, RegistrySnapshot


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (Hexagonal boundaries) ----
class DogRegistryPort(Protocol):
    """Operations the use cases need from a dog registry."""

    def add(self, name: str) -> RegistrySnapshot: ...
    def remove(self, name: str) -> RegistrySnapshot: ...
    def toggle_favorite(self, name: str) -> RegistrySnapshot: ...
    def set_search_query(self, query: Optional[str]) -> None: ...
    def visible_list(self) -> List[Dog]: ...
    def favorite_count(self) -> int: ...
    def total_count(self) -> int: ...
    def snapshot(self) -> RegistrySnapshot: ...
