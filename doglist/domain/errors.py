"""Domain-level error types for use-case and adapter mapping.

Errors raised by :class:`doglist.domain.registry.DogRegistry` live here so the
use-case layer can translate them into user-facing ``UseCaseError`` codes
without importing registry internals.
"""

from __future__ import annotations


class DogListError(Exception):
    """Base class for registry errors."""


class DuplicateNameError(DogListError):
    """A dog with the same name (ignoring case) is already registered."""

    message = "A dog with this name already exists."

    def __init__(self, name: str) -> None:
        super().__init__(self.message)
        self.name = name


class EmptyNameError(DogListError, ValueError):
    """Dog names must contain at least one non-whitespace character."""

    message = "Dog name must not be empty."

    def __init__(self) -> None:
        super().__init__(self.message)


__all__ = ["DogListError", "DuplicateNameError", "EmptyNameError"]
