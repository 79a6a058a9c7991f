"""Translate registry errors into user-facing UseCaseError instances."""

from __future__ import annotations

from typing import Optional

from doglist.domain.errors import DogListError, DuplicateNameError, EmptyNameError
from doglist.domain.ports import UseCaseError


def map_registry_error(
    exc: Exception,
    *,
    default_code: str,
    default_message: Optional[str] = None,
) -> UseCaseError:
    """Map registry exceptions to stable UseCaseError codes.

    ``UseCaseError`` instances pass through unchanged. Anything that is not a
    known domain error falls back to ``default_code``.
    """
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, DuplicateNameError):
        return UseCaseError("DUPLICATE_NAME", exc.message)
    if isinstance(exc, EmptyNameError):
        return UseCaseError("EMPTY_NAME", exc.message)
    if isinstance(exc, DogListError):
        return UseCaseError("REGISTRY_ERROR", str(exc) or "Registry error.")

    message = default_message or str(exc) or "Unexpected error."
    return UseCaseError(default_code, message)


__all__ = ["map_registry_error"]
