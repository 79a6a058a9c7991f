"""Domain package exports for value objects and the dog registry."""

from .entities import Dog, RegistrySnapshot, name_key, normalize_name
from .errors import DogListError, DuplicateNameError, EmptyNameError
from .ports import DogRegistryPort, UseCaseError
from .registry import DogRegistry

__all__ = [
    "Dog",
    "DogListError",
    "DogRegistry",
    "DogRegistryPort",
    "DuplicateNameError",
    "EmptyNameError",
    "RegistrySnapshot",
    "UseCaseError",
    "name_key",
    "normalize_name",
]
