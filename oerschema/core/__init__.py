"""Core utilities and exceptions for the OER Schema service."""

from oerschema.core.exceptions import (
    OERSchemaException,
    EntityNotFoundException,
    ValidationException,
    VocabularyLoadException,
    StorageException,
)

__all__ = [
    "OERSchemaException",
    "EntityNotFoundException",
    "ValidationException",
    "VocabularyLoadException",
    "StorageException",
]
