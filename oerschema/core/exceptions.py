"""
Custom exceptions for the OER Schema service.
Every error carries a stable error code, a message and an HTTP status.
"""

from typing import Any


class OERSchemaException(Exception):
    """Base exception for all OER Schema errors."""

    def __init__(
        self,
        error: str,
        message: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        self.error = error
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to response dictionary."""
        response = {
            "error": self.error,
            "message": self.message,
        }
        if self.details:
            response["details"] = self.details
        return response


class ValidationException(OERSchemaException):
    """400 - Malformed request or invalid argument."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            error="validation_failed",
            message=message,
            status_code=400,
            details=details,
        )


class EntityNotFoundException(OERSchemaException):
    """404 - Class or property not present in the vocabulary."""

    def __init__(self, entity_type: str, name: str):
        self.entity_type = entity_type
        self.name = name
        super().__init__(
            error="not_found",
            message=f"{entity_type.capitalize()} '{name}' not found",
            status_code=404,
            details={"entityType": entity_type, "name": name},
        )


class VocabularyLoadException(OERSchemaException):
    """500 - Vocabulary definition could not be loaded."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            error="vocabulary_error",
            message=message,
            status_code=500,
            details=details,
        )


class StorageException(OERSchemaException):
    """500 - Storage backend error."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            error="storage_error",
            message=message,
            status_code=500,
            details=details,
        )
