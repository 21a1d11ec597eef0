"""Pydantic request/response schemas."""

from oerschema.schemas.error import ErrorResponse
from oerschema.schemas.vocabulary import EntityIndexResponse, EntitySummary

__all__ = [
    "ErrorResponse",
    "EntityIndexResponse",
    "EntitySummary",
]
