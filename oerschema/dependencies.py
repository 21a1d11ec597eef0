"""
FastAPI dependency injection functions.
Provides common dependencies used across endpoints.
"""

from typing import Annotated

from fastapi import Depends, Query, Request

from oerschema.config import Settings, get_settings
from oerschema.converters import ConversionOptions
from oerschema.models.vocabulary import Vocabulary
from oerschema.services.vocabulary_loader import get_vocabulary
from oerschema.services.vocabulary_service import VocabularyService


# Type aliases for cleaner endpoint signatures
AppSettings = Annotated[Settings, Depends(get_settings)]
VocabularyDep = Annotated[Vocabulary, Depends(get_vocabulary)]


def get_vocabulary_service(vocabulary: VocabularyDep) -> VocabularyService:
    return VocabularyService(vocabulary)


def get_requested_format(
    request: Request,
    format: str | None = Query(
        default=None,
        description="Output format token (json, jsonld, schema, xml, turtle, ntriples, rdfa, microdata)",
    ),
) -> str | None:
    """
    Determine the requested output format.

    The ``format`` query parameter wins when present, otherwise the Accept
    header is negotiated. Unrecognized values fall back to JSON downstream.
    """
    if format:
        return format
    return request.headers.get("accept")


def get_conversion_options(
    request: Request,
    settings: AppSettings,
    pretty: bool | None = Query(
        default=None,
        description="Indent JSON family output. Defaults to the PRETTY_JSON setting",
    ),
) -> ConversionOptions:
    """Build conversion options from settings and the request."""
    base_url = str(request.base_url) if settings.USE_REQUEST_BASE_URL else settings.BASE_URL
    return ConversionOptions(
        base_url=base_url,
        pretty=settings.PRETTY_JSON if pretty is None else pretty,
    )


Service = Annotated[VocabularyService, Depends(get_vocabulary_service)]
RequestedFormat = Annotated[str | None, Depends(get_requested_format)]
Options = Annotated[ConversionOptions, Depends(get_conversion_options)]
