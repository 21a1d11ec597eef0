"""
Response utilities for the OER Schema service.
Provides standardized response formatting.
"""

from typing import Any

from fastapi.responses import JSONResponse, Response

from oerschema.services.vocabulary_service import RenderedDocument


def create_error_response(
    error: str,
    message: str,
    status_code: int,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    """
    Create a standardized error response.

    Args:
        error: Error code string
        message: Human-readable error message
        status_code: HTTP status code
        details: Optional additional error details

    Returns:
        JSONResponse with error payload
    """
    content = {
        "error": error,
        "message": message,
    }
    if details:
        content["details"] = details

    return JSONResponse(status_code=status_code, content=content)


def create_document_response(document: RenderedDocument) -> Response:
    """
    Wrap a rendered vocabulary document.

    The body is sent as-is with the converter's content type. Responses vary
    on Accept since the same URL serves every format.
    """
    return Response(
        content=document.content,
        media_type=document.content_type,
        headers={"Vary": "Accept"},
    )
