"""
Vocabulary endpoints.

Every term endpoint is content negotiated: the ``format`` query parameter
selects the output format, falling back to the Accept header and then JSON.
"""

from fastapi import APIRouter, Request
from fastapi.responses import Response

from oerschema.converters import EntityScope
from oerschema.core.responses import create_document_response
from oerschema.dependencies import Options, RequestedFormat, Service
from oerschema.schemas.error import ErrorResponse
from oerschema.schemas.vocabulary import EntityIndexResponse
from oerschema.services.metrics import get_metrics_collector
from oerschema.services.vocabulary_service import RenderedDocument

router = APIRouter()

NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse, "description": "Term not found"}}


def _respond(scope: EntityScope, document: RenderedDocument) -> Response:
    get_metrics_collector().record_conversion(scope.value, document.format.value)
    return create_document_response(document)


@router.get("")
async def get_vocabulary_document(
    service: Service,
    requested_format: RequestedFormat,
    options: Options,
):
    """
    The whole vocabulary.

    Supports json, jsonld, xml, turtle and ntriples; any other format
    returns JSON.
    """
    document = service.render_vocabulary(requested_format, options)
    return _respond(EntityScope.VOCABULARY, document)


@router.get("/class", response_model=EntityIndexResponse)
async def list_classes(request: Request, service: Service):
    """Index of all classes in declaration order."""
    items = service.class_index(request.url.path.rstrip("/"))
    return {"items": items, "total": len(items)}


@router.get("/class/{name}", responses=NOT_FOUND_RESPONSE)
async def get_class(
    name: str,
    service: Service,
    requested_format: RequestedFormat,
    options: Options,
):
    """
    One class in the negotiated format.

    Raises 404 if the class does not exist.
    """
    document = service.render_class(name, requested_format, options)
    return _respond(EntityScope.CLASS, document)


@router.get("/property", response_model=EntityIndexResponse)
async def list_properties(request: Request, service: Service):
    """Index of all properties in declaration order."""
    items = service.property_index(request.url.path.rstrip("/"))
    return {"items": items, "total": len(items)}


@router.get("/property/{name}", responses=NOT_FOUND_RESPONSE)
async def get_property(
    name: str,
    service: Service,
    requested_format: RequestedFormat,
    options: Options,
):
    """
    One property in the negotiated format.

    Raises 404 if the property does not exist.
    """
    document = service.render_property(name, requested_format, options)
    return _respond(EntityScope.PROPERTY, document)
