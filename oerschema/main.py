"""
OER Schema - Main Application Entry Point.

Serves the OER Schema vocabulary in JSON, JSON-LD, JSON Schema, RDF/XML,
Turtle, N-Triples, RDFa and Microdata with content negotiation.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from oerschema import __version__
from oerschema.api.v1.router import api_router
from oerschema.config import get_settings
from oerschema.core.exceptions import OERSchemaException
from oerschema.core.responses import create_error_response
from oerschema.services.metrics import MetricsMiddleware
from oerschema.services.vocabulary_loader import get_vocabulary

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.
    Loads the vocabulary before the first request is served.
    """
    logger.info(f"Starting {settings.PROJECT_NAME}")
    logger.info(f"Debug mode: {settings.DEBUG}")
    if settings.USE_REQUEST_BASE_URL:
        logger.info("Base URL: taken from each request")
    else:
        logger.info(f"Base URL: {settings.BASE_URL}")

    # Fail fast on a broken vocabulary file
    get_vocabulary()

    yield

    logger.info(f"Shutting down {settings.PROJECT_NAME}")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="""
## OER Schema

Vocabulary for describing open educational resources, modeled after
schema.org.

### Formats
Select with the `format` query parameter or the `Accept` header:
- JSON (`json`, default)
- JSON-LD (`jsonld`)
- JSON Schema (`schema`, classes and properties only)
- RDF/XML (`xml`)
- Turtle (`turtle`)
- N-Triples (`ntriples`)
- RDFa and Microdata HTML fragments (`rdfa`, `microdata`, classes and properties only)
    """,
    version=__version__,
    openapi_tags=[
        {"name": "schema", "description": "Vocabulary terms in every supported format"},
        {"name": "health", "description": "Service health checks and metrics"},
    ],
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "HEAD", "OPTIONS"],
    allow_headers=["*"],
)

app.add_middleware(MetricsMiddleware)


@app.exception_handler(OERSchemaException)
async def oerschema_exception_handler(request: Request, exc: OERSchemaException) -> JSONResponse:
    """Returns standardized error responses for service exceptions."""
    if exc.status_code >= 500:
        logger.error(f"{exc.error}: {exc.message}")
    return create_error_response(
        error=exc.error,
        message=exc.message,
        status_code=exc.status_code,
        details=exc.details,
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Catch-all exception handler for unexpected errors.
    Logs the full error but returns a sanitized response.
    """
    logger.exception(f"Unexpected error: {exc}")
    return create_error_response(
        error="internal_error",
        message="An unexpected error occurred",
        status_code=500,
    )


app.include_router(api_router, prefix=settings.API_V1_PREFIX)


@app.get("/", include_in_schema=False)
async def root():
    """Service information."""
    return {
        "name": settings.PROJECT_NAME,
        "version": __version__,
        "docs": "/docs",
        "openapi": "/openapi.json",
        "api": settings.API_V1_PREFIX,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "oerschema.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
