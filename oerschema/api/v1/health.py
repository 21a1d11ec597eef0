"""
Health and metrics endpoints.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from oerschema.core.exceptions import VocabularyLoadException
from oerschema.services.metrics import get_metrics_collector
from oerschema.services.vocabulary_loader import get_vocabulary

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Service health check endpoint.

    Returns:
        {"status": "ok", "vocabulary": {...}} when the vocabulary is loaded
        {"status": "degraded", "issues": [...]} when it cannot be loaded
    """
    try:
        vocabulary = get_vocabulary()
    except VocabularyLoadException as e:
        return {
            "status": "degraded",
            "issues": [f"Vocabulary: {e.message}"],
        }

    return {
        "status": "ok",
        "vocabulary": {
            "version": vocabulary.version,
            "classes": len(vocabulary.classes),
            "properties": len(vocabulary.properties),
        },
    }


@router.get("/metrics")
async def metrics():
    """
    Metrics as JSON: request counts, response times, error rates and
    documents rendered per scope and format.
    """
    return get_metrics_collector().get_metrics()


@router.get("/metrics/prometheus", response_class=PlainTextResponse)
async def metrics_prometheus():
    """
    Prometheus text exposition format endpoint.
    Compatible with Prometheus scraping.
    """
    return PlainTextResponse(
        content=get_metrics_collector().to_prometheus(),
        media_type="text/plain; version=0.0.4; charset=utf-8",
    )
