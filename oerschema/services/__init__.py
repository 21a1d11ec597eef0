"""
Business logic services for the OER Schema service.
Services handle loading, lookup and publishing separate from API endpoints.
"""

from oerschema.services.static_generator import StaticSiteGenerator
from oerschema.services.vocabulary_loader import get_vocabulary, load_vocabulary, parse_vocabulary
from oerschema.services.vocabulary_service import RenderedDocument, VocabularyService

__all__ = [
    "RenderedDocument",
    "StaticSiteGenerator",
    "VocabularyService",
    "get_vocabulary",
    "load_vocabulary",
    "parse_vocabulary",
]
