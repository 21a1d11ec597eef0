"""
Vocabulary models for the OER Schema service.
"""

from oerschema.models.vocabulary import Vocabulary, VocabularyClass, VocabularyProperty

__all__ = [
    "Vocabulary",
    "VocabularyClass",
    "VocabularyProperty",
]
