"""
Vocabulary loading.

Reads the YAML vocabulary definition once and validates it into the
immutable Vocabulary model.
"""

import logging
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import ValidationError

from oerschema.config import get_settings
from oerschema.core.exceptions import VocabularyLoadException
from oerschema.models.vocabulary import Vocabulary

logger = logging.getLogger(__name__)

BUNDLED_VOCABULARY_PATH = Path(__file__).resolve().parent.parent / "data" / "oerschema.yml"


def parse_vocabulary(text: str, source: str = "<string>") -> Vocabulary:
    """
    Parse a YAML (or JSON) vocabulary definition.

    Args:
        text: Document with top-level version, classes and properties
        source: Name used in error details

    Returns:
        Validated Vocabulary

    Raises:
        VocabularyLoadException: If the document is not valid YAML or does
            not match the vocabulary model
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise VocabularyLoadException(
            message=f"Invalid vocabulary YAML: {e}",
            details={"source": source},
        )

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise VocabularyLoadException(
            message="Vocabulary document must be a mapping",
            details={"source": source},
        )

    try:
        return Vocabulary.model_validate(data)
    except ValidationError as e:
        errors = e.errors(include_url=False, include_context=False, include_input=False)
        raise VocabularyLoadException(
            message="Vocabulary does not match the expected structure",
            details={"source": source, "errors": errors},
        )


def load_vocabulary(path: str | Path | None = None) -> Vocabulary:
    """
    Load the vocabulary from a file.

    Args:
        path: Vocabulary file. Defaults to the bundled OER Schema definition

    Returns:
        Validated Vocabulary

    Raises:
        VocabularyLoadException: If the file cannot be read or parsed
    """
    vocabulary_path = Path(path) if path else BUNDLED_VOCABULARY_PATH

    try:
        text = vocabulary_path.read_text(encoding="utf-8")
    except OSError as e:
        raise VocabularyLoadException(
            message=f"Failed to read vocabulary: {e}",
            details={"source": str(vocabulary_path)},
        )

    vocabulary = parse_vocabulary(text, source=str(vocabulary_path))
    logger.info(
        f"Loaded vocabulary {vocabulary.version or '(unversioned)'} from {vocabulary_path}: "
        f"{len(vocabulary.classes)} classes, {len(vocabulary.properties)} properties"
    )
    return vocabulary


@lru_cache
def get_vocabulary() -> Vocabulary:
    """
    Get the process-wide vocabulary.
    Loaded on first use from VOCABULARY_PATH and cached for the process lifetime.
    """
    return load_vocabulary(get_settings().VOCABULARY_PATH)
