"""
Plain JSON dump of vocabulary entities, the default response format.
"""

from typing import Any

from oerschema.converters.options import ConversionOptions, dump_json
from oerschema.models.vocabulary import Vocabulary, VocabularyClass, VocabularyProperty


def _fields(entity: VocabularyClass | VocabularyProperty) -> dict[str, Any]:
    return entity.model_dump(by_alias=True, exclude_none=True, exclude={"name"})


def vocabulary_to_json(vocabulary: Vocabulary, options: ConversionOptions) -> str:
    data = {
        "version": vocabulary.version,
        "classes": {name: _fields(cls) for name, cls in vocabulary.classes.items()},
        "properties": {name: _fields(prop) for name, prop in vocabulary.properties.items()},
    }
    return dump_json(data, options)


def class_to_json(
    name: str,
    class_data: VocabularyClass,
    options: ConversionOptions,
    vocabulary: Vocabulary | None = None,
) -> str:
    return dump_json({"className": name, **_fields(class_data)}, options)


def property_to_json(
    name: str,
    property_data: VocabularyProperty,
    options: ConversionOptions,
    vocabulary: Vocabulary | None = None,
) -> str:
    return dump_json({"propertyName": name, **_fields(property_data)}, options)
