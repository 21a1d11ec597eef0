"""
JSON Schema (draft-07) conversion for classes and properties.
"""

from typing import Any

from oerschema.converters.context import JSON_SCHEMA_DRAFT_07
from oerschema.converters.options import ConversionOptions, dump_json
from oerschema.converters.type_mapping import json_schema_type
from oerschema.models.vocabulary import Vocabulary, VocabularyClass, VocabularyProperty


def _property_schema(property_data: VocabularyProperty) -> dict[str, Any]:
    type_info = json_schema_type(property_data.range)
    schema: dict[str, Any] = {
        "type": type_info["type"],
        "description": property_data.comment or "",
    }
    if "format" in type_info:
        schema["format"] = type_info["format"]
    return schema


def _base_schema(name: str, comment: str | None) -> dict[str, Any]:
    return {
        "$schema": JSON_SCHEMA_DRAFT_07,
        "title": name,
        "description": comment or "",
        "type": "object",
        "properties": {},
    }


def class_to_json_schema(
    name: str,
    class_data: VocabularyClass,
    options: ConversionOptions,
    vocabulary: Vocabulary | None = None,
) -> str:
    """
    Convert a class to a JSON Schema object schema.

    Listed properties are typed from their range in the vocabulary's
    property map. Without a vocabulary, or for names missing from it, the
    property is left out.

    Args:
        name: Class name
        class_data: Class definition
        options: Conversion options
        vocabulary: Full vocabulary used to look up property ranges

    Returns:
        JSON Schema document
    """
    schema = _base_schema(name, class_data.comment)

    if vocabulary is not None:
        for prop_name in class_data.properties:
            property_data = vocabulary.properties.get(prop_name)
            if property_data is not None:
                schema["properties"][prop_name] = _property_schema(property_data)

    return dump_json(schema, options)


def property_to_json_schema(
    name: str,
    property_data: VocabularyProperty,
    options: ConversionOptions,
    vocabulary: Vocabulary | None = None,
) -> str:
    """Convert a property to an object schema holding that property alone."""
    schema = _base_schema(name, property_data.comment)
    schema["properties"][name] = _property_schema(property_data)
    return dump_json(schema, options)
