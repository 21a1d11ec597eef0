"""
JSON-LD conversion.

Documents share one fixed context. The whole vocabulary is a ``@graph`` of
class entries followed by property entries, single entities are inlined
next to the context.
"""

from typing import Any

from oerschema.converters.context import get_jsonld_context
from oerschema.converters.options import ConversionOptions, dump_json
from oerschema.converters.uri import to_compact
from oerschema.models.vocabulary import Vocabulary, VocabularyClass, VocabularyProperty


def _class_entry(name: str, class_data: VocabularyClass) -> dict[str, Any]:
    entry: dict[str, Any] = {
        "@id": f"oer:{name}",
        "@type": "Class",
        "label": class_data.label or name,
    }
    if class_data.comment:
        entry["comment"] = class_data.comment
    entry["subClassOf"] = [to_compact(parent) for parent in class_data.sub_class_of]
    entry["properties"] = list(class_data.properties)
    return entry


def _property_entry(name: str, property_data: VocabularyProperty) -> dict[str, Any]:
    entry: dict[str, Any] = {
        "@id": f"oer:{name}",
        "@type": "Property",
        "label": property_data.label or name,
    }
    if property_data.comment:
        entry["comment"] = property_data.comment
    entry["domain"] = [to_compact(ref) for ref in property_data.domain]
    entry["range"] = [to_compact(ref) for ref in property_data.range]
    return entry


def vocabulary_to_jsonld(vocabulary: Vocabulary, options: ConversionOptions) -> str:
    """
    Convert the whole vocabulary to a JSON-LD graph.

    Args:
        vocabulary: Loaded vocabulary
        options: Conversion options

    Returns:
        JSON-LD document with classes first, then properties, in declaration order
    """
    graph = [_class_entry(name, cls) for name, cls in vocabulary.classes.items()]
    graph.extend(_property_entry(name, prop) for name, prop in vocabulary.properties.items())

    document = {
        "@context": get_jsonld_context(options.base_url),
        "@graph": graph,
    }
    return dump_json(document, options)


def class_to_jsonld(
    name: str,
    class_data: VocabularyClass,
    options: ConversionOptions,
    vocabulary: Vocabulary | None = None,
) -> str:
    """Convert a single class to a JSON-LD document."""
    document = {"@context": get_jsonld_context(options.base_url)}
    document.update(_class_entry(name, class_data))
    return dump_json(document, options)


def property_to_jsonld(
    name: str,
    property_data: VocabularyProperty,
    options: ConversionOptions,
    vocabulary: Vocabulary | None = None,
) -> str:
    """Convert a single property to a JSON-LD document."""
    document = {"@context": get_jsonld_context(options.base_url)}
    document.update(_property_entry(name, property_data))
    return dump_json(document, options)
