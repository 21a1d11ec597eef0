"""
Format negotiation and converter dispatch.

Maps a format token, media type or whole ``Accept`` header to an output
format, and an (entity scope, format) pair to a converter function and
response content type. Negotiation is permissive: anything unrecognized,
and any combination a scope does not support, falls back to plain JSON.
"""

import enum
from typing import Callable, NamedTuple

from oerschema.converters import html, json_schema, jsonld, ntriples, raw_json, rdfxml, turtle
from oerschema.converters.options import ConversionOptions
from oerschema.models.vocabulary import Vocabulary, VocabularyClass, VocabularyProperty


class OutputFormat(str, enum.Enum):
    """Supported output formats, valued by their query token."""
    JSON = "json"
    JSONLD = "jsonld"
    SCHEMA = "schema"
    XML = "xml"
    TURTLE = "turtle"
    NTRIPLES = "ntriples"
    RDFA = "rdfa"
    MICRODATA = "microdata"


class EntityScope(str, enum.Enum):
    """Granularity of a conversion."""
    VOCABULARY = "vocabulary"
    CLASS = "class"
    PROPERTY = "property"


DEFAULT_FORMAT = OutputFormat.JSON

CONTENT_TYPES: dict[OutputFormat, str] = {
    OutputFormat.JSON: "application/json",
    OutputFormat.JSONLD: "application/ld+json",
    OutputFormat.SCHEMA: "application/schema+json",
    OutputFormat.XML: "application/xml",
    OutputFormat.TURTLE: "text/turtle",
    OutputFormat.NTRIPLES: "application/n-triples",
    OutputFormat.RDFA: "text/html+rdfa",
    OutputFormat.MICRODATA: "text/html+microdata",
}

# Extensions used by the static generator
FILE_EXTENSIONS: dict[OutputFormat, str] = {
    OutputFormat.JSON: "json",
    OutputFormat.JSONLD: "jsonld",
    OutputFormat.SCHEMA: "schema.json",
    OutputFormat.XML: "rdf",
    OutputFormat.TURTLE: "ttl",
    OutputFormat.NTRIPLES: "nt",
    OutputFormat.RDFA: "rdfa.html",
    OutputFormat.MICRODATA: "microdata.html",
}

# Tokens and media types accepted besides the canonical ones
_ALIASES: dict[str, OutputFormat] = {
    "json-ld": OutputFormat.JSONLD,
    "rdf": OutputFormat.XML,
    "rdfxml": OutputFormat.XML,
    "application/rdf+xml": OutputFormat.XML,
    "text/xml": OutputFormat.XML,
    "ttl": OutputFormat.TURTLE,
    "nt": OutputFormat.NTRIPLES,
}

_LOOKUP: dict[str, OutputFormat] = {
    **{fmt.value: fmt for fmt in OutputFormat},
    **{media_type: fmt for fmt, media_type in CONTENT_TYPES.items()},
    **_ALIASES,
}


CONVERTERS: dict[EntityScope, dict[OutputFormat, Callable[..., str]]] = {
    EntityScope.VOCABULARY: {
        OutputFormat.JSON: raw_json.vocabulary_to_json,
        OutputFormat.JSONLD: jsonld.vocabulary_to_jsonld,
        OutputFormat.XML: rdfxml.vocabulary_to_xml,
        OutputFormat.TURTLE: turtle.vocabulary_to_turtle,
        OutputFormat.NTRIPLES: ntriples.vocabulary_to_ntriples,
    },
    EntityScope.CLASS: {
        OutputFormat.JSON: raw_json.class_to_json,
        OutputFormat.JSONLD: jsonld.class_to_jsonld,
        OutputFormat.SCHEMA: json_schema.class_to_json_schema,
        OutputFormat.XML: rdfxml.class_to_xml,
        OutputFormat.TURTLE: turtle.class_to_turtle,
        OutputFormat.NTRIPLES: ntriples.class_to_ntriples,
        OutputFormat.RDFA: html.class_to_rdfa,
        OutputFormat.MICRODATA: html.class_to_microdata,
    },
    EntityScope.PROPERTY: {
        OutputFormat.JSON: raw_json.property_to_json,
        OutputFormat.JSONLD: jsonld.property_to_jsonld,
        OutputFormat.SCHEMA: json_schema.property_to_json_schema,
        OutputFormat.XML: rdfxml.property_to_xml,
        OutputFormat.TURTLE: turtle.property_to_turtle,
        OutputFormat.NTRIPLES: ntriples.property_to_ntriples,
        OutputFormat.RDFA: html.property_to_rdfa,
        OutputFormat.MICRODATA: html.property_to_microdata,
    },
}


class Converter(NamedTuple):
    """A resolved converter and the content type of what it produces."""

    format: OutputFormat
    content_type: str
    function: Callable[..., str]


def _parse_accept(accept: str) -> list[str]:
    """Media ranges of an Accept header, highest quality first, ties in header order."""
    ranges = []
    for position, part in enumerate(accept.split(",")):
        media_type, *params = [item.strip() for item in part.split(";")]
        if not media_type:
            continue
        quality = 1.0
        for param in params:
            key, _, value = param.partition("=")
            if key.strip().lower() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        if quality > 0:
            ranges.append((-quality, position, media_type.lower()))
    return [media_type for _, _, media_type in sorted(ranges)]


def normalize_format(value: str | OutputFormat | None) -> OutputFormat:
    """
    Resolve a requested format.

    Accepts a format token ("turtle"), a media type ("text/turtle") or a full
    Accept header ("text/turtle;q=0.9, application/json").

    Args:
        value: Requested format, may be None

    Returns:
        Matching OutputFormat, or JSON when nothing is recognized
    """
    if isinstance(value, OutputFormat):
        return value
    if not value:
        return DEFAULT_FORMAT

    token = value.strip().lower()
    if token in _LOOKUP:
        return _LOOKUP[token]

    for media_type in _parse_accept(token):
        if media_type in _LOOKUP:
            return _LOOKUP[media_type]
    return DEFAULT_FORMAT


def supported_formats(scope: EntityScope) -> list[OutputFormat]:
    """Formats with a converter for the given scope."""
    return list(CONVERTERS[scope])


def select_converter(scope: EntityScope, requested_format: str | OutputFormat | None) -> Converter:
    """
    Pick the converter for a scope and requested format.

    Unsupported combinations, e.g. JSON Schema for the whole vocabulary,
    resolve to the JSON converter.
    """
    fmt = normalize_format(requested_format)
    table = CONVERTERS[scope]
    if fmt not in table:
        fmt = DEFAULT_FORMAT
    return Converter(format=fmt, content_type=CONTENT_TYPES[fmt], function=table[fmt])


def content_type_for(requested_format: str | OutputFormat | None) -> str:
    """Response content type for a requested format."""
    return CONTENT_TYPES[normalize_format(requested_format)]


def file_extension_for(requested_format: str | OutputFormat | None) -> str:
    """Static file extension for a requested format."""
    return FILE_EXTENSIONS[normalize_format(requested_format)]


def convert_whole_vocabulary(
    vocabulary: Vocabulary,
    requested_format: str | OutputFormat | None = None,
    options: ConversionOptions | None = None,
) -> str:
    converter = select_converter(EntityScope.VOCABULARY, requested_format)
    return converter.function(vocabulary, options or ConversionOptions())


def convert_class(
    name: str,
    class_data: VocabularyClass,
    requested_format: str | OutputFormat | None = None,
    options: ConversionOptions | None = None,
    vocabulary: Vocabulary | None = None,
) -> str:
    """
    Convert one class.

    ``vocabulary`` is only read by the JSON Schema converter, which types
    the class's properties from their ranges.
    """
    converter = select_converter(EntityScope.CLASS, requested_format)
    return converter.function(name, class_data, options or ConversionOptions(), vocabulary)


def convert_property(
    name: str,
    property_data: VocabularyProperty,
    requested_format: str | OutputFormat | None = None,
    options: ConversionOptions | None = None,
) -> str:
    converter = select_converter(EntityScope.PROPERTY, requested_format)
    return converter.function(name, property_data, options or ConversionOptions(), None)
