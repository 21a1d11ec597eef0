"""
Format conversion layer.

Pure, deterministic functions turning vocabulary entities into JSON,
JSON-LD, JSON Schema, RDF/XML, Turtle, N-Triples, RDFa and Microdata.
"""

from oerschema.converters.dispatcher import (
    CONTENT_TYPES,
    FILE_EXTENSIONS,
    Converter,
    EntityScope,
    OutputFormat,
    content_type_for,
    convert_class,
    convert_property,
    convert_whole_vocabulary,
    file_extension_for,
    normalize_format,
    select_converter,
    supported_formats,
)
from oerschema.converters.options import ConversionOptions

__all__ = [
    "CONTENT_TYPES",
    "FILE_EXTENSIONS",
    "ConversionOptions",
    "Converter",
    "EntityScope",
    "OutputFormat",
    "content_type_for",
    "convert_class",
    "convert_property",
    "convert_whole_vocabulary",
    "file_extension_for",
    "normalize_format",
    "select_converter",
    "supported_formats",
]
