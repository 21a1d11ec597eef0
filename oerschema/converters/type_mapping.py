"""
Vocabulary datatype to JSON Schema type mapping.
"""

from typing import Any

# Range types with a JSON Schema equivalent
JSON_SCHEMA_TYPES: dict[str, dict[str, str]] = {
    "Text": {"type": "string"},
    "URL": {"type": "string", "format": "uri"},
    "DateTime": {"type": "string", "format": "date-time"},
    "Number": {"type": "number"},
    "Integer": {"type": "integer"},
    "Boolean": {"type": "boolean"},
}

DEFAULT_JSON_SCHEMA_TYPE: dict[str, str] = {"type": "string"}


def json_schema_type(range_: list[str] | None) -> dict[str, Any]:
    """
    Map a property range to a JSON Schema type.

    The first range entry with a mapping wins; an empty, missing or fully
    unmapped range falls back to string.

    Args:
        range_: Property range references

    Returns:
        New dict with "type" and optionally "format"
    """
    for ref in range_ or []:
        mapped = JSON_SCHEMA_TYPES.get(ref)
        if mapped:
            return dict(mapped)
    return dict(DEFAULT_JSON_SCHEMA_TYPE)
