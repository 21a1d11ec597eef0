"""
Turtle conversion.

Each entity is one statement: the subject and its type, then one
predicate-object pair per field joined with " ;", closed by " .".
"""

from oerschema.converters.context import get_prefixes
from oerschema.converters.escaping import escape_turtle
from oerschema.converters.options import ConversionOptions
from oerschema.converters.uri import to_turtle_term
from oerschema.models.vocabulary import Vocabulary, VocabularyClass, VocabularyProperty

STATEMENT_SEPARATOR = " ;\n    "


def _prefix_block(base_url: str) -> str:
    lines = [
        f"@prefix {prefix}: <{namespace}> ."
        for prefix, namespace in get_prefixes(base_url).items()
    ]
    return "\n".join(lines) + "\n\n"


def _literal(value: str) -> str:
    """Quote a string, switching to a long literal when it spans lines."""
    if "\n" in value or "\r" in value:
        return f'"""{escape_turtle(value)}"""'
    return f'"{escape_turtle(value)}"'


def _class_statement(name: str, class_data: VocabularyClass) -> str:
    parts = [f"oer:{name} a rdfs:Class"]

    if class_data.label:
        parts.append(f"rdfs:label {_literal(class_data.label)}")
    if class_data.comment:
        parts.append(f"rdfs:comment {_literal(class_data.comment)}")

    parts.extend(f"rdfs:subClassOf {to_turtle_term(parent)}" for parent in class_data.sub_class_of)
    parts.extend(f"oer:properties {_literal(prop)}" for prop in class_data.properties)

    return STATEMENT_SEPARATOR.join(parts) + " .\n"


def _property_statement(name: str, property_data: VocabularyProperty) -> str:
    parts = [f"oer:{name} a rdf:Property"]

    if property_data.label:
        parts.append(f"rdfs:label {_literal(property_data.label)}")
    if property_data.comment:
        parts.append(f"rdfs:comment {_literal(property_data.comment)}")

    parts.extend(f"rdfs:range {to_turtle_term(ref)}" for ref in property_data.range)
    parts.extend(f"rdfs:domain {to_turtle_term(ref)}" for ref in property_data.domain)

    return STATEMENT_SEPARATOR.join(parts) + " .\n"


def vocabulary_to_turtle(vocabulary: Vocabulary, options: ConversionOptions) -> str:
    """Convert the whole vocabulary, one blank-line separated statement per entity."""
    turtle = _prefix_block(options.base_url)
    for name, cls in vocabulary.classes.items():
        turtle += _class_statement(name, cls) + "\n"
    for name, prop in vocabulary.properties.items():
        turtle += _property_statement(name, prop) + "\n"
    return turtle


def class_to_turtle(
    name: str,
    class_data: VocabularyClass,
    options: ConversionOptions,
    vocabulary: Vocabulary | None = None,
) -> str:
    return _prefix_block(options.base_url) + _class_statement(name, class_data)


def property_to_turtle(
    name: str,
    property_data: VocabularyProperty,
    options: ConversionOptions,
    vocabulary: Vocabulary | None = None,
) -> str:
    return _prefix_block(options.base_url) + _property_statement(name, property_data)
