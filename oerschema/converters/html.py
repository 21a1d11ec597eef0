"""
RDFa and Microdata conversion.

Both emit a single ``<div>`` describing the entity. Every field becomes a
``<meta>`` (text) or ``<link>`` (resource) child, so a generic RDFa or
Microdata parser recovers the same statements as the Turtle output, plus
inverseOf, alternateType and baseVocab.
"""

from typing import NamedTuple

from oerschema.converters.context import get_prefixes
from oerschema.converters.escaping import escape_html_attribute
from oerschema.converters.options import ConversionOptions
from oerschema.converters.uri import resolve
from oerschema.models.vocabulary import Vocabulary, VocabularyClass, VocabularyProperty


class Field(NamedTuple):
    """One statement about the entity: ``prefix:local`` predicate and its value."""

    prefix: str
    local: str
    value: str
    is_resource: bool


def _common_fields(label: str | None, comment: str | None) -> list[Field]:
    fields = []
    if label:
        fields.append(Field("rdfs", "label", label, False))
    if comment:
        fields.append(Field("rdfs", "comment", comment, False))
    return fields


def _alternate_type(alternate_type: str | None, base_url: str) -> list[Field]:
    if not alternate_type:
        return []
    return [Field("oer", "alternateType", resolve(alternate_type, base_url), True)]


def _class_fields(class_data: VocabularyClass, base_url: str) -> list[Field]:
    fields = _common_fields(class_data.label, class_data.comment)
    fields.extend(
        Field("rdfs", "subClassOf", resolve(parent, base_url), True)
        for parent in class_data.sub_class_of
    )
    fields.extend(Field("oer", "properties", prop, False) for prop in class_data.properties)
    fields.extend(_alternate_type(class_data.alternate_type, base_url))
    return fields


def _property_fields(property_data: VocabularyProperty, base_url: str) -> list[Field]:
    fields = _common_fields(property_data.label, property_data.comment)
    fields.extend(
        Field("rdfs", "range", resolve(ref, base_url), True) for ref in property_data.range
    )
    fields.extend(
        Field("rdfs", "domain", resolve(ref, base_url), True) for ref in property_data.domain
    )
    if property_data.inverse_of:
        fields.append(Field("oer", "inverseOf", resolve(property_data.inverse_of, base_url), True))
    fields.extend(_alternate_type(property_data.alternate_type, base_url))
    if property_data.base_vocab:
        fields.append(Field("oer", "baseVocab", property_data.base_vocab, True))
    return fields


# ===================
# RDFa
# ===================

def _render_rdfa(subject: str, rdf_type: str, fields: list[Field], base_url: str) -> str:
    prefixes = " ".join(
        f"{prefix}: {namespace}" for prefix, namespace in get_prefixes(base_url).items()
    )
    lines = [
        f'<div vocab="{escape_html_attribute(base_url)}" '
        f'prefix="{escape_html_attribute(prefixes)}" '
        f'resource="{escape_html_attribute(subject)}" typeof="{rdf_type}">'
    ]
    for field in fields:
        predicate = f"{field.prefix}:{field.local}"
        value = escape_html_attribute(field.value)
        if field.is_resource:
            lines.append(f'  <link property="{predicate}" href="{value}">')
        else:
            lines.append(f'  <meta property="{predicate}" content="{value}">')
    lines.append("</div>")
    return "\n".join(lines) + "\n"


def class_to_rdfa(
    name: str,
    class_data: VocabularyClass,
    options: ConversionOptions,
    vocabulary: Vocabulary | None = None,
) -> str:
    """Convert a class to an RDFa annotated HTML fragment."""
    return _render_rdfa(
        resolve(name, options.base_url),
        "rdfs:Class",
        _class_fields(class_data, options.base_url),
        options.base_url,
    )


def property_to_rdfa(
    name: str,
    property_data: VocabularyProperty,
    options: ConversionOptions,
    vocabulary: Vocabulary | None = None,
) -> str:
    """Convert a property to an RDFa annotated HTML fragment."""
    return _render_rdfa(
        resolve(name, options.base_url),
        "rdf:Property",
        _property_fields(property_data, options.base_url),
        options.base_url,
    )


# ===================
# Microdata
# ===================

def _render_microdata(subject: str, item_type: str, fields: list[Field], base_url: str) -> str:
    # Microdata has no prefixes, item properties are absolute URIs
    namespaces = get_prefixes(base_url)
    lines = [
        f'<div itemscope itemtype="{escape_html_attribute(item_type)}" '
        f'itemid="{escape_html_attribute(subject)}">'
    ]
    for field in fields:
        itemprop = escape_html_attribute(namespaces[field.prefix] + field.local)
        value = escape_html_attribute(field.value)
        if field.is_resource:
            lines.append(f'  <link itemprop="{itemprop}" href="{value}">')
        else:
            lines.append(f'  <meta itemprop="{itemprop}" content="{value}">')
    lines.append("</div>")
    return "\n".join(lines) + "\n"


def class_to_microdata(
    name: str,
    class_data: VocabularyClass,
    options: ConversionOptions,
    vocabulary: Vocabulary | None = None,
) -> str:
    """Convert a class to a Microdata annotated HTML fragment."""
    namespaces = get_prefixes(options.base_url)
    return _render_microdata(
        resolve(name, options.base_url),
        f"{namespaces['rdfs']}Class",
        _class_fields(class_data, options.base_url),
        options.base_url,
    )


def property_to_microdata(
    name: str,
    property_data: VocabularyProperty,
    options: ConversionOptions,
    vocabulary: Vocabulary | None = None,
) -> str:
    """Convert a property to a Microdata annotated HTML fragment."""
    namespaces = get_prefixes(options.base_url)
    return _render_microdata(
        resolve(name, options.base_url),
        f"{namespaces['rdf']}Property",
        _property_fields(property_data, options.base_url),
        options.base_url,
    )
