"""
N-Triples conversion: one fully qualified triple per line, no prefixes.
"""

from oerschema.converters.context import (
    RDF_PROPERTY,
    RDF_TYPE,
    RDFS_CLASS,
    RDFS_COMMENT,
    RDFS_DOMAIN,
    RDFS_LABEL,
    RDFS_RANGE,
    RDFS_SUBCLASS_OF,
)
from oerschema.converters.escaping import escape_ntriples
from oerschema.converters.options import ConversionOptions
from oerschema.converters.uri import to_ntriples_term
from oerschema.models.vocabulary import Vocabulary, VocabularyClass, VocabularyProperty


def _triple(subject: str, predicate: str, obj: str) -> str:
    return f"{subject} <{predicate}> {obj} .\n"


def _literal(value: str) -> str:
    return f'"{escape_ntriples(value)}"'


def _describe(
    subject: str,
    rdf_type: str,
    label: str | None,
    comment: str | None,
) -> str:
    triples = _triple(subject, RDF_TYPE, f"<{rdf_type}>")
    if label:
        triples += _triple(subject, RDFS_LABEL, _literal(label))
    if comment:
        triples += _triple(subject, RDFS_COMMENT, _literal(comment))
    return triples


def _class_triples(name: str, class_data: VocabularyClass, base_url: str) -> str:
    subject = to_ntriples_term(name, base_url)
    triples = _describe(subject, RDFS_CLASS, class_data.label, class_data.comment)
    for parent in class_data.sub_class_of:
        triples += _triple(subject, RDFS_SUBCLASS_OF, to_ntriples_term(parent, base_url))
    return triples


def _property_triples(name: str, property_data: VocabularyProperty, base_url: str) -> str:
    subject = to_ntriples_term(name, base_url)
    triples = _describe(subject, RDF_PROPERTY, property_data.label, property_data.comment)
    for ref in property_data.range:
        triples += _triple(subject, RDFS_RANGE, to_ntriples_term(ref, base_url))
    for ref in property_data.domain:
        triples += _triple(subject, RDFS_DOMAIN, to_ntriples_term(ref, base_url))
    return triples


def vocabulary_to_ntriples(vocabulary: Vocabulary, options: ConversionOptions) -> str:
    triples = [
        _class_triples(name, cls, options.base_url) for name, cls in vocabulary.classes.items()
    ]
    triples.extend(
        _property_triples(name, prop, options.base_url)
        for name, prop in vocabulary.properties.items()
    )
    return "".join(triples)


def class_to_ntriples(
    name: str,
    class_data: VocabularyClass,
    options: ConversionOptions,
    vocabulary: Vocabulary | None = None,
) -> str:
    return _class_triples(name, class_data, options.base_url)


def property_to_ntriples(
    name: str,
    property_data: VocabularyProperty,
    options: ConversionOptions,
    vocabulary: Vocabulary | None = None,
) -> str:
    return _property_triples(name, property_data, options.base_url)
