"""
RDF/XML conversion.
"""

from oerschema.converters.context import get_prefixes
from oerschema.converters.escaping import escape_xml
from oerschema.converters.options import ConversionOptions
from oerschema.converters.uri import resolve
from oerschema.models.vocabulary import Vocabulary, VocabularyClass, VocabularyProperty

XML_PROLOG = '<?xml version="1.0" encoding="UTF-8"?>\n'


def _open_root(base_url: str) -> str:
    declarations = [
        f'xmlns:{prefix}="{escape_xml(namespace)}"'
        for prefix, namespace in get_prefixes(base_url).items()
    ]
    # Continuation lines align under the first declaration
    return "<rdf:RDF " + "\n         ".join(declarations) + ">\n\n"


def _class_block(name: str, class_data: VocabularyClass, base_url: str) -> str:
    lines = [f'  <rdfs:Class rdf:about="{escape_xml(resolve(name, base_url))}">']

    if class_data.label:
        lines.append(f"    <rdfs:label>{escape_xml(class_data.label)}</rdfs:label>")
    if class_data.comment:
        lines.append(f"    <rdfs:comment>{escape_xml(class_data.comment)}</rdfs:comment>")

    for parent in class_data.sub_class_of:
        lines.append(f'    <rdfs:subClassOf rdf:resource="{escape_xml(resolve(parent, base_url))}"/>')

    for prop_name in class_data.properties:
        lines.append(f"    <oer:properties>{escape_xml(prop_name)}</oer:properties>")

    lines.append("  </rdfs:Class>")
    return "\n".join(lines) + "\n\n"


def _property_block(name: str, property_data: VocabularyProperty, base_url: str) -> str:
    lines = [f'  <rdf:Property rdf:about="{escape_xml(resolve(name, base_url))}">']

    if property_data.label:
        lines.append(f"    <rdfs:label>{escape_xml(property_data.label)}</rdfs:label>")
    if property_data.comment:
        lines.append(f"    <rdfs:comment>{escape_xml(property_data.comment)}</rdfs:comment>")

    for ref in property_data.range:
        lines.append(f'    <rdfs:range rdf:resource="{escape_xml(resolve(ref, base_url))}"/>')
    for ref in property_data.domain:
        lines.append(f'    <rdfs:domain rdf:resource="{escape_xml(resolve(ref, base_url))}"/>')

    lines.append("  </rdf:Property>")
    return "\n".join(lines) + "\n\n"


def _document(body: str, base_url: str) -> str:
    return XML_PROLOG + _open_root(base_url) + body + "</rdf:RDF>"


def vocabulary_to_xml(vocabulary: Vocabulary, options: ConversionOptions) -> str:
    """Convert the whole vocabulary to one RDF/XML document, classes first."""
    blocks = [
        _class_block(name, cls, options.base_url) for name, cls in vocabulary.classes.items()
    ]
    blocks.extend(
        _property_block(name, prop, options.base_url)
        for name, prop in vocabulary.properties.items()
    )
    return _document("".join(blocks), options.base_url)


def class_to_xml(
    name: str,
    class_data: VocabularyClass,
    options: ConversionOptions,
    vocabulary: Vocabulary | None = None,
) -> str:
    return _document(_class_block(name, class_data, options.base_url), options.base_url)


def property_to_xml(
    name: str,
    property_data: VocabularyProperty,
    options: ConversionOptions,
    vocabulary: Vocabulary | None = None,
) -> str:
    return _document(_property_block(name, property_data, options.base_url), options.base_url)
