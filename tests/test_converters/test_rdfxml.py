"""
Tests for RDF/XML conversion.
"""

from rdflib import Graph, Literal, URIRef
from rdflib.namespace import RDF, RDFS

from oerschema.converters import ConversionOptions
from oerschema.converters.rdfxml import class_to_xml, property_to_xml, vocabulary_to_xml
from oerschema.models.vocabulary import Vocabulary


def test_document_frame(sample_vocabulary: Vocabulary, options: ConversionOptions):
    xml = class_to_xml("Course", sample_vocabulary.classes["Course"], options)

    assert xml.startswith(
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"\n'
        '         xmlns:rdfs="http://www.w3.org/2000/01/rdf-schema#"\n'
        '         xmlns:oer="http://oerschema.org/"\n'
        '         xmlns:schema="http://schema.org/">\n\n'
    )
    assert xml.endswith("  </rdfs:Class>\n\n</rdf:RDF>")


def test_class_block(sample_vocabulary: Vocabulary, options: ConversionOptions):
    xml = class_to_xml("Course", sample_vocabulary.classes["Course"], options)

    assert (
        '  <rdfs:Class rdf:about="http://oerschema.org/Course">\n'
        "    <rdfs:label>Course</rdfs:label>\n"
        "    <rdfs:comment>An instructional course</rdfs:comment>\n"
        '    <rdfs:subClassOf rdf:resource="http://oerschema.org/Resource"/>\n'
        '    <rdfs:subClassOf rdf:resource="http://schema.org/Course"/>\n'
        "    <oer:properties>courseIdentifier</oer:properties>\n"
        "  </rdfs:Class>\n"
    ) in xml


def test_missing_comment_is_omitted(sample_vocabulary: Vocabulary, options: ConversionOptions):
    xml = class_to_xml("Syllabus", sample_vocabulary.classes["Syllabus"], options)

    assert "rdfs:comment" not in xml


def test_property_block(sample_vocabulary: Vocabulary, options: ConversionOptions):
    xml = property_to_xml(
        "courseIdentifier", sample_vocabulary.properties["courseIdentifier"], options
    )

    assert "<rdfs:comment>Code such as &quot;CS 101&quot; &amp; &lt;abbr&gt;</rdfs:comment>" in xml
    assert xml.index("<rdfs:range ") < xml.index("<rdfs:domain ")
    assert xml.count("<rdfs:domain ") == 2


def test_vocabulary_single_root(sample_vocabulary: Vocabulary, options: ConversionOptions):
    xml = vocabulary_to_xml(sample_vocabulary, options)

    assert xml.count("<rdf:RDF ") == 1
    assert xml.count("<rdfs:Class ") == 3
    assert xml.count("<rdf:Property ") == 3
    assert xml.index('rdf:about="http://oerschema.org/Syllabus"') < xml.index(
        'rdf:about="http://oerschema.org/courseIdentifier"'
    )


def test_parses_as_rdf(sample_vocabulary: Vocabulary, options: ConversionOptions):
    graph = Graph().parse(data=vocabulary_to_xml(sample_vocabulary, options), format="xml")

    course = URIRef("http://oerschema.org/Course")
    identifier = URIRef("http://oerschema.org/courseIdentifier")
    assert (course, RDF.type, RDFS.Class) in graph
    assert (course, RDFS.subClassOf, URIRef("http://oerschema.org/Resource")) in graph
    assert (identifier, RDF.type, RDF.Property) in graph
    assert (identifier, RDFS.comment, Literal('Code such as "CS 101" & <abbr>')) in graph
