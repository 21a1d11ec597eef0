"""
Tests for JSON-LD conversion.
"""

import json

from rdflib import Graph, URIRef
from rdflib.namespace import RDF, RDFS

from oerschema.converters import ConversionOptions
from oerschema.converters.jsonld import class_to_jsonld, property_to_jsonld, vocabulary_to_jsonld
from oerschema.models.vocabulary import Vocabulary


def test_class_document(sample_vocabulary: Vocabulary, options: ConversionOptions):
    """Single class is inlined next to the context."""
    course = sample_vocabulary.classes["Course"]

    data = json.loads(class_to_jsonld("Course", course, options))

    assert "@graph" not in data
    assert data["@context"]["oer"] == "http://oerschema.org/"
    assert data["@context"]["subClassOf"] == {"@id": "rdfs:subClassOf", "@type": "@id"}
    assert data["@id"] == "oer:Course"
    assert data["@type"] == "Class"
    assert data["label"] == "Course"
    assert data["comment"] == "An instructional course"
    assert data["subClassOf"] == ["oer:Resource", "http://schema.org/Course"]
    assert data["properties"] == ["courseIdentifier"]


def test_missing_comment_is_omitted(sample_vocabulary: Vocabulary, options: ConversionOptions):
    data = json.loads(class_to_jsonld("Syllabus", sample_vocabulary.classes["Syllabus"], options))

    assert "comment" not in data


def test_label_falls_back_to_name(options: ConversionOptions):
    vocabulary = Vocabulary.model_validate({"classes": {"Unlabeled": {}}})

    data = json.loads(class_to_jsonld("Unlabeled", vocabulary.classes["Unlabeled"], options))

    assert data["label"] == "Unlabeled"
    assert data["subClassOf"] == []
    assert data["properties"] == []


def test_property_document(sample_vocabulary: Vocabulary, options: ConversionOptions):
    homepage = sample_vocabulary.properties["homepage"]

    data = json.loads(property_to_jsonld("homepage", homepage, options))

    assert data["@id"] == "oer:homepage"
    assert data["@type"] == "Property"
    assert data["domain"] == ["oer:Resource"]
    assert data["range"] == ["oer:URL"]


def test_graph_order(sample_vocabulary: Vocabulary, options: ConversionOptions):
    """Classes in declaration order, then properties in declaration order."""
    data = json.loads(vocabulary_to_jsonld(sample_vocabulary, options))

    assert [entry["@id"] for entry in data["@graph"]] == [
        "oer:Resource",
        "oer:Course",
        "oer:Syllabus",
        "oer:courseIdentifier",
        "oer:duration",
        "oer:homepage",
    ]
    assert [entry["@type"] for entry in data["@graph"]] == ["Class"] * 3 + ["Property"] * 3


def test_compact_and_pretty_output(sample_vocabulary: Vocabulary):
    course = sample_vocabulary.classes["Course"]

    compact = class_to_jsonld("Course", course, ConversionOptions(pretty=False))
    pretty = class_to_jsonld("Course", course, ConversionOptions(pretty=True))

    assert compact == json.dumps(json.loads(compact), separators=(",", ":"))
    assert pretty.startswith('{\n  "@context": {\n    "oer": ')
    assert json.loads(compact) == json.loads(pretty)


def test_base_url_binds_oer_prefix(sample_vocabulary: Vocabulary):
    options = ConversionOptions(base_url="https://example.org/oer/")

    data = json.loads(vocabulary_to_jsonld(sample_vocabulary, options))

    assert data["@context"]["oer"] == "https://example.org/oer/"


def test_parses_as_rdf(sample_vocabulary: Vocabulary, options: ConversionOptions):
    graph = Graph().parse(data=vocabulary_to_jsonld(sample_vocabulary, options), format="json-ld")

    course = URIRef("http://oerschema.org/Course")
    assert (course, RDF.type, RDFS.Class) in graph
    assert (course, RDFS.subClassOf, URIRef("http://oerschema.org/Resource")) in graph
    assert (course, RDFS.subClassOf, URIRef("http://schema.org/Course")) in graph
    assert (URIRef("http://oerschema.org/duration"), RDF.type, RDF.Property) in graph
