"""
Namespace and JSON-LD context definitions for the OER Schema vocabulary.

The ``oer`` prefix is bound to the configured base URL, every other
namespace is fixed.
"""

DEFAULT_BASE_URL = "http://oerschema.org/"

RDF_NS = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
RDFS_NS = "http://www.w3.org/2000/01/rdf-schema#"
SCHEMA_NS = "http://schema.org/"
JSON_SCHEMA_DRAFT_07 = "http://json-schema.org/draft-07/schema#"

# Fully qualified terms used by N-Triples and Microdata
RDF_TYPE = f"{RDF_NS}type"
RDF_PROPERTY = f"{RDF_NS}Property"
RDFS_CLASS = f"{RDFS_NS}Class"
RDFS_LABEL = f"{RDFS_NS}label"
RDFS_COMMENT = f"{RDFS_NS}comment"
RDFS_SUBCLASS_OF = f"{RDFS_NS}subClassOf"
RDFS_DOMAIN = f"{RDFS_NS}domain"
RDFS_RANGE = f"{RDFS_NS}range"


def get_jsonld_context(base_url: str = DEFAULT_BASE_URL) -> dict:
    """
    Build the JSON-LD context for vocabulary documents.

    Args:
        base_url: Namespace bound to the ``oer`` prefix

    Returns:
        Context dictionary, a new object on every call
    """
    return {
        "oer": base_url,
        "schema": SCHEMA_NS,
        "rdfs": RDFS_NS,
        "rdf": RDF_NS,
        "Class": "rdfs:Class",
        "Property": "rdf:Property",
        "subClassOf": {"@id": "rdfs:subClassOf", "@type": "@id"},
        "comment": "rdfs:comment",
        "label": "rdfs:label",
        "domain": {"@id": "rdfs:domain", "@type": "@id"},
        "range": {"@id": "rdfs:range", "@type": "@id"},
    }


def get_prefixes(base_url: str = DEFAULT_BASE_URL) -> dict[str, str]:
    """Prefix bindings shared by Turtle, RDF/XML and RDFa output, in emission order."""
    return {
        "rdf": RDF_NS,
        "rdfs": RDFS_NS,
        "oer": base_url,
        "schema": SCHEMA_NS,
    }
