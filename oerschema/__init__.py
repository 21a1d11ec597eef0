"""
OER Schema Vocabulary Service

Publishes the OER Schema vocabulary (classes and properties describing open
educational resources) as JSON, JSON-LD, JSON Schema, RDF/XML, Turtle,
N-Triples, RDFa and Microdata.
"""

__version__ = "1.0.0"
__author__ = "OER Schema"
