"""
Text escaping per output syntax.

All functions are single pass: escaping already escaped text escapes it
again, so callers escape exactly once, at serialization time.
"""

import re

_XML_ENTITIES = {
    "<": "&lt;",
    ">": "&gt;",
    "&": "&amp;",
    "'": "&apos;",
    '"': "&quot;",
}
_XML_SPECIAL = re.compile(r"""[<>&'"]""")

_TURTLE_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
}
_TURTLE_SPECIAL = re.compile(r'["\\]')

_NTRIPLES_ESCAPES = {
    **_TURTLE_ESCAPES,
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}
_NTRIPLES_SPECIAL = re.compile(r'["\\\n\r\t]')


def escape_xml(value: str) -> str:
    """Replace XML special characters with named entities."""
    return _XML_SPECIAL.sub(lambda m: _XML_ENTITIES[m.group(0)], value)


def escape_turtle(value: str) -> str:
    """Escape double quotes and backslashes for a Turtle string literal."""
    return _TURTLE_SPECIAL.sub(lambda m: _TURTLE_ESCAPES[m.group(0)], value)


def escape_ntriples(value: str) -> str:
    """Escape an N-Triples literal, line breaks and tabs included."""
    return _NTRIPLES_SPECIAL.sub(lambda m: _NTRIPLES_ESCAPES[m.group(0)], value)


def escape_html_attribute(value: str) -> str:
    """Escape a value placed inside a double-quoted HTML attribute."""
    return escape_xml(value)
