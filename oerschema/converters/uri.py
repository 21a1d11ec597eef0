"""
URI resolution for vocabulary references.

A reference is either absolute (starts with ``http://`` or ``https://``) and
passed through unchanged, or a local term name resolved against the base URL
by plain concatenation. Unknown local names resolve the same way as known ones.
"""

ABSOLUTE_PREFIXES = ("http://", "https://")


def is_absolute(ref: str) -> bool:
    """Check whether a reference is an absolute http(s) URI."""
    return ref.startswith(ABSOLUTE_PREFIXES)


def resolve(ref: str, base_uri: str) -> str:
    """
    Resolve a reference to a full URI.

    Args:
        ref: Local term name or absolute URI
        base_uri: Vocabulary namespace, expected to end with "/"

    Returns:
        ``ref`` unchanged when absolute, otherwise ``base_uri + ref``
    """
    if is_absolute(ref):
        return ref
    return f"{base_uri}{ref}"


def to_compact(ref: str) -> str:
    """JSON-LD form: ``oer:<name>`` for local terms."""
    if is_absolute(ref):
        return ref
    return f"oer:{ref}"


def to_turtle_term(ref: str) -> str:
    """Turtle form: ``oer:<name>`` for local terms, ``<uri>`` otherwise."""
    if is_absolute(ref):
        return f"<{ref}>"
    return f"oer:{ref}"


def to_ntriples_term(ref: str, base_uri: str) -> str:
    """N-Triples form: always a bracketed absolute URI."""
    return f"<{resolve(ref, base_uri)}>"
