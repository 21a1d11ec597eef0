"""
Tests for syntax-specific escaping.
"""

from oerschema.converters.escaping import (
    escape_html_attribute,
    escape_ntriples,
    escape_turtle,
    escape_xml,
)


class TestEscapeXml:
    """Tests for XML entity escaping."""

    def test_all_special_characters(self):
        result = escape_xml("""<a href="x">Tom & Jerry's</a>""")
        assert result == "&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&apos;s&lt;/a&gt;"

    def test_single_pass(self):
        """Ampersands introduced by escaping are not escaped again."""
        assert escape_xml("&") == "&amp;"
        assert escape_xml("<>") == "&lt;&gt;"

    def test_not_idempotent(self):
        assert escape_xml(escape_xml("&")) == "&amp;amp;"

    def test_empty_and_plain(self):
        assert escape_xml("") == ""
        assert escape_xml("An instructional course") == "An instructional course"


class TestEscapeTurtle:
    """Tests for Turtle literal escaping."""

    def test_quotes_and_backslashes(self):
        assert escape_turtle('say "hi" \\ bye') == 'say \\"hi\\" \\\\ bye'

    def test_other_characters_untouched(self):
        assert escape_turtle("a\nb <c> & 'd'") == "a\nb <c> & 'd'"

    def test_empty(self):
        assert escape_turtle("") == ""


def test_escape_ntriples_control_characters():
    assert escape_ntriples('a\tb\nc\r"d"\\') == 'a\\tb\\nc\\r\\"d\\"\\\\'


def test_escape_html_attribute_matches_xml():
    value = """"quoted" & <tagged> 'single'"""
    assert escape_html_attribute(value) == escape_xml(value)
