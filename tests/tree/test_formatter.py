"""Tests for the debug markup formatter."""

from __future__ import annotations

from json_dom import parse_text
from json_dom.tree.formatter import to_xml

DECLARATION = '<?xml version="1.0"?>'


class TestToXml:
    def test_named_and_anonymous_elements(self) -> None:
        doc = parse_text(b'{"name": "John", "tags": ["a", "b"]}')
        assert to_xml(doc) == (
            DECLARATION
            + "<name>John</name>"
            + "<tags><element>a</element><element>b</element></tags>"
        )

    def test_numbers_and_nulls(self) -> None:
        doc = parse_text(b'{"age": 30, "spouse": null}')
        assert doc.to_xml() == DECLARATION + "<age>30</age><spouse></spouse>"

    def test_text_is_escaped(self) -> None:
        doc = parse_text(b'{"expr": "a < b & c"}')
        assert to_xml(doc) == DECLARATION + "<expr>a &lt; b &amp; c</expr>"

    def test_subtree_renders_its_children_only(self) -> None:
        doc = parse_text(b'{"outer": {"inner": true}}')
        outer = doc.first_child_named("outer")
        assert outer.to_xml() == DECLARATION + "<inner>true</inner>"

    def test_empty_document(self) -> None:
        assert to_xml(parse_text(b"[]")) == DECLARATION

    def test_excluded_nodes_are_still_rendered(self) -> None:
        doc = parse_text(b'{"a": 1, "b": 2}')
        doc.first_child_named("a").set_excluded(True)
        assert to_xml(doc) == DECLARATION + "<a>1</a><b>2</b>"
