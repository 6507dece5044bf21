"""
Tests for raw DOM node predicates and rendering helpers.
"""

from xml.dom import minidom

import pytest

from semtree.core.dom import (
    child_nodes,
    describe_node,
    is_comment,
    is_doctype,
    is_document,
    is_element,
    is_processing_instruction,
    is_text,
    node_line,
)


@pytest.fixture
def document(parse_xml):
    return parse_xml("<root><item>Hello</item><!--note--><item>  </item></root>")


class TestPredicates:
    """Test node type checks."""

    def test_is_element(self, document):
        """Elements match with or without a tag name."""
        root = document.documentElement
        assert is_element(root)
        assert is_element(root, "root")
        assert not is_element(root, "item")
        assert not is_element(None)
        assert not is_element(document)

    def test_is_text(self, document):
        """Text nodes match; whitespace-only ones can be excluded."""
        hello = document.documentElement.childNodes[0].firstChild
        blank = document.documentElement.childNodes[2].firstChild

        assert is_text(hello)
        assert is_text(blank)
        assert is_text(hello, ignore_whitespace=True)
        assert not is_text(blank, ignore_whitespace=True)
        assert not is_text(document.documentElement)

    def test_is_comment_and_document(self, document):
        """Comments and documents are recognized by node type."""
        comment = document.documentElement.childNodes[1]
        assert is_comment(comment)
        assert is_document(document)
        assert not is_document(document.documentElement)

    def test_is_processing_instruction(self, document):
        """Processing instructions match with or without a target."""
        pi = document.createProcessingInstruction("xml-stylesheet", 'href="a.css"')

        assert is_processing_instruction(pi)
        assert is_processing_instruction(pi, "xml-stylesheet")
        assert not is_processing_instruction(pi, "other")
        assert not is_processing_instruction(document.documentElement)

    def test_is_doctype(self):
        """Document type nodes are recognized."""
        doctype = minidom.getDOMImplementation().createDocumentType("html", None, None)
        assert is_doctype(doctype)
        assert not is_doctype(None)

    def test_plain_objects_are_not_nodes(self):
        """Objects without nodeType never match."""
        assert not is_element("root")
        assert not is_text(42)


class TestHelpers:
    """Test rendering, children and line helpers."""

    def test_describe_node(self, document):
        """Each node type has a compact rendering."""
        root = document.documentElement
        pi = document.createProcessingInstruction("xml-stylesheet", "")
        doctype = minidom.getDOMImplementation().createDocumentType("html", None, None)

        assert describe_node(root) == "<root>"
        assert describe_node(root.childNodes[0].firstChild) == "#text 'Hello'"
        assert describe_node(root.childNodes[1]) == "<!-- -->"
        assert describe_node(pi) == "<?xml-stylesheet?>"
        assert describe_node(doctype) == "<!DOCTYPE html>"
        assert describe_node(document) == "#document"
        assert describe_node(42) == "42"

    def test_describe_long_text_is_shortened(self, document):
        """Long text content is cut to a short preview."""
        text = document.createTextNode("x" * 100)
        assert describe_node(text) == "#text '" + "x" * 20 + "...'"

    def test_child_nodes(self, document):
        """child_nodes lists children and tolerates nodes without any."""
        root = document.documentElement
        assert [n.nodeType for n in child_nodes(root)] == [1, 8, 1]
        assert child_nodes(root.childNodes[0].firstChild) == []
        assert child_nodes(object()) == []

    def test_node_line(self, fake_element, document):
        """Lines come from lineNumber or sourceline when present."""

        class LxmlStyle:
            sourceline = 9

        assert node_line(fake_element("a", lineNumber=4)) == 4
        assert node_line(LxmlStyle()) == 9
        assert node_line(document.documentElement) is None
        assert node_line(None) is None
