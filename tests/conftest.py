"""
Shared test fixtures and utilities for the semtree test suite.
"""

from dataclasses import dataclass, field
from xml.dom import minidom

import pytest

from semtree.core.dom import ELEMENT_NODE, is_element
from semtree.core.node import SemanticNode
from semtree.structure import NO_CONSTRAINTS, NodeDefinition


@dataclass
class FakeElement:
    """Minimal DOM-like element that records the line it came from."""

    nodeName: str
    childNodes: list = field(default_factory=list)
    lineNumber: int | None = None
    nodeType: int = ELEMENT_NODE


@pytest.fixture
def parse_xml():
    """Parse an XML string into a minidom Document.

    Usage:
        def test_something(parse_xml):
            document = parse_xml("<root><child/></root>")
    """

    def _parse(text: str) -> minidom.Document:
        return minidom.parseString(text)

    return _parse


@pytest.fixture
def element_kind():
    """Factory for definitions matching elements by tag name.

    Usage:
        item = element_kind("item", NO_CHILDREN)
        wildcard = element_kind(None, name="any-element")
    """

    def _make(
        tag: str | None,
        constraint=NO_CONSTRAINTS,
        name: str | None = None,
        parser=None,
        returns=None,
    ) -> NodeDefinition:
        return NodeDefinition(
            name=name or tag,
            matcher=lambda node: is_element(node, tag),
            children_constraint=constraint,
            parser=parser,
            returns=returns,
        )

    return _make


@pytest.fixture
def build_node():
    """Build semantic nodes directly, without going through conversion.

    Usage:
        leaf = build_node(item_kind)
        parent = build_node(list_kind, leaf, build_node(item_kind))
    """

    def _build(definition: NodeDefinition, *children: SemanticNode, raw=None, config=None):
        return SemanticNode(
            definition=definition, children=tuple(children), raw=raw, config=config
        )

    return _build


@pytest.fixture
def fake_element():
    """The FakeElement class, for DOM nodes that carry line numbers."""
    return FakeElement
