"""
Core semtree components.

This package provides the semantic node, raw DOM helpers and the type
aliases shared across semtree.
"""

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
from semtree.core.node import SemanticNode
from semtree.core.types import KindRef, Matcher, Parser, RawNode, kind_name

__all__ = [
    "SemanticNode",
    "KindRef",
    "Matcher",
    "Parser",
    "RawNode",
    "kind_name",
    "child_nodes",
    "describe_node",
    "is_comment",
    "is_doctype",
    "is_document",
    "is_element",
    "is_processing_instruction",
    "is_text",
    "node_line",
]
