"""
Helpers for inspecting raw DOM nodes.

Raw nodes follow the W3C DOM interface as implemented by `xml.dom.minidom`
and compatible libraries: a `nodeType` discriminant, a `nodeName` and an
ordered `childNodes` list. These predicates are the building blocks for
node definition matchers.
"""

from typing import Any

ELEMENT_NODE = 1
TEXT_NODE = 3
CDATA_SECTION_NODE = 4
PROCESSING_INSTRUCTION_NODE = 7
COMMENT_NODE = 8
DOCUMENT_NODE = 9
DOCUMENT_TYPE_NODE = 10

_TEXT_PREVIEW = 20


def is_element(node: Any, name: str | None = None) -> bool:
    """
    Check whether a raw node is an element, optionally with a given tag name.

    Params:
        node: Raw DOM node, may be None
        name: Tag name the element must have, any name when omitted

    Returns:
        True if the node is a matching element
    """
    return (
        node is not None
        and getattr(node, "nodeType", None) == ELEMENT_NODE
        and (not name or node.nodeName == name)
    )


def is_processing_instruction(node: Any, target: str | None = None) -> bool:
    """Check whether a raw node is a processing instruction, optionally with a given target."""
    return (
        node is not None
        and getattr(node, "nodeType", None) == PROCESSING_INSTRUCTION_NODE
        and (not target or node.nodeName == target)
    )


def is_doctype(node: Any) -> bool:
    return node is not None and getattr(node, "nodeType", None) == DOCUMENT_TYPE_NODE


def is_document(node: Any) -> bool:
    return node is not None and getattr(node, "nodeType", None) == DOCUMENT_NODE


def is_comment(node: Any) -> bool:
    return node is not None and getattr(node, "nodeType", None) == COMMENT_NODE


def is_text(node: Any, ignore_whitespace: bool = False) -> bool:
    """
    Check whether a raw node is a text or CDATA node.

    Params:
        node: Raw DOM node
        ignore_whitespace: Reject text nodes holding only whitespace

    Returns:
        True if the node is (non-blank, when requested) text
    """
    if node is None or getattr(node, "nodeType", None) not in (
        TEXT_NODE,
        CDATA_SECTION_NODE,
    ):
        return False
    if ignore_whitespace:
        return bool(node.data.strip())
    return True


def child_nodes(node: Any) -> list:
    """Return the children of a raw node in document order."""
    return list(getattr(node, "childNodes", None) or [])


def node_line(node: Any) -> int | None:
    """
    Return the source line a raw node was parsed from, if the DOM records it.

    Params:
        node: Raw DOM node

    Returns:
        Line number from `lineNumber` (xmldom style) or `sourceline` (lxml style),
        None when the DOM does not track lines
    """
    for attribute in ("lineNumber", "sourceline"):
        line = getattr(node, attribute, None)
        if isinstance(line, int):
            return line
    return None


def describe_node(node: Any) -> str:
    """
    Render a raw node compactly for diagnostics.

    Examples:
        element        -> "<section>"
        text           -> "#text 'Hello'"
        PI             -> "<?xml-stylesheet?>"
        doctype        -> "<!DOCTYPE html>"
        anything else  -> repr(node)
    """
    node_type = getattr(node, "nodeType", None)
    if node_type == ELEMENT_NODE:
        return f"<{node.nodeName}>"
    if node_type in (TEXT_NODE, CDATA_SECTION_NODE):
        data = node.data
        if len(data) > _TEXT_PREVIEW:
            data = data[:_TEXT_PREVIEW] + "..."
        return f"{node.nodeName} {data!r}"
    if node_type == PROCESSING_INSTRUCTION_NODE:
        return f"<?{node.nodeName}?>"
    if node_type == DOCUMENT_TYPE_NODE:
        return f"<!DOCTYPE {node.nodeName}>"
    if node_type == COMMENT_NODE:
        return "<!-- -->"
    if node_type == DOCUMENT_NODE:
        return "#document"
    return repr(node)
