"""
Core type definitions for semtree.

This module contains the type aliases shared by the constraint model, the
registry and the semantic node so that annotations stay consistent.
"""

from typing import TYPE_CHECKING, Any, Callable, Union

if TYPE_CHECKING:
    from semtree.core.node import SemanticNode
    from semtree.structure.definition import NodeDefinition

# Raw document nodes come from an external DOM implementation
RawNode = Any

Matcher = Callable[[RawNode], bool]

Parser = Callable[["SemanticNode", Any, Any], Any]

KindRef = Union["NodeDefinition", str]


def kind_name(kind: KindRef) -> str:
    """
    Return the name a kind reference denotes.

    Params:
        kind: A NodeDefinition or its bare name

    Returns:
        The definition name
    """
    if isinstance(kind, str):
        return kind
    return kind.name
