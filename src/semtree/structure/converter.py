"""
Conversion of raw DOM trees into semantic trees.

Each raw node is classified by the first registered definition whose matcher
accepts it, and its children are converted in document order. The walk uses
an explicit stack, so document depth is not limited by the interpreter's
recursion limit.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from semtree.core.dom import child_nodes, describe_node, node_line
from semtree.core.node import SemanticNode
from semtree.core.types import RawNode
from semtree.exceptions import UnmatchedNodeError
from semtree.settings import SemtreeSettings
from semtree.structure.definition import NodeDefinition
from semtree.structure.registry import NodeRegistry

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    """A raw node whose children are still being converted."""

    raw: RawNode
    definition: NodeDefinition
    raw_children: list
    converted: list[SemanticNode] = field(default_factory=list)

    @property
    def done(self) -> bool:
        return len(self.converted) == len(self.raw_children)


def _classify(
    raw: RawNode, registry: NodeRegistry, settings: SemtreeSettings
) -> NodeDefinition:
    definition = registry.match(raw)
    if definition is None:
        raise UnmatchedNodeError(
            describe_node(raw), node_line(raw), settings.max_diagnostic_length
        )
    return definition


def convert(
    raw: RawNode,
    registry: NodeRegistry,
    config: Any = None,
    settings: SemtreeSettings | None = None,
) -> SemanticNode:
    """
    Convert a raw DOM tree into a semantic tree.

    Params:
        raw: Root of the raw tree (a document, element, or any other DOM node)
        registry: Frozen registry whose definitions classify the raw nodes
        config: Application configuration shared by every semantic node
        settings: Diagnostic settings, defaults when omitted

    Returns:
        The semantic node for `raw`, with the same shape as the raw tree

    Raises:
        UnmatchedNodeError: If no definition accepts some raw node
    """
    settings = settings or SemtreeSettings()
    stack = [_Frame(raw, _classify(raw, registry, settings), child_nodes(raw))]
    count = 0

    while True:
        frame = stack[-1]

        if not frame.done:
            # Next unconverted child; it is finished before its later siblings start
            child = frame.raw_children[len(frame.converted)]
            definition = _classify(child, registry, settings)
            stack.append(_Frame(child, definition, child_nodes(child)))
            continue

        stack.pop()
        node = SemanticNode(
            definition=frame.definition,
            children=tuple(frame.converted),
            raw=frame.raw,
            config=config,
        )
        count += 1

        if not stack:
            logger.debug("Converted %d nodes rooted at %s", count, node.name)
            return node

        stack[-1].converted.append(node)
