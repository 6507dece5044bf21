"""
Validation of semantic trees against their children constraints.

Every node's children are checked against its own definition's constraint;
constraints are never inherited. The tree is walked breadth-first and the
first violation aborts validation with a ChildrenCardinalityError that
locates the offending node.
"""

import logging
from collections import Counter, deque
from collections.abc import Iterator

from semtree.core.dom import describe_node
from semtree.core.node import SemanticNode
from semtree.exceptions import (
    ChildrenCardinalityError,
    ErrorContext,
    MissingConstraintError,
)
from semtree.settings import SemtreeSettings
from semtree.structure.constraints import Contains, NoChildren, NoConstraints

logger = logging.getLogger(__name__)


def iter_breadth_first(root: SemanticNode) -> Iterator[SemanticNode]:
    """Yield `root` and all its descendants in breadth-first order."""
    queue = deque([root])
    while queue:
        node = queue.popleft()
        yield node
        queue.extend(node.children)


def _fail(
    node: SemanticNode, actual: str, expected: str, settings: SemtreeSettings
) -> ChildrenCardinalityError:
    context = ErrorContext(
        node=node.render(settings.max_diagnostic_length),
        raw_node=describe_node(node.raw) if node.raw is not None else None,
        line=node.line,
        max_length=settings.max_diagnostic_length,
    )
    return ChildrenCardinalityError(
        actual=actual,
        expected=expected,
        context=context,
        error_level=settings.error_level,
    )


def _validate_no_children(node: SemanticNode, settings: SemtreeSettings) -> None:
    if node.children:
        raise _fail(
            node,
            actual=f"has {len(node.children)} children",
            expected="expects none",
            settings=settings,
        )


def _validate_contains(
    node: SemanticNode, constraint: Contains, settings: SemtreeSettings
) -> None:
    count = Counter(child.name for child in node.children)

    for appearance in constraint.appearances:
        name = appearance.name
        actual = count.get(name, 0)

        if not appearance.accepts(actual):
            raise _fail(
                node,
                actual=f"has {actual} of {name}",
                expected=f"has {appearance.describe()} of {name}",
                settings=settings,
            )

        count.pop(name, None)

    if count and settings.reject_unknown_kinds:
        raise _fail(
            node,
            actual="contains " + ", ".join(count),
            expected="contains no such children",
            settings=settings,
        )


def validate_node(node: SemanticNode, settings: SemtreeSettings | None = None) -> None:
    """
    Check one node's direct children against its definition's constraint.

    Params:
        node: Semantic node to check; its descendants are not visited
        settings: Diagnostic settings, defaults when omitted

    Raises:
        MissingConstraintError: If the definition declares no constraint at all
        ChildrenCardinalityError: If the children violate the constraint
        TypeError: If the constraint is not one of the known variants
    """
    settings = settings or SemtreeSettings()
    constraint = node.definition.children_constraint

    if constraint is None:
        raise MissingConstraintError(node.name)

    if isinstance(constraint, NoConstraints):
        return
    elif isinstance(constraint, NoChildren):
        _validate_no_children(node, settings)
    elif isinstance(constraint, Contains):
        _validate_contains(node, constraint, settings)
    else:
        # Reached only if a new constraint variant is added without handling it here
        raise TypeError(
            f"Unknown children constraint {constraint!r} on {node.name}"
        )


def validate_tree(root: SemanticNode, settings: SemtreeSettings | None = None) -> None:
    """
    Validate a whole semantic tree, stopping at the first violation.

    Nodes are checked breadth-first starting at `root`, each exactly once.
    Returns normally only when every node satisfies its constraint.

    Params:
        root: Root of the semantic tree
        settings: Diagnostic settings, defaults when omitted

    Raises:
        MissingConstraintError: If a visited definition declares no constraint
        ChildrenCardinalityError: On the first node whose children are invalid
    """
    settings = settings or SemtreeSettings()
    visited = 0

    for node in iter_breadth_first(root):
        validate_node(node, settings)
        visited += 1

    logger.debug("Validated %d nodes rooted at %s", visited, root.name)
