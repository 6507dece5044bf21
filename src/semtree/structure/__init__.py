"""
semtree structure components.

This package provides the children constraint model, node definitions,
the definition registry, conversion and validation.
"""

from semtree.structure.constraints import (
    NO_CHILDREN,
    NO_CONSTRAINTS,
    UNBOUNDED,
    ChildrenAppearance,
    ChildrenConstraint,
    Contains,
    NoChildren,
    NoConstraints,
    any_number,
    at_least_one,
    at_most_one,
    between,
    contains,
    one,
)
from semtree.structure.converter import convert
from semtree.structure.definition import NodeDefinition, NodeDefinitionBuilder
from semtree.structure.registry import NodeRegistrar, NodeRegistry
from semtree.structure.validation import (
    iter_breadth_first,
    validate_node,
    validate_tree,
)

__all__ = [
    "ChildrenAppearance",
    "ChildrenConstraint",
    "Contains",
    "NoChildren",
    "NoConstraints",
    "NO_CHILDREN",
    "NO_CONSTRAINTS",
    "UNBOUNDED",
    "any_number",
    "at_least_one",
    "at_most_one",
    "between",
    "contains",
    "one",
    "NodeDefinition",
    "NodeDefinitionBuilder",
    "NodeRegistrar",
    "NodeRegistry",
    "convert",
    "iter_breadth_first",
    "validate_node",
    "validate_tree",
]
