"""
semtree - Convert DOM trees into validated, strongly shaped semantic trees

semtree lets an application declare node kinds with matchers, children
constraints and parsers, then convert and validate markup documents against them.
"""

from importlib.metadata import version

from semtree.core import (
    SemanticNode,
    is_doctype,
    is_element,
    is_processing_instruction,
    is_text,
)
from semtree.exceptions import (
    CardinalityError,
    ChildrenCardinalityError,
    MissingConstraintError,
    NoParserDefinedError,
    SemtreeError,
    UnmatchedNodeError,
)
from semtree.schema import Schema
from semtree.settings import SemtreeSettings
from semtree.structure import (
    NO_CHILDREN,
    NO_CONSTRAINTS,
    NodeDefinition,
    NodeRegistrar,
    NodeRegistry,
    any_number,
    at_least_one,
    at_most_one,
    contains,
    convert,
    one,
    validate_tree,
)

__version__ = version("semtree")

__all__ = [
    "__version__",
    "Schema",
    "SemtreeSettings",
    "SemanticNode",
    "NodeDefinition",
    "NodeRegistrar",
    "NodeRegistry",
    "NO_CHILDREN",
    "NO_CONSTRAINTS",
    "any_number",
    "at_least_one",
    "at_most_one",
    "contains",
    "one",
    "convert",
    "validate_tree",
    "is_doctype",
    "is_element",
    "is_processing_instruction",
    "is_text",
    "SemtreeError",
    "UnmatchedNodeError",
    "MissingConstraintError",
    "ChildrenCardinalityError",
    "CardinalityError",
    "NoParserDefinedError",
]
