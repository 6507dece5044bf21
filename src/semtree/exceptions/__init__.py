"""
semtree exception classes.

This package provides all exception types used throughout semtree for
consistent error handling and reporting.
"""

from semtree.exceptions.core import (
    CardinalityError,
    ChildrenCardinalityError,
    ConfigurationError,
    DuplicateAppearanceError,
    DuplicateDefinitionError,
    ErrorContext,
    ErrorLevel,
    IncompleteDefinitionError,
    InvalidAppearanceError,
    MissingConstraintError,
    NoParserDefinedError,
    ParseResultError,
    RegistryFrozenError,
    SemtreeError,
    UnmatchedNodeError,
    ValidationError,
)

__all__ = [
    "SemtreeError",
    "ConfigurationError",
    "MissingConstraintError",
    "DuplicateDefinitionError",
    "DuplicateAppearanceError",
    "InvalidAppearanceError",
    "IncompleteDefinitionError",
    "RegistryFrozenError",
    "UnmatchedNodeError",
    "ValidationError",
    "ChildrenCardinalityError",
    "CardinalityError",
    "NoParserDefinedError",
    "ParseResultError",
    "ErrorContext",
    "ErrorLevel",
]
