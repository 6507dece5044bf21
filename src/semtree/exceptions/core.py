"""
Exception classes for semtree conversion, validation and extraction.

This module defines specific exception types for the error conditions that can
occur while registering node definitions, converting a document tree,
validating a semantic tree and reading data back out of it.
"""

from dataclasses import dataclass
from enum import Enum

DEFAULT_MAX_DIAGNOSTIC_LENGTH = 200


class ErrorLevel(Enum):
    """Error message detail level for end users vs developers."""

    USER = "user"  # Semantic node rendering and line only
    DEVELOPER = "developer"  # Also includes the raw document node rendering


def truncate(text: str, length: int = DEFAULT_MAX_DIAGNOSTIC_LENGTH) -> str:
    """
    Shorten a diagnostic rendering to at most `length` characters.

    Params:
        text: Rendering to shorten
        length: Maximum length of the result, including the ellipsis

    Returns:
        The original text, or its prefix followed by "..." when too long
    """
    if len(text) <= length:
        return text
    return text[: max(length - 3, 0)] + "..."


@dataclass
class ErrorContext:
    """
    Context information for error messages.

    Captures where an error occurred in both semantic terms (the rendered
    semantic node) and document terms (the raw node and its source line).
    Supports formatting at different detail levels for user-facing vs
    developer debugging.

    Params:
        node: Rendering of the semantic node, e.g. "<list [<item>]>"
        raw_node: Rendering of the raw document node it was converted from
        line: Source line number of the raw node, when the DOM records one
        max_length: Renderings longer than this are truncated
    """

    node: str | None = None
    raw_node: str | None = None
    line: int | None = None
    max_length: int = DEFAULT_MAX_DIAGNOSTIC_LENGTH

    def format_location(self, error_level: ErrorLevel) -> str:
        """
        Format location information based on error level.

        Params:
            error_level: Whether to show USER or DEVELOPER level details

        Returns:
            Formatted location string with appropriate detail level
        """
        lines = []

        if self.node is not None:
            lines.append(f"Node: {truncate(self.node, self.max_length)}")

        if error_level == ErrorLevel.DEVELOPER and self.raw_node is not None:
            lines.append(f"DOM Node: {truncate(self.raw_node, self.max_length)}")

        if self.line is not None:
            lines.append(f"Line: {self.line}")

        return "\n".join(lines)


class SemtreeError(Exception):
    """Base exception for all semtree errors."""

    pass


class ConfigurationError(SemtreeError):
    """Base exception for mistakes in node definitions or registry setup."""

    pass


class MissingConstraintError(ConfigurationError):
    """Raised when a node definition used in validation has no children constraint."""

    def __init__(self, definition_name: str):
        """
        Initialize the exception.

        Params:
            definition_name: Name of the definition lacking a constraint
        """
        self.definition_name = definition_name
        super().__init__(f"No children constraints defined for {definition_name}")


class DuplicateDefinitionError(ConfigurationError):
    """Raised when committing a definition whose name is already registered."""

    def __init__(self, definition_name: str):
        """
        Initialize the exception.

        Params:
            definition_name: The name that is already taken
        """
        self.definition_name = definition_name
        super().__init__(f"Node definition '{definition_name}' is already registered")


class DuplicateAppearanceError(ConfigurationError):
    """Raised when one Contains constraint lists the same kind twice."""

    def __init__(self, kind_name: str):
        """
        Initialize the exception.

        Params:
            kind_name: The kind that appears more than once
        """
        self.kind_name = kind_name
        super().__init__(
            f"Kind '{kind_name}' appears more than once in a contains constraint"
        )


class InvalidAppearanceError(ConfigurationError):
    """Raised when an appearance has bounds that can never be satisfied."""

    def __init__(self, kind_name: str, reason: str):
        """
        Initialize the exception.

        Params:
            kind_name: The kind the appearance refers to
            reason: Why the bounds are invalid
        """
        self.kind_name = kind_name
        self.reason = reason
        super().__init__(f"Invalid appearance of '{kind_name}': {reason}")


class IncompleteDefinitionError(ConfigurationError):
    """Raised when a definition is built before all required parts are supplied."""

    def __init__(self, definition_name: str, missing: str):
        """
        Initialize the exception.

        Params:
            definition_name: Name of the definition being built
            missing: The part that was never supplied
        """
        self.definition_name = definition_name
        self.missing = missing
        super().__init__(f"Node definition '{definition_name}' has no {missing}")


class RegistryFrozenError(ConfigurationError):
    """Raised when registering a definition after conversion has started."""

    def __init__(self, definition_name: str):
        """
        Initialize the exception.

        Params:
            definition_name: Name of the definition that arrived too late
        """
        self.definition_name = definition_name
        super().__init__(
            f"Cannot commit '{definition_name}': the registry is already frozen"
        )


class UnmatchedNodeError(SemtreeError):
    """Raised when no registered definition accepts a raw document node."""

    def __init__(
        self,
        raw_node: str,
        line: int | None = None,
        max_length: int = DEFAULT_MAX_DIAGNOSTIC_LENGTH,
    ):
        """
        Initialize the exception.

        Params:
            raw_node: Rendering of the raw node nobody matched
            line: Source line of the raw node, if known
            max_length: The rendering is truncated beyond this many characters
        """
        self.raw_node = raw_node
        self.line = line
        message = f"No definition found for {truncate(raw_node, max_length)}"
        if line is not None:
            message += f" at line {line}"
        super().__init__(message)


class ValidationError(SemtreeError):
    """Base exception for semantic trees that do not satisfy their constraints."""

    pass


class ChildrenCardinalityError(ValidationError):
    """Raised when a node's children violate its NoChildren or Contains constraint."""

    def __init__(
        self,
        actual: str,
        expected: str,
        context: ErrorContext | None = None,
        error_level: ErrorLevel = ErrorLevel.DEVELOPER,
    ):
        """
        Initialize the exception.

        Params:
            actual: What the node's children look like, e.g. "has 2 of item"
            expected: What the constraint requires
            context: ErrorContext locating the offending node
            error_level: Level of detail to show in error message
        """
        self.actual = actual
        self.expected = expected
        self.context = context
        self.error_level = error_level

        lines = []
        if context:
            location_info = context.format_location(error_level)
            if location_info:
                lines.append(location_info)
        lines.append(f"Actual: {actual}")
        lines.append(f"Expected: {expected}")

        super().__init__("\n".join(lines))


class CardinalityError(SemtreeError):
    """Raised when an accessor finds the wrong number of matching nodes."""

    def __init__(self, kind_name: str, found: int, relation: str = "descendants"):
        """
        Initialize the exception.

        Params:
            kind_name: The kind being looked up
            found: How many nodes of that kind were found
            relation: "children" or "descendants", for the message
        """
        self.kind_name = kind_name
        self.found = found
        self.relation = relation
        super().__init__(f"Found {found} {relation} of {kind_name}")


class NoParserDefinedError(SemtreeError):
    """Raised when parse is called on a node whose definition has no parser."""

    def __init__(self, definition_name: str):
        """
        Initialize the exception.

        Params:
            definition_name: Name of the definition without a parser
        """
        self.definition_name = definition_name
        super().__init__(f"No parser defined for {definition_name}")


class ParseResultError(SemtreeError):
    """Raised when a parser's result does not match the declared result type."""

    def __init__(self, definition_name: str, reason: str):
        """
        Initialize the exception.

        Params:
            definition_name: Name of the definition whose parser misbehaved
            reason: The underlying validation failure
        """
        self.definition_name = definition_name
        self.reason = reason
        super().__init__(
            f"Parser of '{definition_name}' returned an invalid result: {reason}"
        )
