"""
Node definitions: the declared kinds a semantic tree is built from.

A `NodeDefinition` bundles everything semtree knows about one kind of node:
the matcher deciding which raw DOM nodes belong to it, the constraint on its
children, and an optional parser that extracts a value from a semantic node.
Definitions are assembled with `NodeDefinitionBuilder` and are immutable once
built.
"""

from typing import TYPE_CHECKING, Any

from attrs import field, frozen

from semtree.core.types import Matcher, Parser
from semtree.exceptions import IncompleteDefinitionError
from semtree.structure.constraints import ChildrenConstraint

if TYPE_CHECKING:
    from semtree.structure.registry import NodeRegistrar


@frozen
class NodeDefinition:
    """
    Immutable descriptor of one semantic node kind.

    Equality and hashing use the name only, so a definition and a copy rebuilt
    with the same name are interchangeable in lookups.

    Params:
        name: Unique name within a registry, used for lookups and diagnostics
        matcher: Predicate accepting the raw nodes that belong to this kind
        children_constraint: Rule for the node's children; None is a setup error
            reported when the node is validated
        parser: Optional callable invoked as parser(node, state, config)
        returns: Optional type the parser result is validated against
    """

    name: str
    matcher: Matcher = field(eq=False, repr=False)
    children_constraint: ChildrenConstraint | None = field(default=None, eq=False)
    parser: Parser | None = field(default=None, eq=False, repr=False)
    returns: Any = field(default=None, eq=False, repr=False)

    def matches(self, raw_node: Any) -> bool:
        return bool(self.matcher(raw_node))

    @property
    def has_parser(self) -> bool:
        return self.parser is not None

    def __str__(self) -> str:
        return self.name


class NodeDefinitionBuilder:
    """Incrementally assembles a NodeDefinition.

    Obtained from `NodeRegistrar.define_node` (or `Schema.define_node`); each
    setter returns the builder so calls can be chained:

        paragraph = (
            schema.define_node("paragraph")
            .matches(lambda n: is_element(n, "p"))
            .children(contains(any_number(text)))
            .parses(lambda node, state, config: node.raw.toxml())
            .commit()
        )
    """

    def __init__(self, name: str, registrar: "NodeRegistrar | None" = None):
        self.name = name
        self._registrar = registrar
        self._matcher: Matcher | None = None
        self._children_constraint: ChildrenConstraint | None = None
        self._parser: Parser | None = None
        self._returns: Any = None

    def matches(self, matcher: Matcher) -> "NodeDefinitionBuilder":
        """Set the predicate selecting raw nodes of this kind."""
        self._matcher = matcher
        return self

    def children(self, constraint: ChildrenConstraint) -> "NodeDefinitionBuilder":
        """Set the constraint on this kind's children."""
        self._children_constraint = constraint
        return self

    def parses(self, parser: Parser, returns: Any = None) -> "NodeDefinitionBuilder":
        """
        Set the parser extracting a value from nodes of this kind.

        Params:
            parser: Callable invoked as parser(node, state, config)
            returns: Optional type (e.g. a pydantic model) the result must conform to
        """
        self._parser = parser
        self._returns = returns
        return self

    def build(self) -> NodeDefinition:
        """
        Produce the immutable definition without registering it.

        Raises:
            IncompleteDefinitionError: If no matcher was supplied
        """
        if self._matcher is None:
            raise IncompleteDefinitionError(self.name, "matcher")

        return NodeDefinition(
            name=self.name,
            matcher=self._matcher,
            children_constraint=self._children_constraint,
            parser=self._parser,
            returns=self._returns,
        )

    def commit(self) -> NodeDefinition:
        """
        Build the definition and register it with the owning registrar.

        Returns:
            The registered NodeDefinition

        Raises:
            IncompleteDefinitionError: If no matcher was supplied or the builder
                was created without a registrar
        """
        if self._registrar is None:
            raise IncompleteDefinitionError(self.name, "registrar to commit to")
        definition = self.build()
        self._registrar.commit(definition)
        return definition
