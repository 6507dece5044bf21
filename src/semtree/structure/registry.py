"""
Registry classes for node definitions.

Registration happens in two phases. During setup a mutable `NodeRegistrar`
accumulates definitions in order; `freeze` then produces an immutable
`NodeRegistry` that conversion and lookups read from. Registration order is
significant: when several matchers accept the same raw node, the definition
registered first wins.
"""

import logging
from collections.abc import Iterator
from types import MappingProxyType
from typing import Any

from semtree.core.types import KindRef, kind_name
from semtree.exceptions import DuplicateDefinitionError, RegistryFrozenError
from semtree.structure.definition import NodeDefinition, NodeDefinitionBuilder

logger = logging.getLogger(__name__)


class NodeRegistry:
    """Immutable, ordered collection of node definitions.

    Holds the definitions in registration order for first-match conversion
    and a read-only name index for constant-time lookup.
    """

    def __init__(self, definitions: tuple[NodeDefinition, ...] = ()):
        self._definitions = tuple(definitions)
        self._by_name = MappingProxyType({d.name: d for d in self._definitions})

    def match(self, raw_node: Any) -> NodeDefinition | None:
        """
        Find the definition a raw node belongs to.

        Scans definitions in registration order and returns the first whose
        matcher accepts the node. Narrower matchers must therefore be
        registered before broader ones.

        Params:
            raw_node: Raw DOM node to classify

        Returns:
            The first matching NodeDefinition, None if nothing matches
        """
        for definition in self._definitions:
            if definition.matches(raw_node):
                return definition
        return None

    def get(self, kind: KindRef) -> NodeDefinition | None:
        """Look up a definition by name or by an equal definition."""
        return self._by_name.get(kind_name(kind))

    @property
    def names(self) -> list[str]:
        return list(self._by_name)

    def __getitem__(self, kind: KindRef) -> NodeDefinition:
        return self._by_name[kind_name(kind)]

    def __contains__(self, kind: object) -> bool:
        if isinstance(kind, (str, NodeDefinition)):
            return kind_name(kind) in self._by_name
        return False

    def __iter__(self) -> Iterator[NodeDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        return f"NodeRegistry({', '.join(self.names)})"


class NodeRegistrar:
    """Mutable setup-phase registry.

    Responsibilities:
    - Hand out `NodeDefinitionBuilder`s bound to this registrar
    - Accept committed definitions in order, rejecting duplicate names
    - Produce the immutable `NodeRegistry` once setup is complete

    After `freeze` no further definitions are accepted.
    """

    def __init__(self):
        self._definitions: list[NodeDefinition] = []
        self._names: set[str] = set()
        self._frozen: NodeRegistry | None = None

    def define_node(self, name: str) -> NodeDefinitionBuilder:
        """
        Start defining a new node kind.

        Params:
            name: Unique name of the kind

        Returns:
            A builder that registers with this registrar on `commit()`
        """
        return NodeDefinitionBuilder(name, self)

    def commit(self, definition: NodeDefinition) -> None:
        """
        Register a finished definition.

        Params:
            definition: Definition to append to the registration order

        Raises:
            RegistryFrozenError: If `freeze` has already been called
            DuplicateDefinitionError: If the name is already registered
        """
        if self._frozen is not None:
            raise RegistryFrozenError(definition.name)
        if definition.name in self._names:
            raise DuplicateDefinitionError(definition.name)

        self._definitions.append(definition)
        self._names.add(definition.name)
        logger.debug("Registered node definition %r", definition.name)

    @property
    def is_frozen(self) -> bool:
        return self._frozen is not None

    def freeze(self) -> NodeRegistry:
        """
        End the setup phase.

        Calling this more than once returns the same registry.

        Returns:
            The immutable NodeRegistry holding every committed definition
        """
        if self._frozen is None:
            self._frozen = NodeRegistry(tuple(self._definitions))
            logger.debug("Froze registry with %d definitions", len(self._frozen))
        return self._frozen

    def __len__(self) -> int:
        return len(self._definitions)
