"""
Schema: single entry point tying registration, conversion and validation together.
"""

import logging
from typing import Any

from semtree.core.node import SemanticNode
from semtree.core.types import RawNode
from semtree.settings import SemtreeSettings
from semtree.structure.converter import convert
from semtree.structure.definition import NodeDefinition, NodeDefinitionBuilder
from semtree.structure.registry import NodeRegistrar, NodeRegistry
from semtree.structure.validation import validate_tree

logger = logging.getLogger(__name__)


class Schema:
    """Coordinator for defining node kinds and reading documents with them.

    Responsibilities:
    - Collect node definitions during setup, in registration order
    - Freeze the registry on first use so conversion sees a fixed set of kinds
    - Convert raw DOM trees into semantic trees sharing one configuration value
    - Validate semantic trees against their children constraints

    Example:
        schema = Schema(config={"base_url": "https://example.org"})
        text = schema.define_node("text").matches(is_text).children(NO_CHILDREN).commit()
        ...
        root = schema.load(document)
    """

    def __init__(self, config: Any = None, settings: SemtreeSettings | None = None):
        """
        Params:
            config: Application configuration passed to every parser call
            settings: Diagnostic settings used by `convert` and `validate`
        """
        self.config = config
        self.settings = settings or SemtreeSettings()
        self._registrar = NodeRegistrar()

    def define_node(self, name: str) -> NodeDefinitionBuilder:
        """Start defining a node kind; finish with `.commit()` on the builder."""
        return self._registrar.define_node(name)

    def commit(self, definition: NodeDefinition) -> None:
        """Register a definition built elsewhere."""
        self._registrar.commit(definition)

    @property
    def registry(self) -> NodeRegistry:
        """The frozen registry. Accessing it ends the setup phase."""
        return self._registrar.freeze()

    def convert(self, raw: RawNode) -> SemanticNode:
        """
        Convert a raw DOM tree into a semantic tree.

        Raises:
            UnmatchedNodeError: If no definition accepts some raw node
        """
        return convert(raw, self.registry, self.config, self.settings)

    def validate(self, node: SemanticNode) -> None:
        """
        Validate a semantic tree breadth-first, failing on the first violation.

        Raises:
            MissingConstraintError: If a definition in the tree has no constraint
            ChildrenCardinalityError: If some node's children violate its constraint
        """
        validate_tree(node, self.settings)

    def load(self, raw: RawNode) -> SemanticNode:
        """Convert and validate in one step."""
        node = self.convert(raw)
        self.validate(node)
        return node
