"""
SemanticNode: the typed tree produced by conversion.

Every semantic node mirrors one raw DOM node and is annotated with the
NodeDefinition it matched. Nodes expose lookups over their children and
descendants and delegate value extraction to their definition's parser.
"""

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from functools import lru_cache
from typing import TYPE_CHECKING, Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from semtree.core.dom import node_line
from semtree.core.types import KindRef, RawNode, kind_name
from semtree.exceptions import (
    CardinalityError,
    NoParserDefinedError,
    ParseResultError,
)

if TYPE_CHECKING:
    from semtree.structure.definition import NodeDefinition


@lru_cache(maxsize=None)
def _type_adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


@dataclass(frozen=True, eq=False, repr=False)
class SemanticNode:
    """
    Node of a semantic tree.

    Params:
        definition: The NodeDefinition whose matcher accepted `raw`
        children: Converted children, in document order
        raw: The raw DOM node this node was converted from
        config: Application configuration shared by the whole tree
    """

    definition: "NodeDefinition"
    children: tuple["SemanticNode", ...] = field(default_factory=tuple)
    raw: RawNode = None
    config: Any = None

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def line(self) -> int | None:
        """Source line of the raw node, if the DOM tracks it."""
        return node_line(self.raw)

    def render(self, max_length: int | None = None) -> str:
        """
        Compact rendering such as "<list [<item>, <item>]>", used in diagnostics.

        The subtree is walked with an explicit stack, so depth is not limited by
        the recursion limit.

        Params:
            max_length: Stop once the rendering is longer than this; the result
                is then a prefix of the full rendering. None renders everything.
        """
        parts = []
        length = 0
        stack: list["SemanticNode | str"] = [self]

        while stack:
            if max_length is not None and length > max_length:
                break

            item = stack.pop()
            if isinstance(item, str):
                text = item
            elif not item.children:
                text = f"<{item.name}>"
            else:
                text = f"<{item.name} ["
                stack.append("]>")
                for i, child in enumerate(reversed(item.children)):
                    if i:
                        stack.append(", ")
                    stack.append(child)

            parts.append(text)
            length += len(text)

        return "".join(parts)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"SemanticNode({self})"

    def parse(self, state: Any = None) -> Any:
        """
        Extract a value from this node using its definition's parser.

        The parser is called as parser(node, state, config). When the definition
        declares a result type, the value is validated and coerced with pydantic.

        Params:
            state: Application state threaded through parse calls; the parser
                may mutate it

        Returns:
            Whatever the parser returns

        Raises:
            NoParserDefinedError: If the definition has no parser
            ParseResultError: If the result does not conform to the declared type
        """
        parser = self.definition.parser
        if parser is None:
            raise NoParserDefinedError(self.name)

        result = parser(self, state, self.config)

        if self.definition.returns is None:
            return result

        try:
            return _type_adapter(self.definition.returns).validate_python(result)
        except PydanticValidationError as e:
            raise ParseResultError(self.name, str(e)) from e

    def get_children(self, kind: KindRef) -> list["SemanticNode"]:
        """Return all direct children of a kind, in document order."""
        name = kind_name(kind)
        return [child for child in self.children if child.name == name]

    def get_child(self, kind: KindRef) -> "SemanticNode":
        """
        Find the single direct child of a kind.

        Raises:
            CardinalityError: If there are no such children, or more than one
        """
        found = self.get_children(kind)
        if len(found) != 1:
            raise CardinalityError(kind_name(kind), len(found), "children")
        return found[0]

    def iter_descendants(self) -> Iterator["SemanticNode"]:
        """Yield every descendant breadth-first, excluding this node."""
        queue = deque(self.children)
        while queue:
            node = queue.popleft()
            yield node
            queue.extend(node.children)

    def get_all_descendants(self, kind: KindRef) -> list["SemanticNode"]:
        """Return all descendants of a kind in breadth-first order; empty if none."""
        name = kind_name(kind)
        return [node for node in self.iter_descendants() if node.name == name]

    def get_descendant(self, kind: KindRef) -> "SemanticNode":
        """
        Find the single descendant of a kind.

        Raises:
            CardinalityError: If there are no such descendants, or more than one
        """
        found = self.get_all_descendants(kind)
        if len(found) != 1:
            raise CardinalityError(kind_name(kind), len(found))
        return found[0]

    def get_descendant_or_none(self, kind: KindRef) -> "SemanticNode | None":
        """
        Find the single descendant of a kind, tolerating its absence.

        Returns:
            The descendant, or None if there is none

        Raises:
            CardinalityError: If there is more than one
        """
        found = self.get_all_descendants(kind)
        if not found:
            return None
        if len(found) > 1:
            raise CardinalityError(kind_name(kind), len(found))
        return found[0]
