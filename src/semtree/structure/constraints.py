"""
Children constraint model for semtree node definitions.

A children constraint states which children a semantic node may have. It is a
closed set of three variants:

- `NoConstraints`: children are not checked at all
- `NoChildren`: the node must have zero children
- `Contains`: an exhaustive whitelist of child kinds, each with min/max counts

The helper constructors `any_number`, `one`, `at_most_one` and `at_least_one`
produce the `ChildrenAppearance` entries a `Contains` constraint is made of.
"""

import math

from attrs import field, frozen

from semtree.core.types import KindRef, kind_name
from semtree.exceptions import DuplicateAppearanceError, InvalidAppearanceError

UNBOUNDED = math.inf


def _is_count(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@frozen
class ChildrenAppearance:
    """A kind of child that must appear n times, where min <= n <= max."""

    kind: KindRef
    min: int = 0
    max: int | float = UNBOUNDED

    def __attrs_post_init__(self):
        if not _is_count(self.min):
            raise InvalidAppearanceError(
                self.name, f"min {self.min!r} is not an integer"
            )
        if self.max != UNBOUNDED and not _is_count(self.max):
            raise InvalidAppearanceError(
                self.name, f"max {self.max!r} is neither an integer nor unbounded"
            )
        if self.min < 0:
            raise InvalidAppearanceError(self.name, f"min {self.min} is negative")
        if self.max < self.min:
            raise InvalidAppearanceError(
                self.name, f"max {self.max} is smaller than min {self.min}"
            )

    @property
    def name(self) -> str:
        """Name of the kind this appearance refers to."""
        return kind_name(self.kind)

    @property
    def is_unbounded(self) -> bool:
        return self.max == UNBOUNDED

    def accepts(self, count: int) -> bool:
        """Check whether `count` children of this kind satisfy the bounds."""
        return self.min <= count <= self.max

    def describe(self) -> str:
        """Render the bounds, e.g. "(min: 1, max: inf)"."""
        upper = "inf" if self.is_unbounded else str(self.max)
        return f"(min: {self.min}, max: {upper})"


@frozen
class NoConstraints:
    """Children are not checked."""

    def __str__(self) -> str:
        return "NoConstraints"


@frozen
class NoChildren:
    """The node must not have any children."""

    def __str__(self) -> str:
        return "None"


@frozen
class Contains:
    """
    Exhaustive whitelist of child kinds.

    Every kind present among the children must be listed, and each listed
    kind must appear within its bounds. A kind may be listed only once.
    """

    appearances: tuple[ChildrenAppearance, ...] = field(converter=tuple)

    def __attrs_post_init__(self):
        seen = set()
        for appearance in self.appearances:
            if appearance.name in seen:
                raise DuplicateAppearanceError(appearance.name)
            seen.add(appearance.name)

    @property
    def names(self) -> list[str]:
        return [appearance.name for appearance in self.appearances]

    def __str__(self) -> str:
        inner = ", ".join(f"{a.name} {a.describe()}" for a in self.appearances)
        return f"Contains[{inner}]"


ChildrenConstraint = NoConstraints | NoChildren | Contains

NO_CONSTRAINTS = NoConstraints()
NO_CHILDREN = NoChildren()


def any_number(kind: KindRef) -> ChildrenAppearance:
    """Allow a kind of child to appear any number of times, including zero."""
    return ChildrenAppearance(kind, 0, UNBOUNDED)


def one(kind: KindRef) -> ChildrenAppearance:
    """Require a kind of child to appear exactly once."""
    return ChildrenAppearance(kind, 1, 1)


def at_most_one(kind: KindRef) -> ChildrenAppearance:
    """Allow a kind of child to appear at most once."""
    return ChildrenAppearance(kind, 0, 1)


def at_least_one(kind: KindRef) -> ChildrenAppearance:
    """Require a kind of child to appear at least once."""
    return ChildrenAppearance(kind, 1, UNBOUNDED)


def between(kind: KindRef, min: int, max: int | float = UNBOUNDED) -> ChildrenAppearance:
    return ChildrenAppearance(kind, min, max)


def contains(*appearances: ChildrenAppearance) -> Contains:
    """
    Build a Contains constraint from appearances.

    Example:
        contains(one(title), any_number(paragraph))
    """
    return Contains(appearances)
