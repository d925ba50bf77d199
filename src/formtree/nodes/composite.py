"""
Composite (group) nodes of the value tree.

A composite node maps property names to child nodes, scalar or composite, and
implements the same contract as a scalar node by fanning every operation out
over its members.
"""

import logging
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any

from formtree.core.types import ValidationCollection
from formtree.core.value_node import ValueNode
from formtree.exceptions import MemberNotFoundError

if TYPE_CHECKING:
    from formtree.structure.definitions import FieldDefinition
    from formtree.structure.options import BuildOptions

logger = logging.getLogger(__name__)


class CompositeNode(ValueNode[dict[str, Any], ValidationCollection]):
    """Group node whose value is the record of its members' values.

    Member order follows insertion order and is only used for enumeration.
    The composite keeps no state of its own beyond the member mapping.
    """

    @classmethod
    def from_definitions(
        cls,
        definitions: Mapping[str, "FieldDefinition | Mapping[str, Any]"],
        options: "BuildOptions | None" = None,
    ) -> "CompositeNode":
        """Build a composite from field definitions.

        See `formtree.structure.builder.build_tree`.
        """
        from formtree.structure.builder import build_tree

        return build_tree(definitions, options)

    def __init__(self, members: Mapping[str, ValueNode]):
        self._members = dict(members)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(members={list(self._members)!r})"

    def __getitem__(self, name: str) -> ValueNode:
        try:
            return self._members[name]
        except KeyError:
            raise MemberNotFoundError(name, list(self._members)) from None

    def __contains__(self, name: object) -> bool:
        return name in self._members

    def __iter__(self) -> Iterator[str]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    @property
    def members(self) -> Mapping[str, ValueNode]:
        return self._members

    @property
    def value(self) -> dict[str, Any]:
        return {name: member.value for name, member in self._members.items()}

    @value.setter
    def value(self, value: Mapping[str, Any]) -> None:
        """Write each member's entry of `value` into that member.

        Entries without a matching member are ignored. Members without an entry
        receive `None`, which still marks them touched.

        Raises:
            TypeError: If `value` is not a mapping.
        """
        if not isinstance(value, Mapping):
            raise TypeError(
                f"{type(self).__name__} value must be a mapping, got {type(value).__name__}"
            )
        for name, member in self._members.items():
            member.value = value.get(name)

    @property
    def valid(self) -> bool:
        return all(member.valid for member in self._members.values())

    def validate(self) -> ValidationCollection:
        """Validate every member and collect the results by member name."""
        logger.debug("Validating composite with %d members", len(self._members))
        return {name: member.validate() for name, member in self._members.items()}

    def reset(self) -> None:
        logger.debug("Resetting composite with %d members", len(self._members))
        for member in self._members.values():
            member.reset()
