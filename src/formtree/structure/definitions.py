"""
Field definitions consumed by the tree builder.

A definition is either a scalar field definition or a group definition holding
nested definitions. The two are told apart by their `kind` tag. Raw mappings
are accepted at the boundary: a mapping without `kind` is a scalar definition,
a group carries `kind="group"` and a `members` mapping.

Example:
    {
        "name": {"label": "Name", "required": True},
        "address": {
            "kind": "group",
            "members": {"city": {"label": "City"}},
        },
    }
"""

from collections.abc import Mapping
from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
    ValidationError,
)

from formtree.core.types import Rule
from formtree.exceptions import DefinitionError

_DEFINITION_CONFIG = ConfigDict(
    extra="forbid", arbitrary_types_allowed=True, frozen=True
)


class ScalarFieldDefinition(BaseModel):
    """Definition of a single field, built into a `ScalarNode`."""

    model_config = _DEFINITION_CONFIG

    kind: Literal["scalar"] = "scalar"
    label: str | None = Field(default=None, description="Display label")
    placeholder: str | None = Field(default=None, description="Display placeholder")
    required: bool = Field(default=False, description="Append the non-null rule")
    initial_value: Any = Field(
        default=None, description="Initial value, restored on reset"
    )
    rules: tuple[Rule, ...] = Field(default=(), description="Ordered rule chain")


class GroupFieldDefinition(BaseModel):
    """Definition of a nested group, built into a `CompositeNode`."""

    model_config = _DEFINITION_CONFIG

    kind: Literal["group"] = "group"
    members: dict[str, "FieldDefinition"] = Field(
        default_factory=dict, description="Nested definitions by property name"
    )


def _definition_kind(value: Any) -> str:
    if isinstance(value, Mapping):
        return value.get("kind", "scalar")
    return getattr(value, "kind", "scalar")


FieldDefinition = Annotated[
    Union[
        Annotated[ScalarFieldDefinition, Tag("scalar")],
        Annotated[GroupFieldDefinition, Tag("group")],
    ],
    Discriminator(_definition_kind),
]

GroupFieldDefinition.model_rebuild()

_definitions_adapter = TypeAdapter(dict[str, FieldDefinition])


def parse_definitions(
    definitions: Mapping[str, "FieldDefinition | Mapping[str, Any]"],
) -> dict[str, ScalarFieldDefinition | GroupFieldDefinition]:
    """Parse raw definitions into definition models.

    Definition models pass through unchanged, raw mappings are validated.

    Params:
        definitions: Mapping of property name to a definition model or raw mapping

    Returns:
        Mapping of property name to parsed definition, in input order

    Raises:
        DefinitionError: If any definition is malformed
    """
    try:
        return _definitions_adapter.validate_python(definitions)
    except ValidationError as e:
        first = e.errors()[0]
        path = ".".join(str(part) for part in first["loc"])
        raise DefinitionError(path, first["msg"]) from e
