"""
Tree builder turning field definitions into a live value tree.

The builder walks the definitions depth-first. Scalar definitions become
`ScalarNode` leaves; group definitions recurse into nested `CompositeNode`
instances. The same `BuildOptions` instance is handed to every level.
"""

import logging
from collections.abc import Mapping
from copy import deepcopy
from typing import Any

from formtree.nodes.composite import CompositeNode
from formtree.nodes.scalar import FieldState, ScalarNode, ScalarOptions
from formtree.structure.definitions import (
    FieldDefinition,
    GroupFieldDefinition,
    ScalarFieldDefinition,
    parse_definitions,
)
from formtree.structure.options import BuildOptions

logger = logging.getLogger(__name__)


def build_tree(
    definitions: Mapping[str, FieldDefinition | Mapping[str, Any]],
    options: BuildOptions | None = None,
) -> CompositeNode:
    """Build a composite node from field definitions.

    Params:
        definitions: Mapping of property name to a definition model or raw mapping
        options: Options applied to every node in the tree, defaults to `BuildOptions()`

    Returns:
        Root `CompositeNode` whose members mirror the definitions

    Raises:
        DefinitionError: If any definition is malformed
    """
    options = options or BuildOptions()
    return _build_composite(parse_definitions(definitions), options, "")


def _build_composite(
    definitions: Mapping[str, ScalarFieldDefinition | GroupFieldDefinition],
    options: BuildOptions,
    path: str,
) -> CompositeNode:
    members = {}
    for name, definition in definitions.items():
        tag = f"{path}.{name}" if path else name
        if isinstance(definition, GroupFieldDefinition):
            members[name] = _build_composite(definition.members, options, tag)
            logger.debug("Built group '%s' with %d members", tag, len(definition.members))
        else:
            members[name] = _build_scalar(name, definition, options)
            logger.debug("Built field '%s' (required=%s)", tag, definition.required)
    return CompositeNode(members)


def _build_scalar(
    name: str, definition: ScalarFieldDefinition, options: BuildOptions
) -> ScalarNode:
    state = FieldState(
        name=name,
        label=definition.label,
        placeholder=definition.placeholder,
        value=deepcopy(definition.initial_value),
    )
    return ScalarNode.from_state(
        state,
        definition.rules,
        ScalarOptions(
            initial_value=definition.initial_value,
            required=definition.required,
            validate_all_rules=options.validate_all_rules,
        ),
    )
