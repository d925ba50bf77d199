"""
formtree - composable value and validation trees for form input

formtree builds a tree of scalar and composite nodes from field definitions.
Every node reports a value and a validity state, validates against its rules,
and resets to its initial snapshot.
"""

import logging
from importlib.metadata import version

from formtree.core import ValueNode
from formtree.nodes import CompositeNode, FieldState, ScalarNode, ScalarOptions
from formtree.rules import at_least_one, must_be_number, non_nullable
from formtree.structure import (
    BuildOptions,
    GroupFieldDefinition,
    ScalarFieldDefinition,
    build_tree,
)

__version__ = version("formtree")

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "ValueNode",
    "ScalarNode",
    "ScalarOptions",
    "FieldState",
    "CompositeNode",
    "BuildOptions",
    "ScalarFieldDefinition",
    "GroupFieldDefinition",
    "build_tree",
    "non_nullable",
    "must_be_number",
    "at_least_one",
]
