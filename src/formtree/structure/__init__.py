"""
Value tree construction.

This package provides the field definition models, the build options and the
tree builder.
"""

from formtree.structure.builder import build_tree
from formtree.structure.definitions import (
    FieldDefinition,
    GroupFieldDefinition,
    ScalarFieldDefinition,
    parse_definitions,
)
from formtree.structure.options import BuildOptions

__all__ = [
    "build_tree",
    "BuildOptions",
    "FieldDefinition",
    "GroupFieldDefinition",
    "ScalarFieldDefinition",
    "parse_definitions",
]
