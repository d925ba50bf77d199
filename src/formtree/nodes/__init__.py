"""
Value tree nodes.

This package provides the two node kinds of a value tree: scalar leaves and
composite groups.
"""

from formtree.nodes.composite import CompositeNode
from formtree.nodes.scalar import FieldState, ScalarNode, ScalarOptions

__all__ = [
    "CompositeNode",
    "FieldState",
    "ScalarNode",
    "ScalarOptions",
]
