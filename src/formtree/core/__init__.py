"""
Core formtree components.

This package provides the node contract and the type aliases shared across
the formtree package.
"""

from formtree.core.types import Rejections, Rule, RuleResult, ValidationCollection
from formtree.core.value_node import ValueNode

__all__ = [
    "ValueNode",
    "Rejections",
    "Rule",
    "RuleResult",
    "ValidationCollection",
]
