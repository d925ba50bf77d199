"""
Core type definitions for the formtree value tree.

This module contains the type aliases shared by nodes, rules and the tree
builder: the rule signature and validation results.
"""

from collections.abc import Callable
from typing import Any, Literal, TypeAlias

# A falsy result accepts the value, a non-empty string rejects it
RuleResult = str | Literal[False, 0] | None

Rule: TypeAlias = Callable[[Any], RuleResult]

Rejections = list[str]

# Nested composites produce nested collections
ValidationCollection = dict[str, "Rejections | ValidationCollection"]
