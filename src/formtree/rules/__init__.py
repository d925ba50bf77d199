"""
Built-in validation rules.

Rules are plain callables; any function taking a value and returning a falsy
result or a rejection message can be used alongside these.
"""

from formtree.rules.builtin import (
    NUMBER_MESSAGE,
    REQUIRED_MESSAGE,
    SELECT_MESSAGE,
    at_least_one,
    is_empty,
    must_be_number,
    non_nullable,
    to_number,
)

__all__ = [
    "REQUIRED_MESSAGE",
    "NUMBER_MESSAGE",
    "SELECT_MESSAGE",
    "at_least_one",
    "is_empty",
    "must_be_number",
    "non_nullable",
    "to_number",
]
