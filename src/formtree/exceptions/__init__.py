"""
formtree exception classes.

This package provides the exception types raised for programmer errors
throughout formtree.
"""

from formtree.exceptions.core import (
    DefinitionError,
    FormTreeError,
    MemberNotFoundError,
)

__all__ = [
    "FormTreeError",
    "DefinitionError",
    "MemberNotFoundError",
]
