"""
Uniform node contract for the formtree value tree.

Scalar and composite nodes both implement `ValueNode`, so a composite can hold
either kind of child and nest to any depth without special-casing.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")


class ValueNode(ABC, Generic[T, R]):
    """
    Base class for every node in a value tree.

    Type parameters:
        T: Type of the value held (or assembled) by the node
        R: Type returned by `validate()`
    """

    @property
    @abstractmethod
    def value(self) -> T | None:
        """Current value of the node."""

    @value.setter
    @abstractmethod
    def value(self, value: Any) -> None: ...

    @property
    @abstractmethod
    def valid(self) -> bool:
        """Validity computed from the state of the last validation pass."""

    @abstractmethod
    def validate(self) -> R:
        """Run validation and return its rejections."""

    @abstractmethod
    def reset(self) -> None:
        """Restore the initial value snapshot."""
