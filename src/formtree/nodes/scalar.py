"""
Scalar (leaf) nodes of the value tree.

A scalar node owns the state of a single form field: its value, whether the
value has been touched, and the rejections produced by its last validation
pass. It validates the value against an ordered chain of rules.
"""

from collections.abc import Iterable
from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any

from attrs import frozen

from formtree.core.types import Rejections, Rule
from formtree.core.value_node import ValueNode
from formtree.rules.builtin import non_nullable


@dataclass
class FieldState:
    """Mutable state of a single field."""

    name: str
    label: str | None = None
    placeholder: str | None = None
    value: Any = None
    touched: bool = False
    rejections: Rejections = field(default_factory=list)


@frozen
class ScalarOptions:
    """Construction options of a scalar node.

    Params:
        initial_value: Snapshot restored by `reset()`, deep-copied on construction
        required: Append the non-null rule to the rule chain
        validate_all_rules: Collect every rejection instead of stopping at the first
    """

    initial_value: Any = None
    required: bool = False
    validate_all_rules: bool = False


class ScalarNode(ValueNode[Any, Rejections]):
    """Leaf node holding one field value and its rule chain.

    Writing `value` marks the node touched but never re-runs validation:
    `rejections` only changes on `validate()`.
    """

    @classmethod
    def from_state(
        cls,
        state: FieldState,
        rules: Iterable[Rule] = (),
        options: ScalarOptions | None = None,
    ) -> "ScalarNode":
        return cls(state, rules, options)

    def __init__(
        self,
        state: FieldState,
        rules: Iterable[Rule] = (),
        options: ScalarOptions | None = None,
    ):
        self._state = state
        self._options = options or ScalarOptions()
        chain = list(rules)
        if self._options.required:
            chain.append(non_nullable)
        self._rules = tuple(chain)
        self._initial_value = deepcopy(self._options.initial_value)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, value={self.value!r}, "
            f"touched={self.touched}, rejections={self.rejections!r})"
        )

    @property
    def name(self) -> str:
        return self._state.name

    @property
    def label(self) -> str | None:
        return self._state.label

    @property
    def placeholder(self) -> str | None:
        return self._state.placeholder

    @property
    def touched(self) -> bool:
        return self._state.touched

    @property
    def rejections(self) -> Rejections:
        return self._state.rejections

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    @property
    def initial_value(self) -> Any:
        return self._initial_value

    @property
    def required(self) -> bool:
        return self._options.required

    @property
    def value(self) -> Any:
        return self._state.value

    @value.setter
    def value(self, value: Any) -> None:
        self._state.value = value
        if not self._state.touched:
            self._state.touched = True

    @property
    def valid(self) -> bool:
        """Report validity from the touched flag and the last rejections.

        The node counts as valid when it was never touched, or when the last
        validation pass left rejections behind. A touched node that passed
        validation is reported as not valid. Callers depend on this exact
        polarity, so it is kept as is.
        """
        return not self._state.touched or bool(self._state.rejections)

    def validate(self) -> Rejections:
        """Mark the node touched and run the rule chain against its value.

        Rules run in order. By default evaluation stops at the first rule that
        rejects; with `validate_all_rules` every rule runs and all rejections
        are collected in rule order.

        Returns:
            The rejection messages, stored as the node's `rejections`. This is
            the stored list itself, so mutating it changes the node state.
        """
        self._state.touched = True
        self._state.rejections = self._run_rules()
        return self._state.rejections

    def reset(self) -> None:
        """Restore a copy of the initial value and clear the touched flag.

        Rejections from an earlier `validate()` are left in place until the
        next validation pass.
        """
        self.value = deepcopy(self._initial_value)
        self._state.touched = False

    def _run_rules(self) -> Rejections:
        value = self._state.value
        rejections: Rejections = []

        for check in self._rules:
            rejection = check(value)
            if not rejection:
                continue

            rejections.append(rejection)

            if not self._options.validate_all_rules:
                break

        return rejections
