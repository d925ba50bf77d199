"""
Shared test fixtures and utilities for the formtree test suite.
"""

import pytest

from formtree import FieldState, ScalarNode, ScalarOptions


def reject_with(message):
    """Build a rule that rejects every value with `message`."""

    def rule(value):
        return message

    return rule


def accept(value):
    return None


@pytest.fixture
def make_field():
    """Factory for scalar nodes with a default name.

    Usage:
        def test_something(make_field):
            node = make_field(rules=[...], validate_all_rules=True)
    """

    def factory(rules=(), name="field", value=None, **options):
        return ScalarNode(
            FieldState(name=name, value=value), rules, ScalarOptions(**options)
        )

    return factory
