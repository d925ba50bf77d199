"""
Tests for field definition parsing.
"""

import pytest
from pydantic import ValidationError

from formtree.exceptions import DefinitionError
from formtree.rules import must_be_number
from formtree.structure import (
    GroupFieldDefinition,
    ScalarFieldDefinition,
    parse_definitions,
)


class TestParseDefinitions:
    """Test turning raw mappings into definition models."""

    def test_mapping_without_kind_is_scalar(self):
        """A plain mapping is a scalar field definition."""
        parsed = parse_definitions(
            {"age": {"label": "Age", "required": True, "rules": [must_be_number]}}
        )

        definition = parsed["age"]
        assert isinstance(definition, ScalarFieldDefinition)
        assert definition.label == "Age"
        assert definition.required is True
        assert definition.rules == (must_be_number,)

    def test_scalar_defaults(self):
        """Omitted scalar options fall back to their defaults."""
        definition = parse_definitions({"x": {}})["x"]

        assert definition.kind == "scalar"
        assert definition.label is None
        assert definition.placeholder is None
        assert definition.required is False
        assert definition.initial_value is None
        assert definition.rules == ()

    def test_group_is_parsed_recursively(self):
        """Groups are tagged with kind and hold nested definitions."""
        parsed = parse_definitions(
            {
                "address": {
                    "kind": "group",
                    "members": {
                        "city": {"label": "City"},
                        "geo": {"kind": "group", "members": {"lat": {}}},
                    },
                }
            }
        )

        group = parsed["address"]
        assert isinstance(group, GroupFieldDefinition)
        assert isinstance(group.members["city"], ScalarFieldDefinition)
        assert isinstance(group.members["geo"], GroupFieldDefinition)
        assert isinstance(group.members["geo"].members["lat"], ScalarFieldDefinition)

    def test_models_pass_through(self):
        """Already-built definition models are accepted as is."""
        scalar = ScalarFieldDefinition(label="Name")
        group = GroupFieldDefinition(members={"name": scalar})

        parsed = parse_definitions({"person": group})

        assert parsed["person"].members["name"].label == "Name"

    def test_order_preserved(self):
        """Definitions keep their input order."""
        parsed = parse_definitions({"b": {}, "a": {}, "c": {}})

        assert list(parsed) == ["b", "a", "c"]

    def test_initial_value_kept(self):
        """Initial values of any type are carried verbatim."""
        parsed = parse_definitions({"tags": {"initial_value": ["a", "b"]}})

        assert parsed["tags"].initial_value == ["a", "b"]


class TestMalformedDefinitions:
    """Malformed definitions raise DefinitionError."""

    def test_unknown_option(self):
        """Unknown scalar options are rejected."""
        with pytest.raises(DefinitionError) as exc_info:
            parse_definitions({"age": {"requried": True}})

        assert exc_info.value.path.startswith("age")

    def test_unknown_kind(self):
        """Only scalar and group kinds exist."""
        with pytest.raises(DefinitionError):
            parse_definitions({"age": {"kind": "list"}})

    def test_non_callable_rule(self):
        """Rules must be callables."""
        with pytest.raises(DefinitionError) as exc_info:
            parse_definitions({"age": {"rules": ["not callable"]}})

        assert "age" in str(exc_info.value)

    def test_nested_error_path(self):
        """Errors inside groups report the nested location."""
        with pytest.raises(DefinitionError) as exc_info:
            parse_definitions(
                {"address": {"kind": "group", "members": {"city": {"label": 3}}}}
            )

        assert exc_info.value.path.startswith("address")
        assert "city" in exc_info.value.path

    def test_definition_error_is_value_error(self):
        """DefinitionError can be caught as a ValueError."""
        with pytest.raises(ValueError):
            parse_definitions({"age": 5})

    def test_definitions_are_frozen(self):
        """Definition models cannot be modified after parsing."""
        definition = parse_definitions({"age": {}})["age"]

        with pytest.raises(ValidationError):
            definition.required = True
