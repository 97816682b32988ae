"""Tests for validate_graph and check_unique_names on hand-assembled graphs."""

from __future__ import annotations

import pytest

from gqlschema.errors import (
    DeprecatedRequiredInputError,
    DuplicateFieldNameError,
    InvalidTypeReferenceError,
    UnknownTypeReferenceError,
)
from gqlschema.schema.types import (
    DeprecationInfo,
    EnumType,
    FieldDescriptor,
    InputObjectType,
    InputValueDescriptor,
    ObjectType,
    ScalarType,
    TypeNode,
    TypeRef,
)
from gqlschema.schema.validation import check_unique_names, validate_graph


def _graph(*nodes: TypeNode) -> dict[str, TypeNode]:
    graph: dict[str, TypeNode] = {"String": ScalarType("String"), "Int": ScalarType("Int")}
    graph.update({n.name: n for n in nodes})
    return graph


def _value(name: str, notation: str, reason: str | None = None, **kwargs) -> InputValueDescriptor:
    deprecation = DeprecationInfo(reason) if reason is not None else None
    return InputValueDescriptor(name=name, type=TypeRef.parse(notation), deprecation=deprecation, **kwargs)


class TestCheckUniqueNames:
    def test_unique(self) -> None:
        check_unique_names("Sample", ["a", "b", "c"])

    def test_first_duplicate_reported(self) -> None:
        with pytest.raises(DuplicateFieldNameError) as exc_info:
            check_unique_names("Sample", ["a", "b", "b", "a"])
        assert exc_info.value.type_name == "Sample"
        assert exc_info.value.member_name == "b"


class TestReferences:
    def test_valid_cyclic_graph(self) -> None:
        node = ObjectType("Node", fields=(FieldDescriptor(name="next", type=TypeRef.parse("[Node!]")),))
        validate_graph(_graph(node))

    def test_enum_allowed_in_both_positions(self) -> None:
        enum = EnumType("Color")
        obj = ObjectType(
            "Paint",
            fields=(
                FieldDescriptor(
                    name="color",
                    type=TypeRef("Color"),
                    args=(_value("like", "Color"),),
                ),
            ),
        )
        inp = InputObjectType("PaintInput", input_fields=(_value("color", "Color!"),))
        validate_graph(_graph(enum, obj, inp))

    def test_unknown_field_type(self) -> None:
        obj = ObjectType("Sample", fields=(FieldDescriptor(name="content", type=TypeRef.parse("Missing!")),))
        with pytest.raises(UnknownTypeReferenceError) as exc_info:
            validate_graph(_graph(obj))
        assert exc_info.value.details == {"type_name": "Sample", "member_name": "content", "reference": "Missing"}

    def test_unknown_input_field_type(self) -> None:
        inp = InputObjectType("Filter", input_fields=(_value("by", "Missing"),))
        with pytest.raises(UnknownTypeReferenceError):
            validate_graph(_graph(inp))

    def test_argument_of_output_type(self) -> None:
        other = ObjectType("Other")
        obj = ObjectType(
            "Sample",
            fields=(FieldDescriptor(name="content", type=TypeRef("String"), args=(_value("o", "Other"),)),),
        )
        with pytest.raises(InvalidTypeReferenceError) as exc_info:
            validate_graph(_graph(other, obj))
        assert exc_info.value.member_name == "content.o"


class TestRequiredDeprecation:
    def test_deprecated_optional_input_value(self) -> None:
        inp = InputObjectType("InputType", input_fields=(_value("oldOptional", "String", "gone"),))
        validate_graph(_graph(inp))

    def test_deprecated_required_input_value(self) -> None:
        inp = InputObjectType("InputType", input_fields=(_value("oldRequired", "String!", "gone"),))
        with pytest.raises(DeprecatedRequiredInputError) as exc_info:
            validate_graph(_graph(inp))
        assert exc_info.value.message == "Required fields cannot be marked as deprecated"

    def test_empty_reason_still_counts(self) -> None:
        inp = InputObjectType("InputType", input_fields=(_value("oldRequired", "String!", ""),))
        with pytest.raises(DeprecatedRequiredInputError):
            validate_graph(_graph(inp))

    def test_required_with_default_is_allowed(self) -> None:
        inp = InputObjectType("InputType", input_fields=(_value("limit", "Int!", "gone", default_value=3),))
        validate_graph(_graph(inp))

    def test_non_null_list_is_required(self) -> None:
        inp = InputObjectType("InputType", input_fields=(_value("tags", "[String]!", "gone"),))
        with pytest.raises(DeprecatedRequiredInputError):
            validate_graph(_graph(inp))

    def test_list_of_non_null_is_optional(self) -> None:
        inp = InputObjectType("InputType", input_fields=(_value("tags", "[String!]", "gone"),))
        validate_graph(_graph(inp))
