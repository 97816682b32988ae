"""Tests for the schema graph model."""

from __future__ import annotations

import pytest

from gqlschema.schema.types import (
    DeprecationInfo,
    EnumType,
    EnumValueDescriptor,
    FieldDescriptor,
    InputObjectType,
    InputValueDescriptor,
    ObjectType,
    ScalarType,
    TypeKind,
    TypeRef,
    is_input_type,
    is_output_type,
)


class TestTypeRef:
    def test_named(self) -> None:
        ref = TypeRef.parse("String")
        assert ref == TypeRef("String")
        assert ref.wrappers == ()
        assert not ref.is_non_null
        assert ref.of_type is None

    def test_non_null(self) -> None:
        ref = TypeRef.parse("String!")
        assert ref.name == "String"
        assert ref.wrappers == (TypeKind.NON_NULL,)
        assert ref.is_non_null

    def test_nested_wrappers_outermost_first(self) -> None:
        ref = TypeRef.parse("[Sample!]!")
        assert ref.name == "Sample"
        assert ref.wrappers == (TypeKind.NON_NULL, TypeKind.LIST, TypeKind.NON_NULL)
        assert ref.of_type == TypeRef("Sample", (TypeKind.LIST, TypeKind.NON_NULL))

    def test_str_round_trips_notation(self) -> None:
        for notation in ("ID", "ID!", "[ID]", "[ID!]", "[[ID]!]!"):
            assert str(TypeRef.parse(notation)) == notation

    def test_parse_accepts_typeref(self) -> None:
        ref = TypeRef("Book")
        assert TypeRef.parse(ref) is ref

    def test_invalid_notation(self) -> None:
        with pytest.raises(ValueError, match="Invalid type reference"):
            TypeRef.parse("[String")


class TestDeprecation:
    def test_absent_by_default(self) -> None:
        value = EnumValueDescriptor(name="ONE")
        assert value.deprecation is None
        assert value.is_deprecated is False
        assert value.deprecation_reason is None

    def test_present(self) -> None:
        value = EnumValueDescriptor(name="ONE", deprecation=DeprecationInfo("some enum value"))
        assert value.is_deprecated is True
        assert value.deprecation_reason == "some enum value"

    def test_empty_reason_is_still_deprecated(self) -> None:
        f = FieldDescriptor(name="content", type=TypeRef("String"), deprecation=DeprecationInfo(""))
        assert f.is_deprecated is True
        assert f.deprecation_reason == ""


class TestInputValueDescriptor:
    def test_non_null_without_default_is_required(self) -> None:
        assert InputValueDescriptor(name="new", type=TypeRef.parse("String!")).is_required

    def test_nullable_is_optional(self) -> None:
        assert not InputValueDescriptor(name="oldOptional", type=TypeRef.parse("String")).is_required

    def test_non_null_with_default_is_optional(self) -> None:
        value = InputValueDescriptor(name="limit", type=TypeRef.parse("Int!"), default_value=10)
        assert value.has_default
        assert not value.is_required

    def test_null_default_counts_as_default(self) -> None:
        value = InputValueDescriptor(name="after", type=TypeRef.parse("String"), default_value=None)
        assert value.has_default


class TestTypeNodes:
    def test_kinds(self) -> None:
        assert ScalarType("Date").kind == TypeKind.SCALAR
        assert ObjectType("Sample").kind == TypeKind.OBJECT
        assert InputObjectType("InputType").kind == TypeKind.INPUT_OBJECT
        assert EnumType("SampleEnum").kind == TypeKind.ENUM

    def test_member_lookup(self) -> None:
        obj = ObjectType("Sample", fields=(FieldDescriptor(name="content", type=TypeRef("String")),))
        assert obj.field("content") is obj.fields[0]
        assert obj.field("missing") is None

        enum = EnumType("SampleEnum", values=(EnumValueDescriptor(name="ONE"),))
        assert enum.value("ONE") is enum.values[0]

        inp = InputObjectType("InputType", input_fields=(InputValueDescriptor(name="new", type=TypeRef("String")),))
        assert inp.input_field("new") is inp.input_fields[0]

    def test_field_arg_lookup(self) -> None:
        arg = InputValueDescriptor(name="id", type=TypeRef.parse("ID!"))
        f = FieldDescriptor(name="book", type=TypeRef("Book"), args=(arg,))
        assert f.arg("id") is arg
        assert f.arg("other") is None

    def test_input_output_positions(self) -> None:
        assert is_input_type(ScalarType("String")) and is_output_type(ScalarType("String"))
        assert is_input_type(EnumType("E")) and is_output_type(EnumType("E"))
        assert is_output_type(ObjectType("O")) and not is_input_type(ObjectType("O"))
        assert is_input_type(InputObjectType("I")) and not is_output_type(InputObjectType("I"))

    def test_descriptors_are_frozen(self) -> None:
        f = FieldDescriptor(name="content", type=TypeRef("String"))
        with pytest.raises(AttributeError):
            f.name = "other"  # type: ignore[misc]
