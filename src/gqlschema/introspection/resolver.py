"""IntrospectionResolver: answers ``__schema`` and ``__type`` against a built schema."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TypeVar

from graphql import DEFAULT_DEPRECATION_REASON, GraphQLSchema, ast_from_value, parse_type, print_ast, type_from_ast

from gqlschema.introspection.views import (
    DirectiveView,
    EnumValueView,
    FieldView,
    InputValueView,
    NotFoundResult,
    SchemaView,
    TypeView,
)
from gqlschema.schema.exporter import SchemaExporter
from gqlschema.schema.schema import Schema
from gqlschema.schema.types import (
    EnumType,
    EnumValueDescriptor,
    FieldDescriptor,
    InputObjectType,
    InputValueDescriptor,
    ObjectType,
    TypeKind,
    TypeNode,
    TypeRef,
)

logger = logging.getLogger(__name__)

__all__ = ["IntrospectionResolver", "BUILTIN_DIRECTIVES", "filter_deprecated"]

_M = TypeVar("_M", FieldDescriptor, InputValueDescriptor, EnumValueDescriptor)

# (name, description, locations, args)
BUILTIN_DIRECTIVES: tuple[tuple[str, str, tuple[str, ...], tuple[InputValueDescriptor, ...]], ...] = (
    (
        "include",
        "Directs the executor to include this field or fragment only when the `if` argument is true.",
        ("FIELD", "FRAGMENT_SPREAD", "INLINE_FRAGMENT"),
        (InputValueDescriptor(name="if", type=TypeRef.parse("Boolean!"), description="Included when true."),),
    ),
    (
        "skip",
        "Directs the executor to skip this field or fragment when the `if` argument is true.",
        ("FIELD", "FRAGMENT_SPREAD", "INLINE_FRAGMENT"),
        (InputValueDescriptor(name="if", type=TypeRef.parse("Boolean!"), description="Skipped when true."),),
    ),
    (
        "deprecated",
        "Marks an element of a GraphQL schema as no longer supported.",
        ("FIELD_DEFINITION", "ARGUMENT_DEFINITION", "INPUT_FIELD_DEFINITION", "ENUM_VALUE"),
        (
            InputValueDescriptor(
                name="reason",
                type=TypeRef.parse("String"),
                description="Explains why this element was deprecated.",
                default_value=DEFAULT_DEPRECATION_REASON,
            ),
        ),
    ),
)


def filter_deprecated(members: Iterable[_M], include_deprecated: bool) -> list[_M]:
    """Keep declaration order; drop deprecated members unless asked to include them."""
    return [m for m in members if include_deprecated or not m.is_deprecated]


class IntrospectionResolver:
    """Read-only introspection over a built ``Schema``.

    ``include_deprecated`` is a required argument everywhere: applying the
    GraphQL default of ``False`` is the caller's job. Every method is a pure
    function of the schema and its arguments, so a resolver can be shared
    between threads and called repeatedly with identical results.
    """

    def __init__(self, schema: Schema) -> None:
        self._schema = schema
        self._graphql_schema = SchemaExporter().to_graphql_schema(schema)

    @property
    def schema(self) -> Schema:
        return self._schema

    @property
    def graphql_schema(self) -> GraphQLSchema:
        """The equivalent graphql-core schema, used to print defaults and execute documents."""
        return self._graphql_schema

    # ----- Entry points -----

    def resolve_schema(self, include_deprecated: bool) -> SchemaView:
        """Answer ``__schema``: root types, all named types and directives."""
        schema = self._schema
        mutation = schema.mutation_type
        subscription = schema.subscription_type
        return SchemaView(
            query_type=self._named_type(schema.query_type, include_deprecated),
            mutation_type=self._named_type(mutation, include_deprecated) if mutation is not None else None,
            subscription_type=(
                self._named_type(subscription, include_deprecated) if subscription is not None else None
            ),
            types=tuple(
                self._named_type(node, include_deprecated) for node in sorted(schema, key=lambda n: n.name)
            ),
            directives=self.directives(include_deprecated),
        )

    def resolve_type(self, name: str, include_deprecated: bool) -> TypeView | NotFoundResult:
        """Answer ``__type(name)``. Unknown names yield a falsy ``NotFoundResult``."""
        node = self._schema.get_type(name)
        if node is None:
            logger.debug("Introspection lookup for unknown type '%s'", name)
            return NotFoundResult(name=name)
        return self._named_type(node, include_deprecated)

    # ----- Listings -----

    def list_fields(self, type_name: str, include_deprecated: bool) -> tuple[FieldView, ...] | None:
        node = self._schema.get_type(type_name)
        if not isinstance(node, ObjectType):
            return None
        return tuple(self._field(f, include_deprecated) for f in filter_deprecated(node.fields, include_deprecated))

    def list_args(
        self, type_name: str, field_name: str, include_deprecated: bool
    ) -> tuple[InputValueView, ...] | None:
        node = self._schema.get_type(type_name)
        if not isinstance(node, ObjectType):
            return None
        f = node.field(field_name)
        if f is None:
            return None
        return self._input_values(f.args, include_deprecated)

    def list_input_fields(self, type_name: str, include_deprecated: bool) -> tuple[InputValueView, ...] | None:
        node = self._schema.get_type(type_name)
        if not isinstance(node, InputObjectType):
            return None
        return self._input_values(node.input_fields, include_deprecated)

    def list_enum_values(self, type_name: str, include_deprecated: bool) -> tuple[EnumValueView, ...] | None:
        node = self._schema.get_type(type_name)
        if not isinstance(node, EnumType):
            return None
        return tuple(
            EnumValueView(
                name=v.name,
                description=v.description,
                is_deprecated=v.is_deprecated,
                deprecation_reason=v.deprecation_reason,
            )
            for v in filter_deprecated(node.values, include_deprecated)
        )

    def directives(self, include_deprecated: bool) -> tuple[DirectiveView, ...]:
        return tuple(
            DirectiveView(
                name=name,
                description=description,
                locations=locations,
                args=self._input_values(args, include_deprecated),
            )
            for name, description, locations, args in BUILTIN_DIRECTIVES
        )

    def type_ref(self, ref: TypeRef) -> TypeView:
        """Describe a reference without expanding the named type's listings."""
        of_type = ref.of_type
        if of_type is not None:
            return TypeView(kind=ref.wrappers[0], of_type=self.type_ref(of_type))
        node = self._schema.resolve(ref)
        return TypeView(kind=node.kind, name=node.name, description=node.description)

    # ----- Helpers -----

    def _named_type(self, node: TypeNode, include_deprecated: bool) -> TypeView:
        name = node.name
        return TypeView(
            kind=node.kind,
            name=name,
            description=node.description,
            fields=self.list_fields(name, include_deprecated),
            interfaces=() if node.kind == TypeKind.OBJECT else None,
            input_fields=self.list_input_fields(name, include_deprecated),
            enum_values=self.list_enum_values(name, include_deprecated),
        )

    def _field(self, f: FieldDescriptor, include_deprecated: bool) -> FieldView:
        return FieldView(
            name=f.name,
            description=f.description,
            args=self._input_values(f.args, include_deprecated),
            type=self.type_ref(f.type),
            is_deprecated=f.is_deprecated,
            deprecation_reason=f.deprecation_reason,
        )

    def _input_values(
        self, values: Iterable[InputValueDescriptor], include_deprecated: bool
    ) -> tuple[InputValueView, ...]:
        return tuple(
            InputValueView(
                name=v.name,
                description=v.description,
                type=self.type_ref(v.type),
                default_value=self._print_default(v) if v.has_default else None,
                is_deprecated=v.is_deprecated,
                deprecation_reason=v.deprecation_reason,
            )
            for v in filter_deprecated(values, include_deprecated)
        )

    def _print_default(self, value: InputValueDescriptor) -> str | None:
        input_type = type_from_ast(self._graphql_schema, parse_type(str(value.type)))
        value_ast = ast_from_value(value.default_value, input_type)  # type: ignore[arg-type]
        return print_ast(value_ast) if value_ast is not None else None
