"""SchemaExporter: converts a built schema to graphql-core objects and SDL."""

from __future__ import annotations

from typing import Any

from graphql import (
    GraphQLArgument,
    GraphQLBoolean,
    GraphQLEnumType,
    GraphQLEnumValue,
    GraphQLField,
    GraphQLFloat,
    GraphQLID,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLInt,
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLSchema,
    GraphQLString,
    print_schema,
)

from gqlschema.schema.schema import Schema
from gqlschema.schema.types import (
    EnumType,
    InputObjectType,
    InputValueDescriptor,
    ObjectType,
    ScalarType,
    TypeKind,
    TypeNode,
    TypeRef,
)

__all__ = ["SchemaExporter"]

_STANDARD_SCALARS: dict[str, GraphQLScalarType] = {
    "String": GraphQLString,
    "Int": GraphQLInt,
    "Float": GraphQLFloat,
    "Boolean": GraphQLBoolean,
    "ID": GraphQLID,
}


class SchemaExporter:
    """Stateless transformer from ``Schema`` to graphql-core's type system."""

    def to_graphql_schema(self, schema: Schema) -> GraphQLSchema:
        """Build an equivalent ``GraphQLSchema``.

        Field maps are thunks, so self- and mutually-referencing types work.
        Deprecation reasons are carried on fields, arguments, input fields
        and enum values.

        The result is marked ``assume_valid``: the graph was validated by
        ``SchemaBuilder.build()`` and an empty query root is accepted.
        """
        named: dict[str, GraphQLNamedType] = {}
        for node in schema:
            named[node.name] = self._named_type(node, named)

        def root(node: ObjectType | None) -> Any:
            return named[node.name] if node is not None else None

        return GraphQLSchema(
            query=root(schema.query_type),
            mutation=root(schema.mutation_type),
            subscription=root(schema.subscription_type),
            types=list(named.values()),
            assume_valid=True,
        )

    def to_sdl(self, schema: Schema) -> str:
        """Print the schema in GraphQL SDL, ``@deprecated`` directives included."""
        return print_schema(self.to_graphql_schema(schema))

    def _named_type(self, node: TypeNode, named: dict[str, GraphQLNamedType]) -> GraphQLNamedType:
        if isinstance(node, ScalarType):
            return _STANDARD_SCALARS.get(node.name) or GraphQLScalarType(node.name, description=node.description)

        if isinstance(node, EnumType):
            return GraphQLEnumType(
                node.name,
                {
                    v.name: GraphQLEnumValue(
                        v.name, description=v.description, deprecation_reason=v.deprecation_reason
                    )
                    for v in node.values
                },
                description=node.description,
            )

        if isinstance(node, InputObjectType):
            return GraphQLInputObjectType(
                node.name,
                lambda: {
                    v.name: GraphQLInputField(
                        _wrap(v.type, named),
                        default_value=v.default_value,
                        description=v.description,
                        deprecation_reason=v.deprecation_reason,
                    )
                    for v in node.input_fields
                },
                description=node.description,
            )

        return GraphQLObjectType(
            node.name,
            lambda: {
                f.name: GraphQLField(
                    _wrap(f.type, named),
                    args={a.name: _argument(a, named) for a in f.args},
                    description=f.description,
                    deprecation_reason=f.deprecation_reason,
                )
                for f in node.fields
            },
            description=node.description,
        )


def _argument(value: InputValueDescriptor, named: dict[str, GraphQLNamedType]) -> GraphQLArgument:
    return GraphQLArgument(
        _wrap(value.type, named),
        default_value=value.default_value,
        description=value.description,
        deprecation_reason=value.deprecation_reason,
    )


def _wrap(ref: TypeRef, named: dict[str, GraphQLNamedType]) -> Any:
    wrapped: Any = named[ref.name]
    for wrapper in reversed(ref.wrappers):
        wrapped = GraphQLNonNull(wrapped) if wrapper == TypeKind.NON_NULL else GraphQLList(wrapped)
    return wrapped
