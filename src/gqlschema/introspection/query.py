"""Execution of introspection-only GraphQL documents.

Documents are parsed, validated and executed by graphql-core against the
``GraphQLSchema`` exported from a built schema. ``IntrospectionOnlyRule``
limits root selections to ``__schema``, ``__type`` and ``__typename``,
since this package has no resolvers for user data.

Example::

    result = execute_introspection(
        schema, '{ __type(name: "Sample") { fields(includeDeprecated: true) { name } } }'
    )
    result["data"]["__type"]["fields"]
"""

from __future__ import annotations

import logging
from copy import copy
from typing import Any

from graphql import (
    ArgumentNode,
    BooleanValueNode,
    DocumentNode,
    FieldNode,
    GraphQLError,
    NameNode,
    OperationDefinitionNode,
    OperationType,
    ValidationRule,
    Visitor,
    execute_sync,
    parse,
    specified_rules,
    validate,
    visit,
)

from gqlschema.config import Config
from gqlschema.introspection.resolver import IntrospectionResolver
from gqlschema.schema.schema import Schema

logger = logging.getLogger(__name__)

__all__ = ["execute_introspection", "IntrospectionExecutor", "IntrospectionOnlyRule"]

_ROOT_FIELDS = frozenset({"__schema", "__type", "__typename"})

_LISTING_FIELDS = frozenset({"fields", "args", "inputFields", "enumValues"})


def execute_introspection(
    schema: Schema,
    document: str,
    variables: dict[str, Any] | None = None,
    operation_name: str | None = None,
    config: Config | None = None,
) -> dict[str, Any]:
    """Parse and execute an introspection query, returning ``{"data": ...}``.

    Parse, validation and execution errors are reported under ``"errors"``.
    """
    return IntrospectionExecutor(IntrospectionResolver(schema), config=config).execute(
        document, variables=variables, operation_name=operation_name
    )


class IntrospectionOnlyRule(ValidationRule):
    """Reject non-query operations and root fields other than introspection."""

    def enter_operation_definition(self, node: OperationDefinitionNode, *_args: Any) -> None:
        if node.operation != OperationType.QUERY:
            self.report_error(
                GraphQLError(f"Only query operations can be introspected, got {node.operation.value}.", node)
            )

    def enter_field(self, node: FieldNode, *_args: Any) -> None:
        parent = self.context.get_parent_type()
        if parent is None or parent is not self.context.schema.query_type:
            return
        name = node.name.value
        if name not in _ROOT_FIELDS:
            self.report_error(
                GraphQLError(
                    f"Cannot query field '{name}': only __schema, __type and __typename are answered.",
                    node,
                )
            )


class _IncludeDeprecatedByDefault(Visitor):
    """Adds ``includeDeprecated: true`` to listing fields that do not pass it."""

    def enter_field(self, node: FieldNode, *_args: Any) -> FieldNode | None:
        if node.name.value not in _LISTING_FIELDS:
            return None
        arguments = tuple(node.arguments or ())
        if any(arg.name.value == "includeDeprecated" for arg in arguments):
            return None
        updated = copy(node)
        updated.arguments = (
            *arguments,
            ArgumentNode(name=NameNode(value="includeDeprecated"), value=BooleanValueNode(value=True)),
        )
        return updated


class IntrospectionExecutor:
    """Runs documents through graphql-core over the resolver's exported schema.

    ``introspection.include_deprecated_default`` set to true makes listings
    that omit ``includeDeprecated`` behave as if it were passed as ``true``.
    """

    def __init__(self, resolver: IntrospectionResolver, config: Config | None = None) -> None:
        self._schema = resolver.graphql_schema
        config = config or Config()
        self._include_deprecated_default: bool = bool(config.get("introspection.include_deprecated_default"))

    def execute(
        self,
        document: str | DocumentNode,
        variables: dict[str, Any] | None = None,
        operation_name: str | None = None,
    ) -> dict[str, Any]:
        try:
            ast = parse(document) if isinstance(document, str) else document
        except GraphQLError as e:
            logger.debug("Introspection query failed to parse: %s", e.message)
            return {"data": None, "errors": [e.formatted]}

        if self._include_deprecated_default:
            ast = visit(ast, _IncludeDeprecatedByDefault())

        errors = validate(self._schema, ast, [*specified_rules, IntrospectionOnlyRule])
        if errors:
            logger.debug("Introspection query rejected: %s", errors[0].message)
            return {"data": None, "errors": [e.formatted for e in errors]}

        result = execute_sync(self._schema, ast, variable_values=variables, operation_name=operation_name)
        return result.formatted
