"""gqlschema introspection -- ``__schema`` and ``__type`` over a built schema."""

from __future__ import annotations

from gqlschema.introspection.query import IntrospectionExecutor, IntrospectionOnlyRule, execute_introspection
from gqlschema.introspection.resolver import IntrospectionResolver
from gqlschema.introspection.views import (
    DirectiveView,
    EnumValueView,
    FieldView,
    InputValueView,
    NotFoundResult,
    SchemaView,
    TypeView,
)

__all__ = [
    "IntrospectionResolver",
    "IntrospectionExecutor",
    "IntrospectionOnlyRule",
    "execute_introspection",
    "SchemaView",
    "TypeView",
    "FieldView",
    "InputValueView",
    "EnumValueView",
    "DirectiveView",
    "NotFoundResult",
]
