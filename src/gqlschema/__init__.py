"""gqlschema - GraphQL schema type registry and introspection resolver."""

from __future__ import annotations

# Config
from gqlschema.config import Config

# Errors
from gqlschema.errors import (
    ConfigError,
    DeprecatedRequiredInputError,
    DuplicateFieldNameError,
    DuplicateTypeNameError,
    ErrorCodes,
    GraphSchemaError,
    InvalidInputError,
    InvalidTypeReferenceError,
    SchemaBuilderClosedError,
    SchemaNotFoundError,
    SchemaParseError,
    SchemaValidationError,
    UnknownMemberError,
    UnknownTypeReferenceError,
)

# Introspection
from gqlschema.introspection import (
    IntrospectionResolver,
    NotFoundResult,
    SchemaView,
    TypeView,
    execute_introspection,
)

# Schema
from gqlschema.schema import (
    DeprecationInfo,
    Schema,
    SchemaBuilder,
    SchemaExporter,
    SchemaLoader,
    TypeKind,
    TypeRef,
)

__version__ = "0.1.0"

__all__ = [
    # Schema
    "Schema",
    "SchemaBuilder",
    "SchemaLoader",
    "SchemaExporter",
    "DeprecationInfo",
    "TypeKind",
    "TypeRef",
    # Introspection
    "IntrospectionResolver",
    "execute_introspection",
    "SchemaView",
    "TypeView",
    "NotFoundResult",
    # Config
    "Config",
    # Errors
    "ErrorCodes",
    "GraphSchemaError",
    "SchemaValidationError",
    "DuplicateTypeNameError",
    "DuplicateFieldNameError",
    "UnknownMemberError",
    "UnknownTypeReferenceError",
    "InvalidTypeReferenceError",
    "DeprecatedRequiredInputError",
    "SchemaBuilderClosedError",
    "SchemaNotFoundError",
    "SchemaParseError",
    "InvalidInputError",
    "ConfigError",
]
