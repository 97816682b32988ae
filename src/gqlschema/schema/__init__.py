"""gqlschema schema system -- public API.

Re-exports the graph model, the builder, the loader and the exporter.

Example usage::

    from gqlschema.schema import SchemaBuilder

    builder = SchemaBuilder()
    builder.query("sample", "String").deprecate("sample query")
    schema = builder.build()
"""

from __future__ import annotations

from gqlschema.schema.builder import (
    EnumTypeDeclaration,
    FieldDeclaration,
    InputTypeDeclaration,
    InputValueDeclaration,
    ObjectTypeDeclaration,
    SchemaBuilder,
)
from gqlschema.schema.exporter import SchemaExporter
from gqlschema.schema.loader import SchemaLoader
from gqlschema.schema.schema import Schema
from gqlschema.schema.types import (
    BUILTIN_SCALARS,
    DeprecationInfo,
    EnumType,
    EnumValueDescriptor,
    FieldDescriptor,
    InputObjectType,
    InputValueDescriptor,
    ObjectType,
    ScalarType,
    TypeKind,
    TypeNode,
    TypeRef,
)

__all__ = [
    "BUILTIN_SCALARS",
    "DeprecationInfo",
    "TypeKind",
    "TypeRef",
    "TypeNode",
    "FieldDescriptor",
    "InputValueDescriptor",
    "EnumValueDescriptor",
    "ScalarType",
    "ObjectType",
    "InputObjectType",
    "EnumType",
    "Schema",
    "SchemaBuilder",
    "FieldDeclaration",
    "InputValueDeclaration",
    "ObjectTypeDeclaration",
    "InputTypeDeclaration",
    "EnumTypeDeclaration",
    "SchemaLoader",
    "SchemaExporter",
]
