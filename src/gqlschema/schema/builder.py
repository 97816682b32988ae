"""SchemaBuilder: declaration-time assembly and validation of a schema graph."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import Any

from graphql import Undefined

from gqlschema.config import Config
from gqlschema.errors import (
    DuplicateTypeNameError,
    InvalidInputError,
    SchemaBuilderClosedError,
    UnknownMemberError,
)
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
    TypeNode,
    TypeRef,
)
from gqlschema.schema.validation import check_unique_names, validate_graph

logger = logging.getLogger(__name__)

__all__ = [
    "NAME_PATTERN",
    "SchemaBuilder",
    "FieldDeclaration",
    "InputValueDeclaration",
    "EnumValueDeclaration",
    "ObjectTypeDeclaration",
    "InputTypeDeclaration",
    "EnumTypeDeclaration",
    "ScalarDeclaration",
]

NAME_PATTERN = re.compile(r"^[_A-Za-z][_0-9A-Za-z]*$")


def _check_name(name: str, what: str) -> str:
    if not isinstance(name, str) or not NAME_PATTERN.match(name):
        raise InvalidInputError(message=f"Invalid {what} name: {name!r}")
    if name.startswith("__"):
        raise InvalidInputError(message=f"Names starting with '__' are reserved for introspection: {name!r}")
    return name


def _check_reason(reason: Any) -> str:
    if not isinstance(reason, str):
        raise InvalidInputError(message=f"Deprecation reason must be a string, got {type(reason).__name__}")
    if reason == "":
        logger.warning("Empty deprecation reason given; the member is still deprecated")
    return reason


def _parse_ref(type_ref: str | TypeRef) -> TypeRef:
    try:
        return TypeRef.parse(type_ref)
    except ValueError as e:
        raise InvalidInputError(message=str(e)) from e


class _MemberDeclaration:
    """Mutable member under construction, turned into a descriptor at build time."""

    def __init__(self, builder: SchemaBuilder, name: str, description: str | None) -> None:
        self._builder = builder
        self.name = name
        self.description = description
        self.deprecation_reason: str | None = None

    def deprecate(self, reason: str) -> Any:
        """Mark this member as deprecated with a human-readable reason."""
        self._builder._ensure_open(f"deprecate '{self.name}'")
        self.deprecation_reason = _check_reason(reason)
        return self

    def _deprecation(self, override: str | None = None) -> DeprecationInfo | None:
        reason = override if override is not None else self.deprecation_reason
        return DeprecationInfo(reason=reason) if reason is not None else None


class InputValueDeclaration(_MemberDeclaration):
    """An input-object member or field argument under construction."""

    def __init__(
        self,
        builder: SchemaBuilder,
        name: str,
        type_ref: TypeRef,
        description: str | None,
        default_value: Any,
    ) -> None:
        super().__init__(builder, name, description)
        self.type_ref = type_ref
        self.default_value = default_value

    def to_descriptor(self, reason: str | None = None) -> InputValueDescriptor:
        return InputValueDescriptor(
            name=self.name,
            type=self.type_ref,
            description=self.description,
            default_value=self.default_value,
            deprecation=self._deprecation(reason),
        )


class FieldDeclaration(_MemberDeclaration):
    """An object field under construction; returned by ``query()``, ``field()`` and friends."""

    def __init__(self, builder: SchemaBuilder, name: str, type_ref: TypeRef, description: str | None) -> None:
        super().__init__(builder, name, description)
        self.type_ref = type_ref
        self.args: list[InputValueDeclaration] = []

    def argument(
        self,
        name: str,
        type_ref: str | TypeRef,
        *,
        default_value: Any = Undefined,
        description: str | None = None,
        deprecation_reason: str | None = None,
    ) -> FieldDeclaration:
        """Declare an argument on this field. Returns the field for chaining."""
        self._builder._ensure_open(f"declare argument '{name}'")
        arg = InputValueDeclaration(
            self._builder, _check_name(name, "argument"), _parse_ref(type_ref), description, default_value
        )
        if deprecation_reason is not None:
            arg.deprecate(deprecation_reason)
        self.args.append(arg)
        return self

    def to_descriptor(self, reason: str | None = None) -> FieldDescriptor:
        return FieldDescriptor(
            name=self.name,
            type=self.type_ref,
            description=self.description,
            args=tuple(a.to_descriptor() for a in self.args),
            deprecation=self._deprecation(reason),
        )


class EnumValueDeclaration(_MemberDeclaration):
    """An enum value under construction."""

    def to_descriptor(self, reason: str | None = None) -> EnumValueDescriptor:
        return EnumValueDescriptor(
            name=self.name,
            description=self.description,
            deprecation=self._deprecation(reason),
        )


class _TypeDeclaration:
    """Common state of a named type under construction."""

    kind_label = "type"

    def __init__(self, builder: SchemaBuilder, name: str, description: str | None) -> None:
        self._builder = builder
        self.name = name
        self.description = description
        self._deprecations: list[tuple[str, str]] = []

    def deprecate(self, member: str, reason: str) -> Any:
        """Deprecate a member of this type by name.

        The member may be declared before or after this call; it is looked
        up when the schema is built, and ``build()`` fails if it never is.
        """
        self._builder._ensure_open(f"deprecate '{self.name}.{member}'")
        self._deprecations.append((member, _check_reason(reason)))
        return self

    def _member_names(self) -> list[str]:
        raise NotImplementedError

    def _resolve_deprecations(self) -> dict[str, str]:
        names = set(self._member_names())
        resolved: dict[str, str] = {}
        for member, reason in self._deprecations:
            if member not in names:
                raise UnknownMemberError(type_name=self.name, member_name=member)
            resolved[member] = reason
        return resolved

    def to_node(self) -> TypeNode:
        raise NotImplementedError


class ScalarDeclaration(_TypeDeclaration):
    kind_label = "scalar"

    def _member_names(self) -> list[str]:
        return []

    def to_node(self) -> ScalarType:
        return ScalarType(name=self.name, description=self.description)


class ObjectTypeDeclaration(_TypeDeclaration):
    """An object type under construction.

    ``field()`` and ``property()`` both append to one ordered sequence, so
    extension properties are listed after the fields declared before them.
    """

    kind_label = "object"

    def __init__(self, builder: SchemaBuilder, name: str, description: str | None) -> None:
        super().__init__(builder, name, description)
        self.fields: list[FieldDeclaration] = []

    def field(
        self,
        name: str,
        type_ref: str | TypeRef,
        *,
        description: str | None = None,
        deprecation_reason: str | None = None,
    ) -> FieldDeclaration:
        """Declare a field and return it for further configuration."""
        self._builder._ensure_open(f"declare field '{self.name}.{name}'")
        declaration = FieldDeclaration(self._builder, _check_name(name, "field"), _parse_ref(type_ref), description)
        if deprecation_reason is not None:
            declaration.deprecate(deprecation_reason)
        self.fields.append(declaration)
        logger.debug("Declared field '%s.%s' of type %s", self.name, name, declaration.type_ref)
        return declaration

    def property(
        self,
        name: str,
        type_ref: str | TypeRef,
        *,
        description: str | None = None,
        deprecation_reason: str | None = None,
    ) -> FieldDeclaration:
        """Declare an extension field, e.g. a computed property, after the native fields."""
        return self.field(name, type_ref, description=description, deprecation_reason=deprecation_reason)

    def _member_names(self) -> list[str]:
        return [f.name for f in self.fields]

    def to_node(self) -> ObjectType:
        deprecations = self._resolve_deprecations()
        return ObjectType(
            name=self.name,
            fields=tuple(f.to_descriptor(deprecations.get(f.name)) for f in self.fields),
            description=self.description,
        )


class InputTypeDeclaration(_TypeDeclaration):
    """An input object type under construction."""

    kind_label = "input"

    def __init__(self, builder: SchemaBuilder, name: str, description: str | None) -> None:
        super().__init__(builder, name, description)
        self.input_values: list[InputValueDeclaration] = []

    def input_value(
        self,
        name: str,
        type_ref: str | TypeRef,
        *,
        default_value: Any = Undefined,
        description: str | None = None,
        deprecation_reason: str | None = None,
    ) -> InputValueDeclaration:
        """Declare an input value. A non-null type without default makes it required."""
        self._builder._ensure_open(f"declare input value '{self.name}.{name}'")
        declaration = InputValueDeclaration(
            self._builder, _check_name(name, "input value"), _parse_ref(type_ref), description, default_value
        )
        if deprecation_reason is not None:
            declaration.deprecate(deprecation_reason)
        self.input_values.append(declaration)
        return declaration

    def _member_names(self) -> list[str]:
        return [v.name for v in self.input_values]

    def to_node(self) -> InputObjectType:
        deprecations = self._resolve_deprecations()
        return InputObjectType(
            name=self.name,
            input_fields=tuple(v.to_descriptor(deprecations.get(v.name)) for v in self.input_values),
            description=self.description,
        )


class EnumTypeDeclaration(_TypeDeclaration):
    """An enum type under construction."""

    kind_label = "enum"

    def __init__(self, builder: SchemaBuilder, name: str, description: str | None) -> None:
        super().__init__(builder, name, description)
        self.values: list[EnumValueDeclaration] = []

    def value(
        self,
        name: str,
        *,
        description: str | None = None,
        deprecation_reason: str | None = None,
    ) -> EnumValueDeclaration:
        """Declare an enum value and return it for further configuration."""
        self._builder._ensure_open(f"declare enum value '{self.name}.{name}'")
        if name in ("true", "false", "null"):
            raise InvalidInputError(message=f"Enum value cannot be named '{name}'")
        declaration = EnumValueDeclaration(self._builder, _check_name(name, "enum value"), description)
        if deprecation_reason is not None:
            declaration.deprecate(deprecation_reason)
        self.values.append(declaration)
        return declaration

    def _member_names(self) -> list[str]:
        return [v.name for v in self.values]

    def to_node(self) -> EnumType:
        deprecations = self._resolve_deprecations()
        return EnumType(
            name=self.name,
            values=tuple(v.to_descriptor(deprecations.get(v.name)) for v in self.values),
            description=self.description,
        )


class SchemaBuilder:
    """Collects schema declarations and builds an immutable ``Schema`` once.

    The builder is *open* until ``build()`` succeeds and *built* afterwards;
    any declaration on a built builder raises ``SchemaBuilderClosedError``.
    A failed ``build()`` leaves it open so the declarations can be fixed.
    Declaring an existing type name as a different kind raises
    ``DuplicateTypeNameError`` at once; the builder stays usable.
    Not safe for concurrent use.
    """

    def __init__(self, config: Config | None = None) -> None:
        self._config = config or Config()
        self._query_name: str = self._config.get("schema.query_type_name")
        self._mutation_name: str = self._config.get("schema.mutation_type_name")
        self._subscription_name: str = self._config.get("schema.subscription_type_name")

        self._types: dict[str, _TypeDeclaration] = {}
        self._has_mutation = False
        self._has_subscription = False
        self._built = False

        for name, description in BUILTIN_SCALARS.items():
            self._types[name] = ScalarDeclaration(self, name, description)

    @property
    def is_built(self) -> bool:
        return self._built

    def _ensure_open(self, operation: str) -> None:
        if self._built:
            raise SchemaBuilderClosedError(operation=operation)

    def _declare(self, cls: type[_TypeDeclaration], name: str, description: str | None) -> Any:
        self._ensure_open(f"declare {cls.kind_label} '{name}'")
        _check_name(name, "type")
        existing = self._types.get(name)
        if existing is None:
            declaration = cls(self, name, description)
            self._types[name] = declaration
            logger.debug("Declared %s type '%s'", cls.kind_label, name)
            return declaration
        if type(existing) is cls:
            if description is not None and name not in BUILTIN_SCALARS:
                existing.description = description
            return existing
        raise DuplicateTypeNameError(type_name=name)

    # ----- Root fields -----

    def query(
        self,
        name: str,
        type_ref: str | TypeRef,
        *,
        description: str | None = None,
        deprecation_reason: str | None = None,
    ) -> FieldDeclaration:
        """Declare a field on the query root type."""
        root = self.object_type(self._query_name)
        return root.field(name, type_ref, description=description, deprecation_reason=deprecation_reason)

    def mutation(
        self,
        name: str,
        type_ref: str | TypeRef,
        *,
        description: str | None = None,
        deprecation_reason: str | None = None,
    ) -> FieldDeclaration:
        """Declare a field on the mutation root type."""
        root = self.object_type(self._mutation_name)
        self._has_mutation = True
        return root.field(name, type_ref, description=description, deprecation_reason=deprecation_reason)

    def subscription(
        self,
        name: str,
        type_ref: str | TypeRef,
        *,
        description: str | None = None,
        deprecation_reason: str | None = None,
    ) -> FieldDeclaration:
        """Declare a field on the subscription root type."""
        root = self.object_type(self._subscription_name)
        self._has_subscription = True
        return root.field(name, type_ref, description=description, deprecation_reason=deprecation_reason)

    # ----- Named types -----

    def object_type(self, name: str, *, description: str | None = None) -> ObjectTypeDeclaration:
        """Declare an object type, or reopen an existing one to append fields."""
        return self._declare(ObjectTypeDeclaration, name, description)

    def input_type(self, name: str, *, description: str | None = None) -> InputTypeDeclaration:
        """Declare an input object type, or reopen an existing one."""
        return self._declare(InputTypeDeclaration, name, description)

    def enum_type(
        self,
        name: str,
        values: Iterable[str] = (),
        *,
        description: str | None = None,
    ) -> EnumTypeDeclaration:
        """Declare an enum type with its values in order."""
        declaration: EnumTypeDeclaration = self._declare(EnumTypeDeclaration, name, description)
        for value in values:
            declaration.value(value)
        return declaration

    def scalar(self, name: str, *, description: str | None = None) -> ScalarDeclaration:
        """Declare a custom scalar type."""
        return self._declare(ScalarDeclaration, name, description)

    # ----- Build -----

    def build(self) -> Schema:
        """Validate all declarations and return the immutable schema.

        Raises:
            SchemaBuilderClosedError: If the builder was already built.
            SchemaValidationError: If the declarations are invalid; see
                ``gqlschema.errors`` for the concrete subclasses.
        """
        self._ensure_open("build")
        self.object_type(self._query_name)

        for declaration in self._types.values():
            check_unique_names(declaration.name, declaration._member_names())
            if isinstance(declaration, ObjectTypeDeclaration):
                for f in declaration.fields:
                    check_unique_names(declaration.name, (f"{f.name}.{a.name}" for a in f.args))

        nodes: dict[str, TypeNode] = {name: d.to_node() for name, d in self._types.items()}
        validate_graph(nodes)

        schema = Schema(
            types=nodes,
            query_type_name=self._query_name,
            mutation_type_name=self._mutation_name if self._has_mutation else None,
            subscription_type_name=self._subscription_name if self._has_subscription else None,
        )
        self._built = True
        logger.info("Built schema with %d types", len(nodes))
        return schema
