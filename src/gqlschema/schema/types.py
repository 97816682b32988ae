"""Schema graph node and descriptor definitions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Union

from graphql import GraphQLSyntaxError, ListTypeNode, NamedTypeNode, NonNullTypeNode, Undefined, parse_type

__all__ = [
    "TypeKind",
    "DeprecationInfo",
    "TypeRef",
    "FieldDescriptor",
    "InputValueDescriptor",
    "EnumValueDescriptor",
    "ScalarType",
    "ObjectType",
    "InputObjectType",
    "EnumType",
    "TypeNode",
    "BUILTIN_SCALARS",
    "is_input_type",
    "is_output_type",
]


class TypeKind(str, Enum):
    """Introspection ``__TypeKind`` values."""

    SCALAR = "SCALAR"
    OBJECT = "OBJECT"
    INPUT_OBJECT = "INPUT_OBJECT"
    ENUM = "ENUM"
    LIST = "LIST"
    NON_NULL = "NON_NULL"


@dataclass(frozen=True)
class DeprecationInfo:
    """Deprecation attached to a schema member.

    ``reason`` may be empty; absence of deprecation is expressed by the
    member's ``deprecation`` being ``None``.
    """

    reason: str


@dataclass(frozen=True)
class TypeRef:
    """Reference to a named type, by name, with list/non-null wrappers.

    ``wrappers`` is ordered outermost first, so ``[Sample!]!`` is
    ``TypeRef("Sample", (NON_NULL, LIST, NON_NULL))``.
    """

    name: str
    wrappers: tuple[TypeKind, ...] = ()

    @classmethod
    def parse(cls, source: str | TypeRef) -> TypeRef:
        """Parse GraphQL type notation such as ``String!`` or ``[Sample]``.

        Raises:
            ValueError: If ``source`` is not a valid type reference.
        """
        if isinstance(source, TypeRef):
            return source
        try:
            node = parse_type(source)
        except GraphQLSyntaxError as e:
            raise ValueError(f"Invalid type reference '{source}': {e.message}") from e

        wrappers: list[TypeKind] = []
        while not isinstance(node, NamedTypeNode):
            if isinstance(node, NonNullTypeNode):
                wrappers.append(TypeKind.NON_NULL)
            elif isinstance(node, ListTypeNode):
                wrappers.append(TypeKind.LIST)
            node = node.type
        return cls(name=node.name.value, wrappers=tuple(wrappers))

    @property
    def is_non_null(self) -> bool:
        return bool(self.wrappers) and self.wrappers[0] == TypeKind.NON_NULL

    @property
    def of_type(self) -> TypeRef | None:
        """The reference with its outermost wrapper removed, or None for a named type."""
        if not self.wrappers:
            return None
        return TypeRef(name=self.name, wrappers=self.wrappers[1:])

    def __str__(self) -> str:
        rendered = self.name
        for wrapper in reversed(self.wrappers):
            rendered = f"{rendered}!" if wrapper == TypeKind.NON_NULL else f"[{rendered}]"
        return rendered


@dataclass(frozen=True, kw_only=True)
class _Member:
    name: str
    deprecation: DeprecationInfo | None = None

    @property
    def is_deprecated(self) -> bool:
        return self.deprecation is not None

    @property
    def deprecation_reason(self) -> str | None:
        return self.deprecation.reason if self.deprecation is not None else None


@dataclass(frozen=True, kw_only=True)
class InputValueDescriptor(_Member):
    """A member of an input object type or an argument of a field."""

    type: TypeRef
    description: str | None = None
    default_value: Any = Undefined

    @property
    def has_default(self) -> bool:
        return self.default_value is not Undefined

    @property
    def is_required(self) -> bool:
        """A value is required when its type is non-null and it has no default."""
        return self.type.is_non_null and not self.has_default


@dataclass(frozen=True, kw_only=True)
class FieldDescriptor(_Member):
    """A field of an object type, root fields and extension properties included."""

    type: TypeRef
    description: str | None = None
    args: tuple[InputValueDescriptor, ...] = ()

    def arg(self, name: str) -> InputValueDescriptor | None:
        return next((a for a in self.args if a.name == name), None)


@dataclass(frozen=True, kw_only=True)
class EnumValueDescriptor(_Member):
    """One member of an enum type."""

    description: str | None = None


@dataclass(frozen=True)
class ScalarType:
    """A leaf type, built-in or custom."""

    kind: ClassVar[TypeKind] = TypeKind.SCALAR

    name: str
    description: str | None = None


@dataclass(frozen=True)
class ObjectType:
    """An output type owning an ordered sequence of fields."""

    kind: ClassVar[TypeKind] = TypeKind.OBJECT

    name: str
    fields: tuple[FieldDescriptor, ...] = ()
    description: str | None = None

    def field(self, name: str) -> FieldDescriptor | None:
        return next((f for f in self.fields if f.name == name), None)


@dataclass(frozen=True)
class InputObjectType:
    """An input type owning an ordered sequence of input values."""

    kind: ClassVar[TypeKind] = TypeKind.INPUT_OBJECT

    name: str
    input_fields: tuple[InputValueDescriptor, ...] = ()
    description: str | None = None

    def input_field(self, name: str) -> InputValueDescriptor | None:
        return next((f for f in self.input_fields if f.name == name), None)


@dataclass(frozen=True)
class EnumType:
    """A leaf type owning an ordered sequence of enum values."""

    kind: ClassVar[TypeKind] = TypeKind.ENUM

    name: str
    values: tuple[EnumValueDescriptor, ...] = ()
    description: str | None = None

    def value(self, name: str) -> EnumValueDescriptor | None:
        return next((v for v in self.values if v.name == name), None)


TypeNode = Union[ScalarType, ObjectType, InputObjectType, EnumType]

BUILTIN_SCALARS: dict[str, str] = {
    "String": "The `String` scalar type represents textual data, represented as UTF-8 character sequences.",
    "Int": "The `Int` scalar type represents non-fractional signed whole numeric values.",
    "Float": "The `Float` scalar type represents signed double-precision fractional values.",
    "Boolean": "The `Boolean` scalar type represents `true` or `false`.",
    "ID": "The `ID` scalar type represents a unique identifier.",
}


def is_input_type(node: TypeNode) -> bool:
    return node.kind in (TypeKind.SCALAR, TypeKind.ENUM, TypeKind.INPUT_OBJECT)


def is_output_type(node: TypeNode) -> bool:
    return node.kind in (TypeKind.SCALAR, TypeKind.ENUM, TypeKind.OBJECT)
