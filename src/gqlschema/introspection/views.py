"""Read-only result models returned by the introspection resolver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from gqlschema.schema.types import TypeKind

__all__ = [
    "TypeView",
    "FieldView",
    "InputValueView",
    "EnumValueView",
    "DirectiveView",
    "SchemaView",
    "NotFoundResult",
]


class _View(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    typename: ClassVar[str] = ""

    def to_dict(self) -> dict[str, Any]:
        """Dump using the GraphQL introspection field names."""
        return self.model_dump(by_alias=True, mode="json")


class TypeView(_View):
    """An ``__Type``. Listings are ``None`` for kinds that do not carry them."""

    typename: ClassVar[str] = "__Type"

    kind: TypeKind
    name: str | None = None
    description: str | None = None
    fields: tuple[FieldView, ...] | None = None
    interfaces: tuple[TypeView, ...] | None = None
    possible_types: tuple[TypeView, ...] | None = Field(default=None, alias="possibleTypes")
    input_fields: tuple[InputValueView, ...] | None = Field(default=None, alias="inputFields")
    enum_values: tuple[EnumValueView, ...] | None = Field(default=None, alias="enumValues")
    of_type: TypeView | None = Field(default=None, alias="ofType")
    specified_by_url: str | None = Field(default=None, alias="specifiedByURL")


class InputValueView(_View):
    """An ``__InputValue``: input-object member, field argument or directive argument."""

    typename: ClassVar[str] = "__InputValue"

    name: str
    description: str | None = None
    type: TypeView
    default_value: str | None = Field(default=None, alias="defaultValue")
    is_deprecated: bool = Field(default=False, alias="isDeprecated")
    deprecation_reason: str | None = Field(default=None, alias="deprecationReason")


class FieldView(_View):
    typename: ClassVar[str] = "__Field"

    name: str
    description: str | None = None
    args: tuple[InputValueView, ...] = ()
    type: TypeView
    is_deprecated: bool = Field(default=False, alias="isDeprecated")
    deprecation_reason: str | None = Field(default=None, alias="deprecationReason")


class EnumValueView(_View):
    typename: ClassVar[str] = "__EnumValue"

    name: str
    description: str | None = None
    is_deprecated: bool = Field(default=False, alias="isDeprecated")
    deprecation_reason: str | None = Field(default=None, alias="deprecationReason")


class DirectiveView(_View):
    typename: ClassVar[str] = "__Directive"

    name: str
    description: str | None = None
    locations: tuple[str, ...] = ()
    args: tuple[InputValueView, ...] = ()
    is_repeatable: bool = Field(default=False, alias="isRepeatable")


class SchemaView(_View):
    typename: ClassVar[str] = "__Schema"

    description: str | None = None
    query_type: TypeView = Field(alias="queryType")
    mutation_type: TypeView | None = Field(default=None, alias="mutationType")
    subscription_type: TypeView | None = Field(default=None, alias="subscriptionType")
    types: tuple[TypeView, ...] = ()
    directives: tuple[DirectiveView, ...] = ()


TypeView.model_rebuild()
InputValueView.model_rebuild()
FieldView.model_rebuild()


@dataclass(frozen=True)
class NotFoundResult:
    """Returned by ``resolve_type`` for an unknown name. Falsy."""

    name: str

    def __bool__(self) -> bool:
        return False

    def to_dict(self) -> None:
        return None
