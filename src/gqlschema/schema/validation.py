"""Build-time validation of an assembled schema graph."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from gqlschema.errors import (
    DeprecatedRequiredInputError,
    DuplicateFieldNameError,
    InvalidTypeReferenceError,
    UnknownTypeReferenceError,
)
from gqlschema.schema.types import (
    InputObjectType,
    InputValueDescriptor,
    ObjectType,
    TypeNode,
    TypeRef,
    is_input_type,
    is_output_type,
)

__all__ = ["check_unique_names", "validate_graph"]


def check_unique_names(type_name: str, names: Iterable[str]) -> None:
    """Raise DuplicateFieldNameError on the first name seen twice."""
    seen: set[str] = set()
    for name in names:
        if name in seen:
            raise DuplicateFieldNameError(type_name=type_name, member_name=name)
        seen.add(name)


def validate_graph(types: Mapping[str, TypeNode]) -> None:
    """Validate cross-references and deprecation rules of assembled types.

    Type references are checked for every type before deprecation rules,
    so an unresolvable reference is always reported first.

    Raises:
        UnknownTypeReferenceError: A reference names no declared type.
        InvalidTypeReferenceError: An input type is used as an output or vice versa.
        DeprecatedRequiredInputError: A required input value or argument is deprecated.
    """
    for node in types.values():
        if isinstance(node, ObjectType):
            for f in node.fields:
                _check_ref(types, node.name, f.name, f.type, output=True)
                for arg in f.args:
                    _check_ref(types, node.name, f"{f.name}.{arg.name}", arg.type, output=False)
        elif isinstance(node, InputObjectType):
            for value in node.input_fields:
                _check_ref(types, node.name, value.name, value.type, output=False)

    for node in types.values():
        if isinstance(node, ObjectType):
            for f in node.fields:
                _check_required(node.name, f.args, prefix=f"{f.name}.")
        elif isinstance(node, InputObjectType):
            _check_required(node.name, node.input_fields)


def _check_ref(types: Mapping[str, TypeNode], type_name: str, member: str, ref: TypeRef, output: bool) -> None:
    target = types.get(ref.name)
    if target is None:
        raise UnknownTypeReferenceError(type_name=type_name, member_name=member, reference=ref.name)
    allowed = is_output_type(target) if output else is_input_type(target)
    if not allowed:
        raise InvalidTypeReferenceError(type_name=type_name, member_name=member, reference=ref.name)


def _check_required(type_name: str, values: Iterable[InputValueDescriptor], prefix: str = "") -> None:
    for value in values:
        if value.is_required and value.is_deprecated:
            raise DeprecatedRequiredInputError(type_name=type_name, member_name=f"{prefix}{value.name}")
