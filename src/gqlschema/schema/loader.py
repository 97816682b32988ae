"""SchemaLoader: builds schemas from declarative YAML files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from graphql import Undefined

from gqlschema.config import Config
from gqlschema.errors import InvalidInputError, SchemaNotFoundError, SchemaParseError
from gqlschema.schema.builder import FieldDeclaration, SchemaBuilder
from gqlschema.schema.schema import Schema

__all__ = ["SchemaLoader"]

logger = logging.getLogger(__name__)

_KINDS = ("object", "input", "enum", "scalar")

_ROOTS = ("query", "mutation", "subscription")


class SchemaLoader:
    """Loads ``*.schema.yaml`` declarations into a ``SchemaBuilder``.

    File layout::

        query:
          sample: {type: String, deprecated: "sample query"}
        types:
          Sample:
            kind: object
            fields:
              content: {type: String!, deprecated: "sample type"}
          SampleEnum:
            kind: enum
            values: [ONE, TWO, {name: THREE, deprecated: true}]

    A member declared with ``deprecated: true`` gets the configured
    ``schema.default_deprecation_reason``; a string is used as the reason.
    """

    def __init__(self, config: Config | None = None) -> None:
        self._config = config or Config()
        self._default_reason: str = self._config.get("schema.default_deprecation_reason")

    def load(self, path: str | Path) -> Schema:
        """Load a schema file and build it.

        Raises:
            SchemaNotFoundError: If the file does not exist.
            SchemaParseError: If the file is not valid YAML or has the wrong shape.
            SchemaValidationError: If the declared schema is invalid.
        """
        return self.load_builder(path).build()

    def load_builder(self, path: str | Path) -> SchemaBuilder:
        """Load a schema file into an open builder for further declarations."""
        file_path = Path(path)
        if not file_path.exists():
            raise SchemaNotFoundError(schema_id=str(file_path))

        try:
            data = yaml.safe_load(file_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise SchemaParseError(message=f"Invalid YAML in schema file '{file_path}': {e}") from e

        if data is None or not isinstance(data, dict):
            raise SchemaParseError(message=f"Schema file '{file_path}' is empty or not a mapping")

        builder = SchemaBuilder(self._config)
        try:
            self.apply(builder, data)
        except InvalidInputError as e:
            raise SchemaParseError(message=f"Invalid declaration in '{file_path}': {e.message}", cause=e) from e
        logger.debug("Loaded schema declarations from '%s'", file_path)
        return builder

    def apply(self, builder: SchemaBuilder, data: dict[str, Any]) -> None:
        """Apply a parsed declaration mapping to ``builder``."""
        unknown = set(data) - {*_ROOTS, "types"}
        if unknown:
            raise SchemaParseError(message=f"Unknown top-level keys: {', '.join(sorted(unknown))}")

        for type_name, spec in _mapping(data.get("types"), "types").items():
            self._declare_type(builder, type_name, _mapping(spec, f"types.{type_name}"))

        for root in _ROOTS:
            declare = getattr(builder, root)
            for field_name, spec in _mapping(data.get(root), root).items():
                spec = _member(spec, f"{root}.{field_name}")
                f = declare(field_name, _type_of(spec, f"{root}.{field_name}"), description=spec.get("description"))
                self._configure_field(f, spec, f"{root}.{field_name}")

    def _declare_type(self, builder: SchemaBuilder, name: str, spec: dict[str, Any]) -> None:
        kind = spec.get("kind", "object")
        if kind not in _KINDS:
            raise SchemaParseError(message=f"types.{name}: unknown kind '{kind}', expected one of {', '.join(_KINDS)}")
        description = spec.get("description")

        if kind == "scalar":
            builder.scalar(name, description=description)
        elif kind == "object":
            obj = builder.object_type(name, description=description)
            for section in ("fields", "properties"):
                for field_name, raw in _mapping(spec.get(section), f"types.{name}.{section}").items():
                    where = f"types.{name}.{section}.{field_name}"
                    member = _member(raw, where)
                    declare = obj.field if section == "fields" else obj.property
                    f = declare(field_name, _type_of(member, where), description=member.get("description"))
                    self._configure_field(f, member, where)
        elif kind == "input":
            inp = builder.input_type(name, description=description)
            for value_name, raw in _mapping(spec.get("fields"), f"types.{name}.fields").items():
                where = f"types.{name}.fields.{value_name}"
                member = _member(raw, where)
                inp.input_value(
                    value_name,
                    _type_of(member, where),
                    default_value=member.get("default", Undefined),
                    description=member.get("description"),
                    deprecation_reason=self._reason(member),
                )
        else:
            enum = builder.enum_type(name, description=description)
            values = spec.get("values") or []
            if not isinstance(values, list):
                raise SchemaParseError(message=f"types.{name}.values must be a list")
            for raw in values:
                member = {"name": raw} if isinstance(raw, str) else _mapping(raw, f"types.{name}.values")
                if "name" not in member:
                    raise SchemaParseError(message=f"types.{name}.values: entry without a name")
                enum.value(
                    member["name"],
                    description=member.get("description"),
                    deprecation_reason=self._reason(member),
                )

    def _configure_field(self, f: FieldDeclaration, spec: dict[str, Any], where: str) -> None:
        reason = self._reason(spec)
        if reason is not None:
            f.deprecate(reason)
        for arg_name, raw in _mapping(spec.get("args"), f"{where}.args").items():
            arg = _member(raw, f"{where}.args.{arg_name}")
            f.argument(
                arg_name,
                _type_of(arg, f"{where}.args.{arg_name}"),
                default_value=arg.get("default", Undefined),
                description=arg.get("description"),
                deprecation_reason=self._reason(arg),
            )

    def _reason(self, spec: dict[str, Any]) -> str | None:
        deprecated = spec.get("deprecated")
        if deprecated is None or deprecated is False:
            return None
        if deprecated is True:
            return self._default_reason
        if isinstance(deprecated, str):
            return deprecated
        raise SchemaParseError(message=f"'deprecated' must be a boolean or a string, got {deprecated!r}")


def _mapping(value: Any, where: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise SchemaParseError(message=f"{where} must be a mapping, got {type(value).__name__}")
    return value


def _member(value: Any, where: str) -> dict[str, Any]:
    # Shorthand: "content: String!" is the same as "content: {type: String!}".
    if isinstance(value, str):
        return {"type": value}
    return _mapping(value, where)


def _type_of(spec: dict[str, Any], where: str) -> str:
    type_ref = spec.get("type")
    if not isinstance(type_ref, str):
        raise SchemaParseError(message=f"{where}: missing 'type'")
    return type_ref
