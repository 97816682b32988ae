"""Error hierarchy for the gqlschema package."""

from __future__ import annotations

from typing import Any

__all__ = [
    "GraphSchemaError",
    "ConfigNotFoundError",
    "ConfigError",
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
    "ErrorCodes",
]


class GraphSchemaError(Exception):
    """Base error for all gqlschema errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(GraphSchemaError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(GraphSchemaError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class SchemaValidationError(GraphSchemaError):
    """Raised by ``SchemaBuilder.build()`` when the declarations are not a valid schema.

    ``DuplicateTypeNameError`` is raised earlier, by the conflicting declaration.

    ``message`` is a fixed, stable text per violation kind; the offending
    type and member are carried in ``details``.
    """

    def __init__(
        self,
        message: str = "Schema validation failed",
        type_name: str | None = None,
        member_name: str | None = None,
        **kwargs: Any,
    ) -> None:
        details: dict[str, Any] = {"type_name": type_name, "member_name": member_name}
        details.update(kwargs.pop("details", None) or {})
        super().__init__(
            code="SCHEMA_VALIDATION_ERROR",
            message=message,
            details=details,
            **kwargs,
        )

    @property
    def type_name(self) -> str | None:
        """The type that owns the offending declaration."""
        return self.details["type_name"]

    @property
    def member_name(self) -> str | None:
        """The offending field, argument, input value or enum value, if any."""
        return self.details["member_name"]


class DuplicateTypeNameError(SchemaValidationError):
    """Raised when one name is declared as two different kinds of type."""

    def __init__(self, type_name: str, **kwargs: Any) -> None:
        super().__init__(message="Duplicate type name", type_name=type_name, **kwargs)


class DuplicateFieldNameError(SchemaValidationError):
    """Raised when a member name occurs twice within its owning type."""

    def __init__(self, type_name: str, member_name: str, **kwargs: Any) -> None:
        super().__init__(
            message="Duplicate field name",
            type_name=type_name,
            member_name=member_name,
            **kwargs,
        )


class UnknownMemberError(SchemaValidationError):
    """Raised when a deprecation targets a member that was never declared."""

    def __init__(self, type_name: str, member_name: str, **kwargs: Any) -> None:
        super().__init__(
            message="Unknown field/value",
            type_name=type_name,
            member_name=member_name,
            **kwargs,
        )


class UnknownTypeReferenceError(SchemaValidationError):
    """Raised when a field or input value references an undeclared type."""

    def __init__(self, type_name: str, member_name: str, reference: str, **kwargs: Any) -> None:
        super().__init__(
            message="Unknown type reference",
            type_name=type_name,
            member_name=member_name,
            details={"reference": reference},
            **kwargs,
        )

    @property
    def reference(self) -> str:
        """The unresolved type name."""
        return self.details["reference"]


class InvalidTypeReferenceError(SchemaValidationError):
    """Raised when an input type is used as an output or an output type as an input."""

    def __init__(self, type_name: str, member_name: str, reference: str, **kwargs: Any) -> None:
        super().__init__(
            message="Invalid type reference",
            type_name=type_name,
            member_name=member_name,
            details={"reference": reference},
            **kwargs,
        )

    @property
    def reference(self) -> str:
        """The type name used in the wrong position."""
        return self.details["reference"]


class DeprecatedRequiredInputError(SchemaValidationError):
    """Raised when a required input value or argument carries deprecation."""

    def __init__(self, type_name: str, member_name: str, **kwargs: Any) -> None:
        super().__init__(
            message="Required fields cannot be marked as deprecated",
            type_name=type_name,
            member_name=member_name,
            **kwargs,
        )


class SchemaBuilderClosedError(GraphSchemaError):
    """Raised when a builder is used after ``build()`` succeeded."""

    def __init__(self, operation: str, **kwargs: Any) -> None:
        super().__init__(
            code="SCHEMA_BUILDER_CLOSED",
            message=f"Schema already built, cannot {operation}",
            details={"operation": operation},
            **kwargs,
        )


class SchemaNotFoundError(GraphSchemaError):
    """Raised when a schema file cannot be found."""

    def __init__(self, schema_id: str, **kwargs: Any) -> None:
        super().__init__(
            code="SCHEMA_NOT_FOUND",
            message=f"Schema not found: {schema_id}",
            details={"schema_id": schema_id},
            **kwargs,
        )


class SchemaParseError(GraphSchemaError):
    """Raised when a schema file has invalid syntax or shape."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="SCHEMA_PARSE_ERROR", message=message, **kwargs)


class InvalidInputError(GraphSchemaError):
    """Raised when a declaration receives an invalid argument."""

    def __init__(self, message: str = "Invalid input", **kwargs: Any) -> None:
        super().__init__(code="GENERAL_INVALID_INPUT", message=message, **kwargs)


class ErrorCodes:
    """All error codes as constants.

    Use these instead of hardcoding error code strings.

    Example:
        if error.code == ErrorCodes.SCHEMA_VALIDATION_ERROR:
            report(error.details)
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    SCHEMA_VALIDATION_ERROR = "SCHEMA_VALIDATION_ERROR"
    SCHEMA_BUILDER_CLOSED = "SCHEMA_BUILDER_CLOSED"
    SCHEMA_NOT_FOUND = "SCHEMA_NOT_FOUND"
    SCHEMA_PARSE_ERROR = "SCHEMA_PARSE_ERROR"
    GENERAL_INVALID_INPUT = "GENERAL_INVALID_INPUT"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
