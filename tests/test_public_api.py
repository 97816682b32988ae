"""Tests for the gqlschema public API surface.

Verifies that all expected names are importable from the top-level
``gqlschema`` package and that ``__all__`` is comprehensive.
"""

import re

import gqlschema


class TestPublicAPIImports:
    """Every public component must be importable from ``import gqlschema``."""

    # -- Schema --

    def test_schema_builder_importable(self):
        from gqlschema import SchemaBuilder

        assert SchemaBuilder is not None

    def test_schema_importable(self):
        from gqlschema import Schema

        assert Schema is not None

    def test_schema_loader_importable(self):
        from gqlschema import SchemaLoader

        assert SchemaLoader is not None

    def test_schema_exporter_importable(self):
        from gqlschema import SchemaExporter

        assert SchemaExporter is not None

    def test_type_ref_importable(self):
        from gqlschema import TypeKind, TypeRef

        assert TypeRef.parse("String!").wrappers == (TypeKind.NON_NULL,)

    # -- Introspection --

    def test_resolver_importable(self):
        from gqlschema import IntrospectionResolver

        assert IntrospectionResolver is not None

    def test_execute_introspection_importable(self):
        from gqlschema import execute_introspection

        assert callable(execute_introspection)

    def test_views_importable(self):
        from gqlschema import NotFoundResult, SchemaView, TypeView

        assert SchemaView is not None and TypeView is not None
        assert not NotFoundResult(name="Missing")

    # -- Config & errors --

    def test_config_importable(self):
        from gqlschema import Config

        assert Config is not None

    def test_validation_errors_share_base(self):
        for name in (
            "DuplicateTypeNameError",
            "DuplicateFieldNameError",
            "UnknownMemberError",
            "UnknownTypeReferenceError",
            "InvalidTypeReferenceError",
            "DeprecatedRequiredInputError",
        ):
            assert issubclass(getattr(gqlschema, name), gqlschema.SchemaValidationError)

    def test_builder_closed_error_not_a_validation_error(self):
        assert issubclass(gqlschema.SchemaBuilderClosedError, gqlschema.GraphSchemaError)
        assert not issubclass(gqlschema.SchemaBuilderClosedError, gqlschema.SchemaValidationError)


class TestPublicAPIAll:
    def test_all_names_resolve(self):
        for name in gqlschema.__all__:
            assert hasattr(gqlschema, name), name

    def test_version_is_set(self):
        assert isinstance(gqlschema.__version__, str)
        assert re.match(r"^\d+\.\d+\.\d+", gqlschema.__version__)


class TestEndToEnd:
    def test_build_and_introspect(self):
        builder = gqlschema.SchemaBuilder()
        builder.query("sample", "String").deprecate("sample query")
        schema = builder.build()

        result = gqlschema.execute_introspection(
            schema, "{__schema{queryType{fields(includeDeprecated: true){name isDeprecated}}}}"
        )
        assert result == {
            "data": {"__schema": {"queryType": {"fields": [{"name": "sample", "isDeprecated": True}]}}}
        }
