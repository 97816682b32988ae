"""Shared test fixtures for the schema and introspection test suites."""

from __future__ import annotations

from pathlib import Path

import pytest

from gqlschema.config import Config
from gqlschema.introspection.resolver import IntrospectionResolver
from gqlschema.schema.builder import SchemaBuilder
from gqlschema.schema.schema import Schema


@pytest.fixture
def builder() -> SchemaBuilder:
    """An open builder with default configuration."""
    return SchemaBuilder()


@pytest.fixture
def library_schema() -> Schema:
    """A schema touching every kind of deprecation the builder supports.

    - query ``book`` (active) and ``oldBook`` (deprecated)
    - mutation ``addBook`` with a deprecated optional argument
    - object ``Book`` with a self reference and a deprecated extension property
    - input ``BookInput`` with a deprecated optional value
    - enum ``Genre`` with a deprecated value
    """
    b = SchemaBuilder()
    b.query("book", "Book").argument("id", "ID!")
    b.query("oldBook", "Book", deprecation_reason="use book")

    b.mutation("addBook", "Book!").argument("input", "BookInput!").argument(
        "notify", "Boolean", deprecation_reason="notifications removed"
    )

    book = b.object_type("Book", description="A book in the library.")
    book.field("id", "ID!")
    book.field("title", "String!")
    book.field("genre", "Genre")
    book.field("sequel", "Book")
    book.property("shelf", "String").deprecate("shelves are gone")

    b.input_type("BookInput").input_value("title", "String!")
    b.input_type("BookInput").input_value("isbn", "String", deprecation_reason="isbn is derived")
    b.input_type("BookInput").input_value("genre", "Genre", default_value="NOVEL")

    b.enum_type("Genre", ["NOVEL", "POETRY", "PAMPHLET"]).deprecate("PAMPHLET", "too short")
    return b.build()


@pytest.fixture
def resolver(library_schema: Schema) -> IntrospectionResolver:
    return IntrospectionResolver(library_schema)


@pytest.fixture
def schema_config() -> Config:
    return Config(
        data={
            "schema": {"default_deprecation_reason": "Gone"},
            "introspection": {"include_deprecated_default": False},
        }
    )


@pytest.fixture
def schema_file(tmp_path: Path) -> Path:
    """A YAML schema file equivalent in spirit to ``library_schema``."""
    content = """
query:
  book:
    type: Book
    args:
      id: ID!
  oldBook: {type: Book, deprecated: use book}
types:
  Book:
    kind: object
    description: A book.
    fields:
      id: ID!
      title: String!
      genre: Genre
    properties:
      shelf: {type: String, deprecated: true}
  BookInput:
    kind: input
    fields:
      title: String!
      isbn: {type: String, deprecated: isbn is derived}
  Genre:
    kind: enum
    values:
      - NOVEL
      - {name: PAMPHLET, deprecated: too short}
  Date:
    kind: scalar
"""
    path = tmp_path / "library.schema.yaml"
    path.write_text(content)
    return path
