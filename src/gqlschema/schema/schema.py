"""The built, immutable schema graph."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from gqlschema.schema.types import ObjectType, TypeNode, TypeRef

__all__ = ["Schema"]


class Schema:
    """Root of a built schema graph.

    Owns every named type in a name-keyed table. Fields and input values
    refer to their value types by name only, so the graph may be cyclic.
    Instances are produced by ``SchemaBuilder.build()`` and never mutated
    afterwards, which makes them safe for concurrent readers.
    """

    __slots__ = ("_types", "_query_type_name", "_mutation_type_name", "_subscription_type_name")

    def __init__(
        self,
        types: Mapping[str, TypeNode],
        query_type_name: str,
        mutation_type_name: str | None = None,
        subscription_type_name: str | None = None,
    ) -> None:
        self._types: Mapping[str, TypeNode] = MappingProxyType(dict(types))
        self._query_type_name = query_type_name
        self._mutation_type_name = mutation_type_name
        self._subscription_type_name = subscription_type_name

    @property
    def types(self) -> Mapping[str, TypeNode]:
        """Read-only mapping of type name to type node, in declaration order."""
        return self._types

    @property
    def query_type(self) -> ObjectType:
        return self._types[self._query_type_name]  # type: ignore[return-value]

    @property
    def mutation_type(self) -> ObjectType | None:
        if self._mutation_type_name is None:
            return None
        return self._types[self._mutation_type_name]  # type: ignore[return-value]

    @property
    def subscription_type(self) -> ObjectType | None:
        if self._subscription_type_name is None:
            return None
        return self._types[self._subscription_type_name]  # type: ignore[return-value]

    def get_type(self, name: str) -> TypeNode | None:
        """Look up a named type. Returns None if not found."""
        return self._types.get(name)

    def resolve(self, ref: TypeRef) -> TypeNode:
        """Return the named type a reference points at.

        Raises:
            KeyError: If the reference does not resolve. Cannot happen for
                references stored in a built schema.
        """
        return self._types[ref.name]

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __iter__(self) -> Iterator[TypeNode]:
        return iter(self._types.values())

    def __len__(self) -> int:
        return len(self._types)

    def __repr__(self) -> str:
        return f"Schema(types={len(self._types)}, query={self._query_type_name!r})"
