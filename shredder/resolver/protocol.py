"""SchemaResolver protocol for schema registry lookups."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from shredder.schema import SchemaKey


@typ.runtime_checkable
class SchemaResolver(typ.Protocol):
    """Protocol for fetching JSON Schema documents by Iglu schema key.

    Implementations may read from memory, a local static repository, or a
    remote registry. The shredder treats a resolver as a black box and
    never caches what it returns.

    Examples
    --------
    >>> from shredder.resolver import SchemaResolver, StaticSchemaResolver
    >>> resolver: SchemaResolver = StaticSchemaResolver({})
    >>> isinstance(resolver, SchemaResolver)
    True

    """

    def lookup_schema(self, key: SchemaKey) -> dict[str, typ.Any]:
        """Return the JSON Schema document for ``key``.

        Raises
        ------
        SchemaNotFoundError
            If the resolver has no schema for ``key``.
        SchemaResolutionError
            If the lookup itself failed (transport error, bad document).

        """
        ...
