"""Resolver that consults several repositories in priority order."""

from __future__ import annotations

import typing as typ

from shredder.logging import get_logger, log_warning

from .errors import SchemaNotFoundError, SchemaResolutionError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from shredder.schema import SchemaKey

    from .protocol import SchemaResolver

logger = get_logger(__name__)


class ChainedSchemaResolver:
    """Try each resolver in turn and return the first schema found.

    A repository that fails to answer does not hide a schema held by a
    later one. When no repository finds the schema, the first lookup
    failure is re-raised in preference to a plain not-found so callers
    can tell an outage from a genuinely unknown schema.
    """

    def __init__(self, resolvers: cabc.Sequence[SchemaResolver]) -> None:
        """Store the resolvers in lookup order."""
        self._resolvers = tuple(resolvers)

    @property
    def resolvers(self) -> tuple[SchemaResolver, ...]:
        """Return the resolvers in lookup order."""
        return self._resolvers

    def lookup_schema(self, key: SchemaKey) -> dict[str, typ.Any]:
        """Return the first schema any repository holds for ``key``."""
        first_failure: SchemaResolutionError | None = None
        for resolver in self._resolvers:
            try:
                return resolver.lookup_schema(key)
            except SchemaNotFoundError:
                continue
            except SchemaResolutionError as exc:
                log_warning(
                    logger,
                    "repository %s failed for %s: %s",
                    type(resolver).__name__,
                    key.to_uri(),
                    exc,
                )
                if first_failure is None:
                    first_failure = exc

        if first_failure is not None:
            raise first_failure
        raise SchemaNotFoundError(key)

    def close(self) -> None:
        """Close every chained resolver that holds resources."""
        for resolver in self._resolvers:
            close = getattr(resolver, "close", None)
            if callable(close):
                close()
