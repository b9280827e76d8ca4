"""Build a schema resolver from configuration."""

from __future__ import annotations

import typing as typ

from .chain import ChainedSchemaResolver
from .config import ResolverConfig
from .errors import ResolverConfigError
from .http import HttpRegistryConfig, HttpSchemaResolver
from .static import StaticSchemaResolver

if typ.TYPE_CHECKING:
    from .protocol import SchemaResolver


def create_schema_resolver(config: ResolverConfig | None = None) -> ChainedSchemaResolver:
    """Create a resolver chaining local directories and HTTP registries.

    Local directories are consulted first, then HTTP registries, each in
    the order configured.

    Parameters
    ----------
    config
        Resolver settings. ``None`` reads them with
        :meth:`ResolverConfig.from_env`.

    Returns
    -------
    ChainedSchemaResolver
        Resolver over every configured repository.

    Raises
    ------
    ResolverConfigError
        If no repository is configured, a directory is missing, or a
        registry URL is invalid.

    """
    resolved_config = ResolverConfig.from_env() if config is None else config
    if not resolved_config.registry_urls and not resolved_config.schema_dirs:
        raise ResolverConfigError.no_repositories()

    resolvers: list[SchemaResolver] = []
    for directory in resolved_config.schema_dirs:
        if not directory.is_dir():
            raise ResolverConfigError.missing_schema_dir(str(directory))
        resolvers.append(StaticSchemaResolver.from_directory(directory))

    resolvers.extend(
        HttpSchemaResolver(
            HttpRegistryConfig(
                base_url=url,
                api_key=resolved_config.api_key,
                timeout_s=resolved_config.timeout_s,
            )
        )
        for url in resolved_config.registry_urls
    )
    return ChainedSchemaResolver(resolvers)
