"""Schema resolvers: the shredder's window onto Iglu schema repositories."""

from __future__ import annotations

from .chain import ChainedSchemaResolver
from .config import ResolverConfig
from .errors import (
    ResolverConfigError,
    ResolverError,
    ResolverErrorReason,
    SchemaNotFoundError,
    SchemaResolutionError,
)
from .factory import create_schema_resolver
from .http import HttpRegistryConfig, HttpSchemaResolver
from .protocol import SchemaResolver
from .static import StaticSchemaResolver

__all__ = [
    "ChainedSchemaResolver",
    "HttpRegistryConfig",
    "HttpSchemaResolver",
    "ResolverConfig",
    "ResolverConfigError",
    "ResolverError",
    "ResolverErrorReason",
    "SchemaNotFoundError",
    "SchemaResolutionError",
    "SchemaResolver",
    "StaticSchemaResolver",
    "create_schema_resolver",
]
