"""Errors raised by schema resolvers."""

from __future__ import annotations

import enum
import typing as typ

if typ.TYPE_CHECKING:
    from shredder.schema import SchemaKey


class ResolverErrorReason(enum.StrEnum):
    """Machine-readable reasons for resolver failures."""

    NOT_FOUND = "not_found"
    HTTP_ERROR = "http_error"
    TRANSPORT_ERROR = "transport_error"
    INVALID_DOCUMENT = "invalid_document"


class ResolverError(Exception):
    """Base class for schema lookup failures."""

    def __init__(
        self,
        message: str,
        *,
        key: SchemaKey | None = None,
        reason: ResolverErrorReason | None = None,
    ) -> None:
        """Store the key being resolved and a machine-readable reason."""
        super().__init__(message)
        self.key = key
        self.reason = reason


class SchemaNotFoundError(ResolverError):
    """Raised when no configured repository holds the requested schema."""

    def __init__(self, key: SchemaKey) -> None:
        """Initialise with the missing schema key."""
        super().__init__(
            f"schema {key.to_uri()} not found",
            key=key,
            reason=ResolverErrorReason.NOT_FOUND,
        )


class SchemaResolutionError(ResolverError):
    """Raised when a repository could not answer a lookup."""

    def __init__(
        self,
        message: str,
        *,
        key: SchemaKey,
        reason: ResolverErrorReason,
        status_code: int | None = None,
    ) -> None:
        """Initialise with the failure reason and optional HTTP status."""
        super().__init__(message, key=key, reason=reason)
        self.status_code = status_code

    @classmethod
    def http_error(cls, key: SchemaKey, status_code: int) -> SchemaResolutionError:
        """Return an error for a non-2xx registry response."""
        return cls(
            f"registry returned HTTP {status_code} for {key.to_uri()}",
            key=key,
            reason=ResolverErrorReason.HTTP_ERROR,
            status_code=status_code,
        )

    @classmethod
    def transport_error(
        cls, key: SchemaKey, exc: Exception
    ) -> SchemaResolutionError:
        """Return an error for a request that never produced a response."""
        return cls(
            f"registry request for {key.to_uri()} failed: {exc}",
            key=key,
            reason=ResolverErrorReason.TRANSPORT_ERROR,
        )

    @classmethod
    def invalid_document(cls, key: SchemaKey, detail: str) -> SchemaResolutionError:
        """Return an error for a schema body that is not a JSON object."""
        return cls(
            f"schema document for {key.to_uri()} is invalid: {detail}",
            key=key,
            reason=ResolverErrorReason.INVALID_DOCUMENT,
        )


class ResolverConfigError(ValueError):
    """Raised when resolver configuration is invalid."""

    @classmethod
    def invalid_timeout(cls, raw: str) -> ResolverConfigError:
        """Return an error for a non-positive or non-numeric timeout."""
        return cls(f"SHREDDER_IGLU_TIMEOUT_S must be a positive number, got: {raw!r}")

    @classmethod
    def invalid_registry_url(cls, raw: str) -> ResolverConfigError:
        """Return an error for a registry URL without an http(s) scheme."""
        return cls(f"registry URL must start with http:// or https://, got: {raw!r}")

    @classmethod
    def missing_schema_dir(cls, raw: str) -> ResolverConfigError:
        """Return an error for a schema directory that does not exist."""
        return cls(f"schema directory does not exist: {raw!r}")

    @classmethod
    def no_repositories(cls) -> ResolverConfigError:
        """Return an error when neither registries nor directories are set."""
        return cls(
            "no schema repositories configured; set SHREDDER_IGLU_REGISTRY_URLS "
            "or SHREDDER_SCHEMA_DIRS"
        )
