"""Iglu HTTP registry resolver backed by httpx."""

from __future__ import annotations

import dataclasses
import typing as typ

import httpx
import msgspec

from shredder.logging import get_logger, log_error, log_info

from .errors import ResolverConfigError, SchemaNotFoundError, SchemaResolutionError

if typ.TYPE_CHECKING:
    import types

    from shredder.schema import SchemaKey

logger = get_logger(__name__)

_HTTP_NOT_FOUND = 404
_DEFAULT_TIMEOUT_S = 10.0


@dataclasses.dataclass(frozen=True, slots=True)
class HttpRegistryConfig:
    """Connection settings for one Iglu HTTP repository.

    Attributes
    ----------
    base_url
        Repository root; schemas live under ``{base_url}/schemas/...``.
    api_key
        Optional Iglu Server API key, sent in the ``apikey`` header.
    timeout_s
        Per-request timeout in seconds.

    """

    base_url: str
    api_key: str | None = None
    timeout_s: float = _DEFAULT_TIMEOUT_S
    user_agent: str = "shredder/0.1"

    def __post_init__(self) -> None:
        """Reject URLs without an HTTP scheme."""
        if not self.base_url.startswith(("http://", "https://")):
            raise ResolverConfigError.invalid_registry_url(self.base_url)

    def schema_url(self, key: SchemaKey) -> str:
        """Return the full URL of ``key`` within this repository."""
        return f"{self.base_url.rstrip('/')}/schemas/{key.to_path()}"


class HttpSchemaResolver:
    """Fetch schemas from an Iglu Server or static HTTP repository."""

    def __init__(
        self,
        config: HttpRegistryConfig,
        *,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialise with repository settings and an optional shared client."""
        self._config = config
        self._owns_client = http_client is None
        headers = {"User-Agent": config.user_agent, "Accept": "application/json"}
        if config.api_key:
            headers["apikey"] = config.api_key
        self._headers = headers
        self._client = http_client or httpx.Client(timeout=config.timeout_s)

    @property
    def base_url(self) -> str:
        """Return the repository root URL."""
        return self._config.base_url

    def close(self) -> None:
        """Close the HTTP client when this resolver created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpSchemaResolver:
        """Return self for ``with`` blocks."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: types.TracebackType | None,
    ) -> None:
        """Close owned resources on exit."""
        self.close()

    def lookup_schema(self, key: SchemaKey) -> dict[str, typ.Any]:
        """Fetch the schema document for ``key``.

        Raises
        ------
        SchemaNotFoundError
            If the registry answers 404.
        SchemaResolutionError
            On any other non-2xx status, a transport failure, or a body that
            is not a JSON object.

        """
        url = self._config.schema_url(key)
        try:
            response = self._client.get(url, headers=self._headers)
        except httpx.HTTPError as exc:
            log_error(
                logger,
                "schema lookup failed url=%s error=%s",
                url,
                exc,
                exc_info=exc,
            )
            raise SchemaResolutionError.transport_error(key, exc) from exc

        if response.status_code == _HTTP_NOT_FOUND:
            log_info(logger, "schema not found url=%s", url)
            raise SchemaNotFoundError(key)
        if response.is_error:
            raise SchemaResolutionError.http_error(key, response.status_code)

        return _decode_schema(key, response.content)


def _decode_schema(key: SchemaKey, body: bytes) -> dict[str, typ.Any]:
    try:
        document = msgspec.json.decode(body)
    except msgspec.DecodeError as exc:
        raise SchemaResolutionError.invalid_document(key, str(exc)) from exc
    if not isinstance(document, dict):
        raise SchemaResolutionError.invalid_document(key, "expected a JSON object")
    return document
