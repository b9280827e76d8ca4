"""Environment configuration for schema resolvers.

Usage
-----
>>> import os
>>> os.environ["SHREDDER_SCHEMA_DIRS"] = "/srv/iglu"
>>> config = ResolverConfig.from_env()
>>> config.schema_dirs
(PosixPath('/srv/iglu'),)

"""

from __future__ import annotations

import dataclasses as dc
import os
from pathlib import Path

from .errors import ResolverConfigError

_DEFAULT_TIMEOUT_S = 10.0


def _split_list(raw: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dc.dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Where to look for schemas.

    Attributes
    ----------
    registry_urls
        Iglu HTTP repository base URLs, in lookup priority order.
    schema_dirs
        Local Iglu static repository directories. These are consulted before
        any HTTP registry.
    api_key
        Optional Iglu Server API key sent to every HTTP registry.
    timeout_s
        Per-request HTTP timeout in seconds.

    """

    registry_urls: tuple[str, ...] = ()
    schema_dirs: tuple[Path, ...] = ()
    api_key: str | None = None
    timeout_s: float = _DEFAULT_TIMEOUT_S

    @staticmethod
    def _parse_timeout(raw: str) -> float:
        if not raw.strip():
            return _DEFAULT_TIMEOUT_S
        try:
            value = float(raw)
        except ValueError as exc:
            raise ResolverConfigError.invalid_timeout(raw) from exc
        if value <= 0:
            raise ResolverConfigError.invalid_timeout(raw)
        return value

    @classmethod
    def from_env(cls) -> ResolverConfig:
        """Create configuration from environment variables.

        Reads:

        - ``SHREDDER_IGLU_REGISTRY_URLS``: comma-separated HTTP repositories.
        - ``SHREDDER_SCHEMA_DIRS``: comma-separated local schema directories.
        - ``SHREDDER_IGLU_API_KEY``: optional registry API key.
        - ``SHREDDER_IGLU_TIMEOUT_S``: positive request timeout, default 10.

        Raises
        ------
        ResolverConfigError
            If the timeout is not a positive number.

        """
        api_key = os.environ.get("SHREDDER_IGLU_API_KEY", "").strip() or None
        return cls(
            registry_urls=_split_list(os.environ.get("SHREDDER_IGLU_REGISTRY_URLS", "")),
            schema_dirs=tuple(
                Path(item)
                for item in _split_list(os.environ.get("SHREDDER_SCHEMA_DIRS", ""))
            ),
            api_key=api_key,
            timeout_s=cls._parse_timeout(os.environ.get("SHREDDER_IGLU_TIMEOUT_S", "")),
        )
