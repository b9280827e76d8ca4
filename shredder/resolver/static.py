"""In-memory and directory-backed schema resolvers."""

from __future__ import annotations

import typing as typ
from pathlib import Path

import msgspec

from shredder.schema import InvalidSchemaUriError, SchemaKey

from .errors import SchemaNotFoundError, SchemaResolutionError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

_SCHEMAS_DIR = "schemas"


class StaticSchemaResolver:
    """Resolve schemas from a fixed mapping of keys to documents.

    Examples
    --------
    >>> key = SchemaKey.parse("iglu:com.acme/click/jsonschema/1-0-0")
    >>> resolver = StaticSchemaResolver({key: {"type": "object"}})
    >>> resolver.lookup_schema(key)
    {'type': 'object'}

    """

    def __init__(
        self, schemas: cabc.Mapping[SchemaKey, dict[str, typ.Any]]
    ) -> None:
        """Copy the provided mapping so later changes do not leak in."""
        self._schemas: dict[SchemaKey, dict[str, typ.Any]] = dict(schemas)

    @classmethod
    def from_uris(
        cls, schemas: cabc.Mapping[str, dict[str, typ.Any]]
    ) -> StaticSchemaResolver:
        """Build a resolver from a mapping keyed by Iglu URI strings."""
        return cls({SchemaKey.parse(uri): schema for uri, schema in schemas.items()})

    @classmethod
    def from_directory(cls, root: Path | str) -> StaticSchemaResolver:
        """Load every schema below an Iglu static repository directory.

        The expected layout is ``[schemas/]vendor/name/format/M-R-A``, where
        each leaf is a file holding one JSON Schema document. Files outside
        that shape are ignored.

        Raises
        ------
        SchemaResolutionError
            If a schema file does not contain a JSON object.

        """
        root_path = Path(root)
        if (root_path / _SCHEMAS_DIR).is_dir():
            root_path = root_path / _SCHEMAS_DIR

        schemas: dict[SchemaKey, dict[str, typ.Any]] = {}
        for path in sorted(root_path.glob("*/*/*/*")):
            if not path.is_file():
                continue
            vendor, name, format_, version = path.relative_to(root_path).parts
            try:
                key = SchemaKey.parse(f"iglu:{vendor}/{name}/{format_}/{version}")
            except InvalidSchemaUriError:
                continue
            schemas[key] = _read_schema_file(key, path)
        return cls(schemas)

    def __len__(self) -> int:
        """Return the number of schemas held."""
        return len(self._schemas)

    def lookup_schema(self, key: SchemaKey) -> dict[str, typ.Any]:
        """Return the schema for ``key`` or raise ``SchemaNotFoundError``."""
        try:
            return self._schemas[key]
        except KeyError:
            raise SchemaNotFoundError(key) from None


def _read_schema_file(key: SchemaKey, path: Path) -> dict[str, typ.Any]:
    try:
        document = msgspec.json.decode(path.read_bytes())
    except (OSError, msgspec.DecodeError) as exc:
        raise SchemaResolutionError.invalid_document(key, str(exc)) from exc
    if not isinstance(document, dict):
        raise SchemaResolutionError.invalid_document(key, "expected a JSON object")
    return document
