"""Iglu schema keys, SchemaVer versions, and schema criteria.

Self-describing JSON names its schema with an Iglu URI such as
``iglu:com.acme/click/jsonschema/1-0-0``. This module parses those URIs
into typed keys and renders the structured key object that replaces the
URI string on shredded instances.

Examples
--------
>>> key = SchemaKey.parse("iglu:com.acme/click/jsonschema/1-0-0")
>>> key.vendor, key.name, key.version.model
('com.acme', 'click', 1)
>>> SchemaCriterion.parse("iglu:com.acme/click/jsonschema/1-*-*").matches(key)
True

"""

from __future__ import annotations

import re
import typing as typ

import msgspec

from .errors import InvalidSchemaUriError

IGLU_PREFIX = "iglu:"

_SEGMENT = r"[a-zA-Z0-9_\-]+"
_VENDOR = r"[a-zA-Z0-9_\-.]+"
_VERSION_PATTERN = re.compile(r"^([1-9][0-9]*)-(0|[1-9][0-9]*)-(0|[1-9][0-9]*)$")
_KEY_PATTERN = re.compile(
    rf"^iglu:({_VENDOR})/({_SEGMENT})/({_SEGMENT})/"
    r"([1-9][0-9]*-(?:0|[1-9][0-9]*)-(?:0|[1-9][0-9]*))$"
)
_CRITERION_PATTERN = re.compile(
    rf"^iglu:({_VENDOR})/({_SEGMENT})/({_SEGMENT})/"
    r"([1-9][0-9]*)-(\*|0|[1-9][0-9]*)-(\*|0|[1-9][0-9]*)$"
)


class SchemaVer(msgspec.Struct, frozen=True, order=True):
    """A ``MODEL-REVISION-ADDITION`` schema version."""

    model: int
    revision: int
    addition: int

    @classmethod
    def parse(cls, value: str) -> SchemaVer:
        """Parse a ``M-R-A`` string such as ``1-0-2``."""
        match = _VERSION_PATTERN.match(value)
        if match is None:
            raise InvalidSchemaUriError.for_version(value)
        model, revision, addition = (int(part) for part in match.groups())
        return cls(model=model, revision=revision, addition=addition)

    def __str__(self) -> str:
        """Render as ``M-R-A``."""
        return f"{self.model}-{self.revision}-{self.addition}"


class SchemaKey(msgspec.Struct, frozen=True):
    """Full identity of one schema in an Iglu registry.

    Attributes
    ----------
    vendor
        Reverse-DNS vendor, e.g. ``com.snowplowanalytics.snowplow``.
    name
        Schema name. Doubles as the shredded type (table) name.
    format
        Schema format, ``jsonschema`` for every schema this package handles.
    version
        The schema's SchemaVer.

    """

    vendor: str
    name: str
    format: str
    version: SchemaVer

    @classmethod
    def parse(cls, uri: str) -> SchemaKey:
        """Parse an Iglu URI into a key.

        Raises
        ------
        InvalidSchemaUriError
            If ``uri`` does not match ``iglu:vendor/name/format/M-R-A``.

        """
        match = _KEY_PATTERN.match(uri)
        if match is None:
            raise InvalidSchemaUriError.for_key(uri)
        vendor, name, format_, version = match.groups()
        return cls(
            vendor=vendor,
            name=name,
            format=format_,
            version=SchemaVer.parse(version),
        )

    @property
    def vendor_name(self) -> str:
        """Return ``vendor/name``, the human-facing schema family."""
        return f"{self.vendor}/{self.name}"

    def to_path(self) -> str:
        """Return the registry path ``vendor/name/format/M-R-A``."""
        return f"{self.vendor}/{self.name}/{self.format}/{self.version}"

    def to_uri(self) -> str:
        """Return the Iglu URI for this key."""
        return f"{IGLU_PREFIX}{self.to_path()}"

    def to_json(self) -> dict[str, typ.Any]:
        """Return the structured schema-key object attached to shredded rows."""
        return {
            "vendor": self.vendor,
            "name": self.name,
            "format": self.format,
            "model": self.version.model,
            "revision": self.version.revision,
            "addition": self.version.addition,
        }

    def __str__(self) -> str:
        """Render as an Iglu URI."""
        return self.to_uri()


class SchemaCriterion(msgspec.Struct, frozen=True):
    """A pattern matching a family of compatible schema keys.

    ``revision`` and ``addition`` left as ``None`` match any value; the
    model number must always match exactly.
    """

    vendor: str
    name: str
    format: str
    model: int
    revision: int | None = None
    addition: int | None = None

    @classmethod
    def parse(cls, uri: str) -> SchemaCriterion:
        """Parse a criterion URI such as ``iglu:com.acme/click/jsonschema/1-*-*``."""
        match = _CRITERION_PATTERN.match(uri)
        if match is None:
            raise InvalidSchemaUriError.for_criterion(uri)
        vendor, name, format_, model, revision, addition = match.groups()
        return cls(
            vendor=vendor,
            name=name,
            format=format_,
            model=int(model),
            revision=None if revision == "*" else int(revision),
            addition=None if addition == "*" else int(addition),
        )

    def matches(self, key: SchemaKey) -> bool:
        """Return True when ``key`` belongs to this criterion's family."""
        if (key.vendor, key.name, key.format) != (self.vendor, self.name, self.format):
            return False
        if key.version.model != self.model:
            return False
        if self.revision is not None and key.version.revision != self.revision:
            return False
        return self.addition is None or key.version.addition == self.addition

    def to_uri(self) -> str:
        """Return the criterion as an Iglu URI with ``*`` wildcards."""
        revision = "*" if self.revision is None else str(self.revision)
        addition = "*" if self.addition is None else str(self.addition)
        return (
            f"{IGLU_PREFIX}{self.vendor}/{self.name}/{self.format}/"
            f"{self.model}-{revision}-{addition}"
        )

    def __str__(self) -> str:
        """Render as an Iglu criterion URI."""
        return self.to_uri()
