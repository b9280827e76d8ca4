"""Iglu schema references: keys, versions, and criteria."""

from __future__ import annotations

from .errors import InvalidSchemaUriError
from .key import IGLU_PREFIX, SchemaCriterion, SchemaKey, SchemaVer

__all__ = [
    "IGLU_PREFIX",
    "InvalidSchemaUriError",
    "SchemaCriterion",
    "SchemaKey",
    "SchemaVer",
]
