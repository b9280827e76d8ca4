"""shredder: schema-driven shredding of self-describing JSON in enriched events."""

from __future__ import annotations

from .events import EnrichedEvent, EventDecodeError, decode_enriched_event
from .schema import SchemaCriterion, SchemaKey, SchemaVer
from .shred import (
    Invalid,
    ShredError,
    ShredErrorKind,
    ShreddedPair,
    Shredder,
    TypeHierarchy,
    Valid,
    Validated,
    shred,
)

__all__ = [
    "EnrichedEvent",
    "EventDecodeError",
    "Invalid",
    "SchemaCriterion",
    "SchemaKey",
    "SchemaVer",
    "ShredError",
    "ShredErrorKind",
    "ShreddedPair",
    "Shredder",
    "TypeHierarchy",
    "Valid",
    "Validated",
    "decode_enriched_event",
    "shred",
]
