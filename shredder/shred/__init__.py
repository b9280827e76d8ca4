"""Shred self-describing JSON out of enriched events.

Quick example
-------------

    >>> from shredder.events import EnrichedEvent
    >>> from shredder.resolver import StaticSchemaResolver
    >>> from shredder.shred import shred
    >>> resolver = StaticSchemaResolver.from_directory("iglu-schemas")
    >>> result = shred(EnrichedEvent(event_id="e1", collector_tstamp="t"), resolver)
"""

from __future__ import annotations

from .contexts import split_contexts, validate_contexts
from .errors import ShredError, ShredErrorKind
from .extract import extract_json
from .hierarchy import TYPE_HIERARCHY_ROOT, TypeHierarchy, make_partial_hierarchy
from .metadata import attach_metadata
from .models import SelfDescribingData, ShreddedPair
from .observability import ShredEventLogger, ShredEventType
from .result import Invalid, Valid, Validated, combine, sequence
from .service import (
    CONTEXTS_FIELD,
    DERIVED_CONTEXTS_FIELD,
    UNSTRUCT_EVENT_FIELD,
    Shredder,
    extract_and_validate_contexts,
    extract_and_validate_custom_contexts,
    extract_and_validate_derived_contexts,
    extract_and_validate_unstruct_event,
    shred,
    shred_result_to_json,
)
from .validation import (
    CONTEXTS_CRITERION,
    UNSTRUCT_EVENT_CRITERION,
    check_structure,
    read_self_describing,
    resolve_schema,
    validate_envelope,
    validate_instance,
)

__all__ = [
    "CONTEXTS_CRITERION",
    "CONTEXTS_FIELD",
    "DERIVED_CONTEXTS_FIELD",
    "TYPE_HIERARCHY_ROOT",
    "UNSTRUCT_EVENT_CRITERION",
    "UNSTRUCT_EVENT_FIELD",
    "Invalid",
    "SelfDescribingData",
    "ShredError",
    "ShredErrorKind",
    "ShredEventLogger",
    "ShredEventType",
    "ShreddedPair",
    "Shredder",
    "TypeHierarchy",
    "Valid",
    "Validated",
    "attach_metadata",
    "check_structure",
    "combine",
    "extract_and_validate_contexts",
    "extract_and_validate_custom_contexts",
    "extract_and_validate_derived_contexts",
    "extract_and_validate_unstruct_event",
    "extract_json",
    "make_partial_hierarchy",
    "read_self_describing",
    "resolve_schema",
    "sequence",
    "shred",
    "shred_result_to_json",
    "split_contexts",
    "validate_contexts",
    "validate_envelope",
    "validate_instance",
]
