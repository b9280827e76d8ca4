"""Shred an enriched event's embedded JSON into per-type rows.

The event carries up to three JSON-bearing fields. Each runs through its
own branch: parse, validate the envelope, (contexts only) split, then
validate every inner instance against the schema it declares. Branch
results are combined in the fixed order unstruct event, contexts,
derived contexts, so an event either yields every shredded pair or every
error found across all three branches.

Examples
--------
>>> from shredder.events import EnrichedEvent
>>> from shredder.resolver import StaticSchemaResolver
>>> event = EnrichedEvent(event_id="e1", collector_tstamp="2020-01-01T00:00:00Z")
>>> shred(event, StaticSchemaResolver({}))
Valid(value=[])

"""

from __future__ import annotations

import typing as typ

import msgspec

from shredder.events import EnrichedEvent, decode_enriched_event

from .contexts import split_contexts, validate_contexts
from .extract import extract_json
from .hierarchy import make_partial_hierarchy
from .metadata import attach_metadata
from .observability import ShredEventLogger
from .result import Invalid, Valid, Validated, combine
from .validation import (
    CONTEXTS_CRITERION,
    UNSTRUCT_EVENT_CRITERION,
    validate_envelope,
    validate_instance,
)

if typ.TYPE_CHECKING:
    from shredder.resolver import SchemaResolver

    from .models import SelfDescribingData, ShreddedPair

UNSTRUCT_EVENT_FIELD = "unstruct_event"
CONTEXTS_FIELD = "contexts"
DERIVED_CONTEXTS_FIELD = "derived_contexts"


def extract_and_validate_unstruct_event(
    event: EnrichedEvent, resolver: SchemaResolver
) -> Validated[list[SelfDescribingData]]:
    """Validate the unstructured event envelope and the event inside it.

    Returns an empty list when the event has no unstructured event, and at
    most one instance otherwise.
    """
    parsed = extract_json(UNSTRUCT_EVENT_FIELD, event.unstruct_event)
    if parsed is None:
        return Valid([])
    if isinstance(parsed, Invalid):
        return parsed

    payload = validate_envelope(
        UNSTRUCT_EVENT_FIELD, UNSTRUCT_EVENT_CRITERION, parsed.value, resolver
    )
    if isinstance(payload, Invalid):
        return payload

    instance = validate_instance(UNSTRUCT_EVENT_FIELD, payload.value, resolver)
    if isinstance(instance, Invalid):
        return instance
    return Valid([instance.value])


def extract_and_validate_contexts(
    text: str | None, field: str, resolver: SchemaResolver
) -> Validated[list[SelfDescribingData]]:
    """Validate a contexts envelope and every context inside it.

    Parameters
    ----------
    text
        Raw contexts envelope, or ``None`` when absent.
    field
        Event field the text came from, used in error values.
    resolver
        Schema lookup for the envelope and each inner context.

    Returns
    -------
    Validated[list[SelfDescribingData]]
        Inner contexts in array order, or every error found.

    """
    parsed = extract_json(field, text)
    if parsed is None:
        return Valid([])
    if isinstance(parsed, Invalid):
        return parsed

    payload = validate_envelope(field, CONTEXTS_CRITERION, parsed.value, resolver)
    if isinstance(payload, Invalid):
        return payload

    contexts = split_contexts(field, payload.value)
    if isinstance(contexts, Invalid):
        return contexts
    return validate_contexts(field, contexts.value, resolver)


def extract_and_validate_custom_contexts(
    event: EnrichedEvent, resolver: SchemaResolver
) -> Validated[list[SelfDescribingData]]:
    """Validate the event's custom contexts."""
    return extract_and_validate_contexts(event.contexts, CONTEXTS_FIELD, resolver)


def extract_and_validate_derived_contexts(
    event: EnrichedEvent, resolver: SchemaResolver
) -> Validated[list[SelfDescribingData]]:
    """Validate the contexts added during enrichment."""
    return extract_and_validate_contexts(
        event.derived_contexts, DERIVED_CONTEXTS_FIELD, resolver
    )


def shred(
    event: EnrichedEvent, resolver: SchemaResolver
) -> Validated[list[ShreddedPair]]:
    """Shred every embedded JSON in ``event``.

    Parameters
    ----------
    event
        The enriched event to shred. It is not modified.
    resolver
        Schema lookup used for every envelope and instance.

    Returns
    -------
    Validated[list[ShreddedPair]]
        All shredded pairs in the order unstruct event, contexts, derived
        contexts, or every error found in any branch, in the same order.

    """
    partial_hierarchy = make_partial_hierarchy(event.event_id, event.collector_tstamp)
    combined = combine(
        [
            extract_and_validate_unstruct_event(event, resolver),
            extract_and_validate_custom_contexts(event, resolver),
            extract_and_validate_derived_contexts(event, resolver),
        ]
    )
    if isinstance(combined, Invalid):
        return combined
    return Valid([attach_metadata(data, partial_hierarchy) for data in combined.value])


def shred_result_to_json(result: Validated[list[ShreddedPair]]) -> dict[str, typ.Any]:
    """Render a shred result as a JSON-ready dict.

    Successful results become ``{"status": "valid", "pairs": [...]}`` with
    one ``{"schema", "table", "instance"}`` entry per pair; failures become
    ``{"status": "invalid", "errors": [...]}``.
    """
    if isinstance(result, Invalid):
        return {
            "status": "invalid",
            "errors": [msgspec.to_builtins(error) for error in result.errors],
        }
    return {
        "status": "valid",
        "pairs": [
            {
                "schema": pair.key.to_uri(),
                "table": pair.table,
                "instance": pair.instance,
            }
            for pair in result.value
        ],
    }


class Shredder:
    """Shred events against one resolver, logging each outcome.

    Examples
    --------
    >>> from shredder.resolver import StaticSchemaResolver
    >>> shredder = Shredder(StaticSchemaResolver({}))
    >>> shredder.shred_json(b'{"eventId": "e1", "collectorTimestamp": "t"}')
    Valid(value=[])

    """

    def __init__(
        self,
        resolver: SchemaResolver,
        *,
        event_logger: ShredEventLogger | None = None,
    ) -> None:
        """Store the resolver and the lifecycle logger."""
        self._resolver = resolver
        self._event_logger = event_logger or ShredEventLogger()

    @property
    def resolver(self) -> SchemaResolver:
        """Return the resolver used for schema lookups."""
        return self._resolver

    def shred(self, event: EnrichedEvent) -> Validated[list[ShreddedPair]]:
        """Shred ``event`` and log the outcome."""
        self._event_logger.log_shred_started(event_id=event.event_id)
        result = shred(event, self._resolver)
        if isinstance(result, Invalid):
            self._event_logger.log_shred_failed(
                event_id=event.event_id, errors=result.errors
            )
        else:
            self._event_logger.log_shred_completed(
                event_id=event.event_id, pairs=result.value
            )
        return result

    def shred_json(self, raw: bytes | str) -> Validated[list[ShreddedPair]]:
        """Decode an event record from JSON and shred it.

        Raises
        ------
        EventDecodeError
            If ``raw`` is not a valid event record.

        """
        return self.shred(decode_enriched_event(raw))
