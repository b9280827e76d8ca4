"""The enriched event record consumed by the shredder."""

from __future__ import annotations

import msgspec


class EventDecodeError(ValueError):
    """Raised when an enriched event record cannot be decoded."""

    def __init__(self, detail: str) -> None:
        """Record the decoder's diagnostic."""
        self.detail = detail
        super().__init__(f"invalid enriched event: {detail}")


class EnrichedEvent(msgspec.Struct, kw_only=True, frozen=True, rename="camel"):
    """The subset of an enriched event the shredder reads.

    The three optional text fields each hold embedded self-describing JSON
    exactly as the enrichment stage wrote it; the shredder parses them.

    Attributes
    ----------
    event_id
        Identifier of the event; becomes ``hierarchy.rootId``.
    collector_tstamp
        Collector timestamp; becomes ``hierarchy.rootTstamp``.
    unstruct_event
        Unstructured event envelope (``unstruct_event`` schema), if any.
    contexts
        Custom contexts envelope (``contexts`` schema), if any.
    derived_contexts
        Derived contexts envelope (``contexts`` schema), if any.

    """

    event_id: str
    collector_tstamp: str = msgspec.field(name="collectorTimestamp")
    unstruct_event: str | None = None
    contexts: str | None = None
    derived_contexts: str | None = None


def decode_enriched_event(raw: bytes | str) -> EnrichedEvent:
    """Decode an event record from its camelCase JSON form.

    Examples
    --------
    >>> event = decode_enriched_event(
    ...     '{"eventId": "e1", "collectorTimestamp": "2020-01-01T00:00:00Z"}'
    ... )
    >>> event.event_id, event.contexts
    ('e1', None)

    """
    try:
        return msgspec.json.decode(raw, type=EnrichedEvent)
    except msgspec.DecodeError as exc:
        raise EventDecodeError(str(exc)) from exc
