"""Split a validated contexts envelope into its inner instances."""

from __future__ import annotations

import typing as typ

from .errors import ShredError
from .result import Invalid, Valid, Validated, sequence
from .validation import validate_instance

if typ.TYPE_CHECKING:
    from shredder.resolver import SchemaResolver

    from .models import SelfDescribingData


def split_contexts(field: str, payload: object) -> Validated[list[object]]:
    """Return the inner instances of a contexts payload, in order.

    The contexts schema requires an array, so a different shape only gets
    here when a registry serves a looser envelope schema.
    """
    if not isinstance(payload, list):
        return Invalid.of(
            ShredError.not_self_describing(
                field, "contexts envelope data must be an array"
            )
        )
    return Valid(list(payload))


def validate_contexts(
    field: str, contexts: list[object], resolver: SchemaResolver
) -> Validated[list[SelfDescribingData]]:
    """Validate every inner context, accumulating failures in array order."""
    return sequence(
        validate_instance(field, context, resolver, index=index)
        for index, context in enumerate(contexts)
    )
