"""Attach schema and hierarchy metadata to validated instances."""

from __future__ import annotations

import copy
import typing as typ

from .models import ShreddedPair

if typ.TYPE_CHECKING:
    from .hierarchy import TypeHierarchy
    from .models import SelfDescribingData

SCHEMA_PROPERTY = "schema"
HIERARCHY_PROPERTY = "hierarchy"


def attach_metadata(
    data: SelfDescribingData, partial_hierarchy: TypeHierarchy
) -> ShreddedPair:
    """Build the shredded form of one validated instance.

    The result is a new object: a deep copy of the instance with the
    ``schema`` URI replaced by the structured key object and ``hierarchy``
    set to the hierarchy completed with the instance's own type name. The
    input instance is left untouched.

    Parameters
    ----------
    data
        A validated self-describing instance.
    partial_hierarchy
        The event's hierarchy before this instance's type was appended.

    Returns
    -------
    ShreddedPair
        The schema key and the rewritten instance.

    Raises
    ------
    TypeError
        If the instance is not a JSON object. Validation guarantees it is,
        so this signals a caller bug rather than bad input.

    """
    if not isinstance(data.instance, dict):
        msg = f"expected a validated JSON object, got {type(data.instance).__name__}"
        raise TypeError(msg)

    hierarchy = partial_hierarchy.complete([data.key.name])
    updated = copy.deepcopy(data.instance)
    updated[SCHEMA_PROPERTY] = data.key.to_json()
    updated[HIERARCHY_PROPERTY] = hierarchy.to_json()
    return ShreddedPair(key=data.key, instance=updated)
