"""Values flowing between shredding stages."""

from __future__ import annotations

import dataclasses
import typing as typ

if typ.TYPE_CHECKING:
    from shredder.schema import SchemaKey


@dataclasses.dataclass(frozen=True, slots=True)
class SelfDescribingData:
    """A self-describing JSON object and the schema key it declares.

    Once returned by the validator the instance has been checked against
    the schema ``key`` names.
    """

    key: SchemaKey
    instance: dict[str, typ.Any]


@dataclasses.dataclass(frozen=True, slots=True)
class ShreddedPair:
    """A validated instance ready for its per-type table.

    ``instance`` keeps the original properties, with ``schema`` replaced by
    the structured key object and ``hierarchy`` added.
    """

    key: SchemaKey
    instance: dict[str, typ.Any]

    @property
    def table(self) -> str:
        """Return the type name this instance is stored under."""
        return self.key.name
