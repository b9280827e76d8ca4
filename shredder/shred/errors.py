"""Typed error values produced while shredding an event.

Shredding never raises for bad input data. Each failure becomes a
:class:`ShredError` value inside an ``Invalid`` result so that every
problem in an event is reported together.
"""

from __future__ import annotations

import enum
import typing as typ

import msgspec

if typ.TYPE_CHECKING:
    from shredder.schema import SchemaCriterion, SchemaKey


class ShredErrorKind(enum.StrEnum):
    """Machine-readable categories of shred failures."""

    MALFORMED_JSON = "malformed_json"
    NOT_SELF_DESCRIBING = "not_self_describing"
    SCHEMA_CRITERION_MISMATCH = "schema_criterion_mismatch"
    SCHEMA_NOT_FOUND = "schema_not_found"
    SCHEMA_RESOLUTION_FAILED = "schema_resolution_failed"
    STRUCTURAL_VIOLATION = "structural_violation"


class ShredError(msgspec.Struct, kw_only=True, frozen=True, omit_defaults=True):
    """One problem found in one JSON-bearing field of an event.

    Attributes
    ----------
    kind
        Failure category.
    field
        Event field the problem came from: ``unstruct_event``, ``contexts``
        or ``derived_contexts``.
    message
        Human-readable description.
    index
        Position of the offending instance within a contexts array, when
        the problem belongs to one inner context.
    schema_uri
        Iglu URI involved, when one is known.
    path
        JSON path of a structural violation within the validated payload.

    """

    kind: ShredErrorKind
    field: str
    message: str
    index: int | None = None
    schema_uri: str | None = None
    path: str | None = None

    @classmethod
    def malformed_json(cls, field: str, detail: str) -> ShredError:
        """Field text could not be parsed as JSON."""
        return cls(
            kind=ShredErrorKind.MALFORMED_JSON,
            field=field,
            message=f"field {field} does not contain valid JSON: {detail}",
        )

    @classmethod
    def not_self_describing(
        cls, field: str, detail: str, *, index: int | None = None
    ) -> ShredError:
        """JSON lacks the ``schema``/``data`` envelope of self-describing JSON."""
        return cls(
            kind=ShredErrorKind.NOT_SELF_DESCRIBING,
            field=field,
            message=f"not a self-describing JSON: {detail}",
            index=index,
        )

    @classmethod
    def criterion_mismatch(
        cls, field: str, key: SchemaKey, criterion: SchemaCriterion
    ) -> ShredError:
        """Declared schema is outside the family the field requires."""
        return cls(
            kind=ShredErrorKind.SCHEMA_CRITERION_MISMATCH,
            field=field,
            message=(
                f"schema {key.to_uri()} does not match expected criterion "
                f"{criterion.to_uri()}"
            ),
            schema_uri=key.to_uri(),
        )

    @classmethod
    def schema_not_found(
        cls, field: str, key: SchemaKey, *, index: int | None = None
    ) -> ShredError:
        """No repository knows the declared schema."""
        return cls(
            kind=ShredErrorKind.SCHEMA_NOT_FOUND,
            field=field,
            message=f"schema {key.vendor_name} ({key.to_uri()}) could not be found",
            index=index,
            schema_uri=key.to_uri(),
        )

    @classmethod
    def resolution_failed(
        cls, field: str, key: SchemaKey, detail: str, *, index: int | None = None
    ) -> ShredError:
        """A repository failed to answer, or returned an unusable schema."""
        return cls(
            kind=ShredErrorKind.SCHEMA_RESOLUTION_FAILED,
            field=field,
            message=f"schema {key.to_uri()} could not be resolved: {detail}",
            index=index,
            schema_uri=key.to_uri(),
        )

    @classmethod
    def structural_violation(
        cls,
        field: str,
        key: SchemaKey,
        *,
        path: str,
        detail: str,
        index: int | None = None,
    ) -> ShredError:
        """Payload breaks one rule of its schema."""
        return cls(
            kind=ShredErrorKind.STRUCTURAL_VIOLATION,
            field=field,
            message=f"{path}: {detail}",
            index=index,
            schema_uri=key.to_uri(),
            path=path,
        )

    def __str__(self) -> str:
        """Render as ``[kind] field[index]: message``."""
        location = self.field if self.index is None else f"{self.field}[{self.index}]"
        return f"[{self.kind}] {location}: {self.message}"
