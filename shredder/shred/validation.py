"""Self-describing JSON checks and schema validation against a resolver.

Validating a self-describing JSON runs four checks in order, stopping at
the first that fails:

1. the tree is an object with a string ``schema`` Iglu URI and a ``data``
   property, and nothing else;
2. for envelopes only, the declared key matches the expected criterion;
3. the resolver returns the declared schema;
4. ``data`` conforms to that schema. Every violation is reported, not
   just the first.
"""

from __future__ import annotations

import typing as typ

from jsonschema import Draft4Validator
from jsonschema.exceptions import SchemaError
from jsonschema.validators import validator_for
from referencing.exceptions import Unresolvable

from shredder.resolver import ResolverError, SchemaNotFoundError
from shredder.schema import InvalidSchemaUriError, SchemaCriterion, SchemaKey

from .errors import ShredError
from .models import SelfDescribingData
from .result import Invalid, Valid, Validated

if typ.TYPE_CHECKING:
    from shredder.resolver import SchemaResolver

UNSTRUCT_EVENT_CRITERION = SchemaCriterion(
    vendor="com.snowplowanalytics.snowplow",
    name="unstruct_event",
    format="jsonschema",
    model=1,
)
CONTEXTS_CRITERION = SchemaCriterion(
    vendor="com.snowplowanalytics.snowplow",
    name="contexts",
    format="jsonschema",
    model=1,
)

_ENVELOPE_PROPERTIES = frozenset({"schema", "data"})


def read_self_describing(
    field: str, tree: object, *, index: int | None = None
) -> Validated[SelfDescribingData]:
    """Check the envelope shape of a self-describing JSON and parse its key."""
    if not isinstance(tree, dict):
        return Invalid.of(
            ShredError.not_self_describing(
                field,
                f"expected a JSON object, got {_json_type_name(tree)}",
                index=index,
            )
        )

    schema_ref = tree.get("schema")
    if not isinstance(schema_ref, str):
        return Invalid.of(
            ShredError.not_self_describing(
                field, "missing string property 'schema'", index=index
            )
        )
    if "data" not in tree:
        return Invalid.of(
            ShredError.not_self_describing(
                field, "missing property 'data'", index=index
            )
        )
    if extra := sorted(set(tree) - _ENVELOPE_PROPERTIES):
        return Invalid.of(
            ShredError.not_self_describing(
                field, f"unexpected properties {extra}", index=index
            )
        )

    try:
        key = SchemaKey.parse(schema_ref)
    except InvalidSchemaUriError as exc:
        return Invalid.of(ShredError.not_self_describing(field, str(exc), index=index))
    return Valid(SelfDescribingData(key=key, instance=tree))


def resolve_schema(
    field: str,
    key: SchemaKey,
    resolver: SchemaResolver,
    *,
    index: int | None = None,
) -> Validated[dict[str, typ.Any]]:
    """Look up ``key``, turning resolver failures into error values."""
    try:
        return Valid(resolver.lookup_schema(key))
    except SchemaNotFoundError:
        return Invalid.of(ShredError.schema_not_found(field, key, index=index))
    except ResolverError as exc:
        return Invalid.of(
            ShredError.resolution_failed(field, key, str(exc), index=index)
        )


def check_structure(
    field: str,
    data: SelfDescribingData,
    schema: dict[str, typ.Any],
    *,
    index: int | None = None,
) -> Validated[SelfDescribingData]:
    """Validate ``data``'s payload against ``schema``, collecting all violations."""
    validator_cls = validator_for(schema, default=Draft4Validator)
    try:
        validator_cls.check_schema(schema)
    except SchemaError as exc:
        return Invalid.of(
            ShredError.resolution_failed(
                field,
                data.key,
                f"invalid schema document: {exc.message}",
                index=index,
            )
        )

    try:
        violations = sorted(
            validator_cls(schema).iter_errors(data.instance["data"]),
            key=lambda violation: (violation.json_path, violation.message),
        )
    except Unresolvable as exc:
        return Invalid.of(
            ShredError.resolution_failed(
                field, data.key, f"unresolvable $ref: {exc}", index=index
            )
        )
    if violations:
        return Invalid(
            tuple(
                ShredError.structural_violation(
                    field,
                    data.key,
                    path=violation.json_path,
                    detail=violation.message,
                    index=index,
                )
                for violation in violations
            )
        )
    return Valid(data)


def validate_instance(
    field: str,
    tree: object,
    resolver: SchemaResolver,
    *,
    index: int | None = None,
) -> Validated[SelfDescribingData]:
    """Validate a self-describing JSON against whatever schema it declares.

    Returns
    -------
    Validated[SelfDescribingData]
        The declared key paired with the whole self-describing object.

    """
    read = read_self_describing(field, tree, index=index)
    if isinstance(read, Invalid):
        return read
    return _validate_resolved(field, read.value, resolver, index=index)


def validate_envelope(
    field: str,
    criterion: SchemaCriterion,
    tree: object,
    resolver: SchemaResolver,
) -> Validated[object]:
    """Validate an envelope that must belong to ``criterion``'s family.

    Returns
    -------
    Validated[object]
        The envelope's ``data`` payload.

    """
    read = read_self_describing(field, tree)
    if isinstance(read, Invalid):
        return read

    envelope = read.value
    if not criterion.matches(envelope.key):
        return Invalid.of(ShredError.criterion_mismatch(field, envelope.key, criterion))

    checked = _validate_resolved(field, envelope, resolver)
    if isinstance(checked, Invalid):
        return checked
    return Valid(checked.value.instance["data"])


def _validate_resolved(
    field: str,
    data: SelfDescribingData,
    resolver: SchemaResolver,
    *,
    index: int | None = None,
) -> Validated[SelfDescribingData]:
    schema = resolve_schema(field, data.key, resolver, index=index)
    if isinstance(schema, Invalid):
        return schema
    return check_structure(field, data, schema.value, index=index)


def _json_type_name(value: object) -> str:
    match value:
        case None:
            return "null"
        case bool():
            return "boolean"
        case int() | float():
            return "number"
        case str():
            return "string"
        case list():
            return "array"
        case _:
            return type(value).__name__
