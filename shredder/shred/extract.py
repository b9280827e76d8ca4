"""Parse the JSON-bearing text fields of an enriched event."""

from __future__ import annotations

import msgspec

from .errors import ShredError
from .result import Invalid, Valid, Validated


def extract_json(field: str, text: str | None) -> Validated[object] | None:
    """Parse one event field into a generic JSON tree.

    Parameters
    ----------
    field
        Event field name, used in the error message.
    text
        Raw field text, or ``None`` when the event does not carry the field.

    Returns
    -------
    Validated[object] | None
        ``None`` for an absent field, ``Invalid`` with a single
        ``malformed_json`` error for unparseable text (empty text
        included), otherwise ``Valid`` holding the parsed tree.

    """
    if text is None:
        return None
    try:
        return Valid(msgspec.json.decode(text))
    except (msgspec.DecodeError, RecursionError, UnicodeEncodeError) as exc:
        return Invalid.of(ShredError.malformed_json(field, str(exc)))
