"""JSON Schema documents served by the test resolvers."""

from __future__ import annotations

import typing as typ

SELF_DESC_META = (
    "http://iglucentral.com/schemas/com.snowplowanalytics.self-desc/"
    "schema/jsonschema/1-0-0#"
)

UNSTRUCT_EVENT_URI = "iglu:com.snowplowanalytics.snowplow/unstruct_event/jsonschema/1-0-0"
CONTEXTS_URI = "iglu:com.snowplowanalytics.snowplow/contexts/jsonschema/1-0-1"
CLICK_URI = "iglu:com.acme/click/jsonschema/1-0-0"
LINK_CLICK_URI = "iglu:com.snowplowanalytics.snowplow/link_click/jsonschema/1-0-1"
GEOLOCATION_URI = "iglu:com.acme/geolocation/jsonschema/1-1-0"

_SELF_DESCRIBING_ITEM: dict[str, typ.Any] = {
    "type": "object",
    "properties": {
        "schema": {"type": "string", "pattern": "^iglu:"},
        "data": {},
    },
    "required": ["schema", "data"],
    "additionalProperties": False,
}

UNSTRUCT_EVENT_SCHEMA: dict[str, typ.Any] = {
    "$schema": SELF_DESC_META,
    "self": {
        "vendor": "com.snowplowanalytics.snowplow",
        "name": "unstruct_event",
        "format": "jsonschema",
        "version": "1-0-0",
    },
    **_SELF_DESCRIBING_ITEM,
}

CONTEXTS_SCHEMA: dict[str, typ.Any] = {
    "$schema": SELF_DESC_META,
    "self": {
        "vendor": "com.snowplowanalytics.snowplow",
        "name": "contexts",
        "format": "jsonschema",
        "version": "1-0-1",
    },
    "type": "array",
    "items": _SELF_DESCRIBING_ITEM,
}

CLICK_SCHEMA: dict[str, typ.Any] = {
    "$schema": SELF_DESC_META,
    "type": "object",
    "properties": {"x": {"type": "integer"}, "y": {"type": "integer"}},
    "required": ["x"],
    "additionalProperties": False,
}

LINK_CLICK_SCHEMA: dict[str, typ.Any] = {
    "$schema": SELF_DESC_META,
    "type": "object",
    "properties": {
        "targetUrl": {"type": "string", "minLength": 1},
        "elementId": {"type": "string"},
    },
    "required": ["targetUrl"],
}

GEOLOCATION_SCHEMA: dict[str, typ.Any] = {
    "type": "object",
    "properties": {
        "latitude": {"type": "number", "minimum": -90, "maximum": 90},
        "longitude": {"type": "number", "minimum": -180, "maximum": 180},
    },
    "required": ["latitude", "longitude"],
}

ALL_SCHEMAS: dict[str, dict[str, typ.Any]] = {
    UNSTRUCT_EVENT_URI: UNSTRUCT_EVENT_SCHEMA,
    CONTEXTS_URI: CONTEXTS_SCHEMA,
    CLICK_URI: CLICK_SCHEMA,
    LINK_CLICK_URI: LINK_CLICK_SCHEMA,
    GEOLOCATION_URI: GEOLOCATION_SCHEMA,
}
