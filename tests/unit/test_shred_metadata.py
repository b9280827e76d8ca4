"""Unit tests for type hierarchies and metadata attachment."""

from __future__ import annotations

import copy

import msgspec
import pytest

from shredder.schema import SchemaKey
from shredder.shred import (
    TYPE_HIERARCHY_ROOT,
    SelfDescribingData,
    attach_metadata,
    make_partial_hierarchy,
)
from tests.fixtures.schemas import CLICK_URI
from tests.helpers.event_builders import DEFAULT_EVENT_ID, DEFAULT_TSTAMP

CLICK_KEY = SchemaKey.parse(CLICK_URI)


def _click() -> SelfDescribingData:
    return SelfDescribingData(
        key=CLICK_KEY, instance={"schema": CLICK_URI, "data": {"x": 1}}
    )


class TestTypeHierarchy:
    """Tests for partial and completed hierarchies."""

    def test_partial_hierarchy_hangs_off_events(self) -> None:
        """Before completion the tree holds only the root."""
        partial = make_partial_hierarchy(DEFAULT_EVENT_ID, DEFAULT_TSTAMP)

        assert partial.to_json() == {
            "rootId": "e1",
            "rootTstamp": "2020-01-01T00:00:00Z",
            "refRoot": TYPE_HIERARCHY_ROOT,
            "refTree": ["events"],
            "refParent": "events",
        }

    def test_complete_appends_without_mutating(self) -> None:
        """Completing returns a new hierarchy and leaves the partial one alone."""
        partial = make_partial_hierarchy(DEFAULT_EVENT_ID, DEFAULT_TSTAMP)

        completed = partial.complete(["click"])

        assert completed.ref_tree == ("events", "click")
        assert completed.ref_parent == "events"
        assert partial.ref_tree == ("events",)


class TestAttachMetadata:
    """Tests for attach_metadata."""

    def test_replaces_schema_and_sets_hierarchy(self) -> None:
        """The schema URI becomes a key object and the hierarchy is added."""
        partial = make_partial_hierarchy(DEFAULT_EVENT_ID, DEFAULT_TSTAMP)

        pair = attach_metadata(_click(), partial)

        assert pair.key == CLICK_KEY
        assert pair.table == "click"
        assert pair.instance == {
            "schema": {
                "vendor": "com.acme",
                "name": "click",
                "format": "jsonschema",
                "model": 1,
                "revision": 0,
                "addition": 0,
            },
            "data": {"x": 1},
            "hierarchy": {
                "rootId": "e1",
                "rootTstamp": "2020-01-01T00:00:00Z",
                "refRoot": "events",
                "refTree": ["events", "click"],
                "refParent": "events",
            },
        }

    def test_does_not_mutate_input(self) -> None:
        """The validated instance is left exactly as it was."""
        data = _click()
        before = copy.deepcopy(data.instance)

        attach_metadata(data, make_partial_hierarchy("e1", "t"))

        assert data.instance == before

    def test_output_shares_no_nested_objects_with_input(self) -> None:
        """Changing the shredded payload leaves the validated instance intact."""
        data = SelfDescribingData(
            key=CLICK_KEY,
            instance={"schema": CLICK_URI, "data": {"x": 1, "tags": ["a"]}},
        )

        pair = attach_metadata(data, make_partial_hierarchy("e1", "t"))
        pair.instance["data"]["x"] = 2
        pair.instance["data"]["tags"].append("b")

        assert pair.instance["data"] is not data.instance["data"]
        assert data.instance["data"] == {"x": 1, "tags": ["a"]}

    def test_is_deterministic(self) -> None:
        """Repeated calls serialize to identical bytes."""
        partial = make_partial_hierarchy("e1", "t")

        first = attach_metadata(_click(), partial)
        second = attach_metadata(_click(), partial)

        assert msgspec.json.encode(first.instance) == msgspec.json.encode(
            second.instance
        )

    def test_rejects_non_object_instance(self) -> None:
        """Only JSON objects can carry metadata."""
        data = SelfDescribingData(key=CLICK_KEY, instance=[1, 2])

        with pytest.raises(TypeError, match="JSON object"):
            attach_metadata(data, make_partial_hierarchy("e1", "t"))
