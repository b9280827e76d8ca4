"""Shared fixtures for unit and feature tests."""

from __future__ import annotations

import typing as typ

import msgspec
import pytest

from shredder.resolver import StaticSchemaResolver
from tests.fixtures.schemas import ALL_SCHEMAS
from tests.helpers.recording_logger import RecordingLogger

if typ.TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def resolver() -> StaticSchemaResolver:
    """Provide a resolver holding every test schema."""
    return StaticSchemaResolver.from_uris(ALL_SCHEMAS)


@pytest.fixture
def schema_dir(tmp_path: Path) -> Path:
    """Write every test schema into an Iglu static repository layout."""
    root = tmp_path / "iglu"
    for uri, schema in ALL_SCHEMAS.items():
        path = root / "schemas" / uri.removeprefix("iglu:")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(msgspec.json.encode(schema))
    return root


@pytest.fixture
def recording_logger() -> RecordingLogger:
    """Provide a logger double that records every call."""
    return RecordingLogger()
