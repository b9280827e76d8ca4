"""CLI shredding behaviour tests."""
# ruff: noqa: D103

from __future__ import annotations

import subprocess
import sys
import typing as typ
from pathlib import Path  # noqa: TC003

import msgspec
import pytest

from shredder.cli import EXIT_BAD_INPUT, EXIT_OK, EXIT_SHRED_FAILED, main
from tests.fixtures.schemas import CLICK_URI
from tests.helpers.event_builders import contexts_envelope, self_describing

if typ.TYPE_CHECKING:
    from _pytest.capture import CaptureFixture
    from _pytest.monkeypatch import MonkeyPatch


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: MonkeyPatch) -> None:
    for name in (
        "SHREDDER_IGLU_REGISTRY_URLS",
        "SHREDDER_SCHEMA_DIRS",
        "SHREDDER_IGLU_API_KEY",
        "SHREDDER_IGLU_TIMEOUT_S",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("SHREDDER_LOG_LEVEL", "ERROR")


def _write_event(tmp_path: Path, contexts: str | None) -> Path:
    record = {
        "eventId": "e1",
        "collectorTimestamp": "2020-01-01T00:00:00Z",
        "contexts": contexts,
    }
    path = tmp_path / "event.json"
    path.write_bytes(msgspec.json.encode(record))
    return path


def test_cli_prints_shredded_pairs(
    tmp_path: Path, schema_dir: Path, capsys: CaptureFixture[str]
) -> None:
    event = _write_event(
        tmp_path, contexts_envelope(self_describing(CLICK_URI, {"x": 1}))
    )

    code = main([str(event), "--schemas", str(schema_dir)])

    assert code == EXIT_OK
    output = msgspec.json.decode(capsys.readouterr().out)
    assert output["status"] == "valid"
    [pair] = output["pairs"]
    assert pair["table"] == "click"
    assert pair["instance"]["hierarchy"]["refTree"] == ["events", "click"]


def test_cli_reports_invalid_events(
    tmp_path: Path, schema_dir: Path, capsys: CaptureFixture[str]
) -> None:
    event = _write_event(
        tmp_path, contexts_envelope(self_describing(CLICK_URI, {"x": "one"}))
    )

    code = main([str(event), "--schemas", str(schema_dir)])

    assert code == EXIT_SHRED_FAILED
    output = msgspec.json.decode(capsys.readouterr().out)
    assert output["status"] == "invalid"
    assert [error["kind"] for error in output["errors"]] == ["structural_violation"]


def test_cli_writes_output_file(tmp_path: Path, schema_dir: Path) -> None:
    event = _write_event(tmp_path, None)
    out = tmp_path / "result.json"

    code = main([str(event), "--schemas", str(schema_dir), "--output", str(out)])

    assert code == EXIT_OK
    assert msgspec.json.decode(out.read_bytes()) == {"status": "valid", "pairs": []}


def test_cli_uses_environment_repositories(
    tmp_path: Path,
    schema_dir: Path,
    monkeypatch: MonkeyPatch,
    capsys: CaptureFixture[str],
) -> None:
    monkeypatch.setenv("SHREDDER_SCHEMA_DIRS", str(schema_dir))
    event = _write_event(
        tmp_path, contexts_envelope(self_describing(CLICK_URI, {"x": 1}))
    )

    assert main([str(event)]) == EXIT_OK
    assert '"status": "valid"' in capsys.readouterr().out


def test_cli_requires_a_repository(
    tmp_path: Path, capsys: CaptureFixture[str]
) -> None:
    event = _write_event(tmp_path, None)

    assert main([str(event)]) == EXIT_BAD_INPUT
    assert "no schema repositories" in capsys.readouterr().err


def test_cli_rejects_missing_event_file(
    tmp_path: Path, schema_dir: Path, capsys: CaptureFixture[str]
) -> None:
    code = main([str(tmp_path / "absent.json"), "--schemas", str(schema_dir)])

    assert code == EXIT_BAD_INPUT
    assert capsys.readouterr().err.startswith("shredder:")


def test_cli_rejects_undecodable_record(
    tmp_path: Path, schema_dir: Path, capsys: CaptureFixture[str]
) -> None:
    event = tmp_path / "event.json"
    event.write_text('{"eventId": "e1"}', encoding="utf-8")

    code = main([str(event), "--schemas", str(schema_dir)])

    assert code == EXIT_BAD_INPUT
    assert "invalid enriched event" in capsys.readouterr().err


def test_cli_runs_as_module(tmp_path: Path, schema_dir: Path) -> None:
    event = _write_event(tmp_path, contexts_envelope())

    result = subprocess.run(  # noqa: S603 - fixed argv
        [sys.executable, "-m", "shredder.cli", str(event), "--schemas", str(schema_dir)],
        cwd=tmp_path,
        text=True,
        capture_output=True,
    )

    assert result.returncode == EXIT_OK, result.stderr
    assert msgspec.json.decode(result.stdout)["pairs"] == []
