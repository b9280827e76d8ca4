"""Command-line entry point: shred one enriched event JSON file."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

import msgspec

from shredder.events import EventDecodeError
from shredder.logging import configure_logging
from shredder.resolver import (
    ResolverConfig,
    ResolverConfigError,
    ResolverError,
    create_schema_resolver,
)
from shredder.shred import Invalid, Shredder, shred_result_to_json

EXIT_OK = 0
EXIT_SHRED_FAILED = 1
EXIT_BAD_INPUT = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shredder",
        description="Validate and shred the embedded JSON of an enriched event.",
    )
    parser.add_argument("event", type=Path, help="JSON file holding one event record")
    parser.add_argument(
        "--schemas",
        type=Path,
        action="append",
        default=[],
        help="Local Iglu schema directory (repeatable, consulted first)",
    )
    parser.add_argument(
        "--registry",
        action="append",
        default=[],
        help="Iglu HTTP repository base URL (repeatable)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the JSON result here instead of stdout",
    )
    return parser


def _resolver_config(args: argparse.Namespace) -> ResolverConfig:
    """Prefer command-line repositories; fall back to the environment."""
    env_config = ResolverConfig.from_env()
    if not args.schemas and not args.registry:
        return env_config
    return ResolverConfig(
        registry_urls=tuple(args.registry),
        schema_dirs=tuple(args.schemas),
        api_key=env_config.api_key,
        timeout_s=env_config.timeout_s,
    )


def main(argv: list[str] | None = None) -> int:
    """Shred an event file and print the result as JSON.

    Parameters
    ----------
    argv : list[str] | None, optional
        Command-line arguments. ``None`` defaults to ``sys.argv``.

    Returns
    -------
    int
        0 when the event shreds cleanly, 1 when it carries invalid JSON,
        2 when the event file or resolver configuration is unusable.

    """
    args = _build_parser().parse_args(argv)
    configure_logging(os.environ.get("SHREDDER_LOG_LEVEL"), force=True)

    try:
        raw = args.event.read_bytes()
        resolver = create_schema_resolver(_resolver_config(args))
    except (OSError, ResolverConfigError, ResolverError) as exc:
        print(f"shredder: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT

    try:
        result = Shredder(resolver).shred_json(raw)
    except EventDecodeError as exc:
        print(f"shredder: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT
    finally:
        resolver.close()

    rendered = msgspec.json.format(msgspec.json.encode(shred_result_to_json(result)))
    if args.output is not None:
        args.output.write_bytes(rendered + b"\n")
    else:
        print(rendered.decode("utf-8"))

    return EXIT_SHRED_FAILED if isinstance(result, Invalid) else EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
