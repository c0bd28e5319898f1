"""DocStore CLI entry points.

This module exposes setup, ingest, reset, and run-spec commands.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, Sequence

from cli.run_spec_command import add_run_spec_command, run_run_spec_command
from core.config import DocStoreConfig
from core.errors import DocStoreConfigError
from core.run_spec_execution import render_setup_result
from ingest.batch_report import render_batch_report
from store.docstore_sdk import DocStoreClient

CONFIG_ERROR_EXIT_CODE = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="docstore",
        description="Validate intake file names and relocate files into the document store",
    )
    parser.add_argument("--intake-root", help="Override DOCSTORE_INTAKE_ROOT for this command")
    parser.add_argument("--store-root", help="Override DOCSTORE_STORE_ROOT for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_setup_command(subparsers)
    _add_ingest_command(subparsers)
    _add_reset_command(subparsers)
    add_run_spec_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the DocStore CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        client = _build_client(args.intake_root, args.store_root)
        if args.command == "setup":
            return _run_setup_command(client, args)
        if args.command == "ingest":
            return _run_ingest_command(client)
        if args.command == "reset":
            return _run_reset_command(client)
        if args.command == "run-spec":
            return run_run_spec_command(client, args)
    except DocStoreConfigError as error:
        print(f"configuration_error={error}", file=sys.stderr)
        return CONFIG_ERROR_EXIT_CODE
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(intake_root: str | None, store_root: str | None) -> DocStoreClient:
    """Build SDK client with optional root overrides.

    Args:
        intake_root: Optional intake directory override.
        store_root: Optional store root override.

    Returns:
        Configured SDK client.
    """
    client = DocStoreClient(DocStoreConfig.from_env())
    return client.with_roots(intake_root=intake_root, store_root=store_root)


def _run_setup_command(client: DocStoreClient, args: argparse.Namespace) -> int:
    """Handle setup command."""
    result = client.setup(with_samples=args.with_samples)
    for line in render_setup_result(result):
        print(line)
    return 0


def _run_ingest_command(client: DocStoreClient) -> int:
    """Handle ingest command.

    Args:
        client: SDK client.

    Returns:
        Zero when every entry was relocated, one otherwise.
    """
    report = client.ingest()
    for line in render_batch_report(report):
        print(line)
    return 0 if report.failed_count == 0 else 1


def _run_reset_command(client: DocStoreClient) -> int:
    """Handle reset command."""
    removed = client.reset()
    print(f"removed_entries={removed}")
    return 0


def _add_setup_command(subparsers: Any) -> None:
    """Register setup subcommand."""
    parser = subparsers.add_parser("setup", help="Create intake and store directories")
    parser.add_argument(
        "--with-samples",
        action="store_true",
        help="Seed the intake directory with sample files",
    )


def _add_ingest_command(subparsers: Any) -> None:
    """Register ingest subcommand."""
    subparsers.add_parser("ingest", help="Relocate all intake files into the store")


def _add_reset_command(subparsers: Any) -> None:
    """Register reset subcommand."""
    subparsers.add_parser("reset", help="Delete everything under the store root")
