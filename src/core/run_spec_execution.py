"""Shared run-spec execution engine for CLI and SDK workflows.

This module maps validated run-spec steps to client operations so different
entry points execute one declarative pipeline path without drift.
"""

from __future__ import annotations

from typing import Any, Protocol

from core.run_spec import RunSpec, RunSpecStep, load_run_spec
from core.run_spec_fields import optional_bool, reject_unknown_fields
from core.types import BatchReport, RunSpecResult, StoreSetupResult
from ingest.batch_report import render_batch_report

_STEP_FIELDS = {
    "setup": frozenset({"with_samples"}),
    "ingest": frozenset(),
    "reset": frozenset(),
}


class RunSpecClient(Protocol):
    """Client API contract required by run-spec execution."""

    def with_roots(
        self,
        intake_root: str | None = None,
        store_root: str | None = None,
    ) -> Any: ...

    def setup(self, with_samples: bool = False) -> StoreSetupResult: ...

    def ingest(self) -> BatchReport: ...

    def reset(self) -> int: ...


def execute_run_spec_file(client: RunSpecClient, spec_file: str) -> RunSpecResult:
    """Load and execute a run-spec file."""
    spec = load_run_spec(spec_file)
    return execute_run_spec(client, spec)


def execute_run_spec(client: RunSpecClient, spec: RunSpec) -> RunSpecResult:
    """Execute a parsed run-spec object.

    Steps run in order; a fatal error in any step propagates and stops
    the remaining steps. Per-file ingest failures are counted, not raised.
    """
    defaults = spec.defaults
    execution_client = (
        client.with_roots(intake_root=defaults.intake_root, store_root=defaults.store_root)
        if defaults.intake_root or defaults.store_root
        else client
    )
    output_lines: list[str] = []
    failed_count = 0
    for step in spec.steps:
        step_lines, step_failures = _execute_step(execution_client, step)
        output_lines.extend(step_lines)
        failed_count += step_failures
    return RunSpecResult(output_lines=tuple(output_lines), failed_count=failed_count)


def _execute_step(client: RunSpecClient, step: RunSpecStep) -> tuple[tuple[str, ...], int]:
    reject_unknown_fields(step.args, _STEP_FIELDS[step.command], step.command)
    if step.command == "setup":
        result = client.setup(
            with_samples=optional_bool(step.args, "with_samples", default_value=False)
        )
        return render_setup_result(result), 0
    if step.command == "ingest":
        report = client.ingest()
        return render_batch_report(report), report.failed_count
    return (f"removed_entries={client.reset()}",), 0


def render_setup_result(result: StoreSetupResult) -> tuple[str, ...]:
    """Render setup output lines shared by CLI and run-spec flows."""
    lines = [f"created_dir={path}" for path in result.created_dirs]
    lines.extend(f"sample_file={path}" for path in result.sample_files)
    return tuple(lines)
