"""Shared typed models.

This module defines immutable data models used by the ingest, store,
SDK, and CLI layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from pathlib import Path


@dataclass(frozen=True)
class FileName:
    """Metadata parsed from a conforming intake file name.

    Attributes:
        client_name: Alphabetic client identifier.
        range_start: First day covered by the document.
        range_end: Last day covered by the document.
        extension: File type, one of the allowed extensions.
        start_token: Raw ``DDMMYY`` start token used as store directory name.
    """

    client_name: str
    range_start: date
    range_end: date
    extension: str
    start_token: str


@dataclass(frozen=True)
class InvalidFileName:
    """Rejected intake file name.

    Attributes:
        raw_name: Name exactly as listed in the intake directory.
        reason: Human-readable rejection reason for logs.
    """

    raw_name: str
    reason: str


class RelocationOutcome(str, Enum):
    """Outcome of relocating one intake entry."""

    SUCCESS = "success"
    INVALID_NAME = "invalid-name"
    COPY_FAILED = "copy-failed"
    CLEANUP_FAILED = "cleanup-failed"


@dataclass(frozen=True)
class RelocationResult:
    """Result of relocating one intake entry.

    Attributes:
        raw_name: Intake file name.
        outcome: Relocation outcome.
        destination: Store file path when a copy was attempted.
    """

    raw_name: str
    outcome: RelocationOutcome
    destination: Path | None = None

    @property
    def succeeded(self) -> bool:
        """Whether the file now lives only in the store."""
        return self.outcome is RelocationOutcome.SUCCESS


@dataclass(frozen=True)
class BatchReport:
    """Aggregate outcome of one pass over an intake directory.

    Attributes:
        results: Per-entry results in input order.
    """

    results: tuple[RelocationResult, ...]

    @property
    def processed_count(self) -> int:
        """Number of intake entries considered."""
        return len(self.results)

    @property
    def succeeded_count(self) -> int:
        """Number of entries relocated successfully."""
        return sum(1 for result in self.results if result.succeeded)

    @property
    def failed_count(self) -> int:
        """Number of entries that failed at any stage."""
        return self.processed_count - self.succeeded_count

    @property
    def failed_names(self) -> tuple[str, ...]:
        """Raw names of failed entries in input order."""
        return tuple(result.raw_name for result in self.results if not result.succeeded)


@dataclass(frozen=True)
class StoreSetupResult:
    """Output of the store setup utility.

    Attributes:
        created_dirs: Root directories that did not exist before setup.
        sample_files: Sample intake files written during setup.
    """

    created_dirs: tuple[Path, ...]
    sample_files: tuple[Path, ...]


@dataclass(frozen=True)
class RunSpecResult:
    """Output of a run-spec execution.

    Attributes:
        output_lines: Printable lines from every step, in step order.
        failed_count: Intake entries that failed across all ingest steps.
    """

    output_lines: tuple[str, ...]
    failed_count: int = 0
