"""Batch ingestion over an intake directory.

This module lists intake entries one level deep and relocates each one.
Per-entry failures are collected into the report and never stop the batch.
"""

from __future__ import annotations

from pathlib import Path

from core.constants import DEFAULT_YEAR_PIVOT
from core.errors import DocStoreIngestError
from core.logging_config import get_logger
from core.types import BatchReport, RelocationResult
from ingest.relocator import relocate, require_roots

_LOGGER = get_logger(__name__)


def ingest_all(
    intake_root: Path,
    store_root: Path,
    year_pivot: int = DEFAULT_YEAR_PIVOT,
) -> BatchReport:
    """Relocate every direct intake entry into the store.

    Args:
        intake_root: Intake directory to drain.
        store_root: Store root directory.
        year_pivot: Two-digit year pivot used for date parsing.

    Returns:
        Batch report with per-entry results in input order.

    Raises:
        DocStoreConfigError: If intake or store root is missing.
        DocStoreIngestError: If the intake directory cannot be listed.
    """
    require_roots(intake_root, store_root)
    raw_names = list_intake_entries(intake_root)
    _LOGGER.info("batch_ingest_started", intake_root=str(intake_root), entries=len(raw_names))
    results: list[RelocationResult] = []
    for raw_name in raw_names:
        results.append(relocate(intake_root, raw_name, store_root, year_pivot))
    report = BatchReport(results=tuple(results))
    _LOGGER.info(
        "batch_ingest_finished",
        processed=report.processed_count,
        succeeded=report.succeeded_count,
        failed=report.failed_count,
    )
    return report


def list_intake_entries(intake_root: Path) -> list[str]:
    """List direct entry names of the intake directory, sorted by name.

    Args:
        intake_root: Intake directory path.

    Returns:
        Bare entry names.

    Raises:
        DocStoreIngestError: If the directory cannot be read.
    """
    try:
        return sorted(entry.name for entry in intake_root.iterdir())
    except OSError as error:
        raise DocStoreIngestError(
            f"Failed to list intake directory {intake_root}: {error}. "
            "Check directory permissions and retry."
        ) from error
