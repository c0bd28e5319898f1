"""Public SDK surface for DocStore.

This module provides a stable import path for library users.
It re-exports the client, pipeline operations, and typed models.
"""

from __future__ import annotations

from core.config import DocStoreConfig
from core.errors import (
    DocStoreConfigError,
    DocStoreError,
    DocStoreIngestError,
    DocStoreRunSpecError,
    DocStoreStoreError,
)
from core.types import (
    BatchReport,
    FileName,
    InvalidFileName,
    RelocationOutcome,
    RelocationResult,
    RunSpecResult,
    StoreSetupResult,
)
from ingest.batch_ingest import ingest_all
from ingest.batch_report import render_batch_report
from ingest.name_validator import is_valid_file_name, validate_file_name
from ingest.path_resolver import resolve_destination_file, resolve_store_path
from ingest.relocator import relocate
from store.docstore_sdk import DocStoreClient
from store.store_layout import SAMPLE_INTAKE_FILE_NAMES, reset_store, setup_store

__all__ = [
    "BatchReport",
    "DocStoreClient",
    "DocStoreConfig",
    "DocStoreConfigError",
    "DocStoreError",
    "DocStoreIngestError",
    "DocStoreRunSpecError",
    "DocStoreStoreError",
    "FileName",
    "InvalidFileName",
    "RelocationOutcome",
    "RelocationResult",
    "RunSpecResult",
    "SAMPLE_INTAKE_FILE_NAMES",
    "StoreSetupResult",
    "ingest_all",
    "is_valid_file_name",
    "relocate",
    "render_batch_report",
    "reset_store",
    "resolve_destination_file",
    "resolve_store_path",
    "setup_store",
    "validate_file_name",
]
