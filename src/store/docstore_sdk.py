"""Python SDK for document store operations.

This module exposes high-level APIs for setup, ingest, and reset bound to
one validated configuration, so no operation reads process-wide state.
"""

from __future__ import annotations

from dataclasses import replace

from core.config import DocStoreConfig, resolve_root
from core.run_spec_execution import execute_run_spec_file
from core.types import BatchReport, RunSpecResult, StoreSetupResult
from ingest.batch_ingest import ingest_all
from store.store_layout import reset_store, setup_store


class DocStoreClient:
    """Primary SDK entry point for document store workflows."""

    def __init__(self, config: DocStoreConfig | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or DocStoreConfig.from_env()

    @property
    def config(self) -> DocStoreConfig:
        """Configuration this client is bound to."""
        return self._config

    def setup(self, with_samples: bool = False) -> StoreSetupResult:
        """Create intake and store roots.

        Args:
            with_samples: Whether to seed sample intake files.

        Returns:
            Created directories and sample files.
        """
        return setup_store(
            self._config.intake_root,
            self._config.store_root,
            with_samples=with_samples,
        )

    def ingest(self) -> BatchReport:
        """Relocate all intake entries into the store.

        Returns:
            Batch report.

        Raises:
            DocStoreConfigError: If intake or store root is missing.
        """
        return ingest_all(
            self._config.intake_root,
            self._config.store_root,
            year_pivot=self._config.year_pivot,
        )

    def reset(self) -> int:
        """Empty the store while keeping its root.

        Returns:
            Number of removed top-level entries.
        """
        return reset_store(self._config.store_root)

    def with_roots(
        self,
        intake_root: str | None = None,
        store_root: str | None = None,
    ) -> "DocStoreClient":
        """Clone the client with different intake or store roots.

        Args:
            intake_root: Optional new intake directory.
            store_root: Optional new store root.

        Returns:
            New SDK client instance.
        """
        updated_config = self._config
        if intake_root:
            updated_config = replace(updated_config, intake_root=resolve_root(intake_root))
        if store_root:
            updated_config = replace(updated_config, store_root=resolve_root(store_root))
        return DocStoreClient(updated_config)

    def run_spec(self, spec_file: str) -> RunSpecResult:
        """Execute a YAML run-spec through the shared execution engine.

        Args:
            spec_file: Path to YAML run-spec file.

        Returns:
            Output lines and the number of failed intake entries.
        """
        return execute_run_spec_file(self, spec_file)
