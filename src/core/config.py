"""Runtime configuration model for DocStore.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_INTAKE_ROOT,
    DEFAULT_STORE_ROOT,
    DEFAULT_YEAR_PIVOT,
    MAX_YEAR_PIVOT,
    MIN_YEAR_PIVOT,
)
from core.errors import DocStoreConfigError


@dataclass(frozen=True)
class DocStoreConfig:
    """Validated runtime configuration.

    Attributes:
        intake_root: Directory holding newly arrived, unvalidated files.
        store_root: Root of the hierarchical document store.
        year_pivot: Two-digit years below this value resolve to 20xx,
            the rest to 19xx.
    """

    intake_root: Path
    store_root: Path
    year_pivot: int

    @classmethod
    def from_env(cls) -> "DocStoreConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            DocStoreConfigError: If environment values are invalid.
        """
        intake_root_value = os.getenv("DOCSTORE_INTAKE_ROOT", str(DEFAULT_INTAKE_ROOT))
        store_root_value = os.getenv("DOCSTORE_STORE_ROOT", str(DEFAULT_STORE_ROOT))
        year_pivot_value = os.getenv("DOCSTORE_YEAR_PIVOT", str(DEFAULT_YEAR_PIVOT))
        return cls(
            intake_root=resolve_root(intake_root_value),
            store_root=resolve_root(store_root_value),
            year_pivot=_parse_year_pivot(year_pivot_value),
        )


def resolve_root(raw_path: str) -> Path:
    """Expand and resolve a root directory path.

    Args:
        raw_path: User-provided path string.

    Returns:
        Absolute path.
    """
    return Path(raw_path).expanduser().resolve()


def _parse_year_pivot(raw_value: str) -> int:
    """Parse the two-digit year pivot environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed pivot in the inclusive range 0..99.

    Raises:
        DocStoreConfigError: If value is not an integer in range.
    """
    try:
        pivot = int(raw_value)
    except ValueError as error:
        raise DocStoreConfigError(
            "Invalid DOCSTORE_YEAR_PIVOT value: "
            f"expected integer, got '{raw_value}'. "
            "Set DOCSTORE_YEAR_PIVOT to a numeric value."
        ) from error
    if not MIN_YEAR_PIVOT <= pivot <= MAX_YEAR_PIVOT:
        raise DocStoreConfigError(
            f"Invalid DOCSTORE_YEAR_PIVOT value {pivot}: "
            f"expected {MIN_YEAR_PIVOT}..{MAX_YEAR_PIVOT}. "
            "Pick a two-digit pivot year."
        )
    return pivot
