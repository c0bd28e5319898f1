"""Store bootstrap and reset utilities.

This module guarantees intake and store roots exist before a batch runs,
optionally seeds sample intake files, and can return the store to empty.
"""

from __future__ import annotations

from pathlib import Path
import shutil

from core.constants import SAMPLE_FILE_PAYLOAD
from core.errors import DocStoreConfigError, DocStoreStoreError
from core.logging_config import get_logger
from core.types import StoreSetupResult

_LOGGER = get_logger(__name__)

SAMPLE_INTAKE_FILE_NAMES = (
    "KlainerIndustries.261124.011224.xml",
    "TechCorp.010125.151225.csv",
    "DataSolutions.151224.171224.json",
    "GlobalTech.230124.250124.xml",
    "KlainerIndustries.LLC.261124.011224.xml",
    "TechCorp.010125.txt",
    "Global.Tech.230124.250124.xml",
    "DataSolutions.151224.171224",
    "ExtraCompany.111222.221122.xml",
    "EmptyFile.010124.020124.csv",
)


def setup_store(
    intake_root: Path,
    store_root: Path,
    with_samples: bool = False,
) -> StoreSetupResult:
    """Create intake and store roots, optionally seeding sample intake files.

    Args:
        intake_root: Intake directory path.
        store_root: Store root directory path.
        with_samples: Whether to write sample intake files.

    Returns:
        Created directories and written sample files.

    Raises:
        DocStoreStoreError: If directories or samples cannot be written.
    """
    created_dirs: list[Path] = []
    for root in (intake_root, store_root):
        if root.is_dir():
            continue
        try:
            root.mkdir(parents=True, exist_ok=True)
        except OSError as error:
            raise DocStoreStoreError(
                f"Failed to create directory {root}: {error}. "
                "Check the parent path and permissions."
            ) from error
        created_dirs.append(root)
        _LOGGER.info("store_directory_created", path=str(root))
    sample_files = _write_samples(intake_root) if with_samples else ()
    return StoreSetupResult(created_dirs=tuple(created_dirs), sample_files=sample_files)


def reset_store(store_root: Path) -> int:
    """Delete all files and subdirectories under the store root.

    Args:
        store_root: Store root directory, kept in place.

    Returns:
        Number of top-level entries removed.

    Raises:
        DocStoreConfigError: If the store root does not exist.
        DocStoreStoreError: If an entry cannot be removed.
    """
    if not store_root.is_dir():
        raise DocStoreConfigError(
            f"Store root {store_root} does not exist. Nothing to reset."
        )
    removed = 0
    for entry in sorted(store_root.iterdir()):
        try:
            if entry.is_dir() and not entry.is_symlink():
                shutil.rmtree(entry)
            else:
                entry.unlink()
        except OSError as error:
            raise DocStoreStoreError(
                f"Failed to remove store entry {entry}: {error}. "
                "Check permissions and rerun reset."
            ) from error
        removed += 1
    _LOGGER.info("store_reset", store_root=str(store_root), removed_entries=removed)
    return removed


def _write_samples(intake_root: Path) -> tuple[Path, ...]:
    written: list[Path] = []
    for raw_name in SAMPLE_INTAKE_FILE_NAMES:
        sample_path = intake_root / raw_name
        try:
            sample_path.write_text(SAMPLE_FILE_PAYLOAD, encoding="utf-8")
        except OSError as error:
            raise DocStoreStoreError(
                f"Failed to write sample file {sample_path}: {error}."
            ) from error
        written.append(sample_path)
    _LOGGER.info("sample_files_written", intake_root=str(intake_root), count=len(written))
    return tuple(written)
