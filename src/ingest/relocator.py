"""Copy-verify-delete relocation of one intake file.

This module moves a single validated intake file into the store. The copy
is verified by byte length before the source is deleted, and every exit
point maps to an explicit relocation outcome.
"""

from __future__ import annotations

from pathlib import Path
import shutil

from core.constants import DEFAULT_YEAR_PIVOT
from core.errors import DocStoreConfigError
from core.logging_config import get_logger
from core.types import InvalidFileName, RelocationOutcome, RelocationResult
from ingest.name_validator import validate_file_name
from ingest.path_resolver import resolve_destination_file

_LOGGER = get_logger(__name__)


def require_roots(intake_root: Path, store_root: Path) -> None:
    """Ensure intake and store roots exist as directories.

    Args:
        intake_root: Intake directory path.
        store_root: Store root directory path.

    Raises:
        DocStoreConfigError: If either directory is missing.
    """
    missing = [str(root) for root in (intake_root, store_root) if not root.is_dir()]
    if missing:
        raise DocStoreConfigError(
            f"Required directories are missing: {', '.join(missing)}. "
            "Run 'docstore setup' or point --intake-root/--store-root at existing folders."
        )


def relocate(
    intake_root: Path,
    raw_name: str,
    store_root: Path,
    year_pivot: int = DEFAULT_YEAR_PIVOT,
) -> RelocationResult:
    """Relocate one intake file into the store.

    Args:
        intake_root: Intake directory holding the file.
        raw_name: Bare file name inside the intake directory.
        store_root: Store root directory.
        year_pivot: Two-digit year pivot used for date parsing.

    Returns:
        Relocation result. On success the source is gone and a same-size
        copy exists at the destination.

    Raises:
        DocStoreConfigError: If intake or store root is missing.
    """
    require_roots(intake_root, store_root)
    parsed = validate_file_name(raw_name, year_pivot)
    if isinstance(parsed, InvalidFileName):
        _LOGGER.warning("relocation_rejected", raw_name=raw_name, reason=parsed.reason)
        return RelocationResult(raw_name=raw_name, outcome=RelocationOutcome.INVALID_NAME)

    source_file = intake_root / raw_name
    destination_file = resolve_destination_file(store_root, parsed)
    copy_error = _copy_file(source_file, destination_file)
    if copy_error is not None:
        _LOGGER.error(
            "relocation_copy_failed",
            raw_name=raw_name,
            destination=str(destination_file),
            reason=copy_error,
        )
        return RelocationResult(
            raw_name=raw_name,
            outcome=RelocationOutcome.COPY_FAILED,
            destination=destination_file,
        )

    try:
        source_file.unlink()
    except OSError as error:
        _LOGGER.error(
            "relocation_cleanup_failed",
            raw_name=raw_name,
            destination=str(destination_file),
            reason=str(error),
        )
        return RelocationResult(
            raw_name=raw_name,
            outcome=RelocationOutcome.CLEANUP_FAILED,
            destination=destination_file,
        )
    _LOGGER.info("relocated", raw_name=raw_name, destination=str(destination_file))
    return RelocationResult(
        raw_name=raw_name,
        outcome=RelocationOutcome.SUCCESS,
        destination=destination_file,
    )


def _copy_file(source_file: Path, destination_file: Path) -> str | None:
    """Copy bytes and verify the destination length matches the source.

    Args:
        source_file: Intake file path.
        destination_file: Store file path, overwritten when present.

    Returns:
        None when the copy is verified, otherwise a failure reason.
    """
    try:
        destination_file.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source_file, destination_file)
        source_size = source_file.stat().st_size
        destination_size = destination_file.stat().st_size
    except OSError as error:
        return str(error)
    if source_size != destination_size:
        return f"size mismatch: source {source_size} bytes, destination {destination_size} bytes"
    return None
