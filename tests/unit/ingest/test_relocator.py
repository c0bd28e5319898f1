"""Unit tests for single-file relocation."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.config import DocStoreConfig
from core.errors import DocStoreConfigError
from core.types import RelocationOutcome
from ingest import relocator
from ingest.relocator import relocate
from tests.fixture_paths import write_intake_file


def test_relocate_moves_valid_file_into_store(docstore_config: DocStoreConfig) -> None:
    """Valid file should land at store/<start>/<ext>/<client> and leave intake."""
    source = write_intake_file(docstore_config.intake_root, "Acme.010125.051225.csv", "a,b\n")

    result = relocate(
        docstore_config.intake_root,
        "Acme.010125.051225.csv",
        docstore_config.store_root,
    )
    destination = docstore_config.store_root / "010125" / "csv" / "Acme"

    assert (
        result.outcome is RelocationOutcome.SUCCESS
        and result.destination == destination
        and not source.exists()
        and destination.read_text(encoding="utf-8") == "a,b\n"
    )


def test_relocate_invalid_name_leaves_file_untouched(docstore_config: DocStoreConfig) -> None:
    """End-before-start name should fail without any file system mutation."""
    source = write_intake_file(docstore_config.intake_root, "Acme.051225.010125.csv")

    result = relocate(
        docstore_config.intake_root,
        "Acme.051225.010125.csv",
        docstore_config.store_root,
    )

    assert (
        result.outcome is RelocationOutcome.INVALID_NAME
        and source.exists()
        and list(docstore_config.store_root.iterdir()) == []
    )


def test_relocate_overwrites_existing_destination(docstore_config: DocStoreConfig) -> None:
    """Same client, start date, and type should replace the stored file."""
    existing = docstore_config.store_root / "010125" / "csv" / "Acme"
    existing.parent.mkdir(parents=True)
    existing.write_text("old", encoding="utf-8")
    write_intake_file(docstore_config.intake_root, "Acme.010125.200125.csv", "newer payload")

    result = relocate(
        docstore_config.intake_root,
        "Acme.010125.200125.csv",
        docstore_config.store_root,
    )

    assert result.succeeded and existing.read_text(encoding="utf-8") == "newer payload"


def test_relocate_missing_store_root_is_fatal(tmp_path: Path) -> None:
    """Missing store root should raise instead of returning a per-file failure."""
    intake_root = tmp_path / "intake"
    intake_root.mkdir()
    source = write_intake_file(intake_root, "Acme.010125.051225.csv")

    with pytest.raises(DocStoreConfigError):
        relocate(intake_root, "Acme.010125.051225.csv", tmp_path / "missing-store")

    assert source.exists()


def test_relocate_missing_intake_root_is_fatal(tmp_path: Path) -> None:
    """Missing intake root should raise a configuration error."""
    store_root = tmp_path / "store"
    store_root.mkdir()

    with pytest.raises(DocStoreConfigError):
        relocate(tmp_path / "missing-intake", "Acme.010125.051225.csv", store_root)

    assert list(store_root.iterdir()) == []


def test_relocate_truncated_copy_reports_copy_failed(
    docstore_config: DocStoreConfig,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Size mismatch after copy should keep the source for retry."""
    source = write_intake_file(docstore_config.intake_root, "Acme.010125.051225.csv", "abcdef")

    def _truncating_copy(src: Path, dst: Path) -> Path:
        Path(dst).write_text("abc", encoding="utf-8")
        return Path(dst)

    monkeypatch.setattr(relocator.shutil, "copyfile", _truncating_copy)
    result = relocate(
        docstore_config.intake_root,
        "Acme.010125.051225.csv",
        docstore_config.store_root,
    )

    assert result.outcome is RelocationOutcome.COPY_FAILED and source.exists()


def test_relocate_copy_error_reports_copy_failed(
    docstore_config: DocStoreConfig,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """OS errors raised by the copy should map to copy-failed."""
    source = write_intake_file(docstore_config.intake_root, "Acme.010125.051225.csv")

    def _failing_copy(src: Path, dst: Path) -> Path:
        raise PermissionError("read-only store")

    monkeypatch.setattr(relocator.shutil, "copyfile", _failing_copy)
    result = relocate(
        docstore_config.intake_root,
        "Acme.010125.051225.csv",
        docstore_config.store_root,
    )

    assert result.outcome is RelocationOutcome.COPY_FAILED and source.exists()


def test_relocate_directory_entry_reports_copy_failed(docstore_config: DocStoreConfig) -> None:
    """A directory carrying a valid name cannot be copied as a file."""
    (docstore_config.intake_root / "Acme.010125.051225.csv").mkdir()

    result = relocate(
        docstore_config.intake_root,
        "Acme.010125.051225.csv",
        docstore_config.store_root,
    )

    assert result.outcome is RelocationOutcome.COPY_FAILED


def test_relocate_delete_failure_reports_cleanup_failed(
    docstore_config: DocStoreConfig,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Verified copy with failed source deletion should not count as success."""
    source = write_intake_file(docstore_config.intake_root, "Acme.010125.051225.csv", "abc")

    def _failing_unlink(self: Path, missing_ok: bool = False) -> None:
        raise PermissionError("source is locked")

    monkeypatch.setattr(Path, "unlink", _failing_unlink)
    result = relocate(
        docstore_config.intake_root,
        "Acme.010125.051225.csv",
        docstore_config.store_root,
    )
    monkeypatch.undo()

    assert (
        result.outcome is RelocationOutcome.CLEANUP_FAILED
        and source.exists()
        and result.destination is not None
        and result.destination.read_text(encoding="utf-8") == "abc"
    )


def test_relocate_logs_rejection_to_stderr(
    docstore_config: DocStoreConfig,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Rejected names should emit a structured event on stderr only."""
    write_intake_file(docstore_config.intake_root, "Acme.010125.txt")

    relocate(docstore_config.intake_root, "Acme.010125.txt", docstore_config.store_root)
    captured = capsys.readouterr()

    assert "relocation_rejected" in captured.err and captured.out == ""
