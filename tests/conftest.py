"""Pytest configuration for repository test runs.

``src`` and the repository root are placed on sys.path through the
``pythonpath`` setting in pyproject.toml.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from core.config import DocStoreConfig


@pytest.fixture
def docstore_config(tmp_path: Path) -> DocStoreConfig:
    """Config with existing intake and store roots under tmp_path."""
    intake_root = tmp_path / "intake"
    store_root = tmp_path / "store"
    intake_root.mkdir()
    store_root.mkdir()
    return DocStoreConfig(intake_root=intake_root, store_root=store_root, year_pivot=69)
