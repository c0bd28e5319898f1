"""Store path derivation.

Destination paths are pure functions of the store root and parsed
file name metadata; nothing here touches the file system.
"""

from __future__ import annotations

from pathlib import Path

from core.types import FileName


def resolve_store_path(store_root: Path, start_token: str, extension: str) -> Path:
    """Return the store directory for a start date token and file type.

    Args:
        store_root: Root of the document store.
        start_token: ``DDMMYY`` range start token.
        extension: File type extension without dot.

    Returns:
        ``store_root / start_token / extension``.
    """
    return store_root / start_token / extension


def resolve_destination_file(store_root: Path, file_name: FileName) -> Path:
    """Return the stored file path for parsed file name metadata.

    The extension lives in the directory path, so the leaf is the bare
    client name.
    """
    store_dir = resolve_store_path(store_root, file_name.start_token, file_name.extension)
    return store_dir / file_name.client_name
