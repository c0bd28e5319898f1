"""Type-safe field parsing helpers for run-spec execution.

This module centralizes primitive parsing so run-spec executors stay
concise and produce consistent validation errors.
"""

from __future__ import annotations

from typing import Mapping

from core.errors import DocStoreRunSpecError


def optional_string(args: Mapping[str, object], field_name: str) -> str | None:
    """Read an optional string field from a run-spec step."""
    value = args.get(field_name)
    if value is None:
        return None
    if isinstance(value, str):
        stripped = value.strip()
        return stripped if stripped else None
    raise DocStoreRunSpecError(f"Run-spec field '{field_name}' must be a string when provided.")


def optional_bool(args: Mapping[str, object], field_name: str, default_value: bool) -> bool:
    """Read an optional boolean field from a run-spec step."""
    value = args.get(field_name)
    if value is None:
        return default_value
    if isinstance(value, bool):
        return value
    raise DocStoreRunSpecError(f"Run-spec field '{field_name}' must be a boolean.")


def reject_unknown_fields(
    args: Mapping[str, object],
    allowed_fields: frozenset[str],
    command: str,
) -> None:
    """Fail when a step carries fields its command does not accept."""
    unknown_fields = sorted(set(args) - allowed_fields)
    if unknown_fields:
        raise DocStoreRunSpecError(
            f"Run-spec command '{command}' does not accept fields: {', '.join(unknown_fields)}."
        )
