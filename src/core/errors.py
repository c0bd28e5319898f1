"""DocStore exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Per-file relocation outcomes are values, never exceptions from this module.
"""

from __future__ import annotations


class DocStoreError(Exception):
    """Base exception for all DocStore failures."""


class DocStoreConfigError(DocStoreError):
    """Raised for invalid runtime configuration or missing root directories."""


class DocStoreIngestError(DocStoreError):
    """Raised for intake listing failures that abort a batch."""


class DocStoreStoreError(DocStoreError):
    """Raised for store setup and reset failures."""


class DocStoreRunSpecError(DocStoreError):
    """Raised for invalid or unsupported run-spec configuration."""
