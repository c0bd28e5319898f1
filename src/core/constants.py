"""Core constants used across DocStore modules.

This module centralizes naming-convention and layout constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_INTAKE_ROOT = Path("docTemp")
DEFAULT_STORE_ROOT = Path("docDB")
ALLOWED_EXTENSIONS = ("xml", "csv", "json")
DATE_TOKEN_LENGTH = 6
DEFAULT_YEAR_PIVOT = 69
MIN_YEAR_PIVOT = 0
MAX_YEAR_PIVOT = 99
SAMPLE_FILE_PAYLOAD = "DocStore sample intake document\n"
