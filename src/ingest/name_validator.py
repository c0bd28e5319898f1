"""Intake file name validation.

This module parses ``<Client>.<DDMMYY>.<DDMMYY>.<ext>`` names in one step
and returns either structured metadata or a rejection with its reason.
"""

from __future__ import annotations

from datetime import date
import re

from core.constants import ALLOWED_EXTENSIONS, DATE_TOKEN_LENGTH, DEFAULT_YEAR_PIVOT
from core.types import FileName, InvalidFileName

_FILE_NAME_PATTERN = re.compile(
    r"(?P<client>[A-Za-z]+)"
    r"\.(?P<start>[0-9]{" + str(DATE_TOKEN_LENGTH) + r"})"
    r"\.(?P<end>[0-9]{" + str(DATE_TOKEN_LENGTH) + r"})"
    r"\.(?P<ext>" + "|".join(ALLOWED_EXTENSIONS) + r")"
)


def validate_file_name(
    raw_name: str,
    year_pivot: int = DEFAULT_YEAR_PIVOT,
) -> FileName | InvalidFileName:
    """Parse and validate an intake file name.

    Args:
        raw_name: Bare file name as listed in the intake directory.
        year_pivot: Two-digit years below this resolve to 20xx, others to 19xx.

    Returns:
        Parsed file name metadata, or a rejection carrying the reason.
    """
    match = _FILE_NAME_PATTERN.fullmatch(raw_name)
    if match is None:
        return InvalidFileName(
            raw_name=raw_name,
            reason=(
                "name does not match <Client>.<DDMMYY>.<DDMMYY>.<ext> "
                f"with ext in {', '.join(ALLOWED_EXTENSIONS)}"
            ),
        )
    range_start = parse_date_token(match.group("start"), year_pivot)
    range_end = parse_date_token(match.group("end"), year_pivot)
    if range_start is None or range_end is None:
        return InvalidFileName(raw_name=raw_name, reason="date token is not a calendar date")
    if range_end < range_start:
        return InvalidFileName(raw_name=raw_name, reason="range end precedes range start")
    return FileName(
        client_name=match.group("client"),
        range_start=range_start,
        range_end=range_end,
        extension=match.group("ext"),
        start_token=match.group("start"),
    )


def is_valid_file_name(raw_name: str, year_pivot: int = DEFAULT_YEAR_PIVOT) -> bool:
    """Return whether a raw name follows the intake naming convention."""
    return isinstance(validate_file_name(raw_name, year_pivot), FileName)


def parse_date_token(token: str, year_pivot: int = DEFAULT_YEAR_PIVOT) -> date | None:
    """Parse a ``DDMMYY`` token into a calendar date.

    Args:
        token: Six ASCII digits, day then month then two-digit year.
        year_pivot: Two-digit years below this resolve to 20xx, others to 19xx.

    Returns:
        Parsed date, or None when the token is not a real calendar date.
    """
    if len(token) != DATE_TOKEN_LENGTH or not token.isascii() or not token.isdigit():
        return None
    day, month, short_year = int(token[0:2]), int(token[2:4]), int(token[4:6])
    century = 2000 if short_year < year_pivot else 1900
    try:
        return date(century + short_year, month, day)
    except ValueError:
        return None
