"""Lenient publication-date parsing.

Providers report dates at whatever precision they have. Everything is mapped to
an ISO-8601 prefix: ``YYYY-MM-DD``, ``YYYY-MM`` or ``YYYY``. Anything else maps
to None.
"""

from __future__ import annotations

import re
from datetime import date

_COMPACT = re.compile(r"^(\d{4})(\d{2})?(\d{2})?$")
_DELIMITED = re.compile(r"^(\d{4})(?:[-/.](\d{1,2})(?:[-/.](\d{1,2}))?)?$")
_JAPANESE = re.compile(r"^(\d{4})年(\d{1,2})月(\d{1,2})日")


def _format(year: str, month: str | None, day: str | None) -> str | None:
    if month is None:
        return year
    m = int(month)
    if not 1 <= m <= 12:
        return None
    if day is None:
        return f"{year}-{m:02d}"
    try:
        return date(int(year), m, int(day)).isoformat()
    except ValueError:
        return None


def parse_partial_date(value: object) -> str | None:
    """
    Parse ``20051007``, ``200510``, ``2005``, ``2005-10-07``, ``2005-10`` or
    ``2005/10/07`` style strings.
    """
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None

    match = _COMPACT.match(text)
    if match is None:
        match = _DELIMITED.match(text)
    if match is None:
        return None
    return _format(*match.groups())


def parse_japanese_date(value: object) -> str | None:
    """Parse ``YYYY年M月D日`` (optionally followed by e.g. ``頃``) to ``YYYY-MM-DD``."""
    if not isinstance(value, str):
        return None
    match = _JAPANESE.match(value.strip())
    if match is None:
        return None
    return _format(*match.groups())
