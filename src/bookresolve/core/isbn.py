"""ISBN normalization and validation."""

from __future__ import annotations

import re

from bookresolve.core.exceptions import InvalidArgumentError

# Accepts ISBN-10 (nine digits plus a digit or X) and ISBN-13 (978/979 prefix).
ISBN_PATTERN = re.compile(r"^(978|979)?\d{9}[\dX]$")

_SEPARATORS = re.compile(r"[-\s]")


def normalize_isbn(value: str | None) -> str | None:
    """
    Strip hyphens and whitespace and upper-case a trailing ``x``.

    Returns None for None or for input that is empty after stripping. The
    result is not validated; use :func:`parse_isbn` for that.
    """
    if value is None:
        return None
    normalized = _SEPARATORS.sub("", str(value)).upper()
    return normalized or None


def is_valid_isbn(value: str | None) -> bool:
    """Check whether a (possibly hyphenated) ISBN matches the accepted pattern."""
    normalized = normalize_isbn(value)
    return normalized is not None and ISBN_PATTERN.match(normalized) is not None


def parse_isbn(value: str) -> str:
    """
    Normalize and validate an ISBN supplied by a caller.

    Raises:
        InvalidArgumentError: if the normalized value is not an ISBN-10/13.
    """
    normalized = normalize_isbn(value)
    if normalized is None or not ISBN_PATTERN.match(normalized):
        raise InvalidArgumentError(
            f"Invalid ISBN format: {value!r}",
            details={"isbn": value},
        )
    return normalized


def looks_like_isbn(query: str) -> bool:
    """
    Heuristic used by free-text search boxes: 10 or 13 digits once hyphens go.

    Looser than :func:`is_valid_isbn`; only used to route a query.
    """
    cleaned = query.strip().replace("-", "")
    return len(cleaned) in (10, 13) and cleaned.isdigit()
