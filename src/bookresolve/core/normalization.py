"""Text normalization utilities for cache keys and deduplication."""

import re


def normalize_text(
    text: str,
    *,
    lowercase: bool = True,
    collapse_whitespace: bool = True,
) -> str:
    """
    Normalize text for comparison purposes.

    Args:
        text: Input text to normalize
        lowercase: Convert to lowercase
        collapse_whitespace: Replace runs of whitespace with a single space

    Returns:
        Normalized string suitable for comparison
    """
    if not text:
        return ""

    result = text

    if lowercase:
        result = result.lower()

    if collapse_whitespace:
        result = re.sub(r"\s+", " ", result).strip()

    return result


def normalize_query(query: str) -> str:
    """
    Normalize a keyword query.

    Lower-cases and collapses whitespace so "Kitchen  " and "kitchen" share
    cache entries.
    """
    return normalize_text(query)


def join_names(names: list[str | None] | None, separator: str = ", ") -> str | None:
    """Join non-empty, stripped names; None when nothing is left."""
    if not names:
        return None
    cleaned = [n.strip() for n in names if isinstance(n, str) and n.strip()]
    return separator.join(cleaned) or None


def clean_str(value: object) -> str | None:
    """Return a stripped string, or None for non-strings and blank strings."""
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped or None


def parse_int(value: object) -> int | None:
    """Parse an integer leniently; invalid input yields None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None
