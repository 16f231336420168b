"""Helpers shared by provider normalizers.

Normalizers walk untrusted JSON. These helpers never raise: a missing key or a
value of the wrong type simply yields None (or an empty list).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")


def get_path(data: Any, *path: str | int) -> Any:
    """
    Walk nested dicts/lists, returning None as soon as a step is missing.

    Integer steps index lists; string steps look up dict keys.
    """
    current = data
    for step in path:
        if isinstance(step, int):
            if not isinstance(current, list) or not -len(current) <= step < len(current):
                return None
            current = current[step]
        else:
            if not isinstance(current, dict):
                return None
            current = current.get(step)
        if current is None:
            return None
    return current


def as_list(value: Any) -> list[Any]:
    """Coerce a node to a list: lists pass through, dicts are wrapped, else empty."""
    if isinstance(value, list):
        return value
    if isinstance(value, dict):
        return [value]
    return []


def as_dicts(value: Any) -> list[dict[str, Any]]:
    """Like :func:`as_list` but drops anything that is not a dict."""
    return [item for item in as_list(value) if isinstance(item, dict)]


def first_present(*extractors: Callable[[], T | None]) -> T | None:
    """Call extractors in order and return the first non-None result."""
    for extract in extractors:
        value = extract()
        if value is not None:
            return value
    return None


def https(url: str | None) -> str | None:
    """Upgrade an insecure ``http://`` URL to ``https://``."""
    if url and url.startswith("http://"):
        return "https://" + url[len("http://") :]
    return url
