"""Core enums and type definitions."""

from enum import StrEnum


class DataSource(StrEnum):
    """Provenance of a book record."""

    COMMERCE = "commerce"
    REGISTRY = "registry"
    GENERIC_INDEX = "genericIndex"
    MANUAL = "manual"


class InputType(StrEnum):
    """Kinds of query a provider can answer."""

    ISBN = "isbn"
    KEYWORD = "keyword"


class ResolutionStatus(StrEnum):
    """Status of a single provider call."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    ERROR = "error"
    TIMEOUT = "timeout"
