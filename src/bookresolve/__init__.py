"""bookresolve - Book metadata resolution across heterogeneous catalog providers."""

from bookresolve.client import BookResolveClient, search_by_isbn, search_by_query
from bookresolve.core.exceptions import BookResolveError, InvalidArgumentError
from bookresolve.core.models import BookRecord
from bookresolve.core.types import DataSource, InputType, ResolutionStatus
from bookresolve.resolution.orchestrator import AggregatedResult

__version__ = "0.1.0"
__all__ = [
    # Client
    "BookResolveClient",
    "search_by_isbn",
    "search_by_query",
    # Types
    "DataSource",
    "InputType",
    "ResolutionStatus",
    # Models
    "BookRecord",
    # Results
    "AggregatedResult",
    # Errors
    "BookResolveError",
    "InvalidArgumentError",
    # Version
    "__version__",
]
