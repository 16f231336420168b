"""Resolution layer: fallback policy, deduplication and record selection."""

from bookresolve.resolution.dedup import deduplicate
from bookresolve.resolution.orchestrator import AggregatedResult, ResolutionOrchestrator
from bookresolve.resolution.selection import detail_score, select_best

__all__ = [
    "AggregatedResult",
    "ResolutionOrchestrator",
    "deduplicate",
    "detail_score",
    "select_best",
]
