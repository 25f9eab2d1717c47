"""Candidate-job matching engine module."""

from .matching_engine import (
    MatchingEngine,
    compute_matches,
    compute_statistics,
    get_matching_engine,
)
from .statistics import summarize_scores

__all__ = [
    "MatchingEngine",
    "compute_matches",
    "compute_statistics",
    "get_matching_engine",
    "summarize_scores",
]
