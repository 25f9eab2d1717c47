"""
Pydantic data models for Recruit Match.

This module provides all data models used by the matching engine:
candidates, job postings, weighting policy and match results.
"""

# Base models
from .base import BaseDocument, DocumentId, EmbeddedModel

# Candidate models
from .candidate import (
    Candidate,
    DiscProfile,
    EducationEntry,
    ExperienceEntry,
    GeoPoint,
)

# Job models
from .job import Job

# Match models
from .match import (
    FactorScore,
    MatchResult,
    MatchStatistics,
    MatchWeights,
    ScoreBreakdown,
)

__all__ = [
    # Base
    "BaseDocument",
    "DocumentId",
    "EmbeddedModel",
    # Candidate
    "Candidate",
    "DiscProfile",
    "EducationEntry",
    "ExperienceEntry",
    "GeoPoint",
    # Job
    "Job",
    # Match
    "FactorScore",
    "MatchResult",
    "MatchStatistics",
    "MatchWeights",
    "ScoreBreakdown",
]
