"""
Match and scoring data models for Recruit Match.

Defines the weighting policy, per-factor scores, match results and the
aggregate statistics built from them.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from recruit_match.utils.constants import (
    DEFAULT_MATCH_WEIGHTS,
    HISTOGRAM_BUCKETS,
    MatchFactor,
    MatchScoreLevel,
)
from recruit_match.utils.exceptions import InvalidWeightsError

from .base import EmbeddedModel
from .candidate import Candidate


class MatchWeights(BaseModel):
    """
    Weighting policy applied to the six factor scores.

    Immutable. The engine applies whatever non-negative weights it is
    given; requiring them to add up to 100% is left to callers through
    validate_total().
    """

    model_config = ConfigDict(frozen=True)

    competencies: float = Field(default=0.40, ge=0)
    experience: float = Field(default=0.20, ge=0)
    education: float = Field(default=0.10, ge=0)
    location: float = Field(default=0.10, ge=0)
    salary: float = Field(default=0.10, ge=0)
    disc: float = Field(default=0.10, ge=0)

    @classmethod
    def from_defaults(cls) -> "MatchWeights":
        """Create weights from default constants."""
        return cls(**DEFAULT_MATCH_WEIGHTS)

    @classmethod
    def from_percentages(cls, **percentages: float) -> "MatchWeights":
        """
        Create weights from a 0-100 percentage record.

        Factors not given keep their default weight.

        Raises:
            InvalidWeightsError: If a name is not a factor or a value is
                outside 0-100.
        """
        factor_names = {f.value for f in MatchFactor}
        weights = {}
        for name, value in percentages.items():
            if name not in factor_names:
                raise InvalidWeightsError(f"Unknown factor: {name}")
            if not 0 <= value <= 100:
                raise InvalidWeightsError(f"Weight for {name} must be between 0 and 100, got {value}")
            weights[name] = value / 100
        return cls(**weights)

    def to_dict(self) -> dict[str, float]:
        """Convert to dictionary keyed by factor name."""
        return {factor.value: self.weight_for(factor) for factor in MatchFactor}

    def weight_for(self, factor: MatchFactor) -> float:
        return getattr(self, factor.value)

    @property
    def total_weight(self) -> float:
        """Calculate sum of all weights."""
        return sum(self.to_dict().values())

    def validate_total(self, tolerance: float = 1e-6) -> "MatchWeights":
        """
        Check that the weights add up to 100%.

        Raises:
            InvalidWeightsError: If the total differs from 1.
        """
        if abs(self.total_weight - 1.0) > tolerance:
            raise InvalidWeightsError(
                f"Weights must sum to 100%, got {self.total_weight * 100:.1f}%"
            )
        return self


class FactorScore(EmbeddedModel):
    """Score for one factor with a short justification."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(..., ge=0, le=100)
    justification: str = ""


class ScoreBreakdown(EmbeddedModel):
    """Per-factor scores for one candidate-job pair."""

    model_config = ConfigDict(frozen=True)

    competencies: FactorScore
    experience: FactorScore
    education: FactorScore
    location: FactorScore
    salary: FactorScore
    disc: FactorScore

    def factor(self, factor: MatchFactor) -> FactorScore:
        return getattr(self, factor.value)

    @property
    def scores(self) -> dict[str, int]:
        """Get factor scores keyed by factor name."""
        return {f.value: self.factor(f).score for f in MatchFactor}

    @property
    def justifications(self) -> dict[str, str]:
        """Get factor justifications keyed by factor name."""
        return {f.value: self.factor(f).justification for f in MatchFactor}

    def weighted_total(self, weights: MatchWeights) -> float:
        """Sum of factor scores multiplied by their weights."""
        return sum(
            self.factor(f).score * weights.weight_for(f) for f in MatchFactor
        )


class MatchResult(EmbeddedModel):
    """Result of scoring one candidate against one job."""

    model_config = ConfigDict(frozen=True)

    candidate: Candidate
    job_id: Optional[str] = None
    score: int
    breakdown: ScoreBreakdown

    @property
    def candidate_id(self) -> Optional[str]:
        return self.candidate.id

    @property
    def score_level(self) -> MatchScoreLevel:
        return MatchScoreLevel.from_score(self.score)

    @property
    def details(self) -> dict[str, int]:
        """Get factor scores keyed by factor name."""
        return self.breakdown.scores


def empty_histogram() -> dict[str, int]:
    """Histogram with every bucket present and zeroed, highest first."""
    return {label: 0 for label, _, _ in HISTOGRAM_BUCKETS}


class MatchStatistics(BaseModel):
    """Aggregate statistics over a job's full scored candidate pool."""

    total: int = 0
    at_least_70: int = 0
    at_least_80: int = 0
    at_least_90: int = 0
    max_score: int = 0
    mean_score: int = 0
    histogram: dict[str, int] = Field(default_factory=empty_histogram)
