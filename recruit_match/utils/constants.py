"""
Application-wide constants for Recruit Match.

This module contains the ordinal maps, scoring bands, keyword lists and
default weights used by the matching engine. Modify these values to tune
scoring without changing code logic.
"""

from enum import Enum
from typing import Final


# =============================================================================
# Application Constants
# =============================================================================

APP_NAME: Final[str] = "recruit-match"
APP_DISPLAY_NAME: Final[str] = "Recruit Match"
VERSION: Final[str] = "0.1.0"


# =============================================================================
# Enums
# =============================================================================


class CandidateStatus(str, Enum):
    """Status of a candidate in the talent pool."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    HIRED = "hired"
    BLOCKED = "blocked"


class JobStatus(str, Enum):
    """Status of a job posting."""

    DRAFT = "draft"
    OPEN = "open"
    PAUSED = "paused"
    CLOSED = "closed"
    FILLED = "filled"


class SeniorityLevel(str, Enum):
    """Experience level of a candidate or a job opening."""

    INTERN = "intern"
    JUNIOR = "junior"
    MID = "mid"
    SENIOR = "senior"
    SPECIALIST = "specialist"


class EducationLevel(str, Enum):
    """Formal education level."""

    ELEMENTARY = "elementary"
    HIGH_SCHOOL = "high_school"
    TECHNICAL = "technical"
    BACHELOR = "bachelor"
    POSTGRADUATE = "postgraduate"
    MASTER = "master"
    DOCTORATE = "doctorate"


class MatchFactor(str, Enum):
    """The six independent scoring dimensions."""

    COMPETENCIES = "competencies"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    LOCATION = "location"
    SALARY = "salary"
    DISC = "disc"


# =============================================================================
# Ordinal Maps
# =============================================================================

SENIORITY_ORDINALS: Final[dict[SeniorityLevel, int]] = {
    SeniorityLevel.INTERN: 0,
    SeniorityLevel.JUNIOR: 1,
    SeniorityLevel.MID: 2,
    SeniorityLevel.SENIOR: 3,
    SeniorityLevel.SPECIALIST: 4,
}

# Missing seniority on either side is read as junior
DEFAULT_SENIORITY: Final[SeniorityLevel] = SeniorityLevel.JUNIOR

# Level score by absolute ordinal distance; anything further scores the floor
SENIORITY_DISTANCE_SCORES: Final[dict[int, int]] = {0: 100, 1: 80, 2: 60, 3: 40}
SENIORITY_DISTANCE_FLOOR: Final[int] = 20

EDUCATION_ORDINALS: Final[dict[EducationLevel, int]] = {
    EducationLevel.ELEMENTARY: 1,
    EducationLevel.HIGH_SCHOOL: 2,
    EducationLevel.TECHNICAL: 3,
    EducationLevel.BACHELOR: 4,
    EducationLevel.POSTGRADUATE: 5,
    EducationLevel.MASTER: 6,
    EducationLevel.DOCTORATE: 7,
}

EDUCATION_DEFICIT_PENALTY: Final[int] = 20
RELATED_FIELD_SCORE: Final[int] = 60


# =============================================================================
# Location
# =============================================================================

EARTH_RADIUS_KM: Final[float] = 6371.0

# (max distance in km, score), checked in order
DISTANCE_BANDS: Final[tuple[tuple[float, int], ...]] = (
    (10, 100),
    (30, 90),
    (50, 80),
    (100, 70),
    (200, 60),
    (500, 50),
)
FAR_DISTANCE_SCORE: Final[int] = 30
RELOCATION_MIN_SCORE: Final[int] = 80

REMOTE_KEYWORDS: Final[tuple[str, ...]] = ("remoto", "home office")

LOCATION_TEXT_SCORES: Final[dict[str, int]] = {
    "exact": 100,
    "partial": 80,
    "different": 40,
}


# =============================================================================
# Salary
# =============================================================================

SALARY_BELOW_MIN_TOLERANCE: Final[float] = 0.8
SALARY_ABOVE_MAX_TOLERANCE: Final[float] = 1.2

SALARY_SCORES: Final[dict[str, int]] = {
    "within_range": 100,
    "slightly_below": 90,
    "slightly_above": 80,
    "out_of_range": 50,
}
PERK_MIN_SCORE: Final[int] = 90

# Matched against accent-stripped, lowercased benefits text
PERK_KEYWORDS: Final[tuple[str, ...]] = (
    "plano de saude",
    "assistencia medica",
    "vale refeicao",
    "vale alimentacao",
    "health plan",
    "health insurance",
    "meal voucher",
    "food voucher",
)


# =============================================================================
# DISC
# =============================================================================

DISC_AXES: Final[tuple[str, ...]] = ("D", "I", "S", "C")
DEFAULT_DISC_TOLERANCE: Final[float] = 20.0

# Largest spread observed on a single axis
DISC_MAX_AXIS_RANGE: Final[float] = 96.0


# =============================================================================
# Scoring Constants
# =============================================================================

DEFAULT_MATCH_WEIGHTS: Final[dict[str, float]] = {
    MatchFactor.COMPETENCIES.value: 0.40,
    MatchFactor.EXPERIENCE.value: 0.20,
    MatchFactor.EDUCATION.value: 0.10,
    MatchFactor.LOCATION.value: 0.10,
    MatchFactor.SALARY.value: 0.10,
    MatchFactor.DISC.value: 0.10,
}

DEFAULT_MIN_SCORE: Final[int] = 70

# Score thresholds (0-100 scale)
SCORE_THRESHOLDS: Final[dict[str, int]] = {
    "excellent": 90,
    "good": 80,
    "fair": 70,
}

# (label, lower bound inclusive, upper bound inclusive), highest first
HISTOGRAM_BUCKETS: Final[tuple[tuple[str, int, int], ...]] = (
    ("90-100", 90, 100),
    ("80-89", 80, 89),
    ("70-79", 70, 79),
    ("60-69", 60, 69),
    ("0-59", 0, 59),
)


class MatchScoreLevel(Enum):
    """Categorical levels for composite scores."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"

    @classmethod
    def from_score(cls, score: float) -> "MatchScoreLevel":
        """Convert a 0-100 score to a level."""
        if score >= SCORE_THRESHOLDS["excellent"]:
            return cls.EXCELLENT
        elif score >= SCORE_THRESHOLDS["good"]:
            return cls.GOOD
        elif score >= SCORE_THRESHOLDS["fair"]:
            return cls.FAIR
        return cls.POOR
