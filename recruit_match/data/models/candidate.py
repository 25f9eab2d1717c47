"""
Candidate data models for Recruit Match.

Defines the candidate profile as read by the matching engine: competencies,
work history, education, location, salary expectation, and DISC profile.
"""

from datetime import date
from typing import Annotated, Any, Optional

from pydantic import BeforeValidator, Field, ValidationInfo, field_validator

from recruit_match.utils.constants import (
    CandidateStatus,
    EducationLevel,
    SeniorityLevel,
)

from .base import BaseDocument, EmbeddedModel


def parse_seniority(value: Any) -> Optional[SeniorityLevel]:
    """Read a seniority level; unrecognised labels count as unset."""
    if value is None or isinstance(value, SeniorityLevel):
        return value
    try:
        return SeniorityLevel(str(value).strip().lower())
    except ValueError:
        return None


# Unset levels are scored as junior
Seniority = Annotated[Optional[SeniorityLevel], BeforeValidator(parse_seniority)]


class GeoPoint(EmbeddedModel):
    """Latitude/longitude pair in decimal degrees."""

    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class DiscProfile(EmbeddedModel):
    """
    DISC behavioral profile.

    Each axis is on a 0-100 scale. The axes are not required to sum
    to any fixed total.
    """

    D: float = Field(..., ge=0, le=100)
    I: float = Field(..., ge=0, le=100)  # noqa: E741
    S: float = Field(..., ge=0, le=100)
    C: float = Field(..., ge=0, le=100)

    def axis(self, name: str) -> float:
        """Get the value of an axis by its letter."""
        return getattr(self, name)


class ExperienceEntry(EmbeddedModel):
    """A single work experience entry."""

    title: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None  # None indicates current position

    @property
    def is_current(self) -> bool:
        return self.end_date is None


class EducationEntry(EmbeddedModel):
    """A single education entry."""

    level: EducationLevel
    field_of_study: str = ""
    institution: Optional[str] = None


class Candidate(BaseDocument):
    """
    Candidate profile.

    Every optional attribute may be absent or null; the matching engine
    scores the corresponding factor as 0 instead of failing.
    """

    name: str = ""
    status: CandidateStatus = CandidateStatus.ACTIVE

    competency_ids: list[str] = Field(default_factory=list)
    seniority: Seniority = None
    experience: list[ExperienceEntry] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)

    coordinates: Optional[GeoPoint] = None
    location: Optional[str] = None
    willing_to_relocate: Optional[bool] = None

    desired_salary: Optional[float] = Field(default=None, ge=0)
    disc_profile: Optional[DiscProfile] = None

    @field_validator("name", "experience", "education", mode="before")
    @classmethod
    def null_as_default(cls, v: Any, info: ValidationInfo) -> Any:
        return cls.default_if_null(v, info)

    @field_validator("competency_ids", mode="before")
    @classmethod
    def dedupe_competencies(cls, v: Optional[list]) -> list[str]:
        """Competency ids form a set; keep first occurrence order."""
        return list(dict.fromkeys(str(c) for c in v or []))

    @property
    def display_name(self) -> str:
        return self.name or f"Candidate {self.id}"

    @property
    def is_active(self) -> bool:
        return self.status == CandidateStatus.ACTIVE
