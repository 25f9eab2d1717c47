"""
Job posting data models for Recruit Match.

Defines the job posting as read by the matching engine: required
competencies, seniority, education, location, salary, benefits, and the
ideal DISC profile.
"""

from typing import Any, Optional

from pydantic import Field, ValidationInfo, field_validator

from recruit_match.utils.constants import (
    DEFAULT_DISC_TOLERANCE,
    DISC_AXES,
    EducationLevel,
    JobStatus,
    REMOTE_KEYWORDS,
)

from .base import BaseDocument
from .candidate import DiscProfile, GeoPoint, Seniority


class Job(BaseDocument):
    """
    Job posting.

    Salary and benefits are kept as the free text recruiters type; the
    salary scorer extracts numbers from it.
    """

    title: str = ""
    status: JobStatus = JobStatus.OPEN

    # Requirements
    required_competency_ids: list[str] = Field(default_factory=list)
    seniority: Seniority = None
    desired_years: Optional[float] = Field(default=None, ge=0)
    target_role: Optional[str] = None
    minimum_education: EducationLevel = EducationLevel.HIGH_SCHOOL
    desired_fields: list[str] = Field(default_factory=list)

    # Location
    coordinates: Optional[GeoPoint] = None
    location: Optional[str] = None

    # Compensation
    salary_text: Optional[str] = None
    benefits: Optional[str] = None

    # Behavioral profile
    ideal_disc_profile: Optional[DiscProfile] = None
    disc_tolerance: dict[str, float] = Field(default_factory=dict)

    @field_validator("title", "minimum_education", "desired_fields", "disc_tolerance", mode="before")
    @classmethod
    def null_as_default(cls, v: Any, info: ValidationInfo) -> Any:
        return cls.default_if_null(v, info)

    @field_validator("required_competency_ids", mode="before")
    @classmethod
    def dedupe_competencies(cls, v: Optional[list]) -> list[str]:
        """Competency ids form a set; keep first occurrence order."""
        return list(dict.fromkeys(str(c) for c in v or []))

    @field_validator("disc_tolerance")
    @classmethod
    def validate_tolerance(cls, v: dict[str, float]) -> dict[str, float]:
        """Only DISC axes with non-negative tolerances are accepted."""
        for axis, tolerance in v.items():
            if axis not in DISC_AXES:
                raise ValueError(f"Unknown DISC axis: {axis}")
            if tolerance < 0:
                raise ValueError("DISC tolerance must be non-negative")
        return v

    @property
    def is_remote(self) -> bool:
        """Whether the location text advertises remote work."""
        text = (self.location or "").lower()
        return any(keyword in text for keyword in REMOTE_KEYWORDS)

    def tolerance_for(self, axis: str) -> float:
        """Get the allowed deviation for a DISC axis."""
        return self.disc_tolerance.get(axis, DEFAULT_DISC_TOLERANCE)
