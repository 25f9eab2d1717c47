"""
Shared test fixtures for the Recruit Match test suite.

Sets environment variables before any package imports so logging stays on
the console, then provides factory fixtures for candidates and jobs and an
in-memory data source.
"""

import os

# === Set environment BEFORE any recruit_match imports ===
os.environ.setdefault("APP_ENVIRONMENT", "testing")
os.environ.setdefault("DB_NAME", "recruit_match_test")
os.environ.setdefault("LOG_FILE_OUTPUT", "false")

from datetime import date
from typing import Any, Optional

import pytest

from recruit_match.core.matching import MatchingEngine
from recruit_match.data.models import (
    Candidate,
    DiscProfile,
    EducationEntry,
    ExperienceEntry,
    GeoPoint,
    Job,
)
from recruit_match.data.sources import InMemoryDataSource
from recruit_match.utils.constants import (
    CandidateStatus,
    EducationLevel,
    SeniorityLevel,
)

# Fixed reference date so experience spans are reproducible
AS_OF = date(2024, 1, 1)

SAO_PAULO = GeoPoint(lat=-23.5505, lng=-46.6333)
CAMPINAS = GeoPoint(lat=-22.9099, lng=-47.0626)
RIO_DE_JANEIRO = GeoPoint(lat=-22.9068, lng=-43.1729)
BRASILIA = GeoPoint(lat=-15.7939, lng=-47.8828)


@pytest.fixture
def as_of() -> date:
    return AS_OF


# ---------------------------------------------------------------------------
# Factory fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_candidate():
    """Factory that returns a callable to build Candidate models.

    Defaults describe a strong fit for the job built by make_job.
    """

    def _factory(
        id: str = "cand-1",
        name: str = "Ana Souza",
        competency_ids: Optional[list[str]] = None,
        seniority: Optional[SeniorityLevel] = SeniorityLevel.SENIOR,
        experience: Optional[list[ExperienceEntry]] = None,
        education: Optional[list[EducationEntry]] = None,
        coordinates: Optional[GeoPoint] = SAO_PAULO,
        location: Optional[str] = "São Paulo",
        willing_to_relocate: Optional[bool] = None,
        desired_salary: Optional[float] = 10000,
        disc_profile: Optional[DiscProfile] = None,
        status: CandidateStatus = CandidateStatus.ACTIVE,
        **kwargs: Any,
    ) -> Candidate:
        if competency_ids is None:
            competency_ids = ["python", "sql", "docker"]
        if experience is None:
            experience = [
                ExperienceEntry(
                    title="Backend Developer",
                    start_date=date(2018, 1, 1),
                    end_date=date(2021, 1, 1),
                ),
                ExperienceEntry(
                    title="Senior Backend Developer",
                    start_date=date(2021, 1, 1),
                    end_date=None,
                ),
            ]
        if education is None:
            education = [
                EducationEntry(level=EducationLevel.BACHELOR, field_of_study="Ciência da Computação"),
            ]
        if disc_profile is None:
            disc_profile = DiscProfile(D=70, I=65, S=45, C=85)

        return Candidate(
            _id=id,
            name=name,
            status=status,
            competency_ids=competency_ids,
            seniority=seniority,
            experience=experience,
            education=education,
            coordinates=coordinates,
            location=location,
            willing_to_relocate=willing_to_relocate,
            desired_salary=desired_salary,
            disc_profile=disc_profile,
            **kwargs,
        )

    return _factory


@pytest.fixture
def make_job():
    """Factory that returns a callable to build Job models."""

    def _factory(
        id: str = "job-1",
        title: str = "Senior Backend Developer",
        required_competency_ids: Optional[list[str]] = None,
        seniority: Optional[SeniorityLevel] = SeniorityLevel.SENIOR,
        desired_years: Optional[float] = 5,
        target_role: Optional[str] = "developer",
        minimum_education: EducationLevel = EducationLevel.BACHELOR,
        desired_fields: Optional[list[str]] = None,
        coordinates: Optional[GeoPoint] = SAO_PAULO,
        location: Optional[str] = "São Paulo",
        salary_text: Optional[str] = "R$ 8.000 - R$ 12.000",
        benefits: Optional[str] = None,
        ideal_disc_profile: Optional[DiscProfile] = None,
        disc_tolerance: Optional[dict[str, float]] = None,
        **kwargs: Any,
    ) -> Job:
        if required_competency_ids is None:
            required_competency_ids = ["python", "sql", "docker"]
        if ideal_disc_profile is None:
            ideal_disc_profile = DiscProfile(D=75, I=60, S=40, C=80)

        return Job(
            _id=id,
            title=title,
            required_competency_ids=required_competency_ids,
            seniority=seniority,
            desired_years=desired_years,
            target_role=target_role,
            minimum_education=minimum_education,
            desired_fields=desired_fields or [],
            coordinates=coordinates,
            location=location,
            salary_text=salary_text,
            benefits=benefits,
            ideal_disc_profile=ideal_disc_profile,
            disc_tolerance=disc_tolerance or {},
            **kwargs,
        )

    return _factory


# ---------------------------------------------------------------------------
# Data source and engine fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_pool(make_candidate):
    """Five candidates ranging from a strong to a weak fit."""
    return [
        make_candidate(id="cand-strong", name="Ana"),
        make_candidate(
            id="cand-partial",
            name="Bruno",
            competency_ids=["python"],
            seniority=SeniorityLevel.MID,
            coordinates=CAMPINAS,
        ),
        make_candidate(
            id="cand-weak",
            name="Carla",
            competency_ids=[],
            seniority=SeniorityLevel.INTERN,
            experience=[],
            education=[],
            coordinates=None,
            location=None,
            desired_salary=None,
            disc_profile=DiscProfile(D=0, I=100, S=100, C=0),
        ),
        make_candidate(
            id="cand-far",
            name="Diego",
            competency_ids=["python", "sql"],
            coordinates=BRASILIA,
            desired_salary=20000,
        ),
        make_candidate(
            id="cand-inactive",
            name="Eva",
            status=CandidateStatus.INACTIVE,
        ),
    ]


@pytest.fixture
def data_source(make_job, sample_pool):
    return InMemoryDataSource(jobs=[make_job()], candidates=sample_pool)


@pytest.fixture
def matching_engine(data_source):
    return MatchingEngine(data_source=data_source)
