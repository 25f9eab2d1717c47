"""
Tests for Pydantic data models in recruit_match.data.models.
"""

from datetime import date

import pytest
from bson import ObjectId
from pydantic import ValidationError

from recruit_match.data.models import (
    Candidate,
    DiscProfile,
    ExperienceEntry,
    FactorScore,
    GeoPoint,
    Job,
    MatchStatistics,
    MatchWeights,
)
from recruit_match.data.models.base import to_query_id
from recruit_match.utils.constants import (
    DEFAULT_DISC_TOLERANCE,
    CandidateStatus,
    EducationLevel,
    MatchFactor,
    SeniorityLevel,
)
from recruit_match.utils.exceptions import InvalidWeightsError


# ── MatchWeights ─────────────────────────────────────────────────────────────


class TestMatchWeights:
    def test_defaults(self):
        weights = MatchWeights.from_defaults()
        assert weights.to_dict() == {
            "competencies": 0.40,
            "experience": 0.20,
            "education": 0.10,
            "location": 0.10,
            "salary": 0.10,
            "disc": 0.10,
        }
        assert weights == MatchWeights()
        assert weights.total_weight == pytest.approx(1.0)

    def test_from_percentages(self):
        weights = MatchWeights.from_percentages(
            competencies=50, experience=20, education=10, location=10, salary=5, disc=5
        )
        assert weights.competencies == pytest.approx(0.5)
        assert weights.weight_for(MatchFactor.SALARY) == pytest.approx(0.05)
        assert weights.validate_total() is weights

    def test_from_percentages_keeps_defaults_for_missing(self):
        weights = MatchWeights.from_percentages(disc=0)
        assert weights.disc == 0
        assert weights.competencies == pytest.approx(0.40)

    def test_from_percentages_unknown_factor(self):
        with pytest.raises(InvalidWeightsError, match="Unknown factor"):
            MatchWeights.from_percentages(charisma=10)

    @pytest.mark.parametrize("value", [-1, 101])
    def test_from_percentages_out_of_range(self, value):
        with pytest.raises(InvalidWeightsError):
            MatchWeights.from_percentages(salary=value)

    def test_validate_total_rejects_bad_sum(self):
        weights = MatchWeights.from_percentages(competencies=50)
        with pytest.raises(InvalidWeightsError, match="110.0%"):
            weights.validate_total()

    def test_invalid_weights_error_is_value_error(self):
        with pytest.raises(ValueError):
            MatchWeights.from_percentages(salary=150)

    def test_negative_weight_rejected(self):
        with pytest.raises(ValidationError):
            MatchWeights(competencies=-0.1)

    def test_immutable(self):
        weights = MatchWeights()
        with pytest.raises(ValidationError):
            weights.competencies = 0.9


# ── Candidate ────────────────────────────────────────────────────────────────


class TestCandidate:
    def test_minimal_candidate(self):
        candidate = Candidate(_id="c1")
        assert candidate.id == "c1"
        assert candidate.is_active
        assert candidate.competency_ids == []
        assert candidate.display_name == "Candidate c1"

    def test_objectid_is_coerced_to_string(self):
        oid = ObjectId()
        candidate = Candidate.model_validate({"_id": oid, "name": "Ana"})
        assert candidate.id == str(oid)

    def test_competency_ids_deduplicated(self):
        candidate = Candidate(_id="c1", competency_ids=["a", "b", "a", 3, "3"])
        assert candidate.competency_ids == ["a", "b", "3"]

    def test_null_competency_ids(self):
        assert Candidate.model_validate({"_id": "c1", "competency_ids": None}).competency_ids == []

    def test_null_fields_take_defaults(self):
        candidate = Candidate.model_validate(
            {"_id": "c1", "name": None, "experience": None, "education": None, "seniority": None}
        )
        assert candidate.name == ""
        assert candidate.experience == []
        assert candidate.education == []
        assert candidate.seniority is None
        assert candidate.display_name == "Candidate c1"

    @pytest.mark.parametrize("level", ["lead", "", 3])
    def test_unknown_seniority_is_unset(self, level):
        assert Candidate.model_validate({"_id": "c1", "seniority": level}).seniority is None

    def test_seniority_label_normalised(self):
        assert Candidate.model_validate({"_id": "c1", "seniority": " Senior "}).seniority == SeniorityLevel.SENIOR

    def test_inactive_status(self):
        assert not Candidate(_id="c1", status=CandidateStatus.HIRED).is_active

    def test_negative_desired_salary_rejected(self):
        with pytest.raises(ValidationError):
            Candidate(_id="c1", desired_salary=-1)

    def test_current_experience(self):
        entry = ExperienceEntry(title="Developer", start_date=date(2020, 1, 1))
        assert entry.is_current
        assert not ExperienceEntry(title="Developer", end_date=date(2021, 1, 1)).is_current


class TestEmbeddedModels:
    def test_disc_axis_bounds(self):
        with pytest.raises(ValidationError):
            DiscProfile(D=101, I=0, S=0, C=0)

    def test_disc_axis_lookup(self):
        profile = DiscProfile(D=10, I=20, S=30, C=40)
        assert [profile.axis(a) for a in "DISC"] == [10, 20, 30, 40]

    def test_geopoint_bounds(self):
        with pytest.raises(ValidationError):
            GeoPoint(lat=91, lng=0)

    def test_factor_score_bounds(self):
        with pytest.raises(ValidationError):
            FactorScore(score=101)


# ── Job ──────────────────────────────────────────────────────────────────────


class TestJob:
    def test_defaults(self):
        job = Job(_id="j1")
        assert job.minimum_education == EducationLevel.HIGH_SCHOOL
        assert job.required_competency_ids == []
        assert not job.is_remote

    def test_null_fields_take_defaults(self):
        job = Job.model_validate(
            {
                "_id": "j1",
                "title": None,
                "minimum_education": None,
                "desired_fields": None,
                "disc_tolerance": None,
                "required_competency_ids": None,
            }
        )
        assert job.title == ""
        assert job.minimum_education == EducationLevel.HIGH_SCHOOL
        assert job.desired_fields == []
        assert job.disc_tolerance == {}
        assert job.required_competency_ids == []
        assert job.tolerance_for("D") == DEFAULT_DISC_TOLERANCE

    def test_unknown_seniority_is_unset(self):
        assert Job.model_validate({"_id": "j1", "seniority": "lead"}).seniority is None

    @pytest.mark.parametrize("location", ["Remoto", "HOME OFFICE", "Híbrido ou remoto"])
    def test_is_remote(self, location):
        assert Job(_id="j1", location=location).is_remote

    def test_tolerance_defaults_per_axis(self):
        job = Job(_id="j1", disc_tolerance={"D": 5})
        assert job.tolerance_for("D") == 5
        assert job.tolerance_for("C") == DEFAULT_DISC_TOLERANCE

    def test_unknown_tolerance_axis_rejected(self):
        with pytest.raises(ValidationError):
            Job(_id="j1", disc_tolerance={"X": 10})

    def test_negative_tolerance_rejected(self):
        with pytest.raises(ValidationError):
            Job(_id="j1", disc_tolerance={"D": -1})


# ── Helpers ──────────────────────────────────────────────────────────────────


class TestQueryId:
    def test_valid_objectid_string(self):
        oid = ObjectId()
        assert to_query_id(str(oid)) == oid

    def test_plain_string_kept(self):
        assert to_query_id("job-1") == "job-1"


class TestMatchStatistics:
    def test_defaults_have_every_bucket(self):
        stats = MatchStatistics()
        assert stats.total == 0
        assert list(stats.histogram) == ["90-100", "80-89", "70-79", "60-69", "0-59"]
