"""
Factor scorers for candidate-job matching.

Six independent, stateless functions. Each takes a candidate and a job and
returns a 0-100 integer score with a short justification. Missing data on
either side never raises; it scores the factor as 0 unless the rule for that
factor states otherwise.
"""

from datetime import date
from typing import Optional

from recruit_match.data.models import Candidate, FactorScore, Job
from recruit_match.utils.constants import (
    DEFAULT_SENIORITY,
    DISC_AXES,
    DISC_MAX_AXIS_RANGE,
    DISTANCE_BANDS,
    EDUCATION_DEFICIT_PENALTY,
    EDUCATION_ORDINALS,
    FAR_DISTANCE_SCORE,
    LOCATION_TEXT_SCORES,
    PERK_MIN_SCORE,
    RELATED_FIELD_SCORE,
    RELOCATION_MIN_SCORE,
    SALARY_ABOVE_MAX_TOLERANCE,
    SALARY_BELOW_MIN_TOLERANCE,
    SALARY_SCORES,
    SENIORITY_DISTANCE_FLOOR,
    SENIORITY_DISTANCE_SCORES,
    SENIORITY_ORDINALS,
)
from recruit_match.utils.logger import get_logger

from .parsing import (
    has_recognized_perk,
    haversine_km,
    normalize_text,
    parse_salary_range,
    round_score,
    years_between,
)

logger = get_logger(__name__)


# ── Competencies ─────────────────────────────────────────────────────────────


def score_competencies(candidate: Candidate, job: Job) -> FactorScore:
    """Share of the job's required competency ids the candidate holds."""
    required = set(job.required_competency_ids)
    if not required:
        return FactorScore(score=100, justification="Job requires no specific competencies")

    held = set(candidate.competency_ids)
    if not held:
        return FactorScore(score=0, justification="Candidate has no competencies registered")

    matched = len(required & held)
    return FactorScore(
        score=round_score(100 * matched / len(required)),
        justification=f"Has {matched} of {len(required)} required competencies",
    )


# ── Experience ───────────────────────────────────────────────────────────────


def _years_in_role(candidate: Candidate, job: Job, as_of: date) -> float:
    role = (job.target_role or "").strip().lower()
    total = 0.0
    for entry in candidate.experience:
        if role and role not in entry.title.lower():
            continue
        end = as_of if entry.is_current else entry.end_date
        total += years_between(entry.start_date, end)
    return total


def _seniority_score(candidate: Candidate, job: Job) -> int:
    candidate_level = SENIORITY_ORDINALS[candidate.seniority or DEFAULT_SENIORITY]
    job_level = SENIORITY_ORDINALS[job.seniority or DEFAULT_SENIORITY]
    distance = abs(candidate_level - job_level)
    return SENIORITY_DISTANCE_SCORES.get(distance, SENIORITY_DISTANCE_FLOOR)


def score_experience(
    candidate: Candidate,
    job: Job,
    as_of: Optional[date] = None,
) -> FactorScore:
    """
    Mean of the years-in-role score and the seniority-level score.

    Args:
        candidate: Candidate being scored
        job: Job posting
        as_of: End date for current positions (defaults to today)
    """
    as_of = as_of or date.today()
    matched_years = _years_in_role(candidate, job, as_of)

    desired_years = job.desired_years or 0
    if desired_years > 0:
        years_score = min(100, round_score(100 * matched_years / desired_years))
    else:
        years_score = 100

    level_score = _seniority_score(candidate, job)

    return FactorScore(
        score=round_score((years_score + level_score) / 2),
        justification=(
            f"{matched_years:.1f} years in role (desired {desired_years:g}), "
            f"seniority score {level_score}"
        ),
    )


# ── Education ────────────────────────────────────────────────────────────────


def score_education(candidate: Candidate, job: Job) -> FactorScore:
    """Best-fit score across the candidate's education entries."""
    if not candidate.education:
        return FactorScore(score=0, justification="No education registered")

    minimum = EDUCATION_ORDINALS[job.minimum_education]
    desired_fields = [f.lower() for f in job.desired_fields if f.strip()]

    best_score = 0
    best_entry = None
    for entry in candidate.education:
        deficit = minimum - EDUCATION_ORDINALS[entry.level]
        level_score = 100 if deficit <= 0 else max(0, 100 - EDUCATION_DEFICIT_PENALTY * deficit)

        field_text = entry.field_of_study.lower()
        if not desired_fields or any(f in field_text for f in desired_fields):
            field_score = 100
        else:
            field_score = RELATED_FIELD_SCORE

        entry_score = round_score((level_score + field_score) / 2)
        if best_entry is None or entry_score > best_score:
            best_score, best_entry = entry_score, entry

    return FactorScore(
        score=best_score,
        justification=(
            f"Best entry: {best_entry.level.value}"
            + (f" in {best_entry.field_of_study}" if best_entry.field_of_study else "")
            + f" (minimum {job.minimum_education.value})"
        ),
    )


# ── Location ─────────────────────────────────────────────────────────────────


def _distance_score(distance_km: float) -> int:
    for max_km, score in DISTANCE_BANDS:
        if distance_km <= max_km:
            return score
    return FAR_DISTANCE_SCORE


def score_location(candidate: Candidate, job: Job) -> FactorScore:
    """Distance-based score when both sides have coordinates, text otherwise."""
    if job.is_remote:
        return FactorScore(score=100, justification="Remote position")

    if candidate.coordinates is not None and job.coordinates is not None:
        distance = haversine_km(candidate.coordinates, job.coordinates)
        score = _distance_score(distance)
        justification = f"{distance:.1f} km away"
        if candidate.willing_to_relocate and score < RELOCATION_MIN_SCORE:
            score = RELOCATION_MIN_SCORE
            justification += ", willing to relocate"
        return FactorScore(score=score, justification=justification)

    candidate_text = normalize_text(candidate.location)
    job_text = normalize_text(job.location)

    if not candidate_text or not job_text:
        return FactorScore(score=0, justification="Location not informed")
    if candidate_text == job_text:
        return FactorScore(score=LOCATION_TEXT_SCORES["exact"], justification="Same location")
    if candidate_text in job_text or job_text in candidate_text:
        return FactorScore(score=LOCATION_TEXT_SCORES["partial"], justification="Partially matching location")
    return FactorScore(score=LOCATION_TEXT_SCORES["different"], justification="Different location")


# ── Salary ───────────────────────────────────────────────────────────────────


def score_salary(candidate: Candidate, job: Job) -> FactorScore:
    """Position of the desired salary relative to the job's salary range."""
    salary_range = parse_salary_range(job.salary_text)
    if salary_range is None:
        if job.salary_text:
            logger.debug(f"Could not extract a salary range from {job.salary_text!r}")
        return FactorScore(score=0, justification="Job salary range not informed")

    desired = candidate.desired_salary
    if not desired:
        return FactorScore(score=0, justification="Desired salary not informed")

    low, high = salary_range
    if low <= desired <= high:
        score, justification = SALARY_SCORES["within_range"], "Within range"
    elif low * SALARY_BELOW_MIN_TOLERANCE <= desired < low:
        score, justification = SALARY_SCORES["slightly_below"], "Up to 20% below range"
    elif high < desired <= high * SALARY_ABOVE_MAX_TOLERANCE:
        score, justification = SALARY_SCORES["slightly_above"], "Up to 20% above range"
    else:
        score, justification = SALARY_SCORES["out_of_range"], "Outside range"

    if score < PERK_MIN_SCORE and has_recognized_perk(job.benefits):
        score = PERK_MIN_SCORE
        justification += ", offset by benefits"

    return FactorScore(
        score=score,
        justification=f"{justification} ({desired:g} vs {low:g}-{high:g})",
    )


# ── DISC ─────────────────────────────────────────────────────────────────────


def score_disc(candidate: Candidate, job: Job) -> FactorScore:
    """Per-axis closeness of the candidate's DISC profile to the job's ideal."""
    if candidate.disc_profile is None:
        return FactorScore(score=0, justification="Candidate has no DISC profile")
    if job.ideal_disc_profile is None:
        return FactorScore(score=0, justification="Job has no ideal DISC profile")

    axis_scores = []
    outside = []
    for axis in DISC_AXES:
        diff = abs(candidate.disc_profile.axis(axis) - job.ideal_disc_profile.axis(axis))
        if diff <= job.tolerance_for(axis):
            axis_scores.append(100.0)
        else:
            axis_scores.append(max(0.0, 100 - (diff / DISC_MAX_AXIS_RANGE) * 100))
            outside.append(axis)

    justification = (
        "All axes within tolerance"
        if not outside
        else f"Outside tolerance on {', '.join(outside)}"
    )
    return FactorScore(
        score=round_score(sum(axis_scores) / len(axis_scores)),
        justification=justification,
    )
