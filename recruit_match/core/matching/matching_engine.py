"""
Candidate-Job matching engine.

Scores every active candidate against a job posting on six factors
(competencies, experience, education, location, salary and DISC profile),
combines them with a weighting policy, filters by a minimum score and ranks
the survivors. All reads happen before scoring starts; the scoring phase is
pure and may fan out across threads for large pools.
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from typing import Optional

from recruit_match.data.models import (
    Candidate,
    Job,
    MatchResult,
    MatchStatistics,
    MatchWeights,
    ScoreBreakdown,
)
from recruit_match.data.sources import MatchingDataSource, RepositoryDataSource
from recruit_match.utils.config import get_settings
from recruit_match.utils.exceptions import JobNotFoundError
from recruit_match.utils.logger import audit_log, get_logger

from .parsing import round_score
from .scorers import (
    score_competencies,
    score_disc,
    score_education,
    score_experience,
    score_location,
    score_salary,
)
from .statistics import summarize_scores

logger = get_logger(__name__)


class MatchingEngine:
    """
    Engine for scoring candidates against a job posting.

    Holds no state between calls: every invocation reads the data source
    and computes results from scratch.
    """

    def __init__(
        self,
        data_source: Optional[MatchingDataSource] = None,
        weights: Optional[MatchWeights] = None,
        max_workers: Optional[int] = None,
        parallel_threshold: Optional[int] = None,
    ):
        """
        Initialize the matching engine.

        Args:
            data_source: Where jobs and candidates are read from
                (MongoDB repositories by default)
            weights: Default weighting policy for calls that pass none
            max_workers: Thread count for scoring large pools
            parallel_threshold: Pool size above which scoring uses threads
        """
        settings = get_settings().matching
        self.data_source = data_source or RepositoryDataSource()
        self.weights = weights or MatchWeights.from_defaults()
        self.default_min_score = settings.default_min_score
        self.max_workers = max_workers or settings.max_workers
        self.parallel_threshold = parallel_threshold or settings.parallel_threshold

    # -------------------------------------------------------------------------
    # Scoring
    # -------------------------------------------------------------------------

    def score_candidate(
        self,
        candidate: Candidate,
        job: Job,
        weights: Optional[MatchWeights] = None,
        as_of: Optional[date] = None,
    ) -> MatchResult:
        """
        Score one candidate against one job.

        Args:
            candidate: Candidate with competency ids filled in
            job: Job with required competency ids filled in
            weights: Weighting policy (engine default when omitted)
            as_of: End date for current positions (defaults to today)

        Returns:
            MatchResult with composite score and per-factor breakdown
        """
        weights = weights or self.weights
        breakdown = ScoreBreakdown(
            competencies=score_competencies(candidate, job),
            experience=score_experience(candidate, job, as_of=as_of or date.today()),
            education=score_education(candidate, job),
            location=score_location(candidate, job),
            salary=score_salary(candidate, job),
            disc=score_disc(candidate, job),
        )
        return MatchResult(
            candidate=candidate,
            job_id=job.id,
            score=round_score(breakdown.weighted_total(weights)),
            breakdown=breakdown,
        )

    def _score_pool(
        self,
        job: Job,
        pool: list[Candidate],
        weights: MatchWeights,
        as_of: date,
    ) -> list[MatchResult]:
        """Score every candidate, keeping pool order."""
        if len(pool) > self.parallel_threshold and self.max_workers > 1:
            logger.debug(f"Scoring {len(pool)} candidates on {self.max_workers} threads")
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                return list(
                    executor.map(
                        lambda candidate: self.score_candidate(candidate, job, weights, as_of),
                        pool,
                    )
                )
        return [self.score_candidate(candidate, job, weights, as_of) for candidate in pool]

    @staticmethod
    def rank_candidates(results: list[MatchResult]) -> list[MatchResult]:
        """
        Rank results by composite score.

        The sort is stable: ties keep their pool order.
        """
        return sorted(results, key=lambda r: r.score, reverse=True)

    def _select(
        self,
        job: Job,
        pool: list[Candidate],
        min_score: Optional[int],
        weights: Optional[MatchWeights],
        as_of: Optional[date],
    ) -> list[MatchResult]:
        threshold = self.default_min_score if min_score is None else min_score
        weights = weights or self.weights

        scored = self._score_pool(job, pool, weights, as_of or date.today())
        matches = self.rank_candidates([r for r in scored if r.score >= threshold])

        logger.info(
            f"Matches computed for job {job.id}: {len(matches)} of {len(pool)} "
            f"candidates at or above {threshold}"
        )
        audit_log(
            "matches_computed",
            {
                "job_id": job.id,
                "min_score": threshold,
                "weights": weights.to_dict(),
                "pool_size": len(pool),
                "matches": len(matches),
            },
        )
        return matches

    # -------------------------------------------------------------------------
    # Data Loading
    # -------------------------------------------------------------------------

    def _load(self, job_id: str) -> tuple[Job, list[Candidate]]:
        """Read the job, the active pool and all competency links."""
        source = self.data_source

        job = source.get_job(job_id)
        if job is None:
            raise JobNotFoundError(job_id)

        job = job.model_copy(
            update={"required_competency_ids": source.get_job_required_competency_ids(job_id)}
        )
        pool = [
            candidate.model_copy(
                update={"competency_ids": source.get_candidate_competency_ids(candidate.id)}
            )
            for candidate in source.list_active_candidates()
        ]
        return job, pool

    async def _load_async(self, job_id: str) -> tuple[Job, list[Candidate]]:
        """Read the job, the active pool and all competency links asynchronously."""
        source = self.data_source

        job = await source.get_job_async(job_id)
        if job is None:
            raise JobNotFoundError(job_id)

        required, candidates = await asyncio.gather(
            source.get_job_required_competency_ids_async(job_id),
            source.list_active_candidates_async(),
        )
        competency_ids = await asyncio.gather(
            *(source.get_candidate_competency_ids_async(c.id) for c in candidates)
        )

        job = job.model_copy(update={"required_competency_ids": required})
        pool = [
            candidate.model_copy(update={"competency_ids": ids})
            for candidate, ids in zip(candidates, competency_ids)
        ]
        return job, pool

    # -------------------------------------------------------------------------
    # Public Operations
    # -------------------------------------------------------------------------

    def compute_matches(
        self,
        job_id: str,
        min_score: Optional[int] = None,
        weights: Optional[MatchWeights] = None,
        as_of: Optional[date] = None,
    ) -> list[MatchResult]:
        """
        Score the active candidate pool against a job.

        Args:
            job_id: Job posting id
            min_score: Minimum composite score to keep (settings default, 70)
            weights: Weighting policy (engine default when omitted)
            as_of: End date for current positions (defaults to today)

        Returns:
            Results at or above min_score, highest first. Empty when no
            candidate clears the threshold.

        Raises:
            JobNotFoundError: If the job id does not resolve.
        """
        job, pool = self._load(job_id)
        return self._select(job, pool, min_score, weights, as_of)

    async def compute_matches_async(
        self,
        job_id: str,
        min_score: Optional[int] = None,
        weights: Optional[MatchWeights] = None,
        as_of: Optional[date] = None,
    ) -> list[MatchResult]:
        """Async variant of compute_matches; awaits all reads before scoring."""
        job, pool = await self._load_async(job_id)
        return self._select(job, pool, min_score, weights, as_of)

    def compute_statistics(
        self,
        job_id: str,
        weights: Optional[MatchWeights] = None,
        as_of: Optional[date] = None,
    ) -> MatchStatistics:
        """
        Aggregate statistics over the job's full scored pool.

        Raises:
            JobNotFoundError: If the job id does not resolve.
        """
        matches = self.compute_matches(job_id, min_score=0, weights=weights, as_of=as_of)
        return summarize_scores([m.score for m in matches])


# Singleton instance
_matching_engine: Optional[MatchingEngine] = None


def get_matching_engine() -> MatchingEngine:
    """Get the matching engine singleton instance."""
    global _matching_engine
    if _matching_engine is None:
        _matching_engine = MatchingEngine()
    return _matching_engine


def compute_matches(
    job_id: str,
    min_score: Optional[int] = None,
    weights: Optional[MatchWeights] = None,
    as_of: Optional[date] = None,
) -> list[MatchResult]:
    """Compute matches for a job with the shared engine."""
    return get_matching_engine().compute_matches(job_id, min_score, weights, as_of)


def compute_statistics(job_id: str) -> MatchStatistics:
    """Compute statistics for a job with the shared engine."""
    return get_matching_engine().compute_statistics(job_id)
