"""
Data sources consumed by the matching engine.

The engine reads through the MatchingDataSource interface only: one job,
the active candidate pool, and the competency links of both. Adapters are
provided for MongoDB (via the repositories) and for in-memory/JSON data.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Iterable, Optional

from recruit_match.data.models import Candidate, Job
from recruit_match.data.repositories import (
    CandidateRepository,
    JobRepository,
    get_candidate_repository,
    get_job_repository,
)
from recruit_match.utils.logger import get_logger

logger = get_logger(__name__)


class MatchingDataSource(ABC):
    """
    Read-only collaborator supplying jobs and candidates.

    The async methods default to the synchronous implementation; adapters
    backed by async drivers override them.
    """

    @abstractmethod
    def get_job(self, job_id: str) -> Optional[Job]:
        """Get a job posting, or None when the id does not resolve."""

    @abstractmethod
    def list_active_candidates(self) -> list[Candidate]:
        """Get the candidate pool eligible for matching."""

    @abstractmethod
    def get_candidate_competency_ids(self, candidate_id: str) -> list[str]:
        """Get the competency ids a candidate holds."""

    @abstractmethod
    def get_job_required_competency_ids(self, job_id: str) -> list[str]:
        """Get the competency ids a job requires."""

    async def get_job_async(self, job_id: str) -> Optional[Job]:
        return self.get_job(job_id)

    async def list_active_candidates_async(self) -> list[Candidate]:
        return self.list_active_candidates()

    async def get_candidate_competency_ids_async(self, candidate_id: str) -> list[str]:
        return self.get_candidate_competency_ids(candidate_id)

    async def get_job_required_competency_ids_async(self, job_id: str) -> list[str]:
        return self.get_job_required_competency_ids(job_id)


class RepositoryDataSource(MatchingDataSource):
    """MongoDB-backed data source using the candidate and job repositories."""

    def __init__(
        self,
        candidate_repository: Optional[CandidateRepository] = None,
        job_repository: Optional[JobRepository] = None,
    ) -> None:
        self._candidates = candidate_repository or get_candidate_repository()
        self._jobs = job_repository or get_job_repository()

    def get_job(self, job_id: str) -> Optional[Job]:
        return self._jobs.get_by_id(job_id)

    def list_active_candidates(self) -> list[Candidate]:
        return self._candidates.list_active()

    def get_candidate_competency_ids(self, candidate_id: str) -> list[str]:
        return self._candidates.get_competency_ids(candidate_id)

    def get_job_required_competency_ids(self, job_id: str) -> list[str]:
        return self._jobs.get_required_competency_ids(job_id)

    async def get_job_async(self, job_id: str) -> Optional[Job]:
        return await self._jobs.get_by_id_async(job_id)

    async def list_active_candidates_async(self) -> list[Candidate]:
        return await self._candidates.list_active_async()

    async def get_candidate_competency_ids_async(self, candidate_id: str) -> list[str]:
        return await self._candidates.get_competency_ids_async(candidate_id)

    async def get_job_required_competency_ids_async(self, job_id: str) -> list[str]:
        return await self._jobs.get_required_competency_ids_async(job_id)


class InMemoryDataSource(MatchingDataSource):
    """
    Data source over records already held in memory.

    Competency links given explicitly take precedence over the ids
    embedded in the candidate and job records.
    """

    def __init__(
        self,
        jobs: Iterable[Job] = (),
        candidates: Iterable[Candidate] = (),
        candidate_competencies: Optional[dict[str, list[str]]] = None,
        job_competencies: Optional[dict[str, list[str]]] = None,
    ) -> None:
        self._jobs = {job.id: job for job in jobs}
        self._candidates = list(candidates)
        self._candidate_competencies = candidate_competencies or {}
        self._job_competencies = job_competencies or {}

    def get_job(self, job_id: str) -> Optional[Job]:
        return self._jobs.get(job_id)

    def list_active_candidates(self) -> list[Candidate]:
        return [c for c in self._candidates if c.is_active]

    def get_candidate_competency_ids(self, candidate_id: str) -> list[str]:
        if candidate_id in self._candidate_competencies:
            return list(self._candidate_competencies[candidate_id])
        for candidate in self._candidates:
            if candidate.id == candidate_id:
                return list(candidate.competency_ids)
        return []

    def get_job_required_competency_ids(self, job_id: str) -> list[str]:
        if job_id in self._job_competencies:
            return list(self._job_competencies[job_id])
        job = self._jobs.get(job_id)
        return list(job.required_competency_ids) if job else []


class JsonFileDataSource(InMemoryDataSource):
    """
    Data source reading a JSON document.

    Expected layout::

        {
            "jobs": [{"_id": "...", ...}],
            "candidates": [{"_id": "...", ...}],
            "candidate_competencies": {"<candidate id>": ["<competency id>"]},
            "job_competencies": {"<job id>": ["<competency id>"]}
        }

    Only "jobs" and "candidates" are required.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        payload: dict[str, Any] = json.loads(self.path.read_text(encoding="utf-8"))

        jobs = [Job.model_validate(doc) for doc in payload.get("jobs", [])]
        candidates = [Candidate.model_validate(doc) for doc in payload.get("candidates", [])]
        logger.info(
            f"Loaded {len(jobs)} jobs and {len(candidates)} candidates from {self.path}"
        )

        super().__init__(
            jobs=jobs,
            candidates=candidates,
            candidate_competencies=_stringify_links(payload.get("candidate_competencies")),
            job_competencies=_stringify_links(payload.get("job_competencies")),
        )


def _stringify_links(links: Optional[dict[str, list[Any]]]) -> dict[str, list[str]]:
    return {str(owner): [str(c) for c in ids] for owner, ids in (links or {}).items()}
