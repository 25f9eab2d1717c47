"""
Job repository for Recruit Match.

Reads job postings and their required competency links.
"""

from typing import Optional

from recruit_match.data.database import JOB_COMPETENCIES_COLLECTION, JOBS_COLLECTION
from recruit_match.data.models.job import Job

from .base import BaseRepository


class JobRepository(BaseRepository[Job]):
    """Repository for job posting document reads."""

    @property
    def collection_name(self) -> str:
        return JOBS_COLLECTION

    @property
    def model_class(self) -> type[Job]:
        return Job

    def get_required_competency_ids(self, job_id: str) -> list[str]:
        """Get the competency ids a job requires."""
        return self._linked_ids(JOB_COMPETENCIES_COLLECTION, "job_id", job_id)

    async def get_required_competency_ids_async(self, job_id: str) -> list[str]:
        """Get the competency ids a job requires asynchronously."""
        return await self._linked_ids_async(JOB_COMPETENCIES_COLLECTION, "job_id", job_id)


# Singleton instance
_job_repository: Optional[JobRepository] = None


def get_job_repository() -> JobRepository:
    """Get the job repository singleton instance."""
    global _job_repository
    if _job_repository is None:
        _job_repository = JobRepository()
    return _job_repository
