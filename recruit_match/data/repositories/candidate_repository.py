"""
Candidate repository for Recruit Match.

Reads the active candidate pool and each candidate's competency links.
"""

from typing import Optional

from recruit_match.data.database import (
    CANDIDATE_COMPETENCIES_COLLECTION,
    CANDIDATES_COLLECTION,
)
from recruit_match.data.models.candidate import Candidate
from recruit_match.utils.constants import CandidateStatus
from recruit_match.utils.logger import get_logger

from .base import BaseRepository

logger = get_logger(__name__)


class CandidateRepository(BaseRepository[Candidate]):
    """Repository for candidate document reads."""

    @property
    def collection_name(self) -> str:
        return CANDIDATES_COLLECTION

    @property
    def model_class(self) -> type[Candidate]:
        return Candidate

    def list_active(self) -> list[Candidate]:
        """Get all candidates with active status."""
        candidates = self.find({"status": CandidateStatus.ACTIVE.value})
        logger.debug(f"Loaded {len(candidates)} active candidates")
        return candidates

    async def list_active_async(self) -> list[Candidate]:
        """Get all candidates with active status asynchronously."""
        return await self.find_async({"status": CandidateStatus.ACTIVE.value})

    def get_competency_ids(self, candidate_id: str) -> list[str]:
        """Get the competency ids linked to a candidate."""
        return self._linked_ids(CANDIDATE_COMPETENCIES_COLLECTION, "candidate_id", candidate_id)

    async def get_competency_ids_async(self, candidate_id: str) -> list[str]:
        """Get the competency ids linked to a candidate asynchronously."""
        return await self._linked_ids_async(
            CANDIDATE_COMPETENCIES_COLLECTION, "candidate_id", candidate_id
        )


# Singleton instance
_candidate_repository: Optional[CandidateRepository] = None


def get_candidate_repository() -> CandidateRepository:
    """Get the candidate repository singleton instance."""
    global _candidate_repository
    if _candidate_repository is None:
        _candidate_repository = CandidateRepository()
    return _candidate_repository
