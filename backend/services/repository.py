"""Data source boundary for curricula, job postings and analysis snapshots.

The analysis core reads and writes through GapDataSource only. Storage
adapters (document store, SQL, ...) implement it outside this package;
InMemoryDataSource backs the HTTP adapter and the tests.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone

from pydantic import BaseModel

from models.schemas.gap_result import GapAnalysisResult
from models.schemas.records import CurriculumRecord, JobRecord

logger = logging.getLogger(__name__)


class CurriculumNotFound(LookupError):
    def __init__(self, curriculum_id: str) -> None:
        super().__init__(f"Curriculum not found: {curriculum_id}")
        self.curriculum_id = curriculum_id


class JobQuery(BaseModel):
    """Date-bounded job lookup, optionally narrowed to industries."""
    posted_after: datetime
    industries: list[str] = []  # case-insensitive substring match, any of
    limit: int = 100


def job_matches_industry(job: JobRecord, industries: list[str]) -> bool:
    """True if any industry occurs in the job's category or required skills."""
    if not industries:
        return True
    haystacks = [job.category or ""]
    for skill in job.required_skills:
        haystacks.append(skill.category or "")
        haystacks.append(skill.name)
    haystacks = [h.lower() for h in haystacks if h]
    return any(ind.lower() in h for ind in industries if ind for h in haystacks)


def _aware(dt: datetime) -> datetime:
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


class GapDataSource(ABC):
    @abstractmethod
    async def get_curriculum(self, curriculum_id: str) -> CurriculumRecord | None:
        """Curriculum with its courses populated, or None."""

    @abstractmethod
    async def find_jobs(self, query: JobQuery) -> list[JobRecord]:
        """Jobs posted after query.posted_after, newest first, at most query.limit."""

    @abstractmethod
    async def list_curricula(self) -> list[CurriculumRecord]:
        """All curricula."""

    @abstractmethod
    async def list_jobs(self) -> list[JobRecord]:
        """All job postings."""

    @abstractmethod
    async def save_curriculum(self, curriculum: CurriculumRecord) -> None:
        """Insert or replace a curriculum (last writer wins)."""

    @abstractmethod
    async def save_job(self, job: JobRecord) -> None:
        """Insert or replace a job posting (last writer wins)."""

    @abstractmethod
    async def save_analysis(self, result: GapAnalysisResult) -> None:
        """Append an analysis snapshot; snapshots are never updated."""

    @abstractmethod
    async def list_analyses(self, curriculum_id: str) -> list[GapAnalysisResult]:
        """Snapshots for a curriculum, newest first."""


class InMemoryDataSource(GapDataSource):
    def __init__(
        self,
        curricula: list[CurriculumRecord] | None = None,
        jobs: list[JobRecord] | None = None,
    ) -> None:
        self._curricula: dict[str, CurriculumRecord] = {c.id: c for c in curricula or []}
        self._jobs: dict[str, JobRecord] = {j.id: j for j in jobs or []}
        self._analyses: list[GapAnalysisResult] = []

    async def get_curriculum(self, curriculum_id: str) -> CurriculumRecord | None:
        return self._curricula.get(curriculum_id)

    async def find_jobs(self, query: JobQuery) -> list[JobRecord]:
        cutoff = _aware(query.posted_after)
        matches = [
            job for job in self._jobs.values()
            if job.posted_date is not None
            and _aware(job.posted_date) >= cutoff
            and job_matches_industry(job, query.industries)
        ]
        matches.sort(key=lambda j: _aware(j.posted_date), reverse=True)
        return matches[:query.limit]

    async def list_curricula(self) -> list[CurriculumRecord]:
        return list(self._curricula.values())

    async def list_jobs(self) -> list[JobRecord]:
        return list(self._jobs.values())

    async def save_curriculum(self, curriculum: CurriculumRecord) -> None:
        self._curricula[curriculum.id] = curriculum

    async def save_job(self, job: JobRecord) -> None:
        self._jobs[job.id] = job

    async def save_analysis(self, result: GapAnalysisResult) -> None:
        self._analyses.append(result)
        logger.debug("Stored analysis for curriculum %s", result.curriculum_id)

    async def list_analyses(self, curriculum_id: str) -> list[GapAnalysisResult]:
        found = [a for a in self._analyses if a.curriculum_id == curriculum_id]
        return sorted(found, key=lambda a: _aware(a.analysis_date), reverse=True)
