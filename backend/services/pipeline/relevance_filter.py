"""Job Relevance Filter: pick the job postings a curriculum is judged against.

Flow:
    date/industry-bounded candidate fetch (limit * fetch_multiplier)
      ├─ SemanticStrategy  rank embedded candidates by cosine similarity to the
      │                    curriculum, apply the dynamic threshold, top up with
      │                    unscored non-embedded candidates
      └─ CategoryStrategy  date/industry filter only, relaxed to date-only when
                           the industry filter finds nothing (stats = None)

Strategies are tried in order; a strategy that cannot run or returns no jobs
hands over to the next one.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone

from pydantic import BaseModel

from config import settings
from models.schemas.records import CurriculumRecord, JobRecord
from models.schemas.relevance import MLStats, RelevanceOptions, RelevantJobs, ScoredJob
from services.embedding_maintenance import embed_records, has_usable_embedding
from services.embedding_provider import EmbeddingProvider
from services.embedding_text import job_text
from services.repository import GapDataSource, JobQuery
from services.similarity import rank_by_similarity, select_effective_threshold

logger = logging.getLogger(__name__)


class RelevanceContext(BaseModel):
    """Everything a strategy needs for one selection run."""
    curriculum: CurriculumRecord
    curriculum_embedding: list[float] | None
    embedding_version: str | None
    limit: int
    posted_after: datetime
    industries: list[str]
    similarity_threshold: float
    candidates: list[JobRecord] = []


class RelevanceStrategy(ABC):
    name: str = ""

    @abstractmethod
    def can_attempt(self, ctx: RelevanceContext) -> bool:
        """Whether this strategy has what it needs to run."""

    @abstractmethod
    async def attempt(self, ctx: RelevanceContext) -> RelevantJobs:
        """Select jobs; an empty result hands over to the next strategy."""


class SemanticStrategy(RelevanceStrategy):
    name = "semantic"

    def __init__(self, provider: EmbeddingProvider | None = None, embed_missing: bool = False) -> None:
        self.provider = provider
        self.embed_missing = embed_missing

    def can_attempt(self, ctx: RelevanceContext) -> bool:
        return bool(ctx.curriculum_embedding) and bool(ctx.candidates)

    def _is_embedded(self, job: JobRecord, ctx: RelevanceContext) -> bool:
        return has_usable_embedding(job, version=ctx.embedding_version)

    async def attempt(self, ctx: RelevanceContext) -> RelevantJobs:
        query = ctx.curriculum_embedding
        skipped: set[str] = set()

        if self.embed_missing and self.provider is not None:
            missing = [j for j in ctx.candidates if not self._is_embedded(j, ctx)]
            if missing:
                await embed_records(missing, self.provider, job_text)
                skipped.update(j.id for j in missing if not self._is_embedded(j, ctx))

        embedded: list[JobRecord] = []
        unembedded: list[JobRecord] = []
        for job in ctx.candidates:
            if job.id in skipped:
                continue
            if not self._is_embedded(job, ctx):
                unembedded.append(job)
            elif len(job.embedding) != len(query):
                logger.warning(
                    "Skipping job %s: embedding has %d dims, curriculum has %d",
                    job.id, len(job.embedding), len(query),
                )
                skipped.add(job.id)
            else:
                embedded.append(job)

        if not embedded:
            logger.info("No candidate jobs carry a usable embedding")
            return RelevantJobs()

        ranked = rank_by_similarity(query, embedded)
        decision = select_effective_threshold([s for _, s in ranked], ctx.similarity_threshold)
        passed = [(job, score) for job, score in ranked if score >= decision.effective][:ctx.limit]

        shortfall = ctx.limit - len(passed)
        supplements = unembedded[:shortfall] if shortfall > 0 else []
        if supplements:
            logger.info("Supplementing %d unscored jobs without embeddings", len(supplements))

        jobs = [ScoredJob(job=job, similarity_score=round(score, 4)) for job, score in passed]
        jobs.extend(ScoredJob(job=job) for job in supplements)

        avg = sum(s for _, s in passed) / len(passed) if passed else 0.0
        stats = MLStats(
            ml_filtering_used=True,
            similarity_threshold=decision.requested,
            effective_threshold=round(decision.effective, 4),
            threshold_adjusted=decision.adjusted,
            initial_job_count=len(ctx.candidates),
            embedded_candidate_count=len(embedded),
            filtered_job_count=len(passed),
            supplemented_job_count=len(supplements),
            skipped_candidate_count=len(skipped),
            avg_similarity_score=round(avg, 4),
        )
        logger.info(
            "Semantic filter: %d/%d embedded jobs passed (threshold %.4f), %d supplemented",
            len(passed), len(embedded), decision.effective, len(supplements),
        )
        return RelevantJobs(jobs=jobs, stats=stats)


class CategoryStrategy(RelevanceStrategy):
    name = "category"

    def __init__(self, source: GapDataSource) -> None:
        self.source = source

    def can_attempt(self, ctx: RelevanceContext) -> bool:
        return True

    async def attempt(self, ctx: RelevanceContext) -> RelevantJobs:
        jobs = ctx.candidates[:ctx.limit]
        if not jobs and ctx.industries:
            logger.info("No jobs match industries %s; relaxing to date filter only", ctx.industries)
            jobs = await self.source.find_jobs(JobQuery(posted_after=ctx.posted_after, limit=ctx.limit))
        return RelevantJobs(jobs=[ScoredJob(job=j) for j in jobs], stats=None)


class JobRelevanceFilter:
    def __init__(
        self,
        source: GapDataSource,
        provider: EmbeddingProvider | None = None,
        strategies: list[RelevanceStrategy] | None = None,
        embed_missing: bool | None = None,
    ) -> None:
        self.source = source
        if embed_missing is None:
            embed_missing = settings.embed_missing_jobs
        self.strategies = strategies or [
            SemanticStrategy(provider, embed_missing=embed_missing),
            CategoryStrategy(source),
        ]

    async def get_relevant_jobs(
        self,
        curriculum: CurriculumRecord,
        curriculum_embedding: list[float] | None,
        options: RelevanceOptions | None = None,
    ) -> RelevantJobs:
        """Select at most ``limit`` jobs relevant to the curriculum."""
        options = options or RelevanceOptions()
        limit = options.limit if options.limit is not None else settings.default_job_limit
        days_back = options.days_back if options.days_back is not None else settings.default_days_back
        threshold = (
            options.similarity_threshold
            if options.similarity_threshold is not None
            else settings.similarity_threshold
        )
        multiplier = (
            options.fetch_multiplier
            if options.fetch_multiplier is not None
            else settings.fetch_multiplier
        )
        industries = (
            [options.target_industry] if options.target_industry
            else [i for i in curriculum.target_industries if i]
        )

        posted_after = datetime.now(timezone.utc) - timedelta(days=days_back)
        candidates = await self.source.find_jobs(
            JobQuery(posted_after=posted_after, industries=industries, limit=limit * multiplier)
        )
        logger.info("Fetched %d candidate jobs for %s", len(candidates), curriculum.program_name)

        ctx = RelevanceContext(
            curriculum=curriculum,
            curriculum_embedding=curriculum_embedding,
            embedding_version=curriculum.embedding_version,
            limit=limit,
            posted_after=posted_after,
            industries=industries,
            similarity_threshold=threshold,
            candidates=candidates,
        )

        for strategy in self.strategies:
            if not strategy.can_attempt(ctx):
                logger.debug("Strategy %s cannot run, skipping", strategy.name)
                continue
            result = await strategy.attempt(ctx)
            if result.jobs:
                result.jobs = result.jobs[:limit]
                return result
            logger.info("Strategy %s selected no jobs, falling back", strategy.name)

        return RelevantJobs()
