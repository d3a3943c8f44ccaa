"""Gap analysis orchestrator: one curriculum against the current job market.

Flow:
    curriculum_id
      ├─ LoadCurriculum          source.get_curriculum        → curriculum_not_found
      ├─ EnsureEmbedding         provider.embed (if stale)    → insufficient_curriculum_text
      │                          source.save_curriculum         embedding_failed
      ├─ SelectRelevantJobs      JobRelevanceFilter           → no_relevant_jobs
      ├─ ExtractSkills           SkillsExtractor              → no_market_skills
      ├─ CalculateGaps           gap_calculator
      ├─ GenerateRecommendations recommendations
      └─ AssembleResult          GapAnalysisResult → source.save_analysis

A failed run returns AnalysisOutcome(success=False) and stores no snapshot.
"""

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from config import settings
from models.schemas.gap_result import (
    AnalysisOutcome,
    GapAnalysisResult,
    GapMetrics,
)
from models.schemas.records import CurriculumRecord
from models.schemas.relevance import RelevanceOptions
from services.embedding_maintenance import attach_embedding, has_usable_embedding
from services.embedding_provider import EmbeddingGenerationError, EmbeddingProvider
from services.embedding_text import curriculum_text
from services.pipeline.gap_calculator import calculate_gaps, extract_curriculum_skills
from services.pipeline.recommendations import generate_recommendations
from services.pipeline.relevance_filter import JobRelevanceFilter
from services.repository import CurriculumNotFound, GapDataSource
from services.skill_extractor import SkillsExtractor

logger = logging.getLogger(__name__)


class AnalysisFailed(Exception):
    """A terminal pipeline state; carries the failure code."""

    def __init__(self, reason: str, message: str) -> None:
        super().__init__(message)
        self.reason = reason
        self.message = message


class GapAnalysisOrchestrator:
    def __init__(
        self,
        source: GapDataSource,
        provider: EmbeddingProvider,
        extractor: SkillsExtractor | None = None,
        relevance_filter: JobRelevanceFilter | None = None,
        text_for: Callable[[CurriculumRecord], str] = curriculum_text,
    ) -> None:
        self.source = source
        self.provider = provider
        self.extractor = extractor or SkillsExtractor()
        self.relevance_filter = relevance_filter or JobRelevanceFilter(source, provider)
        self.text_for = text_for

    async def analyze_curriculum(
        self,
        curriculum_id: str,
        options: RelevanceOptions | None = None,
    ) -> AnalysisOutcome:
        options = options or RelevanceOptions()
        try:
            program_name, result = await self._run(curriculum_id, options)
        except AnalysisFailed as e:
            logger.warning("Gap analysis for %s failed (%s): %s", curriculum_id, e.reason, e.message)
            return AnalysisOutcome(success=False, reason=e.reason, message=e.message)
        except Exception as e:
            logger.exception("Gap analysis for %s crashed", curriculum_id)
            return AnalysisOutcome(
                success=False,
                reason="analysis_error",
                message=f"Gap analysis failed: {e}",
            )

        return AnalysisOutcome(
            success=True,
            message=f"Analysis completed for {program_name}",
            data=result,
        )

    async def _load(self, curriculum_id: str) -> CurriculumRecord:
        curriculum = await self.source.get_curriculum(curriculum_id)
        if curriculum is None:
            raise AnalysisFailed("curriculum_not_found", str(CurriculumNotFound(curriculum_id)))
        return curriculum

    async def _ensure_embedding(self, curriculum: CurriculumRecord) -> list[float]:
        """Curriculum embedding for the provider's model, generated if stale."""
        if has_usable_embedding(curriculum, self.provider.version, self.provider.dimensions):
            return curriculum.embedding

        text = self.text_for(curriculum)
        if len(text.strip()) < settings.min_embedding_text_length:
            raise AnalysisFailed(
                "insufficient_curriculum_text",
                "Curriculum has insufficient content for semantic analysis",
            )

        logger.info("Generating embedding for curriculum %s", curriculum.id)
        try:
            vector = await self.provider.embed(text)
        except (EmbeddingGenerationError, ValueError) as e:
            curriculum.embedding_error = str(e)
            await self.source.save_curriculum(curriculum)
            raise AnalysisFailed("embedding_failed", f"Failed to generate curriculum embedding: {e}") from e

        attach_embedding(curriculum, vector, self.provider.version)
        await self.source.save_curriculum(curriculum)
        return curriculum.embedding

    async def _run(
        self,
        curriculum_id: str,
        options: RelevanceOptions,
    ) -> tuple[str, GapAnalysisResult]:
        curriculum = await self._load(curriculum_id)
        embedding = await self._ensure_embedding(curriculum)

        relevant = await self.relevance_filter.get_relevant_jobs(curriculum, embedding, options)
        if not relevant.jobs:
            raise AnalysisFailed("no_relevant_jobs", "No relevant job postings found for analysis")
        jobs = [scored.job for scored in relevant.jobs]

        market_skills = self.extractor.extract_from_multiple_jobs(jobs)
        if not market_skills:
            raise AnalysisFailed(
                "no_market_skills",
                "Could not extract skills from job postings",
            )

        curriculum_skills = extract_curriculum_skills(curriculum)
        analysis = calculate_gaps(curriculum_skills, market_skills, course_count=len(curriculum.courses))
        recommendations = generate_recommendations(analysis)

        target_industry = (
            options.target_industry
            or next((i for i in curriculum.target_industries if i), None)
            or "General"
        )
        result = GapAnalysisResult(
            curriculum_id=curriculum.id,
            analysis_date=datetime.now(timezone.utc),
            target_industry=target_industry,
            job_sample_size=len(jobs),
            metrics=GapMetrics(
                overall_match_rate=analysis.overall_match_rate,
                critical_gaps=analysis.critical_gaps[:settings.top_critical_gaps],
                emerging_skills=analysis.emerging_skills[:settings.top_emerging_skills],
                well_covered_skills=analysis.well_covered_skills[:settings.top_well_covered],
            ),
            market_skills=market_skills[:settings.top_market_skills],
            recommendations=recommendations,
            ml_stats=relevant.stats,
        )
        await self.source.save_analysis(result)

        logger.info(
            "Gap analysis for %s: match rate %.2f%% over %d jobs (%d gaps)",
            curriculum.program_name, analysis.overall_match_rate,
            len(jobs), len(analysis.critical_gaps),
        )
        return curriculum.program_name, result

    async def compare_curricula(self, curriculum_ids: list[str]) -> dict[str, GapAnalysisResult | None]:
        """Latest stored snapshot per curriculum (None if never analyzed)."""
        latest: dict[str, GapAnalysisResult | None] = {}
        for curriculum_id in curriculum_ids:
            snapshots = await self.source.list_analyses(curriculum_id)
            latest[curriculum_id] = snapshots[0] if snapshots else None
        return latest
