"""Data contracts shared by the gap analysis pipeline stages."""

from models.schemas.gap_result import (
    AnalysisOutcome,
    CoveredSkill,
    EmergingSkill,
    GapAnalysis,
    GapAnalysisResult,
    GapEntry,
    GapMetrics,
    Recommendation,
)
from models.schemas.records import Course, CourseSkill, CurriculumRecord, JobRecord, JobSkill
from models.schemas.relevance import MLStats, RelevanceOptions, RelevantJobs, ScoredJob
from models.schemas.skills import AggregatedMarketSkill, CurriculumSkill, SkillComparison, SkillRecord

__all__ = [
    "AggregatedMarketSkill",
    "AnalysisOutcome",
    "Course",
    "CourseSkill",
    "CoveredSkill",
    "CurriculumRecord",
    "CurriculumSkill",
    "EmergingSkill",
    "GapAnalysis",
    "GapAnalysisResult",
    "GapEntry",
    "GapMetrics",
    "JobRecord",
    "JobSkill",
    "MLStats",
    "Recommendation",
    "RelevanceOptions",
    "RelevantJobs",
    "ScoredJob",
    "SkillComparison",
    "SkillRecord",
]
