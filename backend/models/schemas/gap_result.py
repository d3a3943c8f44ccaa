"""Gap analysis outputs: calculator result, recommendations, snapshot."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

from models.schemas.relevance import MLStats
from models.schemas.skills import AggregatedMarketSkill

GapSeverity = Literal["low-gap", "minor-gap", "moderate-gap", "critical-gap"]
Priority = Literal["low", "medium", "high"]
FailureReason = Literal[
    "curriculum_not_found",
    "insufficient_curriculum_text",
    "embedding_failed",
    "no_relevant_jobs",
    "no_market_skills",
    "analysis_error",
]


class GapEntry(BaseModel):
    """A market skill the curriculum does not cover."""
    skill_name: str
    category: str = "other"
    market_demand: float = 0.0
    curriculum_coverage: float = 0.0
    gap_severity: GapSeverity = "low-gap"


class CoveredSkill(BaseModel):
    skill_name: str
    category: str = "other"
    market_demand: float = 0.0
    curriculum_coverage: float = 0.0  # % of courses teaching the skill


class EmergingSkill(BaseModel):
    """A high-demand uncovered skill flagged for trend monitoring."""
    skill_name: str
    category: str = "other"
    demand_rate: float = 0.0
    priority: Priority = "medium"


class GapAnalysis(BaseModel):
    """Full calculator output; lists sorted by demand, not truncated."""
    overall_match_rate: float = 0.0
    critical_gaps: list[GapEntry] = []
    emerging_skills: list[EmergingSkill] = []
    well_covered_skills: list[CoveredSkill] = []


class Recommendation(BaseModel):
    type: str  # add_skill, monitor_trends, major_revision, moderate_updates
    description: str
    priority: Priority = "medium"
    skills: list[str] = []


class GapMetrics(BaseModel):
    model_config = {"frozen": True}

    overall_match_rate: float = 0.0
    critical_gaps: list[GapEntry] = []
    emerging_skills: list[EmergingSkill] = []
    well_covered_skills: list[CoveredSkill] = []


class GapAnalysisResult(BaseModel):
    """Immutable snapshot of one analysis run; a new run makes a new snapshot."""
    model_config = {"frozen": True}

    curriculum_id: str
    analysis_date: datetime
    target_industry: str = "General"
    job_sample_size: int = 0
    metrics: GapMetrics = GapMetrics()
    market_skills: list[AggregatedMarketSkill] = []
    recommendations: list[Recommendation] = []
    ml_stats: MLStats | None = None


class AnalysisOutcome(BaseModel):
    success: bool
    reason: FailureReason | None = None
    message: str = ""
    data: GapAnalysisResult | None = None
