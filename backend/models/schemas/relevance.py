"""Job relevance filter inputs and outputs."""

from pydantic import BaseModel, Field

from models.schemas.records import JobRecord


class RelevanceOptions(BaseModel):
    """Job selection options. None means "use the configured default"."""
    limit: int | None = Field(default=None, ge=1)
    days_back: int | None = Field(default=None, ge=0)
    target_industry: str | None = None
    similarity_threshold: float | None = Field(default=None, ge=-1.0, le=1.0)
    fetch_multiplier: int | None = Field(default=None, ge=1)


class ScoredJob(BaseModel):
    """A selected job; similarity_score is None for unscored supplements."""
    job: JobRecord
    similarity_score: float | None = None


class MLStats(BaseModel):
    """How the semantic filter behaved for one run."""
    ml_filtering_used: bool = True
    similarity_threshold: float = 0.0  # requested
    effective_threshold: float = 0.0  # applied after dynamic adjustment
    threshold_adjusted: bool = False
    initial_job_count: int = 0
    embedded_candidate_count: int = 0
    filtered_job_count: int = 0  # semantically matched
    supplemented_job_count: int = 0  # appended without scoring
    skipped_candidate_count: int = 0
    avg_similarity_score: float = 0.0


class RelevantJobs(BaseModel):
    jobs: list[ScoredJob] = []
    stats: MLStats | None = None  # None when the category-only fallback ran
