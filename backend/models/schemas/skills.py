"""Skill records produced by extraction and aggregated across job batches."""

from typing import Literal

from pydantic import BaseModel, Field

Importance = Literal["required", "preferred"]


class SkillRecord(BaseModel):
    """A taxonomy skill found in one piece of text."""
    name: str  # canonical, lower-cased
    category: str = "other"
    frequency: int = Field(default=1, ge=1)
    importance: Importance = "required"


class AggregatedMarketSkill(BaseModel):
    """Demand statistics for one skill across a batch of job postings.

    demand_rate is the share of skill-bearing jobs mentioning the skill,
    as a percentage rounded to 2 decimals.
    """
    name: str
    category: str = "other"
    job_count: int = 0
    total_mentions: int = 0
    required_count: int = 0
    preferred_count: int = 0
    demand_rate: float = Field(default=0.0, ge=0.0, le=100.0)


class CurriculumSkill(BaseModel):
    """A skill taught by a curriculum, merged across its courses."""
    name: str
    category: str = "other"
    proficiency_level: str = ""  # beginner, intermediate, advanced
    frequency: int = 1  # number of courses listing the skill


class SkillComparison(BaseModel):
    """One job description's skills checked against a curriculum skill list."""
    match_rate: float = 0.0
    total_job_skills: int = 0
    matched_skills: list[SkillRecord] = []
    missing_skills: list[SkillRecord] = []
