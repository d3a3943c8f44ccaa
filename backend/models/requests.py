from pydantic import BaseModel, Field

from models.schemas.records import CurriculumRecord, JobRecord
from models.schemas.relevance import RelevanceOptions


class ExtractSkillsRequest(BaseModel):
    text: str = Field(..., max_length=50000, description="Job description or other free text")
    industry: str | None = Field(None, description="Job-board category tag limiting the vocabulary")


class MarketSkillsRequest(BaseModel):
    jobs: list[JobRecord] = Field(..., max_length=1000)
    limit: int = Field(20, ge=1, le=200)


class GapAnalysisRequest(BaseModel):
    curriculum: CurriculumRecord
    jobs: list[JobRecord] = Field(..., max_length=1000)
    options: RelevanceOptions = RelevanceOptions()
