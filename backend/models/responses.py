from pydantic import BaseModel

from models.schemas.skills import AggregatedMarketSkill, SkillRecord


class HealthResponse(BaseModel):
    status: str = "ok"
    embedding_model: str = ""
    embedding_version: str = ""
    model_loaded: bool = False


class ExtractSkillsResponse(BaseModel):
    skills: list[SkillRecord] = []
    total: int = 0


class MarketSkillsResponse(BaseModel):
    skills: list[AggregatedMarketSkill] = []
    job_count: int = 0
    by_category: dict[str, int] = {}
