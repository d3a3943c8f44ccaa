from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_embedding_provider, get_extractor
from config import settings
from models.requests import ExtractSkillsRequest, GapAnalysisRequest, MarketSkillsRequest
from models.responses import ExtractSkillsResponse, HealthResponse, MarketSkillsResponse
from models.schemas.gap_result import AnalysisOutcome
from services import skills_taxonomy
from services.embedding_provider import EmbeddingProvider
from services.pipeline.orchestrator import GapAnalysisOrchestrator
from services.repository import InMemoryDataSource
from services.skill_extractor import SkillsExtractor

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health", response_model=HealthResponse)
async def health(provider: EmbeddingProvider = Depends(get_embedding_provider)):
    return HealthResponse(
        status="ok",
        embedding_model=provider.model_name,
        embedding_version=provider.version,
        model_loaded=provider.is_loaded,
    )


@router.post("/skills/extract", response_model=ExtractSkillsResponse)
@limiter.limit(settings.rate_limit)
async def extract_skills(
    request: Request,
    body: ExtractSkillsRequest,
    extractor: SkillsExtractor = Depends(get_extractor),
):
    if not body.text.strip():
        raise HTTPException(status_code=400, detail="Text must not be empty")
    if body.industry:
        if body.industry not in skills_taxonomy.INDUSTRY_CATEGORIES:
            raise HTTPException(status_code=400, detail=f"Unknown industry tag: {body.industry}")
        extractor = SkillsExtractor.for_industry(body.industry)

    skills = extractor.extract_skills(body.text)
    return ExtractSkillsResponse(skills=skills, total=len(skills))


@router.post("/skills/market", response_model=MarketSkillsResponse)
@limiter.limit(settings.rate_limit)
async def market_skills(
    request: Request,
    body: MarketSkillsRequest,
    extractor: SkillsExtractor = Depends(get_extractor),
):
    skills = extractor.top_skills(body.jobs, limit=body.limit)
    by_category: dict[str, int] = {}
    for skill in skills:
        by_category[skill.category] = by_category.get(skill.category, 0) + 1
    return MarketSkillsResponse(skills=skills, job_count=len(body.jobs), by_category=by_category)


@router.post("/analysis/gap", response_model=AnalysisOutcome)
@limiter.limit(settings.rate_limit)
async def gap_analysis(
    request: Request,
    body: GapAnalysisRequest,
    provider: EmbeddingProvider = Depends(get_embedding_provider),
    extractor: SkillsExtractor = Depends(get_extractor),
):
    if not body.jobs:
        raise HTTPException(status_code=400, detail="At least one job posting is required")

    # Posted jobs without a date count as current
    now = datetime.now(timezone.utc)
    jobs = [j if j.posted_date else j.model_copy(update={"posted_date": now}) for j in body.jobs]

    source = InMemoryDataSource(curricula=[body.curriculum], jobs=jobs)
    orchestrator = GapAnalysisOrchestrator(source, provider, extractor=extractor)
    return await orchestrator.analyze_curriculum(body.curriculum.id, body.options)
