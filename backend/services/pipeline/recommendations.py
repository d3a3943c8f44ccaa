"""Recommendation Generator: template rules over a gap analysis.

Rules run in a fixed order and every applicable rule fires:
    1. any gaps                      -> add_skill (high), top gap skills
    2. any high-priority emerging    -> monitor_trends (medium)
    3. match rate < 50 / < 70        -> major_revision / moderate_updates (high)
"""

from config import settings
from models.schemas.gap_result import GapAnalysis, GapAnalysisResult, Recommendation

MAJOR_REVISION_BELOW = 50.0
MODERATE_UPDATES_BELOW = 70.0


def generate_recommendations(
    analysis: GapAnalysis,
    top_gaps: int | None = None,
    top_emerging: int | None = None,
) -> list[Recommendation]:
    if top_gaps is None:
        top_gaps = settings.top_gap_recommendation_skills
    if top_emerging is None:
        top_emerging = settings.top_emerging_recommendation_skills
    recommendations: list[Recommendation] = []

    gaps = sorted(analysis.critical_gaps, key=lambda g: g.market_demand, reverse=True)[:top_gaps]
    if gaps:
        listed = ", ".join(f"{g.skill_name} ({g.market_demand:.1f}%)" for g in gaps)
        recommendations.append(Recommendation(
            type="add_skill",
            description=f"Add in-demand skills to the curriculum: {listed} of job postings",
            priority="high",
            skills=[g.skill_name for g in gaps],
        ))

    high_emerging = [e for e in analysis.emerging_skills if e.priority == "high"][:top_emerging]
    if high_emerging:
        recommendations.append(Recommendation(
            type="monitor_trends",
            description=f"Monitor emerging skills: {', '.join(e.skill_name for e in high_emerging)}",
            priority="medium",
            skills=[e.skill_name for e in high_emerging],
        ))

    rate = analysis.overall_match_rate
    if rate < MAJOR_REVISION_BELOW:
        recommendations.append(Recommendation(
            type="major_revision",
            description=(
                f"Consider major curriculum revision - only {rate:.1f}% "
                "alignment with market demands"
            ),
            priority="high",
        ))
    elif rate < MODERATE_UPDATES_BELOW:
        recommendations.append(Recommendation(
            type="moderate_updates",
            description="Curriculum needs moderate updates to improve market alignment",
            priority="high",
        ))

    return recommendations


def match_rate_category(rate: float) -> str:
    if rate >= 80:
        return "excellent"
    if rate >= 70:
        return "good"
    if rate >= 50:
        return "fair"
    return "needs-improvement"


def summarize(result: GapAnalysisResult) -> dict:
    """Compact overview of a stored snapshot, e.g. for comparison tables."""
    return {
        "curriculum_id": result.curriculum_id,
        "analysis_date": result.analysis_date,
        "match_rate": result.metrics.overall_match_rate,
        "match_rate_category": match_rate_category(result.metrics.overall_match_rate),
        "critical_gaps_count": len(result.metrics.critical_gaps),
        "emerging_skills_count": len(result.metrics.emerging_skills),
        "job_sample_size": result.job_sample_size,
        "ml_used": bool(result.ml_stats and result.ml_stats.ml_filtering_used),
    }
