"""Gap Calculator: cross-reference market demand with curriculum coverage.

Every market skill lands in exactly one of well_covered_skills or
critical_gaps. Uncovered skills with demand above EMERGING_DEMAND are also
listed in emerging_skills, so a skill can be both a gap and emerging.
"""

import logging

from models.schemas.gap_result import CoveredSkill, EmergingSkill, GapAnalysis, GapEntry
from models.schemas.records import CurriculumRecord
from models.schemas.skills import AggregatedMarketSkill, CurriculumSkill
from services import skills_taxonomy

logger = logging.getLogger(__name__)

EMERGING_DEMAND = 20.0

# (lower bound inclusive, severity), checked top-down
SEVERITY_BANDS: tuple[tuple[float, str], ...] = (
    (50.0, "critical-gap"),
    (30.0, "moderate-gap"),
    (15.0, "minor-gap"),
)
SEVERITY_RANK = {"low-gap": 0, "minor-gap": 1, "moderate-gap": 2, "critical-gap": 3}

_PROFICIENCY_RANK = {"beginner": 1, "intermediate": 2, "advanced": 3}


def gap_severity(demand_rate: float) -> str:
    for lower, severity in SEVERITY_BANDS:
        if demand_rate >= lower:
            return severity
    return "low-gap"


def emerging_priority(demand_rate: float) -> str:
    if demand_rate >= 40:
        return "high"
    if demand_rate >= 20:
        return "medium"
    return "low"


def extract_curriculum_skills(curriculum: CurriculumRecord) -> list[CurriculumSkill]:
    """Merge course skills by canonical name, keeping the highest proficiency.

    frequency counts the courses that list the skill.
    """
    merged: dict[str, CurriculumSkill] = {}
    for course in curriculum.courses:
        for skill in course.skills:
            key = skills_taxonomy.normalize(skill.name)
            if not key:
                continue
            existing = merged.get(key)
            if existing is None:
                merged[key] = CurriculumSkill(
                    name=key,
                    category=skill.category,
                    proficiency_level=skill.proficiency_level,
                    frequency=1,
                )
                continue
            existing.frequency += 1
            if _PROFICIENCY_RANK.get(skill.proficiency_level, 0) > _PROFICIENCY_RANK.get(
                existing.proficiency_level, 0
            ):
                existing.proficiency_level = skill.proficiency_level
    return list(merged.values())


def calculate_gaps(
    curriculum_skills: list[CurriculumSkill],
    market_skills: list[AggregatedMarketSkill],
    course_count: int | None = None,
) -> GapAnalysis:
    """Classify each market skill as covered, a gap, and/or emerging.

    overall_match_rate is 0.0 for an empty market; callers treat that as
    "nothing to analyze", not as a 0% match.
    """
    taught = {s.name.lower(): s for s in curriculum_skills}

    well_covered: list[CoveredSkill] = []
    gaps: list[GapEntry] = []
    emerging: list[EmergingSkill] = []

    for skill in market_skills:
        taught_skill = taught.get(skill.name.lower())
        if taught_skill is not None:
            coverage = (
                round(min(taught_skill.frequency, course_count) / course_count * 100, 2)
                if course_count else 100.0
            )
            well_covered.append(CoveredSkill(
                skill_name=skill.name,
                category=skill.category,
                market_demand=skill.demand_rate,
                curriculum_coverage=coverage,
            ))
            continue

        gaps.append(GapEntry(
            skill_name=skill.name,
            category=skill.category,
            market_demand=skill.demand_rate,
            curriculum_coverage=0.0,
            gap_severity=gap_severity(skill.demand_rate),
        ))
        if skill.demand_rate > EMERGING_DEMAND:
            emerging.append(EmergingSkill(
                skill_name=skill.name,
                category=skill.category,
                demand_rate=skill.demand_rate,
                priority=emerging_priority(skill.demand_rate),
            ))

    match_rate = len(well_covered) / len(market_skills) * 100 if market_skills else 0.0
    logger.debug(
        "Gap calculation: %d covered, %d gaps, %d emerging of %d market skills",
        len(well_covered), len(gaps), len(emerging), len(market_skills),
    )

    return GapAnalysis(
        overall_match_rate=round(match_rate, 2),
        critical_gaps=sorted(gaps, key=lambda g: g.market_demand, reverse=True),
        emerging_skills=sorted(emerging, key=lambda e: e.demand_rate, reverse=True),
        well_covered_skills=sorted(well_covered, key=lambda c: c.market_demand, reverse=True),
    )
