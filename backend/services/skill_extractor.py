"""Taxonomy-based skill extraction and market demand aggregation.

Scans free text for every taxonomy term (literal, word-boundary,
case-insensitive), decides whether each skill is required or preferred
from the words around its first mention, and aggregates demand across a
batch of job postings.
"""

import logging
import re
from collections.abc import Iterable

from config import settings
from models.schemas.records import JobRecord
from models.schemas.skills import AggregatedMarketSkill, Importance, SkillComparison, SkillRecord
from services import skills_taxonomy

logger = logging.getLogger(__name__)

# Characters scanned on each side of a skill mention for importance cues
CONTEXT_WINDOW = 50

REQUIRED_CUES: tuple[str, ...] = (
    "required", "must have", "essential", "mandatory", "necessary",
    "need", "needs", "require", "requires", "requirement",
    "minimum", "qualification", "critical",
)

# Checked before REQUIRED_CUES: rarer and more specific
PREFERRED_CUES: tuple[str, ...] = (
    "preferred", "nice to have", "plus", "bonus", "advantage",
    "desirable", "beneficial", "ideal", "would be nice",
)

# A sentence ends at . ! ? followed by whitespace/end. "node.js", "asp.net",
# "e.g." and "i.e." do not end a sentence.
_SENTENCE_END = r"(?<!\be\.g)(?<!\bi\.e)[.!?](?=\s|$)"

# Looking back, a single newline is crossed so a heading ("Nice to have:")
# reaches the bullets under it; a blank line starts a new section.
_BACKWARD_BREAK = re.compile(rf"{_SENTENCE_END}|\n[ \t]*\n", re.IGNORECASE)
# Looking ahead, any newline ends the mention's line.
_FORWARD_BREAK = re.compile(rf"{_SENTENCE_END}|\n", re.IGNORECASE)


def _term_pattern(term: str) -> re.Pattern:
    # Lookarounds instead of \b so terms ending in symbols ("c++", "c#") still
    # match, and "java" does not match inside "javascript".
    return re.compile(rf"(?<![a-z0-9]){re.escape(term)}(?![a-z0-9])", re.IGNORECASE)


def _context(text: str, start: int, end: int, width: int = CONTEXT_WINDOW) -> str:
    """Text within ``width`` chars of a mention, clipped to its sentence or section."""
    lo = max(0, start - width)
    hi = min(len(text), end + width)
    for m in _BACKWARD_BREAK.finditer(text, lo, start):
        lo = m.end()
    m = _FORWARD_BREAK.search(text, end, hi)
    if m:
        hi = m.end()
    return text[lo:hi].lower()


def determine_importance(text: str, start: int, end: int) -> Importance:
    """Classify the mention at text[start:end] as required or preferred."""
    context = _context(text, start, end)
    if any(cue in context for cue in PREFERRED_CUES):
        return "preferred"
    if any(cue in context for cue in REQUIRED_CUES):
        return "required"
    return "required"  # no cue


class SkillsExtractor:
    """Extracts taxonomy skills from text. Holds compiled patterns only."""

    def __init__(
        self,
        terms: Iterable[str] | None = None,
        min_description_length: int | None = None,
    ) -> None:
        vocabulary = list(terms) if terms is not None else skills_taxonomy.all_skills()
        self._patterns = [(term, _term_pattern(term)) for term in vocabulary]
        self.min_description_length = (
            settings.min_description_length
            if min_description_length is None
            else min_description_length
        )

    @classmethod
    def for_industry(cls, industry_tag: str) -> "SkillsExtractor":
        """Extractor limited to the skill categories of one job-board tag."""
        return cls(terms=skills_taxonomy.skills_for_industry(industry_tag))

    @property
    def vocabulary_size(self) -> int:
        return len(self._patterns)

    def extract_skills(self, text: str, fallback_category: str | None = None) -> list[SkillRecord]:
        """Find every taxonomy skill mentioned in ``text``.

        Terms that normalize to the same canonical skill (aliases) are merged:
        frequencies add up and any required mention makes the skill required.
        """
        if not isinstance(text, str) or not text:
            return []

        found: dict[str, SkillRecord] = {}
        for term, pattern in self._patterns:
            matches = list(pattern.finditer(text))
            if not matches:
                continue

            name = skills_taxonomy.normalize(term)
            category = skills_taxonomy.category_of(name)
            if category == "other" and fallback_category:
                category = fallback_category
            first = matches[0]
            importance = determine_importance(text, first.start(), first.end())

            existing = found.get(name)
            if existing is not None:
                existing.frequency += len(matches)
                if importance == "required":
                    existing.importance = "required"
            else:
                found[name] = SkillRecord(
                    name=name,
                    category=category,
                    frequency=len(matches),
                    importance=importance,
                )

        return list(found.values())

    def _job_skills(self, job: JobRecord) -> list[SkillRecord] | None:
        """Skills contributed by one job, or None if it has no skill source.

        Pre-extracted skills win over the description; their declared
        importance is kept as-is.
        """
        if job.required_skills:
            merged: dict[str, SkillRecord] = {}
            for entry in job.required_skills:
                name = skills_taxonomy.normalize(entry.name)
                if not name:
                    continue
                existing = merged.get(name)
                if existing is not None:
                    existing.frequency += 1
                    if entry.importance == "required":
                        existing.importance = "required"
                    continue
                merged[name] = SkillRecord(
                    name=name,
                    category=entry.category or skills_taxonomy.category_of(name),
                    frequency=1,
                    importance=entry.importance,
                )
            return list(merged.values())

        if len(job.description or "") > self.min_description_length:
            return self.extract_skills(job.description)

        return None

    def extract_from_multiple_jobs(self, jobs: Iterable[JobRecord]) -> list[AggregatedMarketSkill]:
        """Aggregate skill demand across jobs, sorted by demand rate (desc).

        The demand-rate denominator counts skill-bearing jobs only: jobs
        without pre-extracted skills and with a short or missing description
        are left out of it.
        """
        aggregated: dict[str, AggregatedMarketSkill] = {}
        skill_bearing_jobs = 0

        for job in jobs:
            skills = self._job_skills(job)
            if skills is None:
                continue
            skill_bearing_jobs += 1

            for skill in skills:
                entry = aggregated.get(skill.name)
                if entry is None:
                    entry = AggregatedMarketSkill(name=skill.name, category=skill.category)
                    aggregated[skill.name] = entry
                entry.job_count += 1
                entry.total_mentions += skill.frequency
                if skill.importance == "required":
                    entry.required_count += 1
                else:
                    entry.preferred_count += 1

        if skill_bearing_jobs == 0:
            return []

        for entry in aggregated.values():
            entry.demand_rate = round(entry.job_count / skill_bearing_jobs * 100, 2)

        logger.debug(
            "Aggregated %d skills from %d skill-bearing jobs",
            len(aggregated), skill_bearing_jobs,
        )
        return sorted(aggregated.values(), key=lambda s: s.demand_rate, reverse=True)

    def top_skills(self, jobs: Iterable[JobRecord], limit: int = 20) -> list[AggregatedMarketSkill]:
        return self.extract_from_multiple_jobs(jobs)[:limit]

    def skills_by_category(self, jobs: Iterable[JobRecord]) -> dict[str, list[AggregatedMarketSkill]]:
        grouped: dict[str, list[AggregatedMarketSkill]] = {}
        for skill in self.extract_from_multiple_jobs(jobs):
            grouped.setdefault(skill.category, []).append(skill)
        return grouped

    def compare_skills(self, job_description: str, curriculum_skills: Iterable[str]) -> SkillComparison:
        """Split one job's skills into those the curriculum teaches and the rest."""
        job_skills = self.extract_skills(job_description)
        taught = {skills_taxonomy.normalize(s) for s in curriculum_skills}

        matched = [s for s in job_skills if s.name in taught]
        missing = [s for s in job_skills if s.name not in taught]
        match_rate = len(matched) / len(job_skills) * 100 if job_skills else 0.0

        return SkillComparison(
            match_rate=round(match_rate, 2),
            total_job_skills=len(job_skills),
            matched_skills=matched,
            missing_skills=missing,
        )
