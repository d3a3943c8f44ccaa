"""Shared test configuration, pytest markers and fakes."""

from datetime import datetime, timedelta, timezone

import pytest

from models.schemas.records import Course, CourseSkill, CurriculumRecord, JobRecord, JobSkill
from services.embedding_provider import EmbeddingGenerationError, EmbeddingProvider


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: loads the real sentence-transformers model (slow)"
    )


class FakeEmbeddingProvider(EmbeddingProvider):
    """Deterministic provider: vectors looked up by substring of the text."""

    model_name = "fake-model"

    def __init__(self, vectors=None, default=None, fail_on=(), version="v1", dimensions=3):
        self.vectors = vectors or {}
        self.default = default if default is not None else [1.0] + [0.0] * (dimensions - 1)
        self.fail_on = fail_on
        self.version = version
        self.dimensions = dimensions
        self.calls: list[str] = []

    async def embed(self, text):
        self.calls.append(text)
        if self.fail_on == "*" or any(marker in text for marker in self.fail_on):
            raise EmbeddingGenerationError("fake provider failure")
        for marker, vector in self.vectors.items():
            if marker in text:
                return list(vector)
        return list(self.default)

    async def embed_batch(self, texts):
        return [await self.embed(t) for t in texts]


@pytest.fixture
def fake_provider():
    return FakeEmbeddingProvider


@pytest.fixture
def make_job():
    def _make(job_id, description="", title="Developer", days_ago=1, embedding=None,
              version="v1", category="it-jobs", skills=None):
        return JobRecord(
            id=job_id,
            title=title,
            description=description,
            category=category,
            posted_date=datetime.now(timezone.utc) - timedelta(days=days_ago),
            embedding=embedding,
            embedding_version=version if embedding is not None else None,
            required_skills=[
                s if isinstance(s, JobSkill) else JobSkill(name=s) for s in skills or []
            ],
        )
    return _make


@pytest.fixture
def make_curriculum():
    def _make(curriculum_id="cs-bsc", program_name="Computer Science", skills=("python", "html", "css"),
              embedding=None, version="v1", target_industries=("it-jobs",), description=""):
        courses = [
            Course(
                code=f"C{i}",
                name=f"Course {skill}",
                skills=[CourseSkill(name=skill, category="programming", proficiency_level="intermediate")],
            )
            for i, skill in enumerate(skills)
        ]
        return CurriculumRecord(
            id=curriculum_id,
            program_name=program_name,
            department="Computing",
            description=description,
            target_industries=list(target_industries),
            courses=courses,
            embedding=embedding,
            embedding_version=version if embedding is not None else None,
        )
    return _make
