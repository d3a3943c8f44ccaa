import pytest

from services.embedding_maintenance import (
    attach_embedding,
    embed_records,
    has_usable_embedding,
    needs_regeneration,
    regenerate_embeddings,
)
from services.embedding_text import job_text
from services.repository import InMemoryDataSource

LONG = "Backend developer building Python services on AWS with Docker"


def test_has_usable_embedding(make_job):
    assert not has_usable_embedding(make_job("j1"))
    assert not has_usable_embedding(make_job("j1", embedding=[]))
    job = make_job("j1", embedding=[0.1, 0.2, 0.3], version="v1")
    assert has_usable_embedding(job)
    assert has_usable_embedding(job, version="v1", dimensions=3)
    assert not has_usable_embedding(job, version="v2")
    assert not has_usable_embedding(job, dimensions=384)


def test_needs_regeneration(make_job):
    assert needs_regeneration(make_job("j1"), "v1", 3)
    assert not needs_regeneration(make_job("j1", embedding=[1, 0, 0]), "v1", 3)


def test_attach_embedding_clears_error(make_job):
    job = make_job("j1")
    job.embedding_error = "previous failure"
    attach_embedding(job, [1.0, 0.0, 0.0], "v2")
    assert job.embedding == [1.0, 0.0, 0.0]
    assert job.embedding_version == "v2"
    assert job.embedding_generated is not None
    assert job.embedding_error is None


@pytest.mark.asyncio
async def test_embed_records_counts_each_outcome(make_job, fake_provider):
    provider = fake_provider(fail_on=("Broken",))
    jobs = [
        make_job("ok1", description=LONG),
        make_job("ok2", description=LONG),
        make_job("bad", title="Broken", description=LONG),
        make_job("short", title="", description="tiny"),
    ]
    report = await embed_records(jobs, provider, job_text, batch_size=2)

    assert (report.embedded, report.failed, report.skipped) == (2, 1, 1)
    assert jobs[0].embedding_version == "v1"
    assert jobs[2].embedding is None
    assert "fake provider failure" in jobs[2].embedding_error
    assert jobs[3].embedding_error == "Text too short for embedding"
    assert len(provider.calls) == 3


@pytest.mark.asyncio
async def test_regenerate_embeddings(make_job, make_curriculum, fake_provider):
    current = make_job("current", description=LONG, embedding=[1.0, 0.0, 0.0], version="v1")
    outdated = make_job("outdated", description=LONG, embedding=[1.0, 0.0, 0.0], version="v0")
    missing = make_job("missing", description=LONG)
    curriculum = make_curriculum()
    source = InMemoryDataSource(curricula=[curriculum], jobs=[current, outdated, missing])

    report = await regenerate_embeddings(source, fake_provider())

    assert report.jobs_up_to_date == 1
    assert report.jobs_regenerated == 2
    assert report.curricula_regenerated == 1
    stored = await source.get_curriculum(curriculum.id)
    assert stored.embedding_version == "v1"
    assert all(j.embedding_version == "v1" for j in await source.list_jobs())
