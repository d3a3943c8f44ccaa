"""Generating, attaching and refreshing stored embeddings.

Batch work runs in bounded chunks: up to ``batch_size`` embeddings are in
flight at once and each chunk finishes before the next starts. A failure on
one record is logged, written to its ``embedding_error`` and counted; it
never aborts the batch.
"""

import asyncio
import logging
from collections.abc import Callable, Sequence
from datetime import datetime, timezone
from typing import TypeVar

from pydantic import BaseModel

from config import settings
from models.schemas.records import EmbeddedRecord
from services.embedding_provider import EmbeddingGenerationError, EmbeddingProvider
from services.embedding_text import curriculum_text, job_text
from services.repository import GapDataSource

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=EmbeddedRecord)


class EmbedReport(BaseModel):
    embedded: int = 0
    skipped: int = 0  # text too short to embed
    failed: int = 0


class RegenerationReport(BaseModel):
    curricula_regenerated: int = 0
    curricula_up_to_date: int = 0
    curricula_failed: int = 0
    jobs_regenerated: int = 0
    jobs_up_to_date: int = 0
    jobs_failed: int = 0


def has_usable_embedding(
    record: EmbeddedRecord,
    version: str | None = None,
    dimensions: int | None = None,
) -> bool:
    """Non-empty embedding, optionally of the given version and length."""
    emb = record.embedding
    if not isinstance(emb, list) or not emb:
        return False
    if version is not None and record.embedding_version != version:
        return False
    if dimensions is not None and len(emb) != dimensions:
        return False
    return True


def needs_regeneration(record: EmbeddedRecord, version: str, dimensions: int) -> bool:
    return not has_usable_embedding(record, version, dimensions)


def attach_embedding(record: EmbeddedRecord, vector: Sequence[float], version: str) -> None:
    record.embedding = list(vector)
    record.embedding_generated = datetime.now(timezone.utc)
    record.embedding_version = version
    record.embedding_error = None


async def _embed_one(record: R, text: str, provider: EmbeddingProvider) -> bool:
    try:
        vector = await provider.embed(text)
    except (EmbeddingGenerationError, ValueError) as e:
        logger.warning("Skipping embedding for %s: %s", getattr(record, "id", "?"), e)
        record.embedding_error = str(e)
        return False
    attach_embedding(record, vector, provider.version)
    return True


async def embed_records(
    records: Sequence[R],
    provider: EmbeddingProvider,
    text_for: Callable[[R], str],
    batch_size: int | None = None,
    min_text_length: int | None = None,
) -> EmbedReport:
    """Embed records in place, chunk by chunk."""
    batch_size = batch_size or settings.embedding_batch_size
    if min_text_length is None:
        min_text_length = settings.min_embedding_text_length

    report = EmbedReport()
    pending: list[tuple[R, str]] = []
    for record in records:
        text = text_for(record)
        if len(text.strip()) < min_text_length:
            record.embedding_error = "Text too short for embedding"
            report.skipped += 1
            continue
        pending.append((record, text))

    for i in range(0, len(pending), batch_size):
        chunk = pending[i:i + batch_size]
        results = await asyncio.gather(*(_embed_one(r, t, provider) for r, t in chunk))
        report.embedded += sum(results)
        report.failed += len(results) - sum(results)

    if pending:
        logger.info(
            "Embedded %d/%d records (%d failed, %d too short)",
            report.embedded, len(records), report.failed, report.skipped,
        )
    return report


async def regenerate_embeddings(
    source: GapDataSource,
    provider: EmbeddingProvider,
    batch_size: int | None = None,
) -> RegenerationReport:
    """Refresh every stored embedding that is missing, outdated or mis-sized."""
    report = RegenerationReport()

    curricula = await source.list_curricula()
    stale_curricula = [
        c for c in curricula
        if needs_regeneration(c, provider.version, provider.dimensions)
    ]
    report.curricula_up_to_date = len(curricula) - len(stale_curricula)
    result = await embed_records(stale_curricula, provider, curriculum_text, batch_size)
    report.curricula_regenerated = result.embedded
    report.curricula_failed = result.failed + result.skipped
    for curriculum in stale_curricula:
        await source.save_curriculum(curriculum)

    jobs = await source.list_jobs()
    stale_jobs = [j for j in jobs if needs_regeneration(j, provider.version, provider.dimensions)]
    report.jobs_up_to_date = len(jobs) - len(stale_jobs)
    result = await embed_records(stale_jobs, provider, job_text, batch_size)
    report.jobs_regenerated = result.embedded
    report.jobs_failed = result.failed + result.skipped
    for job in stale_jobs:
        await source.save_job(job)

    logger.info(
        "Embedding regeneration complete: curricula %d regenerated / %d current, "
        "jobs %d regenerated / %d current",
        report.curricula_regenerated, report.curricula_up_to_date,
        report.jobs_regenerated, report.jobs_up_to_date,
    )
    return report
