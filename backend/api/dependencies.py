"""Shared dependencies for API routes."""

from functools import lru_cache

from services.embedding_provider import EmbeddingProvider, SentenceTransformerProvider
from services.skill_extractor import SkillsExtractor


@lru_cache(maxsize=1)
def get_embedding_provider() -> EmbeddingProvider:
    return SentenceTransformerProvider()


@lru_cache(maxsize=1)
def get_extractor() -> SkillsExtractor:
    return SkillsExtractor()
