"""Text embedding providers.

The analysis pipeline only sees the EmbeddingProvider interface; the
sentence-transformers implementation is one provider among possible others
(remote APIs, test fakes).
"""

import asyncio
import logging
from abc import ABC, abstractmethod

from config import settings
from services.pipeline.base import BaseModelService

logger = logging.getLogger(__name__)


class EmbeddingGenerationError(RuntimeError):
    """The provider could not embed the given text."""


def _validate_text(text: object) -> str:
    if not isinstance(text, str) or not text.strip():
        raise EmbeddingGenerationError("Text must be a non-empty string")
    return text


class EmbeddingProvider(ABC):
    """Turns text into fixed-length vectors tagged with a model version."""

    model_name: str = ""
    version: str = ""
    dimensions: int = 0

    @property
    def is_loaded(self) -> bool:
        return True

    @abstractmethod
    async def embed(self, text: str) -> list[float]:
        """Embed one text."""

    @abstractmethod
    async def embed_batch(self, texts: list[str]) -> list[list[float]]:
        """Embed several texts, preserving order."""


class SentenceTransformerProvider(BaseModelService, EmbeddingProvider):
    """Mean-pooled, L2-normalized sentence-transformers embeddings."""

    def __init__(
        self,
        model_name: str | None = None,
        version: str | None = None,
        dimensions: int | None = None,
        batch_size: int | None = None,
    ) -> None:
        super().__init__()
        self.model_name = model_name or settings.embedding_model_name
        self.version = version or settings.embedding_version
        self.dimensions = dimensions or settings.embedding_dimensions
        self.batch_size = batch_size or settings.embedding_batch_size
        self._model = None

    def load(self) -> None:
        from sentence_transformers import SentenceTransformer

        self._model = SentenceTransformer(self.model_name)
        dims = self._model.get_sentence_embedding_dimension()
        if dims and dims != self.dimensions:
            logger.warning(
                "Model %s produces %d-dim embeddings, configured for %d",
                self.model_name, dims, self.dimensions,
            )
            self.dimensions = dims

    def _encode(self, texts: list[str]) -> list[list[float]]:
        embeddings = self._model.encode(
            texts,
            batch_size=len(texts),
            normalize_embeddings=True,
            convert_to_numpy=True,
            show_progress_bar=False,
        )
        return embeddings.tolist()

    async def embed(self, text: str) -> list[float]:
        _validate_text(text)
        return (await self.embed_batch([text]))[0]

    async def embed_batch(self, texts: list[str]) -> list[list[float]]:
        """Embed texts chunk by chunk; each chunk is awaited before the next."""
        if not texts:
            raise EmbeddingGenerationError("Texts must be a non-empty list")
        for text in texts:
            _validate_text(text)

        try:
            await self.ensure_loaded()
        except Exception as e:
            raise EmbeddingGenerationError(f"Model initialization failed: {e}") from e

        vectors: list[list[float]] = []
        for i in range(0, len(texts), self.batch_size):
            chunk = texts[i:i + self.batch_size]
            try:
                vectors.extend(await asyncio.to_thread(self._encode, chunk))
            except Exception as e:
                logger.error("Embedding generation failed: %s", e)
                raise EmbeddingGenerationError(f"Failed to generate embeddings: {e}") from e
            logger.debug("Embedded %d/%d texts", min(i + self.batch_size, len(texts)), len(texts))
        return vectors
