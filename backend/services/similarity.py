"""Cosine similarity, ranking and dynamic thresholding over embeddings."""

import logging
from collections.abc import Callable, Sequence
from typing import NamedTuple, TypeVar

import numpy as np
from sklearn.metrics.pairwise import cosine_similarity as sklearn_cosine

from config import settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DimensionMismatch(ValueError):
    """Two embeddings of different lengths were compared."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Embedding dimensions don't match: {expected} vs {actual}")
        self.expected = expected
        self.actual = actual


class ThresholdDecision(NamedTuple):
    requested: float
    effective: float
    adjusted: bool


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """dot(a, b) / (|a| * |b|), or 0.0 when either vector has zero norm."""
    if len(a) != len(b):
        raise DimensionMismatch(len(a), len(b))

    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)
    norm_a = np.linalg.norm(va)
    norm_b = np.linalg.norm(vb)
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return float(np.dot(va, vb) / (norm_a * norm_b))


def rank_by_similarity(
    query: Sequence[float],
    candidates: Sequence[T],
    key: Callable[[T], Sequence[float]] = lambda c: c.embedding,
) -> list[tuple[T, float]]:
    """Score candidates against ``query`` and sort by similarity, descending.

    Ties keep their input order. Zero vectors score 0.0. Raises
    DimensionMismatch if any candidate embedding differs in length.
    """
    if not candidates:
        return []

    vectors = [key(c) for c in candidates]
    for vec in vectors:
        if len(vec) != len(query):
            raise DimensionMismatch(len(query), len(vec))

    # sklearn leaves zero rows at zero when normalizing, so they score 0.0
    matrix = np.asarray(vectors, dtype=np.float64)
    scores = sklearn_cosine(np.asarray(query, dtype=np.float64).reshape(1, -1), matrix)[0]

    order = np.argsort(-scores, kind="stable")
    return [(candidates[i], float(scores[i])) for i in order]


def select_effective_threshold(
    scores: Sequence[float],
    requested: float,
    cap: float | None = None,
) -> ThresholdDecision:
    """Pick the similarity cutoff to apply to a ranked batch.

    The requested threshold is kept whenever at least one score reaches it.
    Otherwise the cutoff drops to the median score, capped at ``cap``. If the
    capped value still admits nothing the result is simply empty; there is no
    second adjustment.
    """
    if cap is None:
        cap = settings.similarity_strict

    if not scores or any(s >= requested for s in scores):
        return ThresholdDecision(requested, requested, False)

    median = float(np.median(scores))
    effective = min(median, cap)
    logger.info(
        "No candidate reached similarity %.2f; lowering threshold to %.4f (median %.4f)",
        requested, effective, median,
    )
    return ThresholdDecision(requested, effective, True)


def similarity_tier(score: float) -> str:
    """Label a similarity score: excellent, good, fair or poor."""
    if score >= settings.similarity_strict:
        return "excellent"
    if score >= settings.similarity_threshold:
        return "good"
    if score >= settings.similarity_minimum:
        return "fair"
    return "poor"
