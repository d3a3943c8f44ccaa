import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False
    log_level: str = "INFO"
    rate_limit: str = "30/minute"

    # Embedding model (384-dim MiniLM sentence embeddings)
    embedding_model_name: str = "all-MiniLM-L6-v2"
    embedding_dimensions: int = 384
    embedding_version: str = "v1"
    embedding_batch_size: int = 10
    min_embedding_text_length: int = 20

    # Similarity thresholds; observed average similarity ~0.26, median ~0.22
    similarity_threshold: float = 0.35
    similarity_minimum: float = 0.20
    similarity_strict: float = 0.50  # also caps the dynamic threshold
    embed_missing_jobs: bool = False

    # Job selection
    default_job_limit: int = 100
    default_days_back: int = 90
    fetch_multiplier: int = 3
    min_description_length: int = 50

    # Snapshot slices
    top_critical_gaps: int = 10
    top_emerging_skills: int = 15
    top_well_covered: int = 10
    top_market_skills: int = 20
    top_gap_recommendation_skills: int = 5
    top_emerging_recommendation_skills: int = 3

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "protected_namespaces": ("settings_",)}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
