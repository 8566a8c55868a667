import logging
from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)

CHAT_MODELS = frozenset({"mistral-small", "mistral-medium", "mistral-large"})
DEFAULT_CHAT_MODEL = "mistral-small"

DEFAULT_SYSTEM_PROMPT = (
    "You are Laura, a cosmic dream companion. Use the provided sources to answer "
    "questions when relevant. If sources are provided, cite them exactly in brackets "
    "like [DocName • chunk 3]. If sources are not relevant, answer normally."
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Laura API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["*"]

    # Mistral configuration
    mistral_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("mistral_api_key", "vite_mistral_api_key"),
    )
    mistral_base_url: str = "https://api.mistral.ai/v1"
    mistral_model: str = Field(
        default=DEFAULT_CHAT_MODEL,
        validation_alias=AliasChoices("mistral_model", "vite_mistral_model"),
    )
    mistral_embedding_model: str = "mistral-embed"
    mistral_timeout_seconds: float = 120.0

    # Retrieval-augmented chat
    chunk_size: int = 800
    chunk_overlap: int = 100
    retrieval_top_k: int = 3
    retrieval_threshold: float = 0.2
    chat_temperature: float = 0.4
    system_prompt: str = DEFAULT_SYSTEM_PROMPT

    # Document uploads
    max_upload_size_bytes: int = 2 * 1024 * 1024
    allowed_upload_mime_types: list[str] = ["text/plain", "text/markdown"]
    blocked_upload_extensions: list[str] = [".exe", ".sh"]

    # Per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_http: str = "WARNING"          # httpx / httpcore (outbound HTTP)
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_pipeline: str = "INFO"         # DocumentIngestionService pipeline
    log_level_mistral: str = "INFO"          # Mistral API adapters

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }

    @field_validator("mistral_model", mode="before")
    @classmethod
    def _fallback_to_default_model(cls, value: object) -> str:
        """Unknown chat models fall back to the default instead of failing startup."""
        candidate = str(value or "").strip()
        if candidate in CHAT_MODELS:
            return candidate
        if candidate:
            _config_logger.warning(
                "Unsupported MISTRAL_MODEL '%s'; falling back to %s (allowed: %s)",
                candidate,
                DEFAULT_CHAT_MODEL,
                ", ".join(sorted(CHAT_MODELS)),
            )
        return DEFAULT_CHAT_MODEL

    @field_validator("mistral_api_key", mode="before")
    @classmethod
    def _strip_api_key(cls, value: object) -> str:
        return str(value or "").strip()


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance: reads .env once."""
    return Settings()
