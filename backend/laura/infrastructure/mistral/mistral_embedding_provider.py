"""Mistral-based embedding provider: calls the /embeddings endpoint.

Sends every text of a batch in one request. Default model: mistral-embed.
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError as SchemaValidationError

from laura.application.interfaces import EmbeddingProvider
from laura.domain.exceptions import UpstreamError, ValidationError
from laura.infrastructure.mistral.mistral_base import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    GATEWAY_ERROR,
    MistralHttpAdapter,
)
from laura.infrastructure.mistral.response_models import EmbeddingResponse

logger = logging.getLogger(__name__)


class MistralEmbeddingProvider(MistralHttpAdapter, EmbeddingProvider):
    """Infrastructure adapter: generates embeddings via the Mistral /embeddings API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        model: str = "mistral-embed",
        http_client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        super().__init__(
            api_key=api_key,
            base_url=base_url,
            http_client=http_client,
            timeout=timeout,
        )
        self._model = model

    @property
    def model(self) -> str:
        return self._model

    async def generate_embeddings(self, texts: list[str]) -> list[list[float]]:
        """Generate embeddings for a batch of texts, in input order."""
        if not texts:
            raise ValidationError("No texts provided for embeddings")

        payload: dict[str, Any] = {
            "model": self._model,
            "input": texts,
        }
        data = await self._post("embeddings", payload)

        try:
            vectors = EmbeddingResponse.model_validate(data).vectors()
        except SchemaValidationError as e:
            logger.error("Malformed embedding response: %s", e)
            raise UpstreamError(
                provider=self.provider_name,
                status_code=GATEWAY_ERROR,
                message="Invalid embedding response from Mistral",
            ) from e

        if len(vectors) != len(texts):
            raise UpstreamError(
                provider=self.provider_name,
                status_code=GATEWAY_ERROR,
                message=f"Expected {len(texts)} embeddings, got {len(vectors)}",
            )

        logger.info(
            "Generated %d embeddings (model=%s, dims=%d)",
            len(vectors),
            self._model,
            len(vectors[0]) if vectors else 0,
        )
        return vectors
