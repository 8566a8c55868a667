"""Abstract interface (port) for embedding generation."""

from abc import ABC, abstractmethod


class EmbeddingProvider(ABC):
    """Port for generating text embeddings: implemented in the infrastructure layer."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Unique name identifying this provider (e.g. 'mistral')."""
        ...

    @property
    @abstractmethod
    def model(self) -> str:
        """Identifier of the embedding model; all vectors of a session come from it."""
        ...

    @abstractmethod
    async def generate_embeddings(self, texts: list[str]) -> list[list[float]]:
        """Generate embedding vectors for a batch of texts in a single call.

        Args:
            texts: Non-empty list of text strings to embed.

        Returns:
            List of embedding vectors, one per input text, in input order.

        Raises:
            ValidationError: If ``texts`` is empty.
            ConfigError: If the provider has no API key.
            UpstreamError: If the call fails or the response is malformed.
        """
        ...
