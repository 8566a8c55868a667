"""Abstract chat provider interface: port for AI provider adapters.

Each AI provider (Mistral today) implements this interface so the
RAG orchestrator stays provider-agnostic.
"""

from abc import ABC, abstractmethod

from laura.domain.entities import ChatMessage, ChatCompletionResult


class ChatProvider(ABC):
    """Port: defines what the application layer needs from any chat provider."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Unique name identifying this provider (e.g. 'mistral')."""
        ...

    @abstractmethod
    async def complete(
        self,
        messages: list[ChatMessage],
        model: str,
        *,
        temperature: float | None = None,
    ) -> ChatCompletionResult:
        """Send a non-streaming chat completion request.

        Args:
            messages: The conversation history, system prompt included.
            model: The model identifier (e.g. 'mistral-small').
            temperature: Sampling temperature.

        Returns:
            A ChatCompletionResult with non-empty content and usage.

        Raises:
            ConfigError: If the provider has no API key.
            UpstreamError: If the call fails or the response is malformed.
        """
        ...
