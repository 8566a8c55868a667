"""Mistral chat client: implements the ChatProvider interface.

Communicates with ``POST {base_url}/chat/completions`` using httpx.
"""

import logging

from pydantic import ValidationError as SchemaValidationError

from laura.application.interfaces import ChatProvider
from laura.domain.entities import ChatMessage, ChatCompletionResult, TokenUsage
from laura.domain.exceptions import UpstreamError
from laura.infrastructure.mistral.mistral_base import GATEWAY_ERROR, MistralHttpAdapter
from laura.infrastructure.mistral.response_models import ChatCompletionResponse

logger = logging.getLogger(__name__)


class MistralChatClient(MistralHttpAdapter, ChatProvider):
    """Infrastructure adapter: non-streaming chat completions via the Mistral API."""

    def _build_payload(
        self,
        messages: list[ChatMessage],
        model: str,
        *,
        temperature: float | None = None,
    ) -> dict:
        """Build the request payload for the chat completions endpoint."""
        payload: dict = {
            "model": model,
            "messages": [{"role": m.role, "content": m.content} for m in messages],
        }
        if temperature is not None:
            payload["temperature"] = temperature
        return payload

    async def complete(
        self,
        messages: list[ChatMessage],
        model: str,
        *,
        temperature: float | None = None,
    ) -> ChatCompletionResult:
        """Send a non-streaming chat completion to Mistral."""
        payload = self._build_payload(messages, model, temperature=temperature)
        data = await self._post("chat/completions", payload)
        return self._parse_completion_response(data)

    def _parse_completion_response(self, data: object) -> ChatCompletionResult:
        """Parse the Mistral JSON response into a domain entity."""
        try:
            parsed = ChatCompletionResponse.model_validate(data)
        except SchemaValidationError as e:
            logger.error("Malformed chat completion response: %s", e)
            raise UpstreamError(
                provider=self.provider_name,
                status_code=GATEWAY_ERROR,
                message="Mistral response missing choices",
            ) from e

        choice = parsed.choices[0]
        if not choice.message.content:
            raise UpstreamError(
                provider=self.provider_name,
                status_code=GATEWAY_ERROR,
                message="Mistral response missing content",
            )

        usage = parsed.usage
        return ChatCompletionResult(
            model=parsed.model,
            content=choice.message.content,
            finish_reason=choice.finish_reason or "stop",
            usage=TokenUsage(
                prompt_tokens=usage.prompt_tokens if usage else 0,
                completion_tokens=usage.completion_tokens if usage else 0,
                total_tokens=usage.total_tokens if usage else 0,
            ),
            provider=self.provider_name,
        )
