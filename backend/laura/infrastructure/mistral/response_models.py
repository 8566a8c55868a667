"""Pydantic models for Mistral API response bodies.

Upstream payloads are parsed here before anything reaches the domain;
a body that does not match raises pydantic.ValidationError, which the
adapters turn into UpstreamError.
"""

from pydantic import BaseModel, Field


class UsagePayload(BaseModel):
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class EmbeddingItem(BaseModel):
    embedding: list[float]
    index: int | None = None


class EmbeddingResponse(BaseModel):
    """Body of ``POST /embeddings``."""

    model: str = ""
    data: list[EmbeddingItem]
    usage: UsagePayload | None = None

    def vectors(self) -> list[list[float]]:
        """Embeddings in input order (sorted by ``index`` when the API supplies it)."""
        items = self.data
        if all(item.index is not None for item in items):
            items = sorted(items, key=lambda item: item.index)
        return [item.embedding for item in items]


class CompletionMessage(BaseModel):
    role: str = "assistant"
    content: str | None = None


class CompletionChoice(BaseModel):
    message: CompletionMessage
    finish_reason: str | None = None


class ChatCompletionResponse(BaseModel):
    """Body of ``POST /chat/completions``."""

    model: str = ""
    choices: list[CompletionChoice] = Field(..., min_length=1)
    usage: UsagePayload | None = None
