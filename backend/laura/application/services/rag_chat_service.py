"""Retrieval-augmented chat use case: retrieve context, then generate a cited reply.

Every call is an independent retrieve-then-generate cycle; the only
conversation state is the message list supplied by the caller.
"""

import logging
import time
from dataclasses import dataclass, field

from laura.application.interfaces import ChatProvider, EmbeddingProvider
from laura.application.services.llm_usage_logger import LLMUsageLogger
from laura.application.services.retriever import Retriever
from laura.config import DEFAULT_SYSTEM_PROMPT
from laura.domain.entities import ChatMessage, RetrievedChunk, TokenUsage
from laura.domain.exceptions import UpstreamError
from laura.infrastructure.logging.colored_logger import PipelineLogger, PipelineStage

logger = logging.getLogger(__name__)
plog = PipelineLogger("RagChatService")

DEFAULT_TEMPERATURE = 0.4


@dataclass
class RagChatReply:
    """Assistant reply plus the citations of the chunks that grounded it."""

    message: ChatMessage
    citations: list[str] = field(default_factory=list)


def find_last_user_message(messages: list[ChatMessage]) -> ChatMessage | None:
    """Most recent message with role ``user``, scanning from the end."""
    for message in reversed(messages):
        if message.role == "user":
            return message
    return None


def build_context_block(results: list[RetrievedChunk]) -> str:
    """Labeled source blocks separated by blank lines; empty when nothing was retrieved."""
    return "\n\n".join(
        f"Source: [{item.citation}]\n{item.chunk.text}" for item in results
    )


def build_system_prompt(base_prompt: str, context: str) -> str:
    if not context:
        return base_prompt
    return f"{base_prompt}\n\n{context}"


class RagChatService:
    """Application service: grounds chat completions in uploaded documents.

    Pipeline: last user message → embed → retrieve top chunks →
    system prompt with sources → chat completion → reply + citations.
    """

    def __init__(
        self,
        chat_provider: ChatProvider,
        embedding_provider: EmbeddingProvider,
        retriever: Retriever,
        *,
        model: str,
        temperature: float = DEFAULT_TEMPERATURE,
        system_prompt: str = DEFAULT_SYSTEM_PROMPT,
        usage_logger: LLMUsageLogger | None = None,
    ):
        self._chat_provider = chat_provider
        self._embedding_provider = embedding_provider
        self._retriever = retriever
        self._model = model
        self._temperature = temperature
        self._system_prompt = system_prompt
        self._usage_logger = usage_logger or LLMUsageLogger()

    async def reply(self, messages: list[ChatMessage]) -> RagChatReply:
        """Answer the conversation, citing any retrieved document chunks.

        Raises:
            ConfigError: If a provider has no API key.
            UpstreamError: If embedding or completion fails.
        """
        results = await self.retrieve_context(messages)
        citations = [item.citation for item in results]
        system_message = ChatMessage(
            role="system",
            content=build_system_prompt(self._system_prompt, build_context_block(results)),
        )

        start = time.monotonic()
        try:
            with plog.timed_step(
                PipelineStage.GENERATION,
                f"Chat completion ({len(messages)} message(s))",
                model=self._model,
                sources=len(results),
            ):
                result = await self._chat_provider.complete(
                    [system_message, *messages],
                    self._model,
                    temperature=self._temperature,
                )
        except UpstreamError as e:
            self._usage_logger.log_error(
                model=self._model,
                provider=e.provider,
                feature="chat",
                duration_ms=int((time.monotonic() - start) * 1000),
                error=e,
            )
            raise

        self._usage_logger.log_request(
            model=result.model or self._model,
            provider=result.provider or self._chat_provider.provider_name,
            feature="chat",
            usage=result.usage,
            duration_ms=int((time.monotonic() - start) * 1000),
            request_context=f"citations={len(citations)}",
        )
        return RagChatReply(
            message=ChatMessage(role="assistant", content=result.content),
            citations=citations,
        )

    async def retrieve_context(self, messages: list[ChatMessage]) -> list[RetrievedChunk]:
        """Embed the latest user message and rank stored chunks against it."""
        query = find_last_user_message(messages)
        if query is None:
            logger.debug("No user message in conversation; skipping retrieval")
            return []

        query_embedding = await self._embed_query(query.content)
        results = self._retriever.retrieve(query_embedding)
        plog.step_complete(
            PipelineStage.RETRIEVAL,
            f"Retrieved {len(results)} source chunk(s)",
            top=f"{results[0].score:.3f}" if results else "-",
        )
        return results

    async def _embed_query(self, text: str) -> list[float]:
        model = self._embedding_provider.model
        start = time.monotonic()

        try:
            embeddings = await self._embedding_provider.generate_embeddings([text])
            if len(embeddings) != 1:
                raise UpstreamError(
                    provider=self._embedding_provider.provider_name,
                    status_code=502,
                    message=f"Expected 1 query embedding, got {len(embeddings)}",
                )
        except UpstreamError as e:
            self._usage_logger.log_error(
                model=model,
                provider=e.provider,
                feature="embedding",
                duration_ms=int((time.monotonic() - start) * 1000),
                error=e,
                request_context="chat query",
            )
            raise

        self._usage_logger.log_request(
            model=model,
            provider=self._embedding_provider.provider_name,
            feature="embedding",
            usage=TokenUsage(),
            duration_ms=int((time.monotonic() - start) * 1000),
            request_context="chat query",
        )
        return embeddings[0]
