"""FastAPI dependency injection: wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request

from laura.config import get_settings
from laura.application.interfaces import (
    ChatProvider,
    DocumentRepository,
    EmbeddingProvider,
)
from laura.application.services import (
    DocumentIngestionService,
    LLMUsageLogger,
    RagChatService,
    Retriever,
)
from laura.infrastructure.mistral import MistralChatClient, MistralEmbeddingProvider


def get_document_repository(request: Request) -> DocumentRepository:
    """The process-wide document store created by the application factory."""
    return request.app.state.document_repository


def get_embedding_provider() -> EmbeddingProvider:
    """Provides the Mistral embedding adapter.

    A missing API key is not an error here; it surfaces as ConfigError on
    the first call that needs the key.
    """
    settings = get_settings()
    return MistralEmbeddingProvider(
        api_key=settings.mistral_api_key,
        base_url=settings.mistral_base_url,
        model=settings.mistral_embedding_model,
        timeout=settings.mistral_timeout_seconds,
    )


def get_chat_provider() -> ChatProvider:
    """Provides the Mistral chat completion adapter."""
    settings = get_settings()
    return MistralChatClient(
        api_key=settings.mistral_api_key,
        base_url=settings.mistral_base_url,
        timeout=settings.mistral_timeout_seconds,
    )


async def get_document_service(
    embedding_provider: EmbeddingProvider = Depends(get_embedding_provider),
    repository: DocumentRepository = Depends(get_document_repository),
) -> AsyncGenerator[DocumentIngestionService, None]:
    """Provides a DocumentIngestionService bound to the shared document store."""
    settings = get_settings()
    yield DocumentIngestionService(
        embedding_provider=embedding_provider,
        repository=repository,
        chunk_size=settings.chunk_size,
        chunk_overlap=settings.chunk_overlap,
        usage_logger=LLMUsageLogger(),
    )


async def get_rag_chat_service(
    chat_provider: ChatProvider = Depends(get_chat_provider),
    embedding_provider: EmbeddingProvider = Depends(get_embedding_provider),
    repository: DocumentRepository = Depends(get_document_repository),
) -> AsyncGenerator[RagChatService, None]:
    """Provides a RagChatService with retrieval over the shared document store."""
    settings = get_settings()
    retriever = Retriever(
        repository,
        top_k=settings.retrieval_top_k,
        threshold=settings.retrieval_threshold,
    )
    yield RagChatService(
        chat_provider=chat_provider,
        embedding_provider=embedding_provider,
        retriever=retriever,
        model=settings.mistral_model,
        temperature=settings.chat_temperature,
        system_prompt=settings.system_prompt,
        usage_logger=LLMUsageLogger(),
    )
