"""Retrieval-augmented chat endpoint."""

import logging

from fastapi import APIRouter, Depends

from laura.application.schemas import ChatMessageSchema, RagChatRequest, RagChatResponse
from laura.application.services import RagChatService
from laura.domain.entities import ChatMessage
from laura.domain.exceptions import UpstreamError, ValidationError
from laura.infrastructure.dependencies import get_rag_chat_service
from laura.presentation.api.v1.errors import to_http_exception

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["Chat"])


@router.post("", response_model=RagChatResponse)
async def chat(
    request: RagChatRequest,
    service: RagChatService = Depends(get_rag_chat_service),
) -> RagChatResponse:
    """Answer the conversation, grounded in uploaded documents when relevant.

    The latest user message is used as the retrieval query; matching chunks
    are returned as citations alongside the assistant reply.
    """
    messages = [ChatMessage(role=m.role, content=m.content) for m in request.messages]

    try:
        reply = await service.reply(messages)
    except (UpstreamError, ValidationError) as e:
        logger.error("Chat failed: %s", e)
        raise to_http_exception(e) from e

    return RagChatResponse(
        message=ChatMessageSchema(role=reply.message.role, content=reply.message.content),
        citations=reply.citations,
    )
