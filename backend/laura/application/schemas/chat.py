"""Pydantic v2 schemas (DTOs) for the retrieval-augmented chat endpoint."""

from pydantic import BaseModel, Field


class ChatMessageSchema(BaseModel):
    """A plain-text chat message."""

    role: str = Field(..., pattern=r"^(system|user|assistant)$")
    content: str


class RagChatRequest(BaseModel):
    """Request schema for the chat endpoint: the conversation so far."""

    messages: list[ChatMessageSchema] = Field(
        ..., description="Conversation messages, oldest first"
    )


class RagChatResponse(BaseModel):
    """Assistant reply with citations of the document chunks used as context."""

    message: ChatMessageSchema
    citations: list[str] = Field(default_factory=list)
