from .chat import ChatMessageSchema, RagChatRequest, RagChatResponse
from .documents import (
    ClearDocumentsResponse,
    DocumentListResponse,
    DocumentSummarySchema,
)

__all__ = [
    "ChatMessageSchema",
    "RagChatRequest",
    "RagChatResponse",
    "ClearDocumentsResponse",
    "DocumentListResponse",
    "DocumentSummarySchema",
]
