from .chat_message import CHAT_ROLES, ChatMessage, TokenUsage, ChatCompletionResult
from .document import (
    Chunk,
    Document,
    DocumentSummary,
    RetrievedChunk,
    format_citation,
)

__all__ = [
    "CHAT_ROLES",
    "ChatMessage",
    "TokenUsage",
    "ChatCompletionResult",
    "Chunk",
    "Document",
    "DocumentSummary",
    "RetrievedChunk",
    "format_citation",
]
