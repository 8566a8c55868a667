from .chunking import TextChunk, chunk_text
from .similarity import cosine_similarity
from .retriever import Retriever
from .llm_usage_logger import LLMUsageLogger
from .document_service import DocumentIngestionService, UploadedText
from .rag_chat_service import RagChatReply, RagChatService

__all__ = [
    "TextChunk",
    "chunk_text",
    "cosine_similarity",
    "Retriever",
    "LLMUsageLogger",
    "DocumentIngestionService",
    "UploadedText",
    "RagChatReply",
    "RagChatService",
]
